"""Digit counting, block decomposition and block recomposition of large integers.

Large integers are framed into fixed-width blocks before going through a fixed-modulus operation, and framed back
afterward. Every block carries its own width, so recomposition never has to guess how many bytes a block occupied.

Typical usage example:

    blocks = decompose(0xDEAD00BEEF, 2)
    value = rejoin(blocks)
    raw = b"".join(block.to_bytes() for block in blocks)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from collections.abc import Iterable
import typing
import warnings


class EmptyInputError(ValueError):
    """Raised when recomposing a value from an empty sequence of chunks or bytes."""


class Block(typing.NamedTuple):
    """A single chunk of a decomposed integer.

    Attributes:
        width: Width of the block in bytes, used as its positional weight on recomposition.
        value: The block's value, in range `[0, 2**(8 * width))`.
    """
    width: int
    value: int

    def to_bytes(self) -> bytes:
        """Renders the block big-endian on exactly `width` bytes."""
        return self.value.to_bytes(self.width, byteorder="big", signed=False)


def digit_count(value: int, radix: int = 10) -> int:
    """Counts the digits of `value` written in base `radix`.

    Power-of-two radices are derived from the bit length. Other radices are counted by repeated division, which
    sidesteps the interpreter's limit on converting huge integers to decimal strings.

    Args:
        value: Non-negative integer to measure.
        radix: The base of the representation. Defaults to 10. Must be >= 2.

    Returns:
        The exact number of digits, without padding. Zero has one digit.

    Raises:
        ValueError: If `radix` < 2 or `value` is negative.
    """
    if radix < 2:
        raise ValueError("radix must be >= 2")
    if value < 0:
        raise ValueError("value must be >= 0")
    if value == 0:
        return 1
    if radix & (radix - 1) == 0:
        shift = radix.bit_length() - 1
        return (value.bit_length() + shift - 1) // shift
    count = 0
    while value:
        value //= radix
        count += 1
    return count


def byte_length(value: int) -> int:
    """Minimal number of bytes holding the hexadecimal representation of `value`."""
    return (digit_count(value, 16) + 1) // 2


def decompose(value: int, block_size: int) -> list[Block]:
    """Splits `value` into blocks of `block_size` bytes, most-significant block first.

    Args:
        value: Non-negative integer to split.
        block_size: Width of every block in bytes. Must be >= 1.

    Returns:
        The blocks in big-endian order. Empty if `value` is zero.

    Raises:
        ValueError: If `block_size` < 1 or `value` is negative.
    """
    if block_size < 1:
        raise ValueError("block_size must be >= 1")
    if value < 0:
        raise ValueError("value must be >= 0")
    mod = 2**(block_size * 8)
    blocks = []
    while value:
        value, part = divmod(value, mod)
        blocks.append(Block(block_size, part))
    blocks.reverse()
    return blocks


def rejoin(chunks: Iterable[Block | int]) -> int:
    """Recomposes a value from its blocks, the inverse of `decompose()`.

    Bare integers are still accepted as chunks, in which case their width is inferred from their minimal byte
    length. Chunks with leading zero bytes then shift everything after them, hence the warning.

    Args:
        chunks: The blocks in big-endian order.

    Returns:
        The recomposed integer.

    Raises:
        EmptyInputError: If `chunks` is empty.
        ValueError: If a block has a width < 1 or a value not fitting its width.
    """
    result = 0
    seen = False
    for chunk in chunks:
        if isinstance(chunk, Block):
            width, part = chunk
            if width < 1:
                raise ValueError("Block width must be >= 1")
            if not 0 <= part < 2**(width * 8):
                raise ValueError(f"Block value out of range for width {width}")
        else:
            warnings.warn("Chunk width inferred from minimal encoding, leading zero bytes will be lost.",
                          RuntimeWarning)
            width, part = byte_length(chunk), chunk
        result = result * 2**(width * 8) + part
        seen = True
    if not seen:
        raise EmptyInputError("Cannot rejoin an empty chunk sequence.")
    return result


def rejoin_bytes(data: Iterable[int]) -> int:
    """Recomposes a value from raw big-endian bytes.

    Args:
        data: Bytes (or any iterable of ints in range `[0, 255]`).

    Returns:
        The recomposed integer.

    Raises:
        EmptyInputError: If `data` is empty.
    """
    result = 0
    seen = False
    for part in data:
        result = result * 256 + part
        seen = True
    if not seen:
        raise EmptyInputError("Cannot rejoin an empty byte sequence.")
    return result
