"""Modular arithmetic primitives: fast modular power, extended Euclid and public exponent candidates.

None of these functions are constant-time; the loops run as long as the operands' bit patterns dictate.

Typical usage example:

    c = mod_pow(m, e, n)
    d = modular_inverse(e, totient)
    e = first_small_coprime_factor_candidate(totient)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math

EXPONENT_CODES: tuple[int, ...] = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73, 79, 83, 89, 97, 101, 103, 107,
    109, 113, 127, 131, 137, 139, 149
)


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Computes `base**exponent % modulus` by right-to-left square-and-multiply.

    Args:
        base: The base.
        exponent: The exponent. Must be >= 0.
        modulus: The modulus. Must be > 0, zero propagates ZeroDivisionError.

    Returns:
        The modular power, in range `[0, modulus)`.

    Raises:
        ValueError: If `exponent` is negative.
    """
    if exponent < 0:
        raise ValueError("exponent must be >= 0")
    result = 1 % modulus
    square = base % modulus
    while exponent:
        if exponent & 1:
            result = result * square % modulus
        square = square * square % modulus
        exponent >>= 1
    return result


def extended_gcd(a: int, b: int) -> int:
    """Implements the iterative Extended Euclidean Algorithm.

    Such that a*u + b*v = gcd(a, b), only `u` is returned. Coprimality is not checked, so for a non-coprime pair
    the result is no inverse of anything.

    Args:
        a: The first integer.
        b: The second integer.

    Returns:
        The Bezout coefficient of `a`.
    """
    r0, r1 = a, b
    u0, u1 = 1, 0
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        u0, u1 = u1, u0 - q * u1
    return u0


def modular_inverse(value: int, modulus: int) -> int:
    """Inverse of `value` modulo `modulus`, via `extended_gcd()`.

    Args:
        value: The value to invert, e.g. a public exponent.
        modulus: The modulus, e.g. a totient. Must be > 0.

    Returns:
        `d` in range `[0, modulus)` with `value * d % modulus == 1 % modulus`.

    Raises:
        ValueError: If `value` and `modulus` are not coprime.
    """
    if math.gcd(value, modulus) != 1:
        raise ValueError(f"{value} is not invertible modulo {modulus}")
    return extended_gcd(value, modulus) % modulus


def first_small_coprime_factor_candidate(n: int) -> int | None:
    """Picks the first of `EXPONENT_CODES` that does not divide `n`.

    Args:
        n: The number to check against, usually a totient.

    Returns:
        The smallest tabulated prime not dividing `n`, or None if all of them do.
    """
    for code in EXPONENT_CODES:
        if n % code != 0:
            return code
    return None
