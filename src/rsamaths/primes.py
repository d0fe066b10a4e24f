"""Fermat primality testing and generation of prime-like candidates.

The primality test historically reuses a single hard-coded witness for every round of every call, which makes the
rounds identical rather than independent trials. That mode stays the default so results remain reproducible, while
passing `witness=RANDOM_WITNESS` draws a fresh witness each round.

Note! The fixed witness is 37 * 344249. Carmichael numbers coprime to it (561, 1105, 1729, ...) pass as primes,
and the primes 37 and 344249 themselves fail.

Typical usage example:

    is_probably_prime(97)
    is_probably_prime(561, witness=RANDOM_WITNESS)
    p = find_prime(64)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import secrets

from rsamaths.arith import mod_pow

PRIME_ROUNDS: int = 20
FIXED_WITNESS: int = 12737213
RANDOM_WITNESS: None = None
_ATTEMPTS_FLOOR: int = 100


def is_probably_prime(n: int, rounds: int = PRIME_ROUNDS, witness: int | None = FIXED_WITNESS) -> bool:
    """Performs a Fermat primality test.

    Each round checks `witness**(n-1) % n == 1` and stops at the first failure.

    Args:
        n: The candidate to test. Must be > 0 with a fixed witness.
        rounds: Number of rounds to perform. Defaults to `PRIME_ROUNDS`.
        witness: The witness to use for every round. Defaults to `FIXED_WITNESS`.
            If `RANDOM_WITNESS` (None), draws a fresh witness in `[2, n-2]` each round.

    Returns:
        True if `n` is probably prime, False otherwise.

    Raises:
        ValueError: If `rounds` < 1.
    """
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    if witness is None and n <= 3:
        return n in (2, 3)
    for _ in range(rounds):
        if witness is None:
            base = secrets.randbelow(n - 3) + 2
        else:
            base = witness % n
        if mod_pow(base, n - 1, n) != 1:
            return False
    return True


def random_candidate(size_bytes: int) -> int:
    """Draws a random number of `size_bytes` bytes, biased away from multiples of 2 and 5.

    The last decimal digit is replaced by one of 1, 3, 7 or 9, which raises the odds of primality without
    guaranteeing anything.

    Args:
        size_bytes: Size of the draw in bytes. Must be >= 0.

    Returns:
        A candidate whose value modulo 10 is in {1, 3, 7, 9}.

    Raises:
        ValueError: If `size_bytes` is negative.
    """
    if size_bytes < 0:
        raise ValueError("size_bytes must be >= 0")
    candidate = secrets.randbits(size_bytes * 8)
    candidate = candidate // 10 * 10
    digit = 0
    while digit % 2 == 0 or digit == 5:
        digit = secrets.randbelow(9) + 1
    return candidate + digit


def find_prime(size_bytes: int, witness: int | None = FIXED_WITNESS, attempts: int | None = None) -> int:
    """Searches for a probable prime of roughly `size_bytes` bytes.

    Args:
        size_bytes: Size of the prime in bytes. Must be >= 1.
        witness: Passed to `is_probably_prime()`. Defaults to `FIXED_WITNESS`.
        attempts: Cap on the number of candidates drawn.
            If not provided, uses `size_bytes * 40` with a floor of 100.

    Returns:
        A probable prime.

    Raises:
        ValueError: If `size_bytes` < 1.
        RuntimeError: If no prime was found within `attempts` candidates.
    """
    if size_bytes < 1:
        raise ValueError("size_bytes must be >= 1")
    if attempts is None:
        attempts = max(size_bytes * 8 * 5, _ATTEMPTS_FLOOR)
    for _ in range(attempts):
        candidate = random_candidate(size_bytes)
        if is_probably_prime(candidate, witness=witness):
            return candidate
    raise RuntimeError(f"Run an improbable {attempts} amount of loops with no prime found. "
                       "Check system random number generator.")
