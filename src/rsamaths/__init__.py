"""Number-Theoretic Primitives for RSA Key Generation in an Academic Sense.

Provides block framing of large integers, modular exponentiation, the Extended Euclidean Algorithm, public exponent
candidate selection, a Fermat primality test and generation of prime-like candidates. Key assembly and padding are
left to the caller.

Typical usage example:

    p, q = find_prime(64), find_prime(64)
    totient = (p - 1) * (q - 1)
    e = first_small_coprime_factor_candidate(totient)
    d = modular_inverse(e, totient)
    cipher = [Block(128, mod_pow(b.value, e, p * q)) for b in decompose(message, 64)]
    clear = rejoin(Block(64, mod_pow(c.value, d, p * q)) for c in cipher)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsamaths.arith import EXPONENT_CODES
from rsamaths.arith import extended_gcd
from rsamaths.arith import first_small_coprime_factor_candidate
from rsamaths.arith import mod_pow
from rsamaths.arith import modular_inverse
from rsamaths.blocks import Block
from rsamaths.blocks import byte_length
from rsamaths.blocks import decompose
from rsamaths.blocks import digit_count
from rsamaths.blocks import EmptyInputError
from rsamaths.blocks import rejoin
from rsamaths.blocks import rejoin_bytes
from rsamaths.primes import find_prime
from rsamaths.primes import FIXED_WITNESS
from rsamaths.primes import is_probably_prime
from rsamaths.primes import PRIME_ROUNDS
from rsamaths.primes import RANDOM_WITNESS
from rsamaths.primes import random_candidate

__version__ = "0.0.1"
__all__ = [
    "Block",
    "EmptyInputError",
    "EXPONENT_CODES",
    "FIXED_WITNESS",
    "PRIME_ROUNDS",
    "RANDOM_WITNESS",
    "byte_length",
    "decompose",
    "digit_count",
    "extended_gcd",
    "find_prime",
    "first_small_coprime_factor_candidate",
    "is_probably_prime",
    "mod_pow",
    "modular_inverse",
    "rejoin",
    "rejoin_bytes",
    "random_candidate",
]
