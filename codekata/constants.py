"""Shared constants for the factorial hash and name book challenges."""

from __future__ import annotations

# Factorial hash

UPPER_BOUND = 2000          # largest n accepted by the factorial hash
NATIVE_MAX_EXACT = 20       # 20! is the last factorial that fits in 64 bits

# BigNum limbs: base 10**4 keeps limb products and their sums inside uint64
RADIX = 10_000
DIGITS_PER_LIMB = 4

BACKENDS = ("native", "mpz", "bignum")
DEFAULT_BACKEND = "bignum"

# Name book

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)

METHODS = ("pairwise", "trie")
DEFAULT_METHOD = "trie"
