"""Factorial hash and name book challenges -- modular package."""

from codekata.constants import BACKENDS, METHODS, UPPER_BOUND
from codekata.bignum import BigNum
from codekata.errors import InvalidNameError, OutOfRangeError
from codekata.factorial import (
    check_bound,
    digit_sum_of_factorial,
    factorial,
    factorial_bignum,
    factorial_mpz,
    factorial_native,
    split_num_into_digits,
    sum_of_digits,
)
from codekata.namebook import NameBook, TreeNameBook, check_names, is_prefix_collision
from codekata.trie import InsertResult, Trie, TrieNode

__all__ = [
    "BACKENDS",
    "METHODS",
    "UPPER_BOUND",
    "BigNum",
    "InsertResult",
    "InvalidNameError",
    "NameBook",
    "OutOfRangeError",
    "Trie",
    "TrieNode",
    "TreeNameBook",
    "check_bound",
    "check_names",
    "digit_sum_of_factorial",
    "factorial",
    "factorial_bignum",
    "factorial_mpz",
    "factorial_native",
    "is_prefix_collision",
    "split_num_into_digits",
    "sum_of_digits",
]
