"""Factorial hash: the sum of the decimal digits of n!.

Three interchangeable backends compute the factorial itself:

  native  -- a 64-bit unsigned accumulator.  Exact up to 20!, after that
             it silently wraps around modulo 2**64 like a C ``uint64_t``.
  mpz     -- gmpy2 arbitrary-precision integers.
  bignum  -- the hand-rolled ``BigNum`` radix-limited accumulator.
"""

from __future__ import annotations

import logging
from typing import Callable, Union

import gmpy2
import numpy as np

from codekata.bignum import BigNum
from codekata.constants import BACKENDS, DEFAULT_BACKEND, NATIVE_MAX_EXACT, UPPER_BOUND
from codekata.errors import OutOfRangeError

log = logging.getLogger("codekata.factorial")

Number = Union[int, np.integer, gmpy2.mpz, BigNum]


def check_bound(n: int, upper_bound: int = UPPER_BOUND) -> int:
    """Return *n* unchanged, or raise ``OutOfRangeError`` outside [0, upper_bound]."""
    if n < 0 or n > upper_bound:
        raise OutOfRangeError(n, upper_bound)
    return n


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"Factorial of a negative number: {n}")


def factorial_native(n: int) -> int:
    """n! in a wrapping 64-bit accumulator."""
    _check_non_negative(n)
    if n > NATIVE_MAX_EXACT:
        log.warning("%d! does not fit in 64 bits -- native result wraps around", n)

    # Array arithmetic wraps modulo 2**64 without overflow warnings
    acc = np.ones(1, dtype=np.uint64)
    for i in range(2, n + 1):
        acc *= np.uint64(i)
    return int(acc[0])


def factorial_mpz(n: int) -> gmpy2.mpz:
    """n! using gmpy2 bigints."""
    _check_non_negative(n)
    acc = gmpy2.mpz(1)
    for i in range(2, n + 1):
        acc *= i
    return acc


def factorial_bignum(n: int) -> BigNum:
    """n! using the hand-rolled ``BigNum``."""
    _check_non_negative(n)
    return BigNum.factorial(n)


_FACTORIALS: dict[str, Callable[[int], Number]] = {
    "native": factorial_native,
    "mpz": factorial_mpz,
    "bignum": factorial_bignum,
}


def split_num_into_digits(num: Number) -> list[int]:
    """Decimal digits of *num*, least significant first.

    Zero yields an empty list, so its digit sum is 0.
    """
    if isinstance(num, BigNum):
        return num.digits()
    if isinstance(num, np.integer):
        num = int(num)
    if num < 0:
        raise ValueError(f"Cannot split a negative number into digits: {num}")

    digits: list[int] = []
    while num > 0:
        num, digit = divmod(num, 10)
        digits.append(int(digit))
    return digits


def sum_of_digits(num: Number) -> int:
    """Sum of the decimal digits of *num*."""
    return sum(split_num_into_digits(num))


def factorial(n: int, backend: str = DEFAULT_BACKEND, upper_bound: int = UPPER_BOUND) -> Number:
    """Bound-checked n! with the chosen backend."""
    try:
        compute = _FACTORIALS[backend]
    except KeyError:
        raise ValueError(
            f"Unknown backend {backend!r}; choose one of {', '.join(BACKENDS)}"
        ) from None
    check_bound(n, upper_bound)
    return compute(n)


def digit_sum_of_factorial(
    n: int,
    backend: str = DEFAULT_BACKEND,
    upper_bound: int = UPPER_BOUND,
) -> int:
    """Sum of the digits of n!, the factorial hash."""
    f = factorial(n, backend=backend, upper_bound=upper_bound)
    digit_sum = sum_of_digits(f)
    log.debug("digit sum of %d! (%s) = %d", n, backend, digit_sum)
    return digit_sum
