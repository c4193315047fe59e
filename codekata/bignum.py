"""Hand-rolled arbitrary-precision unsigned integer.

A ``BigNum`` keeps a non-negative integer as a little-endian array of
limbs in base ``RADIX`` (10**4).  Multiplication works limb by limb and
then propagates carries, the same way it is done on paper.  The base is
small enough that a limb product (< 10**8) and the sum of many of them
stay far below the 64-bit ceiling, so numpy can do the bulk of the
arithmetic without overflow.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from codekata.constants import DIGITS_PER_LIMB, RADIX

_LIMB_DTYPE = np.uint64


def _propagate(raw: np.ndarray) -> np.ndarray:
    """Carry-propagate *raw* (limbs possibly >= RADIX) into proper limbs."""
    limbs: list[int] = []
    carry = 0
    for value in raw.tolist():
        total = value + carry
        limbs.append(total % RADIX)
        carry = total // RADIX
    while carry:
        limbs.append(carry % RADIX)
        carry //= RADIX

    # Strip leading zero limbs but always keep one
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        limbs.append(0)
    return np.array(limbs, dtype=_LIMB_DTYPE)


class BigNum:
    """Non-negative integer stored as base-10**4 limbs, least significant first.

    Instances are treated as immutable: every arithmetic operation returns
    a new ``BigNum``, so ``x *= 7`` rebinds ``x``.
    """

    __slots__ = ("limbs",)

    def __init__(self, value: int = 0):
        value = int(value)
        if value < 0:
            raise ValueError(f"BigNum holds non-negative integers only, got {value}")
        limbs: list[int] = []
        while True:
            value, limb = divmod(value, RADIX)
            limbs.append(limb)
            if value == 0:
                break
        self.limbs: np.ndarray = np.array(limbs, dtype=_LIMB_DTYPE)

    @classmethod
    def _from_raw(cls, raw: np.ndarray) -> BigNum:
        num = cls.__new__(cls)
        num.limbs = _propagate(raw)
        return num

    @classmethod
    def from_digits(cls, digits: Iterable[int] | str) -> BigNum:
        """Build from decimal digits, most significant first.

        ``digits`` may be a decimal string such as ``"120"`` or a sequence
        of ints such as ``[1, 2, 0]``.
        """
        values: list[int] = []
        for d in digits:
            d = int(d)
            if not 0 <= d <= 9:
                raise ValueError(f"Not a decimal digit: {d}")
            values.append(d)
        if not values:
            return cls(0)

        limbs: list[int] = []
        for end in range(len(values), 0, -DIGITS_PER_LIMB):
            chunk = values[max(0, end - DIGITS_PER_LIMB):end]
            limb = 0
            for d in chunk:
                limb = limb * 10 + d
            limbs.append(limb)
        return cls._from_raw(np.array(limbs, dtype=_LIMB_DTYPE))

    @classmethod
    def factorial(cls, n: int) -> BigNum:
        """``n!`` computed by repeated small multiplications."""
        if n < 0:
            raise ValueError(f"Factorial of a negative number: {n}")
        result = cls(1)
        for i in range(2, n + 1):
            result = result.mul_small(i)
        return result

    # arithmetic

    def mul_small(self, k: int) -> BigNum:
        """Multiply by a machine-sized non-negative int."""
        k = int(k)
        if k < 0:
            raise ValueError(f"Cannot multiply BigNum by negative {k}")
        if k >= RADIX:
            return self * BigNum(k)
        return self._from_raw(self.limbs * _LIMB_DTYPE(k))

    def __mul__(self, other: object) -> BigNum:
        if isinstance(other, int):
            if other < 0:
                raise ValueError(f"Cannot multiply BigNum by negative {other}")
            if other < RADIX:
                return self.mul_small(other)
            other = BigNum(other)
        if not isinstance(other, BigNum):
            return NotImplemented
        # Schoolbook multiplication: limb i*j lands in column i+j
        product = np.convolve(self.limbs.astype(np.int64), other.limbs.astype(np.int64))
        return self._from_raw(product)

    __rmul__ = __mul__

    def __add__(self, other: object) -> BigNum:
        if isinstance(other, int):
            other = BigNum(other)
        if not isinstance(other, BigNum):
            return NotImplemented
        size = max(len(self.limbs), len(other.limbs))
        raw = np.zeros(size, dtype=_LIMB_DTYPE)
        raw[:len(self.limbs)] += self.limbs
        raw[:len(other.limbs)] += other.limbs
        return self._from_raw(raw)

    __radd__ = __add__

    # digits

    def is_zero(self) -> bool:
        return len(self.limbs) == 1 and int(self.limbs[0]) == 0

    def digits(self) -> list[int]:
        """Decimal digits, least significant first.  Zero has no digits."""
        out: list[int] = []
        limbs = self.limbs.tolist()
        for i, limb in enumerate(limbs):
            top = i == len(limbs) - 1
            for _ in range(DIGITS_PER_LIMB):
                if top and limb == 0:
                    break
                out.append(limb % 10)
                limb //= 10
        return out

    def digit_sum(self) -> int:
        return sum(self.digits())

    def num_digits(self) -> int:
        return max(1, len(self.digits()))

    # conversions

    def __int__(self) -> int:
        value = 0
        for limb in reversed(self.limbs.tolist()):
            value = value * RADIX + limb
        return value

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        limbs = self.limbs.tolist()
        head = str(limbs[-1])
        tail = "".join(f"{limb:0{DIGITS_PER_LIMB}d}" for limb in reversed(limbs[:-1]))
        return head + tail

    def __repr__(self) -> str:
        text = str(self)
        if len(text) > 24:
            text = f"{text[:10]}...{text[-10:]} ({len(text)} digits)"
        return f"BigNum({text})"

    def __len__(self) -> int:
        return len(self.limbs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigNum):
            return np.array_equal(self.limbs, other.limbs)
        if isinstance(other, int):
            return int(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(int(self))
