"""Exceptions raised by the challenge solutions."""

from __future__ import annotations


class OutOfRangeError(ValueError):
    """Factorial input outside ``[0, upper_bound]``."""

    def __init__(self, value: int, upper_bound: int):
        self.value = value
        self.upper_bound = upper_bound
        super().__init__(
            f"Given number ({value}) is out of range [0,{upper_bound}]!"
        )


class InvalidNameError(ValueError):
    """Name that is empty or holds characters other than a-z."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid name {name!r}: only letters a-z are allowed")
