"""Name book: is any name a prefix of another name?

A name book is *consistent* when no name begins with the whole of another
name.  Two implementations answer the question:

  NameBook      -- keeps a plain list and compares names pairwise.
  TreeNameBook  -- inserts names into a prefix trie and flags collisions
                   as they happen.

Only leading substrings count: ``"bob"`` and ``"abob"`` are consistent.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, Union

from codekata.constants import ALPHABET, DEFAULT_METHOD, METHODS
from codekata.errors import InvalidNameError
from codekata.trie import InsertResult, Trie

log = logging.getLogger("codekata.namebook")

PathLike = Union[str, "os.PathLike[str]"]

_LETTERS = frozenset(ALPHABET)


def normalize_name(raw: str) -> str:
    """Strip and lowercase *raw*; raise ``InvalidNameError`` unless it is [a-z]+."""
    name = raw.strip().lower()
    if not name or not _LETTERS.issuperset(name):
        raise InvalidNameError(raw)
    return name


def iter_names(path: PathLike) -> Iterator[str]:
    """Yield whitespace-separated names from a text file."""
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            yield from line.split()


def is_prefix_collision(name_1: str, name_2: str) -> bool:
    """True if either name equals or starts with the other."""
    return name_1.startswith(name_2) or name_2.startswith(name_1)


class NameBook:
    """List of names checked for consistency by pairwise comparison.

    Names go through ``normalize_name`` first, so comparison is
    case-insensitive and tokens with characters outside a-z (``o'neil``,
    ``mary-jane``) raise ``InvalidNameError`` instead of being compared raw.
    This keeps the accepted input identical to ``TreeNameBook``.
    """

    def __init__(self, path: PathLike | None = None):
        self._names: list[str] = []
        self._consistent = True
        self.first_collision: tuple[str, str] | None = None
        if path is not None:
            self.read_names(path)

    def read_names(self, path: PathLike) -> int:
        """Add every name in *path*; returns how many were read."""
        count = 0
        for name in iter_names(path):
            self.add_name(name)
            count += 1
        log.info("Read %d names from %s", count, path)
        return count

    def add_name(self, name: str) -> None:
        """Add *name*, updating the consistency flag against earlier names."""
        name = normalize_name(name)
        for existing in self._names:
            if is_prefix_collision(name, existing):
                log.debug("'%s' collides with '%s'", name, existing)
                self._consistent = False
                if self.first_collision is None:
                    self.first_collision = (existing, name)
                break
        self._names.append(name)

    def clear_names(self) -> None:
        self._names.clear()
        self._consistent = True
        self.first_collision = None

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    @property
    def consistent(self) -> bool:
        """Consistency tracked incrementally as names were added."""
        return self._consistent

    def is_consistent(self) -> bool:
        """Re-check the whole list, comparing each pair once."""
        for i, name_1 in enumerate(self._names):
            for name_2 in self._names[i + 1:]:
                if is_prefix_collision(name_1, name_2):
                    return False
        return True

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __str__(self) -> str:
        return "".join(f"{name}\n" for name in self._names)


class TreeNameBook:
    """Names stored in a prefix trie; collisions detected on insert."""

    def __init__(self, path: PathLike | None = None):
        self._trie = Trie()
        self._count = 0
        self._consistent = True
        self.first_collision: str | None = None
        if path is not None:
            self.read_names(path)

    def read_names(self, path: PathLike) -> int:
        count = 0
        for name in iter_names(path):
            self.add_name(name)
            count += 1
        log.info("Read %d names from %s", count, path)
        return count

    def add_name(self, name: str) -> None:
        name = normalize_name(name)
        if self._trie.insert(name) is InsertResult.COLLISION:
            log.debug("'%s' collides with an earlier name", name)
            self._consistent = False
            if self.first_collision is None:
                self.first_collision = name
        self._count += 1

    def clear_names(self) -> None:
        self._trie = Trie()
        self._count = 0
        self._consistent = True
        self.first_collision = None

    @property
    def trie(self) -> Trie:
        return self._trie

    @property
    def consistent(self) -> bool:
        return self._consistent

    def __len__(self) -> int:
        return self._count


def check_names(names: Iterable[str], method: str = DEFAULT_METHOD) -> bool:
    """True if no name in *names* is a prefix of another."""
    if method == "pairwise":
        book: NameBook | TreeNameBook = NameBook()
    elif method == "trie":
        book = TreeNameBook()
    else:
        raise ValueError(f"Unknown method {method!r}; choose one of {', '.join(METHODS)}")
    for name in names:
        book.add_name(name)
    return book.consistent
