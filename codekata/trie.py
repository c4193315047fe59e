"""26-ary prefix trie that reports prefix collisions on insert."""

from __future__ import annotations

import enum

from codekata.constants import ALPHABET_SIZE
from codekata.errors import InvalidNameError


class InsertResult(enum.Enum):
    OK = "ok"
    COLLISION = "collision"


def char_to_index(ch: str) -> int:
    index = ord(ch) - ord("a")
    if not 0 <= index < ALPHABET_SIZE:
        raise ValueError(f"Not a lowercase letter: {ch!r}")
    return index


class TrieNode:
    """Single node in the prefix trie, one child slot per letter."""

    __slots__ = ("children", "num_children", "is_terminal")

    def __init__(self):
        self.children: list[TrieNode | None] = [None] * ALPHABET_SIZE
        self.num_children: int = 0
        self.is_terminal: bool = False

    def get_child(self, ch: str) -> TrieNode | None:
        return self.children[char_to_index(ch)]

    def add_child(self, ch: str) -> TrieNode:
        """Child for *ch*, created if missing."""
        index = char_to_index(ch)
        node = self.children[index]
        if node is None:
            node = TrieNode()
            self.children[index] = node
            self.num_children += 1
        return node


class Trie:
    """Prefix trie of names with collision detection.

    Inserting a word collides when an earlier word is a prefix of it
    (the path passes through a terminal node) or when it is itself a
    prefix of, or equal to, an earlier word (the path ends on a node
    that already existed).
    """

    def __init__(self):
        self.root = TrieNode()
        self.node_count = 1
        self._size = 0

    def insert(self, word: str) -> InsertResult:
        if not word:
            raise InvalidNameError(word)
        # Reject the whole word before any node is created
        try:
            for ch in word:
                char_to_index(ch)
        except ValueError:
            raise InvalidNameError(word) from None

        node = self.root
        collision = False
        created = False
        for ch in word:
            child = node.get_child(ch)
            created = child is None
            if created:
                child = node.add_child(ch)
                self.node_count += 1
            node = child
            if node.is_terminal:
                collision = True

        if not created:
            collision = True
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1
        return InsertResult.COLLISION if collision else InsertResult.OK

    def is_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            try:
                node = node.get_child(ch)
            except ValueError:
                return None
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def __len__(self) -> int:
        return self._size
