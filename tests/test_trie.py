from __future__ import annotations

import pytest

from codekata.errors import InvalidNameError
from codekata.trie import InsertResult, Trie, TrieNode, char_to_index


def test_char_to_index() -> None:
    assert char_to_index("a") == 0
    assert char_to_index("z") == 25
    with pytest.raises(ValueError):
        char_to_index("A")


def test_node_add_child_reuses_existing() -> None:
    node = TrieNode()
    first = node.add_child("q")
    assert node.add_child("q") is first
    assert node.num_children == 1
    assert node.get_child("q") is first
    assert node.get_child("r") is None


def test_distinct_names_do_not_collide() -> None:
    trie = Trie()
    assert trie.insert("alice") is InsertResult.OK
    assert trie.insert("bob") is InsertResult.OK
    assert len(trie) == 2


def test_shared_prefix_alone_is_not_a_collision() -> None:
    trie = Trie()
    assert trie.insert("abc") is InsertResult.OK
    assert trie.insert("abd") is InsertResult.OK
    assert trie.insert("abx") is InsertResult.OK


def test_existing_name_is_prefix_of_new_one() -> None:
    trie = Trie()
    trie.insert("bob")
    assert trie.insert("bobby") is InsertResult.COLLISION


def test_new_name_is_prefix_of_existing_one() -> None:
    trie = Trie()
    trie.insert("bobby")
    assert trie.insert("bob") is InsertResult.COLLISION


def test_duplicate_collides() -> None:
    trie = Trie()
    trie.insert("carol")
    assert trie.insert("carol") is InsertResult.COLLISION
    assert len(trie) == 1


def test_word_inserted_even_on_collision() -> None:
    trie = Trie()
    trie.insert("bobby")
    trie.insert("bob")
    assert trie.is_word("bob")
    assert trie.is_word("bobby")
    assert "bob" in trie


def test_lookups() -> None:
    trie = Trie()
    trie.insert("dave")
    assert trie.is_prefix("da")
    assert trie.is_prefix("")
    assert not trie.is_word("da")
    assert not trie.is_prefix("dx")
    assert not trie.is_prefix("D")
    assert "dan" not in trie


def test_node_count_shares_prefixes() -> None:
    trie = Trie()
    trie.insert("abc")
    trie.insert("abd")
    # root + a + b + c + d
    assert trie.node_count == 5


@pytest.mark.parametrize("bad", ["", "Bob", "jo-ann", "x1"])
def test_invalid_characters_rejected(bad: str) -> None:
    with pytest.raises(InvalidNameError):
        Trie().insert(bad)


def test_rejected_word_leaves_trie_untouched() -> None:
    trie = Trie()
    with pytest.raises(InvalidNameError):
        trie.insert("abc1")
    assert trie.node_count == 1
    assert len(trie) == 0
    assert not trie.is_prefix("a")
    assert trie.insert("ab") is InsertResult.OK
