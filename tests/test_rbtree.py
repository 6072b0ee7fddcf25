import math

import pytest

from wordsuggest.rbtree import RedBlackTree


def _black_height(node):
    """Check red-black invariants below node and return its black height."""
    if node is None:
        return 1
    if node.color.name == "RED":
        for child in (node.left, node.right):
            assert child is None or child.color.name == "BLACK"
    for child in (node.left, node.right):
        if child is not None:
            assert child.parent is node
    if node.left is not None:
        assert node.left.word < node.word
    if node.right is not None:
        assert node.right.word >= node.word
    left = _black_height(node.left)
    right = _black_height(node.right)
    assert left == right
    return left + (1 if node.color.name == "BLACK" else 0)


def _height(node):
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def test_empty_tree_has_no_suggestions():
    tree = RedBlackTree()
    assert tree.suggest_words("") == []
    assert tree.suggest_words("a") == []
    assert len(tree) == 0


def test_prefix_suggestions():
    tree = RedBlackTree()
    for word in ["apple", "apply", "banana", "ape", "band", "cat"]:
        tree.insert(word)
    assert sorted(tree.suggest_words("ap")) == ["ape", "apple", "apply"]
    assert sorted(tree.suggest_words("ban")) == ["banana", "band"]
    assert tree.suggest_words("z") == []


def test_sorted_insertion_is_rebalanced_to_preorder():
    tree = RedBlackTree()
    for word in ["a", "b", "c"]:
        tree.insert(word)
    assert tree.suggest_words("") == ["b", "a", "c"]
    assert tree._root.parent is None


def test_duplicates_are_kept():
    tree = RedBlackTree()
    for word in ["dog", "dog", "door"]:
        tree.insert(word)
    assert sorted(tree.suggest_words("do")) == ["dog", "dog", "door"]
    assert len(tree) == 3


@pytest.mark.parametrize("count", [1, 2, 10, 100, 500])
def test_invariants_after_sequential_inserts(count):
    tree = RedBlackTree()
    words = [f"w{i:04d}" for i in range(count)]
    for word in words:
        tree.insert(word)
    assert tree._root.color.name == "BLACK"
    _black_height(tree._root)
    assert _height(tree._root) <= 2 * math.log2(count + 1)
    assert list(tree) == words