"""Red-black tree of words with prefix lookup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator


class _Color(Enum):
    RED = "red"
    BLACK = "black"


@dataclass(eq=False, slots=True)
class _Node:
    word: str
    color: _Color = _Color.RED
    left: _Node | None = None
    right: _Node | None = None
    parent: _Node | None = None


def _is_red(node: _Node | None) -> bool:
    return node is not None and node.color is _Color.RED


class RedBlackTree:
    """A self-balancing binary search tree holding words (duplicates allowed)."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        """Yield the stored words in sorted order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.word
            node = node.right

    def _replace_child(self, old: _Node, new: _Node) -> None:
        parent = old.parent
        new.parent = parent
        if parent is None:
            self._root = new
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, x: _Node) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        self._replace_child(x, y)
        y.left = x
        x.parent = y

    def _rotate_right(self, x: _Node) -> None:
        y = x.left
        assert y is not None
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        self._replace_child(x, y)
        y.right = x
        x.parent = y

    def _fix_insert(self, k: _Node) -> None:
        while k.parent is not None and k.parent.color is _Color.RED:
            parent = k.parent
            grand = parent.parent
            assert grand is not None
            if parent is grand.right:
                uncle = grand.left
                if _is_red(uncle):
                    uncle.color = _Color.BLACK
                    parent.color = _Color.BLACK
                    grand.color = _Color.RED
                    k = grand
                else:
                    if k is parent.left:
                        k = parent
                        self._rotate_right(k)
                    k.parent.color = _Color.BLACK
                    k.parent.parent.color = _Color.RED
                    self._rotate_left(k.parent.parent)
            else:
                uncle = grand.right
                if _is_red(uncle):
                    uncle.color = _Color.BLACK
                    parent.color = _Color.BLACK
                    grand.color = _Color.RED
                    k = grand
                else:
                    if k is parent.right:
                        k = parent
                        self._rotate_left(k)
                    k.parent.color = _Color.BLACK
                    k.parent.parent.color = _Color.RED
                    self._rotate_right(k.parent.parent)
            if k is self._root:
                break
        assert self._root is not None
        self._root.color = _Color.BLACK

    def insert(self, word: str) -> None:
        """Insert a word; equal words go to the right of existing ones."""
        node = _Node(word)
        parent: _Node | None = None
        current = self._root
        while current is not None:
            parent = current
            current = current.left if word < current.word else current.right

        node.parent = parent
        self._size += 1
        if parent is None:
            self._root = node
            node.color = _Color.BLACK
            return
        if word < parent.word:
            parent.left = node
        else:
            parent.right = node

        if parent.parent is None:
            return
        self._fix_insert(node)

    def suggest_words(self, prefix: str) -> list[str]:
        """Return every word starting with prefix, in pre-order of the tree."""
        found: list[str] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            if node.word.startswith(prefix):
                found.append(node.word)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return found