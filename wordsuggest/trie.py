"""Prefix tree of words."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False, slots=True)
class _Node:
    end_of_word: bool = False
    children: dict[str, _Node] = field(default_factory=dict)


class Trie:
    """A character trie supporting prefix suggestions."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add a word to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.end_of_word = True

    def _find(self, prefix: str) -> _Node | None:
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    @staticmethod
    def _collect(node: _Node, prefix: str) -> list[str]:
        words: list[str] = []
        stack = [(node, prefix)]
        while stack:
            current, text = stack.pop()
            if current.end_of_word:
                words.append(text)
            stack.extend(
                (child, text + ch) for ch, child in reversed(current.children.items())
            )
        return words

    def all_words(self) -> list[str]:
        """Return every stored word."""
        return self._collect(self._root, "")

    def suggest_words(self, prefix: str) -> list[str]:
        """Return every stored word that starts with prefix."""
        node = self._find(prefix)
        if node is None:
            return []
        return self._collect(node, prefix)