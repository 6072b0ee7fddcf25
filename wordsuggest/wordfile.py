"""Reading and editing the sorted word list file."""

from __future__ import annotations

import bisect
from os import PathLike
from typing import Union

from wordsuggest.rbtree import RedBlackTree
from wordsuggest.trie import Trie

PathType = Union[str, "PathLike[str]"]

_WHITESPACE = " \t\n\r"


def read_words(path: PathType) -> list[str]:
    """Return the trimmed, non-empty lines of the file."""
    with open(path, encoding="utf-8") as handle:
        return [word for line in handle if (word := line.strip(_WHITESPACE))]


def _write_words(path: PathType, words: list[str]) -> None:
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.writelines(f"{word}\n" for word in words)


def load_words(trie: Trie, rbt: RedBlackTree, path: PathType) -> int:
    """Insert every word of the file into both structures; return how many."""
    words = read_words(path)
    for word in words:
        trie.insert(word)
        rbt.insert(word)
    return len(words)


def insert_word_in_file(path: PathType, word: str) -> bool:
    """Insert word at its sorted place; return False if it was already there."""
    words = read_words(path)
    pos = bisect.bisect_left(words, word)
    if pos < len(words) and words[pos] == word:
        return False
    words.insert(pos, word)
    _write_words(path, words)
    return True


def delete_word_from_file(path: PathType, word: str) -> bool:
    """Remove word from the file; return False if it was not found."""
    words = read_words(path)
    pos = bisect.bisect_left(words, word)
    if pos == len(words) or words[pos] != word:
        return False
    del words[pos]
    _write_words(path, words)
    return True