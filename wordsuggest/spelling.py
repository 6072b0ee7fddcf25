"""Edit distance and spelling corrections."""

from __future__ import annotations

from wordsuggest.trie import Trie


def levenshtein_distance(a: str, b: str) -> int:
    """Return the edit distance between a and b."""
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def suggest_spelling(trie: Trie, word: str, max_distance: int = 2) -> list[str]:
    """Return the trie's words within max_distance edits of word."""
    return [
        candidate
        for candidate in trie.all_words()
        if levenshtein_distance(word, candidate) <= max_distance
    ]