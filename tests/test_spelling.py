import pytest

from wordsuggest.spelling import levenshtein_distance, suggest_spelling
from wordsuggest.trie import Trie


def test_classic_example():
    assert levenshtein_distance("kitten", "sitting") == 3


@pytest.mark.parametrize("word", ["", "a", "hello", "spelling"])
def test_identity_and_empty(word):
    assert levenshtein_distance(word, word) == 0
    assert levenshtein_distance(word, "") == len(word)
    assert levenshtein_distance("", word) == len(word)


@pytest.mark.parametrize("a,b", [("flaw", "lawn"), ("abc", "yabd"), ("book", "back")])
def test_symmetric_and_bounded(a, b):
    d = levenshtein_distance(a, b)
    assert d == levenshtein_distance(b, a)
    assert abs(len(a) - len(b)) <= d <= max(len(a), len(b))


def test_single_edit():
    assert levenshtein_distance("cat", "cart") == 1
    assert levenshtein_distance("cat", "cut") == 1


def test_suggest_spelling_default_distance():
    trie = Trie()
    for word in ["apple", "apply", "banana", "maple"]:
        trie.insert(word)
    assert sorted(suggest_spelling(trie, "aple")) == ["apple", "apply", "maple"]


def test_suggest_spelling_custom_distance():
    trie = Trie()
    for word in ["apple", "apply", "banana"]:
        trie.insert(word)
    assert suggest_spelling(trie, "apple", 0) == ["apple"]
    assert suggest_spelling(trie, "zzz", 1) == []