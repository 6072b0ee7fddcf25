"""Interactive prefix suggestion shell comparing a trie and a red-black tree."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Iterator, TextIO

from wordsuggest.rbtree import RedBlackTree
from wordsuggest.spelling import suggest_spelling
from wordsuggest.trie import Trie
from wordsuggest.wordfile import delete_word_from_file, insert_word_in_file, load_words


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(prompt: str, tokens: Iterator[str]) -> str | None:
    print(prompt, end="", flush=True)
    return next(tokens, None)


def _timed(func, prefix: str) -> tuple[list[str], int]:
    start = time.perf_counter_ns()
    result = func(prefix)
    return result, (time.perf_counter_ns() - start) // 1000


def _print_suggestions(title: str, words: list[str], empty: str) -> None:
    print(f"\n{title}")
    if not words:
        print(empty)
    for word in words:
        print(f"  - {word}")


def _open_error(path: str) -> None:
    print(f"Error: Could not open file {path}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive suggestion loop."""
    parser = argparse.ArgumentParser(prog="wordsuggest", description=__doc__)
    parser.add_argument("--words", default="words.txt", help="word list file")
    args = parser.parse_args(argv)
    path = args.words

    print("Starting the program...")
    trie = Trie()
    rbt = RedBlackTree()
    try:
        load_words(trie, rbt, path)
    except OSError:
        _open_error(path)
    print("Program started successfully.")

    tokens = _tokens(sys.stdin)
    while True:
        prefix = _ask(
            "Enter a prefix to get suggestions (or type 'exit' to quit): ", tokens
        )
        if prefix is None or prefix == "exit":
            break

        trie_words, trie_us = _timed(trie.suggest_words, prefix)
        rbt_words, rbt_us = _timed(rbt.suggest_words, prefix)

        _print_suggestions(
            "Suggestions from Trie:", trie_words, " No suggestions found in Trie."
        )
        print(f"Trie time: {trie_us} microsecond")
        _print_suggestions(
            "Suggestions from Red-Black Tree:", rbt_words, " No suggestions found in RBT."
        )
        print(f"RBT time: {rbt_us} microsecond")

        if trie_us < rbt_us:
            print(f"\n Trie was faster by {rbt_us - trie_us} microsecond")
        elif rbt_us < trie_us:
            print(f"\n RBT was faster by {trie_us - rbt_us} microsecond")
        else:
            print("\n Both performed equally.")

        if not trie_words and not rbt_words:
            print("\n Did you mean:")
            corrections = suggest_spelling(trie, prefix)
            if not corrections:
                print("  (No similar words found.)")
            for word in corrections:
                print(f"  - {word}")

        print("\n---------------------------")

        action = _ask(
            "Would you like to insert or delete a word? (insert/delete/skip): ", tokens
        )
        if action is None:
            break
        if action == "insert":
            word = _ask("Enter a word to insert into the file: ", tokens)
            if word is None:
                break
            try:
                if insert_word_in_file(path, word):
                    print(f'The word "{word}" has been inserted into the file.')
                else:
                    print(f'The word "{word}" is already present in the file.')
            except OSError:
                _open_error(path)
        elif action == "delete":
            word = _ask("Enter a word to delete from the file: ", tokens)
            if word is None:
                break
            try:
                if delete_word_from_file(path, word):
                    print(f'The word "{word}" has been deleted from the file.')
                else:
                    print(f'The word "{word}" was not found in the file.')
            except OSError:
                _open_error(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())