"""Prefix word suggestions from a trie and a red-black tree, with spelling correction and word-file editing."""

__version__ = "0.1.0"