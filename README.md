# wordsuggest

wordsuggest suggests words that start with a given prefix. It reads a plain word list with one word on each line and loads the words into two structures: a trie and a red-black tree. Each prefix is looked up in both, and the time each lookup took is reported. When neither structure finds a match, spelling corrections based on Levenshtein distance are offered.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Interactive use

```
wordsuggest [--words PATH]
```

`--words` names the word list file. It defaults to `words.txt` in the current directory. If the file cannot be opened, an error is printed to standard error and the session starts with empty structures.

At each prompt, type a prefix. The tool then prints:

- the matches from the trie and from the red-black tree;
- how long each lookup took, in microseconds, and which structure was faster;
- "Did you mean" corrections, meaning stored words within an edit distance of 2, when neither structure found a match.

After each lookup the tool asks `insert`, `delete` or `skip`:

- `insert` asks for a word and adds it to the word file at its sorted position. Nothing changes if the word is already there.
- `delete` asks for a word and removes it from the file if it is present.

Any other answer goes straight back to the prefix prompt. Input is read as whitespace-separated tokens. Typing `exit` at the prefix prompt, or reaching the end of input, ends the session.

These edits change only the file. The words already loaded for the current session stay the same until the tool is started again.

## Library use

```python
from wordsuggest.trie import Trie
from wordsuggest.rbtree import RedBlackTree
from wordsuggest.wordfile import (
    read_words, load_words, insert_word_in_file, delete_word_from_file,
)
from wordsuggest.spelling import levenshtein_distance, suggest_spelling

trie = Trie()
rbt = RedBlackTree()
count = load_words(trie, rbt, "words.txt")  # number of words inserted

trie.suggest_words("app")   # stored words starting with "app"
rbt.suggest_words("app")    # the same words, in the tree's pre-order
trie.all_words()            # every word in the trie

len(rbt)                    # number of words inserted, duplicates included
list(rbt)                   # the tree's words in sorted order

levenshtein_distance("kitten", "sitting")   # 3
suggest_spelling(trie, "aple", 2)           # trie words within 2 edits

read_words("words.txt")                      # trimmed, non-empty lines
insert_word_in_file("words.txt", "banana")   # True if added, False if already present
delete_word_from_file("words.txt", "banana") # True if removed, False if not found
```

Notes on behaviour:

- When a word file is read, whitespace around each line is trimmed and blank lines are skipped.
- `insert_word_in_file` and `delete_word_from_file` use binary search, so they expect the file to be sorted already. They rewrite the whole file, one word per line.
- The file functions raise `OSError` when the file cannot be opened.
- The red-black tree keeps duplicate words. The trie stores each word once.

## What it does not do

Words can only be added to the trie and the red-black tree. There is no way to remove them.