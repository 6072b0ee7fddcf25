[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordsuggest"
version = "0.1.0"
description = "Prefix word suggestions from a trie and a red-black tree, with spelling correction and word-list editing"
requires-python = ">=3.10"
dependencies = []
keywords = ["autocomplete", "trie", "red-black tree", "spelling", "levenshtein"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordsuggest = "wordsuggest.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordsuggest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
