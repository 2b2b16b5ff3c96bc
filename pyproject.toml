[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordsearch"
version = "0.1.0"
description = "Word dictionaries, inverted and term-matrix indexes, and boolean search over folders of text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "inverted index", "boolean query", "dictionary", "tokenizer", "text"]
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
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordsearch-dict = "wordsearch.dictionary_cli:main"
wordsearch = "wordsearch.search_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
