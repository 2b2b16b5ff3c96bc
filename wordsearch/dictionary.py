"""A word-frequency dictionary and building one from a text file."""

from __future__ import annotations

from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from types import MappingProxyType

from wordsearch.tokenizer import LexerStats, lex


class Dictionary:
    """Counts how many times each word was seen."""

    def __init__(self) -> None:
        self._words: dict[str, int] = {}

    def __repr__(self) -> str:
        return f"Dictionary({self._words!r})"

    def word_counts(self) -> Mapping[str, int]:
        """A read-only view of word to count."""
        return MappingProxyType(self._words)

    def add_word(self, word: str) -> None:
        self.add_word_with_count(word, 1)

    def add_word_with_count(self, word: str, count: int) -> None:
        self._words[word] = self._words.get(word, 0) + count

    def merge(self, other: Dictionary) -> None:
        """Add every count of ``other`` into this dictionary."""
        for word, count in other._words.items():
            self.add_word_with_count(word, count)

    def unique_word_count(self) -> int:
        return len(self._words)

    def total_word_count(self) -> int:
        return sum(self._words.values())


def add_file_to_dict(path: str | PathLike[str]) -> tuple[Dictionary, LexerStats] | None:
    """Count the words of a UTF-8 file.

    Returns ``None`` for an empty file. Raises ``UnicodeDecodeError`` when
    the file is not valid UTF-8 and ``OSError`` when it cannot be read.
    """
    data = Path(path).read_bytes()
    if not data:
        return None

    tokens, stats = lex(data.decode("utf-8"))
    dictionary = Dictionary()
    for token in tokens:
        dictionary.add_word(token.term)

    return dictionary, stats