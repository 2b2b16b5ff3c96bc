"""Saving dictionaries to and loading them from files."""

from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from os import PathLike

from wordsearch.dictionary import Dictionary

StrPath = str | PathLike[str]

_COUNT = re.compile(r"\+?[0-9]+")


class DictionaryStorage(ABC):
    """A file format for dictionaries."""

    @abstractmethod
    def read(self, path: StrPath) -> Dictionary:
        """Load a dictionary from ``path``."""

    @abstractmethod
    def write(self, path: StrPath, dictionary: Dictionary) -> None:
        """Save ``dictionary`` to ``path``."""


class JsonDictionaryStorage(DictionaryStorage):
    """A pretty-printed JSON object mapping each word to its count."""

    def read(self, path: StrPath) -> Dictionary:
        with open(path, encoding="utf-8") as stream:
            data = json.load(stream)
        if not isinstance(data, dict):
            raise ValueError("Expected a JSON object of word counts")

        dictionary = Dictionary()
        for word, count in data.items():
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise ValueError(f"Invalid count for word {word!r}: {count!r}")
            dictionary.add_word_with_count(word, count)
        return dictionary

    def write(self, path: StrPath, dictionary: Dictionary) -> None:
        with open(path, "w", encoding="utf-8", newline="\n") as stream:
            json.dump(dict(dictionary.word_counts()), stream, indent=2, ensure_ascii=False)


class KeyValDictionaryStorage(DictionaryStorage):
    """One ``word=count`` line per word."""

    SEPARATOR = "="

    @classmethod
    def _parse_line(cls, line: str) -> tuple[str, int]:
        parts = line.split(cls.SEPARATOR)
        if len(parts) < 2:
            raise ValueError(f'Line must have word and size separated by "{cls.SEPARATOR}"')
        word, count_text = parts[0], parts[1]
        if not _COUNT.fullmatch(count_text):
            raise ValueError(f"Invalid count {count_text!r} for word {word!r}")
        if len(parts) > 2:
            raise ValueError(
                f'Line must have word and size separated by "{cls.SEPARATOR}". '
                f'Encountered extra: "{parts[2]}"'
            )
        return word, int(count_text)

    def read(self, path: StrPath) -> Dictionary:
        dictionary = Dictionary()
        with open(path, "rb") as stream:
            for raw in stream:
                raw = raw.removesuffix(b"\n").removesuffix(b"\r")
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError:
                    continue
                word, count = self._parse_line(line)
                dictionary.add_word_with_count(word, count)
        return dictionary

    def write(self, path: StrPath, dictionary: Dictionary) -> None:
        with open(path, "w", encoding="utf-8", newline="\n") as stream:
            for word, count in dictionary.word_counts().items():
                stream.write(f"{word}{self.SEPARATOR}{count}\n")