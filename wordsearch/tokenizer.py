"""Splitting text into lower-case word tokens and counting what was read."""

from __future__ import annotations

from dataclasses import dataclass

APOSTROPHE = "'"


@dataclass
class LexerStats:
    """Counters gathered while lexing one or more texts."""

    characters_read: int = 0
    characters_ignored: int = 0
    lines: int = 0

    def merge(self, other: LexerStats) -> None:
        """Add the counters of ``other`` to this one."""
        self.characters_read += other.characters_read
        self.characters_ignored += other.characters_ignored
        self.lines += other.lines


@dataclass(frozen=True)
class Token:
    """A lower-cased word, its ordinal among the words and its character offset."""

    term: str
    index: int
    offset: int


def _is_word_char(ch: str, word_started: bool) -> bool:
    return ch.isalpha() or (ch == APOSTROPHE and word_started)


def lex(text: str) -> tuple[list[Token], LexerStats]:
    """Split ``text`` into words.

    A word is a run of letters; an apostrophe continues a word that has
    already started. Every other character separates words and is counted
    as ignored. Lines are counted from one.
    """
    tokens: list[Token] = []
    stats = LexerStats(lines=1)
    word: list[str] = []
    start = 0

    def flush() -> None:
        tokens.append(Token("".join(word), len(tokens), start))
        word.clear()

    for offset, ch in enumerate(text):
        stats.characters_read += 1
        if _is_word_char(ch, bool(word)):
            if not word:
                start = offset
            word.append(ch.lower())
            continue

        stats.characters_ignored += 1
        if ch == "\n":
            stats.lines += 1
        if word:
            flush()

    if word:
        flush()

    return tokens, stats