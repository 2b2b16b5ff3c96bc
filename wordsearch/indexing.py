"""Building every index over the documents of a corpus."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from functools import reduce

from wordsearch.corpus import Corpus
from wordsearch.document_index import DocumentIndex
from wordsearch.index import InvertedIndex, TermMatrix, feed_tokens
from wordsearch.tokenizer import LexerStats, lex
from wordsearch.two_word_index import TwoWordIndex


@dataclass
class IndexSet:
    """The indexes built from some documents and the lexer counters."""

    inverted: InvertedIndex = field(default_factory=InvertedIndex)
    matrix: TermMatrix = field(default_factory=TermMatrix)
    two_word: TwoWordIndex = field(default_factory=TwoWordIndex)
    document_index: DocumentIndex = field(default_factory=DocumentIndex)
    stats: LexerStats = field(default_factory=LexerStats)

    def merge(self, other: IndexSet) -> None:
        """Add every index and counter of ``other`` to this set."""
        self.inverted.merge(other.inverted)
        self.matrix.merge(other.matrix)
        self.two_word.merge(other.two_word)
        self.document_index.merge(other.document_index)
        self.stats.merge(other.stats)


def index_document(corpus: Corpus, document_id: int) -> IndexSet:
    """Lex one document and build all indexes over it.

    Raises ``KeyError`` if the corpus has no such document.
    """
    tokens, stats = lex(corpus.document_text(document_id))
    indexes = IndexSet(stats=stats)
    for index in (indexes.inverted, indexes.matrix, indexes.two_word):
        feed_tokens(tokens, document_id, index)
    for token in tokens:
        indexes.document_index.add_term(token.term, document_id)
    return indexes


def _combine(a: IndexSet, b: IndexSet) -> IndexSet:
    a.merge(b)
    return a


def build_indexes(corpus: Corpus, workers: int | None = None) -> IndexSet | None:
    """Index every document of ``corpus`` in parallel and merge the results.

    Returns ``None`` when the corpus holds no documents.
    """
    document_ids = list(corpus.document_ids())
    if not document_ids:
        return None
    max_workers = workers if workers is not None else os.cpu_count() or 1
    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as pool:
        parts = list(pool.map(lambda document_id: index_document(corpus, document_id), document_ids))
    return reduce(_combine, parts)