"""Term indexes over a set of documents and boolean queries against them."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Iterable

from wordsearch.positions import TermPositions
from wordsearch.query import AndNode, FalseNode, LogicNode, NotNode, OrNode, TermNode
from wordsearch.tokenizer import Token


class TermIndex(ABC):
    """Something that records terms and answers queries with document ids."""

    @abstractmethod
    def add_term(self, term: str, document_id: int, position: int) -> None:
        """Record that ``term`` occurs in a document at a word position."""

    @abstractmethod
    def query(self, node: LogicNode) -> set[int]:
        """The ids of the documents matching a parsed query."""


def _unsupported(node: LogicNode) -> TypeError:
    return TypeError(f"Unsupported query node: {node!r}")


class InvertedIndex(TermIndex):
    """Maps each term to the positions where it occurs in each document."""

    def __init__(self) -> None:
        self._documents = TermPositions()
        self._index: dict[str, TermPositions] = {}

    def add_term(self, term: str, document_id: int, position: int) -> None:
        self._index.setdefault(term, TermPositions()).add_position(document_id, position)
        self._documents.add_document(document_id)

    def merge(self, other: InvertedIndex) -> None:
        """Add every term occurrence of ``other`` to this index."""
        for term, positions in other._index.items():
            for document_id in positions.documents():
                self._documents.add_document(document_id)
            self._index.setdefault(term, TermPositions()).merge(positions)

    def unique_word_count(self) -> int:
        return len(self._index)

    def total_word_count(self) -> int:
        return sum(positions.positions_count() for positions in self._index.values())

    def term_positions(self, term: str) -> TermPositions:
        """A copy of the positions of ``term``; empty if it never occurs."""
        positions = self._index.get(term)
        return positions.copy() if positions is not None else TermPositions()

    def documents(self) -> set[int]:
        """Ids of every document that holds at least one term."""
        return set(self._documents.documents())

    def _query_positions(self, node: LogicNode) -> TermPositions:
        match node:
            case FalseNode():
                return TermPositions()
            case TermNode(term=term):
                return self.term_positions(term)
            case AndNode(lhs=lhs, rhs=rhs):
                return self._query_positions(lhs) & self._query_positions(rhs)
            case OrNode(lhs=lhs, rhs=rhs):
                return self._query_positions(lhs) | self._query_positions(rhs)
            case NotNode(operand=operand):
                # Negation works on whole documents, not on positions.
                return self._documents.document_sub(self._query_positions(operand))
        raise _unsupported(node)

    def query(self, node: LogicNode) -> set[int]:
        return set(self._query_positions(node).documents())

    def to_json(self) -> str:
        """The index as pretty-printed JSON."""
        data = {
            "documents": self._documents.to_dict(),
            "index": {term: positions.to_dict() for term, positions in self._index.items()},
        }
        return json.dumps(data, indent=2, ensure_ascii=False)


class TermMatrix(TermIndex):
    """A term-by-document incidence matrix; each row is a bit mask of documents."""

    def __init__(self) -> None:
        self._rows: dict[str, int] = {}
        self._col_count = 0

    @property
    def col_count(self) -> int:
        """Number of document columns."""
        return self._col_count

    def add_term(self, term: str, document_id: int, position: int) -> None:
        if document_id >= self._col_count:
            self._col_count = document_id + 1
        self._rows[term] = self._rows.get(term, 0) | (1 << document_id)

    def merge(self, other: TermMatrix) -> None:
        """Add every row of ``other`` to this matrix."""
        self._col_count = max(self._col_count, other._col_count)
        for term, row in other._rows.items():
            self._rows[term] = self._rows.get(term, 0) | row

    def term_query(self, term: str) -> int:
        """The row of ``term``; no bits set if it never occurs."""
        return self._rows.get(term, 0)

    def query_mask(self, node: LogicNode) -> int:
        """Evaluate a query to a mask with one bit per matching document."""
        match node:
            case FalseNode():
                return 0
            case TermNode(term=term):
                return self.term_query(term)
            case AndNode(lhs=lhs, rhs=rhs):
                return self.query_mask(lhs) & self.query_mask(rhs)
            case OrNode(lhs=lhs, rhs=rhs):
                return self.query_mask(lhs) | self.query_mask(rhs)
            case NotNode(operand=operand):
                return ~self.query_mask(operand) & ((1 << self._col_count) - 1)
        raise _unsupported(node)

    def query(self, node: LogicNode) -> set[int]:
        mask = self.query_mask(node)
        return {column for column in range(mask.bit_length()) if mask >> column & 1}


def feed_tokens(tokens: Iterable[Token], document_id: int, index: TermIndex) -> None:
    """Add every token of one document to ``index``, positioned by word ordinal."""
    for token in tokens:
        index.add_term(token.term, document_id, token.index)