"""A document-level inverted index with a plain-text file format."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TextIO

from wordsearch.query import AndNode, FalseNode, LogicNode, NotNode, OrNode, TermNode

TERM_SEPARATOR = ":"
DOCUMENT_SEPARATOR = ","

_DOCUMENT_ID = re.compile(r"\+?[0-9]+")


class IndexFormatError(ValueError):
    """A saved index could not be read."""


class DocumentIndex:
    """Maps each term to the set of documents that contain it."""

    def __init__(self) -> None:
        self._documents: set[int] = set()
        self._index: dict[str, set[int]] = {}

    def __repr__(self) -> str:
        return f"DocumentIndex({self._index!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DocumentIndex):
            return NotImplemented
        return self._documents == other._documents and self._index == other._index

    __hash__ = None  # type: ignore[assignment]

    def add_term(self, term: str, document_id: int) -> None:
        self._index.setdefault(term, set()).add(document_id)
        self._documents.add(document_id)

    def merge(self, other: DocumentIndex) -> None:
        """Add every term of ``other`` to this index."""
        for term, documents in other._index.items():
            self._documents.update(documents)
            self._index.setdefault(term, set()).update(documents)

    def unique_word_count(self) -> int:
        return len(self._index)

    def term_documents(self, term: str) -> set[int]:
        """Documents containing ``term``; empty if it never occurs."""
        return set(self._index.get(term, ()))

    def documents(self) -> set[int]:
        return set(self._documents)

    def query(self, node: LogicNode) -> set[int]:
        """The ids of the documents matching a parsed query."""
        match node:
            case FalseNode():
                return set()
            case TermNode(term=term):
                return self.term_documents(term)
            case AndNode(lhs=lhs, rhs=rhs):
                return self.query(lhs) & self.query(rhs)
            case OrNode(lhs=lhs, rhs=rhs):
                return self.query(lhs) | self.query(rhs)
            case NotNode(operand=operand):
                return self._documents - self.query(operand)
        raise TypeError("Operation not supported.")

    def save(self, stream: TextIO) -> None:
        """Write one ``term:id,id,...`` line per term."""
        for term, documents in self._index.items():
            ids = DOCUMENT_SEPARATOR.join(str(document_id) for document_id in sorted(documents))
            stream.write(f"{term}{TERM_SEPARATOR}{ids}\n")

    @classmethod
    def load(cls, stream: Iterable[str]) -> DocumentIndex:
        """Read an index written by :meth:`save`.

        Raises :class:`IndexFormatError` on a malformed line.
        """
        index = cls()
        for raw in stream:
            line = raw.removesuffix("\n").removesuffix("\r")
            parts = line.split(TERM_SEPARATOR)
            if len(parts) != 2:
                raise IndexFormatError("Expected term and document ids")
            term, ids_text = parts
            documents: set[int] = set()
            for id_text in ids_text.split(DOCUMENT_SEPARATOR):
                if not _DOCUMENT_ID.fullmatch(id_text):
                    raise IndexFormatError(f"Invalid document id {id_text!r} for term {term!r}")
                documents.add(int(id_text))
            index._index[term] = documents
        index._documents = {
            document_id for documents in index._index.values() for document_id in documents
        }
        return index