"""An index of adjacent word pairs ("biwords") for two-word phrase queries."""

from __future__ import annotations

import json

from wordsearch.index import TermIndex
from wordsearch.query import AndNode, FalseNode, LogicNode, NotNode, OrNode, TermNode

PAIR_SEPARATOR = "_"
_ONLY_PAIRS = "Only 2 word queries are supported."


class TwoWordIndex(TermIndex):
    """Maps each pair of consecutive words in a document to the documents holding it.

    Terms must be added in document order: each term is paired with the one
    added just before it, provided both belong to the same document.
    """

    def __init__(self) -> None:
        self._index: dict[str, set[int]] = {}
        self._previous: tuple[str, int] | None = None

    def __repr__(self) -> str:
        return f"TwoWordIndex({self._index!r})"

    def add_term(self, term: str, document_id: int, position: int) -> None:
        previous, self._previous = self._previous, (term, document_id)
        if previous is None:
            return
        previous_term, previous_document = previous
        if previous_document == document_id:
            pair = f"{previous_term}{PAIR_SEPARATOR}{term}"
            self._index.setdefault(pair, set()).add(document_id)

    def merge(self, other: TwoWordIndex) -> None:
        """Add every pair of ``other`` to this index."""
        for pair, documents in other._index.items():
            self._index.setdefault(pair, set()).update(documents)

    def unique_word_count(self) -> int:
        """Number of distinct pairs plus one, the word count they imply."""
        return len(self._index) + 1

    def term_documents(self, term: str) -> set[int]:
        """Documents holding a joined pair such as ``"good_night"``."""
        return set(self._index.get(term, ()))

    def phrase_documents(self, first: str, second: str) -> set[int]:
        """Documents where ``second`` directly follows ``first``."""
        return self.term_documents(f"{first}{PAIR_SEPARATOR}{second}")

    def documents(self) -> set[int]:
        """Every document that holds at least one pair."""
        return {document_id for documents in self._index.values() for document_id in documents}

    def query(self, node: LogicNode) -> set[int]:
        """Evaluate a query; single terms cannot be answered and raise ``ValueError``."""
        match node:
            case FalseNode():
                return set()
            case TermNode():
                raise ValueError(_ONLY_PAIRS)
            case AndNode(lhs=lhs, rhs=rhs):
                return self.query(lhs) & self.query(rhs)
            case OrNode(lhs=lhs, rhs=rhs):
                return self.query(lhs) | self.query(rhs)
            case NotNode(operand=operand):
                return self.documents() - self.query(operand)
        raise TypeError(f"Unsupported query node: {node!r}")

    def to_json(self) -> str:
        """The index as pretty-printed JSON: each pair to its sorted document ids."""
        data = {pair: sorted(documents) for pair, documents in self._index.items()}
        return json.dumps(data, indent=2, ensure_ascii=False)