"""Where each term occurs: word positions grouped by document."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Mapping


class TermPositions:
    """Word positions of a term, keyed by document id.

    A document may be present with no positions at all. This records that
    the document takes part in a result without pinning a place in it.
    """

    __slots__ = ("_positions",)

    def __init__(self, positions: Mapping[int, Iterable[int]] | None = None) -> None:
        self._positions: dict[int, set[int]] = {
            document_id: set(offsets) for document_id, offsets in (positions or {}).items()
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TermPositions):
            return NotImplemented
        return self._positions == other._positions

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TermPositions({self.to_dict()!r})"

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._positions

    def copy(self) -> TermPositions:
        return TermPositions(self._positions)

    def to_dict(self) -> dict[int, list[int]]:
        """Document id to its sorted positions."""
        return {document_id: sorted(offsets) for document_id, offsets in self._positions.items()}

    def positions(self, document_id: int) -> list[int]:
        """Sorted positions in one document; empty if the document is absent."""
        return sorted(self._positions.get(document_id, ()))

    def documents(self) -> frozenset[int]:
        """Ids of every document present."""
        return frozenset(self._positions)

    def positions_count(self) -> int:
        return sum(len(offsets) for offsets in self._positions.values())

    def add_document(self, document_id: int) -> None:
        """Make the document present without adding a position."""
        self._positions.setdefault(document_id, set())

    def add_position(self, document_id: int, position: int) -> None:
        self._positions.setdefault(document_id, set()).add(position)

    def merge(self, other: TermPositions) -> None:
        """Add every document and position of ``other`` to this one."""
        for document_id, offsets in other._positions.items():
            self._positions.setdefault(document_id, set()).update(offsets)

    def close_union(self, other: TermPositions, left: int, right: int) -> TermPositions:
        """Positions where this term and ``other`` occur near each other.

        For each position ``p`` of this term, the positions of ``other`` in
        ``[p - left, p + right]`` are kept together with ``p`` itself.
        Documents left with no positions are dropped.
        """
        result: dict[int, set[int]] = {}
        for document_id, offsets in self._positions.items():
            other_offsets = other._positions.get(document_id)
            if other_offsets is None:
                continue
            ordered = sorted(other_offsets)
            found: set[int] = set()
            for position in offsets:
                low = bisect_left(ordered, max(0, position - left))
                high = bisect_right(ordered, position + right)
                if low < high:
                    found.update(ordered[low:high])
                    found.add(position)
            if found:
                result[document_id] = found
        return TermPositions(result)

    def document_sub(self, other: TermPositions) -> TermPositions:
        """The documents of this one that ``other`` does not contain."""
        return TermPositions(
            {
                document_id: offsets
                for document_id, offsets in self._positions.items()
                if document_id not in other._positions
            }
        )

    def __or__(self, other: TermPositions) -> TermPositions:
        result = self.copy()
        result.merge(other)
        return result

    def __and__(self, other: TermPositions) -> TermPositions:
        """Documents present in both, with the positions they share."""
        return TermPositions(
            {
                document_id: offsets & other._positions[document_id]
                for document_id, offsets in self._positions.items()
                if document_id in other._positions
            }
        )

    def __sub__(self, other: TermPositions) -> TermPositions:
        """Positions of this one not in ``other``; emptied documents are dropped."""
        result: dict[int, set[int]] = {}
        for document_id, offsets in self._positions.items():
            remaining = offsets - other._positions.get(document_id, set())
            if remaining:
                result[document_id] = remaining
        return TermPositions(result)