"""Interactive boolean search over every file in a folder."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import TypeVar

from wordsearch.corpus import Corpus
from wordsearch.indexing import IndexSet, build_indexes
from wordsearch.query import QuerySyntaxError, parse_logic_expr

DEFAULT_BASE_PATH = "data/shakespeare"
INDEX_JSON_PATH = Path("data/index.json")
TWO_WORD_JSON_PATH = Path("data/two_word_index.json")
INDEX_TEXT_PATH = Path("data/index.txt")

POSITIONAL_NAME = "inverted coordinate index"
TWO_WORD_NAME = "two word index"

T = TypeVar("T")

_BYTE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB")


def time_call(func: Callable[[], T]) -> tuple[T, float]:
    """Call ``func`` and return its result with the elapsed seconds."""
    start = time.perf_counter()
    result = func()
    return result, time.perf_counter() - start


def _format_duration(seconds: float) -> str:
    if seconds >= 1:
        return f"{seconds:.3f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.3f}µs"
    return f"{seconds * 1e9:.0f}ns"


def _human_bytes(size: float) -> str:
    for unit in _BYTE_UNITS[:-1]:
        if abs(size) < 1024:
            return f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} {_BYTE_UNITS[-1]}"


def format_results(document_ids: Iterable[int], corpus: Corpus) -> str:
    """One numbered line per known document, in ascending id order."""
    found = (
        (document_id, document)
        for document_id in sorted(document_ids)
        if (document := corpus.document(document_id)) is not None
    )
    return "\n".join(
        f"\t{i}. [Document({document_id})] {document.name}"
        for i, (document_id, document) in enumerate(found)
    )


def run_query(
    query_text: str, indexes: IndexSet, corpus: Corpus, use_positional: bool = True
) -> list[int]:
    """Answer a query, print the matches and return their sorted ids.

    ``use_positional`` picks the positional inverted index; otherwise the
    two-word index is used. Raises :class:`QuerySyntaxError` for a bad
    query and ``ValueError`` for one the chosen index cannot answer.
    """
    try:
        ast = parse_logic_expr(query_text)
    except QuerySyntaxError as err:
        raise QuerySyntaxError("Invalid query") from err

    if use_positional:
        result, elapsed = time_call(lambda: indexes.inverted.query(ast))
        matches = indexes.document_index.query(ast) == indexes.matrix.query(ast)
        print(f"Results match: {str(matches).lower()}")
    else:
        result, elapsed = time_call(lambda: indexes.two_word.query(ast))

    print(f"Query time: {_format_duration(elapsed)}.")
    if result:
        print(f"Result:\n{format_results(result, corpus)}")
    else:
        print("No matches found.")
    return sorted(result)


def _parse_limit(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


def _save_indexes(indexes: IndexSet) -> None:
    INDEX_JSON_PATH.write_text(indexes.inverted.to_json(), encoding="utf-8")
    TWO_WORD_JSON_PATH.write_text(indexes.two_word.to_json(), encoding="utf-8")
    with INDEX_TEXT_PATH.open("w", encoding="utf-8", newline="\n") as stream:
        indexes.document_index.save(stream)


def _query_loop(indexes: IndexSet, corpus: Corpus) -> None:
    use_positional = True
    while True:
        print("Please input your query or 'q' to exit: ")
        line = sys.stdin.readline()
        if not line or line.strip() == "q":
            break
        if line.strip() == "s":
            use_positional = not use_positional
            name = POSITIONAL_NAME if use_positional else TWO_WORD_NAME
            print(f"Switched index to {name}. Input 's' to return back.")
            continue
        try:
            run_query(line, indexes, corpus, use_positional)
        except (ValueError, TypeError) as err:
            print(f"Error: {err}. Caused by: {err.__cause__ or err}")
        print()


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    base_path = args[0] if args else DEFAULT_BASE_PATH
    file_limit = _parse_limit(args[1]) if len(args) > 1 else None

    print("Processing...")
    try:
        corpus, opening_time = time_call(lambda: Corpus.from_directory(base_path, file_limit))
    except OSError as err:
        print(f"Error occured: {err}")
        return 1
    print(f"Opening files took: {_format_duration(opening_time)}")
    print(f'Processing {len(corpus)} documents in folder "{base_path}"')
    print("Files: ")
    for i, document in enumerate(corpus):
        print(f"\t{i}. {document.name}")

    indexes, index_time = time_call(lambda: build_indexes(corpus))
    print(f"Indexing took: {_format_duration(index_time)}")
    data_size = corpus.data_size()
    print(f"Amount of data indexed: {_human_bytes(data_size)}")
    speed = data_size / index_time if index_time > 0 else float(data_size)
    print(f"Speed is: {_human_bytes(speed)}/s")

    if indexes is None:
        print("No files were processed.")
        return 0

    print(
        f"Unique word count: {indexes.inverted.unique_word_count()}. "
        f"Total word count: {indexes.inverted.total_word_count()}"
    )
    stats = indexes.stats
    print(
        f"Lines read: {stats.lines}. Characters read: {stats.characters_read}. "
        f"Characters ignored: {stats.characters_ignored}"
    )

    print("Writing index to a file...")
    _save_indexes(indexes)
    print(f"Index size: {_human_bytes(INDEX_TEXT_PATH.stat().st_size)}")

    _query_loop(indexes, corpus)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())