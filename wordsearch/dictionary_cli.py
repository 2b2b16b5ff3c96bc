"""Command that builds a word dictionary from every file in a folder."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from functools import reduce
from os import PathLike
from pathlib import Path

from wordsearch.dictionary import Dictionary, add_file_to_dict
from wordsearch.storage import JsonDictionaryStorage, KeyValDictionaryStorage
from wordsearch.tokenizer import LexerStats

DEFAULT_BASE_PATH = "data/shakespeare"
JSON_PATH = Path("data/dictionary.json")
TEXT_PATH = Path("data/dictionary.txt")


def list_files(path: str | PathLike[str]) -> list[Path]:
    """The regular files directly inside ``path``."""
    with os.scandir(path) as entries:
        candidates = [Path(entry.path) for entry in entries]
    return [candidate for candidate in candidates if candidate.is_file()]


def _combine(
    a: tuple[Dictionary, LexerStats], b: tuple[Dictionary, LexerStats]
) -> tuple[Dictionary, LexerStats]:
    a[0].merge(b[0])
    a[1].merge(b[1])
    return a


def main(argv: Sequence[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    base_path = args[0] if args else DEFAULT_BASE_PATH

    try:
        paths = list_files(base_path)
    except OSError as err:
        print(f"Error occured: {err}")
        return 0
    if not paths:
        print("There are no files in the given folder!")
        return 0

    print(f'Processing {len(paths)} documents in folder "{base_path}"')
    print("Files: ")
    for i, path in enumerate(paths):
        print(f"\t{i}. {path}")

    with ThreadPoolExecutor(max_workers=os.cpu_count() or 1) as pool:
        results = [result for result in pool.map(add_file_to_dict, paths) if result is not None]

    if not results:
        print("No files were processed.")
        return 0

    dictionary, stats = reduce(_combine, results)
    print(
        f"Unique word count: {dictionary.unique_word_count()}. "
        f"Total word count: {dictionary.total_word_count()}"
    )
    print(
        f"Lines read: {stats.lines}. Characters read: {stats.characters_read}. "
        f"Characters ignored: {stats.characters_ignored}"
    )

    print("Writing dictionary to file...")
    json_storage = JsonDictionaryStorage()
    text_storage = KeyValDictionaryStorage()
    json_storage.write(JSON_PATH, dictionary)
    text_storage.write(TEXT_PATH, dictionary)

    print("Reading dictionary from a file")
    dict1 = json_storage.read(JSON_PATH)
    dict2 = text_storage.read(TEXT_PATH)
    print(
        f"Dictionary[1] (json) Unique word count: {dict1.unique_word_count()}. "
        f"Total word count: {dict1.total_word_count()}"
    )
    print(
        f"Dictionary[2] (txt) Unique word count: {dict2.unique_word_count()}. "
        f"Total word count: {dict2.total_word_count()}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())