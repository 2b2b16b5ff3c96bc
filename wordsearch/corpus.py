"""A set of text documents loaded from a folder."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

__all__ = ["Corpus", "Document", "list_files", "read_text_file"]


def list_files(path: str | PathLike[str]) -> list[Path]:
    """The regular files directly inside ``path``, in name order.

    Raises ``OSError`` when the folder cannot be listed.
    """
    files = []
    for entry in Path(path).iterdir():
        try:
            if entry.is_file():
                files.append(entry)
        except OSError:
            continue
    return sorted(files)


def read_text_file(path: str | PathLike[str]) -> str:
    """Read a whole UTF-8 file; an empty file gives an empty string.

    Raises ``ValueError`` when the data is not UTF-8 and ``OSError`` when
    the file cannot be read.
    """
    data = Path(path).read_bytes()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as err:
        raise ValueError("File contains non UTF-8 data") from err


@dataclass(frozen=True)
class Document:
    """One indexed text and the file it came from."""

    id: int
    path: Path
    text: str = field(repr=False)

    @property
    def name(self) -> str:
        return str(self.path)


class Corpus:
    """Documents numbered from zero in the order they were added."""

    def __init__(self, documents: list[Document] | None = None) -> None:
        self._documents: list[Document] = list(documents or [])

    @classmethod
    def from_directory(
        cls, base_path: str | PathLike[str], file_limit: int | None = None
    ) -> Corpus:
        """Load the regular files directly inside ``base_path``.

        At most ``file_limit`` files are tried. Files that cannot be read or
        are not UTF-8 are reported and skipped.
        """
        paths = list_files(base_path)
        if file_limit is not None:
            paths = paths[:file_limit]

        documents: list[Document] = []
        for path in paths:
            try:
                text = read_text_file(path)
            except (OSError, ValueError) as err:
                cause = err.__cause__ or err
                print(f"Ignoring file {str(path)!r}. Error: {err}. Caused by: {cause}")
                continue
            documents.append(Document(len(documents), path, text))
        return cls(documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)

    def document(self, document_id: int) -> Document | None:
        """The document with this id, or ``None``."""
        if 0 <= document_id < len(self._documents):
            return self._documents[document_id]
        return None

    def document_ids(self) -> range:
        return range(len(self._documents))

    def document_text(self, document_id: int) -> str:
        """The text of a document; ``KeyError`` if there is no such document."""
        document = self.document(document_id)
        if document is None:
            raise KeyError(f"Document with id Document({document_id}) doesn't exist")
        return document.text

    def data_size(self) -> int:
        """Total size in bytes of all loaded texts."""
        return sum(len(document.text.encode("utf-8")) for document in self._documents)