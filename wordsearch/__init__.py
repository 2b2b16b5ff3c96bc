"""Word dictionaries, positional, matrix, two-word and document indexes, and boolean search over text files."""

__version__ = "0.1.0"