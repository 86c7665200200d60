"""Error taxonomy for sound indexing.

Only problems with the mandatory source documents are errors. Misses while
resolving individual events or variants are reported through
``Resolution`` values instead.
"""

from pathlib import Path


class IndexingError(Exception):
    """Base class for failures that abort an indexing run."""

    def __init__(self, path: str | Path, message: str):
        self.path = str(path)
        super().__init__(message)


class MissingInputError(IndexingError):
    """A mandatory source file does not exist."""

    def __init__(self, path: str | Path, label: str = "input file"):
        self.label = label
        shown = str(path) if str(path) else "(not set)"
        super().__init__(path, f"Required {label} not found: {shown}")


class ParseError(IndexingError):
    """A source file exists but is not valid JSON or has the wrong shape."""

    def __init__(self, path: str | Path, detail: str):
        self.detail = detail
        super().__init__(path, f"Failed to parse {path}: {detail}")
