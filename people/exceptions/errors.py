"""People feature exceptions.

All errors raised by the record store derive from :class:`PeopleDbError`,
so front-ends can catch the whole family with one ``except`` clause and
still tell fatal load errors apart from recoverable input mistakes.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class PeopleDbError(Exception):
    """Base exception for the people feature."""


class StorageIOError(PeopleDbError):
    """Raised when a data file cannot be opened, created or written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class RecordFormatError(PeopleDbError, ValueError):
    """Raised when a row of a data file cannot be parsed.

    ``row`` is the 1-based physical line in the file (the header is line 1),
    or ``None`` when the failure is not tied to a single row.
    """

    def __init__(self, path: str | Path, row: Optional[int], reason: str) -> None:
        self.path = Path(path)
        self.row = row
        self.reason = reason
        where = f"{self.path}, row {row}" if row is not None else str(self.path)
        super().__init__(f"{where}: {reason}")


class RecordIndexError(PeopleDbError, IndexError):
    """Raised when edit/delete address a position outside the list."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Index out of bounds: {index} (have {length} records)")


class SessionNotLoadedError(PeopleDbError):
    """Raised when the controller is used before a file was opened."""
