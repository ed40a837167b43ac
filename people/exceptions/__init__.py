from people.exceptions.errors import (
    PeopleDbError,
    RecordFormatError,
    RecordIndexError,
    SessionNotLoadedError,
    StorageIOError,
)

__all__ = [
    "PeopleDbError",
    "RecordFormatError",
    "RecordIndexError",
    "SessionNotLoadedError",
    "StorageIOError",
]
