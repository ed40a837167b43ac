"""
People feature package.

Person records with a favorite sport, persisted as a CSV file. Front-ends
(shell, GUI) talk to :class:`PeopleController` or use the store directly.

A front-end sets up logging once at startup with
:func:`core.logging.log_setup.configure_logging`, which reads the level and
format from the ``[Logging]`` config section.
"""

from people.controllers.people_controller import PeopleController, PersonRow
from people.exceptions.errors import (
    PeopleDbError,
    RecordFormatError,
    RecordIndexError,
    SessionNotLoadedError,
    StorageIOError,
)
from people.logic.id_sequence import IdSequence
from people.logic.person_store import CSV_HEADERS, PersonStore
from people.models.person import Person
from people.models.sport import KnownSport, OtherSport, Sport
from people.models.sport import all_known as all_known_sports
from people.models.sport import glyph as sport_glyph
from people.models.sport import parse as parse_sport
from people.models.sport import render as render_sport

__all__ = [
    "CSV_HEADERS",
    "IdSequence",
    "KnownSport",
    "OtherSport",
    "PeopleController",
    "PeopleDbError",
    "Person",
    "PersonRow",
    "PersonStore",
    "RecordFormatError",
    "RecordIndexError",
    "SessionNotLoadedError",
    "Sport",
    "StorageIOError",
    "all_known_sports",
    "parse_sport",
    "render_sport",
    "sport_glyph",
]
