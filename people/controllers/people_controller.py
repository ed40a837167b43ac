"""PeopleController - session state between a front-end and the store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence, Union

from people.exceptions.errors import SessionNotLoadedError
from people.logic.person_store import PathLike, PersonStore, check_index
from people.models.person import Person, parse_date
from people.models.sport import Sport, display, parse

logger = logging.getLogger(__name__)

TABLE_COLUMNS = ("ID", "First Name", "Last Name", "Age", "Favorite Sport")


@dataclass(frozen=True)
class PersonRow:
    """One line of a people table, ready for display."""

    index: int
    id: int
    first_name: str
    last_name: str
    age: int
    favorite_sport: str


class PeopleController:
    """
    Thin adapter used by shells and GUIs.

    Responsibilities:
    - Open a people file (optionally creating it)
    - Track unsaved changes
    - Apply add/edit/delete through the store

    No prompting and no widgets live here.
    """

    def __init__(self, *, store: Optional[PersonStore] = None) -> None:
        self._store = store or PersonStore()
        self._path: Optional[Path] = None
        self._people: List[Person] = []
        self._dirty = False

    # ------------------------------------------------------------------ #
    #  Session state                                                     #
    # ------------------------------------------------------------------ #
    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def is_loaded(self) -> bool:
        return self._path is not None

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def people(self) -> Sequence[Person]:
        self._require_loaded()
        return tuple(self._people)

    def open(self, path: PathLike, *, create_if_missing: bool = False) -> Sequence[Person]:
        """
        Load *path* and make it the current session.

        Load errors propagate; the previous session stays in place when
        loading fails.
        """
        path = Path(path)
        if create_if_missing and not path.exists():
            logger.info("File %s does not exist, creating it", path)
            self._store.initialize_empty_file(path)

        people = self._store.load(path)
        self._path = path
        self._people = people
        self._dirty = False
        return self.people

    def save(self) -> None:
        """Write the session back. On failure ``dirty`` is left untouched."""
        self._require_loaded()
        self._store.save(self._path, self._people)
        self._dirty = False

    # ------------------------------------------------------------------ #
    #  Mutations                                                         #
    # ------------------------------------------------------------------ #
    def new_person(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        date_of_birth: Union[date, str, None] = None,
        sport: Union[Sport, str, None] = None,
    ) -> Person:
        self._require_loaded()
        person = self._store.create(first_name, last_name, date_of_birth, sport)
        self._store.add(self._people, person)
        self._dirty = True
        return person

    def edit_person(
        self,
        index: int,
        *,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        date_of_birth: Union[date, str, None] = None,
        sport: Union[Sport, str, None] = None,
    ) -> Person:
        """
        Overwrite the supplied fields of the record at *index*.

        Raises:
            RecordIndexError: *index* is outside the list.
            ValueError: *date_of_birth* text is not ``YYYY-MM-DD``.
        """
        self._require_loaded()
        current = self._get(index)

        changes: dict[str, object] = {}
        if first_name is not None:
            changes["first_name"] = first_name
        if last_name is not None:
            changes["last_name"] = last_name
        if date_of_birth is not None:
            changes["date_of_birth"] = (
                date_of_birth if isinstance(date_of_birth, date) else parse_date(date_of_birth)
            )
        if sport is not None:
            changes["favorite_sport"] = parse(sport) if isinstance(sport, str) else sport

        replacement = current.with_changes(**changes)
        self._store.edit(self._people, index, replacement)
        self._dirty = True
        return replacement

    def delete_person(self, index: int) -> None:
        self._require_loaded()
        self._store.delete(self._people, index)
        self._dirty = True

    # ------------------------------------------------------------------ #
    #  Views                                                             #
    # ------------------------------------------------------------------ #
    @staticmethod
    def column_titles() -> List[str]:
        """Localized headers matching the fields of :class:`PersonRow` after ``index``."""
        from core.i18n.translation_manager import T  # noqa: WPS433

        return [T(title) for title in TABLE_COLUMNS]

    def rows(self, today: Optional[date] = None) -> List[PersonRow]:
        self._require_loaded()
        return [
            PersonRow(
                index=idx,
                id=p.id,
                first_name=p.first_name,
                last_name=p.last_name,
                age=p.age(today),
                favorite_sport=display(p.favorite_sport),
            )
            for idx, p in enumerate(self._people)
        ]

    # ------------------------------------------------------------------ #
    #  Internal helpers                                                  #
    # ------------------------------------------------------------------ #
    def _get(self, index: int) -> Person:
        check_index(self._people, index)
        return self._people[index]

    def _require_loaded(self) -> None:
        if self._path is None:
            raise SessionNotLoadedError("no people file has been opened")
