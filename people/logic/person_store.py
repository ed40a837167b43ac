"""
person_store.py
===============

CSV persistence and list operations for :class:`Person` records.

The store keeps no session state: callers own the ``list[Person]`` and
decide when to save. Every save rewrites the whole file, written to a
temporary sibling first and then moved over the target.

File format (UTF-8, standard CSV quoting)::

    first_name,last_name,date_of_birth,favorite_sport
    Ada,Lovelace,1815-12-10,Cycling
"""
from __future__ import annotations

import contextlib
import csv
import logging
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from people.exceptions.errors import RecordFormatError, RecordIndexError, StorageIOError
from people.logic.id_sequence import IdSequence, shared_sequence
from people.models.person import (
    DEFAULT_NAME,
    Person,
    format_date,
    parse_date,
    parse_date_or_default,
)
from people.models.sport import UNKNOWN_SPORT, Sport, parse, render

logger = logging.getLogger(__name__)

CSV_HEADERS: tuple[str, ...] = ("first_name", "last_name", "date_of_birth", "favorite_sport")

PathLike = Union[str, Path]


def _plural(count: int) -> str:
    return "person" if count == 1 else "people"


class PersonStore:
    """Creates, loads and saves person records.

    Args:
        sequence: id generator; defaults to the process-wide shared one.
    """

    def __init__(self, sequence: Optional[IdSequence] = None) -> None:
        self._sequence = sequence or shared_sequence

    @property
    def sequence(self) -> IdSequence:
        return self._sequence

    # ------------------------------------------------------------------ #
    #  Creation                                                          #
    # ------------------------------------------------------------------ #
    def create(
        self,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        date_of_birth: Union[date, str, None] = None,
        sport: Union[Sport, str, None] = None,
    ) -> Person:
        """
        New record with the next id.

        Missing names become "Unknown", a missing or unparsable birth date
        becomes 1900-01-01, a missing sport becomes ``OtherSport("Unknown")``.
        Sport text is parsed with :func:`people.models.sport.parse`.
        """
        if isinstance(date_of_birth, date):
            dob = date_of_birth
        else:
            dob = parse_date_or_default(date_of_birth)

        if sport is None:
            favorite = UNKNOWN_SPORT
        elif isinstance(sport, str):
            favorite = parse(sport)
        else:
            favorite = sport

        return Person(
            id=self._sequence.next_id(),
            first_name=DEFAULT_NAME if first_name is None else first_name,
            last_name=DEFAULT_NAME if last_name is None else last_name,
            date_of_birth=dob,
            favorite_sport=favorite,
        )

    # ------------------------------------------------------------------ #
    #  Load / Save                                                       #
    # ------------------------------------------------------------------ #
    def load(self, path: PathLike) -> List[Person]:
        """
        Read all records from *path*.

        Ids stored in the file (if any) are ignored; every record gets a
        fresh id. Any bad row fails the whole load.

        Raises:
            StorageIOError: the file cannot be opened or read.
            RecordFormatError: a row cannot be parsed.
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8-sig", newline="") as fh:
                people = self._read_rows(path, csv.reader(fh))
        except UnicodeDecodeError as exc:
            raise RecordFormatError(path, None, f"file is not valid UTF-8: {exc}") from exc
        except OSError as exc:
            raise StorageIOError(path, exc.strerror or str(exc)) from exc

        logger.info("Read %d %s from CSV file: %s", len(people), _plural(len(people)), path)
        return people

    def save(self, path: PathLike, people: Sequence[Person]) -> None:
        """
        Write all *people* to *path*, replacing its content.

        Raises:
            StorageIOError: the file cannot be created or written.
        """
        path = Path(path)
        self._atomic_write(path, (self._to_row(p) for p in people))
        logger.info("Wrote %d %s to CSV file: %s", len(people), _plural(len(people)), path)

    def initialize_empty_file(self, path: PathLike) -> None:
        """Create *path* containing only the header row."""
        path = Path(path)
        self._atomic_write(path, ())
        logger.info("Created new CSV file: %s", path)

    # ------------------------------------------------------------------ #
    #  List operations                                                   #
    # ------------------------------------------------------------------ #
    @staticmethod
    def add(people: List[Person], person: Person) -> None:
        people.append(person)

    @staticmethod
    def delete(people: List[Person], index: int) -> None:
        check_index(people, index)
        del people[index]

    @staticmethod
    def edit(people: List[Person], index: int, replacement: Person) -> None:
        """Replace the record at *index* wholesale."""
        check_index(people, index)
        people[index] = replacement

    # ------------------------------------------------------------------ #
    #  Internal helpers                                                  #
    # ------------------------------------------------------------------ #
    def _read_rows(self, path: Path, reader) -> List[Person]:
        try:
            header = next((row for row in reader if row), None)
            if header is None:
                return []
            columns = self._column_positions(path, reader.line_num, header)

            people: List[Person] = []
            for row in reader:
                if not row:
                    continue
                if len(row) != len(header):
                    raise RecordFormatError(
                        path,
                        reader.line_num,
                        f"expected {len(header)} columns, found {len(row)}",
                    )
                people.append(self._from_row(path, reader.line_num, row, columns))
            return people
        except csv.Error as exc:
            raise RecordFormatError(path, reader.line_num, f"malformed CSV: {exc}") from exc

    @staticmethod
    def _column_positions(path: Path, line: int, header: List[str]) -> dict[str, int]:
        names = [name.strip() for name in header]
        missing = [col for col in CSV_HEADERS if col not in names]
        if missing:
            raise RecordFormatError(path, line, f"missing columns: {', '.join(missing)}")
        return {col: names.index(col) for col in CSV_HEADERS}

    def _from_row(self, path: Path, line: int, row: List[str], columns: dict[str, int]) -> Person:
        raw_date = row[columns["date_of_birth"]]
        try:
            dob = parse_date(raw_date)
        except ValueError as exc:
            raise RecordFormatError(path, line, str(exc)) from exc

        return Person(
            id=self._sequence.next_id(),
            first_name=row[columns["first_name"]],
            last_name=row[columns["last_name"]],
            date_of_birth=dob,
            favorite_sport=parse(row[columns["favorite_sport"]]),
        )

    @staticmethod
    def _to_row(person: Person) -> List[str]:
        return [
            person.first_name,
            person.last_name,
            format_date(person.date_of_birth),
            render(person.favorite_sport),
        ]

    @staticmethod
    def _atomic_write(path: Path, rows: Iterable[List[str]]) -> None:
        tmp = path.with_name(path.name + ".tmp")
        replaced = False
        try:
            with tmp.open("w", encoding="utf-8", newline="") as fh:
                writer = csv.writer(fh)
                writer.writerow(CSV_HEADERS)
                writer.writerows(rows)
            tmp.replace(path)
            replaced = True
        except UnicodeEncodeError as exc:
            raise StorageIOError(path, f"text cannot be encoded as UTF-8: {exc}") from exc
        except OSError as exc:
            raise StorageIOError(path, exc.strerror or str(exc)) from exc
        finally:
            if not replaced:
                with contextlib.suppress(OSError):
                    tmp.unlink(missing_ok=True)


def check_index(people: Sequence[Person], index: int) -> None:
    """Raise :class:`RecordIndexError` unless ``0 <= index < len(people)``."""
    if not 0 <= index < len(people):
        raise RecordIndexError(index, len(people))
