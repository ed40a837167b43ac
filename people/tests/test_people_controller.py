"""
people/tests/test_people_controller.py

Tests for the session adapter used by front-ends: dirty tracking,
clone-then-overwrite editing and error propagation.
"""

from __future__ import annotations

import tempfile
import unittest
from datetime import date
from pathlib import Path
from unittest import mock

from core.config.config_service import config_service
from people.controllers.people_controller import PeopleController, PersonRow
from people.exceptions.errors import (
    RecordFormatError,
    RecordIndexError,
    SessionNotLoadedError,
    StorageIOError,
)
from people.logic.id_sequence import IdSequence
from people.logic.person_store import CSV_HEADERS, PersonStore
from people.models.sport import KnownSport, OtherSport

HEADER = ",".join(CSV_HEADERS)


class TestPeopleController(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.path = self.dir / "people.csv"
        self.path.write_text(
            f"{HEADER}\nAda,Lovelace,1815-12-10,Cycling\nAlan,Turing,1912-06-23,Running\n",
            encoding="utf-8",
        )
        self.store = PersonStore(IdSequence())
        self.ctrl = PeopleController(store=self.store)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    # -------------------- open ----------------------------------------- #
    def test_open_loads_and_is_clean(self) -> None:
        people = self.ctrl.open(self.path)
        self.assertEqual(len(people), 2)
        self.assertTrue(self.ctrl.is_loaded)
        self.assertFalse(self.ctrl.dirty)
        self.assertEqual(self.ctrl.path, self.path)

    def test_open_missing_file_without_create(self) -> None:
        with self.assertRaises(StorageIOError):
            self.ctrl.open(self.dir / "new.csv")
        self.assertFalse(self.ctrl.is_loaded)

    def test_open_missing_file_with_create(self) -> None:
        new_path = self.dir / "new.csv"
        self.assertEqual(self.ctrl.open(new_path, create_if_missing=True), ())
        self.assertTrue(new_path.exists())

    def test_failed_open_keeps_previous_session(self) -> None:
        self.ctrl.open(self.path)
        bad = self.dir / "bad.csv"
        bad.write_text(f"{HEADER}\nX,Y,not-a-date,Golf\n", encoding="utf-8")
        with self.assertRaises(RecordFormatError):
            self.ctrl.open(bad)
        self.assertEqual(self.ctrl.path, self.path)
        self.assertEqual(len(self.ctrl.people), 2)

    def test_use_before_open(self) -> None:
        with self.assertRaises(SessionNotLoadedError):
            self.ctrl.new_person("x")
        with self.assertRaises(SessionNotLoadedError):
            self.ctrl.save()

    # -------------------- mutations ------------------------------------ #
    def test_new_person_marks_dirty(self) -> None:
        self.ctrl.open(self.path)
        person = self.ctrl.new_person("Grace", "Hopper", "1906-12-09", "rowing")
        self.assertTrue(self.ctrl.dirty)
        self.assertIs(self.ctrl.people[-1], person)
        self.assertIs(person.favorite_sport, KnownSport.ROWING)

    def test_edit_overwrites_only_given_fields(self) -> None:
        self.ctrl.open(self.path)
        before = self.ctrl.people[0]
        after = self.ctrl.edit_person(0, last_name="King", sport="Bouldering")
        self.assertEqual(after.id, before.id)
        self.assertEqual(after.first_name, "Ada")
        self.assertEqual(after.last_name, "King")
        self.assertEqual(after.date_of_birth, date(1815, 12, 10))
        self.assertEqual(after.favorite_sport, OtherSport("Bouldering"))
        self.assertEqual(self.ctrl.people[1].first_name, "Alan")
        self.assertTrue(self.ctrl.dirty)

    def test_edit_with_bad_date_changes_nothing(self) -> None:
        self.ctrl.open(self.path)
        with self.assertRaises(ValueError):
            self.ctrl.edit_person(0, first_name="X", date_of_birth="1815/12/10")
        self.assertEqual(self.ctrl.people[0].first_name, "Ada")
        self.assertFalse(self.ctrl.dirty)

    def test_edit_and_delete_out_of_range_are_recoverable(self) -> None:
        self.ctrl.open(self.path)
        with self.assertRaises(RecordIndexError):
            self.ctrl.edit_person(2, first_name="X")
        with self.assertRaises(RecordIndexError):
            self.ctrl.delete_person(5)
        self.assertEqual(len(self.ctrl.people), 2)
        self.assertFalse(self.ctrl.dirty)

    def test_edit_rejects_negative_index_like_the_store(self) -> None:
        self.ctrl.open(self.path)
        with self.assertRaises(RecordIndexError) as ctx:
            self.ctrl.edit_person(-1, first_name="X")
        self.assertEqual((ctx.exception.index, ctx.exception.length), (-1, 2))
        with mock.patch(
            "people.controllers.people_controller.check_index",
            side_effect=RecordIndexError(0, 0),
        ) as check:
            with self.assertRaises(RecordIndexError):
                self.ctrl.edit_person(0, first_name="X")
        check.assert_called_once()
        self.assertEqual(self.ctrl.people[0].first_name, "Ada")

    def test_delete(self) -> None:
        self.ctrl.open(self.path)
        self.ctrl.delete_person(0)
        self.assertEqual([p.first_name for p in self.ctrl.people], ["Alan"])
        self.assertTrue(self.ctrl.dirty)

    # -------------------- save ----------------------------------------- #
    def test_save_clears_dirty_and_persists(self) -> None:
        self.ctrl.open(self.path)
        self.ctrl.new_person("Grace", "Hopper", date(1906, 12, 9), KnownSport.ROWING)
        self.ctrl.save()
        self.assertFalse(self.ctrl.dirty)
        reloaded = PersonStore(IdSequence()).load(self.path)
        self.assertEqual([p.first_name for p in reloaded], ["Ada", "Alan", "Grace"])

    def test_failed_save_keeps_dirty_and_people(self) -> None:
        self.ctrl.open(self.path)
        self.ctrl.delete_person(0)
        error = StorageIOError(self.path, "disk full")
        with mock.patch.object(self.store, "save", side_effect=error):
            with self.assertRaises(StorageIOError):
                self.ctrl.save()
        self.assertTrue(self.ctrl.dirty)
        self.assertEqual([p.first_name for p in self.ctrl.people], ["Alan"])

    # -------------------- views ---------------------------------------- #
    def test_rows(self) -> None:
        self.ctrl.open(self.path)
        with mock.patch.object(config_service.general, "language", "en"):
            rows = self.ctrl.rows(today=date(2024, 6, 15))
        self.assertEqual(
            rows[1],
            PersonRow(
                index=1,
                id=self.ctrl.people[1].id,
                first_name="Alan",
                last_name="Turing",
                age=112,
                favorite_sport="Running \U0001f3c3",
            ),
        )

    def test_column_titles_are_localized(self) -> None:
        with mock.patch.object(config_service.general, "language", "de"):
            titles = PeopleController.column_titles()
        self.assertEqual(titles, ["ID", "Vorname", "Nachname", "Alter", "Lieblingssport"])

    def test_people_view_is_read_only(self) -> None:
        self.ctrl.open(self.path)
        self.assertIsInstance(self.ctrl.people, tuple)


if __name__ == "__main__":
    unittest.main()
