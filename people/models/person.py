"""
person.py

Person record and the date helpers shared by the store and front-ends.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from people.models.sport import Sport, render

DEFAULT_NAME = "Unknown"
DEFAULT_DATE_OF_BIRTH = date(1900, 1, 1)

_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_date(text: str) -> date:
    """Strict ``YYYY-MM-DD`` parsing, no whitespace trimming. Raises ``ValueError`` otherwise."""
    if not _ISO_DATE.fullmatch(text):
        raise ValueError(f"invalid date {text!r}, expected YYYY-MM-DD")
    return date.fromisoformat(text)


def parse_date_or_default(text: Optional[str]) -> date:
    """Like :func:`parse_date` but falls back to 1900-01-01."""
    if text is None:
        return DEFAULT_DATE_OF_BIRTH
    try:
        return parse_date(text)
    except ValueError:
        return DEFAULT_DATE_OF_BIRTH


def format_date(value: date) -> str:
    """``YYYY-MM-DD`` with a zero-padded four digit year."""
    return value.isoformat()


@dataclass
class Person:
    """One record of the people file.

    ``id`` is assigned by the store and never read back from storage.
    """

    id: int
    first_name: str
    last_name: str
    date_of_birth: date
    favorite_sport: Sport

    # -------------------- Derived values ------------------------------ #
    def age(self, today: Optional[date] = None) -> int:
        """Whole years as elapsed days // 365; future birth dates give 0."""
        today = today or date.today()
        days = (today - self.date_of_birth).days
        return max(days // 365, 0)

    @property
    def favorite_sport_glyph(self) -> str:
        return self.favorite_sport.glyph

    # -------------------- Copy helpers -------------------------------- #
    def with_changes(self, **changes) -> "Person":
        """Clone with some fields replaced. The id is kept."""
        return replace(self, **changes)

    def __str__(self) -> str:
        return (
            f"{self.first_name:<15} {self.last_name:<15} {self.age():<3} "
            f"{self.favorite_sport_glyph} {render(self.favorite_sport, localize=True):<16}"
        )
