"""
sport.py

Favorite-sport category type.

A sport is either one of the fixed catalog entries (:class:`KnownSport`)
or an :class:`OtherSport` carrying an arbitrary label. ``Sport`` is the
union of both, so code that needs to tell them apart can do so with an
``isinstance`` check and type checkers see every case.

Parsing never fails: unrecognized text becomes ``OtherSport``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union


class KnownSport(Enum):
    """Fixed sport catalog. The value is the canonical (English) label."""

    BASEBALL = "Baseball"
    SOCCER = "Soccer"
    BASKETBALL = "Basketball"
    TENNIS = "Tennis"
    GOLF = "Golf"
    HOCKEY = "Hockey"
    CRICKET = "Cricket"
    RUGBY = "Rugby"
    HANDBALL = "Handball"
    FOOTBALL = "Football"
    VOLLEYBALL = "Volleyball"
    WATER_POLO = "Water polo"
    EQUESTRIAN = "Equestrian"
    SWIMMING = "Swimming"
    RUNNING = "Running"
    CYCLING = "Cycling"
    SKATING = "Skating"
    SKATEBOARDING = "Skateboarding"
    SURFING = "Surfing"
    SKIING = "Skiing"
    SNOWBOARDING = "Snowboarding"
    ROWING = "Rowing"
    WRESTLING = "Wrestling"

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OtherSport:
    """A sport outside the catalog, stored as the text the user typed."""

    text: str

    @property
    def glyph(self) -> str:
        return ""

    def __str__(self) -> str:
        return self.text


Sport = Union[KnownSport, OtherSport]

UNKNOWN_SPORT = OtherSport("Unknown")

_GLYPHS = {
    KnownSport.BASEBALL: "⚾",
    KnownSport.SOCCER: "⚽",
    KnownSport.BASKETBALL: "\U0001f3c0",
    KnownSport.TENNIS: "\U0001f3be",
    KnownSport.GOLF: "⛳",
    KnownSport.HOCKEY: "\U0001f3d2",
    KnownSport.CRICKET: "\U0001f3cf",
    KnownSport.RUGBY: "\U0001f3c9",
    KnownSport.HANDBALL: "\U0001f93e",
    KnownSport.FOOTBALL: "\U0001f3c8",
    KnownSport.VOLLEYBALL: "\U0001f3d0",
    KnownSport.WATER_POLO: "\U0001f93d",
    KnownSport.EQUESTRIAN: "\U0001f40e",
    KnownSport.SWIMMING: "\U0001f3ca",
    KnownSport.RUNNING: "\U0001f3c3",
    KnownSport.CYCLING: "\U0001f6b4",
    KnownSport.SKATING: "\U0001f6fc",
    KnownSport.SKATEBOARDING: "\U0001f6f9",
    KnownSport.SURFING: "\U0001f3c4",
    KnownSport.SKIING: "\U0001f3bf",
    KnownSport.SNOWBOARDING: "\U0001f3c2",
    KnownSport.ROWING: "\U0001f6a3",
    KnownSport.WRESTLING: "\U0001f93c",
}

# lookup key -> category; "water_polo" is accepted as a synonym
_LOOKUP = {sport.value.lower(): sport for sport in KnownSport}
_LOOKUP["water_polo"] = KnownSport.WATER_POLO


# --------------------------------------------------------------------------- #
#  Public API
# --------------------------------------------------------------------------- #

def parse(text: str) -> Sport:
    """
    Map free text to a sport.

    Matching is case-insensitive on the trimmed input. Text that matches no
    catalog entry is kept as ``OtherSport`` with its original casing.
    """
    trimmed = text.strip()
    known = _LOOKUP.get(trimmed.lower())
    if known is not None:
        return known
    return OtherSport(trimmed)


def render(sport: Sport, *, localize: bool = False) -> str:
    """
    Text form of a sport.

    The default is the canonical label, which is what gets persisted and
    what :func:`parse` understands. ``localize=True`` returns the label in
    the configured UI language; that form is for display only.
    """
    if isinstance(sport, OtherSport):
        return sport.text
    if localize:
        from core.i18n.translation_manager import T  # noqa: WPS433

        return T(sport.value)
    return sport.value


def glyph(sport: Sport) -> str:
    """Decorative emoji for catalog sports, empty for ``OtherSport``."""
    return sport.glyph


def all_known() -> List[KnownSport]:
    """The catalog in its fixed order."""
    return list(KnownSport)


def display(sport: Sport) -> str:
    """Localized label with capitalized first letter, followed by the glyph."""
    label = _capitalize_first(render(sport, localize=True))
    mark = glyph(sport)
    return f"{label} {mark}" if mark else label


def menu_choices(current: Optional[Sport] = None) -> List[KnownSport]:
    """
    Catalog ordered for a selection menu.

    Sorted by localized label; a known ``current`` sport is moved to the
    front so menus can preselect it.
    """
    choices = sorted(all_known(), key=lambda s: render(s, localize=True))
    if isinstance(current, KnownSport):
        choices.remove(current)
        choices.insert(0, current)
    return choices


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]
