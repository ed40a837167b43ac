from people.models.person import Person
from people.models.sport import KnownSport, OtherSport, Sport

__all__ = ["KnownSport", "OtherSport", "Person", "Sport"]
