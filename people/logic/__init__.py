from people.logic.id_sequence import IdSequence, shared_sequence
from people.logic.person_store import CSV_HEADERS, PersonStore

__all__ = ["CSV_HEADERS", "IdSequence", "PersonStore", "shared_sequence"]
