"""In-memory implementation of PatientRepository (the patient book)."""

import logging

from hubhealth.domain import DuplicatePersonError, Nric, Person

logger = logging.getLogger(__name__)


def _nric_key(nric: Nric | str) -> str:
    return nric.value if isinstance(nric, Nric) else str(nric).strip().upper()


class InMemoryPatientRepository:
    """Stores patients in memory. Order preserved by insertion.
    No two stored patients are the same person (see Person.is_same_person).
    """

    def __init__(self) -> None:
        self._by_nric: dict[str, Person] = {}
        self._order: list[str] = []

    def add(self, person: Person) -> None:
        existing = self.find_duplicate(person)
        if existing is not None:
            raise DuplicatePersonError(existing.nric.value)
        self._by_nric[person.nric.value] = person
        self._order.append(person.nric.value)
        logger.debug("Added patient %s", person.nric)

    def find_duplicate(self, person: Person) -> Person | None:
        """Return a stored patient that is the same person, or None."""
        for stored in self._by_nric.values():
            if stored.is_same_person(person):
                return stored
        return None

    def has_person(self, person: Person) -> bool:
        return self.find_duplicate(person) is not None

    def get_by_nric(self, nric: Nric | str) -> Person | None:
        return self._by_nric.get(_nric_key(nric))

    def list_all(self) -> list[Person]:
        return [self._by_nric[nric] for nric in self._order]

    def __len__(self) -> int:
        return len(self._order)
