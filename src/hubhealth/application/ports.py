"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Iterable, Protocol

from hubhealth.domain import Nric, Person


class PatientRepository(Protocol):
    """Holds the patient book: Person aggregates, no two of them the same person."""

    def add(self, person: Person) -> None:
        """Store a patient. Raises DuplicatePersonError if the same person is already stored."""
        ...

    def get_by_nric(self, nric: Nric | str) -> Person | None:
        """Return the patient with the given NRIC, or None."""
        ...

    def has_person(self, person: Person) -> bool:
        """Return True if a stored patient is the same person."""
        ...

    def list_all(self) -> list[Person]:
        """Return all patients in insertion order."""
        ...


class PatientBookStorage(Protocol):
    """Reads and writes the whole patient book."""

    def read_patient_book(self) -> list[Person] | None:
        """Return stored patients, or None when nothing has been saved yet.
        Raises DataLoadingError when the stored data is unusable."""
        ...

    def save_patient_book(self, persons: Iterable[Person]) -> None:
        """Overwrite stored data with the given patients."""
        ...
