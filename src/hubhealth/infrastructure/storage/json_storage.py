"""Whole-file JSON storage of the patient book."""

import json
import logging
from pathlib import Path
from typing import Iterable

from hubhealth.domain import (
    DataLoadingError,
    MissingFieldError,
    ParseError,
    Person,
    ValidationError,
)
from hubhealth.infrastructure.storage.json_adapted import deserialize_person, serialize_person

logger = logging.getLogger(__name__)

MESSAGE_DUPLICATE_PERSON = "Patients list contains duplicate patient(s)."


class JsonPatientBookStorage:
    """Reads and writes {"persons": [...]} at path. Every save overwrites the file."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_patient_book(self) -> list[Person] | None:
        if not self._path.exists():
            logger.info("Data file %s not found", self._path)
            return None
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise DataLoadingError(f"Cannot read data file {self._path}: {exc}") from exc

        records = data.get("persons") if isinstance(data, dict) else None
        if not isinstance(records, list):
            raise DataLoadingError(
                f"Data file {self._path} must hold an object with a 'persons' list."
            )

        persons: list[Person] = []
        for position, record in enumerate(records, start=1):
            try:
                person = deserialize_person(record)
            except (MissingFieldError, ValidationError, ParseError) as exc:
                raise DataLoadingError(
                    f"Patient record {position} in {self._path} is invalid: {exc}"
                ) from exc
            if any(existing.is_same_person(person) for existing in persons):
                raise DataLoadingError(MESSAGE_DUPLICATE_PERSON)
            persons.append(person)
        logger.info("Loaded %d patient(s) from %s", len(persons), self._path)
        return persons

    def save_patient_book(self, persons: Iterable[Person]) -> None:
        records = [serialize_person(person) for person in persons]
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps({"persons": records}, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
        logger.info("Saved %d patient(s) to %s", len(records), self._path)
