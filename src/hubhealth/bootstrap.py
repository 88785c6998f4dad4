"""Wire settings, logging and storage into a ready patient book."""

import logging

from hubhealth.application.ports import PatientBookStorage
from hubhealth.config import Settings, configure_logging, get_settings
from hubhealth.domain import DataLoadingError
from hubhealth.infrastructure import InMemoryPatientRepository, JsonPatientBookStorage

logger = logging.getLogger(__name__)


def load_patient_book(storage: PatientBookStorage) -> InMemoryPatientRepository:
    """Return the stored patient book; an empty one if nothing is stored or the data is corrupt."""
    repository = InMemoryPatientRepository()
    try:
        persons = storage.read_patient_book()
    except DataLoadingError as exc:
        logger.warning("Data file could not be loaded, starting with an empty patient book: %s", exc)
        return repository
    if persons is None:
        logger.info("No saved data, starting with an empty patient book")
        return repository
    for person in persons:
        repository.add(person)
    return repository


def save_patient_book(repository: InMemoryPatientRepository, storage: PatientBookStorage) -> None:
    storage.save_patient_book(repository.list_all())


def create_repository(
    settings: Settings | None = None,
) -> tuple[InMemoryPatientRepository, JsonPatientBookStorage]:
    """Load settings (unless given), configure logging and load the book from the data file."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    storage = JsonPatientBookStorage(settings.data_file)
    return load_patient_book(storage), storage
