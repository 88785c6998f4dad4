"""Infrastructure layer: concrete implementations of application ports."""

from hubhealth.infrastructure.memory_repository import InMemoryPatientRepository
from hubhealth.infrastructure.storage import (
    JsonAdaptedAppointment,
    JsonAdaptedPerson,
    JsonAdaptedTag,
    JsonPatientBookStorage,
    deserialize_person,
    serialize_person,
)

__all__ = [
    "InMemoryPatientRepository",
    "JsonAdaptedAppointment",
    "JsonAdaptedPerson",
    "JsonAdaptedTag",
    "JsonPatientBookStorage",
    "deserialize_person",
    "serialize_person",
]
