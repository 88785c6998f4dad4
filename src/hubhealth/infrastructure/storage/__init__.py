"""JSON persistence of the patient book."""

from hubhealth.infrastructure.storage.json_adapted import (
    JsonAdaptedAppointment,
    JsonAdaptedPerson,
    JsonAdaptedTag,
    deserialize_person,
    serialize_person,
)
from hubhealth.infrastructure.storage.json_storage import JsonPatientBookStorage

__all__ = [
    "JsonAdaptedAppointment",
    "JsonAdaptedPerson",
    "JsonAdaptedTag",
    "JsonPatientBookStorage",
    "deserialize_person",
    "serialize_person",
]
