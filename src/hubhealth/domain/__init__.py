"""Domain layer: value types, appointments and the Person aggregate. No dependencies on outer layers."""

from hubhealth.domain.appointment import Appointment, AppointmentList
from hubhealth.domain.errors import (
    AppointmentIndexError,
    CommandError,
    DataLoadingError,
    DuplicatePersonError,
    MissingFieldError,
    ParseError,
    ValidationError,
)
from hubhealth.domain.person import Person
from hubhealth.domain.values import DateOfBirth, Name, Nric, Phone, Tag

__all__ = [
    "Appointment",
    "AppointmentIndexError",
    "AppointmentList",
    "CommandError",
    "DataLoadingError",
    "DateOfBirth",
    "DuplicatePersonError",
    "MissingFieldError",
    "Name",
    "Nric",
    "ParseError",
    "Person",
    "Phone",
    "Tag",
    "ValidationError",
]
