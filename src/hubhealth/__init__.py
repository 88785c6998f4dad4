"""
HubHealth core: clean-architecture layout.

- domain: value types (Name, Phone, Nric, DateOfBirth, Tag), Appointment, Person. No outer dependencies.
- application: appointment commands and their parsers, ports, DTOs.
- infrastructure: adapters (InMemoryPatientRepository, JSON storage of the patient book).
"""

from hubhealth.application import (
    AddAppointmentCommand,
    AddAppointmentCommandParser,
    CommandResult,
    PatientBookStorage,
    PatientRepository,
    RemoveAppointmentCommand,
    RemoveAppointmentCommandParser,
)
from hubhealth.domain import (
    Appointment,
    AppointmentIndexError,
    AppointmentList,
    CommandError,
    DataLoadingError,
    DateOfBirth,
    DuplicatePersonError,
    MissingFieldError,
    Name,
    Nric,
    ParseError,
    Person,
    Phone,
    Tag,
    ValidationError,
)
from hubhealth.infrastructure import InMemoryPatientRepository, JsonPatientBookStorage

__all__ = [
    "AddAppointmentCommand",
    "AddAppointmentCommandParser",
    "Appointment",
    "AppointmentIndexError",
    "AppointmentList",
    "CommandError",
    "CommandResult",
    "DataLoadingError",
    "DateOfBirth",
    "DuplicatePersonError",
    "InMemoryPatientRepository",
    "JsonPatientBookStorage",
    "MissingFieldError",
    "Name",
    "Nric",
    "ParseError",
    "PatientBookStorage",
    "PatientRepository",
    "Person",
    "Phone",
    "RemoveAppointmentCommand",
    "RemoveAppointmentCommandParser",
    "Tag",
    "ValidationError",
]
