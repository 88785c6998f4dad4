"""Application layer: commands, parsers, ports and DTOs. Depends only on domain."""

from hubhealth.application.commands import AddAppointmentCommand, RemoveAppointmentCommand
from hubhealth.application.dto import CommandResult
from hubhealth.application.parser import (
    AddAppointmentCommandParser,
    ArgumentMultimap,
    RemoveAppointmentCommandParser,
    tokenize,
)
from hubhealth.application.ports import PatientBookStorage, PatientRepository

__all__ = [
    "AddAppointmentCommand",
    "AddAppointmentCommandParser",
    "ArgumentMultimap",
    "CommandResult",
    "PatientBookStorage",
    "PatientRepository",
    "RemoveAppointmentCommand",
    "RemoveAppointmentCommandParser",
    "tokenize",
]
