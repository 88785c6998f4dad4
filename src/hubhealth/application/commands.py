"""Appointment commands. Built by the parsers from raw text, executed against the patient book.

Commands carry the raw NRIC and date text; the value types validate them on execute.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar

from hubhealth.application.dto import CommandResult
from hubhealth.application.ports import PatientRepository
from hubhealth.domain import Appointment, AppointmentIndexError, CommandError, Nric, Person

logger = logging.getLogger(__name__)

MESSAGE_PATIENT_NOT_FOUND = "No patient with NRIC {} found in HubHealth."


def _find_patient(repository: PatientRepository, nric: Nric) -> Person:
    person = repository.get_by_nric(nric)
    if person is None:
        raise CommandError(MESSAGE_PATIENT_NOT_FOUND.format(nric))
    return person


@dataclass(frozen=True)
class AddAppointmentCommand:
    """Add an appointment to the patient with the given NRIC."""

    nric: str
    date: str

    COMMAND_WORD: ClassVar[str] = "addappt"
    MESSAGE_USAGE: ClassVar[str] = (
        "addappt: Adds an appointment to the patient identified by NRIC.\n"
        "Parameters: -IC NRIC -D DD/MM/YYYY HH:MM\n"
        "Example: addappt -IC S1234567A -D 25/12/2025 14:30"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New appointment added for {} ({}): {}"
    MESSAGE_DUPLICATE_APPOINTMENT: ClassVar[str] = (
        "This patient already has an appointment on {}."
    )

    def execute(self, repository: PatientRepository) -> CommandResult:
        nric = Nric(self.nric)
        appointment = Appointment.create_appointment(self.date)
        person = _find_patient(repository, nric)
        if person.has_appointment(appointment.value):
            raise CommandError(self.MESSAGE_DUPLICATE_APPOINTMENT.format(appointment))
        person.add_appointment(appointment)
        logger.debug("Added appointment %s for %s", appointment, nric)
        return CommandResult(
            feedback=self.MESSAGE_SUCCESS.format(person.name, nric, appointment),
            person=person,
        )


@dataclass(frozen=True)
class RemoveAppointmentCommand:
    """Remove the index-th (1-based, as displayed) appointment of the patient with the given NRIC."""

    nric: str
    index: int

    COMMAND_WORD: ClassVar[str] = "rmappt"
    MESSAGE_USAGE: ClassVar[str] = (
        "rmappt: Removes an appointment, by its displayed index, from the patient identified by NRIC.\n"
        "Parameters: -IC NRIC -I INDEX (must be a positive integer)\n"
        "Example: rmappt -IC S1234567A -I 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Removed appointment from {} ({}): {}"

    def execute(self, repository: PatientRepository) -> CommandResult:
        nric = Nric(self.nric)
        person = _find_patient(repository, nric)
        try:
            removed = person.remove_appointment(self.index - 1)
        except AppointmentIndexError as exc:
            # Report the index as the user typed it.
            raise AppointmentIndexError(self.index, exc.size) from exc
        logger.debug("Removed appointment %s for %s", removed, nric)
        return CommandResult(
            feedback=self.MESSAGE_SUCCESS.format(person.name, nric, removed),
            person=person,
        )
