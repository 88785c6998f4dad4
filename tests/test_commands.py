"""Tests for executing appointment commands against an in-memory patient book."""

import pytest

from hubhealth.application import (
    AddAppointmentCommand,
    AddAppointmentCommandParser,
    CommandResult,
    RemoveAppointmentCommand,
    RemoveAppointmentCommandParser,
)
from hubhealth.domain import (
    AppointmentIndexError,
    CommandError,
    DateOfBirth,
    Name,
    Nric,
    ParseError,
    Person,
    Phone,
    ValidationError,
)
from hubhealth.infrastructure import InMemoryPatientRepository


def _repository() -> InMemoryPatientRepository:
    repository = InMemoryPatientRepository()
    repository.add(
        Person(Name("Alice Tan"), Phone("91234567"), Nric("S1234567A"), DateOfBirth("01/01/1990"))
    )
    return repository


def _alice(repository: InMemoryPatientRepository) -> Person:
    return repository.get_by_nric("S1234567A")


def test_add_appointment() -> None:
    repository = _repository()
    result = AddAppointmentCommand(nric="S1234567A", date="25/12/2025 14:30").execute(repository)
    assert isinstance(result, CommandResult)
    assert result.person is _alice(repository)
    assert "25/12/2025 14:30" in result.feedback
    assert "Alice Tan" in result.feedback
    assert [a.value for a in _alice(repository).appointments] == ["25/12/2025 14:30"]


def test_add_appointment_from_parsed_text_with_lower_case_nric() -> None:
    repository = _repository()
    command = AddAppointmentCommandParser().parse(" -IC s1234567a -D 25/12/2025 14:30")
    command.execute(repository)
    assert _alice(repository).has_appointment("25/12/2025 14:30")


def test_add_appointment_appends_in_order() -> None:
    repository = _repository()
    AddAppointmentCommand("S1234567A", "26/12/2025 10:00").execute(repository)
    AddAppointmentCommand("S1234567A", "25/12/2025 14:30").execute(repository)
    assert [a.value for a in _alice(repository).appointments] == [
        "26/12/2025 10:00",
        "25/12/2025 14:30",
    ]


def test_add_duplicate_appointment_rejected() -> None:
    repository = _repository()
    AddAppointmentCommand("S1234567A", "25/12/2025 14:30").execute(repository)
    with pytest.raises(CommandError, match="already has an appointment"):
        AddAppointmentCommand("S1234567A", "25/12/2025 14:30").execute(repository)
    assert _alice(repository).appointment_count == 1


def test_add_appointment_unknown_patient() -> None:
    with pytest.raises(CommandError, match="T0288759A"):
        AddAppointmentCommand("T0288759A", "25/12/2025 14:30").execute(_repository())


def test_add_appointment_invalid_nric() -> None:
    with pytest.raises(ValidationError) as exc_info:
        AddAppointmentCommand("1", "25/12/2025 14:30").execute(_repository())
    assert exc_info.value.message == Nric.MESSAGE_CONSTRAINTS


def test_add_appointment_invalid_date() -> None:
    repository = _repository()
    with pytest.raises(ParseError):
        AddAppointmentCommand("S1234567A", "25/06/2025 -T 17:00").execute(repository)
    assert _alice(repository).appointment_count == 0


def test_remove_appointment_by_displayed_index() -> None:
    repository = _repository()
    AddAppointmentCommand("S1234567A", "25/12/2025 14:30").execute(repository)
    AddAppointmentCommand("S1234567A", "26/12/2025 10:00").execute(repository)

    command = RemoveAppointmentCommandParser().parse(" -IC S1234567A -I 1")
    result = command.execute(repository)

    assert "25/12/2025 14:30" in result.feedback
    assert [a.value for a in _alice(repository).appointments] == ["26/12/2025 10:00"]


def test_remove_appointment_index_out_of_range() -> None:
    repository = _repository()
    AddAppointmentCommand("S1234567A", "25/12/2025 14:30").execute(repository)
    with pytest.raises(AppointmentIndexError):
        RemoveAppointmentCommand("S1234567A", 2).execute(repository)
    with pytest.raises(AppointmentIndexError):
        RemoveAppointmentCommand("S1234567A", 0).execute(repository)
    assert _alice(repository).appointment_count == 1


def test_remove_appointment_out_of_range_reports_typed_index() -> None:
    repository = _repository()
    AddAppointmentCommand("S1234567A", "25/12/2025 14:30").execute(repository)
    AddAppointmentCommand("S1234567A", "26/12/2025 10:00").execute(repository)

    command = RemoveAppointmentCommandParser().parse(" -IC S1234567A -I 3")
    with pytest.raises(AppointmentIndexError) as exc_info:
        command.execute(repository)

    assert exc_info.value.index == 3
    assert exc_info.value.size == 2
    assert str(exc_info.value) == "The appointment index provided is invalid: 3 (appointments: 2)"
    assert _alice(repository).appointment_count == 2


def test_remove_appointment_unknown_patient() -> None:
    with pytest.raises(CommandError):
        RemoveAppointmentCommand("T0288759A", 1).execute(_repository())
