"""Tests for Appointment parsing and AppointmentList."""

from datetime import datetime

import pytest

from hubhealth.domain import Appointment, AppointmentIndexError, AppointmentList, ParseError


def test_create_appointment_parses_date_and_time() -> None:
    appointment = Appointment.create_appointment("25/12/2025 14:30")
    assert appointment.start == datetime(2025, 12, 25, 14, 30)
    assert appointment.details is None
    assert appointment.value == "25/12/2025 14:30"
    assert str(appointment) == "25/12/2025 14:30"


def test_create_appointment_with_details() -> None:
    appointment = Appointment.create_appointment("25/12/2025 14:30 |  Follow-up on blood test ")
    assert appointment.details == "Follow-up on blood test"
    assert appointment.value == "25/12/2025 14:30 | Follow-up on blood test"
    assert Appointment.create_appointment(appointment.value).details == appointment.details


def test_create_appointment_tolerates_extra_whitespace() -> None:
    appointment = Appointment.create_appointment("  25/12/2025    14:30 ")
    assert appointment.value == "25/12/2025 14:30"


def test_empty_details_dropped() -> None:
    assert Appointment.create_appointment("25/12/2025 14:30 |").details is None


def test_past_appointments_allowed() -> None:
    assert Appointment.is_valid("01/01/2000 09:00")


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "25/12/2025",
        "14:30",
        "2025-12-25 14:30",
        "25/12/25 14:30",
        "32/12/2025 14:30",
        "29/02/2025 10:00",
        "25/12/2025 24:00",
        "25/12/2025 14:60",
        "25/12/2025 2:30pm",
        "25/12/2025 14:30 extra",
        "٢٥/١٢/٢٠٢٥ ١٤:٣٠",
        None,
    ],
)
def test_create_appointment_malformed_raises_parse_error(raw) -> None:
    assert not Appointment.is_valid(raw)
    with pytest.raises(ParseError) as exc_info:
        Appointment.create_appointment(raw)
    assert exc_info.value.message == Appointment.MESSAGE_CONSTRAINTS


def test_equality_by_date_time_only() -> None:
    plain = Appointment.create_appointment("25/12/2025 14:30")
    detailed = Appointment.create_appointment("25/12/2025 14:30 | Review")
    assert plain == detailed
    assert hash(plain) == hash(detailed)
    assert plain != Appointment.create_appointment("25/12/2025 14:31")


def test_list_add_keeps_insertion_order() -> None:
    appointments = AppointmentList()
    appointments.add_appointment("26/12/2025 10:00")
    appointments.add_appointment(Appointment.create_appointment("01/01/2025 09:00"))
    appointments.add_appointment("25/12/2025 14:30")
    assert [a.value for a in appointments.get_appointments()] == [
        "26/12/2025 10:00",
        "01/01/2025 09:00",
        "25/12/2025 14:30",
    ]
    assert len(appointments) == 3


def test_list_add_tolerates_duplicates() -> None:
    appointments = AppointmentList()
    appointments.add_appointment("25/12/2025 14:30")
    appointments.add_appointment("25/12/2025 14:30")
    assert len(appointments) == 2


def test_list_add_malformed_text_raises_and_leaves_list_unchanged() -> None:
    appointments = AppointmentList()
    appointments.add_appointment("25/12/2025 14:30")
    with pytest.raises(ParseError):
        appointments.add_appointment("tomorrow")
    assert len(appointments) == 1


def test_list_remove_shifts_later_entries() -> None:
    appointments = AppointmentList()
    for raw in ("01/01/2025 09:00", "02/01/2025 09:00", "03/01/2025 09:00"):
        appointments.add_appointment(raw)
    removed = appointments.remove_appointment(1)
    assert removed.value == "02/01/2025 09:00"
    assert [a.value for a in appointments] == ["01/01/2025 09:00", "03/01/2025 09:00"]


@pytest.mark.parametrize("index", [-1, 2, 5])
def test_list_remove_out_of_range_raises_and_leaves_list_unchanged(index: int) -> None:
    appointments = AppointmentList()
    appointments.add_appointment("01/01/2025 09:00")
    appointments.add_appointment("02/01/2025 09:00")
    before = appointments.get_appointments()
    with pytest.raises(AppointmentIndexError) as exc_info:
        appointments.remove_appointment(index)
    assert isinstance(exc_info.value, IndexError)
    assert exc_info.value.index == index
    assert exc_info.value.size == 2
    assert appointments.get_appointments() == before


def test_list_remove_from_empty_list_raises() -> None:
    with pytest.raises(AppointmentIndexError):
        AppointmentList().remove_appointment(0)


def test_list_has_appointment() -> None:
    appointments = AppointmentList()
    appointments.add_appointment("25/12/2025 14:30 | Review")
    assert appointments.has_appointment(Appointment.create_appointment("25/12/2025 14:30"))
    assert not appointments.has_appointment(Appointment.create_appointment("25/12/2025 15:30"))


def test_get_appointments_is_read_only_snapshot() -> None:
    appointments = AppointmentList()
    appointments.add_appointment("25/12/2025 14:30")
    view = appointments.get_appointments()
    assert isinstance(view, tuple)
    appointments.add_appointment("26/12/2025 14:30")
    assert len(view) == 1
    assert len(appointments.get_appointments()) == 2
