"""Appointments and the ordered appointment list owned by one patient."""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar, Iterator

from hubhealth.domain.errors import AppointmentIndexError, ParseError

DETAILS_DELIMITER = "|"


@dataclass(frozen=True, eq=False)
class Appointment:
    """
    One scheduled visit, written as "DD/MM/YYYY HH:MM" (24-hour clock),
    optionally followed by "| details".
    Two appointments are equal when they start at the same date and time;
    details do not take part in equality.
    """

    start: datetime
    details: str | None = None

    DATE_TIME_FORMAT: ClassVar[str] = "%d/%m/%Y %H:%M"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Appointments should be a valid date and time in the format DD/MM/YYYY HH:MM, "
        f"optionally followed by '{DETAILS_DELIMITER} details'."
    )
    _PATTERN: ClassVar[re.Pattern] = re.compile(
        r"\s*([0-9]{2}/[0-9]{2}/[0-9]{4})\s+([0-9]{2}:[0-9]{2})\s*(?:\|(.*))?",
        re.DOTALL,
    )

    def __post_init__(self):
        if not isinstance(self.start, datetime):
            raise ParseError(self.MESSAGE_CONSTRAINTS)
        # Minute resolution, as in the textual form.
        object.__setattr__(self, "start", self.start.replace(second=0, microsecond=0))
        details = (self.details or "").strip() or None
        object.__setattr__(self, "details", details)

    @classmethod
    def create_appointment(cls, raw: str) -> "Appointment":
        """Parse the textual form. Raises ParseError if it is malformed."""
        match = cls._PATTERN.fullmatch(raw) if isinstance(raw, str) else None
        if match is None:
            raise ParseError(cls.MESSAGE_CONSTRAINTS)
        day, time, details = match.groups()
        try:
            start = datetime.strptime(f"{day} {time}", cls.DATE_TIME_FORMAT)
        except ValueError as exc:
            raise ParseError(cls.MESSAGE_CONSTRAINTS) from exc
        return cls(start=start, details=details)

    @classmethod
    def is_valid(cls, raw: Any) -> bool:
        try:
            cls.create_appointment(raw)
        except ParseError:
            return False
        return True

    @property
    def value(self) -> str:
        """Textual form; create_appointment(value) rebuilds an equal appointment."""
        text = self.start.strftime(self.DATE_TIME_FORMAT)
        if self.details:
            text = f"{text} {DETAILS_DELIMITER} {self.details}"
        return text

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Appointment):
            return NotImplemented
        return self.start == other.start

    def __hash__(self) -> int:
        return hash(self.start)

    def __str__(self) -> str:
        return self.value


class AppointmentList:
    """Appointments of one patient in insertion order. Never sorted, never deduplicated."""

    def __init__(self) -> None:
        self._appointments: list[Appointment] = []

    def add_appointment(self, appointment: Appointment | str) -> Appointment:
        """Append an appointment, parsing it first when given as text."""
        if not isinstance(appointment, Appointment):
            appointment = Appointment.create_appointment(appointment)
        self._appointments.append(appointment)
        return appointment

    def remove_appointment(self, index: int) -> Appointment:
        """Remove and return the appointment at the 0-based index."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise AppointmentIndexError(index, len(self._appointments))
        if index < 0 or index >= len(self._appointments):
            raise AppointmentIndexError(index, len(self._appointments))
        return self._appointments.pop(index)

    def has_appointment(self, appointment: Appointment) -> bool:
        return any(existing == appointment for existing in self._appointments)

    def get_appointments(self) -> tuple[Appointment, ...]:
        return tuple(self._appointments)

    def __len__(self) -> int:
        return len(self._appointments)

    def __iter__(self) -> Iterator[Appointment]:
        return iter(self.get_appointments())
