"""Person: a patient record aggregating identity fields, tags and appointments."""

from dataclasses import dataclass, field
from typing import Any, Iterable

from hubhealth.domain.appointment import Appointment, AppointmentList
from hubhealth.domain.errors import ValidationError
from hubhealth.domain.values import DateOfBirth, Name, Nric, Phone, Tag

_IDENTITY_FIELDS = (
    ("name", Name),
    ("phone", Phone),
    ("nric", Nric),
    ("date_of_birth", DateOfBirth),
)


@dataclass(frozen=True, eq=False)
class Person:
    """
    Represents a patient known to the clinic.
    Identity fields are present and validated; tags are fixed at construction.
    Appointments are attached afterwards and only through this class's methods.
    """

    name: Name
    phone: Phone
    nric: Nric
    date_of_birth: DateOfBirth
    tags: frozenset[Tag] = frozenset()
    _appointment_list: AppointmentList = field(
        default_factory=AppointmentList, init=False, repr=False
    )

    def __post_init__(self):
        for attr, value_type in _IDENTITY_FIELDS:
            value = getattr(self, attr)
            if value is None:
                raise ValidationError(f"Person's {value_type.__name__} field is missing!")
            if not isinstance(value, value_type):
                raise ValidationError(
                    f"Person's {value_type.__name__} field must be a {value_type.__name__}."
                )
        tags: Iterable[Tag] = self.tags if self.tags is not None else ()
        tags = frozenset(tags)
        if not all(isinstance(tag, Tag) for tag in tags):
            raise ValidationError(Tag.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "tags", tags)

    @property
    def appointments(self) -> tuple[Appointment, ...]:
        return self._appointment_list.get_appointments()

    @property
    def appointment_count(self) -> int:
        return len(self._appointment_list)

    def add_appointment(self, appointment: Appointment | str) -> Appointment:
        """Append an appointment (or its textual form). Used by commands and by storage."""
        return self._appointment_list.add_appointment(appointment)

    def remove_appointment(self, index: int) -> Appointment:
        """Remove the appointment at the 0-based index; AppointmentIndexError if out of range."""
        return self._appointment_list.remove_appointment(index)

    def has_appointment(self, date: str) -> bool:
        """True if an appointment starts at the given "DD/MM/YYYY HH:MM"."""
        return self._appointment_list.has_appointment(Appointment.create_appointment(date))

    def is_same_person(self, other: "Person | None") -> bool:
        """
        True if both have the same NRIC, or the same name, phone and date of birth.
        A weaker notion than equality, used to keep duplicates out of the patient book.
        """
        if other is self:
            return True
        if other is None:
            return False
        return other.nric == self.nric or (
            other.name == self.name
            and other.phone == self.phone
            and other.date_of_birth == self.date_of_birth
        )

    def __eq__(self, other: Any) -> bool:
        # Appointments are attached after construction and do not take part.
        if other is self:
            return True
        if not isinstance(other, Person):
            return NotImplemented
        return (
            self.name == other.name
            and self.phone == other.phone
            and self.nric == other.nric
            and self.date_of_birth == other.date_of_birth
            and self.tags == other.tags
        )

    def __hash__(self) -> int:
        return hash((self.name, self.phone, self.nric, self.date_of_birth, self.tags))
