"""Pydantic models mirroring the JSON record of a patient.

Serializing writes each field's stored string. Deserializing rebuilds every
field through its value type, in the order name, phone, nric, dob, tags,
appointments, and stops at the first field that is missing or invalid.
"""

from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from hubhealth.domain import (
    Appointment,
    DateOfBirth,
    MissingFieldError,
    Name,
    Nric,
    ParseError,
    Person,
    Phone,
    Tag,
    ValidationError,
)


class JsonAdaptedTag(BaseModel):
    """A tag as stored: {"tagName": "diabetic"}."""

    model_config = ConfigDict(populate_by_name=True)

    tag_name: Any = Field(default=None, alias="tagName")

    @classmethod
    def from_tag(cls, tag: Tag) -> "JsonAdaptedTag":
        return cls(tag_name=tag.tag_name)

    def to_model_type(self) -> Tag:
        return Tag(self.tag_name)


class JsonAdaptedAppointment(BaseModel):
    """An appointment as stored: {"value": "25/12/2025 14:30"}."""

    value: Any = None

    @classmethod
    def from_appointment(cls, appointment: Appointment) -> "JsonAdaptedAppointment":
        return cls(value=appointment.value)

    def to_model_type(self) -> Appointment:
        return Appointment.create_appointment(self.value)


def _to_value(raw: str | None, value_type: type) -> Any:
    if raw is None:
        raise MissingFieldError(value_type.__name__)
    if not value_type.is_valid(raw):
        raise ValidationError(value_type.MESSAGE_CONSTRAINTS)
    return value_type(raw)


def _adapt_all(items: Any, adapted_type: type[BaseModel], error: type[Exception], message: str) -> list:
    """Read a stored list of tags or appointments; any entry that is not a record is malformed."""
    if items is None:
        return []
    if not isinstance(items, list):
        raise error(message)
    adapted = []
    for item in items:
        if isinstance(item, adapted_type):
            adapted.append(item)
            continue
        try:
            adapted.append(adapted_type.model_validate(item))
        except pydantic.ValidationError as exc:
            raise error(message) from exc
    return adapted


class JsonAdaptedPerson(BaseModel):
    """A patient as stored.

    Slots accept any JSON value so that type errors surface from to_model_type
    in field order rather than all at once from pydantic.
    """

    name: Any = None
    phone: Any = None
    nric: Any = None
    dob: Any = None
    tags: Any = None
    appointments: Any = None

    @classmethod
    def from_person(cls, person: Person) -> "JsonAdaptedPerson":
        # Nested entries are stored as the JSON records themselves.
        return cls(
            name=person.name.full_name,
            phone=person.phone.value,
            nric=person.nric.value,
            dob=person.date_of_birth.value,
            tags=[
                JsonAdaptedTag.from_tag(tag).model_dump(by_alias=True)
                for tag in sorted(person.tags, key=lambda t: t.tag_name)
            ],
            appointments=[
                JsonAdaptedAppointment.from_appointment(a).model_dump()
                for a in person.appointments
            ],
        )

    def to_model_type(self) -> Person:
        """Build the Person.

        Raises MissingFieldError or ValidationError for identity fields,
        ValidationError for tags and ParseError for appointments.
        """
        name = _to_value(self.name, Name)
        phone = _to_value(self.phone, Phone)
        nric = _to_value(self.nric, Nric)
        date_of_birth = _to_value(self.dob, DateOfBirth)
        tags = [
            tag.to_model_type()
            for tag in _adapt_all(self.tags, JsonAdaptedTag, ValidationError, Tag.MESSAGE_CONSTRAINTS)
        ]
        appointments = [
            a.to_model_type()
            for a in _adapt_all(
                self.appointments,
                JsonAdaptedAppointment,
                ParseError,
                Appointment.MESSAGE_CONSTRAINTS,
            )
        ]

        person = Person(name, phone, nric, date_of_birth, frozenset(tags))
        for appointment in appointments:
            person.add_appointment(appointment)
        return person


def serialize_person(person: Person) -> dict:
    """Return the JSON-ready record of a patient."""
    return JsonAdaptedPerson.from_person(person).model_dump(by_alias=True)


def deserialize_person(record: Any) -> Person:
    """Rebuild a patient from its JSON record. Never returns a partial Person."""
    try:
        adapted = JsonAdaptedPerson.model_validate(record)
    except pydantic.ValidationError as exc:
        error = exc.errors()[0]
        location = ".".join(str(part) for part in error["loc"]) or "record"
        raise ValidationError(
            f"Person record is malformed at '{location}': {error['msg']}"
        ) from exc
    return adapted.to_model_type()
