"""Value types for a patient's identity fields and tags.

Each type wraps one validated string. Construction is the only way to get an
instance and fails with ValidationError when the raw text does not satisfy the
type's rule, so a held value is always valid.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, ClassVar

import phonenumbers

from hubhealth.domain.errors import ValidationError

NAME_MAX_LENGTH = 100
MAX_AGE_YEARS = 150
# Numbers without a country code are read as Singapore numbers.
PHONE_REGION = "SG"


def _collapse_whitespace(raw: str) -> str:
    return " ".join(raw.split())


@dataclass(frozen=True, eq=False)
class Name:
    """
    A patient's name. Letters, digits, spaces and a little punctuation
    (for names such as "Ravi s/o Kumar" or "Mary-Anne O'Neil").
    Compared case-insensitively.
    """

    full_name: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should start with a letter or digit, contain only letters, digits, "
        "spaces and the characters ' , . / @ ( ) -, and be at most "
        f"{NAME_MAX_LENGTH} characters long."
    )
    _PATTERN: ClassVar[re.Pattern] = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ',./@()-]*")

    def __post_init__(self):
        if not self.is_valid(self.full_name):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "full_name", _collapse_whitespace(self.full_name))

    @classmethod
    def is_valid(cls, raw: Any) -> bool:
        if not isinstance(raw, str):
            return False
        name = _collapse_whitespace(raw)
        return len(name) <= NAME_MAX_LENGTH and cls._PATTERN.fullmatch(name) is not None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self.full_name.casefold() == other.full_name.casefold()

    def __hash__(self) -> int:
        return hash(self.full_name.casefold())

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True, eq=False)
class Phone:
    """
    A contact number: digits only, 8 to 15 of them.
    Two phones are equal when they normalize to the same E.164 number
    (e.g. "91234567" and "6591234567"); unparseable numbers compare by digits.
    """

    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Phone numbers should only contain digits, and be between 8 and 15 digits long."
    )
    _PATTERN: ClassVar[re.Pattern] = re.compile(r"[0-9]{8,15}")

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", self.value.strip())

    @classmethod
    def is_valid(cls, raw: Any) -> bool:
        return isinstance(raw, str) and cls._PATTERN.fullmatch(raw.strip()) is not None

    @property
    def normalized(self) -> str:
        """E.164 form when the digits are a valid number in PHONE_REGION, else the digits.

        A leading region country code is recognised without "+", so
        "6591234567" normalizes like "91234567".
        """
        try:
            parsed = phonenumbers.parse(self.value, PHONE_REGION)
        except phonenumbers.NumberParseException:
            return self.value
        if not phonenumbers.is_valid_number(parsed):
            return self.value
        return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Phone):
            return NotImplemented
        return self.normalized == other.normalized

    def __hash__(self) -> int:
        return hash(self.normalized)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Nric:
    """
    National registration identity card number, e.g. S1234567A.
    Input is case-insensitive; the stored value is upper case.
    """

    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "NRIC should start with S, T, F, G or M, followed by 7 digits and end with a letter."
    )
    _PATTERN: ClassVar[re.Pattern] = re.compile(r"[STFGM][0-9]{7}[A-Z]")

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", self.value.strip().upper())

    @classmethod
    def is_valid(cls, raw: Any) -> bool:
        # upper() maps some non-ASCII letters onto ASCII ones ("ſ" to "S")
        return (
            isinstance(raw, str)
            and raw.isascii()
            and cls._PATTERN.fullmatch(raw.strip().upper()) is not None
        )

    def __str__(self) -> str:
        return self.value


def _years_before(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        # 29 February in a non-leap target year
        return day.replace(year=day.year - years, day=28)


@dataclass(frozen=True)
class DateOfBirth:
    """Date of birth as DD/MM/YYYY. Must not be in the future nor more than 150 years ago."""

    value: str

    DATE_FORMAT: ClassVar[str] = "%d/%m/%Y"
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Date of birth should be a valid date in the format DD/MM/YYYY, "
        f"not in the future and at most {MAX_AGE_YEARS} years ago."
    )
    _PATTERN: ClassVar[re.Pattern] = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")

    def __post_init__(self):
        if not self.is_valid(self.value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", self.value.strip())

    @classmethod
    def is_valid(cls, raw: Any, today: date | None = None) -> bool:
        if not isinstance(raw, str) or cls._PATTERN.fullmatch(raw.strip()) is None:
            return False
        try:
            born = datetime.strptime(raw.strip(), cls.DATE_FORMAT).date()
        except ValueError:
            return False
        today = today or date.today()
        return _years_before(today, MAX_AGE_YEARS) <= born <= today

    @property
    def date(self) -> date:
        return datetime.strptime(self.value, self.DATE_FORMAT).date()

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Tag:
    """A free-form label on a patient (e.g. "diabetic", "CHAS"). Alphanumeric, no spaces."""

    tag_name: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Tag names should be alphanumeric."
    _PATTERN: ClassVar[re.Pattern] = re.compile(r"[A-Za-z0-9]+")

    def __post_init__(self):
        if not self.is_valid(self.tag_name):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, raw: Any) -> bool:
        return isinstance(raw, str) and cls._PATTERN.fullmatch(raw) is not None

    def __str__(self) -> str:
        return self.tag_name
