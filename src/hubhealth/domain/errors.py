"""Error types raised by the domain, the command parser and storage."""


class ValidationError(ValueError):
    """A raw value does not satisfy a value type's format rule."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingFieldError(ValueError):
    """A required field is absent from a persisted record."""

    MESSAGE_FORMAT = "Person's {} field is missing!"

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        self.message = self.MESSAGE_FORMAT.format(field_name)
        super().__init__(self.message)


class ParseError(ValueError):
    """Command text or appointment date/time text is malformed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AppointmentIndexError(IndexError):
    """Appointment index is outside the person's appointment list."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(
            f"The appointment index provided is invalid: {index} (appointments: {size})"
        )


class CommandError(Exception):
    """A well-formed command cannot be applied to the patient book."""


class DuplicatePersonError(Exception):
    """A person matching an existing record (same NRIC, or same name, phone and DOB)."""

    def __init__(self, nric: str) -> None:
        self.nric = nric
        super().__init__(f"This patient already exists in HubHealth: {nric}")


class DataLoadingError(Exception):
    """The storage file cannot be turned into a patient book."""
