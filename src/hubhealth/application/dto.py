"""Result types returned by commands."""

from dataclasses import dataclass

from hubhealth.domain import Person


@dataclass(frozen=True)
class CommandResult:
    """Feedback to show the user, and the patient the command touched."""

    feedback: str
    person: Person | None = None
