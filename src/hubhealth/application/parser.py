"""Parse command arguments of the form "-IC S1234567A -D 25/12/2025 14:30".

Parsing is syntactic only: flags must be present exactly once and nothing may
precede the first flag. The values are handed to the commands unvalidated.
"""

import re

from hubhealth.application.commands import AddAppointmentCommand, RemoveAppointmentCommand
from hubhealth.domain import ParseError

PREFIX_NRIC = "-IC"
PREFIX_DATE = "-D"
PREFIX_INDEX = "-I"

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_DUPLICATE_FIELDS = (
    "Multiple values specified for the following single-valued field(s): {}"
)
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."


class ArgumentMultimap:
    """Values of each flag in the order they appear, plus the text before the first flag."""

    def __init__(self, preamble: str, values: dict[str, list[str]]) -> None:
        self.preamble = preamble
        self._values = values

    def get_value(self, prefix: str) -> str | None:
        """Return the last value given for prefix, or None."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> list[str]:
        return list(self._values.get(prefix, []))

    def are_prefixes_present(self, *prefixes: str) -> bool:
        return all(prefix in self._values for prefix in prefixes)

    def verify_no_duplicate_prefixes_for(self, *prefixes: str) -> None:
        """Raise ParseError naming every prefix given more than once."""
        duplicated = [p for p in prefixes if len(self._values.get(p, [])) > 1]
        if duplicated:
            raise ParseError(MESSAGE_DUPLICATE_FIELDS.format(" ".join(duplicated)))


def _clean(value: str) -> str:
    return " ".join(value.split())


def tokenize(args: str, *prefixes: str) -> ArgumentMultimap:
    """Split args on the given flags.

    A flag counts only as a whole whitespace-separated token, so "-I" does not
    match inside "-IC". Values are stripped with inner whitespace collapsed.
    """
    args = args or ""
    if not prefixes:
        return ArgumentMultimap(_clean(args), {})
    alternatives = "|".join(re.escape(p) for p in sorted(prefixes, key=len, reverse=True))
    pattern = re.compile(rf"(?<!\S)({alternatives})(?!\S)")
    matches = list(pattern.finditer(args))

    preamble = args[: matches[0].start()] if matches else args
    values: dict[str, list[str]] = {}
    for position, match in enumerate(matches):
        end = matches[position + 1].start() if position + 1 < len(matches) else len(args)
        values.setdefault(match.group(1), []).append(_clean(args[match.end() : end]))
    return ArgumentMultimap(_clean(preamble), values)


def _require(argmap: ArgumentMultimap, usage: str, *prefixes: str) -> None:
    if argmap.preamble or not argmap.are_prefixes_present(*prefixes):
        raise ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage))
    argmap.verify_no_duplicate_prefixes_for(*prefixes)


def parse_index(raw: str) -> int:
    """Parse a 1-based index. Raises ParseError unless raw is a positive integer."""
    raw = (raw or "").strip()
    if re.fullmatch(r"[0-9]+", raw) is None or int(raw) == 0:
        raise ParseError(MESSAGE_INVALID_INDEX)
    return int(raw)


class AddAppointmentCommandParser:
    """Parses "-IC NRIC -D DD/MM/YYYY HH:MM" into an AddAppointmentCommand."""

    def parse(self, args: str) -> AddAppointmentCommand:
        argmap = tokenize(args, PREFIX_NRIC, PREFIX_DATE)
        _require(argmap, AddAppointmentCommand.MESSAGE_USAGE, PREFIX_NRIC, PREFIX_DATE)
        return AddAppointmentCommand(
            nric=argmap.get_value(PREFIX_NRIC),
            date=argmap.get_value(PREFIX_DATE),
        )


class RemoveAppointmentCommandParser:
    """Parses "-IC NRIC -I INDEX" into a RemoveAppointmentCommand."""

    def parse(self, args: str) -> RemoveAppointmentCommand:
        argmap = tokenize(args, PREFIX_NRIC, PREFIX_INDEX)
        _require(argmap, RemoveAppointmentCommand.MESSAGE_USAGE, PREFIX_NRIC, PREFIX_INDEX)
        return RemoveAppointmentCommand(
            nric=argmap.get_value(PREFIX_NRIC),
            index=parse_index(argmap.get_value(PREFIX_INDEX)),
        )
