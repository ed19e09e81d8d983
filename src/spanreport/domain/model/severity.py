"""Diagnostic severities."""

from enum import Enum, auto


class Severity(Enum):
    """Closed set of diagnostic kinds.

    INTERNAL and UNKNOWN are taxonomy markers for the embedding compiler
    ("should never reach a user"); they render like ERROR.
    """

    INTERNAL = auto()
    ERROR = auto()
    WARNING = auto()
    NOTE = auto()
    HELP = auto()
    UNKNOWN = auto()

    @property
    def title(self) -> str:
        """Human-readable label, e.g. 'Warning'."""
        return _TITLES[self]

    @property
    def is_error(self) -> bool:
        """True for kinds that fail a compilation."""
        return self in (Severity.ERROR, Severity.INTERNAL, Severity.UNKNOWN)


_TITLES = {
    Severity.INTERNAL: "Internal Error",
    Severity.ERROR: "Error",
    Severity.WARNING: "Warning",
    Severity.NOTE: "Note",
    Severity.HELP: "Help",
    Severity.UNKNOWN: "Unknown",
}
