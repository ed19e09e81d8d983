"""Source access exceptions."""

from __future__ import annotations

from spanreport.domain.exceptions.base import SpanReportError


class SourceUnavailableError(SpanReportError):
    """A source line could not be produced.

    Raised by line sources when the file cannot be read
    or the requested line does not exist.

    Attributes:
        name: Display name of the file
        line: Requested 1-based line number
        reason: Why the line is unavailable
    """

    def __init__(self, name: str, line: int, reason: str) -> None:
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.name = name
        self.line = line
        self.reason = reason
        super().__init__(f"Cannot read line {line} of {name}: {reason}")
