"""Configuration exceptions."""

from __future__ import annotations

from spanreport.domain.exceptions.base import SpanReportError


class ConfigError(SpanReportError):
    """Invalid rendering configuration.

    Attributes:
        field: Name of the offending field
        reason: Why the value is rejected
    """

    def __init__(self, field: str, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if not field:
            raise ValueError("field must be non-empty string")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.field = field
        self.reason = reason
        super().__init__(f"Invalid config field {field!r}: {reason}")
