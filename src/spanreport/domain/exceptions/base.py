"""Base exceptions for spanreport domain."""


class SpanReportError(Exception):
    """Root exception for all spanreport errors.

    All domain exceptions inherit from this.
    Allows catching all spanreport-specific errors.
    """
