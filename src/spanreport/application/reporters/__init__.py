"""Reporters: collect and print diagnostics of a compilation."""

from spanreport.application.reporters.diagnostic_reporter import ABORT_MESSAGE, DiagnosticReporter

__all__ = [
    "ABORT_MESSAGE",
    "DiagnosticReporter",
]
