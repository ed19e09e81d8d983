"""spanreport - source-annotated compiler diagnostics for the terminal."""

__version__ = "0.1.0"

from spanreport.application.reporters import DiagnosticReporter
from spanreport.domain.model import (
    NO_LOCATION,
    Attribute,
    Color,
    ColorMode,
    Diagnostic,
    DisplayStyle,
    Glyphs,
    Location,
    RenderConfig,
    Severity,
    Style,
    error,
    help_,
    internal,
    note,
    warning,
)
from spanreport.infrastructure.sources import FileLineSource, MemoryLineSource, SourceFile

__all__ = [
    "NO_LOCATION",
    "Attribute",
    "Color",
    "ColorMode",
    "Diagnostic",
    "DiagnosticReporter",
    "DisplayStyle",
    "FileLineSource",
    "Glyphs",
    "Location",
    "MemoryLineSource",
    "RenderConfig",
    "Severity",
    "SourceFile",
    "Style",
    "__version__",
    "error",
    "help_",
    "internal",
    "note",
    "warning",
]
