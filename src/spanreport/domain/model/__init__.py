"""Domain model: value objects and the Diagnostic entity."""

from spanreport.domain.model.config import (
    DEFAULT_CONFIG,
    ColorMode,
    DisplayStyle,
    Glyphs,
    RenderConfig,
    resolve_style,
)
from spanreport.domain.model.diagnostic import (
    Diagnostic,
    error,
    help_,
    internal,
    note,
    warning,
)
from spanreport.domain.model.location import NO_LOCATION, Location
from spanreport.domain.model.severity import Severity
from spanreport.domain.model.style import BOLD, PLAIN, Attribute, Color, Style

__all__ = [
    "BOLD",
    "DEFAULT_CONFIG",
    "NO_LOCATION",
    "PLAIN",
    "Attribute",
    "Color",
    "ColorMode",
    "Diagnostic",
    "DisplayStyle",
    "Glyphs",
    "Location",
    "RenderConfig",
    "Severity",
    "Style",
    "error",
    "help_",
    "internal",
    "note",
    "resolve_style",
    "warning",
]
