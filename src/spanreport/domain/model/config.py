"""Rendering configuration.

Immutable snapshot passed into every render call.
Never mutated by rendering.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Any

from spanreport.domain.exceptions import ConfigError
from spanreport.domain.model.severity import Severity
from spanreport.domain.model.style import BOLD, Attribute, Color, Style


class DisplayStyle(Enum):
    """Output layout."""

    RICH = auto()  # annotated source snippets
    SHORT = auto()  # one line per diagnostic


class ColorMode(Enum):
    """When to emit escape sequences."""

    AUTO = auto()  # ask the terminal
    ALWAYS = auto()
    NEVER = auto()


def _default_severity_styles() -> Mapping[Severity, Style]:
    error = Style.fg(Color.RED, Attribute.BOLD)
    return MappingProxyType(
        {
            Severity.INTERNAL: error,
            Severity.ERROR: error,
            Severity.WARNING: Style.fg(Color.YELLOW, Attribute.BOLD),
            Severity.NOTE: Style.fg(Color.BLACK, Attribute.BOLD),
            Severity.HELP: Style.fg(Color.BLUE, Attribute.BOLD),
            Severity.UNKNOWN: error,
        },
    )


@dataclass(frozen=True, slots=True)
class Glyphs:
    """Characters used to draw the snippet frame.

    Attributes:
        header_open: Before the file name in a block header.
        header_close: After the file name in a block header.
        vertical: Gutter bar and label connectors.
        horizontal: Bottom border fill.
        corner: Bottom border end.
        branch: Label hook under a span start.
        bullet: Prefix of unlocated secondaries.
        primary_below: Primary mark under the source line.
        primary_above: Primary mark above the source line.
        underlines: Underline alphabet, indexed by cover count - 1 (cycled).
        ellipsis: Elision marks for 1, 2 and 3+ gutter digits.
    """

    header_open: str = "╭─ "
    header_close: str = " ─╴"
    vertical: str = "│"
    horizontal: str = "─"
    corner: str = "╯"
    branch: str = "╰"
    bullet: str = "•"
    primary_below: str = "^"
    primary_above: str = "v"
    underlines: tuple[str, ...] = ("~", "=", "#", "*", "-", "+")
    ellipsis: tuple[str, str, str] = ("⋯", "··", "···")

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("header_open", "header_close", "bullet"):
            if not getattr(self, name):
                raise ConfigError(name, "must not be empty")
        for name in ("vertical", "horizontal", "corner", "branch", "primary_below", "primary_above"):
            value = getattr(self, name)
            if len(value) != 1:
                raise ConfigError(name, f"must be a single character, got {value!r}")
        if not self.underlines:
            raise ConfigError("underlines", "must not be empty")
        if any(len(g) != 1 for g in self.underlines):
            raise ConfigError("underlines", "every glyph must be a single character")
        if len(self.ellipsis) != 3:
            raise ConfigError("ellipsis", f"needs 3 entries, got {len(self.ellipsis)}")
        if not all(self.ellipsis):
            raise ConfigError("ellipsis", "entries must not be empty")

    def underline(self, covers: int) -> str:
        """Underline glyph for a column covered by `covers` spans."""
        return self.underlines[(covers - 1) % len(self.underlines)]

    def elision(self, digits: int) -> str:
        """Ellipsis mark for a gutter with `digits` line-number digits."""
        return self.ellipsis[min(digits, 3) - 1]


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Rendering parameters.

    All fields have defaults; override any of them.
    Immutable (frozen dataclass).

    Attributes:
        severity_styles: Style per severity. Must cover every Severity.
        message_style: Style of the header message text.
        border_style: Gutter/border style. None = primary severity's style.
        line_number_style: Gutter number style. None = primary severity's style.
        gutter_padding_left: Spaces before line numbers.
        gutter_padding_right: Minimum spaces after line numbers.
        border_padding_top: Blank gutter lines after a block header.
        border_padding_bottom: Blank gutter lines before a bottom border.
        glyphs: Frame characters.
        tab_width: Tab stop distance.
        display_style: RICH snippets or SHORT one-liners.
        short_separator: Replaces newlines in SHORT messages.
        color_mode: When the default backend emits colors.
    """

    severity_styles: Mapping[Severity, Style] = field(default_factory=_default_severity_styles)
    message_style: Style = BOLD
    border_style: Style | None = None
    line_number_style: Style | None = None
    gutter_padding_left: int = 1
    gutter_padding_right: int = 1
    border_padding_top: int = 1
    border_padding_bottom: int = 0
    glyphs: Glyphs = field(default_factory=Glyphs)
    tab_width: int = 4
    display_style: DisplayStyle = DisplayStyle.RICH
    short_separator: str = " "
    color_mode: ColorMode = ColorMode.AUTO

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        missing = [s.name for s in Severity if s not in self.severity_styles]
        if missing:
            raise ConfigError("severity_styles", f"missing styles for {', '.join(missing)}")
        # frozen: bypass __setattr__; keep a private read-only snapshot
        object.__setattr__(self, "severity_styles", MappingProxyType(dict(self.severity_styles)))
        if self.tab_width < 1:
            raise ConfigError("tab_width", f"must be >= 1, got {self.tab_width}")
        for name in (
            "gutter_padding_left",
            "gutter_padding_right",
            "border_padding_top",
            "border_padding_bottom",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ConfigError(name, f"must be >= 0, got {value}")
        if "\n" in self.short_separator:
            raise ConfigError("short_separator", "must not contain a newline")

    def style_for(self, severity: Severity) -> Style:
        """Style of a severity."""
        return self.severity_styles[severity]

    def replace(self, **changes: Any) -> RenderConfig:
        """Copy with some fields changed."""
        return dataclasses.replace(self, **changes)


def resolve_style(override: Style | None, severity: Severity, config: RenderConfig) -> Style:
    """Resolve an optional override against a severity's own style.

    None means "inherit": use whatever the severity's color is.
    """
    if override is not None:
        return override
    return config.style_for(severity)


DEFAULT_CONFIG = RenderConfig()
