"""Terminal style value object.

A Style is backend-agnostic: infrastructure color backends translate
it into escape sequences (or ignore it).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto


class Color(Enum):
    """The 16 standard terminal colors."""

    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    BRIGHT_BLACK = "bright_black"
    BRIGHT_RED = "bright_red"
    BRIGHT_GREEN = "bright_green"
    BRIGHT_YELLOW = "bright_yellow"
    BRIGHT_BLUE = "bright_blue"
    BRIGHT_MAGENTA = "bright_magenta"
    BRIGHT_CYAN = "bright_cyan"
    BRIGHT_WHITE = "bright_white"


class Attribute(Flag):
    """Text attribute bits. Combine with |."""

    NONE = 0
    BOLD = auto()
    DIM = auto()
    ITALIC = auto()
    UNDERLINE = auto()
    BLINK = auto()
    REVERSE = auto()
    STRIKE = auto()


@dataclass(frozen=True, slots=True)
class Style:
    """Foreground, background and attribute bits.

    Attributes:
        foreground: Text color. None = terminal default.
        background: Background color. None = terminal default.
        attributes: Attribute bits.
    """

    foreground: Color | None = None
    background: Color | None = None
    attributes: Attribute = Attribute.NONE

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.foreground is not None and not isinstance(self.foreground, Color):
            raise TypeError(f"foreground must be Color, got {type(self.foreground).__name__}")
        if self.background is not None and not isinstance(self.background, Color):
            raise TypeError(f"background must be Color, got {type(self.background).__name__}")
        if not isinstance(self.attributes, Attribute):
            raise TypeError(f"attributes must be Attribute, got {type(self.attributes).__name__}")

    def with_(self, other: Style) -> Style:
        """Compose: attributes accumulate, last non-None color wins."""
        return Style(
            foreground=other.foreground if other.foreground is not None else self.foreground,
            background=other.background if other.background is not None else self.background,
            attributes=self.attributes | other.attributes,
        )

    def __add__(self, other: Style) -> Style:
        if not isinstance(other, Style):
            return NotImplemented
        return self.with_(other)

    @property
    def is_plain(self) -> bool:
        return self == PLAIN

    @classmethod
    def fg(cls, color: Color, attributes: Attribute = Attribute.NONE) -> Style:
        """Style with only a foreground color (and optional attributes)."""
        return cls(foreground=color, attributes=attributes)


PLAIN = Style()
BOLD = Style(attributes=Attribute.BOLD)
