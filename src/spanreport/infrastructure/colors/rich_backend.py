"""Color backend rendering ANSI sequences through rich."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from rich.color import ColorSystem
from rich.style import Style as RichStyle

from spanreport.domain.model.style import Attribute

if TYPE_CHECKING:
    from spanreport.domain.model.style import Style

_COLOR_SYSTEMS = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}


@lru_cache(maxsize=128)
def to_rich_style(style: Style) -> RichStyle:
    """Translate a domain Style into a rich Style."""
    attrs = style.attributes
    return RichStyle(
        color=style.foreground.value if style.foreground is not None else None,
        bgcolor=style.background.value if style.background is not None else None,
        bold=Attribute.BOLD in attrs or None,
        dim=Attribute.DIM in attrs or None,
        italic=Attribute.ITALIC in attrs or None,
        underline=Attribute.UNDERLINE in attrs or None,
        blink=Attribute.BLINK in attrs or None,
        reverse=Attribute.REVERSE in attrs or None,
        strike=Attribute.STRIKE in attrs or None,
    )


class RichColorBackend:
    """Color backend emitting SGR escape sequences via rich.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, color_system: str = "standard") -> None:
        """Initialize backend.

        Args:
            color_system: rich color system name
                ("standard", "256", "truecolor", "windows")
        """
        if color_system not in _COLOR_SYSTEMS:
            raise ValueError(
                f"color_system must be one of {sorted(_COLOR_SYSTEMS)}, got {color_system!r}",
            )
        self._color_system = _COLOR_SYSTEMS[color_system]

    @property
    def color_system(self) -> ColorSystem:
        return self._color_system

    def paint(self, text: str, style: Style) -> str:
        """Wrap text in the escape sequence for style."""
        if not text or style.is_plain:
            return text
        return to_rich_style(style).render(text, color_system=self._color_system)
