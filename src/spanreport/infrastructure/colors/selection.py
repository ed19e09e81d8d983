"""Backend selection from ColorMode."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from rich.console import Console

from spanreport.domain.model.config import ColorMode
from spanreport.infrastructure.colors.plain_backend import PlainColorBackend
from spanreport.infrastructure.colors.rich_backend import RichColorBackend

if TYPE_CHECKING:
    from spanreport.domain.ports.color_backend import ColorBackendPort


def select_backend(stream: TextIO | None, mode: ColorMode) -> ColorBackendPort:
    """Pick a color backend for a stream.

    ALWAYS: standard 16 colors. NEVER: no escape sequences.
    AUTO: whatever rich detects for the stream (honours NO_COLOR,
    FORCE_COLOR and TERM); plain when the stream is not a terminal.

    Args:
        stream: Destination stream (None = stdout).
        mode: Color mode from the config.

    Returns:
        Backend instance.
    """
    match mode:
        case ColorMode.ALWAYS:
            return RichColorBackend("standard")
        case ColorMode.NEVER:
            return PlainColorBackend()
        case ColorMode.AUTO:
            console = Console(file=stream)
            if console.color_system is None or console.no_color:
                return PlainColorBackend()
            return RichColorBackend(console.color_system)
    raise ValueError(f"unknown color mode: {mode!r}")
