"""Render entry points.

Picks the layout for config.display_style and fills in default
collaborators (line source, color backend) when the caller gives none.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO

from spanreport.application.render.rich_layout import RichLayout
from spanreport.application.render.short_layout import short_lines
from spanreport.domain.model.config import DEFAULT_CONFIG, DisplayStyle
from spanreport.infrastructure.colors import select_backend
from spanreport.infrastructure.sources import FileLineSource

if TYPE_CHECKING:
    from spanreport.domain.model.config import RenderConfig
    from spanreport.domain.model.diagnostic import Diagnostic
    from spanreport.domain.ports.color_backend import ColorBackendPort
    from spanreport.domain.ports.line_source import LineSourcePort

logger = logging.getLogger(__name__)


def render_lines(
    diagnostic: Diagnostic,
    config: RenderConfig,
    source: LineSourcePort,
    backend: ColorBackendPort,
) -> list[str]:
    """Render a diagnostic into output lines (no newlines).

    Sorts diagnostic.secondaries in place; nothing else is mutated.
    """
    logger.debug(
        "Rendering %s %r with %d secondaries (%s)",
        diagnostic.severity.name,
        diagnostic.message,
        len(diagnostic.secondaries),
        config.display_style.name,
    )
    if config.display_style is DisplayStyle.SHORT:
        return short_lines(diagnostic, config, backend)
    return RichLayout(diagnostic, config, source, backend).render()


def render_text(
    diagnostic: Diagnostic,
    config: RenderConfig | None = None,
    *,
    source: LineSourcePort | None = None,
    backend: ColorBackendPort | None = None,
    stream: TextIO | None = None,
) -> str:
    """Render a diagnostic to a string.

    Args:
        diagnostic: Diagnostic to render
        config: Rendering parameters (default: DEFAULT_CONFIG)
        source: Line accessor (default: a fresh FileLineSource)
        backend: Color backend (default: chosen by config.color_mode)
        stream: Stream the text is meant for; drives ColorMode.AUTO
            (None = stdout)

    Returns:
        Newline-terminated text, or "" when there is nothing to show
    """
    config = config or DEFAULT_CONFIG
    source = source if source is not None else FileLineSource()
    backend = backend if backend is not None else select_backend(stream, config.color_mode)

    lines = render_lines(diagnostic, config, source, backend)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def render_to(
    diagnostic: Diagnostic,
    sink: TextIO,
    config: RenderConfig | None = None,
    *,
    source: LineSourcePort | None = None,
    backend: ColorBackendPort | None = None,
) -> None:
    """Render a diagnostic and write it to sink in one write call."""
    if sink is None:
        raise TypeError("sink must not be None")
    sink.write(render_text(diagnostic, config, source=source, backend=backend, stream=sink))
