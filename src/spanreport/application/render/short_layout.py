"""One-line-per-diagnostic layout.

    a.c:4:9:13: Error: type mismatch
    a.c:1:0:8: Note: declared here
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from spanreport.application.render.sorting import sort_secondaries

if TYPE_CHECKING:
    from spanreport.domain.model.config import RenderConfig
    from spanreport.domain.model.diagnostic import Diagnostic
    from spanreport.domain.ports.color_backend import ColorBackendPort


def short_line(diagnostic: Diagnostic, config: RenderConfig, backend: ColorBackendPort) -> str:
    """Format one diagnostic as `file:line:start:end: Label: message`.

    The location prefix is omitted when the diagnostic has no file.
    Newlines in the message become config.short_separator.
    """
    loc = diagnostic.location
    prefix = f"{loc}: " if loc.has_file else ""
    text = (diagnostic.message or diagnostic.sub_message).replace("\n", config.short_separator)
    label = backend.paint(f"{diagnostic.label}:", config.style_for(diagnostic.severity))
    if not text:
        return f"{prefix}{label}"
    return f"{prefix}{label} {backend.paint(text, config.message_style)}"


def short_lines(
    diagnostic: Diagnostic,
    config: RenderConfig,
    backend: ColorBackendPort,
) -> list[str]:
    """Primary first, then secondaries in render order (children after parents)."""
    lines = [short_line(diagnostic, config, backend)]
    for secondary in sort_secondaries(diagnostic):
        lines.extend(short_line(item, config, backend) for item in secondary.walk())
    return lines
