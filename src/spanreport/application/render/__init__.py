"""Diagnostic render engine."""

from spanreport.application.render.columns import ColumnMap
from spanreport.application.render.engine import render_lines, render_text, render_to
from spanreport.application.render.rich_layout import RichLayout
from spanreport.application.render.short_layout import short_line, short_lines
from spanreport.application.render.sorting import secondary_sort_key, sort_secondaries
from spanreport.application.render.stacking import Span, StripCell, assign_rows, strip_cells

__all__ = [
    "ColumnMap",
    "RichLayout",
    "Span",
    "StripCell",
    "assign_rows",
    "render_lines",
    "render_text",
    "render_to",
    "secondary_sort_key",
    "short_line",
    "short_lines",
    "sort_secondaries",
    "strip_cells",
]
