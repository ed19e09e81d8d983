"""Annotated-snippet layout.

Produces, for one diagnostic:

    Error: type mismatch
       ╭─ a ─╴
       │
     1 │ int main() {
       │ ~~~~~~~~ declared here
       ⋯
     4 │     x = "str";
       │         ^^^^ expected int
    ───╯

Phases: header, then one framed block per file (primary file first),
then bullet lines for unlocated secondaries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import groupby
from typing import TYPE_CHECKING, Any

from spanreport.application.render.columns import ColumnMap
from spanreport.application.render.sorting import sort_secondaries
from spanreport.application.render.stacking import Span, assign_rows, strip_cells
from spanreport.domain.exceptions import SourceUnavailableError
from spanreport.domain.model.config import resolve_style

if TYPE_CHECKING:
    from collections.abc import Sequence

    from spanreport.domain.model.config import RenderConfig
    from spanreport.domain.model.diagnostic import Diagnostic
    from spanreport.domain.model.style import Style
    from spanreport.domain.ports.color_backend import ColorBackendPort
    from spanreport.domain.ports.file_ref import FileRef
    from spanreport.domain.ports.line_source import LineSourcePort

logger = logging.getLogger(__name__)

# (text, style); style None = unpainted
Segment = tuple[str, "Style | None"]


@dataclass(frozen=True, slots=True)
class _Label:
    """One label line to print under a run of spans."""

    start: int
    diagnostic: Diagnostic


class RichLayout:
    """Renders one diagnostic as framed, annotated source snippets.

    One instance per render call. Holds no state beyond the call.
    """

    def __init__(
        self,
        diagnostic: Diagnostic,
        config: RenderConfig,
        source: LineSourcePort,
        backend: ColorBackendPort,
    ) -> None:
        """Initialize layout.

        Args:
            diagnostic: Primary diagnostic to render
            config: Rendering parameters
            source: Line accessor
            backend: Color backend
        """
        self._diag = diagnostic
        self._config = config
        self._glyphs = config.glyphs
        self._source = source
        self._backend = backend
        self._lines: list[str] = []
        self._line_cache: dict[tuple[FileRef, int], str] = {}

        severity = diagnostic.severity
        self._style = config.style_for(severity)
        self._border = resolve_style(config.border_style, severity, config)
        self._number = resolve_style(config.line_number_style, severity, config)

        # merged children are drawn on their parent's line
        max_line = max([diagnostic.location.line] + [s.location.line for s in diagnostic.secondaries])
        self._digits = len(str(max_line))
        self._width = config.gutter_padding_left + self._digits + config.gutter_padding_right

    def render(self) -> list[str]:
        """Lay out the diagnostic.

        Returns:
            Output lines without newlines
        """
        diag = self._diag
        secondaries = sort_secondaries(diag)

        if diag.message:
            self._emit(
                [(f"{diag.label}: ", self._style), (diag.message, self._config.message_style)],
            )

        located = [s for s in secondaries if s.location.has_file]
        unlocated = [s for s in secondaries if not s.location.has_file]

        for file, members in self._blocks(located):
            self._render_block(file, members)

        for secondary in unlocated:
            for item in secondary.walk():
                self._render_bullet(item)

        return self._lines

    # =========================================================================
    # Blocks
    # =========================================================================

    def _blocks(self, located: Sequence[Diagnostic]) -> list[tuple[FileRef, list[Diagnostic]]]:
        """Group located secondaries into per-file blocks, primary file first."""
        blocks: list[tuple[FileRef, list[Diagnostic]]] = []
        for file, members in groupby(located, key=lambda s: s.location.file):
            if file is not None:
                blocks.append((file, list(members)))
        primary_file = self._diag.location.file
        if primary_file is not None and (not blocks or blocks[0][0] != primary_file):
            blocks.insert(0, (primary_file, []))
        return blocks

    def _render_block(self, file: FileRef, members: list[Diagnostic]) -> None:
        primary = self._diag.location
        has_primary = primary.file == file

        by_line: dict[int, list[Diagnostic]] = {}
        for member in members:
            by_line.setdefault(member.location.line, []).append(member)
        numbers = set(by_line)
        if has_primary:
            numbers.add(primary.line)

        self._emit(
            [
                (" " * self._width, None),
                (self._glyphs.header_open, self._border),
                (file.name, None),
                (self._glyphs.header_close, self._border),
            ],
        )
        for _ in range(self._config.border_padding_top):
            self._emit(self._gutter())

        last: int | None = None
        for number in sorted(numbers):
            if last is not None:
                self._render_gap(file, last, number)
            last = number

            cmap = ColumnMap(self._read(file, number), self._config.tab_width)
            run = by_line.get(number, [])
            if has_primary and number == primary.line:
                self._render_primary_line(number, cmap, run)
            else:
                self._emit(self._numbered(number, cmap))
                self._render_run(cmap, run)

        for _ in range(self._config.border_padding_bottom):
            self._emit(self._gutter())
        self._emit([(self._glyphs.horizontal * self._width + self._glyphs.corner, self._border)])

    def _render_gap(self, file: FileRef, last: int, number: int) -> None:
        """Bridge a one-line gap verbatim, elide anything larger."""
        skipped = number - last - 1
        if skipped == 1:
            bridge = last + 1
            cmap = ColumnMap(self._read(file, bridge), self._config.tab_width)
            self._emit(self._numbered(bridge, cmap))
        elif skipped > 1:
            pad = " " * self._config.gutter_padding_left
            self._emit([(pad, None), (self._glyphs.elision(self._digits), self._border)])

    # =========================================================================
    # Lines
    # =========================================================================

    def _render_primary_line(self, number: int, cmap: ColumnMap, run: list[Diagnostic]) -> None:
        """Primary's line: mark above when secondaries share the line."""
        loc = self._diag.location
        exact = [s for s in run if s.location == loc]
        marked = [s for s in run if s.location != loc]
        print_above = bool(marked)

        indent = (cmap.indent(loc.start), None)
        mark_width = cmap.offset(loc.end) - cmap.offset(loc.start)
        sub_lines = self._diag.sub_message.split("\n") if self._diag.sub_message else []

        if print_above:
            for text in sub_lines:
                self._emit([*self._gutter(), indent, (text, self._style)])
            self._emit([*self._gutter(), indent, (self._glyphs.primary_above * mark_width, self._style)])

        self._emit(self._numbered(number, cmap))

        if not print_above:
            marker = (self._glyphs.primary_below * mark_width, self._style)
            if not sub_lines:
                self._emit([*self._gutter(), indent, marker])
            for i, text in enumerate(sub_lines):
                head = marker if i == 0 else (" " * mark_width, None)
                self._emit([*self._gutter(), indent, head, (" ", None), (text, self._style)])

        self._render_run(cmap, marked, exact)

    def _render_run(
        self,
        cmap: ColumnMap,
        marked: list[Diagnostic],
        exact: Sequence[Diagnostic] = (),
    ) -> None:
        """Underline strips and labels for the secondaries of one line.

        Args:
            cmap: Geometry of the source line
            marked: Secondaries drawn in the strips, rightmost start first
            exact: Secondaries at the primary's location (labels only)
        """
        labels = [_Label(s.location.start, item) for s in marked for item in s.walk()]
        anchor = self._diag.location.start
        labels += [_Label(anchor, item) for s in exact for item in s.walk()]
        if not labels:
            return
        labels.sort(key=lambda label: -label.start)

        if len(labels) == 1 and marked:
            self._render_inline(cmap, marked[0])
            return

        styles = [self._style_of(s) for s in marked]
        spans = [Span(s.location.start, s.location.end, i) for i, s in enumerate(marked)]

        # label-only spans trace down from the primary mark
        connectors: dict[int, tuple[Span, Style]] = {}
        if exact:
            connectors[anchor] = (Span(anchor, anchor + 1), self._style_of(exact[0]))

        for row in assign_rows(spans):
            cells = strip_cells(row, {col: span for col, (span, _) in connectors.items()})
            segments: list[Segment] = []
            for col, cell in enumerate(cells):
                width = cmap.width(col)
                if cell is None:
                    segments.append((" " * width, None))
                elif cell.is_connector:
                    segments.append((self._glyphs.vertical, connectors[col][1]))
                    segments.append((" " * (width - 1), None))
                else:
                    glyph = self._glyphs.underline(cell.covers)
                    segments.append((glyph * width, styles[cell.span.owner]))
            self._emit([*self._gutter(), *segments])
            for span in row:
                connectors.setdefault(span.start, (span, styles[span.owner]))

        for i, label in enumerate(labels):
            self._render_label(cmap, label, labels[i + 1 :])

    def _render_inline(self, cmap: ColumnMap, secondary: Diagnostic) -> None:
        """Single label: text follows the underline on the same row."""
        loc = secondary.location
        style = self._style_of(secondary)
        width = cmap.offset(loc.end) - cmap.offset(loc.start)
        lines = secondary.text.split("\n")
        self._emit(
            [
                *self._gutter(),
                (cmap.indent(loc.start), None),
                (self._glyphs.underline(1) * width, style),
                (" ", None),
                (lines[0], style),
            ],
        )
        for text in lines[1:]:
            self._emit([*self._gutter(), (cmap.indent(loc.end), None), (" ", None), (text, style)])

    def _render_label(self, cmap: ColumnMap, label: _Label, pending: Sequence[_Label]) -> None:
        """One label with a branch at its column and bars for pending labels."""
        bars: dict[int, Style] = {}
        for other in pending:
            if other.start < label.start:
                bars.setdefault(other.start, self._style_of(other.diagnostic))

        prefix: list[Segment] = []
        for col in range(label.start):
            width = cmap.width(col)
            if col in bars:
                prefix.append((self._glyphs.vertical, bars[col]))
                prefix.append((" " * (width - 1), None))
            else:
                prefix.append((" " * width, None))

        style = self._style_of(label.diagnostic)
        lines = label.diagnostic.text.split("\n")
        self._emit([*self._gutter(), *prefix, (self._glyphs.branch, style), (" ", None), (lines[0], style)])
        for text in lines[1:]:
            self._emit([*self._gutter(), *prefix, ("  ", None), (text, style)])

    def _render_bullet(self, secondary: Diagnostic) -> None:
        """Unlocated secondary: bullet with hanging indent."""
        style = self._style_of(secondary)
        head = f"{self._glyphs.bullet} {secondary.label}: "
        lines = secondary.text.split("\n")
        pad = (" " * self._width, None)
        self._emit([pad, (head, style), (lines[0], None)])
        for text in lines[1:]:
            self._emit([pad, (" " * len(head), None), (text, None)])

    # =========================================================================
    # Gutter
    # =========================================================================

    def _gutter(self) -> list[Segment]:
        return [(" " * self._width, None), (self._glyphs.vertical, self._border), (" ", None)]

    def _numbered(self, number: int, cmap: ColumnMap) -> list[Segment]:
        """Gutter with a line number, followed by the source text."""
        left = " " * self._config.gutter_padding_left
        return [
            (f"{left}{number}".ljust(self._width), self._number),
            (self._glyphs.vertical, self._border),
            (" ", None),
            (cmap.expanded(), None),
        ]

    # =========================================================================
    # Helpers
    # =========================================================================

    def _style_of(self, diagnostic: Diagnostic) -> Style:
        return self._config.style_for(diagnostic.severity)

    def _read(self, file: FileRef, number: int) -> str:
        """Source line, or "" when the line source cannot produce it."""
        key = (file, number)
        if key not in self._line_cache:
            try:
                text = self._source.line(file, number)
            except SourceUnavailableError as exc:
                logger.warning("Rendering empty line: %s", exc)
                text = ""
            self._line_cache[key] = text
        return self._line_cache[key]

    def _emit(self, segments: Sequence[Segment]) -> None:
        """Paint, join and store one output line (trailing blanks dropped)."""
        merged: list[list[Any]] = []
        for text, style in segments:
            if not text:
                continue
            if merged and merged[-1][1] == style:
                merged[-1][0] += text
            else:
                merged.append([text, style])
        while merged and merged[-1][1] is None and not merged[-1][0].strip(" "):
            merged.pop()
        if merged and merged[-1][1] is None:
            merged[-1][0] = merged[-1][0].rstrip(" ")
        self._lines.append(
            "".join(text if style is None else self._backend.paint(text, style) for text, style in merged),
        )
