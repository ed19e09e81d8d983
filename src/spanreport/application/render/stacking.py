"""Depth-row assignment for overlapping spans on one line.

Spans that cannot share an underline strip are pushed to deeper rows.
Two spans clash when their ranges intersect and neither contains the
other: such spans can never be told apart on one strip. Disjoint spans
and nested spans share a strip; nested columns are drawn with a
heavier glyph (cover count > 1).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Column range of one underline, tagged with its owner.

    Attributes:
        start: First raw column (inclusive)
        end: Last raw column (exclusive)
        owner: Index of the labelled entry this span belongs to
    """

    start: int
    end: int
    owner: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end <= self.start:
            raise ValueError(f"end ({self.end}) must be > start ({self.start})")

    def __len__(self) -> int:
        return self.end - self.start

    def covers(self, column: int) -> bool:
        return self.start <= column < self.end

    def overlaps(self, other: Span) -> bool:
        return self.start < other.end and other.start < self.end

    def contains(self, other: Span) -> bool:
        return self.start <= other.start and other.end <= self.end

    def clashes(self, other: Span) -> bool:
        """Partial overlap: neither disjoint nor nested."""
        return self.overlaps(other) and not (self.contains(other) or other.contains(self))


@dataclass(frozen=True, slots=True)
class StripCell:
    """One raw column of an underline strip.

    Attributes:
        covers: Number of row spans covering the column (0 = connector)
        span: Span that owns the cell's style (innermost cover,
            or the span whose connector passes through)
    """

    covers: int
    span: Span

    @property
    def is_connector(self) -> bool:
        return self.covers == 0


def assign_rows(spans: Sequence[Span]) -> list[list[Span]]:
    """Partition spans into depth rows.

    Spans are taken in the given order (callers pass them rightmost
    start first) and each goes to the shallowest row holding no span it
    clashes with. A new row opens only when every existing row clashes.

    Args:
        spans: Spans of one source line

    Returns:
        Rows, shallowest first. Within a row, spans keep input order.
    """
    rows: list[list[Span]] = []
    for span in spans:
        for row in rows:
            if not any(span.clashes(placed) for placed in row):
                row.append(span)
                break
        else:
            rows.append([span])
    return rows


def strip_cells(
    row: Sequence[Span],
    connectors: Mapping[int, Span],
) -> list[StripCell | None]:
    """Cells of one underline strip.

    Args:
        row: Spans drawn in this strip
        connectors: Column -> span for spans of shallower rows (and
            label-only spans) whose start must be traced down through
            this strip

    Returns:
        One entry per raw column from 0 to the last drawn column;
        None for blank columns. No trailing None.
    """
    length = max(
        [span.end for span in row] + [col + 1 for col in connectors],
        default=0,
    )
    cells: list[StripCell | None] = []
    for col in range(length):
        covering = [span for span in row if span.covers(col)]
        if covering:
            innermost = min(covering, key=len)
            cells.append(StripCell(len(covering), innermost))
        elif col in connectors:
            cells.append(StripCell(0, connectors[col]))
        else:
            cells.append(None)
    while cells and cells[-1] is None:
        cells.pop()
    return cells
