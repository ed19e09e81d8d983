"""Tab-aware mapping from raw columns to printed columns."""

from __future__ import annotations


class ColumnMap:
    """Printed geometry of one raw source line.

    A tab at printed column c occupies tab_width - c % tab_width columns.
    Columns past the end of the line are one printed column each, so
    spans pointing just after the text (a missing semicolon) still map.

    Every visual element of a snippet goes through the same map, which
    keeps underlines aligned with the text above them.
    """

    __slots__ = ("_offsets", "_text", "_widths")

    def __init__(self, text: str, tab_width: int) -> None:
        if tab_width < 1:
            raise ValueError(f"tab_width must be >= 1, got {tab_width}")
        self._text = text
        offsets: list[int] = []
        widths: list[int] = []
        col = 0
        for ch in text:
            width = tab_width - col % tab_width if ch == "\t" else 1
            offsets.append(col)
            widths.append(width)
            col += width
        offsets.append(col)
        self._offsets = offsets
        self._widths = widths

    def offset(self, raw: int) -> int:
        """Printed column where raw column `raw` starts."""
        if raw < len(self._offsets):
            return self._offsets[raw]
        return self._offsets[-1] + raw - len(self._text)

    def width(self, raw: int) -> int:
        """Printed width of raw column `raw`."""
        if raw < len(self._widths):
            return self._widths[raw]
        return 1

    def expanded(self) -> str:
        """The line with tabs replaced by spaces."""
        return "".join(
            " " * self._widths[i] if ch == "\t" else ch for i, ch in enumerate(self._text)
        )

    def indent(self, raw: int) -> str:
        """Blank run reaching from column 0 to raw column `raw`."""
        return " " * self.offset(raw)
