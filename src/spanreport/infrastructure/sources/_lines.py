"""Text splitting shared by line sources."""

from __future__ import annotations


def split_source(text: str) -> tuple[str, ...]:
    """Split file content into lines.

    Only \\n separates lines (form feeds and other separators stay
    inside a line); a trailing \\r is dropped; a final newline does not
    open an extra empty line.
    """
    lines = text.split("\n")
    if len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return tuple(line.removesuffix("\r") for line in lines)
