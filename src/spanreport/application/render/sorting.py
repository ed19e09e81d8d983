"""Render order of secondaries."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spanreport.domain.model.diagnostic import Diagnostic
    from spanreport.domain.ports.file_ref import FileRef


def secondary_sort_key(
    secondary: Diagnostic,
    primary_file: FileRef | None,
) -> tuple[bool, bool, str, int, int, int]:
    """Total order used before every render.

    1. located before unlocated
    2. the primary's file before other files
    3. other files by display name
    4. line ascending, then start DESCENDING (then end descending):
       same-line spans are visited right to left, which is the order
       the stacking consumes them in.
    """
    loc = secondary.location
    if loc.file is None:
        return (True, True, "", 0, 0, 0)
    return (
        False,
        loc.file != primary_file,
        loc.file.name,
        loc.line,
        -loc.start,
        -loc.end,
    )


def sort_secondaries(diagnostic: Diagnostic) -> list[Diagnostic]:
    """Sort diagnostic.secondaries in place and return the list.

    Deterministic: sorting an already sorted list is a no-op, so
    repeated renders see the same order.
    """
    primary_file = diagnostic.location.file
    diagnostic.secondaries.sort(key=lambda s: secondary_sort_key(s, primary_file))
    return diagnostic.secondaries
