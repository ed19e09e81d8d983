"""File identity port."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FileRef(Protocol):
    """Opaque identity of a source file.

    The engine only reads the display name and compares identities
    (to detect file-boundary crossings). Implementations must be hashable
    and define equality.
    """

    @property
    def name(self) -> str:
        """Display string (path or name) used in block headers."""
        ...
