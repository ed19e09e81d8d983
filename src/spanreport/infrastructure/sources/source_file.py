"""Filesystem-backed file identity."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SourceFile:
    """A source file identified by its path.

    Satisfies the FileRef port: hashable, equal by path.

    Attributes:
        path: Path as given by the compiler
    """

    path: Path

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))
        if not str(self.path) or self.path == Path():
            raise ValueError("path must be non-empty")

    @property
    def name(self) -> str:
        """Path exactly as given (used in block headers)."""
        return str(self.path)

    @property
    def basename(self) -> str:
        """File name without directories."""
        return self.path.name

    @property
    def stem(self) -> str:
        """File name without directories and extension."""
        return self.path.stem

    def __str__(self) -> str:
        return self.name
