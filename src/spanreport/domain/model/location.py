"""Source span value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spanreport.domain.ports.file_ref import FileRef


@dataclass(frozen=True, slots=True)
class Location:
    """Half-open column range on one source line.

    Example: Location(line=2, start=2, end=5, file=f) covers the 3rd
    through the 5th character of the second line of f.

    Attributes:
        line: Line number (1-based; 0 only for the no-location sentinel)
        start: First column (0-based, inclusive)
        end: Last column (exclusive). Clamped to start + 1 when end <= start.
        file: Owning file. None = no source position.
    """

    line: int
    start: int
    end: int
    file: FileRef | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST, except the span clamp."""
        if self.line < 0:
            raise ValueError(f"line must be >= 0, got {self.line}")
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end <= self.start:
            # frozen: bypass __setattr__
            object.__setattr__(self, "end", self.start + 1)

    @classmethod
    def at(cls, line: int, column: int, file: FileRef | None = None) -> Location:
        """Single-character location."""
        return cls(line, column, column + 1, file)

    @property
    def has_file(self) -> bool:
        return self.file is not None

    def __str__(self) -> str:
        """Format as file:line:start:end."""
        if self.file is None:
            return "<unknown>"
        return f"{self.file.name}:{self.line}:{self.start}:{self.end}"


NO_LOCATION = Location(0, 0, 0, None)
