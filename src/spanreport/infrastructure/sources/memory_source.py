"""Line source over in-memory text."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from spanreport.domain.exceptions import SourceUnavailableError
from spanreport.domain.ports.line_source import LineSourcePort
from spanreport.infrastructure.sources._lines import split_source

if TYPE_CHECKING:
    from spanreport.domain.ports.file_ref import FileRef


class MemoryLineSource(LineSourcePort):
    """Line source for text that never touched the disk.

    Useful for REPLs, generated code and tests.
    Files are looked up by FileRef.name.
    """

    def __init__(self, files: Mapping[str, str] | None = None) -> None:
        """Initialize source.

        Args:
            files: File name -> full text mapping
        """
        self._files: dict[str, tuple[str, ...]] = {}
        for name, text in (files or {}).items():
            self.add(name, text)

    def add(self, name: str, text: str) -> None:
        """Register (or replace) a file."""
        if not name:
            raise ValueError("name must be non-empty string")
        self._files[name] = split_source(text)

    def line(self, file: FileRef, number: int) -> str:
        """Return line `number` of `file`.

        Raises:
            SourceUnavailableError: If the file is unknown
                or the line is out of range
        """
        lines = self._files.get(file.name)
        if lines is None:
            raise SourceUnavailableError(file.name, number, "unknown file")
        if not 1 <= number <= len(lines):
            raise SourceUnavailableError(
                file.name,
                number,
                f"line out of range (file has {len(lines)} lines)",
            )
        return lines[number - 1]
