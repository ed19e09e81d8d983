"""Line source port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spanreport.domain.ports.file_ref import FileRef


class LineSourcePort(ABC):
    """Port for reading raw source lines.

    Infrastructure layer must provide implementation.
    The engine treats every call as idempotent and side-effect free.
    """

    @abstractmethod
    def line(self, file: FileRef, number: int) -> str:
        """Return one line of a file.

        Args:
            file: File identity
            number: 1-based line number

        Returns:
            Raw line text without the trailing newline

        Raises:
            SourceUnavailableError: If the file cannot be read
                or the line does not exist
        """
        ...
