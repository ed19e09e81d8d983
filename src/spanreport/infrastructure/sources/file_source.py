"""Line source reading files from disk.

Each file is read once per FileLineSource and kept in memory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from spanreport.domain.exceptions import SourceUnavailableError
from spanreport.domain.ports.line_source import LineSourcePort
from spanreport.infrastructure.sources._lines import split_source

if TYPE_CHECKING:
    from spanreport.domain.ports.file_ref import FileRef

logger = logging.getLogger(__name__)


@dataclass
class FileLineSource(LineSourcePort):
    """Line source backed by the filesystem, with an in-memory cache.

    The file is located by FileRef.name. Undecodable bytes are replaced,
    never raised: a diagnostic about a broken file must still render.

    Cache is in-memory only. Not thread-safe for writes.

    Attributes:
        encoding: Text encoding of source files
        root: Directory relative names are resolved against. None = cwd.
        _cache: File name -> lines mapping
    """

    encoding: str = "utf-8"
    root: Path | None = None
    _cache: dict[str, tuple[str, ...]] = field(default_factory=dict, repr=False)

    def line(self, file: FileRef, number: int) -> str:
        """Return line `number` of `file`.

        Raises:
            SourceUnavailableError: If the file cannot be read
                or the line is out of range
        """
        lines = self._lines(file)
        if not 1 <= number <= len(lines):
            raise SourceUnavailableError(
                file.name,
                number,
                f"line out of range (file has {len(lines)} lines)",
            )
        return lines[number - 1]

    def invalidate(self, file: FileRef | None = None) -> None:
        """Drop cached content for one file, or for all files."""
        if file is None:
            self._cache.clear()
        else:
            self._cache.pop(file.name, None)

    def _lines(self, file: FileRef) -> tuple[str, ...]:
        cached = self._cache.get(file.name)
        if cached is not None:
            return cached

        path = Path(file.name)
        if self.root is not None and not path.is_absolute():
            path = self.root / path

        try:
            text = path.read_text(encoding=self.encoding, errors="replace")
        except OSError as exc:
            raise SourceUnavailableError(file.name, 0, str(exc) or type(exc).__name__) from exc

        lines = split_source(text)
        logger.debug("Loaded %d lines from %s", len(lines), path)
        self._cache[file.name] = lines
        return lines
