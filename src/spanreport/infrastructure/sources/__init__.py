"""Line sources and file identities."""

from spanreport.infrastructure.sources.file_source import FileLineSource
from spanreport.infrastructure.sources.memory_source import MemoryLineSource
from spanreport.infrastructure.sources.source_file import SourceFile

__all__ = [
    "FileLineSource",
    "MemoryLineSource",
    "SourceFile",
]
