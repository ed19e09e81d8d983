"""Color backends."""

from spanreport.infrastructure.colors.plain_backend import PlainColorBackend
from spanreport.infrastructure.colors.rich_backend import RichColorBackend, to_rich_style
from spanreport.infrastructure.colors.selection import select_backend

__all__ = [
    "PlainColorBackend",
    "RichColorBackend",
    "select_backend",
    "to_rich_style",
]
