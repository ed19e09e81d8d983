"""Ports: capabilities the engine consumes from the outside."""

from spanreport.domain.ports.color_backend import ColorBackendPort
from spanreport.domain.ports.file_ref import FileRef
from spanreport.domain.ports.line_source import LineSourcePort

__all__ = [
    "ColorBackendPort",
    "FileRef",
    "LineSourcePort",
]
