"""Domain exceptions."""

from spanreport.domain.exceptions.base import SpanReportError
from spanreport.domain.exceptions.config import ConfigError
from spanreport.domain.exceptions.internal import InternalCompilerError
from spanreport.domain.exceptions.source import SourceUnavailableError

__all__ = [
    "SpanReportError",
    "ConfigError",
    "SourceUnavailableError",
    "InternalCompilerError",
]
