"""Diagnostic reporter: collects diagnostics and prints them as they arrive.

Replaces a process-wide error list: the compiler driver owns one
reporter per run and passes it to whatever produces diagnostics.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, NoReturn, TextIO

from spanreport.application.render.engine import render_text
from spanreport.domain.exceptions import InternalCompilerError
from spanreport.domain.model.config import DEFAULT_CONFIG
from spanreport.domain.model.diagnostic import Diagnostic
from spanreport.domain.model.location import NO_LOCATION
from spanreport.domain.model.severity import Severity
from spanreport.infrastructure.colors import select_backend
from spanreport.infrastructure.sources import FileLineSource

if TYPE_CHECKING:
    from spanreport.domain.model.config import RenderConfig
    from spanreport.domain.model.location import Location
    from spanreport.domain.ports.color_backend import ColorBackendPort
    from spanreport.domain.ports.line_source import LineSourcePort

ABORT_MESSAGE = "aborting due to previous error"


class DiagnosticReporter:
    """Collects diagnostics of one compilation and renders each on report.

    Outputs to stderr by default, can be configured for any TextIO.
    One line source is shared by all reports, so each file is read once.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        config: RenderConfig | None = None,
        *,
        source: LineSourcePort | None = None,
        backend: ColorBackendPort | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stderr)
            config: Rendering parameters (default: DEFAULT_CONFIG)
            source: Line accessor (default: FileLineSource)
            backend: Color backend (default: chosen by config.color_mode)
        """
        self._output = output if output is not None else sys.stderr
        self._config = config or DEFAULT_CONFIG
        self._source = source if source is not None else FileLineSource()
        self._backend = (
            backend if backend is not None else select_backend(self._output, self._config.color_mode)
        )
        self._diagnostics: list[Diagnostic] = []

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Everything reported so far, in report order."""
        return tuple(self._diagnostics)

    @property
    def error_count(self) -> int:
        return sum(1 for d in self._diagnostics if d.severity.is_error)

    @property
    def warning_count(self) -> int:
        return sum(1 for d in self._diagnostics if d.severity is Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    def report(self, diagnostic: Diagnostic) -> Diagnostic:
        """Store and render a diagnostic.

        Returns:
            The diagnostic (secondaries may still be attached, but only
            show_all() will print them)
        """
        if diagnostic is None:
            raise TypeError("diagnostic must not be None")
        self._diagnostics.append(diagnostic)
        self._write(diagnostic)
        return diagnostic

    def report_internal(self, message: str, location: Location = NO_LOCATION) -> Diagnostic:
        """Report a compiler bug. Followed by a blank line."""
        diagnostic = self.report(Diagnostic(message, Severity.INTERNAL, location))
        self._output.write("\n")
        return diagnostic

    def report_abort(self) -> Diagnostic:
        """Report the closing note of a failed compilation."""
        return self.report(Diagnostic(ABORT_MESSAGE, Severity.NOTE))

    def fatal(self, message: str, location: Location = NO_LOCATION) -> NoReturn:
        """Report an internal error and raise it.

        Raises:
            InternalCompilerError: always
        """
        raise InternalCompilerError(self.report_internal(message, location))

    def show_all(self) -> None:
        """Render every stored diagnostic again, separated by blank lines."""
        for i, diagnostic in enumerate(self._diagnostics):
            if i:
                self._output.write("\n")
            self._write(diagnostic)

    def _write(self, diagnostic: Diagnostic) -> None:
        self._output.write(
            render_text(diagnostic, self._config, source=self._source, backend=self._backend),
        )
