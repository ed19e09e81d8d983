"""Internal compiler error."""

from __future__ import annotations

from typing import TYPE_CHECKING

from spanreport.domain.exceptions.base import SpanReportError

if TYPE_CHECKING:
    from spanreport.domain.model.diagnostic import Diagnostic


class InternalCompilerError(SpanReportError):
    """Fatal condition inside the embedding compiler.

    Carries the INTERNAL diagnostic that was reported before raising.

    Attributes:
        diagnostic: The reported diagnostic
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        # FAIL-FIRST: validate required parameters
        if diagnostic is None:
            raise TypeError("diagnostic must not be None")

        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)
