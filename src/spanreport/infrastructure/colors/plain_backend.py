"""Color backend that emits no escape sequences."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spanreport.domain.model.style import Style


class PlainColorBackend:
    """Identity backend: returns text unchanged.

    Layout is identical to any colored backend.
    """

    def paint(self, text: str, style: Style) -> str:
        return text
