"""Color backend port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from spanreport.domain.model.style import Style


class ColorBackendPort(Protocol):
    """Protocol for terminal styling backends.

    A backend that returns text unchanged is a legal drop-in:
    layout never depends on the backend, only escape codes do.
    """

    def paint(self, text: str, style: Style) -> str:
        """Wrap text in whatever sequence achieves style.

        Args:
            text: Text to style.
            style: Resolved style (no inherit left).

        Returns:
            Styled text.
        """
        ...
