"""Diagnostic entity and per-severity constructors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

from spanreport.domain.model.location import NO_LOCATION, Location
from spanreport.domain.model.severity import Severity

if TYPE_CHECKING:
    from spanreport.domain.model.config import RenderConfig
    from spanreport.domain.ports.color_backend import ColorBackendPort
    from spanreport.domain.ports.line_source import LineSourcePort


@dataclass(eq=False)
class Diagnostic:
    """One reportable message with optional location and secondaries.

    Builder phase: create, then attach secondaries with with_note(),
    with_help() or attach(). After the first render the tree is read-only,
    except that rendering re-sorts `secondaries` in place.

    Identity semantics (eq=False): two unlocated notes with the same text
    are still two notes.

    Attributes:
        message: Header text. Empty = no header line.
        severity: Kind of diagnostic.
        location: Primary span. NO_LOCATION = no snippet.
        sub_message: Inline text printed next to the span mark.
        code: Short code shown as Label(code), e.g. E0308.
        secondaries: Attached diagnostics, owned exclusively.
    """

    message: str
    severity: Severity = Severity.ERROR
    location: Location = NO_LOCATION
    sub_message: str = ""
    code: str | None = None
    secondaries: list[Diagnostic] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.message is None:
            raise TypeError("message must not be None")
        if not isinstance(self.severity, Severity):
            raise TypeError(f"severity must be Severity, got {type(self.severity).__name__}")
        if self.location is None:
            raise TypeError("location must not be None (use NO_LOCATION)")

    # =========================================================================
    # Builder
    # =========================================================================

    def attach(self, secondary: Diagnostic) -> Diagnostic:
        """Attach a secondary diagnostic.

        A secondary whose location equals an existing secondary's location
        becomes a child of that secondary, so both labels share one
        underline. Unlocated secondaries are always appended.

        Returns:
            self, for chaining
        """
        if secondary is self:
            raise ValueError("cannot attach a diagnostic to itself")

        if secondary.location.has_file:
            for existing in self.secondaries:
                if existing.location == secondary.location:
                    existing.secondaries.append(secondary)
                    return self

        self.secondaries.append(secondary)
        return self

    def with_note(self, message: str, location: Location = NO_LOCATION) -> Diagnostic:
        """Attach a Note labelled `message` at `location`."""
        return self.attach(Diagnostic("", Severity.NOTE, location, sub_message=message))

    def with_help(self, message: str, location: Location = NO_LOCATION) -> Diagnostic:
        """Attach a Help labelled `message` at `location`."""
        return self.attach(Diagnostic("", Severity.HELP, location, sub_message=message))

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def label(self) -> str:
        """Severity title with optional code, e.g. 'Error(E0308)'."""
        title = self.severity.title
        return f"{title}({self.code})" if self.code else title

    @property
    def text(self) -> str:
        """The text this diagnostic annotates a span with."""
        return self.sub_message or self.message

    def walk(self) -> list[Diagnostic]:
        """This diagnostic and all descendants, depth-first."""
        found = [self]
        for secondary in self.secondaries:
            found.extend(secondary.walk())
        return found

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(
        self,
        config: RenderConfig | None = None,
        *,
        source: LineSourcePort | None = None,
        backend: ColorBackendPort | None = None,
    ) -> str:
        """Render to a string.

        Args:
            config: Rendering parameters (default: DEFAULT_CONFIG)
            source: Line accessor (default: FileLineSource)
            backend: Color backend (default: picked by config.color_mode)

        Returns:
            Rendered text, newline terminated
        """
        from spanreport.application.render.engine import render_text

        return render_text(self, config, source=source, backend=backend)

    def print(
        self,
        sink: TextIO,
        config: RenderConfig | None = None,
        *,
        source: LineSourcePort | None = None,
        backend: ColorBackendPort | None = None,
    ) -> Diagnostic:
        """Render to sink.

        Idempotent: printing twice writes identical text twice.

        Returns:
            self, for chaining
        """
        from spanreport.application.render.engine import render_to

        render_to(self, sink, config, source=source, backend=backend)
        return self


# =============================================================================
# Constructors (one concrete type, severity fixed by the constructor)
# =============================================================================


def error(
    message: str,
    location: Location = NO_LOCATION,
    sub_message: str = "",
    *,
    code: str | None = None,
) -> Diagnostic:
    """Create an ERROR diagnostic."""
    return Diagnostic(message, Severity.ERROR, location, sub_message, code)


def warning(
    message: str,
    location: Location = NO_LOCATION,
    sub_message: str = "",
    *,
    code: str | None = None,
) -> Diagnostic:
    """Create a WARNING diagnostic."""
    return Diagnostic(message, Severity.WARNING, location, sub_message, code)


def note(
    message: str,
    location: Location = NO_LOCATION,
    sub_message: str = "",
    *,
    code: str | None = None,
) -> Diagnostic:
    """Create a NOTE diagnostic."""
    return Diagnostic(message, Severity.NOTE, location, sub_message, code)


def help_(
    message: str,
    location: Location = NO_LOCATION,
    sub_message: str = "",
    *,
    code: str | None = None,
) -> Diagnostic:
    """Create a HELP diagnostic."""
    return Diagnostic(message, Severity.HELP, location, sub_message, code)


def internal(
    message: str,
    location: Location = NO_LOCATION,
    sub_message: str = "",
    *,
    code: str | None = None,
) -> Diagnostic:
    """Create an INTERNAL diagnostic (a compiler bug, not a user error)."""
    return Diagnostic(message, Severity.INTERNAL, location, sub_message, code)
