"""Diagnostic collector for accumulating messages produced while parsing."""

from __future__ import annotations

from adamscript.diagnostics.diagnostic import Diagnostic, DiagnosticSeverity
from adamscript.diagnostics.location import SourceLocation


class DiagnosticCollector:
    """Accumulates diagnostics across one or more parse calls."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def error(self, message: str, location: SourceLocation | None = None) -> None:
        """Record an error diagnostic."""
        self._diagnostics.append(Diagnostic(DiagnosticSeverity.ERROR, message, location))

    def internal(self, message: str, location: SourceLocation | None = None) -> None:
        """Record an internal error (a front-end bug, not a user mistake)."""
        self._diagnostics.append(Diagnostic(DiagnosticSeverity.INTERNAL, message, location))

    def has_errors(self) -> bool:
        """Return True if any diagnostics have been recorded."""
        return bool(self._diagnostics)

    def get_all(self) -> list[Diagnostic]:
        """Return a copy of all collected diagnostics."""
        return list(self._diagnostics)

    def format_all(self) -> str:
        """Format all diagnostics as a newline-separated string."""
        return "\n".join(str(d) for d in self._diagnostics)
