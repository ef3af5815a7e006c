"""Diagnostic records printed by the command line driver.

A diagnostic renders in the usual compiler form::

    calc.as:2:3: error: Unexpected token '*' at position 6.

The location prefix is omitted when the problem has no position, which
only happens for internal errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from adamscript.diagnostics.location import SourceLocation


class DiagnosticSeverity(Enum):
    ERROR = "error"
    # A front-end bug surfaced to the user; never produced by bad input.
    INTERNAL = "internal error"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Diagnostic:
    severity: DiagnosticSeverity
    message: str
    location: SourceLocation | None = None

    def __str__(self) -> str:
        if self.location is None:
            return f"{self.severity}: {self.message}"
        return f"{self.location}: {self.severity}: {self.message}"
