"""Source locations and diagnostics; imports nothing else from adamscript."""

from adamscript.diagnostics.collector import DiagnosticCollector
from adamscript.diagnostics.diagnostic import Diagnostic, DiagnosticSeverity
from adamscript.diagnostics.location import SourceLocation

__all__ = ["SourceLocation", "DiagnosticSeverity", "Diagnostic", "DiagnosticCollector"]
