"""fxxlib diagnostics subpackage (Layer 0 — zero internal dependencies)."""

from fxxlib.diagnostics.collector import DiagnosticCollector
from fxxlib.diagnostics.diagnostic import Diagnostic
from fxxlib.diagnostics.location import SourceLocation
from fxxlib.diagnostics.severity import DiagnosticSeverity

__all__ = ["SourceLocation", "DiagnosticSeverity", "Diagnostic", "DiagnosticCollector"]
