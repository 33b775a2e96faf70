"""Diagnostics."""

from quotelint.diagnostics.codes import (
    ESCAPE_ATTACHED_MODIFIER_ESCAPED,
    ESCAPE_INVISIBLE_NOT_ESCAPED,
    ESCAPE_ISOLATED_MODIFIER_NOT_ESCAPED,
    ESCAPE_MISSING_SPECIAL_ESCAPE,
    ESCAPE_MIXED_REPRESENTATION,
    ESCAPE_UNNECESSARY_ESCAPE,
    ESCAPE_UNRESOLVED_PRECEDENCE,
    DiagnosticSpec,
)
from quotelint.diagnostics.diagnostic import Diagnostic, Severity
from quotelint.diagnostics.report import has_errors, sort_diagnostics

__all__ = [
    "ESCAPE_ATTACHED_MODIFIER_ESCAPED",
    "ESCAPE_INVISIBLE_NOT_ESCAPED",
    "ESCAPE_ISOLATED_MODIFIER_NOT_ESCAPED",
    "ESCAPE_MISSING_SPECIAL_ESCAPE",
    "ESCAPE_MIXED_REPRESENTATION",
    "ESCAPE_UNNECESSARY_ESCAPE",
    "ESCAPE_UNRESOLVED_PRECEDENCE",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
    "sort_diagnostics",
]
