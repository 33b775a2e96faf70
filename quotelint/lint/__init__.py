"""Escape-policy rules, violations and verdicts."""

from quotelint.lint.diagnose import spec_for, violation_diagnostic, violation_diagnostics
from quotelint.lint.rules import (
    AttachedModifierEscapedRule,
    EscapeRule,
    InvisibleNotEscapedRule,
    IsolatedModifierNotEscapedRule,
    MissingSpecialEscapeRule,
    MixedRepresentationRule,
    UnnecessaryEscapeRule,
    default_escape_rules,
    validate_escape_rules,
)
from quotelint.lint.violations import (
    Conforms,
    Verdict,
    Violates,
    Violation,
    ViolationKind,
    sort_violations,
    verdict_for,
)

__all__ = [
    "AttachedModifierEscapedRule",
    "Conforms",
    "EscapeRule",
    "InvisibleNotEscapedRule",
    "IsolatedModifierNotEscapedRule",
    "MissingSpecialEscapeRule",
    "MixedRepresentationRule",
    "UnnecessaryEscapeRule",
    "Verdict",
    "Violates",
    "Violation",
    "ViolationKind",
    "default_escape_rules",
    "sort_violations",
    "spec_for",
    "validate_escape_rules",
    "verdict_for",
    "violation_diagnostic",
    "violation_diagnostics",
]
