"""Violation -> diagnostic conversion."""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType
from typing import Final, Mapping

from quotelint.diagnostics import (
    ESCAPE_ATTACHED_MODIFIER_ESCAPED,
    ESCAPE_INVISIBLE_NOT_ESCAPED,
    ESCAPE_ISOLATED_MODIFIER_NOT_ESCAPED,
    ESCAPE_MISSING_SPECIAL_ESCAPE,
    ESCAPE_MIXED_REPRESENTATION,
    ESCAPE_UNNECESSARY_ESCAPE,
    ESCAPE_UNRESOLVED_PRECEDENCE,
    Diagnostic,
    DiagnosticSpec,
    sort_diagnostics,
)
from quotelint.lint.violations import Violation, ViolationKind
from quotelint.model import LiteralModel

_SPECS_BY_KIND: Final[Mapping[ViolationKind, DiagnosticSpec]] = MappingProxyType(
    {
        ViolationKind.MIXED_REPRESENTATION: ESCAPE_MIXED_REPRESENTATION,
        ViolationKind.ISOLATED_MODIFIER_NOT_ESCAPED: ESCAPE_ISOLATED_MODIFIER_NOT_ESCAPED,
        ViolationKind.ATTACHED_MODIFIER_ESCAPED: ESCAPE_ATTACHED_MODIFIER_ESCAPED,
        ViolationKind.INVISIBLE_NOT_ESCAPED: ESCAPE_INVISIBLE_NOT_ESCAPED,
        ViolationKind.MISSING_SPECIAL_ESCAPE: ESCAPE_MISSING_SPECIAL_ESCAPE,
        ViolationKind.UNNECESSARY_ESCAPE: ESCAPE_UNNECESSARY_ESCAPE,
    }
)

# Unescaped quote or backslash breaks the literal itself.
_STRUCTURAL_CODEPOINTS: Final[frozenset[int]] = frozenset({0x22, 0x27, 0x5C})


def spec_for(violation: Violation) -> DiagnosticSpec:
    if violation.unresolved:
        return ESCAPE_UNRESOLVED_PRECEDENCE
    return _SPECS_BY_KIND[violation.kind]


def violation_diagnostic(violation: Violation, model: LiteralModel) -> Diagnostic:
    spec = spec_for(violation)
    cluster = model.clusters[violation.cluster_index]
    severity = spec.severity
    if (
        violation.kind == ViolationKind.MISSING_SPECIAL_ESCAPE
        and model.codepoints[violation.scalar_index] in _STRUCTURAL_CODEPOINTS
    ):
        severity = "error"
    return Diagnostic(
        code=spec.code,
        message=f"{spec.message} {violation.explanation}",
        range=cluster.range,
        severity=severity,
        hint=spec.hint,
        category=spec.category,
    )


def violation_diagnostics(violations: Iterable[Violation], model: LiteralModel) -> list[Diagnostic]:
    return sort_diagnostics(violation_diagnostic(violation, model) for violation in violations)
