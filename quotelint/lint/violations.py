"""Violation records and the whole-literal verdict."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

from quotelint.escape import EscapeDecision


class ViolationKind(StrEnum):
    MIXED_REPRESENTATION = "MixedRepresentation"
    ISOLATED_MODIFIER_NOT_ESCAPED = "IsolatedModifierNotEscaped"
    ATTACHED_MODIFIER_ESCAPED = "AttachedModifierEscaped"
    INVISIBLE_NOT_ESCAPED = "InvisibleNotEscaped"
    MISSING_SPECIAL_ESCAPE = "MissingSpecialEscape"
    UNNECESSARY_ESCAPE = "UnnecessaryEscape"


_KIND_ORDER = {kind: position for position, kind in enumerate(ViolationKind)}


@dataclass(frozen=True, slots=True)
class Violation:
    """One style non-conformance. Data, not an error.

    `unresolved` marks the mixing case where literal non-ASCII text meets a
    mandatory escape and neither rule can win; `suggested` is then `None`.
    """

    kind: ViolationKind
    cluster_index: int
    scalar_index: int
    explanation: str
    suggested: EscapeDecision | None = None
    unresolved: bool = False


@dataclass(frozen=True, slots=True)
class Conforms:
    @property
    def conforms(self) -> bool:
        return True

    @property
    def violations(self) -> tuple[Violation, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class Violates:
    violations: tuple[Violation, ...]

    def __post_init__(self):
        if not self.violations:
            raise ValueError("Violates requires at least one violation")

    @property
    def conforms(self) -> bool:
        return False


Verdict: TypeAlias = Conforms | Violates


def sort_violations(violations: Iterable[Violation]) -> tuple[Violation, ...]:
    return tuple(
        sorted(
            violations,
            key=lambda violation: (
                violation.scalar_index,
                _KIND_ORDER[violation.kind],
                violation.unresolved,
            ),
        )
    )


def verdict_for(violations: Iterable[Violation]) -> Verdict:
    ordered = sort_violations(violations)
    if not ordered:
        return Conforms()
    return Violates(ordered)
