"""Escape-policy rules and rule contracts."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Protocol, TypeAlias

from quotelint.diagnostics import (
    ESCAPE_ATTACHED_MODIFIER_ESCAPED,
    ESCAPE_INVISIBLE_NOT_ESCAPED,
    ESCAPE_ISOLATED_MODIFIER_NOT_ESCAPED,
    ESCAPE_MISSING_SPECIAL_ESCAPE,
    ESCAPE_MIXED_REPRESENTATION,
    ESCAPE_UNNECESSARY_ESCAPE,
)
from quotelint.escape import (
    AsLiteral,
    ConsistencyReport,
    DecisionReason,
    EscapeDecision,
    is_arbitrary_unicode_escape,
    is_mandatory_unicode_escape,
)
from quotelint.lint.violations import Violation, ViolationKind
from quotelint.model import GraphemeCluster, LiteralModel, Scalar, WrittenForm
from quotelint.unicode import Category


class EscapeRule(Protocol):
    """Rule contract: inspect one analysed literal, report violations."""

    @property
    def code(self) -> str: ...

    @property
    def name(self) -> str: ...

    @property
    def kind(self) -> ViolationKind: ...

    def run(
        self,
        model: LiteralModel,
        decisions: Sequence[EscapeDecision],
        report: ConsistencyReport,
    ) -> list[Violation]: ...


_Positioned: TypeAlias = tuple[int, GraphemeCluster, Scalar, EscapeDecision]


def _positioned(model: LiteralModel, decisions: Sequence[EscapeDecision]) -> Iterator[_Positioned]:
    for (index, cluster, scalar), decision in zip(model.iter_positioned(), decisions, strict=True):
        yield index, cluster, scalar, decision


def _describe(scalar: Scalar) -> str:
    return f"U+{scalar.codepoint:04X}"


@dataclass(frozen=True, slots=True)
class MissingSpecialEscapeRule:
    """Quote, backslash and the short-escape controls must use their short form."""

    code: str = ESCAPE_MISSING_SPECIAL_ESCAPE.code
    name: str = "missingSpecialEscape"
    kind: ViolationKind = ViolationKind.MISSING_SPECIAL_ESCAPE

    def run(
        self,
        model: LiteralModel,
        decisions: Sequence[EscapeDecision],
        report: ConsistencyReport,
    ) -> list[Violation]:
        violations: list[Violation] = []
        for index, cluster, scalar, decision in _positioned(model, decisions):
            if scalar.category != Category.ASCII_SPECIAL_ESCAPE:
                continue
            if scalar.written not in (WrittenForm.LITERAL, WrittenForm.UNICODE_ESCAPE):
                continue
            violations.append(
                Violation(
                    kind=self.kind,
                    cluster_index=cluster.index,
                    scalar_index=index,
                    explanation=f"{_describe(scalar)} is written {scalar.written.value.replace('_', ' ')}.",
                    suggested=decision,
                )
            )
        return violations


@dataclass(frozen=True, slots=True)
class InvisibleNotEscapedRule:
    code: str = ESCAPE_INVISIBLE_NOT_ESCAPED.code
    name: str = "invisibleNotEscaped"
    kind: ViolationKind = ViolationKind.INVISIBLE_NOT_ESCAPED

    def run(
        self,
        model: LiteralModel,
        decisions: Sequence[EscapeDecision],
        report: ConsistencyReport,
    ) -> list[Violation]:
        violations: list[Violation] = []
        for index, cluster, scalar, decision in _positioned(model, decisions):
            if scalar.category != Category.INVISIBLE_OR_CONTROL or not scalar.is_written_literally:
                continue
            violations.append(
                Violation(
                    kind=self.kind,
                    cluster_index=cluster.index,
                    scalar_index=index,
                    explanation=f"{_describe(scalar)} has no visible glyph.",
                    suggested=decision,
                )
            )
        return violations


@dataclass(frozen=True, slots=True)
class IsolatedModifierNotEscapedRule:
    code: str = ESCAPE_ISOLATED_MODIFIER_NOT_ESCAPED.code
    name: str = "isolatedModifierNotEscaped"
    kind: ViolationKind = ViolationKind.ISOLATED_MODIFIER_NOT_ESCAPED

    def run(
        self,
        model: LiteralModel,
        decisions: Sequence[EscapeDecision],
        report: ConsistencyReport,
    ) -> list[Violation]:
        violations: list[Violation] = []
        for index, cluster, scalar, decision in _positioned(model, decisions):
            if decision.reason != DecisionReason.ISOLATED_MODIFIER or not scalar.is_written_literally:
                continue
            violations.append(
                Violation(
                    kind=self.kind,
                    cluster_index=cluster.index,
                    scalar_index=index,
                    explanation=f"{_describe(scalar)} is alone in its grapheme cluster.",
                    suggested=decision,
                )
            )
        return violations


@dataclass(frozen=True, slots=True)
class AttachedModifierEscapedRule:
    """Escaping an attached modifier splits it from the glyph it modifies."""

    code: str = ESCAPE_ATTACHED_MODIFIER_ESCAPED.code
    name: str = "attachedModifierEscaped"
    kind: ViolationKind = ViolationKind.ATTACHED_MODIFIER_ESCAPED

    def run(
        self,
        model: LiteralModel,
        decisions: Sequence[EscapeDecision],
        report: ConsistencyReport,
    ) -> list[Violation]:
        violations: list[Violation] = []
        for index, cluster, scalar, decision in _positioned(model, decisions):
            if decision.reason != DecisionReason.ATTACHED_MODIFIER or not scalar.is_escaped:
                continue
            violations.append(
                Violation(
                    kind=self.kind,
                    cluster_index=cluster.index,
                    scalar_index=index,
                    explanation=f"{_describe(scalar)} modifies {_describe(cluster.anchor)}.",
                    suggested=decision,
                )
            )
        return violations


@dataclass(frozen=True, slots=True)
class UnnecessaryEscapeRule:
    code: str = ESCAPE_UNNECESSARY_ESCAPE.code
    name: str = "unnecessaryEscape"
    kind: ViolationKind = ViolationKind.UNNECESSARY_ESCAPE

    def run(
        self,
        model: LiteralModel,
        decisions: Sequence[EscapeDecision],
        report: ConsistencyReport,
    ) -> list[Violation]:
        violations: list[Violation] = []
        for index, cluster, scalar, decision in _positioned(model, decisions):
            if decision.reason != DecisionReason.ASCII_PRINTABLE or not scalar.is_escaped:
                continue
            violations.append(
                Violation(
                    kind=self.kind,
                    cluster_index=cluster.index,
                    scalar_index=index,
                    explanation=f"{chr(scalar.codepoint)!r} is printable ASCII.",
                    suggested=decision,
                )
            )
        return violations


@dataclass(frozen=True, slots=True)
class MixedRepresentationRule:
    """Literal non-ASCII text must not be mixed with arbitrary Unicode escapes.

    Reports every arbitrary escape when mixing occurs. When literal non-ASCII
    text meets a mandatory escape, every mandatory escape is reported as
    unresolved instead of picking a winner.
    """

    code: str = ESCAPE_MIXED_REPRESENTATION.code
    name: str = "mixedRepresentation"
    kind: ViolationKind = ViolationKind.MIXED_REPRESENTATION

    def run(
        self,
        model: LiteralModel,
        decisions: Sequence[EscapeDecision],
        report: ConsistencyReport,
    ) -> list[Violation]:
        violations: list[Violation] = []
        for index, cluster, scalar, decision in _positioned(model, decisions):
            if not report.conforms and is_arbitrary_unicode_escape(decision):
                violations.append(
                    Violation(
                        kind=self.kind,
                        cluster_index=cluster.index,
                        scalar_index=index,
                        explanation=f"{_describe(scalar)} is escaped while other non-ASCII text is literal.",
                        suggested=None
                        if report.is_unresolved
                        else AsLiteral(scalar.codepoint, DecisionReason.DISCRETIONARY),
                    )
                )
            elif report.is_unresolved and is_mandatory_unicode_escape(decision):
                violations.append(
                    Violation(
                        kind=self.kind,
                        cluster_index=cluster.index,
                        scalar_index=index,
                        explanation=(
                            f"{_describe(scalar)} must be escaped, but other non-ASCII text is literal; "
                            "escape all non-ASCII text or keep it literal."
                        ),
                        unresolved=True,
                    )
                )
        return violations


def default_escape_rules() -> tuple[EscapeRule, ...]:
    rules: list[EscapeRule] = [
        MissingSpecialEscapeRule(),
        InvisibleNotEscapedRule(),
        IsolatedModifierNotEscapedRule(),
        AttachedModifierEscapedRule(),
        UnnecessaryEscapeRule(),
        MixedRepresentationRule(),
    ]
    return tuple(sorted(rules, key=lambda rule: (rule.code, rule.name)))


def validate_escape_rules(rules: tuple[EscapeRule, ...]) -> None:
    allowed_kinds = set(ViolationKind)
    for rule in rules:
        if rule.kind not in allowed_kinds:
            raise ValueError(
                f"Escape rule `{rule.name}` has invalid kind `{rule.kind}`; expected one of "
                f"{', '.join(kind.value for kind in ViolationKind)}."
            )
        if not rule.code.startswith("ESCAPE_"):
            raise ValueError(
                f"Escape rule `{rule.name}` has invalid code `{rule.code}`; expected `ESCAPE_` prefix."
            )
