"""Whole-literal mixing check over a decision sequence."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from quotelint.escape.decision import AsLiteral, AsUnicodeEscape, DecisionReason, EscapeDecision


@dataclass(frozen=True, slots=True)
class ConsistencyReport:
    """Flags computed over one literal's decisions.

    `has_literal_non_ascii` counts discretionary literals only: attached
    modifiers are mandatory literals, just as invisible scalars and isolated
    modifiers are mandatory escapes.
    """

    has_literal_non_ascii: bool
    has_arbitrary_unicode_escape: bool
    has_mandatory_unicode_escape: bool

    @property
    def conforms(self) -> bool:
        return not (self.has_literal_non_ascii and self.has_arbitrary_unicode_escape)

    @property
    def is_unresolved(self) -> bool:
        """Literal non-ASCII text coexists with an escape that cannot be literal."""
        return self.has_literal_non_ascii and self.has_mandatory_unicode_escape

    @property
    def is_preferred_form(self) -> bool:
        return self.conforms and not self.has_arbitrary_unicode_escape and not self.is_unresolved


def is_discretionary_literal(decision: EscapeDecision) -> bool:
    return isinstance(decision, AsLiteral) and decision.reason == DecisionReason.DISCRETIONARY


def is_arbitrary_unicode_escape(decision: EscapeDecision) -> bool:
    return isinstance(decision, AsUnicodeEscape) and decision.reason == DecisionReason.DISCRETIONARY


def is_mandatory_unicode_escape(decision: EscapeDecision) -> bool:
    return isinstance(decision, AsUnicodeEscape) and decision.reason != DecisionReason.DISCRETIONARY


def check_consistency(decisions: Sequence[EscapeDecision]) -> ConsistencyReport:
    return ConsistencyReport(
        has_literal_non_ascii=any(is_discretionary_literal(d) for d in decisions),
        has_arbitrary_unicode_escape=any(is_arbitrary_unicode_escape(d) for d in decisions),
        has_mandatory_unicode_escape=any(is_mandatory_unicode_escape(d) for d in decisions),
    )
