"""Normalized alternative renderings."""

from __future__ import annotations

from collections.abc import Sequence

from quotelint.escape.decision import AsLiteral, AsUnicodeEscape, DecisionReason, EscapeDecision


def suggest_escape_all(decisions: Sequence[EscapeDecision]) -> tuple[EscapeDecision, ...]:
    """Escape every discretionary scalar. Always constructible and always conforming."""
    return tuple(
        AsUnicodeEscape(d.codepoint, DecisionReason.DISCRETIONARY)
        if isinstance(d, AsLiteral) and d.reason == DecisionReason.DISCRETIONARY
        else d
        for d in decisions
    )


def preferred_rendering(decisions: Sequence[EscapeDecision]) -> tuple[EscapeDecision, ...]:
    """Write every discretionary scalar literally."""
    return tuple(
        AsLiteral(d.codepoint, DecisionReason.DISCRETIONARY)
        if isinstance(d, AsUnicodeEscape) and d.reason == DecisionReason.DISCRETIONARY
        else d
        for d in decisions
    )
