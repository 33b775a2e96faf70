"""Per-scalar escape decisions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

from quotelint.model import GraphemeCluster, LiteralModel, Scalar, WrittenForm
from quotelint.unicode import Category, special_escape_spelling


class DecisionReason(StrEnum):
    """Why a decision was taken. Everything but `DISCRETIONARY` is mandatory."""

    ASCII_PRINTABLE = "ascii_printable"
    SPECIAL = "special"
    INVISIBLE = "invisible"
    ATTACHED_MODIFIER = "attached_modifier"
    ISOLATED_MODIFIER = "isolated_modifier"
    DISCRETIONARY = "discretionary"


@dataclass(frozen=True, slots=True)
class AsLiteral:
    codepoint: int
    reason: DecisionReason

    @property
    def is_mandatory(self) -> bool:
        return self.reason != DecisionReason.DISCRETIONARY


@dataclass(frozen=True, slots=True)
class AsSpecialEscape:
    codepoint: int
    spelling: str

    @property
    def reason(self) -> DecisionReason:
        return DecisionReason.SPECIAL

    @property
    def is_mandatory(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class AsUnicodeEscape:
    codepoint: int
    reason: DecisionReason

    @property
    def is_mandatory(self) -> bool:
        return self.reason != DecisionReason.DISCRETIONARY


EscapeDecision: TypeAlias = AsLiteral | AsSpecialEscape | AsUnicodeEscape


def decide_scalar(cluster: GraphemeCluster, scalar: Scalar) -> EscapeDecision:
    """Decide how one scalar of `cluster` must be rendered.

    Non-ASCII printable bases follow their written form; the consistency
    checker decides whether that choice is acceptable.
    """
    codepoint = scalar.codepoint
    match scalar.category:
        case Category.ASCII_SPECIAL_ESCAPE:
            spelling = special_escape_spelling(codepoint)
            assert spelling is not None
            return AsSpecialEscape(codepoint, spelling)
        case Category.ASCII_PRINTABLE:
            return AsLiteral(codepoint, DecisionReason.ASCII_PRINTABLE)
        case Category.INVISIBLE_OR_CONTROL:
            return AsUnicodeEscape(codepoint, DecisionReason.INVISIBLE)
        case Category.MODIFIER:
            if cluster.is_isolated:
                return AsUnicodeEscape(codepoint, DecisionReason.ISOLATED_MODIFIER)
            return AsLiteral(codepoint, DecisionReason.ATTACHED_MODIFIER)
        case _:
            if scalar.written == WrittenForm.UNICODE_ESCAPE:
                return AsUnicodeEscape(codepoint, DecisionReason.DISCRETIONARY)
            return AsLiteral(codepoint, DecisionReason.DISCRETIONARY)


def decide_escapes(model: LiteralModel) -> tuple[EscapeDecision, ...]:
    """Decisions aligned 1:1 with `model.scalars`."""
    return tuple(
        decide_scalar(cluster, scalar)
        for cluster in model.clusters
        for scalar in cluster.scalars
    )


def written_form_of(decision: EscapeDecision) -> WrittenForm:
    """The spelling a decision produces once rendered."""
    if isinstance(decision, AsLiteral):
        return WrittenForm.LITERAL
    if isinstance(decision, AsSpecialEscape):
        return WrittenForm.SPECIAL_ESCAPE
    return WrittenForm.UNICODE_ESCAPE
