from typing import cast

import pytest

from quotelint.escape import AsLiteral, AsSpecialEscape, AsUnicodeEscape, DecisionReason
from quotelint.lint import (
    EscapeRule,
    MixedRepresentationRule,
    Violates,
    ViolationKind,
    default_escape_rules,
    validate_escape_rules,
)
from quotelint.pipeline import analyze_literal, run_check

BS = "\\"


def _kinds(body: str) -> list[ViolationKind]:
    return [violation.kind for violation in run_check(body).verdict.violations]


def test_literal_quote_is_missing_special_escape_error() -> None:
    result = run_check('say "hi"')

    assert _kinds('say "hi"') == [ViolationKind.MISSING_SPECIAL_ESCAPE] * 2
    assert result.diagnostics[0].code == "ESCAPE_MISSING_SPECIAL_ESCAPE"
    assert result.diagnostics[0].severity == "error"
    assert result.diagnostics[0].range.as_tuple() == (4, 5)
    assert result.has_errors
    assert result.verdict.violations[0].suggested == AsSpecialEscape(ord('"'), '\\"')


def test_newline_written_as_unicode_escape_is_missing_special_escape_warning() -> None:
    result = run_check("a" + BS + "u{A}")

    assert _kinds("a" + BS + "u{A}") == [ViolationKind.MISSING_SPECIAL_ESCAPE]
    assert result.diagnostics[0].severity == "warning"
    assert "unicode escape" in result.diagnostics[0].message


def test_literal_zero_width_space_is_invisible_not_escaped() -> None:
    result = run_check("a\N{ZERO WIDTH SPACE}b")

    assert _kinds("a\N{ZERO WIDTH SPACE}b") == [ViolationKind.INVISIBLE_NOT_ESCAPED]
    violation = result.verdict.violations[0]
    assert violation.cluster_index == 1
    assert violation.suggested == AsUnicodeEscape(0x200B, DecisionReason.INVISIBLE)
    assert result.render() == "a" + BS + "u{200B}b"


def test_literal_isolated_modifier_is_flagged() -> None:
    assert _kinds("\N{COMBINING DIAERESIS}") == [ViolationKind.ISOLATED_MODIFIER_NOT_ESCAPED]
    assert _kinds(BS + "u{308}") == []


def test_escaped_attached_modifier_is_flagged() -> None:
    result = run_check("e" + BS + "u{301}")

    assert _kinds("e" + BS + "u{301}") == [ViolationKind.ATTACHED_MODIFIER_ESCAPED]
    assert result.verdict.violations[0].suggested == AsLiteral(0x0301, DecisionReason.ATTACHED_MODIFIER)
    assert result.render() == "e\N{COMBINING ACUTE ACCENT}"


def test_escaped_printable_ascii_is_unnecessary() -> None:
    result = run_check(BS + "u{41}BC")

    assert _kinds(BS + "u{41}BC") == [ViolationKind.UNNECESSARY_ESCAPE]
    assert result.render() == "ABC"


def test_literal_umlaut_with_escaped_umlaut_is_mixed_representation() -> None:
    result = run_check("Ü" + BS + "u{F6}")

    assert isinstance(result.verdict, Violates)
    (violation,) = result.verdict.violations
    assert violation.kind == ViolationKind.MIXED_REPRESENTATION
    assert violation.scalar_index == 1
    assert violation.unresolved is False
    assert violation.suggested == AsLiteral(0xF6, DecisionReason.DISCRETIONARY)
    assert result.diagnostics[0].code == "ESCAPE_MIXED_REPRESENTATION"
    assert result.suggested == (
        AsUnicodeEscape(0xDC, DecisionReason.DISCRETIONARY),
        AsUnicodeEscape(0xF6, DecisionReason.DISCRETIONARY),
    )
    assert result.preferred == (
        AsLiteral(0xDC, DecisionReason.DISCRETIONARY),
        AsLiteral(0xF6, DecisionReason.DISCRETIONARY),
    )
    assert result.candidates == ()
    assert result.render() == BS + "u{00DC}" + BS + "u{00F6}"


def test_literal_umlaut_with_isolated_modifier_is_unresolved() -> None:
    result = analyze_literal("Ü\n\U0001f3fb")

    (violation,) = result.verdict.violations
    assert violation.kind == ViolationKind.MIXED_REPRESENTATION
    assert violation.unresolved is True
    assert violation.scalar_index == 2
    assert violation.suggested is None
    assert result.diagnostics[0].code == "ESCAPE_UNRESOLVED_PRECEDENCE"
    assert result.preferred is None
    assert len(result.candidates) == 2
    escape_all, keep_literal = result.candidates
    assert escape_all == result.suggested
    assert keep_literal[0] == AsLiteral(0xDC, DecisionReason.DISCRETIONARY)
    assert keep_literal[2] == AsUnicodeEscape(0x1F3FB, DecisionReason.ISOLATED_MODIFIER)


def test_written_literal_isolated_modifier_reports_both_violations() -> None:
    body = "Ü" + BS + "n\U0001f3fb"

    assert _kinds(body) == [
        ViolationKind.MIXED_REPRESENTATION,
        ViolationKind.ISOLATED_MODIFIER_NOT_ESCAPED,
    ]


def test_mixing_and_unresolved_escape_both_reported() -> None:
    result = run_check("Ü" + BS + "u{F6}\N{ZERO WIDTH SPACE}")

    violations = result.verdict.violations
    assert [(v.kind, v.scalar_index, v.unresolved) for v in violations] == [
        (ViolationKind.MIXED_REPRESENTATION, 1, False),
        (ViolationKind.MIXED_REPRESENTATION, 2, True),
        (ViolationKind.INVISIBLE_NOT_ESCAPED, 2, False),
    ]
    assert violations[0].suggested is None


def test_default_rules_cover_every_violation_kind() -> None:
    rules = default_escape_rules()

    assert {rule.kind for rule in rules} == set(ViolationKind)
    assert [rule.code for rule in rules] == sorted(rule.code for rule in rules)


def test_custom_rule_selection_limits_reported_kinds() -> None:
    result = analyze_literal("Ü\n\U0001f3fb", rules=(MixedRepresentationRule(),))

    assert [violation.kind for violation in result.verdict.violations] == [ViolationKind.MIXED_REPRESENTATION]


def test_rejects_rule_with_unknown_kind() -> None:
    class BadKindRule:
        code = "ESCAPE_BAD_KIND"
        name = "badKind"
        kind = "TrailingWhitespace"

    try:
        validate_escape_rules(cast(tuple[EscapeRule, ...], (BadKindRule(),)))
    except ValueError as exc:
        assert "invalid kind" in str(exc)
    else:
        raise AssertionError("Expected ValueError for invalid escape rule kind")


def test_rejects_rule_without_escape_prefix() -> None:
    class BadCodeRule:
        code = "LINT_STYLE_ESCAPES"
        name = "badCode"
        kind = ViolationKind.MIXED_REPRESENTATION

    with pytest.raises(ValueError, match="expected `ESCAPE_` prefix"):
        analyze_literal("a", rules=cast(tuple[EscapeRule, ...], (BadCodeRule(),)))
