import pytest

from quotelint.escape import (
    AsLiteral,
    AsSpecialEscape,
    AsUnicodeEscape,
    DecisionReason,
    decide_escapes,
    written_form_of,
)
from quotelint.model import WrittenForm, build_literal_model
from quotelint.unicode import Category, FixedBoundarySegmenter
from tests._shared_cases import LITERAL_CASES, LiteralCase, case_content, case_id, codepoints


def test_precomposed_german_word_is_all_literal() -> None:
    decisions = decide_escapes(build_literal_model(codepoints(case_content("precomposed_german_word"))))

    assert all(isinstance(decision, AsLiteral) for decision in decisions)
    assert decisions[0] == AsLiteral(0xDC, DecisionReason.DISCRETIONARY)
    assert decisions[1] == AsLiteral(ord("b"), DecisionReason.ASCII_PRINTABLE)


def test_isolated_combining_mark_is_unicode_escaped() -> None:
    decisions = decide_escapes(build_literal_model(codepoints(case_content("isolated_combining_diaeresis"))))

    assert decisions == (AsUnicodeEscape(0x0308, DecisionReason.ISOLATED_MODIFIER),)


def test_quote_newline_backslash_use_short_escapes() -> None:
    decisions = decide_escapes(build_literal_model(codepoints(case_content("quote_newline_backslash"))))

    assert decisions == (
        AsSpecialEscape(ord('"'), '\\"'),
        AsSpecialEscape(ord("\n"), "\\n"),
        AsSpecialEscape(ord("\\"), "\\\\"),
    )


def test_attached_modifier_stays_literal() -> None:
    decisions = decide_escapes(build_literal_model(codepoints(case_content("decomposed_e_acute"))))

    assert decisions[-1] == AsLiteral(0x0301, DecisionReason.ATTACHED_MODIFIER)


def test_special_escape_inside_a_cluster_is_still_escaped() -> None:
    decisions = decide_escapes(build_literal_model(codepoints(case_content("crlf_line_ending"))))

    assert decisions[-2:] == (
        AsSpecialEscape(ord("\r"), "\\r"),
        AsSpecialEscape(ord("\n"), "\\n"),
    )


def test_invisible_scalar_is_escaped_even_when_attached() -> None:
    model = build_literal_model(
        codepoints("a\N{ZERO WIDTH SPACE}"),
        FixedBoundarySegmenter((0, 2)),
    )

    decisions = decide_escapes(model)

    assert decisions[1] == AsUnicodeEscape(0x200B, DecisionReason.INVISIBLE)


def test_discretionary_scalar_follows_its_written_form() -> None:
    model = build_literal_model(
        codepoints("Üö"),
        written=[WrittenForm.LITERAL, WrittenForm.UNICODE_ESCAPE],
    )

    decisions = decide_escapes(model)

    assert decisions == (
        AsLiteral(0xDC, DecisionReason.DISCRETIONARY),
        AsUnicodeEscape(0xF6, DecisionReason.DISCRETIONARY),
    )
    assert [decision.is_mandatory for decision in decisions] == [False, False]


def test_mandatory_flags() -> None:
    assert AsSpecialEscape(ord("\t"), "\\t").is_mandatory
    assert AsUnicodeEscape(0x200B, DecisionReason.INVISIBLE).is_mandatory
    assert AsLiteral(0x0301, DecisionReason.ATTACHED_MODIFIER).is_mandatory
    assert not AsLiteral(0xDC, DecisionReason.DISCRETIONARY).is_mandatory


def test_written_form_of_decisions() -> None:
    assert written_form_of(AsLiteral(0x41, DecisionReason.ASCII_PRINTABLE)) == WrittenForm.LITERAL
    assert written_form_of(AsSpecialEscape(0x0A, "\\n")) == WrittenForm.SPECIAL_ESCAPE
    assert written_form_of(AsUnicodeEscape(0x0308, DecisionReason.ISOLATED_MODIFIER)) == WrittenForm.UNICODE_ESCAPE


@pytest.mark.parametrize("case", LITERAL_CASES, ids=case_id)
def test_decisions_align_with_scalars(case: LiteralCase) -> None:
    model = build_literal_model(codepoints(case.content))

    decisions = decide_escapes(model)

    assert [decision.codepoint for decision in decisions] == codepoints(case.content)
    assert decide_escapes(model) == decisions


@pytest.mark.parametrize("case", LITERAL_CASES, ids=case_id)
def test_mandatory_escapes_are_never_literal(case: LiteralCase) -> None:
    model = build_literal_model(codepoints(case.content))

    for (_, cluster, scalar), decision in zip(model.iter_positioned(), decide_escapes(model)):
        if scalar.category == Category.INVISIBLE_OR_CONTROL:
            assert not isinstance(decision, AsLiteral)
        if scalar.category == Category.MODIFIER and cluster.is_isolated:
            assert not isinstance(decision, AsLiteral)


@pytest.mark.parametrize("case", LITERAL_CASES, ids=case_id)
def test_attached_modifiers_are_never_unicode_escaped(case: LiteralCase) -> None:
    model = build_literal_model(codepoints(case.content))

    for (_, cluster, scalar), decision in zip(model.iter_positioned(), decide_escapes(model)):
        if scalar.category == Category.MODIFIER and not cluster.is_isolated:
            assert not isinstance(decision, AsUnicodeEscape)
