"""Escape decisions, mixing check, fix-up and literal-body codec."""

from quotelint.escape.codec import (
    DecodedLiteral,
    LiteralDecodeError,
    decode_literal_body,
    render_decision,
    render_decisions,
    render_unicode_escape,
)
from quotelint.escape.consistency import (
    ConsistencyReport,
    check_consistency,
    is_arbitrary_unicode_escape,
    is_discretionary_literal,
    is_mandatory_unicode_escape,
)
from quotelint.escape.decision import (
    AsLiteral,
    AsSpecialEscape,
    AsUnicodeEscape,
    DecisionReason,
    EscapeDecision,
    decide_escapes,
    decide_scalar,
    written_form_of,
)
from quotelint.escape.fixup import preferred_rendering, suggest_escape_all
from quotelint.escape.options import EscapeOptions, UnicodeEscapeStyle

__all__ = [
    "AsLiteral",
    "AsSpecialEscape",
    "AsUnicodeEscape",
    "ConsistencyReport",
    "DecisionReason",
    "DecodedLiteral",
    "EscapeDecision",
    "EscapeOptions",
    "LiteralDecodeError",
    "UnicodeEscapeStyle",
    "check_consistency",
    "decide_escapes",
    "decide_scalar",
    "decode_literal_body",
    "is_arbitrary_unicode_escape",
    "is_discretionary_literal",
    "is_mandatory_unicode_escape",
    "preferred_rendering",
    "render_decision",
    "render_decisions",
    "render_unicode_escape",
    "suggest_escape_all",
    "written_form_of",
]
