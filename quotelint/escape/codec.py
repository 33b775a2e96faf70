"""Literal-body codec: decisions to escaped text, escaped text to scalars."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping

from quotelint.escape.decision import AsLiteral, AsSpecialEscape, EscapeDecision
from quotelint.escape.options import EscapeOptions, UnicodeEscapeStyle
from quotelint.model import WrittenForm
from quotelint.unicode import MAX_SCALAR

_HEX_CHARS: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF")
_SHORT_ESCAPES: Final[Mapping[str, int]] = MappingProxyType(
    {
        "0": 0x00,
        "t": 0x09,
        "n": 0x0A,
        "r": 0x0D,
        '"': 0x22,
        "'": 0x27,
        "\\": 0x5C,
    }
)
_MAX_BRACED_DIGITS: Final[int] = 6


class LiteralDecodeError(ValueError):
    """Malformed escape sequence in a literal body."""

    def __init__(self, code: str, offset: int, details: str = "") -> None:
        self.code = code
        self.offset = offset
        self.details = details
        message = f"[{code}] at offset {offset}"
        if details:
            message = f"{message}: {details}"
        super().__init__(message)


@dataclass(frozen=True, slots=True)
class DecodedLiteral:
    """Logical content of a literal body plus how each scalar was spelled."""

    codepoints: tuple[int, ...]
    written: tuple[WrittenForm, ...]


def render_decision(decision: EscapeDecision, options: EscapeOptions | None = None) -> str:
    if isinstance(decision, AsLiteral):
        return chr(decision.codepoint)
    if isinstance(decision, AsSpecialEscape):
        return decision.spelling
    return render_unicode_escape(decision.codepoint, options)


def render_decisions(decisions: Sequence[EscapeDecision], options: EscapeOptions | None = None) -> str:
    """Render decisions to literal-body text (without surrounding quotes)."""
    return "".join(render_decision(decision, options) for decision in decisions)


def render_unicode_escape(codepoint: int, options: EscapeOptions | None = None) -> str:
    resolved = options if options is not None else EscapeOptions()
    if resolved.unicode_style == UnicodeEscapeStyle.FIXED:
        if codepoint <= 0xFFFF:
            digits = f"{codepoint:04x}"
            prefix = "\\u"
        else:
            digits = f"{codepoint:08x}"
            prefix = "\\U"
        return prefix + (digits.upper() if resolved.uppercase_hex else digits)

    digits = f"{codepoint:04x}"
    if resolved.uppercase_hex:
        digits = digits.upper()
    return "\\u{" + digits + "}"


def decode_literal_body(body: str) -> DecodedLiteral:
    """Decode a literal body as extracted by the tokenizer (quotes stripped).

    Accepts the short escapes, braced `\\u{...}`, fixed `\\uHHHH` and
    `\\UHHHHHHHH`. Raises `LiteralDecodeError` for anything else.
    """
    codepoints: list[int] = []
    written: list[WrittenForm] = []
    i = 0

    while i < len(body):
        ch = body[i]
        if ch != "\\":
            codepoints.append(ord(ch))
            written.append(WrittenForm.LITERAL)
            i += 1
            continue

        start = i
        i += 1
        if i >= len(body):
            raise LiteralDecodeError("truncated_escape", start, "backslash at end of literal")

        esc = body[i]
        if esc in _SHORT_ESCAPES:
            codepoints.append(_SHORT_ESCAPES[esc])
            written.append(WrittenForm.SPECIAL_ESCAPE)
            i += 1
            continue

        if esc == "u" and body.startswith("{", i + 1):
            close = body.find("}", i + 2)
            if close < 0:
                raise LiteralDecodeError("truncated_escape", start, "unterminated \\u{...}")
            digits = body[i + 2 : close]
            if not 1 <= len(digits) <= _MAX_BRACED_DIGITS:
                raise LiteralDecodeError("invalid_unicode_escape", start, f"\\u{{{digits}}}")
            value = _parse_hex(digits, start)
            i = close + 1
        elif esc == "u":
            value = _parse_hex(body[i + 1 : i + 5], start, width=4)
            i += 5
        elif esc == "U":
            value = _parse_hex(body[i + 1 : i + 9], start, width=8)
            i += 9
        else:
            raise LiteralDecodeError("unknown_escape", start, f"\\{esc}")

        if value > MAX_SCALAR or 0xD800 <= value <= 0xDFFF:
            raise LiteralDecodeError("invalid_scalar", start, f"U+{value:04X} is not a Unicode scalar value")
        codepoints.append(value)
        written.append(WrittenForm.UNICODE_ESCAPE)

    return DecodedLiteral(codepoints=tuple(codepoints), written=tuple(written))


def _parse_hex(digits: str, offset: int, *, width: int | None = None) -> int:
    if width is not None and len(digits) != width:
        raise LiteralDecodeError("invalid_unicode_escape", offset, f"expected {width} hex digits")
    if not digits or any(c not in _HEX_CHARS for c in digits):
        raise LiteralDecodeError("invalid_unicode_escape", offset, f"invalid hex digits {digits!r}")
    return int(digits, 16)
