"""Scalar classification for escape decisions."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping
import unicodedata

MAX_SCALAR: Final[int] = 0x10FFFF


class Category(StrEnum):
    """Escape-relevant category of a single scalar value."""

    ASCII_PRINTABLE = "ascii_printable"
    ASCII_SPECIAL_ESCAPE = "ascii_special_escape"
    INVISIBLE_OR_CONTROL = "invisible_or_control"
    MODIFIER = "modifier"
    PRINTABLE_BASE = "printable_base"


SPECIAL_ESCAPES: Final[Mapping[int, str]] = MappingProxyType(
    {
        0x00: "\\0",
        0x09: "\\t",
        0x0A: "\\n",
        0x0D: "\\r",
        0x22: '\\"',
        0x27: "\\'",
        0x5C: "\\\\",
    }
)
"""Code point -> short escape spelling."""

# Scalars whose only role is to alter the preceding scalar, even though their
# general category would put them elsewhere (Cf joiners, Sk skin tones, Cf tags).
_MODIFIER_RANGES: Final[tuple[tuple[int, int], ...]] = (
    (0x200C, 0x200D),  # ZWNJ, ZWJ
    (0xFE00, 0xFE0F),  # variation selectors
    (0x1F3FB, 0x1F3FF),  # emoji skin tones
    (0xE0020, 0xE007F),  # tag characters
    (0xE0100, 0xE01EF),  # variation selectors supplement
)

_ZERO_WIDTH: Final[frozenset[int]] = frozenset(
    {
        0x115F,  # hangul choseong filler
        0x1160,  # hangul jungseong filler
        0x2028,  # line separator
        0x2029,  # paragraph separator
        0x3164,  # hangul filler
        0xFFA0,  # halfwidth hangul filler
    }
)

_INVISIBLE_CATEGORIES: Final[frozenset[str]] = frozenset({"Cc", "Cf"})
_MODIFIER_CATEGORIES: Final[frozenset[str]] = frozenset({"Mn", "Mc", "Me"})


def classify(codepoint: int) -> Category:
    """Classify one scalar value.

    Total over all integers: anything that is not a known special, ASCII,
    invisible or modifier scalar is a `PRINTABLE_BASE`, including unassigned
    and out-of-range values.
    """
    if codepoint in SPECIAL_ESCAPES:
        return Category.ASCII_SPECIAL_ESCAPE
    if 0x20 <= codepoint < 0x7F:
        return Category.ASCII_PRINTABLE
    if _in_ranges(codepoint, _MODIFIER_RANGES):
        return Category.MODIFIER
    if codepoint in _ZERO_WIDTH:
        return Category.INVISIBLE_OR_CONTROL
    if not 0 <= codepoint <= MAX_SCALAR:
        return Category.PRINTABLE_BASE

    general = unicodedata.category(chr(codepoint))
    if general in _INVISIBLE_CATEGORIES:
        return Category.INVISIBLE_OR_CONTROL
    if general in _MODIFIER_CATEGORIES:
        return Category.MODIFIER
    return Category.PRINTABLE_BASE


def is_ascii(codepoint: int) -> bool:
    return 0 <= codepoint < 0x80


def special_escape_spelling(codepoint: int) -> str | None:
    return SPECIAL_ESCAPES.get(codepoint)


def _in_ranges(codepoint: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    return any(low <= codepoint <= high for low, high in ranges)


__all__ = [
    "MAX_SCALAR",
    "SPECIAL_ESCAPES",
    "Category",
    "classify",
    "is_ascii",
    "special_escape_spelling",
]
