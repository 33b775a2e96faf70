"""Rendering options for escape sequences."""

from dataclasses import dataclass
from enum import StrEnum


class UnicodeEscapeStyle(StrEnum):
    """Spelling of generic Unicode escapes."""

    BRACED = "braced"  # \u{1F3FB}
    FIXED = "fixed"  # \u00DC, \U0001F3FB


@dataclass(frozen=True, slots=True)
class EscapeOptions:
    """Controls how decisions are spelled. Never affects decisions or verdicts."""

    unicode_style: UnicodeEscapeStyle = UnicodeEscapeStyle.BRACED
    uppercase_hex: bool = True

    @staticmethod
    def for_style(style: UnicodeEscapeStyle) -> "EscapeOptions":
        return EscapeOptions(unicode_style=style)
