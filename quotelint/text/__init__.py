"""Scalar-offset ranges."""

from quotelint.text.text import TextRange, TextSize

__all__ = [
    "TextRange",
    "TextSize",
]
