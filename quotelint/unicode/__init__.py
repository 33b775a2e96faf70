"""Scalar classification and grapheme segmentation."""

from quotelint.unicode.classify import (
    MAX_SCALAR,
    SPECIAL_ESCAPES,
    Category,
    classify,
    is_ascii,
    special_escape_spelling,
)
from quotelint.unicode.segment import (
    DEFAULT_SEGMENTER,
    FixedBoundarySegmenter,
    GraphemeSegmenter,
    RegexGraphemeSegmenter,
)

__all__ = [
    "DEFAULT_SEGMENTER",
    "MAX_SCALAR",
    "SPECIAL_ESCAPES",
    "Category",
    "FixedBoundarySegmenter",
    "GraphemeSegmenter",
    "RegexGraphemeSegmenter",
    "classify",
    "is_ascii",
    "special_escape_spelling",
]
