"""Grapheme-cluster segmentation contracts consumed by the cluster builder."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, Protocol

import regex

_GRAPHEME_RE: Final[regex.Pattern[str]] = regex.compile(r"\X")


class GraphemeSegmenter(Protocol):
    """Abstract grapheme-cluster boundary provider.

    `segment` returns cluster boundary offsets over the given scalars: the
    first is 0, the last is `len(scalars)`, and each consecutive pair delimits
    one cluster. Implementations must be re-entrant.
    """

    def segment(self, scalars: Sequence[int]) -> Sequence[int]: ...


@dataclass(frozen=True, slots=True)
class RegexGraphemeSegmenter:
    """Default provider: UAX #29 extended grapheme clusters via `regex`'s `\\X`."""

    def segment(self, scalars: Sequence[int]) -> Sequence[int]:
        text = "".join(map(chr, scalars))
        boundaries = [0]
        boundaries.extend(match.end() for match in _GRAPHEME_RE.finditer(text))
        return tuple(boundaries)


@dataclass(frozen=True, slots=True)
class FixedBoundarySegmenter:
    """Returns caller-supplied boundaries, for pre-segmented input and tests."""

    boundaries: tuple[int, ...]

    def segment(self, scalars: Sequence[int]) -> Sequence[int]:
        return self.boundaries


DEFAULT_SEGMENTER: Final[GraphemeSegmenter] = RegexGraphemeSegmenter()
