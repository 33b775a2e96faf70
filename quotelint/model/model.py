"""Classified scalar and grapheme-cluster model of one literal."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from quotelint.text import TextRange, TextSize
from quotelint.unicode import Category, is_ascii


class SegmentationError(ValueError):
    """Grapheme boundaries from the segmentation provider are malformed."""


class WrittenForm(StrEnum):
    """How a scalar was spelled in the source literal.

    `UNSPECIFIED` is logical content with no source spelling yet; only the
    mixing check applies to it.
    """

    LITERAL = "literal"
    SPECIAL_ESCAPE = "special_escape"
    UNICODE_ESCAPE = "unicode_escape"
    UNSPECIFIED = "unspecified"


@dataclass(frozen=True, slots=True)
class Scalar:
    codepoint: int
    category: Category
    written: WrittenForm = WrittenForm.UNSPECIFIED

    @property
    def is_ascii(self) -> bool:
        return is_ascii(self.codepoint)

    @property
    def is_escaped(self) -> bool:
        return self.written in (WrittenForm.SPECIAL_ESCAPE, WrittenForm.UNICODE_ESCAPE)

    @property
    def is_written_literally(self) -> bool:
        return self.written == WrittenForm.LITERAL

    def __repr__(self) -> str:
        return f"Scalar(U+{self.codepoint:04X}, {self.category.value}, {self.written.value})"


@dataclass(frozen=True, slots=True)
class GraphemeCluster:
    """One user-perceived character: an anchor scalar plus attached scalars."""

    index: int
    start: int
    scalars: tuple[Scalar, ...]

    def __post_init__(self):
        if not self.scalars:
            raise ValueError("GraphemeCluster cannot be empty")

    @property
    def anchor(self) -> Scalar:
        return self.scalars[0]

    @property
    def attached(self) -> tuple[Scalar, ...]:
        return self.scalars[1:]

    @property
    def is_isolated(self) -> bool:
        return len(self.scalars) == 1

    @property
    def end(self) -> int:
        return self.start + len(self.scalars)

    @property
    def range(self) -> TextRange:
        return TextRange(self.start, self.end)


@dataclass(frozen=True, slots=True)
class LiteralModel:
    """Ordered clusters of one string literal. Never mutated by analysis."""

    clusters: tuple[GraphemeCluster, ...]

    @property
    def scalars(self) -> tuple[Scalar, ...]:
        return tuple(scalar for cluster in self.clusters for scalar in cluster.scalars)

    @property
    def codepoints(self) -> tuple[int, ...]:
        return tuple(scalar.codepoint for scalar in self.scalars)

    def __len__(self) -> int:
        return sum(len(cluster.scalars) for cluster in self.clusters)

    def iter_positioned(self):
        """Yield `(scalar_index, cluster, scalar)` in literal order, anchor first."""
        for cluster in self.clusters:
            for offset, scalar in enumerate(cluster.scalars):
                yield cluster.start + offset, cluster, scalar

    def cluster_at(self, scalar_index: int) -> GraphemeCluster:
        for cluster in self.clusters:
            if cluster.range.contains(TextSize(scalar_index)):
                return cluster
        raise IndexError(f"Scalar index {scalar_index} is outside the literal")
