"""Zip grapheme boundaries with classified scalars."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from quotelint.model.model import GraphemeCluster, LiteralModel, Scalar, SegmentationError, WrittenForm
from quotelint.unicode import DEFAULT_SEGMENTER, GraphemeSegmenter, classify

logger = logging.getLogger(__name__)


def build_clusters(scalars: Sequence[Scalar], boundaries: Sequence[int]) -> list[GraphemeCluster]:
    """Split classified scalars into clusters at the given boundary offsets.

    Raises `SegmentationError` unless boundaries start at 0, end at
    `len(scalars)` and strictly increase. An empty literal accepts `[]` or `[0]`.
    """
    count = len(scalars)
    resolved = _validate_boundaries(boundaries, count)

    clusters: list[GraphemeCluster] = []
    for index, (start, end) in enumerate(zip(resolved, resolved[1:])):
        clusters.append(GraphemeCluster(index=index, start=start, scalars=tuple(scalars[start:end])))
    return clusters


def build_literal_model(
    codepoints: Sequence[int],
    segmenter: GraphemeSegmenter | None = None,
    *,
    written: Sequence[WrittenForm] | None = None,
) -> LiteralModel:
    """Classify code points, segment them and build the literal model."""
    if written is not None and len(written) != len(codepoints):
        raise ValueError(
            f"Expected {len(codepoints)} written forms, got {len(written)}"
        )
    resolved_segmenter = segmenter if segmenter is not None else DEFAULT_SEGMENTER
    forms = written if written is not None else (WrittenForm.UNSPECIFIED,) * len(codepoints)

    scalars = [
        Scalar(codepoint=codepoint, category=classify(codepoint), written=form)
        for codepoint, form in zip(codepoints, forms)
    ]
    boundaries = resolved_segmenter.segment(tuple(codepoints))
    clusters = build_clusters(scalars, boundaries)
    logger.debug("segmented %d scalars into %d clusters", len(scalars), len(clusters))
    return LiteralModel(clusters=tuple(clusters))


def _validate_boundaries(boundaries: Sequence[int], count: int) -> tuple[int, ...]:
    resolved = tuple(boundaries)
    if count == 0 and resolved in ((), (0,)):
        return (0,)
    if any(not isinstance(offset, int) or isinstance(offset, bool) for offset in resolved):
        raise SegmentationError(f"Boundaries must be integers, got {resolved!r}")
    if len(resolved) < 2:
        raise SegmentationError(f"Expected at least two boundaries for {count} scalars, got {resolved!r}")
    if resolved[0] != 0:
        raise SegmentationError(f"First boundary must be 0, got {resolved[0]}")
    if resolved[-1] != count:
        raise SegmentationError(f"Last boundary must be {count}, got {resolved[-1]}")
    for previous, current in zip(resolved, resolved[1:]):
        if current <= previous:
            raise SegmentationError(
                f"Boundaries must strictly increase, got {previous} then {current}"
            )
    return resolved
