"""Literal model and cluster builder."""

from quotelint.model.builder import build_clusters, build_literal_model
from quotelint.model.model import (
    GraphemeCluster,
    LiteralModel,
    Scalar,
    SegmentationError,
    WrittenForm,
)

__all__ = [
    "GraphemeCluster",
    "LiteralModel",
    "Scalar",
    "SegmentationError",
    "WrittenForm",
    "build_clusters",
    "build_literal_model",
]
