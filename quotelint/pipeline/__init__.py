"""Analysis entrypoints and result carriers."""

from quotelint.pipeline.entrypoints import analyze_literal, run_check, run_format
from quotelint.pipeline.results import EscapeCheckResult, FormatRunResult

__all__ = [
    "EscapeCheckResult",
    "FormatRunResult",
    "analyze_literal",
    "run_check",
    "run_format",
]
