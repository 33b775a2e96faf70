"""String-literal escape-policy engine."""

from quotelint.pipeline import EscapeCheckResult, FormatRunResult, analyze_literal, run_check, run_format

__all__ = [
    "EscapeCheckResult",
    "FormatRunResult",
    "analyze_literal",
    "run_check",
    "run_format",
]
