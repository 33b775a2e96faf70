"""Analysis run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from quotelint.diagnostics import Diagnostic, has_errors
from quotelint.escape import ConsistencyReport, EscapeDecision, EscapeOptions, render_decisions
from quotelint.lint import Verdict
from quotelint.model import LiteralModel


@dataclass(frozen=True, slots=True)
class EscapeCheckResult:
    """Result of analysing one literal.

    `rendering` is the decision sequence to emit: the literal's own decisions
    when it conforms, otherwise `suggested`.
    """

    model: LiteralModel
    decisions: tuple[EscapeDecision, ...]
    report: ConsistencyReport
    verdict: Verdict
    diagnostics: list[Diagnostic]
    rendering: tuple[EscapeDecision, ...]
    suggested: tuple[EscapeDecision, ...] | None = None
    preferred: tuple[EscapeDecision, ...] | None = None
    candidates: tuple[tuple[EscapeDecision, ...], ...] = ()

    @property
    def conforms(self) -> bool:
        return self.verdict.conforms

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def render(self, options: EscapeOptions | None = None) -> str:
        return render_decisions(self.rendering, options)


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of re-rendering one literal body."""

    check: EscapeCheckResult
    source_text: str
    formatted_text: str
    diagnostics: list[Diagnostic]
    changed: bool
