"""Analysis entrypoints over one literal."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from quotelint.escape import (
    EscapeDecision,
    EscapeOptions,
    check_consistency,
    decide_escapes,
    decode_literal_body,
    preferred_rendering,
    render_decisions,
    suggest_escape_all,
)
from quotelint.lint import (
    EscapeRule,
    Violation,
    default_escape_rules,
    validate_escape_rules,
    verdict_for,
    violation_diagnostics,
)
from quotelint.model import LiteralModel, WrittenForm, build_literal_model
from quotelint.pipeline.results import EscapeCheckResult, FormatRunResult
from quotelint.unicode import GraphemeSegmenter

logger = logging.getLogger(__name__)


def analyze_literal(
    codepoints: str | Sequence[int] = (),
    segmenter: GraphemeSegmenter | None = None,
    *,
    written: Sequence[WrittenForm] | None = None,
    model: LiteralModel | None = None,
    rules: Sequence[EscapeRule] | None = None,
) -> EscapeCheckResult:
    """Decide, check and, on violation, suggest a fix for one literal.

    A `str` is taken as the literal's logical content. Without `written`
    forms only the mixing check applies. Raises `SegmentationError` for malformed boundaries.
    """
    resolved_model = _resolve_model(codepoints, segmenter=segmenter, written=written, model=model)
    resolved_rules = tuple(rules) if rules is not None else default_escape_rules()
    validate_escape_rules(resolved_rules)

    decisions = decide_escapes(resolved_model)
    report = check_consistency(decisions)

    violations: list[Violation] = []
    for rule in resolved_rules:
        violations.extend(rule.run(resolved_model, decisions, report))
    verdict = verdict_for(violations)

    suggested = None
    preferred = None
    candidates: tuple[tuple[EscapeDecision, ...], ...] = ()
    if verdict.conforms:
        rendering = decisions
    else:
        suggested = suggest_escape_all(decisions)
        rendering = suggested
        literal_candidate = preferred_rendering(decisions)
        if report.is_unresolved:
            candidates = (suggested, literal_candidate)
        else:
            preferred = literal_candidate

    logger.debug(
        "analysed %d scalars: %s (%d violations)",
        len(decisions),
        "conforms" if verdict.conforms else "violates",
        len(verdict.violations),
    )
    return EscapeCheckResult(
        model=resolved_model,
        decisions=decisions,
        report=report,
        verdict=verdict,
        diagnostics=violation_diagnostics(verdict.violations, resolved_model),
        rendering=rendering,
        suggested=suggested,
        preferred=preferred,
        candidates=candidates,
    )


def run_check(
    body: str,
    segmenter: GraphemeSegmenter | None = None,
    *,
    rules: Sequence[EscapeRule] | None = None,
) -> EscapeCheckResult:
    """Analyse a literal body as written in source (escapes not yet decoded).

    Raises `LiteralDecodeError` for malformed escapes.
    """
    decoded = decode_literal_body(body)
    return analyze_literal(decoded.codepoints, segmenter, written=decoded.written, rules=rules)


def run_format(
    body: str,
    options: EscapeOptions | None = None,
    *,
    segmenter: GraphemeSegmenter | None = None,
    check: EscapeCheckResult | None = None,
) -> FormatRunResult:
    """Re-render a literal body with the policy's output rendering."""
    if check is not None and segmenter is not None:
        raise ValueError("Pass either check or segmenter, not both")
    resolved_check = check if check is not None else run_check(body, segmenter)
    formatted_text = render_decisions(resolved_check.rendering, options)
    return FormatRunResult(
        check=resolved_check,
        source_text=body,
        formatted_text=formatted_text,
        diagnostics=list(resolved_check.diagnostics),
        changed=formatted_text != body,
    )


def _resolve_model(
    codepoints: str | Sequence[int],
    *,
    segmenter: GraphemeSegmenter | None,
    written: Sequence[WrittenForm] | None,
    model: LiteralModel | None,
) -> LiteralModel:
    if model is not None:
        if segmenter is not None or written is not None or len(codepoints) > 0:
            raise ValueError("Pass either model or codepoints/segmenter/written, not both")
        return model
    if isinstance(codepoints, str):
        codepoints = [ord(ch) for ch in codepoints]
    return build_literal_model(codepoints, segmenter, written=written)
