"""Public entry point for prompt analysis."""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from datetime import UTC, datetime

from prompt_lint.engine import LintEngine
from prompt_lint.models import LintMetadata, LintResult

logger = logging.getLogger(__name__)

INVALID_INPUT_SUGGESTION = "Please provide a valid prompt text"
EMPTY_INPUT_SUGGESTION = "Please provide a non-empty prompt"

_default_engine = LintEngine()


def analyze_prompt(value: object, *, engine: LintEngine | None = None) -> LintResult:
    """Analyze a prompt and return its score, issues, suggestions, and metadata.

    Never raises. Non-string, empty, and whitespace-only input yields a
    zero score with a single generic suggestion and no rule is run.
    """
    start = time.perf_counter()
    active_engine = engine if engine is not None else _default_engine

    if not isinstance(value, str):
        return _empty_result(INVALID_INPUT_SUGGESTION, start)

    trimmed = value.strip()
    if not trimmed:
        return _empty_result(EMPTY_INPUT_SUGGESTION, start)

    try:
        result = active_engine.analyze(trimmed)
    except Exception:
        logger.exception("Prompt analysis failed; returning an empty result")
        return _empty_result(INVALID_INPUT_SUGGESTION, start)

    elapsed_ms = _elapsed_ms(start)
    budget_ms = active_engine.config.max_processing_ms
    if elapsed_ms > budget_ms:
        logger.warning(
            "Prompt analysis took %.2fms for %d characters (budget %.0fms)",
            elapsed_ms,
            len(trimmed),
            budget_ms,
        )

    return replace(
        result,
        metadata=LintMetadata(
            processing_time_ms=elapsed_ms,
            input_length=len(trimmed),
            timestamp=datetime.now(tz=UTC),
        ),
    )


def _empty_result(suggestion: str, start: float) -> LintResult:
    return LintResult(
        score=0,
        issues=(),
        suggestions=(suggestion,),
        metadata=LintMetadata(
            processing_time_ms=_elapsed_ms(start),
            input_length=0,
            timestamp=datetime.now(tz=UTC),
        ),
    )


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000
