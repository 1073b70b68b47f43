"""Tests for the analyze_prompt entry point."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC

import pytest

from prompt_lint import analyze_prompt
from prompt_lint.analyzer import EMPTY_INPUT_SUGGESTION, INVALID_INPUT_SUGGESTION
from prompt_lint.config import build_engine_config
from prompt_lint.engine import LintEngine
from prompt_lint.models import LintResult, RuleKind

PROMPTS = [
    "implement quicksort algorithm in Python with input array of integers and output sorted array",
    "write quicksort",
    "maybe write something like quicksort somehow",
    "make it better",
    "fix the bug",
    "explain how quicksort works with examples",
    "in order to sort the list, please really use quicksort",
]


def test_non_string_input_returns_generic_result() -> None:
    for value in (None, 123, 4.5, {}, [], b"write quicksort"):
        result = analyze_prompt(value)
        assert result.score == 0
        assert result.issues == ()
        assert result.suggestions == (INVALID_INPUT_SUGGESTION,)
        assert result.metadata is not None
        assert result.metadata.input_length == 0


def test_empty_input_returns_generic_result() -> None:
    for value in ("", "   ", "\n\t  \n"):
        result = analyze_prompt(value)
        assert result.score == 0
        assert result.issues == ()
        assert result.suggestions == (EMPTY_INPUT_SUGGESTION,)


def test_metadata_describes_trimmed_input() -> None:
    result = analyze_prompt("  write quicksort \n")
    assert result.metadata is not None
    assert result.metadata.input_length == len("write quicksort")
    assert result.metadata.processing_time_ms >= 0
    assert result.metadata.timestamp.tzinfo is UTC


def test_surrounding_whitespace_does_not_change_result() -> None:
    for prompt in PROMPTS:
        plain = analyze_prompt(prompt)
        padded = analyze_prompt(f"\n  {prompt}\t ")
        assert (padded.score, padded.issues, padded.suggestions) == (
            plain.score,
            plain.issues,
            plain.suggestions,
        )


def test_repeated_analysis_is_identical() -> None:
    for prompt in PROMPTS:
        first = analyze_prompt(prompt)
        second = analyze_prompt(prompt)
        assert _comparable(first) == _comparable(second)


def test_concurrent_analysis_matches_sequential() -> None:
    expected = [_comparable(analyze_prompt(prompt)) for prompt in PROMPTS]
    with ThreadPoolExecutor(max_workers=8) as pool:
        actual = list(pool.map(lambda prompt: _comparable(analyze_prompt(prompt)), PROMPTS * 10))
    assert actual == expected * 10


def test_long_prompt_is_analyzed_within_budget() -> None:
    prompt = (
        "implement quicksort in Python with input array and output sorted array, "
        "maybe handle really large arrays somehow. "
    ) * 60
    prompt = prompt[:5000]
    analyze_prompt(prompt)

    result = analyze_prompt(prompt)
    assert result.metadata is not None
    assert result.metadata.input_length == len(prompt.strip())
    assert result.metadata.processing_time_ms < 50
    assert 0 <= result.score <= 100


def test_custom_engine_is_used() -> None:
    engine = LintEngine(build_engine_config([{"kind": "missing_language", "enabled": False}]))
    result = analyze_prompt("write quicksort", engine=engine)
    assert result.issue_kinds == [RuleKind.MISSING_IO_SPECIFICATION]
    assert result.score == 77


def test_engine_failure_degrades_to_generic_result(caplog: pytest.LogCaptureFixture) -> None:
    class BrokenEngine(LintEngine):
        def analyze(self, text: str) -> LintResult:
            raise RuntimeError("engine unavailable")

    with caplog.at_level(logging.ERROR, logger="prompt_lint.analyzer"):
        result = analyze_prompt("write quicksort", engine=BrokenEngine())

    assert result.score == 0
    assert result.suggestions == (INVALID_INPUT_SUGGESTION,)
    assert "Prompt analysis failed" in caplog.text


def test_slow_analysis_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    engine = LintEngine(build_engine_config(max_processing_ms=0.000001))
    with caplog.at_level(logging.WARNING, logger="prompt_lint.analyzer"):
        result = analyze_prompt("write quicksort", engine=engine)

    assert result.score == 34
    assert "budget" in caplog.text


def _comparable(result: LintResult) -> tuple[object, ...]:
    return (result.score, result.issues, result.suggestions)
