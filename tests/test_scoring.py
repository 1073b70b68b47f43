"""Tests for score composition."""

from __future__ import annotations

from prompt_lint.config import ScoringConfig
from prompt_lint.models import Issue, RuleKind, Severity
from prompt_lint.scoring import (
    calculate_score,
    score_breakdown,
    severity_weight,
    weighted_issue_count,
)


def test_empty_issue_list_scores_base() -> None:
    assert calculate_score([], ScoringConfig()) == 100
    assert calculate_score([], ScoringConfig(base_score=70)) == 70


def test_penalties_follow_severity() -> None:
    issues = [
        _issue(RuleKind.MISSING_LANGUAGE, Severity.HIGH),
        _issue(RuleKind.MISSING_IO_SPECIFICATION, Severity.MEDIUM),
        _issue(RuleKind.REDUNDANT_LANGUAGE, Severity.LOW),
    ]
    breakdown = score_breakdown(issues, ScoringConfig())
    assert breakdown.penalty_total == 43 + 23 + 12
    assert breakdown.final_score == 22


def test_score_is_clamped_to_range() -> None:
    issues = [_issue(RuleKind.MISSING_LANGUAGE, Severity.HIGH)] * 3
    breakdown = score_breakdown(issues, ScoringConfig())
    assert breakdown.raw_score == -29
    assert breakdown.final_score == 0

    breakdown = score_breakdown([], ScoringConfig(), "implement a function with input and output")
    assert breakdown.raw_score > 100
    assert breakdown.final_score == 100


def test_task_verb_bonus_prefers_excellent_verbs() -> None:
    config = ScoringConfig(base_score=50)
    assert score_breakdown([], config, "implement quicksort in Python").task_verb_bonus == 5
    assert score_breakdown([], config, "create sorting thing").task_verb_bonus == 3
    assert score_breakdown([], config, "write quicksort").task_verb_bonus == 0


def test_specificity_bonus_grows_with_matched_terms() -> None:
    config = ScoringConfig(base_score=50)
    assert score_breakdown([], config, "create sorting function").specificity_bonus == 3
    assert score_breakdown([], config, "function and class").specificity_bonus == 5


def test_clarity_bonus_rounds_half_up() -> None:
    config = ScoringConfig(base_score=50, clarity_bonus=5)
    breakdown = score_breakdown([], config, "sort with input and output")
    assert breakdown.clarity_bonus == 5
    assert breakdown.final_score == 55


def test_clarity_bonus_rewards_detailed_prompts() -> None:
    breakdown = score_breakdown(
        [], ScoringConfig(base_score=50), "explain how quicksort works with examples"
    )
    assert breakdown.clarity_bonus == 2


def test_bonus_can_be_disabled() -> None:
    config = ScoringConfig(
        base_score=50,
        task_verb_quality_bonus=None,
        specificity_bonus=0,
        clarity_bonus=None,
    )
    breakdown = score_breakdown([], config, "implement a function with input and output")
    assert breakdown.bonus_total == 0
    assert breakdown.final_score == 50


def test_score_combines_penalties_and_bonuses() -> None:
    issues = [
        _issue(RuleKind.MISSING_LANGUAGE, Severity.HIGH),
        _issue(RuleKind.MISSING_IO_SPECIFICATION, Severity.MEDIUM),
    ]
    assert calculate_score(issues, ScoringConfig(), "create sorting function") == 40


def test_weighted_issue_count_uses_ordinal_weights() -> None:
    assert severity_weight(Severity.HIGH) == 3
    assert severity_weight(Severity.MEDIUM) == 2
    assert severity_weight(Severity.LOW) == 1
    issues = [
        _issue(RuleKind.MISSING_LANGUAGE, Severity.HIGH),
        _issue(RuleKind.VAGUE_WORDING, Severity.MEDIUM),
        _issue(RuleKind.REDUNDANT_LANGUAGE, Severity.LOW),
    ]
    assert weighted_issue_count(issues) == 6
    assert weighted_issue_count([]) == 0


def _issue(kind: RuleKind, severity: Severity) -> Issue:
    return Issue(kind=kind, severity=severity, message=f"{kind.value} issue")
