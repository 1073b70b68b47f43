"""Score composition from issue penalties and raw-text bonuses.

Penalties and bonuses come from independent signals and are combined
additively, so adding detail to a prompt never lowers its bonus total.
All penalties are applied first, then bonuses, then one final clamp.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from prompt_lint.config import ScoringConfig
from prompt_lint.models import Issue, Severity
from prompt_lint.text import normalize

EXCELLENT_VERBS = ("implement", "develop", "architect", "construct", "engineer")
GOOD_VERBS = ("build", "create", "generate", "design", "code", "program")
GOOD_VERB_FACTOR = 0.6

SPECIFIC_TERMS = ("algorithm", "function", "method", "class", "module", "component")
EXTRA_SPECIFIC_TERM_FACTOR = 0.5

CLARITY_INDICATORS = (" with ", " that ", " for ", "input", "output", "return")
CLARITY_INDICATOR_FACTOR = 0.3
DETAIL_FACTOR = 0.5
DETAIL_MIN_CHARS = 30
DETAIL_MIN_WORDS = 6

SEVERITY_WEIGHTS = {Severity.HIGH: 3, Severity.MEDIUM: 2, Severity.LOW: 1}


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """Traceable score composition."""

    base_score: int
    penalty_total: int
    task_verb_bonus: int
    specificity_bonus: int
    clarity_bonus: int
    raw_score: int
    final_score: int

    @property
    def bonus_total(self) -> int:
        return self.task_verb_bonus + self.specificity_bonus + self.clarity_bonus


def calculate_score(issues: Iterable[Issue], config: ScoringConfig, text: str = "") -> int:
    """Return the clamped 0-100 quality score."""
    return score_breakdown(issues, config, text).final_score


def score_breakdown(issues: Iterable[Issue], config: ScoringConfig, text: str = "") -> ScoreBreakdown:
    """Compute the score together with each of its components."""
    penalty_total = sum(config.penalty_for(issue.severity) for issue in issues)

    verb_bonus = specificity_bonus = clarity_bonus = 0
    if text:
        cleaned = normalize(text)
        verb_bonus = _task_verb_bonus(cleaned, config.task_verb_quality_bonus)
        specificity_bonus = _specificity_bonus(cleaned, config.specificity_bonus)
        clarity_bonus = _clarity_bonus(cleaned, config.clarity_bonus)

    raw = config.base_score - penalty_total + verb_bonus + specificity_bonus + clarity_bonus
    return ScoreBreakdown(
        base_score=config.base_score,
        penalty_total=penalty_total,
        task_verb_bonus=verb_bonus,
        specificity_bonus=specificity_bonus,
        clarity_bonus=clarity_bonus,
        raw_score=raw,
        final_score=_clamp(raw),
    )


def severity_weight(severity: Severity) -> int:
    return SEVERITY_WEIGHTS[severity]


def weighted_issue_count(issues: Iterable[Issue]) -> int:
    """Sum of severity weights, for analytics."""
    return sum(severity_weight(issue.severity) for issue in issues)


def _task_verb_bonus(text: str, bonus: int | None) -> int:
    if not bonus:
        return 0
    if any(verb in text for verb in EXCELLENT_VERBS):
        return bonus
    if any(verb in text for verb in GOOD_VERBS):
        return _round_half_up(bonus * GOOD_VERB_FACTOR)
    return 0


def _specificity_bonus(text: str, bonus: int | None) -> int:
    if not bonus:
        return 0
    matched = sum(1 for term in SPECIFIC_TERMS if term in text)
    if matched == 0:
        return 0
    extra = _round_half_up(bonus * EXTRA_SPECIFIC_TERM_FACTOR * (matched - 1))
    return bonus + extra


def _clarity_bonus(text: str, bonus: int | None) -> int:
    if not bonus:
        return 0
    matched = sum(1 for indicator in CLARITY_INDICATORS if indicator in text)
    total = _round_half_up(bonus * matched * CLARITY_INDICATOR_FACTOR)
    if len(text) > DETAIL_MIN_CHARS and len(text.split(" ")) >= DETAIL_MIN_WORDS:
        total += _round_half_up(bonus * DETAIL_FACTOR)
    return total


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _clamp(value: int, lower: int = 0, upper: int = 100) -> int:
    return max(lower, min(upper, value))
