"""Lint engine: runs enabled rules and scores their issues."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from prompt_lint.config import EngineConfig
from prompt_lint.models import Issue, LintResult, RuleKind
from prompt_lint.rules import Rule, default_rules
from prompt_lint.scoring import calculate_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RuleFailure:
    """A rule that raised while analyzing a prompt."""

    kind: RuleKind
    error: Exception

    @property
    def reason(self) -> str:
        return f"{self.error.__class__.__name__}: {self.error}"


DiagnosticsSink = Callable[[RuleFailure], None]


class LintEngine:
    """Runs the configured rules against a prompt.

    The engine and its rules are built once and hold no per-call state, so one
    instance can serve concurrent callers without locking.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        *,
        rules: Sequence[Rule] | None = None,
        diagnostics: DiagnosticsSink | None = None,
    ) -> None:
        self._config = config if config is not None else EngineConfig()
        self._rules = tuple(rules) if rules is not None else tuple(default_rules())
        self._diagnostics = diagnostics

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def analyze(self, text: str) -> LintResult:
        """Run every enabled rule and score the result; metadata is left unset."""
        issues: list[Issue] = []
        suggestions: list[str] = []

        for rule in self._rules:
            rule_config = self._config.rule_config(rule.kind)
            if rule_config is None or not rule_config.enabled:
                continue

            try:
                outcome = rule.analyze(text)
            except Exception as exc:
                self._report_failure(RuleFailure(kind=rule.kind, error=exc))
                continue

            if outcome.has_issue:
                issues.append(
                    Issue(
                        kind=rule.kind,
                        severity=rule_config.severity,
                        message=outcome.message,
                        suggestion=outcome.suggestion,
                        span=outcome.span,
                    )
                )
            if outcome.suggestion:
                suggestions.append(outcome.suggestion)

        score = calculate_score(issues, self._config.scoring, text)
        return LintResult(score=score, issues=tuple(issues), suggestions=tuple(suggestions))

    def _report_failure(self, failure: RuleFailure) -> None:
        logger.warning(
            "Rule %s failed: %s",
            failure.kind.value,
            failure.reason,
            exc_info=failure.error,
        )
        if self._diagnostics is None:
            return
        try:
            self._diagnostics(failure)
        except Exception:
            logger.exception("Diagnostics sink raised while reporting %s", failure.kind.value)
