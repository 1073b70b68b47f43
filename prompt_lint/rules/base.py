"""Base rule protocol and outcome model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from prompt_lint.models import RuleKind, Span


@dataclass(frozen=True, slots=True)
class RuleOutcome:
    """Result of running a single rule against a prompt."""

    has_issue: bool
    message: str = ""
    suggestion: str | None = None
    span: Span | None = None


NO_ISSUE = RuleOutcome(has_issue=False)


class Rule(Protocol):
    """Protocol for deterministic prompt rules."""

    kind: RuleKind
    name: str
    description: str

    def analyze(self, text: str) -> RuleOutcome:
        """Classify ``text`` for this rule's problem."""
