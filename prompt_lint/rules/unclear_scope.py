"""Unclear task scope rule."""

from __future__ import annotations

import re

from prompt_lint.models import RuleKind
from prompt_lint.rules.base import NO_ISSUE, RuleOutcome
from prompt_lint.text import contains_any, normalize, tokenize, word_pattern

BROAD_SCOPE_WORDS = (
    "everything", "anything", "all", "any", "complete", "full", "entire", "whole",
    "comprehensive", "total", "overall", "general", "generic", "universal",
)  # fmt: skip

VAGUE_TASK_DESCRIPTORS = (
    "system", "solution", "program", "app", "application", "tool", "utility",
    "framework", "platform", "service", "component", "module", "library",
    "bug", "issue", "problem", "error", "thing", "stuff", "it", "something", "anything",
)  # fmt: skip

QUALITY_WORDS = (
    "best", "good", "better", "optimal", "efficient", "fast", "simple", "easy",
    "nice", "clean", "proper", "correct", "right", "appropriate", "suitable",
)  # fmt: skip

QUALITY_LEADS = ("make it", "should be", "needs to be", "has to be")

VAGUE_REFERENCES = ("this", "these", "those", "the above", "the following")

# "that" is usually a relative pronoun; only these uses point at an unnamed target.
VAGUE_THAT_PATTERNS = (
    r"\bdebug that\b",
    r"\bfix that\b",
    r"\boptimize that\b",
    r"\bimprove that\b",
    r"\bupdate that\b",
    r"\bthat\s+(?:bug|error|issue|problem)\b",
)

SCOPE_CLARIFIERS = (
    "only", "just", "specifically", "exactly", "precisely", "limited to",
    "excluding", "without", "except", "focus on", "concentrate on",
    "single", "one", "basic", "minimal", "simple version",
)  # fmt: skip

SPECIFIC_CONTEXTS = (
    "merge sort", "quicksort", "binary search", "linked list", "binary tree",
    "hash table", "stack", "queue", "graph", "fibonacci", "factorial",
)  # fmt: skip

SPECIFIC_TASKS = ("quicksort", "bubblesort", "mergesort", "binary search", "factorial", "fibonacci")

BROAD_SCOPE = "overly broad scope"
VAGUE_DESCRIPTOR = "vague task descriptor without scope clarification"
UNCLEAR_REQUIREMENTS = "unclear quality requirements"
VAGUE_REFERENCE = "vague references"
INSUFFICIENT_DETAIL = "insufficient detail for scope definition"

MAX_VAGUE_TOKEN_COUNT = 2


class UnclearScopeRule:
    """Flags prompts whose task boundaries are undefined or overly broad."""

    kind = RuleKind.UNCLEAR_SCOPE
    name = "Unclear Scope"
    description = "Detects prompts with undefined or overly broad task boundaries"

    def __init__(self) -> None:
        self._broad = tuple(word_pattern(word) for word in BROAD_SCOPE_WORDS)
        self._descriptors = tuple(word_pattern(word) for word in VAGUE_TASK_DESCRIPTORS)
        self._clarifiers = tuple(word_pattern(word) for word in SCOPE_CLARIFIERS)
        leads = "|".join(re.escape(lead) for lead in QUALITY_LEADS)
        self._requirements = tuple(
            re.compile(rf"\b(?:{leads}) {re.escape(word)}\b") for word in QUALITY_WORDS
        )
        self._references = tuple(word_pattern(ref) for ref in VAGUE_REFERENCES) + tuple(
            re.compile(pattern) for pattern in VAGUE_THAT_PATTERNS
        )

    def analyze(self, text: str) -> RuleOutcome:
        cleaned = normalize(text)
        reasons: list[str] = []

        if _any_match(self._broad, cleaned):
            reasons.append(BROAD_SCOPE)

        has_clarifier = _any_match(self._clarifiers, cleaned)
        has_specific_context = contains_any(cleaned, SPECIFIC_CONTEXTS)
        if _any_match(self._descriptors, cleaned) and not has_clarifier and not has_specific_context:
            reasons.append(VAGUE_DESCRIPTOR)

        if _any_match(self._requirements, cleaned):
            reasons.append(UNCLEAR_REQUIREMENTS)

        if _any_match(self._references, cleaned):
            reasons.append(VAGUE_REFERENCE)

        if (
            len(tokenize(cleaned)) <= MAX_VAGUE_TOKEN_COUNT
            and not has_clarifier
            and not contains_any(cleaned, SPECIFIC_TASKS)
        ):
            reasons.append(INSUFFICIENT_DETAIL)

        if not reasons:
            return NO_ISSUE

        return RuleOutcome(
            has_issue=True,
            message=f"Task scope unclear: {', '.join(reasons)}",
            suggestion="Define specific boundaries for what should be included/excluded in the task",
        )


def _any_match(patterns: tuple[re.Pattern[str], ...], text: str) -> bool:
    return any(pattern.search(text) for pattern in patterns)
