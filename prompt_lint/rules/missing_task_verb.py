"""Missing or weak task verb rule."""

from __future__ import annotations

import re

from prompt_lint.models import RuleKind
from prompt_lint.rules.base import NO_ISSUE, RuleOutcome
from prompt_lint.text import normalize, word_pattern

STRONG_VERBS = (
    # implementation
    "implement",
    "create",
    "build",
    "develop",
    "write",
    "code",
    "generate",
    # analysis and explanation
    "explain",
    "describe",
    "analyze",
    "review",
    "document",
    # debugging
    "debug",
    "fix",
    "solve",
    "resolve",
    "troubleshoot",
    # transformation
    "convert",
    "transform",
    "refactor",
    "optimize",
    "improve",
    # testing
    "test",
    "validate",
    "verify",
    "check",
    # other
    "design",
    "plan",
    "outline",
    "demonstrate",
    "provide",
)

WEAK_VERBS = ("make", "do", "get", "have", "use", "work", "help", "give", "tell", "show", "find")

POLITE_PREFIXES = ("please", "can you", "could you", "i need to", "i want to", "help me")

UNCLEAR_MESSAGE = (
    'Task verb is unclear - specify a precise action like "implement", "debug", or "explain"'
)
UNCLEAR_SUGGESTION = "Use specific action verbs: implement, create, debug, explain, analyze, etc."
MISSING_MESSAGE = "No clear task verb found - specify what action should be taken"
MISSING_SUGGESTION = (
    'Start with a clear action verb like "implement", "create", "debug", or "explain"'
)


class MissingTaskVerbRule:
    """Flags prompts without a clear action verb stating what should be done."""

    kind = RuleKind.MISSING_TASK_VERB
    name = "Missing Task Verb"
    description = "Detects prompts without clear action verbs indicating what should be done"

    def __init__(self) -> None:
        prefix = "|".join(re.escape(item) for item in POLITE_PREFIXES)
        self._strong = tuple(
            (
                re.compile(rf"^(?:(?:{prefix}) )?{re.escape(verb)}\b"),
                word_pattern(verb),
            )
            for verb in STRONG_VERBS
        )
        self._weak = tuple(word_pattern(verb) for verb in WEAK_VERBS)

    def analyze(self, text: str) -> RuleOutcome:
        cleaned = normalize(text)

        for leading, anywhere in self._strong:
            if leading.search(cleaned) or anywhere.search(cleaned):
                return NO_ISSUE

        if any(pattern.search(cleaned) for pattern in self._weak):
            return RuleOutcome(
                has_issue=True,
                message=UNCLEAR_MESSAGE,
                suggestion=UNCLEAR_SUGGESTION,
            )

        return RuleOutcome(
            has_issue=True,
            message=MISSING_MESSAGE,
            suggestion=MISSING_SUGGESTION,
        )
