"""Redundant language rule."""

from __future__ import annotations

from collections import Counter

from prompt_lint.models import RuleKind
from prompt_lint.rules.base import NO_ISSUE, RuleOutcome
from prompt_lint.text import normalize, tokenize, word_pattern

FILLER_WORDS = (
    "really", "very", "quite", "rather", "pretty", "fairly", "somewhat", "actually",
    "basically", "essentially", "literally", "definitely", "absolutely", "totally",
    "completely", "entirely", "obviously", "clearly", "certainly", "surely",
)  # fmt: skip

# (phrase, simpler form)
REDUNDANT_PHRASES = (
    ("in order to", "to"),
    ("due to the fact that", "because"),
    ("at this point in time", "now"),
    ("for the purpose of", "to"),
    ("with regard to", "regarding"),
    ("in the event that", "if"),
    ("it is important to note that", ""),
    ("please note that", ""),
    ("i would like to", "i want to"),
    ("could you please", "please"),
    ("would you mind", "please"),
    ("if you could", "please"),
)

VERBOSE_EXPRESSIONS = (
    ("make use of", "use"),
    ("give consideration to", "consider"),
    ("put emphasis on", "emphasize"),
    ("take into account", "consider"),
    ("come to the conclusion", "conclude"),
    ("make a decision", "decide"),
    ("carry out", "do"),
    ("bring to completion", "complete"),
)

COURTESY_WORDS = ("please", "thank you", "thanks", "appreciate", "grateful")

COURTESY_ALLOWANCE = 2
REPEAT_MIN_WORD_LENGTH = 4
REPEAT_THRESHOLD = 2
FIRING_THRESHOLD = 2
MAX_FILLER_LABELS = 3
MAX_MESSAGE_LABELS = 2


class RedundantLanguageRule:
    """Flags filler words, wordy phrases, repetition, and excess courtesy."""

    kind = RuleKind.REDUNDANT_LANGUAGE
    name = "Redundant Language"
    description = "Detects unnecessary repetition, filler words, and verbose expressions"

    def __init__(self) -> None:
        self._fillers = tuple((word, word_pattern(word)) for word in FILLER_WORDS)
        self._courtesy = tuple(word_pattern(word) for word in COURTESY_WORDS)

    def analyze(self, text: str) -> RuleOutcome:
        cleaned = normalize(text)
        labels: list[str] = []
        redundancy_count = 0

        fillers = [word for word, pattern in self._fillers if pattern.search(cleaned)]
        if fillers:
            labels.append(f"filler words: {', '.join(fillers[:MAX_FILLER_LABELS])}")
            redundancy_count += len(fillers)

        phrases = [phrase for phrase, _ in REDUNDANT_PHRASES if phrase in cleaned]
        if phrases:
            labels.append("redundant phrases")
            redundancy_count += len(phrases)

        verbose = [expression for expression, _ in VERBOSE_EXPRESSIONS if expression in cleaned]
        if verbose:
            labels.append("verbose expressions")
            redundancy_count += len(verbose)

        counts = Counter(
            word for word in tokenize(cleaned) if len(word) >= REPEAT_MIN_WORD_LENGTH
        )
        repeated = [word for word, count in counts.items() if count > REPEAT_THRESHOLD]
        if repeated:
            labels.append("repeated words")
            redundancy_count += len(repeated)

        courtesy_count = sum(len(pattern.findall(cleaned)) for pattern in self._courtesy)
        if courtesy_count > COURTESY_ALLOWANCE:
            labels.append("excessive courtesy language")
            redundancy_count += courtesy_count - COURTESY_ALLOWANCE

        # Known redundant phrases always fire; other signals need to accumulate.
        if not labels or (redundancy_count < FIRING_THRESHOLD and not phrases):
            return NO_ISSUE

        suggestion = "Remove unnecessary words and simplify expressions for clarity"
        rewrites = dict(REDUNDANT_PHRASES + VERBOSE_EXPRESSIONS)
        hints = [_rewrite_hint(item, rewrites[item]) for item in phrases + verbose]
        if hints:
            suggestion += f" (e.g. {'; '.join(hints[:MAX_MESSAGE_LABELS])})"
        return RuleOutcome(
            has_issue=True,
            message=f"Redundant language detected: {', '.join(labels[:MAX_MESSAGE_LABELS])}",
            suggestion=suggestion,
        )


def _rewrite_hint(wordy: str, simpler: str) -> str:
    if not simpler:
        return f'drop "{wordy}"'
    return f'"{wordy}" -> "{simpler}"'
