"""Vague wording rule."""

from __future__ import annotations

from prompt_lint.models import RuleKind, Span
from prompt_lint.rules.base import NO_ISSUE, RuleOutcome
from prompt_lint.text import word_pattern

# (term, preferred replacement)
VAGUE_TERMS = (
    ("just", "specifically"),
    ("maybe", "optionally"),
    ("somehow", "using a specific method"),
    ("something like", "similar to"),
    ("kind of", "type of"),
    ("sort of", "type of"),
    ("pretty much", "essentially"),
    ("basically", "specifically"),
    ("probably", "likely"),
    ("might", "could"),
    ("stuff", "items"),
    ("things", "elements"),
    ("whatever", "any appropriate"),
    ("some kind of", "a specific type of"),
    ("or something", "or similar"),
    ("and stuff", "and related items"),
)

HEDGE_WORDS = (
    "perhaps",
    "possibly",
    "presumably",
    "supposedly",
    "apparently",
    "seemingly",
    "roughly",
    "approximately",
    "about",
    "around",
    "kinda",
    "sorta",
)


class VagueWordingRule:
    """Flags vague terms and hedge words that make a prompt ambiguous."""

    kind = RuleKind.VAGUE_WORDING
    name = "Vague Wording"
    description = "Detects vague terms that make prompts unclear and ambiguous"

    def __init__(self) -> None:
        terms = [term for term, _ in VAGUE_TERMS] + list(HEDGE_WORDS)
        self._patterns = tuple((term, word_pattern(term, ignore_case=True)) for term in terms)
        self._replacements = dict(VAGUE_TERMS)

    def analyze(self, text: str) -> RuleOutcome:
        found: list[str] = []
        first_span: Span | None = None

        for term, pattern in self._patterns:
            for match in pattern.finditer(text):
                found.append(term)
                if first_span is None:
                    first_span = Span(start=match.start(), end=match.end())

        if not found:
            return NO_ISSUE

        distinct = list(dict.fromkeys(found))
        terms_list = ", ".join(f'"{term}"' for term in distinct)
        suggestion = "Replace vague terms with specific, precise language"
        hints = [
            f'"{term}" -> "{self._replacements[term]}"'
            for term in distinct
            if term in self._replacements
        ]
        if hints:
            suggestion += f" (e.g. {'; '.join(hints[:2])})"
        return RuleOutcome(
            has_issue=True,
            message=f"Vague terms detected: {terms_list}",
            suggestion=suggestion,
            span=first_span,
        )
