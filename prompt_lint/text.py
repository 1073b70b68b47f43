"""Text helpers shared by rules and scoring."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from re import Pattern

_WHITESPACE_RE = re.compile(r"\s+")
_SPECIAL_CHARS_RE = re.compile(r"[^\w\s.,!?;:()\-]")
_ALPHA_WORD_RE = re.compile(r"^[a-zA-Z]+$")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

CODE_REQUEST_INDICATORS = (
    "function",
    "class",
    "method",
    "algorithm",
    "code",
    "script",
    "program",
    "implement",
    "write",
    "create",
    "build",
    "develop",
    "generate",
    "sort",
    "search",
    "parse",
    "validate",
    "calculate",
    "compute",
)


@dataclass(frozen=True, slots=True)
class TextMatch:
    """A regex hit with its character offsets."""

    text: str
    start: int
    end: int


def normalize(text: str) -> str:
    """Lower-case and strip text before keyword matching."""
    return text.lower().strip()


def term_regex(term: str) -> str:
    """Escape ``term`` for regex use; inner whitespace matches any run of whitespace."""
    return r"\s+".join(re.escape(part) for part in term.split())


def word_pattern(term: str, *, ignore_case: bool = False) -> Pattern[str]:
    """Compile a word-boundary pattern for a word or phrase."""
    flags = re.IGNORECASE if ignore_case else 0
    return re.compile(rf"\b{term_regex(term)}\b", flags)


def tokenize(text: str) -> list[str]:
    """Split on whitespace, dropping empty tokens."""
    return text.split()


def contains_any(text: str, terms: Iterable[str]) -> bool:
    """Case-insensitive substring search for any of ``terms``."""
    lowered = text.lower()
    return any(term.lower() in lowered for term in terms)


def matches_any(text: str, patterns: Iterable[Pattern[str]]) -> bool:
    return any(pattern.search(text) for pattern in patterns)


def find_matches(text: str, patterns: Iterable[Pattern[str]]) -> list[TextMatch]:
    """Return every match of every pattern, ordered by start offset."""
    matches: list[TextMatch] = []
    for pattern in patterns:
        for match in pattern.finditer(text):
            matches.append(TextMatch(text=match.group(0), start=match.start(), end=match.end()))
    matches.sort(key=lambda item: item.start)
    return matches


def clean_text(text: str) -> str:
    """Collapse whitespace and drop characters other than word chars and basic punctuation."""
    collapsed = _WHITESPACE_RE.sub(" ", text.strip())
    return _SPECIAL_CHARS_RE.sub("", collapsed)


def extract_words(text: str, min_length: int = 2) -> list[str]:
    """Return lower-cased alphabetic words of at least ``min_length`` characters."""
    return [
        word
        for word in tokenize(text.lower())
        if len(word) >= min_length and _ALPHA_WORD_RE.match(word)
    ]


def calculate_complexity(text: str) -> float:
    words = extract_words(text)
    sentences = [item for item in _SENTENCE_SPLIT_RE.split(text) if item.strip()]
    avg_words_per_sentence = len(words) / max(len(sentences), 1)
    avg_word_length = sum(len(word) for word in words) / max(len(words), 1)
    raw = avg_words_per_sentence * 0.5 + avg_word_length * 0.3 + len(words) * 0.2
    return round(raw, 1)


def is_code_generation_request(text: str) -> bool:
    return contains_any(text, CODE_REQUEST_INDICATORS)


def estimate_reading_time(text: str, words_per_minute: int = 200) -> int:
    """Estimated reading time in milliseconds."""
    if words_per_minute <= 0:
        raise ValueError(f"words_per_minute must be positive, got {words_per_minute}")
    minutes = len(extract_words(text)) / words_per_minute
    return int(round(minutes * 60 * 1000))
