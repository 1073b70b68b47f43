"""Result and issue models shared by rules, engine, and renderers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any


class Severity(StrEnum):
    """Ordinal penalty weight of an issue."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RuleKind(StrEnum):
    """Identifiers of the built-in detectors, in registry order."""

    MISSING_TASK_VERB = "missing_task_verb"
    MISSING_LANGUAGE = "missing_language"
    MISSING_IO_SPECIFICATION = "missing_io_specification"
    VAGUE_WORDING = "vague_wording"
    UNCLEAR_SCOPE = "unclear_scope"
    REDUNDANT_LANGUAGE = "redundant_language"


@dataclass(frozen=True, slots=True)
class Span:
    """Character offsets of a highlighted region in the analyzed text."""

    start: int
    end: int

    def to_dict(self) -> dict[str, int]:
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True, slots=True)
class Issue:
    """A single problem detected by one rule."""

    kind: RuleKind
    severity: Severity
    message: str
    suggestion: str | None = None
    span: Span | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "severity": self.severity.value,
            "message": self.message,
            "suggestion": self.suggestion,
            "span": self.span.to_dict() if self.span is not None else None,
        }


@dataclass(frozen=True, slots=True)
class LintMetadata:
    """Timing and size details attached by the entry point."""

    processing_time_ms: float
    input_length: int
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "processing_time_ms": self.processing_time_ms,
            "input_length": self.input_length,
            "timestamp": self.timestamp.isoformat().replace("+00:00", "Z"),
        }


@dataclass(frozen=True, slots=True)
class LintResult:
    """Complete lint analysis for one prompt."""

    score: int
    issues: tuple[Issue, ...] = ()
    suggestions: tuple[str, ...] = ()
    metadata: LintMetadata | None = None

    @property
    def issue_kinds(self) -> list[RuleKind]:
        return [issue.kind for issue in self.issues]

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "issues": [issue.to_dict() for issue in self.issues],
            "suggestions": list(self.suggestions),
            "metadata": self.metadata.to_dict() if self.metadata is not None else None,
        }
