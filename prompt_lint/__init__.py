"""Deterministic prompt quality linting."""

from __future__ import annotations

from prompt_lint.analyzer import analyze_prompt
from prompt_lint.config import EngineConfig, RuleConfig, ScoringConfig, build_engine_config
from prompt_lint.engine import LintEngine, RuleFailure
from prompt_lint.models import Issue, LintMetadata, LintResult, RuleKind, Severity, Span

__version__ = "0.1.0"

__all__ = [
    "EngineConfig",
    "Issue",
    "LintEngine",
    "LintMetadata",
    "LintResult",
    "RuleConfig",
    "RuleFailure",
    "RuleKind",
    "ScoringConfig",
    "Severity",
    "Span",
    "__version__",
    "analyze_prompt",
    "build_engine_config",
]
