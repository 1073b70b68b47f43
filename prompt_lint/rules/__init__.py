"""Rules package and registry."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from prompt_lint.config import DEFAULT_RULE_CONFIGS, RuleConfig
from prompt_lint.models import RuleKind, Severity
from prompt_lint.rules.base import NO_ISSUE, Rule, RuleOutcome
from prompt_lint.rules.missing_io_specification import MissingIOSpecificationRule
from prompt_lint.rules.missing_language import MissingLanguageRule
from prompt_lint.rules.missing_task_verb import MissingTaskVerbRule
from prompt_lint.rules.redundant_language import RedundantLanguageRule
from prompt_lint.rules.unclear_scope import UnclearScopeRule
from prompt_lint.rules.vague_wording import VagueWordingRule

__all__ = [
    "NO_ISSUE",
    "MissingIOSpecificationRule",
    "MissingLanguageRule",
    "MissingTaskVerbRule",
    "RedundantLanguageRule",
    "Rule",
    "RuleInfo",
    "RuleOutcome",
    "UnclearScopeRule",
    "VagueWordingRule",
    "build_rules",
    "default_rules",
    "get_rule",
    "list_rule_info",
]


@dataclass(frozen=True, slots=True)
class RuleInfo:
    """Rule metadata for listing and selection."""

    kind: RuleKind
    name: str
    description: str
    default_severity: Severity
    default_enabled: bool


@dataclass(frozen=True, slots=True)
class _RuleSpec:
    kind: RuleKind
    factory: Callable[[], Rule]


# Execution order is part of the output contract: it fixes issue and suggestion order.
_RULE_SPECS: tuple[_RuleSpec, ...] = (
    _RuleSpec(RuleKind.MISSING_TASK_VERB, MissingTaskVerbRule),
    _RuleSpec(RuleKind.MISSING_LANGUAGE, MissingLanguageRule),
    _RuleSpec(RuleKind.MISSING_IO_SPECIFICATION, MissingIOSpecificationRule),
    _RuleSpec(RuleKind.VAGUE_WORDING, VagueWordingRule),
    _RuleSpec(RuleKind.UNCLEAR_SCOPE, UnclearScopeRule),
    _RuleSpec(RuleKind.REDUNDANT_LANGUAGE, RedundantLanguageRule),
)


def default_rules() -> list[Rule]:
    """Return one instance of every built-in rule in registry order."""
    return [spec.factory() for spec in _RULE_SPECS]


def build_rules(
    *,
    enabled_kinds: list[RuleKind | str] | None = None,
    disabled_kinds: list[RuleKind | str] | None = None,
) -> list[Rule]:
    """Build rule instances in registry order, applying enable/disable filters."""
    requested = list(enabled_kinds or []) + list(disabled_kinds or [])
    unknown = [str(item) for item in requested if not _is_known_kind(item)]
    if unknown:
        joined = ", ".join(sorted(unknown))
        raise ValueError(f"Unknown rule kinds: {joined}")

    enabled_set = {RuleKind(item) for item in enabled_kinds} if enabled_kinds is not None else None
    disabled_set = {RuleKind(item) for item in disabled_kinds or []}

    built: list[Rule] = []
    for spec in _RULE_SPECS:
        if enabled_set is not None and spec.kind not in enabled_set:
            continue
        if spec.kind in disabled_set:
            continue
        built.append(spec.factory())
    return built


def get_rule(kind: RuleKind | str) -> Rule | None:
    """Return a fresh instance of the rule for ``kind``, or None if unknown."""
    if not _is_known_kind(kind):
        return None
    resolved = RuleKind(kind)
    for spec in _RULE_SPECS:
        if spec.kind is resolved:
            return spec.factory()
    return None


def list_rule_info(rule_configs: tuple[RuleConfig, ...] = DEFAULT_RULE_CONFIGS) -> list[RuleInfo]:
    """Return metadata for all built-in rules, with defaults from ``rule_configs``."""
    configs = {item.kind: item for item in rule_configs}
    info: list[RuleInfo] = []
    for spec in _RULE_SPECS:
        rule = spec.factory()
        config = configs.get(spec.kind, RuleConfig(spec.kind))
        info.append(
            RuleInfo(
                kind=spec.kind,
                name=rule.name,
                description=rule.description,
                default_severity=config.severity,
                default_enabled=config.enabled,
            )
        )
    return info


def _is_known_kind(value: RuleKind | str) -> bool:
    try:
        RuleKind(value)
    except ValueError:
        return False
    return True
