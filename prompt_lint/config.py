"""Engine configuration values and project config loading."""

from __future__ import annotations

import tomllib
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

from prompt_lint.models import RuleKind, Severity

CONFIG_FILENAMES = (".promptlint.toml", "promptlint.toml")
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TOOL_KEYS = ("promptlint", "prompt-lint")


@dataclass(frozen=True, slots=True)
class RuleConfig:
    """Enable flag and severity for one rule kind."""

    kind: RuleKind
    enabled: bool = True
    severity: Severity = Severity.MEDIUM

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "enabled": self.enabled, "severity": self.severity.value}


@dataclass(frozen=True, slots=True)
class ScoringConfig:
    """Penalty and bonus weights for the scoring model."""

    base_score: int = 100
    high_penalty: int = 43
    medium_penalty: int = 23
    low_penalty: int = 12
    task_verb_quality_bonus: int | None = 5
    specificity_bonus: int | None = 3
    clarity_bonus: int | None = 2

    def penalty_for(self, severity: Severity) -> int:
        if severity is Severity.HIGH:
            return self.high_penalty
        if severity is Severity.MEDIUM:
            return self.medium_penalty
        return self.low_penalty

    def to_dict(self) -> dict[str, Any]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


DEFAULT_RULE_CONFIGS: tuple[RuleConfig, ...] = (
    RuleConfig(RuleKind.MISSING_TASK_VERB, severity=Severity.MEDIUM),
    RuleConfig(RuleKind.MISSING_LANGUAGE, severity=Severity.HIGH),
    RuleConfig(RuleKind.MISSING_IO_SPECIFICATION, severity=Severity.MEDIUM),
    RuleConfig(RuleKind.VAGUE_WORDING, severity=Severity.MEDIUM),
    RuleConfig(RuleKind.UNCLEAR_SCOPE, severity=Severity.MEDIUM),
    RuleConfig(RuleKind.REDUNDANT_LANGUAGE, severity=Severity.LOW),
)

DEFAULT_SCORING = ScoringConfig()

DEFAULT_MAX_PROCESSING_MS = 50.0


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable configuration shared by every analysis call."""

    rules: tuple[RuleConfig, ...] = DEFAULT_RULE_CONFIGS
    scoring: ScoringConfig = DEFAULT_SCORING
    max_processing_ms: float = DEFAULT_MAX_PROCESSING_MS

    def rule_config(self, kind: RuleKind) -> RuleConfig | None:
        for item in self.rules:
            if item.kind is kind:
                return item
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "rules": [item.to_dict() for item in self.rules],
            "scoring": self.scoring.to_dict(),
            "max_processing_ms": self.max_processing_ms,
        }


def merge_rule_configs(
    defaults: Iterable[RuleConfig],
    overrides: Iterable[RuleConfig | Mapping[str, Any]] | None = None,
) -> tuple[RuleConfig, ...]:
    """Overlay per-kind overrides on ``defaults``; unknown kinds are ignored.

    Overrides may be ``RuleConfig`` values or partial mappings such as
    ``{"kind": "missing_language", "enabled": False}``.
    """
    merged = {item.kind: item for item in defaults}
    for override in overrides or ():
        if isinstance(override, RuleConfig):
            kind = override.kind
            if kind in merged:
                merged[kind] = override
            continue

        kind = _parse_kind(override.get("kind"))
        if kind is None or kind not in merged:
            continue
        current = merged[kind]
        merged[kind] = replace(
            current,
            enabled=_as_bool(override.get("enabled", current.enabled), f"rules.{kind}.enabled"),
            severity=_as_severity(
                override.get("severity", current.severity), f"rules.{kind}.severity"
            ),
        )
    return tuple(merged.values())


def merge_scoring_config(
    base: ScoringConfig,
    overrides: ScoringConfig | Mapping[str, Any] | None = None,
) -> ScoringConfig:
    """Return ``base`` with any provided scoring fields replaced."""
    if overrides is None:
        return base
    if isinstance(overrides, ScoringConfig):
        return overrides

    known = {item.name for item in fields(ScoringConfig)}
    unknown = sorted(key for key in overrides if key not in known)
    if unknown:
        raise ValueError(f"Unknown scoring fields: {', '.join(unknown)}")

    values: dict[str, Any] = {}
    for key, raw in overrides.items():
        if key.endswith("_bonus"):
            values[key] = None if raw is None else _as_non_negative_int(raw, f"scoring.{key}")
        elif key == "base_score":
            values[key] = _as_int(raw, "scoring.base_score")
        else:
            values[key] = _as_non_negative_int(raw, f"scoring.{key}")
    return replace(base, **values)


def build_engine_config(
    rule_overrides: Iterable[RuleConfig | Mapping[str, Any]] | None = None,
    scoring_overrides: ScoringConfig | Mapping[str, Any] | None = None,
    *,
    max_processing_ms: float = DEFAULT_MAX_PROCESSING_MS,
) -> EngineConfig:
    """Build an engine configuration from defaults plus caller overrides."""
    if max_processing_ms <= 0:
        raise ValueError(f"max_processing_ms must be positive, got {max_processing_ms}")
    return EngineConfig(
        rules=merge_rule_configs(DEFAULT_RULE_CONFIGS, rule_overrides),
        scoring=merge_scoring_config(DEFAULT_SCORING, scoring_overrides),
        max_processing_ms=float(max_processing_ms),
    )


@dataclass(slots=True)
class AppConfig:
    """Runtime configuration values resolved from project files."""

    format: str = "human"
    fail_below: int | None = None
    rule_disable: list[str] = field(default_factory=list)
    rule_severity: dict[str, str] = field(default_factory=dict)
    scoring: dict[str, Any] = field(default_factory=dict)
    source: str | None = None

    def rule_overrides(self) -> list[dict[str, Any]]:
        overrides: list[dict[str, Any]] = []
        for kind in RuleKind:
            override: dict[str, Any] = {"kind": kind.value}
            if kind.value in self.rule_disable:
                override["enabled"] = False
            if kind.value in self.rule_severity:
                override["severity"] = self.rule_severity[kind.value]
            if len(override) > 1:
                overrides.append(override)
        return overrides

    def to_engine_config(self) -> EngineConfig:
        return build_engine_config(self.rule_overrides(), self.scoring or None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "format": self.format,
            "fail_below": self.fail_below,
            "rules": {
                "disable": list(self.rule_disable),
                "severity": dict(self.rule_severity),
            },
            "scoring": dict(self.scoring),
            "source": self.source,
        }


def load_app_config(root: Path, config_path: Path | None = None) -> AppConfig:
    """Load config from explicit path or project-local files with precedence."""
    root = root.resolve()
    if config_path is not None:
        resolved = config_path if config_path.is_absolute() else (root / config_path)
        if not resolved.exists():
            raise ValueError(f"Config file does not exist: {resolved}")
        mapping = _extract_config_mapping(_load_toml(resolved), source_path=resolved)
        return _from_mapping(mapping, source=str(resolved))

    for filename in CONFIG_FILENAMES:
        resolved = root / filename
        if resolved.exists():
            mapping = _extract_config_mapping(_load_toml(resolved), source_path=resolved)
            return _from_mapping(mapping, source=str(resolved))

    pyproject_path = root / PYPROJECT_FILENAME
    if pyproject_path.exists():
        mapping = _extract_config_mapping(_load_toml(pyproject_path), source_path=pyproject_path)
        if mapping:
            return _from_mapping(mapping, source=str(pyproject_path))

    return AppConfig()


def default_config_template() -> str:
    """Return a starter config template users can customize."""
    return "\n".join(
        [
            'format = "human"',
            "fail_below = 60",
            "",
            "[rules]",
            "# Rule kinds, in execution order:",
            "#   missing_task_verb, missing_language, missing_io_specification,",
            "#   vague_wording, unclear_scope, redundant_language",
            "disable = []",
            "",
            "[rules.severity]",
            '# missing_language = "high"',
            '# redundant_language = "low"',
            "",
            "[scoring]",
            "base_score = 100",
            "high_penalty = 43",
            "medium_penalty = 23",
            "low_penalty = 12",
            "task_verb_quality_bonus = 5",
            "specificity_bonus = 3",
            "clarity_bonus = 2",
            "",
        ]
    )


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as file_obj:
            loaded = tomllib.load(file_obj)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in {path}: {exc}") from exc
    if not isinstance(loaded, dict):
        return {}
    return loaded


def _extract_config_mapping(loaded: dict[str, Any], *, source_path: Path) -> dict[str, Any]:
    if source_path.name == PYPROJECT_FILENAME:
        section = _find_pyproject_tool_section(loaded)
        return section if section is not None else {}

    tool_section = _find_pyproject_tool_section(loaded)
    if tool_section is not None:
        return tool_section
    return loaded


def _find_pyproject_tool_section(loaded: dict[str, Any]) -> dict[str, Any] | None:
    tool = loaded.get("tool")
    if not isinstance(tool, dict):
        return None
    for key in PYPROJECT_TOOL_KEYS:
        section = tool.get(key)
        if isinstance(section, dict):
            return section
    return None


def _from_mapping(mapping: dict[str, Any], *, source: str) -> AppConfig:
    rules_mapping = _as_table(mapping.get("rules"), "rules")
    severity_mapping = _as_table(rules_mapping.get("severity"), "rules.severity")
    scoring_mapping = _as_table(mapping.get("scoring"), "scoring")

    raw_format = mapping.get("format", "human")
    format_value = str(raw_format).lower()
    if format_value not in {"human", "json"}:
        format_value = "human"

    raw_fail = mapping.get("fail_below")
    if raw_fail is None:
        fail_value: int | None = None
    else:
        fail_value = _as_int(raw_fail, "fail_below")

    rule_severity: dict[str, str] = {}
    for key, raw in severity_mapping.items():
        rule_severity[key] = _as_severity(raw, f"rules.severity.{key}").value

    # Validate eagerly so a bad file fails at load time, not on first analysis.
    merge_scoring_config(DEFAULT_SCORING, scoring_mapping)

    return AppConfig(
        format=format_value,
        fail_below=fail_value,
        rule_disable=_as_str_list(rules_mapping.get("disable")),
        rule_severity=rule_severity,
        scoring=dict(scoring_mapping),
        source=source,
    )


def _parse_kind(raw: Any) -> RuleKind | None:
    if isinstance(raw, RuleKind):
        return raw
    try:
        return RuleKind(str(raw).lower())
    except ValueError:
        return None


def _as_table(value: Any, field_name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{field_name} must be a table/object")
    return value


def _as_str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError("Expected a list of strings")
    items: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError("Expected a list of strings")
        items.append(item)
    return items


def _as_severity(raw: Any, field_name: str) -> Severity:
    if isinstance(raw, Severity):
        return raw
    try:
        return Severity(str(raw).lower())
    except ValueError:
        choices = ", ".join(item.value for item in Severity)
        raise ValueError(f"{field_name} must be one of: {choices}") from None


def _as_int(raw: Any, field_name: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"{field_name} must be an integer")
    return raw


def _as_non_negative_int(raw: Any, field_name: str) -> int:
    value = _as_int(raw, field_name)
    if value < 0:
        raise ValueError(f"{field_name} must be >= 0")
    return value


def _as_bool(raw: Any, field_name: str) -> bool:
    if not isinstance(raw, bool):
        raise ValueError(f"{field_name} must be a boolean")
    return raw
