"""Output rendering."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

import click

from prompt_lint import __version__
from prompt_lint.models import LintResult
from prompt_lint.text import calculate_complexity, estimate_reading_time, extract_words


def render_human(result: LintResult, *, prompt: str | None = None) -> str:
    """Render a compact colorized summary."""
    quality_label, color = _score_quality(result.score)
    lines: list[str] = [
        click.style(
            f"Prompt quality score: {result.score}/100 ({quality_label})",
            fg=color,
            bold=True,
        )
    ]

    if result.issues:
        lines.append(click.style("Issues:", bold=True))
        for index, issue in enumerate(result.issues, start=1):
            lines.append(f"{index}. [{issue.kind.value}] {issue.severity.value}: {issue.message}")
            if issue.span is not None and prompt is not None:
                lines.append(f"   at: `{prompt[issue.span.start : issue.span.end]}`")
    else:
        lines.append("No issues found.")

    if result.suggestions:
        lines.append(click.style("Suggestions:", bold=True))
        for suggestion in result.suggestions:
            lines.append(f"- {suggestion}")

    if prompt and result.metadata is not None:
        lines.append(
            f"Details: {len(extract_words(prompt))} words, "
            f"complexity {calculate_complexity(prompt)}, "
            f"~{estimate_reading_time(prompt)}ms to read, "
            f"analyzed in {result.metadata.processing_time_ms:.2f}ms"
        )
    return "\n".join(lines)


def render_json(result: LintResult, *, input_source: str) -> str:
    """Render stable JSON output for CI and automation."""
    return json.dumps(build_json_payload(result, input_source=input_source), sort_keys=True)


def build_json_payload(result: LintResult, *, input_source: str) -> dict[str, Any]:
    """Build stable JSON payload for CI and automation."""
    payload = result.to_dict()
    payload["meta"] = {
        "generated_at": datetime.now(tz=UTC)
        .replace(microsecond=0)
        .isoformat()
        .replace("+00:00", "Z"),
        "input_source": input_source,
        "version": __version__,
    }
    return payload


def _score_quality(score: int) -> tuple[str, str]:
    if score >= 85:
        return ("EXCELLENT", "green")
    if score >= 60:
        return ("GOOD", "cyan")
    if score >= 40:
        return ("FAIR", "yellow")
    return ("POOR", "red")
