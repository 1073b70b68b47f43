"""CLI entrypoint for promptlint."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Annotated

import typer

from prompt_lint import __version__
from prompt_lint.analyzer import analyze_prompt
from prompt_lint.config import AppConfig, EngineConfig, default_config_template, load_app_config
from prompt_lint.engine import LintEngine
from prompt_lint.output import render_human, render_json
from prompt_lint.rules import list_rule_info

app = typer.Typer(
    name="promptlint",
    no_args_is_help=True,
    help="Lint prompts for language models and produce deterministic quality scores.",
)


def version_callback(value: bool) -> None:
    """Print version and exit when --version is provided."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option("--version", help="Show version and exit.", callback=version_callback),
    ] = False,
) -> None:
    """Root command callback."""
    _ = version


@app.command("score")
def score_command(
    prompt: Annotated[str | None, typer.Argument(help="Prompt text to analyze.")] = None,
    file: Annotated[Path | None, typer.Option(help="Read the prompt from a file.")] = None,
    stdin: Annotated[bool, typer.Option(help="Read the prompt from stdin.")] = False,
    root: Annotated[Path, typer.Option(help="Project directory for config lookup.")] = Path("."),
    format: Annotated[
        str | None, typer.Option(help="Output format: human|json.", show_default="human")
    ] = None,
    fail_below: Annotated[
        int | None, typer.Option(help="Exit nonzero if the score is below this value.")
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
) -> None:
    """Score a prompt and print its issues and suggestions."""
    app_config = _load_config_or_raise(root, config_file)
    output_format = (format or app_config.format).lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    sources = [prompt is not None, file is not None, stdin]
    if sum(sources) > 1:
        raise typer.BadParameter("Use only one of PROMPT, --file, or --stdin.")
    if not any(sources):
        raise typer.BadParameter("Provide a PROMPT argument, --file, or --stdin.")

    text, input_source = _resolve_prompt_input(prompt=prompt, file=file, stdin=stdin)
    engine = LintEngine(_engine_config_or_raise(app_config))
    result = analyze_prompt(text, engine=engine)

    if output_format == "json":
        typer.echo(render_json(result, input_source=input_source))
    else:
        typer.echo(render_human(result, prompt=text.strip()))

    threshold = fail_below if fail_below is not None else app_config.fail_below
    if threshold is not None and result.score < threshold:
        raise typer.Exit(code=1)


@app.command("rules")
def rules_command(
    root: Annotated[Path, typer.Option(help="Project directory for config lookup.")] = Path("."),
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
) -> None:
    """List the available rules in execution order."""
    output_format = _output_format_or_raise(format)
    app_config = _load_config_or_raise(root, config_file)
    engine_config = _engine_config_or_raise(app_config)
    configured = {item.kind: item for item in engine_config.rules}
    rule_info = list_rule_info()

    if output_format == "json":
        payload = {
            "rules": [
                {
                    "kind": item.kind.value,
                    "name": item.name,
                    "description": item.description,
                    "default_enabled": item.default_enabled,
                    "default_severity": item.default_severity.value,
                    "enabled": configured[item.kind].enabled,
                    "severity": configured[item.kind].severity.value,
                }
                for item in rule_info
            ],
            "meta": {"config_source": app_config.source},
        }
        typer.echo(json.dumps(payload, sort_keys=True))
        return

    lines = ["Available rules:"]
    for item in rule_info:
        rule_config = configured[item.kind]
        status = "enabled" if rule_config.enabled else "disabled"
        lines.append(
            f"- {item.kind.value} [{status}, {rule_config.severity.value}] - {item.description}"
        )
    typer.echo("\n".join(lines))


@app.command("config")
def config_command(
    root: Annotated[Path, typer.Option(help="Project directory for config lookup.")] = Path("."),
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
) -> None:
    """Show resolved configuration."""
    output_format = _output_format_or_raise(format)
    app_config = _load_config_or_raise(root, config_file)
    engine_config = _engine_config_or_raise(app_config)
    payload = app_config.to_dict()
    payload["engine"] = engine_config.to_dict()
    payload["active_rule_kinds"] = _active_kinds(engine_config)

    if output_format == "json":
        typer.echo(json.dumps(payload, sort_keys=True))
        return

    lines = [
        "Resolved configuration:",
        f"- source: {payload['source'] or 'defaults'}",
        f"- format: {payload['format']}",
        f"- fail_below: {payload['fail_below']}",
        f"- rules.disable: {payload['rules']['disable']}",
        f"- rules.severity: {payload['rules']['severity']}",
        f"- scoring: {payload['engine']['scoring']}",
        f"- active_rule_kinds: {payload['active_rule_kinds']}",
    ]
    typer.echo("\n".join(lines))


@app.command("config-init")
def config_init_command(
    out: Annotated[Path, typer.Option(help="Output path for starter config TOML.")] = Path(
        ".promptlint.toml"
    ),
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite if file already exists."),
    ] = False,
) -> None:
    """Create a starter project config file."""
    out_path = out.resolve()
    if out_path.exists() and not force:
        raise typer.BadParameter(
            f"Refusing to overwrite existing file: {out_path}. Use --force to overwrite."
        )
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(default_config_template(), encoding="utf-8")
    typer.echo(f"Wrote starter config: {out_path}")


@app.command("config-validate")
def config_validate_command(
    root: Annotated[Path, typer.Option(help="Project directory for config lookup.")] = Path("."),
    config_file: Annotated[
        Path,
        typer.Option("--config", help="Path to config TOML file to validate."),
    ] = Path(".promptlint.toml"),
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
) -> None:
    """Validate a config file and report active rules."""
    output_format = _output_format_or_raise(format)
    app_config = _load_config_or_raise(root, config_file)
    engine_config = _engine_config_or_raise(app_config)
    payload = {
        "ok": True,
        "source": app_config.source,
        "active_rule_kinds": _active_kinds(engine_config),
    }
    if output_format == "json":
        typer.echo(json.dumps(payload, sort_keys=True))
        return
    typer.echo(
        "\n".join(
            [
                "Config is valid.",
                f"- source: {payload['source']}",
                f"- active_rule_kinds: {payload['active_rule_kinds']}",
            ]
        )
    )


def main() -> None:
    """Console script entrypoint."""
    app()


def _resolve_prompt_input(
    *,
    prompt: str | None,
    file: Path | None,
    stdin: bool,
) -> tuple[str, str]:
    if file is not None:
        try:
            return (file.read_text(encoding="utf-8"), f"file:{file}")
        except OSError as exc:
            raise typer.BadParameter(f"Cannot read {file}: {exc}", param_hint="--file") from exc

    if stdin:
        return (sys.stdin.read(), "stdin")

    return (prompt or "", "argument")


def _output_format_or_raise(value: str) -> str:
    output_format = value.lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")
    return output_format


def _load_config_or_raise(root: Path, config_file: Path | None = None) -> AppConfig:
    try:
        return load_app_config(root, config_path=config_file)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="config") from exc


def _engine_config_or_raise(app_config: AppConfig) -> EngineConfig:
    try:
        return app_config.to_engine_config()
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="config.scoring") from exc


def _active_kinds(engine_config: EngineConfig) -> list[str]:
    return [item.kind.value for item in engine_config.rules if item.enabled]
