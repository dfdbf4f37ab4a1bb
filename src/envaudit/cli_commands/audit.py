"""Audit commands - scan an env file once or on every change.

Configuration can be set in .env-audit.yaml:
    file: .env
    example: .env.example
    required: [DATABASE_URL]
    ignore: [DEBUG]
    strict: false
    check_leaks: true

Exit codes:
  0 - No risks found
  1 - Risks detected
  2 - Fatal error (invalid config, file not found)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from envaudit.api import audit
from envaudit.config import AuditSettings, load_config, parse_comma_separated
from envaudit.exceptions import ConfigError, EnvFileError
from envaudit.output.formatters import format_github, format_json, print_result
from envaudit.output.rich import console, make_console, print_error
from envaudit.watch import DEFAULT_INTERVAL, run_watch

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_RISKS = 1
EXIT_FATAL = 2

FileOption = Annotated[
    Path | None,
    typer.Option("--file", "-f", help="Path to .env file (default: process environment)"),
]
RequiredOption = Annotated[
    str | None,
    typer.Option("--required", "-r", help="Comma-separated list of required variables"),
]
ExampleOption = Annotated[
    Path | None,
    typer.Option("--example", "-e", help="Path to .env.example file for comparison"),
]
IgnoreOption = Annotated[
    str | None,
    typer.Option("--ignore", "-i", help="Comma-separated list of keys to ignore"),
]
StrictOption = Annotated[
    bool, typer.Option("--strict", help="Treat warnings as errors")
]
CheckLeaksOption = Annotated[
    bool, typer.Option("--check-leaks", help="Analyze values for secret patterns")
]
JsonOption = Annotated[
    bool, typer.Option("--json", "-j", help="Output results as JSON")
]
GithubOption = Annotated[
    bool, typer.Option("--github", help="Output results as GitHub Actions annotations")
]
QuietOption = Annotated[
    bool, typer.Option("--quiet", "-q", help="Suppress report output")
]
NoColorOption = Annotated[
    bool, typer.Option("--no-color", help="Disable colored output")
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to .env-audit.yaml (auto-detected if not specified)"),
]


def load_settings(config_file: Path | None) -> AuditSettings:
    """Load the config file, exiting with code 2 when it is invalid."""
    try:
        return load_config(config_file)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=EXIT_FATAL) from None


def resolve_settings(
    config_file: Path | None,
    file: Path | None,
    required: str | None,
    example: Path | None,
    ignore: str | None,
    strict: bool,
    check_leaks: bool,
    json_output: bool,
    github: bool,
    quiet: bool,
    no_color: bool,
) -> AuditSettings:
    """Merge command-line options over the config file."""
    return load_settings(config_file).merge_cli(
        file=str(file) if file else None,
        required=parse_comma_separated(required),
        example=str(example) if example else None,
        ignore=parse_comma_separated(ignore),
        strict=strict,
        check_leaks=check_leaks,
        quiet=quiet,
        json_output=json_output,
        github=github,
        no_color=no_color,
    )


def run_audit(settings: AuditSettings) -> int:
    """Run one audit, print the report and return the exit code."""
    try:
        result = audit(
            env_file=settings.file,
            required=settings.required,
            example=settings.example,
            ignore=settings.ignore,
            check_leaks=settings.check_leaks,
            strict=settings.strict,
        )
    except EnvFileError as e:
        print_error(str(e))
        return EXIT_FATAL

    if not settings.quiet:
        if settings.json_output:
            typer.echo(format_json(result))
        elif settings.github:
            output = format_github(result)
            if output:
                typer.echo(output)
        else:
            print_result(result, make_console(settings.no_color))

    return EXIT_RISKS if result.has_risks else EXIT_OK


def scan(
    file: FileOption = None,
    required: RequiredOption = None,
    example: ExampleOption = None,
    ignore: IgnoreOption = None,
    strict: StrictOption = False,
    check_leaks: CheckLeaksOption = False,
    json_output: JsonOption = False,
    github: GithubOption = False,
    quiet: QuietOption = False,
    no_color: NoColorOption = False,
    config_file: ConfigOption = None,
) -> None:
    """Audit an .env file (or the process environment) for risks.

    \b
    Exit codes:
      0 - No risks found
      1 - Risks detected
      2 - Fatal error (invalid arguments, file not found)

    \b
    Examples:
      env-audit scan -f .env -r DATABASE_URL,SECRET_KEY
      env-audit scan -f .env -e .env.example --strict
      env-audit scan -f .env --check-leaks --json
    """
    settings = resolve_settings(
        config_file, file, required, example, ignore,
        strict, check_leaks, json_output, github, quiet, no_color,
    )
    raise typer.Exit(code=run_audit(settings))


def watch(
    file: FileOption = None,
    required: RequiredOption = None,
    example: ExampleOption = None,
    ignore: IgnoreOption = None,
    strict: StrictOption = False,
    check_leaks: CheckLeaksOption = False,
    json_output: JsonOption = False,
    github: GithubOption = False,
    quiet: QuietOption = False,
    no_color: NoColorOption = False,
    config_file: ConfigOption = None,
    interval: Annotated[
        float,
        typer.Option("--interval", min=0.1, help="Seconds between checks for changes"),
    ] = DEFAULT_INTERVAL,
) -> None:
    """Re-run the audit every time the .env file changes (Ctrl+C to stop)."""
    settings = resolve_settings(
        config_file, file, required, example, ignore,
        strict, check_leaks, json_output, github, quiet, no_color,
    )
    if not settings.file:
        print_error("watch requires --file to specify a file to watch")
        raise typer.Exit(code=EXIT_FATAL)

    path = Path(settings.file)
    if not path.is_file():
        print_error(f"ENV file not found: {path}")
        raise typer.Exit(code=EXIT_FATAL)

    logger.debug("Watching %s every %.1fs", path, interval)
    raise typer.Exit(
        code=run_watch(path, lambda: run_audit(settings), console, interval=interval)
    )
