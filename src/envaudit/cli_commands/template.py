"""Template commands - generate .env.example and dump parsed config."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from envaudit.api import init as build_template
from envaudit.cli_commands.audit import ConfigOption, FileOption, load_settings
from envaudit.core.parser import EnvParser, format_env, read_os_env
from envaudit.exceptions import EnvFileError
from envaudit.output.rich import print_error, print_success, print_warning


def _env_file(file: Path | None, config_file: Path | None) -> Path | None:
    if file is not None:
        return file
    configured = load_settings(config_file).file
    return Path(configured) if configured else None


def init(
    file: FileOption = None,
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Example file to write")
    ] = Path(".env.example"),
    force: Annotated[
        bool, typer.Option("--force", help="Overwrite an existing example file")
    ] = False,
    config_file: ConfigOption = None,
) -> None:
    """Generate an .env.example file.

    Sensitive keys are written with empty values, other keys with a
    placeholder such as ``your_port_here``.
    """
    if output.exists() and not force:
        print_error(f"{output} already exists (use --force to overwrite)")
        raise typer.Exit(code=2)

    try:
        content = build_template(_env_file(file, config_file))
    except EnvFileError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from None

    try:
        output.write_text(f"{content}\n" if content else "", encoding="utf-8")
    except OSError as e:
        print_error(f"Cannot write {output}: {e}")
        raise typer.Exit(code=2) from None

    if not content:
        print_warning(f"No variables found, {output} is empty")
    print_success(f"Generated {output}")


def dump(
    file: FileOption = None,
    no_redact: Annotated[
        bool, typer.Option("--no-redact", help="Show values of sensitive keys")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Suppress output")
    ] = False,
    config_file: ConfigOption = None,
) -> None:
    """Print the parsed configuration as KEY=VALUE lines (sensitive values redacted)."""
    env_file = _env_file(file, config_file)
    try:
        env = EnvParser().parse(env_file).entries if env_file else read_os_env()
    except EnvFileError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from None

    if quiet:
        return

    output = format_env(env, redact=not no_redact)
    if output:
        typer.echo(output)
