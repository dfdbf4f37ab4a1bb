"""Diff command - compare two env files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from envaudit.api import diff as diff_files
from envaudit.core.diff import format_diff
from envaudit.exceptions import EnvFileError
from envaudit.output.rich import print_error


def diff(
    env1: Annotated[Path, typer.Argument(help="First .env file (e.g., .env.dev)")],
    env2: Annotated[Path, typer.Argument(help="Second .env file (e.g., .env.prod)")],
    no_redact: Annotated[
        bool,
        typer.Option("--no-redact", help="Show values of sensitive keys"),
    ] = False,
    json_output: Annotated[
        bool, typer.Option("--json", "-j", help="Output differences as JSON")
    ] = False,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Suppress output")
    ] = False,
) -> None:
    """Compare two .env files and show added, removed and changed variables.

    \b
    Output format:
      - KEY=value          only in the first file
      + KEY=value          only in the second file
      ~ KEY=old -> new     value changed
    """
    try:
        result = diff_files(env1, env2)
    except EnvFileError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from None

    if quiet:
        return

    redact = not no_redact
    if json_output:
        typer.echo(json.dumps(result.to_dict(redact=redact), indent=2))
    elif result.has_drift:
        typer.echo(format_diff(result, redact=redact))
