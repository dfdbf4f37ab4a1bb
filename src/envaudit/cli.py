"""Command-line interface for env-audit."""

from __future__ import annotations

from typing import Annotated

import typer

from envaudit.cli_commands.audit import scan, watch
from envaudit.cli_commands.diff import diff
from envaudit.cli_commands.template import dump, init
from envaudit.output.rich import console
from envaudit.utils.logging import setup_logging

app = typer.Typer(
    name="env-audit",
    help="Audit .env files for empty, missing, duplicated and leaked configuration.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging on stderr")
    ] = False,
) -> None:
    """Audit .env files for empty, missing, duplicated and leaked configuration."""
    setup_logging(verbose)


app.command()(scan)
app.command()(watch)
app.command()(diff)
app.command()(init)
app.command()(dump)


@app.command()
def version() -> None:
    """Show env-audit version."""
    from envaudit import __version__

    console.print(f"env-audit [bold green]{__version__}[/bold green]")


if __name__ == "__main__":
    app()
