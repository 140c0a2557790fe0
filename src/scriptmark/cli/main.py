"""Main CLI entry point for scriptmark."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from scriptmark import __version__
from scriptmark.cli.commands import fountain_command, tokens_command

console = Console()

app = typer.Typer(
    name="scriptmark",
    help="Convert markdown screenplays into Fountain markup and screenplay tokens",
    pretty_exceptions_enable=False,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="fountain")(fountain_command)
app.command(name="tokens")(tokens_command)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"scriptmark {__version__}", highlight=False)
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ] = False,
) -> None:
    """scriptmark command line interface."""


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
