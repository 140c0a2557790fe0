"""CLI command for scriptmark fountain."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from scriptmark.cli.commands.options import (
    AuthorOption,
    ConfigOption,
    ContactOption,
    DraftDateOption,
    InputPath,
    NoTitlePageOption,
    PatternOption,
    TitleOption,
    title_page_overrides,
)
from scriptmark.cli.utils.cli_handler import CLIHandler
from scriptmark.cli.utils.document_loader import load_documents
from scriptmark.config import get_logger
from scriptmark.exceptions import ScriptMarkError
from scriptmark.main import ScriptMark

logger = get_logger(__name__)
console = Console()


def fountain_command(
    path: InputPath,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output", "-o", help="Write Fountain to this file instead of stdout"
        ),
    ] = None,
    pattern: PatternOption = None,
    title: TitleOption = None,
    author: AuthorOption = None,
    draft_date: DraftDateOption = None,
    contact: ContactOption = None,
    no_title_page: NoTitlePageOption = False,
    config: ConfigOption = None,
) -> None:
    """Convert markdown screenplay files into a single Fountain document.

    Directories are read in natural file name order (01_, 02_, ..., 10_).
    A title page built from the settings is placed in front of a directory
    unless --no-title-page is given. A single file is converted as is.
    """
    handler = CLIHandler(console)

    try:
        settings = handler.load_settings(
            config, title_page_overrides(title, author, draft_date, contact, pattern)
        )
        scriptmark = ScriptMark(settings)
        documents = load_documents(path, settings.file_pattern)
        title_page = (
            None
            if no_title_page or path.is_file()
            else scriptmark.default_title_page()
        )
        fountain = scriptmark.combine(documents, title_page)
    except ScriptMarkError as e:
        handler.handle_error(e)
        return

    if output is None:
        typer.echo(fountain)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(fountain + "\n", encoding="utf-8")
    logger.info("Wrote Fountain output", path=str(output), documents=len(documents))
    console.print(
        f"[green]Converted {len(documents)} file(s) to {output}[/green]",
        highlight=False,
    )
