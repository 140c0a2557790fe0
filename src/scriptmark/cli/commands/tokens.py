"""CLI command for scriptmark tokens."""

from __future__ import annotations

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
from scriptmark.cli.formatters import OutputFormat, TokenFormatter
from scriptmark.cli.utils.cli_handler import CLIHandler
from scriptmark.cli.utils.document_loader import load_documents
from scriptmark.config import get_logger
from scriptmark.exceptions import ScriptMarkError
from scriptmark.main import ScriptMark

logger = get_logger(__name__)
console = Console()


def tokens_command(
    path: InputPath,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output tokens as JSON")
    ] = False,
    include_notes: Annotated[
        bool | None,
        typer.Option("--include-notes/--no-notes", help="Emit note lines"),
    ] = None,
    include_synopsis: Annotated[
        bool | None,
        typer.Option(
            "--include-synopsis/--no-synopsis", help="Emit synopsis lines"
        ),
    ] = None,
    show_blank: Annotated[
        bool, typer.Option("--show-blank", help="Include blank tokens in the table")
    ] = False,
    pattern: PatternOption = None,
    title: TitleOption = None,
    author: AuthorOption = None,
    draft_date: DraftDateOption = None,
    contact: ContactOption = None,
    no_title_page: NoTitlePageOption = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="List the files processed")
    ] = False,
    config: ConfigOption = None,
) -> None:
    """Classify markdown screenplay files and show the resulting tokens."""
    handler = CLIHandler(console)

    overrides = title_page_overrides(title, author, draft_date, contact, pattern)
    overrides["include_notes"] = include_notes
    overrides["include_synopsis"] = include_synopsis

    try:
        settings = handler.load_settings(config, overrides)
        scriptmark = ScriptMark(settings)
        documents = load_documents(path, settings.file_pattern)
        title_page = (
            None
            if no_title_page or path.is_file()
            else scriptmark.default_title_page()
        )
        result = scriptmark.tokenize_documents(documents, title_page)
    except ScriptMarkError as e:
        handler.handle_error(e, json_output=json_output)
        return

    formatter = TokenFormatter(console)
    if json_output:
        formatter.print(result, OutputFormat.JSON)
        return

    formatter.print(result, OutputFormat.TABLE, show_blank=show_blank)
    if verbose:
        console.print(f"\nFiles processed ({result.documents_processed}):")
        for name in result.documents:
            console.print(f"  - {name}", highlight=False)
