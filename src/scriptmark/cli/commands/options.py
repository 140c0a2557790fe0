"""Options shared by the conversion commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer

InputPath = Annotated[
    Path,
    typer.Argument(help="Markdown file, or directory of markdown files"),
]
PatternOption = Annotated[
    str | None,
    typer.Option("--pattern", "-p", help="File pattern to match (default: *.md)"),
]
TitleOption = Annotated[
    str | None, typer.Option("--title", "-t", help="Screenplay title")
]
AuthorOption = Annotated[
    str | None, typer.Option("--author", "-a", help="Author name")
]
DraftDateOption = Annotated[
    str | None, typer.Option("--draft-date", "-d", help="Draft date")
]
ContactOption = Annotated[
    str | None, typer.Option("--contact", "-c", help="Contact information")
]
NoTitlePageOption = Annotated[
    bool,
    typer.Option("--no-title-page", help="Do not generate a title page"),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="Path to configuration file (YAML, TOML, or JSON)",
    ),
]


def title_page_overrides(
    title: str | None,
    author: str | None,
    draft_date: str | None,
    contact: str | None,
    pattern: str | None = None,
) -> dict[str, Any]:
    """Collect CLI values that override settings (None means not given)."""
    return {
        "title": title,
        "author": author,
        "draft_date": draft_date,
        "contact": contact,
        "file_pattern": pattern,
    }
