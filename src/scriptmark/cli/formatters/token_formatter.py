"""Output formatting for token streams."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from scriptmark.parser import ScreenplayResult, Token, TokenType


class OutputFormat(str, Enum):
    """Supported output formats."""

    JSON = "json"
    TABLE = "table"


# Table styles per token kind
TOKEN_STYLES: dict[TokenType, str] = {
    TokenType.TITLE_PAGE: "bold magenta",
    TokenType.SCENE_HEADING: "bold cyan",
    TokenType.CHARACTER: "bold yellow",
    TokenType.PARENTHETICAL: "yellow",
    TokenType.DIALOGUE: "white",
    TokenType.TRANSITION: "bold blue",
    TokenType.CENTERED: "blue",
    TokenType.PAGE_BREAK: "dim",
    TokenType.BLANK: "dim",
    TokenType.SECTION: "green",
    TokenType.SYNOPSIS: "green",
    TokenType.NOTE: "italic green",
}


class TokenFormatter:
    """Render a screenplay result as a rich table or JSON."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize formatter.

        Args:
            console: Rich console for output. If None, creates new instance.
        """
        self.console = console or Console()

    def format_json(self, result: ScreenplayResult) -> str:
        """Serialize tokens and document list as JSON."""
        payload: dict[str, Any] = {
            "documents": result.documents,
            "counts": result.count_by_type(),
            "tokens": [token.to_dict() for token in result.tokens],
        }
        return json.dumps(payload, ensure_ascii=False, indent=2)

    def build_table(self, tokens: list[Token], show_blank: bool = False) -> Table:
        """Build a table with one row per token."""
        table = Table(title="Screenplay Tokens", show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Type", no_wrap=True)
        table.add_column("Content")

        for index, token in enumerate(tokens, start=1):
            if token.type == TokenType.BLANK and not show_blank:
                continue
            table.add_row(
                str(index),
                Text(token.type.value, style=TOKEN_STYLES.get(token.type, "")),
                Text(self._describe(token)),
            )
        return table

    def print(
        self,
        result: ScreenplayResult,
        format_type: OutputFormat = OutputFormat.TABLE,
        show_blank: bool = False,
    ) -> None:
        """Format and print a result to the console."""
        if format_type == OutputFormat.JSON:
            self.console.print(
                self.format_json(result), markup=False, highlight=False, soft_wrap=True
            )
            return

        self.console.print(self.build_table(result.tokens, show_blank=show_blank))
        summary = ", ".join(
            f"{name}: {count}" for name, count in result.count_by_type().items()
        )
        self.console.print(f"[dim]{len(result.tokens)} tokens ({summary})[/dim]")

    @staticmethod
    def _describe(token: Token) -> str:
        if token.metadata is not None:
            return "\n".join(f"{key}: {value}" for key, value in token.metadata.items())
        if token.level is not None:
            return f"{'#' * token.level} {token.text}"
        return token.text or ""
