"""scriptmark CLI commands."""

from __future__ import annotations

from scriptmark.cli.commands.fountain import fountain_command
from scriptmark.cli.commands.tokens import tokens_command

__all__ = [
    "fountain_command",
    "tokens_command",
]
