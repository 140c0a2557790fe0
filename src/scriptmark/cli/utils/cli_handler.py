"""Shared error handling and settings resolution for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from scriptmark.config import ScriptMarkSettings, get_logger, get_settings_for_cli
from scriptmark.exceptions import ConfigurationError, ScriptMarkError

logger = get_logger(__name__)


class CLIHandler:
    """Unified handler for CLI commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize CLI handler.

        Args:
            console: Rich console for output
        """
        self.console = console or Console()

    def load_settings(
        self,
        config_file: Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> ScriptMarkSettings:
        """Resolve settings from config file, environment and CLI overrides.

        Raises:
            ConfigurationError: If the config file is missing or unreadable
        """
        try:
            return get_settings_for_cli(
                config_file=config_file, cli_overrides=overrides
            )
        except FileNotFoundError as e:
            raise ConfigurationError(
                message=str(e),
                hint="Check the path passed to --config",
                details={"config_file": str(config_file)},
            ) from e

    def handle_error(
        self, error: Exception, json_output: bool = False, exit_code: int = 1
    ) -> None:
        """Report an error and exit.

        Args:
            error: Exception to handle
            json_output: Whether to output JSON
            exit_code: Exit code to use
        """
        logger.error("Command failed", error=str(error))

        if json_output:
            payload: dict[str, Any] = {
                "success": False,
                "error": getattr(error, "message", str(error)),
                "code": exit_code,
            }
            if isinstance(error, ScriptMarkError) and error.hint:
                payload["hint"] = error.hint
            self.console.print_json(json.dumps(payload))
        else:
            self.console.print(f"[red]{escape(str(error))}[/red]")

        raise typer.Exit(exit_code)
