"""scriptmark configuration settings."""

from __future__ import annotations

import json
import os
import tomllib
from datetime import date
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scriptmark.exceptions import ConfigurationError, check_config_keys

SUPPORTED_CONFIG_SUFFIXES = (".yml", ".yaml", ".toml", ".json")


class ScriptMarkSettings(BaseSettings):
    """scriptmark configuration settings.

    Settings are loaded with the following precedence (highest to lowest):
    1. CLI arguments (when provided via command flags)
       Example: scriptmark tokens scenes/ --include-notes

    2. Config file values (YAML, TOML, or JSON)
       Example: scriptmark tokens scenes/ --config scriptmark.yaml
       Multiple files: Later files override earlier ones

    3. Environment variables (prefixed with SCRIPTMARK_)
       Example: export SCRIPTMARK_INCLUDE_SYNOPSIS=true

    4. .env file (in current directory or specified path)
       Example: SCRIPTMARK_LOG_LEVEL=DEBUG in .env file

    5. Default values (defined in field declarations below)
    """

    model_config = SettingsConfigDict(
        env_prefix="SCRIPTMARK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Classification settings
    include_synopsis: bool = Field(
        default=False,
        description="Emit synopsis tokens for '= text' lines instead of dropping them",
    )
    include_notes: bool = Field(
        default=False,
        description="Emit note tokens for '[[text]]' lines instead of dropping them",
    )

    # Title page settings
    title: str = Field(
        default="Untitled Screenplay",
        description="Screenplay title used for the generated title page",
    )
    credit: str = Field(
        default="Written by",
        description="Credit line placed between title and author",
    )
    author: str = Field(default="", description="Author name")
    source: str = Field(default="", description="Source material line")
    draft_date: str | None = Field(
        default=None,
        description="Draft date (defaults to today's date when unset)",
    )
    contact: str = Field(default="", description="Contact information")
    copyright: str = Field(default="", description="Copyright notice")

    # Input settings
    file_pattern: str = Field(
        default="*.md",
        description="Glob pattern used when reading a directory of documents",
    )

    # Debug settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Logging settings
    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        pattern="^(?i)(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    log_format: str = Field(
        default="console",
        description="Log output format (console, json, structured)",
        pattern="^(?i)(console|json|structured)$",
    )
    log_file: Path | None = Field(
        default=None,
        description="Optional log file path",
    )

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Path | None:
        """Expand environment variables and ~ in the log file path."""
        if v is None:
            return None
        if isinstance(v, Path):
            return v.resolve()
        if isinstance(v, str):
            return Path(os.path.expandvars(v)).expanduser().resolve()
        raise ValueError(
            f"Path fields must be string or Path, got {type(v).__name__}: {v!r}"
        )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        """Normalize log level to uppercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.upper()
        raise ValueError(f"log_level must be a string, got {type(v).__name__}")

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: Any) -> str:
        """Normalize log format to lowercase for case-insensitive handling."""
        if isinstance(v, str):
            return v.lower()
        raise ValueError(f"log_format must be a string, got {type(v).__name__}")

    @field_validator("draft_date", mode="before")
    @classmethod
    def normalize_draft_date(cls, v: Any) -> str | None:
        """Accept dates from YAML/TOML and treat blank strings as unset."""
        if v is None:
            return None
        if isinstance(v, date):
            return v.isoformat()
        if isinstance(v, str):
            return v.strip() or None
        raise ValueError(f"draft_date must be a string, got {type(v).__name__}")

    def effective_draft_date(self) -> str:
        """Return the configured draft date, or today's date."""
        return self.draft_date or date.today().isoformat()

    @classmethod
    def from_env(cls) -> ScriptMarkSettings:
        """Create settings from environment variables."""
        return cls()

    @classmethod
    def from_file(cls, config_path: Path | str) -> ScriptMarkSettings:
        """Load settings from a configuration file.

        Args:
            config_path: Path to configuration file (YAML, TOML, or JSON).

        Returns:
            Settings loaded from the file.

        Raises:
            ConfigurationError: If file format is not supported.
            FileNotFoundError: If config file doesn't exist.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        suffix = config_path.suffix.lower()

        if suffix in {".yml", ".yaml"}:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        elif suffix == ".toml":
            with config_path.open("rb") as f:
                data = tomllib.load(f)
        elif suffix == ".json":
            with config_path.open(encoding="utf-8") as f:
                data = json.load(f)
        else:
            raise ConfigurationError(
                message=f"Unsupported configuration file format: {suffix}",
                hint="Use one of the supported formats: .yml, .yaml, .toml, or .json",
                details={
                    "file": str(config_path),
                    "detected_format": suffix,
                    "supported_formats": list(SUPPORTED_CONFIG_SUFFIXES),
                },
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                message=f"Configuration file must contain a mapping: {config_path}",
                hint="Write settings as top-level key/value pairs",
                details={"file": str(config_path), "type": type(data).__name__},
            )

        check_config_keys(data)

        return cls(**data)

    @classmethod
    def from_multiple_sources(
        cls,
        config_files: list[Path | str] | None = None,
        env_file: Path | str | None = None,
        cli_args: dict[str, Any] | None = None,
    ) -> ScriptMarkSettings:
        """Load settings with proper precedence from multiple sources.

        Precedence (highest to lowest):
        1. CLI arguments
        2. Config files (last file wins)
        3. Environment variables
        4. .env file
        5. Default values

        Args:
            config_files: List of config files to load (later files override earlier).
            env_file: Path to .env file (default: .env in current directory).
            cli_args: Dictionary of CLI arguments.

        Returns:
            Merged settings from all sources.
        """
        data: dict[str, Any] = {}

        for config_file in config_files or []:
            try:
                file_settings = cls.from_file(config_file)
            except FileNotFoundError:
                from scriptmark.config.logging import get_logger as _get_logger

                _get_logger("scriptmark.config.settings").warning(
                    "Configuration file not found, using defaults",
                    config_file=str(config_file),
                )
                continue
            data.update(file_settings.model_dump(exclude_unset=True))

        if env_file:
            settings = cls(_env_file=env_file, **data)  # type: ignore[call-arg]
        else:
            settings = cls(**data)

        if cli_args:
            cli_data = {k: v for k, v in cli_args.items() if v is not None}
            if cli_data:
                updated_data = settings.model_dump()
                updated_data.update(cli_data)
                settings = cls(**updated_data)

        return settings


# Global settings instance
_settings: ScriptMarkSettings | None = None
# Cache for config file paths that exist
_config_paths_cache: list[Path | str] | None = None


def _get_config_paths() -> list[Path | str]:
    """Get list of config file paths to check.

    Returns paths in priority order (later files override earlier).
    """
    global _config_paths_cache

    if _config_paths_cache is not None:
        return _config_paths_cache

    suffixes = (".yaml", ".json", ".toml")
    potential_paths: list[Path] = []
    # User config (XDG), then project config
    for base in (
        Path.home() / ".config" / "scriptmark",
        Path.cwd() / ".scriptmark",
    ):
        potential_paths.extend(base / f"config{ext}" for ext in suffixes)
    potential_paths.extend(Path.cwd() / f"scriptmark{ext}" for ext in suffixes)

    existing_paths: list[Path | str] = []
    for path in potential_paths:
        try:
            if path.is_file():
                existing_paths.append(path)
        except OSError:
            continue

    _config_paths_cache = existing_paths
    return existing_paths


def get_settings() -> ScriptMarkSettings:
    """Get the global settings instance.

    Returns:
        Global ScriptMarkSettings instance.
    """
    global _settings
    if _settings is None:
        config_paths = _get_config_paths()
        if config_paths:
            _settings = ScriptMarkSettings.from_multiple_sources(
                config_files=config_paths
            )
        else:
            _settings = ScriptMarkSettings.from_env()
    return _settings


def set_settings(settings: ScriptMarkSettings) -> None:
    """Set the global settings instance.

    Args:
        settings: Settings instance to use globally.
    """
    global _settings
    _settings = settings


def clear_settings_cache() -> None:
    """Clear the global settings cache.

    This forces get_settings() to re-read from environment variables
    and configuration files on the next call.
    """
    global _settings, _config_paths_cache
    _settings = None
    _config_paths_cache = None


def reset_settings() -> None:
    """Reset the global settings instance."""
    clear_settings_cache()


def get_settings_for_cli(
    config_file: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> ScriptMarkSettings:
    """Get settings for CLI commands with consistent precedence.

    Args:
        config_file: Optional specific config file to load. If not provided,
                    uses standard config locations.
        cli_overrides: Dictionary of CLI argument overrides.
                      Only non-None values are applied.

    Returns:
        ScriptMarkSettings instance with all sources merged.

    Raises:
        FileNotFoundError: If config_file is specified but doesn't exist.
    """
    if config_file:
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_file}")
        return ScriptMarkSettings.from_multiple_sources(
            config_files=[config_file],
            cli_args=cli_overrides,
        )

    settings = get_settings()
    filtered_overrides = {
        k: v for k, v in (cli_overrides or {}).items() if v is not None
    }
    if filtered_overrides:
        data = settings.model_dump()
        data.update(filtered_overrides)
        settings = ScriptMarkSettings(**data)
    return settings
