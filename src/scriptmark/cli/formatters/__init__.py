"""Output formatters for the scriptmark CLI."""

from scriptmark.cli.formatters.token_formatter import OutputFormat, TokenFormatter

__all__ = ["OutputFormat", "TokenFormatter"]
