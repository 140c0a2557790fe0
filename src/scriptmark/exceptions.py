"""Custom exception hierarchy for scriptmark with helpful error messages."""

from __future__ import annotations

from typing import Any


class ScriptMarkError(Exception):
    """Base exception with helpful formatting for all scriptmark errors.

    Provides structured error messages with hints and details to help users
    understand and fix problems.
    """

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize exception with structured error information.

        Args:
            message: Primary error message describing what went wrong
            hint: Optional hint suggesting how to fix the problem
            details: Optional dictionary with additional debugging information
        """
        self.message = message
        self.hint = hint
        self.details = details
        super().__init__(self.format_error())

    def format_error(self) -> str:
        """Format the error message with hint and details.

        Returns:
            Formatted error string with all available information
        """
        output = f"Error: {self.message}"
        if self.hint:
            output += f"\nHint: {self.hint}"
        if self.details:
            details_str = "\n".join(
                f"  {key}: {value}" for key, value in self.details.items()
            )
            output += f"\nDetails:\n{details_str}"
        return output


class ConfigurationError(ScriptMarkError):
    """Configuration errors including invalid settings and bad config files."""

    pass


class NoDocumentsFoundError(ScriptMarkError):
    """Raised when a screenplay is assembled from zero source documents."""

    def __init__(
        self,
        message: str = "No documents found",
        source: str | None = None,
        pattern: str | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            message: Error message
            source: File or directory that was searched, if any
            pattern: Glob pattern used for the search, if any
        """
        self.source = source
        self.pattern = pattern
        details: dict[str, Any] = {}
        if source:
            details["source"] = source
        if pattern:
            details["pattern"] = pattern
        super().__init__(
            message=message,
            hint="Provide at least one markdown document to convert",
            details=details or None,
        )


class ScriptMarkFileNotFoundError(ScriptMarkError):
    """File not found errors with helpful path information."""

    pass


class ValidationError(ScriptMarkError):
    """Input validation errors with details about what was expected."""

    pass


def check_config_keys(config: dict[str, Any]) -> None:
    """Check for common configuration mistakes.

    Args:
        config: Configuration dictionary to validate

    Raises:
        ConfigurationError: With hints about correct configuration keys
    """
    wrong_keys = {
        "includeNotes": "include_notes",
        "includeSynopsis": "include_synopsis",
        "preserveNotes": "include_notes",
        "draftDate": "draft_date",
        "notes": "include_notes",
        "synopsis": "include_synopsis",
        "pattern": "file_pattern",
    }

    for wrong, correct in wrong_keys.items():
        if wrong in config:
            raise ConfigurationError(
                message=f"Invalid configuration key '{wrong}'",
                hint=f"Use '{correct}' instead of '{wrong}'",
                details={
                    "found_keys": list(config.keys()),
                    "invalid_key": wrong,
                    "correct_key": correct,
                },
            )
