"""Read markdown screenplay documents from disk for the CLI."""

from __future__ import annotations

import re
from pathlib import Path

from scriptmark.config import get_logger
from scriptmark.exceptions import (
    NoDocumentsFoundError,
    ScriptMarkFileNotFoundError,
    ValidationError,
)
from scriptmark.parser import SourceDocument

logger = get_logger(__name__)

_DIGITS_RE = re.compile(r"(\d+)")


def natural_sort_key(name: str) -> list[tuple[int, int | str]]:
    """Sort key ordering embedded numbers numerically (``2_b`` before ``10_a``)."""
    key: list[tuple[int, int | str]] = []
    for part in _DIGITS_RE.split(name):
        if not part:
            continue
        if part.isdigit():
            key.append((0, int(part)))
        else:
            key.append((1, part.casefold()))
    return key


def find_documents(directory: Path, pattern: str) -> list[Path]:
    """List files in ``directory`` matching ``pattern`` in natural name order."""
    files = [path for path in directory.glob(pattern) if path.is_file()]
    return sorted(files, key=lambda path: natural_sort_key(path.name))


def load_documents(path: Path, pattern: str = "*.md") -> list[SourceDocument]:
    """Load one file, or every matching file in a directory.

    Args:
        path: Markdown file or directory of markdown files
        pattern: Glob pattern applied when ``path`` is a directory

    Returns:
        Documents in natural file name order

    Raises:
        ScriptMarkFileNotFoundError: If ``path`` does not exist
        NoDocumentsFoundError: If a directory holds no matching files
        ValidationError: If ``pattern`` is blank
    """
    if not pattern.strip():
        raise ValidationError(
            message="File pattern must not be empty",
            hint="Use a glob such as *.md",
            details={"pattern": pattern},
        )

    if not path.exists():
        raise ScriptMarkFileNotFoundError(
            message=f"Input path does not exist: {path}",
            hint="Pass a markdown file or a directory of markdown files",
            details={"path": str(path), "current_dir": str(Path.cwd())},
        )

    files = [path] if path.is_file() else find_documents(path, pattern)
    if not files:
        raise NoDocumentsFoundError(
            f"No markdown files found in {path} matching {pattern}",
            source=str(path),
            pattern=pattern,
        )

    logger.debug("Loading documents", count=len(files), source=str(path))
    return [
        SourceDocument(name=file.name, content=file.read_text(encoding="utf-8"))
        for file in files
    ]
