"""Title page detection, parsing and generation.

Detection is a bounded lookahead heuristic rather than a grammar: only the
first ``TITLE_PAGE_SCAN_LIMIT`` lines are inspected and only the fixed key set
in ``TITLE_PAGE_KEYS`` is recognized. Keys spelled or spaced differently are
read as body text, which callers have to accept.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from scriptmark.parser.patterns import (
    TITLE_PAGE_KEYS,
    TITLE_PAGE_RENDER_ORDER,
    TITLE_PAGE_SCAN_LIMIT,
)
from scriptmark.parser.tokens import TitlePageInfo

_WHITESPACE_RE = re.compile(r"\s+")


def find_title_page_end(lines: Sequence[str]) -> int:
    """Find the index of the first body line after a leading title page.

    Args:
        lines: Document lines

    Returns:
        Index just past the blank line closing the title page, or 0 when the
        document does not open with a title page
    """
    for index, raw_line in enumerate(lines[:TITLE_PAGE_SCAN_LIMIT]):
        line = raw_line.strip().lower()

        if not line:
            return index + 1 if index > 0 else 0

        key, colon, _ = line.partition(":")
        if not colon or key.strip() not in TITLE_PAGE_KEYS:
            return 0

    # No closing blank line inside the window
    return 0


def normalize_key(key: str) -> str:
    """Normalize a title page key: lower-case, whitespace runs to underscores."""
    return _WHITESPACE_RE.sub("_", key.strip().lower())


def parse_title_page(lines: Sequence[str]) -> dict[str, str]:
    """Parse title page lines into a mapping of normalized keys to values.

    Non-blank lines without a colon continue the value of the preceding key
    and are joined to it with a newline.
    """
    result: dict[str, str] = {}
    current_key: str | None = None

    for line in lines:
        colon_index = line.find(":")
        if colon_index > 0:
            current_key = normalize_key(line[:colon_index])
            result[current_key] = line[colon_index + 1 :].strip()
        elif current_key and line.strip():
            result[current_key] += "\n" + line.strip()

    return result


def render_title_page(info: TitlePageInfo) -> str:
    """Render title page metadata as Fountain ``Key: value`` lines.

    Only non-empty fields are written, in a fixed order. Returns an empty
    string when no field has a value.
    """
    parts = []
    for attribute, label in TITLE_PAGE_RENDER_ORDER:
        value = getattr(info, attribute)
        if value:
            parts.append(f"{label}: {value}")
    return "\n".join(parts)
