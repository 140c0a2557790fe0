"""Markdown to Fountain conversion for markdown-authored screenplays.

Input looks like::

    ## INT. LOCATION - TIME
    Action description.

    ## CHARACTER
    (parenthetical)
    Dialogue here.

and comes out as canonical Fountain markup that the line classifier reads::

    INT. LOCATION - TIME

    Action description.

    @CHARACTER
    (parenthetical)
    Dialogue here.
"""

from __future__ import annotations

from scriptmark.config import get_logger
from scriptmark.parser.patterns import (
    BLOCKQUOTE_RE,
    BOLD_RE,
    CHARACTER_SIGIL,
    EXCESS_NEWLINES_RE,
    FRONTMATTER_RE,
    HEADING_MARKER_RE,
    HORIZONTAL_RULE_RE,
    INLINE_CODE_RE,
    ITALIC_RE,
    MARKDOWN_CHARACTER_RE,
    MARKDOWN_SCENE_HEADING_RE,
    UNSPACED_HEADING_RE,
    is_scene_heading_keyword,
)

logger = get_logger(__name__)


class MarkdownConverter:
    """Rewrite markdown screenplay source into canonical Fountain markup.

    Each step is a pure string rewrite. ``convert`` applies them in a fixed
    order; later steps rely on the earlier ones having run.
    """

    def convert(self, markdown: str) -> str:
        """Convert one markdown document to Fountain.

        Args:
            markdown: Raw markdown text of a single document

        Returns:
            Canonical Fountain markup
        """
        content = self.strip_frontmatter(markdown)
        content = self.promote_scene_headings(content)
        content = self.promote_character_cues(content)
        content = self.strip_markdown(content)
        content = self.normalize_spacing(content)
        logger.debug(
            "Converted markdown document",
            input_chars=len(markdown),
            output_lines=content.count("\n") + 1 if content else 0,
        )
        return content

    def strip_frontmatter(self, content: str) -> str:
        """Remove a leading ``---`` delimited metadata block."""
        return FRONTMATTER_RE.sub("", content, count=1)

    def promote_scene_headings(self, content: str) -> str:
        """Turn ``## INT. PLACE`` headings into bare, upper-cased scene headings.

        The heading ends up with a blank line on both sides; a blank line is
        only added where the neighbouring line is not already blank.
        """
        lines = content.split("\n")
        result: list[str] = []
        for index, line in enumerate(lines):
            match = MARKDOWN_SCENE_HEADING_RE.match(line)
            if not match:
                result.append(line)
                continue

            if result and result[-1].strip():
                result.append("")
            result.append(match.group(1).strip().upper())
            following = lines[index + 1] if index + 1 < len(lines) else ""
            if following.strip():
                result.append("")
        return "\n".join(result)

    def promote_character_cues(self, content: str) -> str:
        """Turn ``## NAME`` headings into forced character cues (``@NAME``)."""
        result: list[str] = []
        for line in content.split("\n"):
            match = MARKDOWN_CHARACTER_RE.match(line)
            if not match:
                result.append(line)
                continue

            name = match.group(1).strip()
            if is_scene_heading_keyword(name):
                result.append(line)
                continue

            if result and result[-1].strip():
                result.append("")
            result.append(f"{CHARACTER_SIGIL}{name}")
        return "\n".join(result)

    def strip_markdown(self, content: str) -> str:
        """Remove leftover markdown decoration, keeping the enclosed text."""
        cleaned = HEADING_MARKER_RE.sub("", content)
        cleaned = HORIZONTAL_RULE_RE.sub("", cleaned)
        cleaned = BOLD_RE.sub(r"\1", cleaned)
        cleaned = ITALIC_RE.sub(r"\1", cleaned)
        cleaned = INLINE_CODE_RE.sub(r"\1", cleaned)
        return BLOCKQUOTE_RE.sub("", cleaned)

    def normalize_spacing(self, content: str) -> str:
        """Limit blank runs, space out scene headings and trim whitespace."""
        normalized = EXCESS_NEWLINES_RE.sub("\n\n\n", content)
        normalized = UNSPACED_HEADING_RE.sub(r"\1\n\n\2", normalized)
        normalized = "\n".join(line.rstrip() for line in normalized.split("\n"))
        return normalized.strip()
