"""Keyword tables, sigils and regular expressions for screenplay markup.

The classifier and the markdown converter share these tables so that the
set of recognized scene headings, transitions and title page keys can be
checked and extended in one place.
"""

from __future__ import annotations

import re

# Scene heading prefixes, longest first so alternation prefers INT./EXT.
SCENE_HEADING_KEYWORDS: tuple[str, ...] = (
    "INT./EXT.",
    "INT.",
    "EXT.",
    "EST.",
    "I/E",
    "INTERCUT",
    "MONTAGE",
    "FLASHBACK",
)

# Prefixes that get a blank line inserted before them during spacing cleanup
SPACED_HEADING_KEYWORDS: tuple[str, ...] = ("INT.", "EXT.", "EST.")

TRANSITION_SUFFIX = "TO:"
TRANSITION_PHRASES: frozenset[str] = frozenset(
    {
        "FADE OUT.",
        "FADE TO BLACK.",
        "FADE TO:",
        "CUT TO:",
        "DISSOLVE TO:",
    }
)

TITLE_PAGE_KEYS: frozenset[str] = frozenset(
    {
        "title",
        "credit",
        "author",
        "authors",
        "source",
        "draft date",
        "contact",
        "copyright",
        "notes",
    }
)
TITLE_PAGE_SCAN_LIMIT = 20

# (attribute on TitlePageInfo, label written to the title page)
TITLE_PAGE_RENDER_ORDER: tuple[tuple[str, str], ...] = (
    ("title", "Title"),
    ("credit", "Credit"),
    ("author", "Author"),
    ("source", "Source"),
    ("draft_date", "Draft date"),
    ("contact", "Contact"),
)

SCENE_HEADING_SIGIL = "."
CHARACTER_SIGIL = "@"
TRANSITION_SIGIL = ">"
CENTERED_CLOSE = "<"
ACTION_SIGIL = "!"

PAGE_BREAK_MARKER = "==="

# Minimum share of uppercase letters for an unforced character cue
CHARACTER_UPPERCASE_RATIO = 0.8


def _keyword_alternation(keywords: tuple[str, ...]) -> str:
    return "|".join(re.escape(keyword) for keyword in keywords)


SCENE_HEADING_RE = re.compile(
    rf"^(?:{_keyword_alternation(SCENE_HEADING_KEYWORDS)})", re.IGNORECASE
)
PAGE_BREAK_RE = re.compile(r"^={3,}$")
PARENTHETICAL_RE = re.compile(r"^\(.*\)$")
SECTION_RE = re.compile(r"^(#{1,6})\s*(.+)$")
NOTE_RE = re.compile(r"^\[\[(.+)\]\]$")

# Markdown conversion
FRONTMATTER_RE = re.compile(r"\A\s*-{3,}[ \t]*\n.*?^-{3,}[ \t]*$\n?", re.DOTALL | re.M)
MARKDOWN_SCENE_HEADING_RE = re.compile(
    rf"^##[ \t]*((?:{_keyword_alternation(SCENE_HEADING_KEYWORDS)}).*)$",
    re.IGNORECASE,
)
MARKDOWN_CHARACTER_RE = re.compile(r"^##\s*([A-Z][A-Z0-9\s'.\-]*(?:\s*\([^)]+\))?)$")
HEADING_MARKER_RE = re.compile(r"^#+[ \t]+", re.MULTILINE)
HORIZONTAL_RULE_RE = re.compile(r"^(?:-{3,}|\*{3,})[ \t]*$", re.MULTILINE)
BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")
ITALIC_RE = re.compile(r"\*([^*\n]+)\*")
INLINE_CODE_RE = re.compile(r"`([^`]+)`")
BLOCKQUOTE_RE = re.compile(r"^>[ \t]*", re.MULTILINE)
EXCESS_NEWLINES_RE = re.compile(r"\n{4,}")
UNSPACED_HEADING_RE = re.compile(
    rf"([^\n])\n((?:{_keyword_alternation(SPACED_HEADING_KEYWORDS)}))",
    re.IGNORECASE,
)


def is_scene_heading_keyword(text: str) -> bool:
    """Return True if ``text`` starts with a scene heading keyword."""
    return bool(SCENE_HEADING_RE.match(text))


def is_transition_phrase(text: str) -> bool:
    """Return True if ``text`` reads as a transition, ignoring case."""
    upper = text.upper()
    return upper.endswith(TRANSITION_SUFFIX) or upper in TRANSITION_PHRASES


def uppercase_ratio(text: str) -> float:
    """Share of letters in ``text`` that are uppercase (0.0 without letters)."""
    letters = [char for char in text if char.isalpha()]
    if not letters:
        return 0.0
    return sum(1 for char in letters if char.isupper()) / len(letters)
