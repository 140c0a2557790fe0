"""Data models for classified screenplay tokens."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class TokenType(str, Enum):
    """Kinds of screenplay element produced by the classifier."""

    TITLE_PAGE = "title_page"
    SCENE_HEADING = "scene_heading"
    ACTION = "action"
    CHARACTER = "character"
    PARENTHETICAL = "parenthetical"
    DIALOGUE = "dialogue"
    TRANSITION = "transition"
    CENTERED = "centered"
    PAGE_BREAK = "page_break"
    SECTION = "section"
    SYNOPSIS = "synopsis"
    NOTE = "note"
    BLANK = "blank"


@dataclass
class Token:
    """A single classified screenplay element.

    ``text`` holds the payload of every content-bearing kind, ``level`` is only
    set on sections and ``metadata`` only on the title page.
    """

    type: TokenType
    text: str | None = None
    level: int | None = None
    metadata: dict[str, str] | None = None

    @classmethod
    def blank(cls) -> Token:
        """Create a blank spacing token."""
        return cls(TokenType.BLANK)

    @classmethod
    def page_break(cls) -> Token:
        """Create an explicit page break token."""
        return cls(TokenType.PAGE_BREAK)

    @classmethod
    def title_page(cls, metadata: dict[str, str]) -> Token:
        """Create a title page token from normalized key/value pairs."""
        return cls(TokenType.TITLE_PAGE, metadata=dict(metadata))

    @classmethod
    def section(cls, text: str, level: int) -> Token:
        """Create a section token with its heading depth."""
        return cls(TokenType.SECTION, text=text, level=level)

    def copy(self) -> Token:
        """Return an independent copy of this token."""
        metadata = dict(self.metadata) if self.metadata is not None else None
        return replace(self, metadata=metadata)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the token for renderers and JSON output."""
        data: dict[str, Any] = {"type": self.type.value}
        if self.text is not None:
            data["text"] = self.text
        if self.level is not None:
            data["level"] = self.level
        if self.metadata is not None:
            data["metadata"] = dict(self.metadata)
        return data


@dataclass(frozen=True)
class ClassifierState:
    """Running state threaded through the line-by-line classification pass."""

    in_dialogue: bool = False
    last_character: str | None = None

    def leave_dialogue(self) -> ClassifierState:
        """Return the state after a line that ends a dialogue block."""
        if not self.in_dialogue:
            return self
        return replace(self, in_dialogue=False)

    def enter_dialogue(self, character: str) -> ClassifierState:
        """Return the state after a character cue."""
        return ClassifierState(in_dialogue=True, last_character=character)


class TitlePageInfo(BaseModel):
    """Title page metadata supplied by the caller for combined screenplays."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    credit: str | None = None
    author: str | None = None
    source: str | None = None
    draft_date: str | None = None
    contact: str | None = None
    copyright: str | None = None


@dataclass
class SourceDocument:
    """One markdown document handed to the combiner."""

    name: str
    content: str


@dataclass
class ScreenplayResult:
    """Outcome of converting a set of documents into a token stream."""

    tokens: list[Token]
    fountain: str
    documents: list[str] = field(default_factory=list)

    @property
    def documents_processed(self) -> int:
        """Number of source documents that went into the screenplay."""
        return len(self.documents)

    def count_by_type(self) -> dict[str, int]:
        """Count tokens per kind, in first-seen order."""
        counts: dict[str, int] = {}
        for token in self.tokens:
            counts[token.type.value] = counts.get(token.type.value, 0) + 1
        return counts
