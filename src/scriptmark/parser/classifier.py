"""Line classifier turning Fountain markup into screenplay tokens.

Every line is tested against ``RULES`` in order and the first rule that
matches decides the token. Rules are pure functions of the line context and
the running ``ClassifierState``; they return the token to emit (``None`` to
drop the line) together with the state for the next line.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from scriptmark.config import get_logger
from scriptmark.parser.patterns import (
    ACTION_SIGIL,
    CENTERED_CLOSE,
    CHARACTER_SIGIL,
    CHARACTER_UPPERCASE_RATIO,
    NOTE_RE,
    PAGE_BREAK_RE,
    PARENTHETICAL_RE,
    SCENE_HEADING_SIGIL,
    SECTION_RE,
    TRANSITION_SIGIL,
    TRANSITION_SUFFIX,
    is_scene_heading_keyword,
    is_transition_phrase,
    uppercase_ratio,
)
from scriptmark.parser.title_page import find_title_page_end, parse_title_page
from scriptmark.parser.tokens import ClassifierState, Token, TokenType

logger = get_logger(__name__)


@dataclass(frozen=True)
class LineContext:
    """A line under classification and its trimmed neighbours.

    ``previous`` and ``next`` are empty strings at the document edges, so an
    absent neighbour reads the same as a blank one.
    """

    line: str
    previous: str = ""
    next: str = ""

    @property
    def text(self) -> str:
        return self.line.strip()

    @property
    def forced_action(self) -> bool:
        return self.text.startswith(ACTION_SIGIL)


class RuleMatch(NamedTuple):
    """Result of a matching rule: token to emit (or None) and the next state."""

    token: Token | None
    state: ClassifierState


Rule = Callable[[LineContext, ClassifierState], RuleMatch | None]


def match_blank(ctx: LineContext, state: ClassifierState) -> RuleMatch | None:
    if ctx.text:
        return None
    return RuleMatch(Token.blank(), state.leave_dialogue())


def match_page_break(ctx: LineContext, state: ClassifierState) -> RuleMatch | None:
    if not PAGE_BREAK_RE.match(ctx.text):
        return None
    return RuleMatch(Token.page_break(), state)


def match_scene_heading(ctx: LineContext, state: ClassifierState) -> RuleMatch | None:
    """Forced ``.HEADING`` anywhere, or a keyword line after a blank line."""
    text = ctx.text
    if text.startswith(SCENE_HEADING_SIGIL) and len(text) > 1:
        heading = text[1:]
    elif not ctx.previous and is_scene_heading_keyword(text):
        heading = text
    else:
        return None
    token = Token(TokenType.SCENE_HEADING, text=heading)
    return RuleMatch(token, state.leave_dialogue())


def match_transition(ctx: LineContext, state: ClassifierState) -> RuleMatch | None:
    """Forced ``> TEXT`` or a transition phrase standing alone between blanks."""
    text = ctx.text
    if text.startswith(TRANSITION_SIGIL) and not text.endswith(CENTERED_CLOSE):
        content = text[1:].strip()
    elif (
        not ctx.forced_action
        and is_transition_phrase(text)
        and not ctx.previous
        and not ctx.next
    ):
        content = text
    else:
        return None
    return RuleMatch(Token(TokenType.TRANSITION, text=content), state.leave_dialogue())


def match_centered(ctx: LineContext, state: ClassifierState) -> RuleMatch | None:
    text = ctx.text
    if not (text.startswith(TRANSITION_SIGIL) and text.endswith(CENTERED_CLOSE)):
        return None
    return RuleMatch(Token(TokenType.CENTERED, text=text[1:-1].strip()), state)


def match_character(ctx: LineContext, state: ClassifierState) -> RuleMatch | None:
    """Forced ``@Name``, or an uppercase line opening a block of text.

    The unforced form needs a blank line before, a non-blank line after and
    at least 80% uppercase letters; lines ending in ``TO:`` are left for the
    transition and action rules.
    """
    text = ctx.text
    if text.startswith(CHARACTER_SIGIL):
        name = text[1:].strip()
    elif (
        not ctx.forced_action
        and not ctx.previous
        and ctx.next
        and uppercase_ratio(text) >= CHARACTER_UPPERCASE_RATIO
        and not text.endswith(TRANSITION_SUFFIX)
    ):
        name = text
    else:
        return None
    return RuleMatch(Token(TokenType.CHARACTER, text=name), state.enter_dialogue(name))


def match_parenthetical(ctx: LineContext, state: ClassifierState) -> RuleMatch | None:
    if not state.in_dialogue or not PARENTHETICAL_RE.match(ctx.text):
        return None
    return RuleMatch(Token(TokenType.PARENTHETICAL, text=ctx.text), state)


def match_dialogue(ctx: LineContext, state: ClassifierState) -> RuleMatch | None:
    if not state.in_dialogue:
        return None
    return RuleMatch(Token(TokenType.DIALOGUE, text=ctx.text), state)


def match_section(ctx: LineContext, state: ClassifierState) -> RuleMatch | None:
    match = SECTION_RE.match(ctx.text)
    if not match:
        return None
    return RuleMatch(Token.section(match.group(2), len(match.group(1))), state)


def match_synopsis(ctx: LineContext, state: ClassifierState) -> RuleMatch | None:
    text = ctx.text
    if not text.startswith("=") or text.startswith("=="):
        return None
    return RuleMatch(Token(TokenType.SYNOPSIS, text=text[1:].strip()), state)


def match_note(ctx: LineContext, state: ClassifierState) -> RuleMatch | None:
    match = NOTE_RE.match(ctx.text)
    if not match:
        return None
    return RuleMatch(Token(TokenType.NOTE, text=match.group(1)), state)


def match_action(ctx: LineContext, state: ClassifierState) -> RuleMatch:
    # Untrimmed so intentional indentation survives
    line = ctx.line
    if line.startswith(ACTION_SIGIL):
        line = line[1:]
    return RuleMatch(Token(TokenType.ACTION, text=line), state)


# Priority order: first match wins
RULES: tuple[tuple[str, Rule], ...] = (
    ("blank", match_blank),
    ("page_break", match_page_break),
    ("scene_heading", match_scene_heading),
    ("transition", match_transition),
    ("centered", match_centered),
    ("character", match_character),
    ("parenthetical", match_parenthetical),
    ("dialogue", match_dialogue),
    ("section", match_section),
    ("synopsis", match_synopsis),
    ("note", match_note),
    ("action", match_action),
)


def classify_line(ctx: LineContext, state: ClassifierState) -> RuleMatch:
    """Classify one line with the first matching rule."""
    for _name, rule in RULES:
        result = rule(ctx, state)
        if result is not None:
            return result
    # match_action always matches; kept for type checkers
    return match_action(ctx, state)


class LineClassifier:
    """Classify canonical Fountain markup into raw (unmerged) tokens.

    The classifier holds configuration only. Dialogue state lives in a
    ``ClassifierState`` created per call, so one instance can serve
    concurrent conversions.
    """

    def __init__(
        self, include_synopsis: bool = False, include_notes: bool = False
    ) -> None:
        """Initialize the classifier.

        Args:
            include_synopsis: Emit synopsis tokens instead of dropping them
            include_notes: Emit note tokens instead of dropping them
        """
        self.include_synopsis = include_synopsis
        self.include_notes = include_notes

    @property
    def suppressed_types(self) -> frozenset[TokenType]:
        """Token kinds that are recognized but not emitted."""
        suppressed = set()
        if not self.include_synopsis:
            suppressed.add(TokenType.SYNOPSIS)
        if not self.include_notes:
            suppressed.add(TokenType.NOTE)
        return frozenset(suppressed)

    def classify(self, text: str) -> list[Token]:
        """Classify a whole document.

        A leading title page becomes a single ``title_page`` token; the rest
        of the document is classified line by line.

        Args:
            text: Fountain markup

        Returns:
            Raw token sequence, before merging
        """
        lines = text.replace("\r\n", "\n").split("\n")
        tokens: list[Token] = []

        start = find_title_page_end(lines)
        if start > 0:
            tokens.append(Token.title_page(parse_title_page(lines[:start])))
            logger.debug("Title page detected", lines=start)

        body_tokens, state = self.classify_lines(lines, start=start)
        tokens.extend(body_tokens)
        logger.debug(
            "Classified document",
            lines=len(lines),
            tokens=len(tokens),
            last_character=state.last_character,
        )
        return tokens

    def classify_lines(
        self,
        lines: Sequence[str],
        start: int = 0,
        state: ClassifierState | None = None,
    ) -> tuple[list[Token], ClassifierState]:
        """Classify ``lines[start:]`` using neighbouring lines as context.

        Args:
            lines: All document lines (earlier lines serve as context only)
            start: Index of the first line to classify
            state: Starting state, a fresh one when omitted

        Returns:
            Tuple of (tokens, final state)
        """
        state = state or ClassifierState()
        suppressed = self.suppressed_types
        tokens: list[Token] = []

        for index in range(start, len(lines)):
            ctx = LineContext(
                line=lines[index],
                previous=lines[index - 1].strip() if index > 0 else "",
                next=lines[index + 1].strip() if index + 1 < len(lines) else "",
            )
            token, state = classify_line(ctx, state)
            if token is not None and token.type not in suppressed:
                tokens.append(token)

        return tokens, state
