"""Coalesce runs of same-typed tokens into single tokens."""

from __future__ import annotations

from collections.abc import Iterable

from scriptmark.parser.tokens import Token, TokenType

# Token kinds that merge with an identical predecessor, and their joiner
MERGE_SEPARATORS: dict[TokenType, str] = {
    TokenType.ACTION: "\n",
    TokenType.DIALOGUE: " ",
}


def merge_tokens(tokens: Iterable[Token]) -> list[Token]:
    """Merge consecutive action and dialogue tokens.

    Adjacent action tokens are joined with a newline, adjacent dialogue
    tokens with a single space. All other tokens, including runs of blanks,
    pass through unchanged and in order. Input tokens are never mutated, and
    merging an already merged sequence returns it unchanged.

    Args:
        tokens: Raw token sequence from the classifier

    Returns:
        Merged token list
    """
    merged: list[Token] = []

    for token in tokens:
        separator = MERGE_SEPARATORS.get(token.type)
        if separator is not None and merged and merged[-1].type == token.type:
            last = merged[-1]
            last.text = f"{last.text or ''}{separator}{token.text or ''}"
            continue
        merged.append(token.copy())

    return merged
