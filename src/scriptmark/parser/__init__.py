"""Markdown and Fountain screenplay parsing for scriptmark."""

from __future__ import annotations

from .classifier import LineClassifier
from .combiner import DocumentCombiner
from .markdown_converter import MarkdownConverter
from .merger import merge_tokens
from .title_page import find_title_page_end, parse_title_page, render_title_page
from .tokens import (
    ClassifierState,
    ScreenplayResult,
    SourceDocument,
    TitlePageInfo,
    Token,
    TokenType,
)

__all__ = [
    "ClassifierState",
    "DocumentCombiner",
    "LineClassifier",
    "MarkdownConverter",
    "ScreenplayResult",
    "SourceDocument",
    "TitlePageInfo",
    "Token",
    "TokenType",
    "find_title_page_end",
    "merge_tokens",
    "parse_title_page",
    "render_title_page",
]
