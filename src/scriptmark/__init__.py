"""scriptmark: markdown screenplays to structured screenplay tokens.

scriptmark rewrites markdown-authored screenplay scenes into canonical
Fountain markup and classifies each line into typed screenplay elements
(scene headings, character cues, dialogue, transitions, ...) ready for a
renderer.
"""

from .config import ScriptMarkSettings, get_logger, get_settings
from .exceptions import NoDocumentsFoundError, ScriptMarkError
from .main import ScriptMark
from .parser import (
    LineClassifier,
    MarkdownConverter,
    ScreenplayResult,
    SourceDocument,
    TitlePageInfo,
    Token,
    TokenType,
    merge_tokens,
)

__version__ = "0.1.0"

__all__ = [
    "LineClassifier",
    "MarkdownConverter",
    "NoDocumentsFoundError",
    "ScreenplayResult",
    "ScriptMark",
    "ScriptMarkError",
    "ScriptMarkSettings",
    "SourceDocument",
    "TitlePageInfo",
    "Token",
    "TokenType",
    "__version__",
    "get_logger",
    "get_settings",
    "merge_tokens",
]
