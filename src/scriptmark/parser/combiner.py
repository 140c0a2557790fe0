"""Combine several markdown documents into one Fountain screenplay."""

from __future__ import annotations

from collections.abc import Sequence

from scriptmark.config import get_logger
from scriptmark.exceptions import NoDocumentsFoundError
from scriptmark.parser.markdown_converter import MarkdownConverter
from scriptmark.parser.patterns import PAGE_BREAK_MARKER
from scriptmark.parser.title_page import render_title_page
from scriptmark.parser.tokens import SourceDocument, TitlePageInfo

logger = get_logger(__name__)

DOCUMENT_SEPARATOR = "\n\n"


class DocumentCombiner:
    """Join converted documents, optionally behind a generated title page.

    Documents are used in the order given; sorting them is the caller's job.
    The result is classified as one text so dialogue state and blank-line
    rules carry across document boundaries.
    """

    def __init__(self, converter: MarkdownConverter | None = None) -> None:
        """Initialize the combiner.

        Args:
            converter: Markdown converter applied to every document
        """
        self.converter = converter or MarkdownConverter()

    def combine(
        self,
        documents: Sequence[SourceDocument],
        title_page: TitlePageInfo | None = None,
    ) -> str:
        """Convert and concatenate documents into a single Fountain text.

        Args:
            documents: Ordered source documents
            title_page: Optional metadata rendered as a leading title page,
                followed by a page break

        Returns:
            Combined Fountain markup

        Raises:
            NoDocumentsFoundError: If ``documents`` is empty
        """
        if not documents:
            raise NoDocumentsFoundError("No documents found to combine")

        combined = ""

        if title_page is not None:
            rendered = render_title_page(title_page)
            if rendered:
                combined += f"{rendered}\n\n{PAGE_BREAK_MARKER}\n\n"

        for document in documents:
            combined += self.converter.convert(document.content) + DOCUMENT_SEPARATOR

        logger.debug(
            "Combined documents",
            count=len(documents),
            names=[document.name for document in documents],
            title_page=title_page is not None,
        )
        return combined.strip()
