"""scriptmark main entry point."""

from __future__ import annotations

from collections.abc import Sequence

from scriptmark.config import ScriptMarkSettings, get_logger, get_settings
from scriptmark.parser import (
    DocumentCombiner,
    LineClassifier,
    MarkdownConverter,
    ScreenplayResult,
    SourceDocument,
    TitlePageInfo,
    Token,
    merge_tokens,
)

logger = get_logger(__name__)


class ScriptMark:
    """Convert markdown screenplays into merged screenplay token streams.

    Pipeline: markdown -> Fountain markup -> classified tokens -> merged
    tokens. The instance holds configuration only; every call classifies
    with fresh state.
    """

    def __init__(self, settings: ScriptMarkSettings | None = None) -> None:
        """Initialize scriptmark.

        Args:
            settings: Configuration settings (optional, uses global settings)
        """
        self.settings = settings or get_settings()
        self.converter = MarkdownConverter()
        self.combiner = DocumentCombiner(self.converter)
        self.classifier = LineClassifier(
            include_synopsis=self.settings.include_synopsis,
            include_notes=self.settings.include_notes,
        )

    def default_title_page(self) -> TitlePageInfo:
        """Build title page metadata from settings.

        Returns:
            Title page info with today's date when no draft date is set
        """
        return TitlePageInfo(
            title=self.settings.title,
            credit=self.settings.credit,
            author=self.settings.author,
            source=self.settings.source,
            draft_date=self.settings.effective_draft_date(),
            contact=self.settings.contact,
            copyright=self.settings.copyright,
        )

    def to_fountain(self, markdown: str) -> str:
        """Convert a single markdown document to Fountain markup."""
        return self.converter.convert(markdown)

    def tokenize_fountain(self, fountain: str) -> list[Token]:
        """Classify Fountain markup and merge multi-line elements.

        Args:
            fountain: Fountain text, used as-is

        Returns:
            Merged token sequence
        """
        return merge_tokens(self.classifier.classify(fountain))

    def tokenize_markdown(self, markdown: str) -> list[Token]:
        """Convert and tokenize a single markdown document.

        No title page is generated; a title page already present in the
        converted text is still recognized.
        """
        return self.tokenize_fountain(self.to_fountain(markdown))

    def combine(
        self,
        documents: Sequence[SourceDocument],
        title_page: TitlePageInfo | None = None,
    ) -> str:
        """Combine ordered documents into one Fountain text.

        Raises:
            NoDocumentsFoundError: If ``documents`` is empty
        """
        return self.combiner.combine(documents, title_page)

    def tokenize_documents(
        self,
        documents: Sequence[SourceDocument],
        title_page: TitlePageInfo | None = None,
    ) -> ScreenplayResult:
        """Combine documents and tokenize the result as one screenplay.

        Args:
            documents: Ordered source documents
            title_page: Optional title page metadata

        Returns:
            Tokens, combined Fountain text and the names of processed documents

        Raises:
            NoDocumentsFoundError: If ``documents`` is empty
        """
        fountain = self.combine(documents, title_page)
        tokens = self.tokenize_fountain(fountain)
        logger.info(
            "Tokenized screenplay",
            documents=len(documents),
            tokens=len(tokens),
        )
        return ScreenplayResult(
            tokens=tokens,
            fountain=fountain,
            documents=[document.name for document in documents],
        )
