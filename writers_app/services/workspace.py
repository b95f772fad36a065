"""Application orchestration.

``WritersApp`` owns one template store and one document store and ties
them to the substitution engine, the exporters and, when enabled, the
writing assistant. Each instance is independent; nothing here is global.
"""

import logging
import uuid
from collections import Counter

from pydantic import BaseModel

from writers_app.interfaces.exporter import BaseExporter, ExportFormat
from writers_app.interfaces.store import DocumentNotFoundError, TemplateNotFoundError
from writers_app.interfaces.text_generator import AIDisabledError
from writers_app.services.assistant import WritingAssistant
from writers_app.strategies.assistance.models import (
    AIContext,
    AIResponse,
    AssistanceType,
    DocumentAnalysis,
    WritingInsights,
)
from writers_app.strategies.exporters import HTMLExporter, MarkdownExporter, PlainTextExporter
from writers_app.strategies.stores.document_store import InMemoryDocumentStore
from writers_app.strategies.stores.models import Document
from writers_app.strategies.stores.template_store import InMemoryTemplateStore
from writers_app.strategies.template_engine.models import TemplateCategory

logger = logging.getLogger(__name__)


class AppStatistics(BaseModel):
    """Aggregate figures across the document and template stores."""

    total_documents: int
    total_word_count: int
    average_word_count: int
    total_templates: int
    documents_by_category: dict[TemplateCategory, int]


class WritersApp:
    """Application facade over the stores, renderer and assistant.

    Attributes:
        templates: The template store.
        documents: The document store.
    """

    def __init__(
        self,
        template_store: InMemoryTemplateStore | None = None,
        document_store: InMemoryDocumentStore | None = None,
        assistant: WritingAssistant | None = None,
        exporters: dict[ExportFormat, BaseExporter] | None = None,
    ) -> None:
        """Initialize the application.

        Args:
            template_store: Template store. A store with the built-in
                templates is created if None.
            document_store: Document store. An empty store is created if None.
            assistant: Writing assistant. AI features are disabled if None.
            exporters: Exporters by format. The plain, Markdown and HTML
                exporters are used if None.
        """
        self.templates = template_store if template_store is not None else InMemoryTemplateStore()
        self.documents = document_store if document_store is not None else InMemoryDocumentStore()
        self._assistant = assistant
        self._exporters = exporters or {
            exporter.format: exporter
            for exporter in (PlainTextExporter(), MarkdownExporter(), HTMLExporter())
        }

    # =========================================================================
    # AI Configuration
    # =========================================================================

    def enable_ai(self, assistant: WritingAssistant) -> None:
        self._assistant = assistant
        logger.info(f"AI features enabled with model {assistant.model}")

    def disable_ai(self) -> None:
        self._assistant = None
        logger.info("AI features disabled")

    @property
    def is_ai_enabled(self) -> bool:
        return self._assistant is not None

    @property
    def ai_model(self) -> str | None:
        """Model identifier of the active assistant, or None when AI is disabled."""
        return self._assistant.model if self._assistant is not None else None

    def _require_assistant(self) -> WritingAssistant:
        if self._assistant is None:
            raise AIDisabledError()
        return self._assistant

    def _require_document(self, document_id: uuid.UUID) -> Document:
        document = self.documents.get(document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)
        return document

    # =========================================================================
    # Document Creation
    # =========================================================================

    def create_document_from_template(
        self,
        template_id: uuid.UUID,
        values: dict[str, str],
    ) -> Document:
        """Render a template and store the resulting document.

        Args:
            template_id: Id of the template to render.
            values: Replacement values keyed by placeholder key.

        Returns:
            The stored document.

        Raises:
            TemplateNotFoundError: If no template has ``template_id``.
        """
        template = self.templates.get(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)

        document = template.create_document(values)
        self.documents.add(document)
        logger.info(f"Created document {document.id} from template '{template.name}'")
        return document

    def create_blank_document(self, title: str, category: TemplateCategory) -> Document:
        """Create and store an empty document."""
        document = Document(title=title, content="", category=category)
        self.documents.add(document)
        logger.info(f"Created blank document {document.id}")
        return document

    # =========================================================================
    # Export
    # =========================================================================

    def get_exporter(self, export_format: ExportFormat) -> BaseExporter:
        try:
            return self._exporters[export_format]
        except KeyError:
            raise ValueError(f"Unsupported export format: {export_format}") from None

    def export_document(
        self,
        document_id: uuid.UUID,
        export_format: ExportFormat = ExportFormat.MARKDOWN,
    ) -> str:
        """Render a stored document in the requested format.

        Raises:
            DocumentNotFoundError: If no document has ``document_id``.
            ValueError: If no exporter handles ``export_format``.
        """
        document = self._require_document(document_id)
        return self.get_exporter(export_format).export(document)

    # =========================================================================
    # Statistics
    # =========================================================================

    def get_statistics(self) -> AppStatistics:
        documents = self.documents.list_all()
        total_words = self.documents.total_word_count()
        total_documents = len(documents)

        return AppStatistics(
            total_documents=total_documents,
            total_word_count=total_words,
            average_word_count=total_words // total_documents if total_documents else 0,
            total_templates=self.templates.count(),
            documents_by_category=dict(Counter(d.category for d in documents)),
        )

    # =========================================================================
    # AI Operations
    # =========================================================================

    async def assist(
        self,
        text: str,
        assistance: AssistanceType,
        context: AIContext | None = None,
    ) -> AIResponse:
        """Run a free-text assistance request.

        Raises:
            AIDisabledError: If AI features are disabled.
            TextGenerationError: If the request fails.
        """
        return await self._require_assistant().get_assistance(text, assistance, context)

    async def continue_document(
        self,
        document_id: uuid.UUID,
        append_to_document: bool = False,
        context: AIContext | None = None,
    ) -> str:
        """Generate a continuation of a document.

        Args:
            document_id: Id of the document to continue.
            append_to_document: Whether to append the continuation, separated
                by a blank line, and store the document.
            context: Optional story context.

        Returns:
            The generated continuation.

        Raises:
            AIDisabledError: If AI features are disabled.
            DocumentNotFoundError: If no document has ``document_id``.
            TextGenerationError: If the request fails.
        """
        assistant = self._require_assistant()
        document = self._require_document(document_id)

        continuation = await assistant.continue_writing(document.content, context)

        if append_to_document:
            separator = "\n\n" if document.content else ""
            document.content = f"{document.content}{separator}{continuation}"
            self.documents.update(document)
            logger.info(f"Appended continuation to document {document_id}")

        return continuation

    async def improve_document(
        self,
        document_id: uuid.UUID,
        replace_content: bool = False,
        context: AIContext | None = None,
    ) -> str:
        """Generate an improved version of a document.

        When ``replace_content`` is set, the improved text replaces the
        document content and the document is stored.
        """
        assistant = self._require_assistant()
        document = self._require_document(document_id)

        improved = await assistant.improve_text(document.content, context)

        if replace_content:
            document.content = improved
            self.documents.update(document)
            logger.info(f"Replaced content of document {document_id} with improved version")

        return improved

    async def generate_document_titles(
        self,
        document_id: uuid.UUID,
        context: AIContext | None = None,
    ) -> list[str]:
        assistant = self._require_assistant()
        document = self._require_document(document_id)
        return await assistant.generate_titles(document.content, context)

    async def analyze_document(self, document_id: uuid.UUID) -> DocumentAnalysis:
        assistant = self._require_assistant()
        document = self._require_document(document_id)
        return await assistant.analyze_document(document)

    async def writing_insights(self, document_id: uuid.UUID) -> WritingInsights:
        assistant = self._require_assistant()
        document = self._require_document(document_id)
        return await assistant.get_writing_insights(document)

    async def brainstorm_ideas(self, topic: str, context: AIContext | None = None) -> str:
        return await self._require_assistant().brainstorm_ideas(topic, context)

    async def develop_character(self, concept: str, context: AIContext | None = None) -> str:
        return await self._require_assistant().develop_character(concept, context)

    async def generate_outline(self, concept: str, context: AIContext | None = None) -> str:
        return await self._require_assistant().generate_outline(concept, context)
