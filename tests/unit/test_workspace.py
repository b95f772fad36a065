"""Unit tests for the WritersApp orchestration layer."""

import asyncio
import uuid

import pytest

from tests.fakes import FakeTextGenerator
from writers_app.interfaces.exporter import ExportFormat
from writers_app.interfaces.store import DocumentNotFoundError, TemplateNotFoundError
from writers_app.interfaces.text_generator import AIDisabledError, NetworkError
from writers_app.services.assistant import WritingAssistant
from writers_app.services.workspace import WritersApp
from writers_app.strategies.assistance.models import AssistanceKind, AssistanceType
from writers_app.strategies.template_engine.models import TemplateCategory


def template_named(app: WritersApp, name: str):
    return next(t for t in app.templates.list_all() if t.name == name)


# =============================================================================
# Document Creation Tests
# =============================================================================


class TestDocumentCreation:
    """Test suite for creating documents."""

    def test_create_from_template(self, writers_app):
        template = template_named(writers_app, "Short Story")

        document = writers_app.create_document_from_template(
            template.id,
            {"title": "The Lighthouse", "author": "Ann", "act_one": "Storm."},
        )

        assert document.title == "The Lighthouse"
        assert document.content.startswith("# The Lighthouse\nby Ann")
        assert "~5000 words" in document.content
        assert "{{act_two}}" in document.content
        assert writers_app.documents.get(document.id) == document

    def test_create_from_unknown_template(self, writers_app):
        with pytest.raises(TemplateNotFoundError) as exc_info:
            writers_app.create_document_from_template(uuid.uuid4(), {})

        assert "Template not found" in str(exc_info.value)

    def test_create_blank_document(self, writers_app):
        document = writers_app.create_blank_document("Notes", TemplateCategory.OTHER)

        assert document.content == ""
        assert document.template_id is None
        assert writers_app.documents.count() == 1

    def test_apps_do_not_share_state(self):
        first, second = WritersApp(), WritersApp()
        first.create_blank_document("Only in first", TemplateCategory.OTHER)

        assert second.documents.count() == 0


# =============================================================================
# Export and Statistics Tests
# =============================================================================


class TestExportAndStatistics:
    """Test suite for export and statistics."""

    def test_export_default_is_markdown(self, writers_app):
        document = writers_app.create_blank_document("Draft", TemplateCategory.ESSAY)

        exported = writers_app.export_document(document.id)

        assert exported.startswith("# Draft\n\n**Category:** Essay")

    def test_export_each_format(self, writers_app):
        document = writers_app.create_blank_document("Draft", TemplateCategory.ESSAY)

        for export_format in ExportFormat:
            assert writers_app.export_document(document.id, export_format) is not None

    def test_export_unknown_document(self, writers_app):
        with pytest.raises(DocumentNotFoundError):
            writers_app.export_document(uuid.uuid4(), ExportFormat.HTML)

    def test_unsupported_format(self):
        app = WritersApp(exporters={})

        with pytest.raises(ValueError):
            app.get_exporter(ExportFormat.HTML)

    def test_statistics(self, writers_app):
        """Test counts by category and word totals."""
        novel = writers_app.create_blank_document("A", TemplateCategory.NOVEL)
        writers_app.create_blank_document("B", TemplateCategory.NOVEL)
        writers_app.create_blank_document("C", TemplateCategory.ARTICLE)

        edited = writers_app.documents.get(novel.id)
        edited.content = "one two three four five"
        writers_app.documents.update(edited)

        stats = writers_app.get_statistics()

        assert stats.total_documents == 3
        assert stats.documents_by_category == {
            TemplateCategory.NOVEL: 2,
            TemplateCategory.ARTICLE: 1,
        }
        assert stats.total_word_count == 5
        assert stats.average_word_count == 1
        assert stats.total_templates == 7

    def test_statistics_empty(self):
        stats = WritersApp().get_statistics()

        assert stats.total_documents == 0
        assert stats.average_word_count == 0
        assert stats.documents_by_category == {}


# =============================================================================
# AI Operation Tests
# =============================================================================


class TestAIOperations:
    """Test suite for AI-backed operations."""

    def test_ai_disabled_by_default(self, writers_app):
        assert writers_app.is_ai_enabled is False

        with pytest.raises(AIDisabledError):
            asyncio.run(writers_app.brainstorm_ideas("dragons"))

    def test_ai_disabled_checked_before_document(self, writers_app):
        with pytest.raises(AIDisabledError):
            asyncio.run(writers_app.continue_document(uuid.uuid4()))

    def test_enable_and_disable(self, writers_app, fake_generator):
        writers_app.enable_ai(WritingAssistant(fake_generator))
        assert writers_app.is_ai_enabled is True

        writers_app.disable_ai()
        assert writers_app.is_ai_enabled is False

    def test_unknown_document(self, ai_writers_app):
        with pytest.raises(DocumentNotFoundError):
            asyncio.run(ai_writers_app.improve_document(uuid.uuid4()))

    def test_continue_without_append(self, ai_writers_app):
        document = ai_writers_app.create_blank_document("Story", TemplateCategory.NOVEL)

        continuation = asyncio.run(ai_writers_app.continue_document(document.id))

        assert continuation == "generated"
        assert ai_writers_app.documents.get(document.id).content == ""

    def test_continue_appends_with_blank_line(self):
        app = WritersApp(assistant=WritingAssistant(FakeTextGenerator(["Part two."])))
        document = app.create_blank_document("Story", TemplateCategory.NOVEL)
        edited = app.documents.get(document.id)
        edited.content = "Part one."
        app.documents.update(edited)

        asyncio.run(app.continue_document(document.id, append_to_document=True))

        assert app.documents.get(document.id).content == "Part one.\n\nPart two."

    def test_continue_empty_document_appends_without_separator(self, ai_writers_app):
        document = ai_writers_app.create_blank_document("Story", TemplateCategory.NOVEL)

        asyncio.run(ai_writers_app.continue_document(document.id, append_to_document=True))

        assert ai_writers_app.documents.get(document.id).content == "generated"

    def test_improve_replaces_content(self, ai_writers_app, clock):
        document = ai_writers_app.create_blank_document("Story", TemplateCategory.NOVEL)

        improved = asyncio.run(
            ai_writers_app.improve_document(document.id, replace_content=True)
        )

        stored = ai_writers_app.documents.get(document.id)
        assert improved == "generated"
        assert stored.content == "generated"
        assert stored.metadata.modified == clock.now

    def test_failed_request_leaves_document_untouched(self, writers_app):
        writers_app.enable_ai(WritingAssistant(FakeTextGenerator([NetworkError("offline")])))
        document = writers_app.create_blank_document("Story", TemplateCategory.NOVEL)

        with pytest.raises(NetworkError):
            asyncio.run(writers_app.continue_document(document.id, append_to_document=True))

        assert writers_app.documents.get(document.id).content == ""

    def test_generate_document_titles(self, writers_app):
        writers_app.enable_ai(WritingAssistant(FakeTextGenerator(["1. Alpha\n2. Beta"])))
        document = writers_app.create_blank_document("Story", TemplateCategory.NOVEL)

        titles = asyncio.run(writers_app.generate_document_titles(document.id))

        assert titles == ["Alpha", "Beta"]

    def test_analysis_and_insights(self, ai_writers_app):
        document = ai_writers_app.create_blank_document("Story", TemplateCategory.NOVEL)

        analysis = asyncio.run(ai_writers_app.analyze_document(document.id))
        insights = asyncio.run(ai_writers_app.writing_insights(document.id))

        assert analysis.document_id == document.id
        assert insights.document_id == document.id

    def test_free_text_operations(self, ai_writers_app, fake_generator):
        asyncio.run(ai_writers_app.develop_character("A retired spy"))
        asyncio.run(ai_writers_app.generate_outline("Heist on Mars"))
        response = asyncio.run(
            ai_writers_app.assist("text", AssistanceType.of(AssistanceKind.SUMMARIZE))
        )

        assert len(fake_generator.prompts) == 3
        assert response.generated_content == "generated"
