"""Unit tests for the WritingAssistant service."""

import asyncio

import pytest

from tests.fakes import FakeTextGenerator
from writers_app.interfaces.text_generator import APIStatusError, TextGenerationError
from writers_app.services.assistant import WritingAssistant
from writers_app.strategies.assistance.models import (
    AIContext,
    AssistanceKind,
    AssistanceType,
    WritingTone,
)
from writers_app.strategies.stores.models import Document
from writers_app.strategies.template_engine.models import TemplateCategory


class TestWritingAssistant:
    """Test suite for WritingAssistant."""

    @pytest.fixture
    def assistant(self, fake_generator):
        return WritingAssistant(fake_generator)

    # =========================================================================
    # Single Request Tests
    # =========================================================================

    def test_get_assistance_wraps_response(self, assistant, fake_generator):
        assistance = AssistanceType.of(AssistanceKind.EXPAND)

        response = asyncio.run(assistant.get_assistance("Short.", assistance))

        assert response.generated_content == "generated"
        assert response.original_text == "Short."
        assert response.request_type == assistance
        assert response.model == "fake-model"
        assert len(fake_generator.prompts) == 1
        assert fake_generator.prompts[0].startswith("Expand this text")

    def test_context_reaches_prompt(self, assistant, fake_generator):
        asyncio.run(assistant.continue_writing("Text", AIContext(genre="Noir")))

        assert fake_generator.prompts[0].startswith("Context:\nGenre: Noir\n\n")

    def test_change_tone(self, assistant, fake_generator):
        asyncio.run(assistant.change_tone("Hello", WritingTone.HUMOROUS))

        assert "in a humorous tone" in fake_generator.prompts[0]

    def test_custom_request(self, assistant, fake_generator):
        asyncio.run(assistant.custom_request("Hello", "Make it rhyme."))

        assert fake_generator.prompts[0].startswith("Make it rhyme.")

    @pytest.mark.parametrize(
        "method, expected_start",
        [
            ("check_grammar", "Check this text for grammar"),
            ("summarize", "Provide a concise summary"),
            ("simplify_text", "Simplify this text"),
            ("improve_text", "Improve this text"),
            ("style_suggestions", "Analyze this text and provide specific style"),
            ("generate_outline", "Based on this text or idea"),
            ("brainstorm_ideas", "Brainstorm creative ideas"),
            ("develop_character", "Help develop this character"),
            ("suggest_plot", "Suggest plot developments"),
            ("improve_dialogue", "Improve this dialogue"),
            ("enhance_description", "Enhance this description"),
        ],
    )
    def test_convenience_methods_select_kind(self, assistant, fake_generator, method, expected_start):
        result = asyncio.run(getattr(assistant, method)("input"))

        assert result == "generated"
        assert fake_generator.prompts[0].startswith(expected_start)

    def test_generate_titles_parses_list(self):
        generator = FakeTextGenerator(["1. First\n2. Second\n\n3) Third"])
        assistant = WritingAssistant(generator)

        titles = asyncio.run(assistant.generate_titles("content"))

        assert titles == ["First", "Second", "Third"]

    def test_failure_propagates(self, failing_generator):
        assistant = WritingAssistant(failing_generator)

        with pytest.raises(TextGenerationError):
            asyncio.run(assistant.improve_text("text"))

    # =========================================================================
    # Batch Tests
    # =========================================================================

    def test_batch_runs_in_order(self):
        generator = FakeTextGenerator(["one", "two", "three"])
        assistant = WritingAssistant(generator)
        requests = [
            ("a", AssistanceType.of(AssistanceKind.SUMMARIZE), None),
            ("b", AssistanceType.of(AssistanceKind.EXPAND), None),
            ("c", AssistanceType.custom("Shout"), None),
        ]

        responses = asyncio.run(assistant.batch_process(requests))

        assert [r.generated_content for r in responses] == ["one", "two", "three"]
        assert [r.original_text for r in responses] == ["a", "b", "c"]
        assert generator.prompts[0].startswith("Provide a concise summary")
        assert generator.prompts[1].startswith("Expand this text")
        assert generator.prompts[2].startswith("Shout")

    def test_batch_stops_at_first_failure(self):
        generator = FakeTextGenerator(["one", APIStatusError(500, "down"), "three"])
        assistant = WritingAssistant(generator)
        requests = [
            (text, AssistanceType.of(AssistanceKind.SUMMARIZE), None)
            for text in ("a", "b", "c")
        ]

        with pytest.raises(APIStatusError):
            asyncio.run(assistant.batch_process(requests))

        assert len(generator.prompts) == 2

    def test_empty_batch(self, assistant):
        assert asyncio.run(assistant.batch_process([])) == []

    # =========================================================================
    # Document Analysis Tests
    # =========================================================================

    def test_analyze_document(self, assistant, fake_generator):
        document = Document(title="Essay", category=TemplateCategory.ESSAY, content="Words here.")

        analysis = asyncio.run(assistant.analyze_document(document))

        assert analysis.document_id == document.id
        assert analysis.analysis == "generated"
        assert "Document Title: Essay" in fake_generator.prompts[0]

    def test_writing_insights(self, assistant):
        document = Document(title="Essay", category=TemplateCategory.ESSAY, content="Words here.")

        insights = asyncio.run(assistant.get_writing_insights(document))

        assert insights.document_id == document.id
        assert insights.insights == "generated"
