"""Writing assistant service.

Builds prompts for assistance requests, sends them through a text
generator and wraps the results. Requests are awaited one at a time;
batches run sequentially in input order.
"""

from collections.abc import Sequence

import structlog

from writers_app.interfaces.text_generator import BaseTextGenerator
from writers_app.strategies.assistance.models import (
    AIContext,
    AIResponse,
    AssistanceKind,
    AssistanceType,
    DocumentAnalysis,
    WritingInsights,
    WritingTone,
)
from writers_app.strategies.assistance.prompts import (
    build_analysis_prompt,
    build_insights_prompt,
    build_prompt,
    parse_titles,
)
from writers_app.strategies.stores.models import Document

logger = structlog.stdlib.get_logger(__name__)

BatchRequest = tuple[str, AssistanceType, AIContext | None]


class WritingAssistant:
    """High-level writing assistance over a text generator."""

    def __init__(self, generator: BaseTextGenerator) -> None:
        self._generator = generator

    @property
    def model(self) -> str:
        return self._generator.model

    async def get_assistance(
        self,
        text: str,
        assistance: AssistanceType,
        context: AIContext | None = None,
    ) -> AIResponse:
        """Run one assistance request.

        Args:
            text: The text the request operates on.
            assistance: The assistance kind and its associated data.
            context: Optional story context.

        Returns:
            The generated content with request details.

        Raises:
            TextGenerationError: If the text generator fails.
        """
        prompt = build_prompt(text, assistance, context)
        logger.info("assistance_requested", kind=assistance.kind.value, text_chars=len(text))

        generated = await self._generator.generate(prompt)

        return AIResponse(
            request_type=assistance,
            original_text=text,
            generated_content=generated,
            model=self._generator.model,
        )

    async def _generate(
        self,
        text: str,
        kind: AssistanceKind,
        context: AIContext | None = None,
    ) -> str:
        response = await self.get_assistance(text, AssistanceType.of(kind), context)
        return response.generated_content

    async def continue_writing(self, text: str, context: AIContext | None = None) -> str:
        return await self._generate(text, AssistanceKind.CONTINUE, context)

    async def improve_text(self, text: str, context: AIContext | None = None) -> str:
        return await self._generate(text, AssistanceKind.IMPROVE, context)

    async def check_grammar(self, text: str) -> str:
        return await self._generate(text, AssistanceKind.GRAMMAR_CHECK)

    async def style_suggestions(self, text: str, context: AIContext | None = None) -> str:
        return await self._generate(text, AssistanceKind.STYLE_SUGGESTIONS, context)

    async def generate_outline(self, concept: str, context: AIContext | None = None) -> str:
        return await self._generate(concept, AssistanceKind.OUTLINE, context)

    async def brainstorm_ideas(self, topic: str, context: AIContext | None = None) -> str:
        return await self._generate(topic, AssistanceKind.BRAINSTORM, context)

    async def develop_character(self, concept: str, context: AIContext | None = None) -> str:
        return await self._generate(concept, AssistanceKind.CHARACTER_DEVELOPMENT, context)

    async def suggest_plot(self, story: str, context: AIContext | None = None) -> str:
        return await self._generate(story, AssistanceKind.PLOT_SUGGESTIONS, context)

    async def improve_dialogue(self, dialogue: str, context: AIContext | None = None) -> str:
        return await self._generate(dialogue, AssistanceKind.DIALOGUE_IMPROVEMENT, context)

    async def enhance_description(
        self, description: str, context: AIContext | None = None
    ) -> str:
        return await self._generate(description, AssistanceKind.DESCRIPTION_ENHANCEMENT, context)

    async def summarize(self, text: str) -> str:
        return await self._generate(text, AssistanceKind.SUMMARIZE)

    async def expand_text(self, text: str, context: AIContext | None = None) -> str:
        return await self._generate(text, AssistanceKind.EXPAND, context)

    async def simplify_text(self, text: str) -> str:
        return await self._generate(text, AssistanceKind.SIMPLIFY)

    async def change_tone(
        self, text: str, tone: WritingTone, context: AIContext | None = None
    ) -> str:
        response = await self.get_assistance(text, AssistanceType.change_tone(tone), context)
        return response.generated_content

    async def custom_request(
        self, text: str, instruction: str, context: AIContext | None = None
    ) -> str:
        response = await self.get_assistance(text, AssistanceType.custom(instruction), context)
        return response.generated_content

    async def generate_titles(self, content: str, context: AIContext | None = None) -> list[str]:
        """Ask for title options and parse them into a list."""
        response = await self._generate(content, AssistanceKind.TITLE_GENERATION, context)
        return parse_titles(response)

    async def batch_process(self, requests: Sequence[BatchRequest]) -> list[AIResponse]:
        """Run requests one after another in input order.

        The first failure propagates and the remaining requests are not sent.

        Args:
            requests: ``(text, assistance, context)`` tuples.

        Returns:
            Responses in the same order as ``requests``.
        """
        logger.info("batch_started", size=len(requests))

        responses: list[AIResponse] = []
        for text, assistance, context in requests:
            responses.append(await self.get_assistance(text, assistance, context))
        return responses

    async def analyze_document(self, document: Document) -> DocumentAnalysis:
        """Request comprehensive feedback on a whole document."""
        analysis = await self._generator.generate(build_analysis_prompt(document))
        return DocumentAnalysis(document_id=document.id, analysis=analysis)

    async def get_writing_insights(self, document: Document) -> WritingInsights:
        """Request readability and style insights on a document."""
        insights = await self._generator.generate(build_insights_prompt(document))
        return WritingInsights(document_id=document.id, insights=insights)
