"""Prompt construction for writing assistance.

Each assistance kind maps to a prompt skeleton: an instruction, a label
for the user's text and a label the model should answer under. Building a
prompt is pure string formatting with no I/O.
"""

import re
from dataclasses import dataclass

from writers_app.strategies.assistance.models import (
    AIContext,
    AssistanceKind,
    AssistanceType,
)
from writers_app.strategies.stores.models import Document


@dataclass(frozen=True)
class PromptSkeleton:
    """Static parts of one assistance prompt.

    Attributes:
        instruction: Task description. ``{tone}`` and ``{instruction}`` are
            filled from the assistance request.
        input_label: Heading placed above the user's text.
        output_label: Heading the model continues from.
        uses_context: Whether the story context block is prepended.
    """

    instruction: str
    input_label: str
    output_label: str
    uses_context: bool = True


# =============================================================================
# Prompt Skeletons
# =============================================================================

PROMPT_SKELETONS: dict[AssistanceKind, PromptSkeleton] = {
    AssistanceKind.CONTINUE: PromptSkeleton(
        instruction=(
            "Continue writing from where this text leaves off. Match the style, "
            "tone, and voice. Keep the narrative flowing naturally."
        ),
        input_label="Current text",
        output_label="Continue the writing",
    ),
    AssistanceKind.IMPROVE: PromptSkeleton(
        instruction=(
            "Improve this text while maintaining its core message and style. "
            "Focus on clarity, flow, and impact."
        ),
        input_label="Original text",
        output_label="Improved version",
    ),
    AssistanceKind.GRAMMAR_CHECK: PromptSkeleton(
        instruction=(
            "Check this text for grammar, spelling, and punctuation errors. "
            "Provide corrections and explanations."
        ),
        input_label="Text to check",
        output_label="Corrections",
        uses_context=False,
    ),
    AssistanceKind.STYLE_SUGGESTIONS: PromptSkeleton(
        instruction=(
            "Analyze this text and provide specific style improvement suggestions. "
            "Consider sentence variety, word choice, rhythm, and readability."
        ),
        input_label="Text",
        output_label="Style suggestions",
    ),
    AssistanceKind.OUTLINE: PromptSkeleton(
        instruction="Based on this text or idea, generate a detailed outline for a complete piece.",
        input_label="Concept",
        output_label="Outline",
    ),
    AssistanceKind.BRAINSTORM: PromptSkeleton(
        instruction=(
            "Brainstorm creative ideas related to this topic or concept. "
            "Provide diverse, interesting angles and approaches."
        ),
        input_label="Topic",
        output_label="Ideas",
    ),
    AssistanceKind.CHARACTER_DEVELOPMENT: PromptSkeleton(
        instruction=(
            "Help develop this character idea into a rich, multi-dimensional character. "
            "Include backstory, motivations, conflicts, and character arc suggestions."
        ),
        input_label="Character concept",
        output_label="Character development",
    ),
    AssistanceKind.PLOT_SUGGESTIONS: PromptSkeleton(
        instruction="Suggest plot developments, twists, or story directions based on this narrative.",
        input_label="Current story",
        output_label="Plot suggestions",
    ),
    AssistanceKind.DIALOGUE_IMPROVEMENT: PromptSkeleton(
        instruction=(
            "Improve this dialogue to make it more natural, engaging, and "
            "character-revealing. Maintain character voices while enhancing impact."
        ),
        input_label="Original dialogue",
        output_label="Improved dialogue",
    ),
    AssistanceKind.DESCRIPTION_ENHANCEMENT: PromptSkeleton(
        instruction=(
            "Enhance this description with more vivid, sensory details and stronger "
            "imagery while maintaining the core vision."
        ),
        input_label="Original description",
        output_label="Enhanced description",
    ),
    AssistanceKind.TITLE_GENERATION: PromptSkeleton(
        instruction=(
            "Generate 10 compelling title options for this piece. Make them "
            "attention-grabbing and reflective of the content."
        ),
        input_label="Content",
        output_label="Title options",
    ),
    AssistanceKind.SUMMARIZE: PromptSkeleton(
        instruction=(
            "Provide a concise summary of this text, capturing the main points "
            "and key themes."
        ),
        input_label="Text",
        output_label="Summary",
        uses_context=False,
    ),
    AssistanceKind.EXPAND: PromptSkeleton(
        instruction=(
            "Expand this text with more detail, examples, and elaboration while "
            "maintaining the original meaning and style."
        ),
        input_label="Original",
        output_label="Expanded version",
    ),
    AssistanceKind.SIMPLIFY: PromptSkeleton(
        instruction=(
            "Simplify this text to make it clearer and more accessible while "
            "preserving the core message."
        ),
        input_label="Original",
        output_label="Simplified version",
        uses_context=False,
    ),
    AssistanceKind.CHANGE_TONE: PromptSkeleton(
        instruction="Rewrite this text in a {tone} tone while keeping the core content.",
        input_label="Original",
        output_label="Rewritten in {tone} tone",
    ),
    AssistanceKind.CUSTOM: PromptSkeleton(
        instruction="{instruction}",
        input_label="Text",
        output_label="Result",
    ),
}

DOCUMENT_ANALYSIS_PROMPT = """Analyze this document comprehensively and provide:
1. Overall assessment
2. Strengths (3-5 points)
3. Areas for improvement (3-5 points)
4. Specific suggestions for enhancement
5. Target audience suitability

Document Title: {title}
Category: {category}
Word Count: {word_count}

Content:
{content}

Provide the analysis in a structured format."""

WRITING_INSIGHTS_PROMPT = """Analyze this text and provide insights:
1. Reading level (Flesch-Kincaid grade)
2. Tone analysis
3. Pacing assessment
4. Vocabulary richness
5. Sentence structure variety

Text:
{content}

Provide specific metrics and observations."""

# "1. ", "2) ", "3:" and similar enumeration prefixes
TITLE_ENUMERATION_PATTERN = re.compile(r"^\d+[.):]\s*")


# =============================================================================
# Builders
# =============================================================================


def build_prompt(
    text: str,
    assistance: AssistanceType,
    context: AIContext | None = None,
) -> str:
    """Build the prompt for one assistance request.

    Args:
        text: The user's text the request operates on.
        assistance: The assistance kind and its associated data.
        context: Optional story context. Ignored by kinds that do not use it.

    Returns:
        The prompt string sent to the text generator.
    """
    skeleton = PROMPT_SKELETONS[assistance.kind]

    fields = {
        "tone": assistance.tone.display_name.lower() if assistance.tone else "",
        "instruction": assistance.instruction or "",
    }
    instruction = _fill(skeleton.instruction, fields)
    output_label = _fill(skeleton.output_label, fields)

    context_block = context.describe() if context and skeleton.uses_context else ""

    return (
        f"{context_block}{instruction}\n\n"
        f"{skeleton.input_label}:\n{text}\n\n"
        f"{output_label}:"
    )


def build_analysis_prompt(document: Document) -> str:
    """Build the whole-document analysis prompt."""
    return DOCUMENT_ANALYSIS_PROMPT.format(
        title=document.title,
        category=document.category.value,
        word_count=document.word_count,
        content=document.content,
    )


def build_insights_prompt(document: Document) -> str:
    """Build the readability and style insights prompt."""
    return WRITING_INSIGHTS_PROMPT.format(content=document.content)


def parse_titles(response: str) -> list[str]:
    """Turn a title-generation response into a clean list of titles.

    Lines are trimmed, empty lines dropped and a leading enumeration such
    as ``1.``, ``2)`` or ``3:`` removed.
    """
    titles = []
    for line in response.splitlines():
        line = line.strip()
        if line:
            titles.append(TITLE_ENUMERATION_PATTERN.sub("", line))
    return titles


def _fill(skeleton_text: str, fields: dict[str, str]) -> str:
    # Only the skeleton is formatted; user text is concatenated afterwards.
    return skeleton_text.format(**fields)
