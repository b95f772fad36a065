"""Writing assistance domain models.

An assistance request is a kind tag plus the data some kinds carry:
a target tone for ``change-tone`` and a free-text instruction for
``custom``.
"""

import enum
import uuid
from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from writers_app.strategies.template_engine.models import utcnow


class AssistanceKind(str, enum.Enum):
    """Writing-help operations understood by the prompt builder."""

    CONTINUE = "continue"
    IMPROVE = "improve"
    GRAMMAR_CHECK = "grammar-check"
    STYLE_SUGGESTIONS = "style-suggestions"
    OUTLINE = "outline"
    BRAINSTORM = "brainstorm"
    CHARACTER_DEVELOPMENT = "character-development"
    PLOT_SUGGESTIONS = "plot-suggestions"
    DIALOGUE_IMPROVEMENT = "dialogue-improvement"
    DESCRIPTION_ENHANCEMENT = "description-enhancement"
    TITLE_GENERATION = "title-generation"
    SUMMARIZE = "summarize"
    EXPAND = "expand"
    SIMPLIFY = "simplify"
    CHANGE_TONE = "change-tone"
    CUSTOM = "custom"


class WritingTone(str, enum.Enum):
    """Target tones for ``change-tone`` requests."""

    PROFESSIONAL = "professional"
    CASUAL = "casual"
    ACADEMIC = "academic"
    CREATIVE = "creative"
    HUMOROUS = "humorous"
    SERIOUS = "serious"
    ENTHUSIASTIC = "enthusiastic"
    EMPATHETIC = "empathetic"
    PERSUASIVE = "persuasive"
    INFORMATIVE = "informative"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class AIModel(str, enum.Enum):
    """Known Anthropic model identifiers."""

    CLAUDE_35_SONNET = "claude-3-5-sonnet-20241022"
    CLAUDE_3_OPUS = "claude-3-opus-20240229"
    CLAUDE_3_SONNET = "claude-3-sonnet-20240229"
    CLAUDE_3_HAIKU = "claude-3-haiku-20240307"

    @property
    def display_name(self) -> str:
        return _MODEL_DISPLAY_NAMES[self]


_MODEL_DISPLAY_NAMES = {
    AIModel.CLAUDE_35_SONNET: "Claude 3.5 Sonnet",
    AIModel.CLAUDE_3_OPUS: "Claude 3 Opus",
    AIModel.CLAUDE_3_SONNET: "Claude 3 Sonnet",
    AIModel.CLAUDE_3_HAIKU: "Claude 3 Haiku",
}


_KIND_DISPLAY_NAMES = {
    AssistanceKind.CONTINUE: "Continue Writing",
    AssistanceKind.IMPROVE: "Improve Text",
    AssistanceKind.GRAMMAR_CHECK: "Grammar Check",
    AssistanceKind.STYLE_SUGGESTIONS: "Style Suggestions",
    AssistanceKind.OUTLINE: "Generate Outline",
    AssistanceKind.BRAINSTORM: "Brainstorm Ideas",
    AssistanceKind.CHARACTER_DEVELOPMENT: "Character Development",
    AssistanceKind.PLOT_SUGGESTIONS: "Plot Suggestions",
    AssistanceKind.DIALOGUE_IMPROVEMENT: "Dialogue Improvement",
    AssistanceKind.DESCRIPTION_ENHANCEMENT: "Description Enhancement",
    AssistanceKind.TITLE_GENERATION: "Title Generation",
    AssistanceKind.SUMMARIZE: "Summarize",
    AssistanceKind.EXPAND: "Expand Text",
    AssistanceKind.SIMPLIFY: "Simplify Text",
}


class AssistanceType(BaseModel):
    """A tagged assistance operation.

    ``tone`` is required for ``change-tone`` and ``instruction`` for
    ``custom``; both are rejected for every other kind.
    """

    kind: AssistanceKind
    tone: WritingTone | None = None
    instruction: str | None = None

    @model_validator(mode="after")
    def check_associated_data(self) -> "AssistanceType":
        """Validate that the kind carries exactly the data it needs."""
        if self.kind is AssistanceKind.CHANGE_TONE:
            if self.tone is None:
                raise ValueError("change-tone requires a tone")
        elif self.tone is not None:
            raise ValueError(f"{self.kind.value} does not take a tone")

        if self.kind is AssistanceKind.CUSTOM:
            if not self.instruction or not self.instruction.strip():
                raise ValueError("custom requires a non-empty instruction")
        elif self.instruction is not None:
            raise ValueError(f"{self.kind.value} does not take an instruction")

        return self

    @classmethod
    def of(cls, kind: AssistanceKind) -> "AssistanceType":
        """Build a request for a kind that carries no data."""
        return cls(kind=kind)

    @classmethod
    def change_tone(cls, tone: WritingTone) -> "AssistanceType":
        return cls(kind=AssistanceKind.CHANGE_TONE, tone=tone)

    @classmethod
    def custom(cls, instruction: str) -> "AssistanceType":
        return cls(kind=AssistanceKind.CUSTOM, instruction=instruction)

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. ``Change Tone to Casual``."""
        if self.kind is AssistanceKind.CHANGE_TONE:
            return f"Change Tone to {self.tone.display_name}"
        if self.kind is AssistanceKind.CUSTOM:
            return "Custom Request"
        return _KIND_DISPLAY_NAMES[self.kind]


class AIContext(BaseModel):
    """Optional story context prepended to most prompts."""

    genre: str | None = None
    target_audience: str | None = None
    existing_characters: list[str] | None = None
    plot_summary: str | None = None
    additional_notes: str | None = None

    def describe(self) -> str:
        """Render the context block, or an empty string when nothing is set."""
        parts: list[str] = []

        if self.genre is not None:
            parts.append(f"Genre: {self.genre}")
        if self.target_audience is not None:
            parts.append(f"Target Audience: {self.target_audience}")
        if self.existing_characters:
            parts.append(f"Characters: {', '.join(self.existing_characters)}")
        if self.plot_summary is not None:
            parts.append(f"Plot: {self.plot_summary}")
        if self.additional_notes is not None:
            parts.append(f"Notes: {self.additional_notes}")

        if not parts:
            return ""
        return "Context:\n" + "\n".join(parts) + "\n\n"


class AIResponse(BaseModel):
    """Result of one assistance request."""

    request_type: AssistanceType
    original_text: str
    generated_content: str
    model: str
    timestamp: datetime = Field(default_factory=utcnow)


class DocumentAnalysis(BaseModel):
    """Free-form feedback on a whole document."""

    document_id: uuid.UUID
    analysis: str
    timestamp: datetime = Field(default_factory=utcnow)


class WritingInsights(BaseModel):
    """Readability and style observations on a document."""

    document_id: uuid.UUID
    insights: str
    timestamp: datetime = Field(default_factory=utcnow)
