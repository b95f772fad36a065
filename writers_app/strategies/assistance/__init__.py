"""Writing assistance request building."""

from writers_app.strategies.assistance.models import (
    AIContext,
    AIModel,
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

__all__ = [
    "AIContext",
    "AIModel",
    "AIResponse",
    "AssistanceKind",
    "AssistanceType",
    "DocumentAnalysis",
    "WritingInsights",
    "WritingTone",
    "build_analysis_prompt",
    "build_insights_prompt",
    "build_prompt",
    "parse_titles",
]
