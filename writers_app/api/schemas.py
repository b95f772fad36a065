"""API request and response schemas.

Pydantic v2 models for API serialization/deserialization.
"""

import uuid
from typing import Any

from pydantic import BaseModel, Field, field_validator

from writers_app.strategies.assistance.models import AIContext, AssistanceType
from writers_app.strategies.stores.models import Document
from writers_app.strategies.template_engine.models import (
    Placeholder,
    Template,
    TemplateCategory,
    TemplateMetadata,
)


# =============================================================================
# Template Schemas
# =============================================================================


class TemplateCreate(BaseModel):
    """Request schema for adding a template."""

    name: str = Field(min_length=1, max_length=255)
    category: TemplateCategory
    description: str = ""
    content: str
    placeholders: list[Placeholder] = Field(default_factory=list)
    metadata: TemplateMetadata = Field(default_factory=TemplateMetadata)

    def to_template(self) -> Template:
        return Template(**self.model_dump())


class TemplateListResponse(BaseModel):
    """Response for listing templates."""

    templates: list[Template]
    total: int


class RenderRequest(BaseModel):
    """Values used to create a document from a template."""

    values: dict[str, str] = Field(
        default_factory=dict,
        description="Replacement values keyed by placeholder key; 'title' names the document",
    )


# =============================================================================
# Document Schemas
# =============================================================================


class DocumentCreate(BaseModel):
    """Request schema for creating a blank document."""

    title: str = Field(min_length=1, max_length=512)
    category: TemplateCategory


class DocumentUpdate(BaseModel):
    """Partial update of a document. Omitted fields are left unchanged.

    ``word_count_goal`` may be sent as null to clear the goal. The other
    fields reject null.
    """

    title: str | None = Field(default=None, min_length=1, max_length=512)
    content: str | None = None
    word_count_goal: int | None = Field(default=None, ge=0)
    tags: list[str] | None = None
    notes: str | None = None

    @field_validator("title", "content", "tags", "notes")
    @classmethod
    def reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Field may be omitted but not null")
        return value

    def apply(self, document: Document) -> Document:
        """Return a validated copy of ``document`` with the supplied fields changed."""
        changes = self.model_dump(exclude_unset=True)
        metadata_changes = {
            key: changes.pop(key)
            for key in ("word_count_goal", "tags", "notes")
            if key in changes
        }
        data = document.model_dump(exclude={"word_count", "character_count", "reading_time"})
        data.update(changes)
        data["metadata"].update(metadata_changes)
        return Document.model_validate(data)


class DocumentListResponse(BaseModel):
    """Response for listing documents."""

    documents: list[Document]
    total: int


class DocumentProgress(BaseModel):
    """Progress towards a document's word count goal."""

    document: Document
    progress: float = Field(description="word_count / word_count_goal")


class ExportResponse(BaseModel):
    """A document rendered in one export format."""

    document_id: uuid.UUID
    format: str
    content: str


# =============================================================================
# Assistance Schemas
# =============================================================================


class AssistanceRequest(BaseModel):
    """Free-text assistance request."""

    text: str
    assistance: AssistanceType
    context: AIContext | None = None


class DocumentAssistanceRequest(BaseModel):
    """Options for assistance on a stored document."""

    apply: bool = Field(
        default=False,
        description="Append (continue) or replace (improve) the document content",
    )
    context: AIContext | None = None


class GeneratedTextResponse(BaseModel):
    """Generated text for a stored document."""

    document_id: uuid.UUID
    generated_content: str
    applied: bool = False


class TitleSuggestionsResponse(BaseModel):
    """Title options for a stored document."""

    document_id: uuid.UUID
    titles: list[str]


# =============================================================================
# Error Schemas
# =============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str = Field(description="Error message")
    error_code: str | None = Field(default=None, description="Application-specific error code")
    extra: dict[str, Any] | None = Field(default=None, description="Additional error context")
