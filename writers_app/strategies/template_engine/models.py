"""Template engine domain models.

Pydantic models for templates and their placeholder definitions.
These models live here to avoid circular imports with the API layer.
"""

import enum
import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from writers_app.strategies.stores.models import Document


def utcnow() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class TemplateCategory(str, enum.Enum):
    """Categories shared by templates and documents."""

    NOVEL = "Novel"
    SHORT_STORY = "Short Story"
    SCREENPLAY = "Screenplay"
    BLOG_POST = "Blog Post"
    ARTICLE = "Article"
    ESSAY = "Essay"
    POETRY = "Poetry"
    BUSINESS_LETTER = "Business Letter"
    PROPOSAL = "Proposal"
    RESUME = "Resume"
    OTHER = "Other"


class Placeholder(BaseModel):
    """Declared metadata for one ``{{key}}`` marker."""

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    key: str = Field(min_length=1, description="Marker key without braces")
    label: str = Field(description="Human-readable prompt for the value")
    description: str = Field(default="", description="Optional input hint")
    default_value: str | None = Field(
        default=None, description="Used when no value is supplied"
    )
    required: bool = Field(default=True)


class TemplateMetadata(BaseModel):
    """Authoring metadata attached to a template."""

    model_config = ConfigDict(frozen=True)

    created: datetime = Field(default_factory=utcnow)
    modified: datetime = Field(default_factory=utcnow)
    author: str | None = None
    version: str = "1.0"
    tags: list[str] = Field(default_factory=list)


class Template(BaseModel):
    """A named writing template with ordered placeholder definitions.

    Markers in ``content`` without a matching placeholder are allowed;
    the renderer leaves them in the output verbatim.
    """

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    name: str = Field(min_length=1)
    category: TemplateCategory
    description: str = ""
    content: str = ""
    placeholders: list[Placeholder] = Field(default_factory=list)
    metadata: TemplateMetadata = Field(default_factory=TemplateMetadata)

    def get_placeholder(self, key: str) -> Placeholder | None:
        """Return the placeholder declared for ``key``, if any."""
        for placeholder in self.placeholders:
            if placeholder.key == key:
                return placeholder
        return None

    def placeholder_keys(self) -> list[str]:
        """Return marker keys in the order they appear in the content."""
        from writers_app.strategies.template_engine.renderer import extract_placeholder_keys

        return extract_placeholder_keys(self.content)

    def missing_required(self, values: dict[str, str]) -> list[str]:
        """Return keys of required placeholders that cannot be filled.

        A placeholder is fillable when ``values`` holds a non-empty string
        for it or when it declares a default value.
        """
        return [
            p.key
            for p in self.placeholders
            if p.required and not values.get(p.key) and p.default_value is None
        ]

    def create_document(self, values: dict[str, str]) -> "Document":
        """Render this template into a new document."""
        from writers_app.strategies.template_engine.renderer import create_document

        return create_document(self, values)
