"""Document domain models.

Documents are created from templates or from scratch and owned by the
document store. Derived statistics are computed from the current content
on every access.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field, computed_field

from writers_app.strategies.template_engine.models import TemplateCategory, utcnow

WORDS_PER_MINUTE = 200


class DocumentMetadata(BaseModel):
    """Timestamps, goals and notes for a document."""

    created: datetime = Field(default_factory=utcnow)
    modified: datetime = Field(default_factory=utcnow)
    last_opened: datetime | None = None
    word_count_goal: int | None = Field(default=None, ge=0)
    tags: list[str] = Field(default_factory=list)
    notes: str = ""


class Document(BaseModel):
    """A writing document."""

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    title: str
    content: str = ""
    template_id: uuid.UUID | None = None
    category: TemplateCategory
    metadata: DocumentMetadata = Field(default_factory=DocumentMetadata)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def word_count(self) -> int:
        """Number of whitespace-separated words in the content."""
        return len(self.content.split())

    @computed_field  # type: ignore[prop-decorator]
    @property
    def character_count(self) -> int:
        """Number of characters in the content, spaces included."""
        return len(self.content)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def reading_time(self) -> int:
        """Estimated reading time in whole minutes, at least one."""
        return max(1, self.word_count // WORDS_PER_MINUTE)

    @property
    def paragraph_count(self) -> int:
        """Number of non-blank blocks separated by an empty line."""
        return sum(1 for block in self.content.split("\n\n") if block.strip())
