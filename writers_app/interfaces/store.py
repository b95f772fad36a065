"""Abstract base class for record stores.

The Strategy Pattern allows the in-memory stores to be swapped for
other backends without touching the application layer.
"""

import uuid
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from writers_app.strategies.template_engine.models import TemplateCategory

RecordT = TypeVar("RecordT")


class BaseStore(ABC, Generic[RecordT]):
    """Abstract base class for keyed record storage.

    Lookups never raise for unknown ids; they return ``None`` and leave
    the decision to the caller.

    Example:
        ```python
        class InMemoryTemplateStore(BaseStore[Template]):
            def get(self, record_id: uuid.UUID) -> Template | None:
                return self._templates.get(record_id)
        ```
    """

    @abstractmethod
    def add(self, record: RecordT) -> None:
        """Store a new record under its id."""
        ...

    @abstractmethod
    def get(self, record_id: uuid.UUID) -> RecordT | None:
        """Return the record with ``record_id``, or None if unknown."""
        ...

    @abstractmethod
    def list_all(self) -> list[RecordT]:
        """Return every record in the store's listing order."""
        ...

    @abstractmethod
    def list_by_category(self, category: TemplateCategory) -> list[RecordT]:
        """Return records of one category in the store's listing order."""
        ...

    @abstractmethod
    def search(self, query: str) -> list[RecordT]:
        """Case-insensitive substring search in the store's listing order.

        Args:
            query: Text to look for.

        Returns:
            Matching records.
        """
        ...

    @abstractmethod
    def update(self, record: RecordT) -> None:
        """Replace the record that shares ``record.id``."""
        ...

    @abstractmethod
    def delete(self, record_id: uuid.UUID) -> None:
        """Remove a record. Unknown ids are ignored."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored records."""
        ...


class RecordNotFoundError(LookupError):
    """Raised by the application layer when a referenced record is missing."""

    def __init__(self, record_id: uuid.UUID) -> None:
        self.record_id = record_id
        super().__init__(f"{self.record_type} not found: {record_id}")

    record_type = "Record"


class TemplateNotFoundError(RecordNotFoundError):
    """No template exists with the requested id."""

    record_type = "Template"


class DocumentNotFoundError(RecordNotFoundError):
    """No document exists with the requested id."""

    record_type = "Document"
