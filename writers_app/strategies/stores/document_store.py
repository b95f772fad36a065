"""In-memory document store.

The store is the only owner of document state: documents are copied on
the way in and on the way out, and it alone stamps ``metadata.modified``.
"""

import uuid
from collections.abc import Callable, Iterable
from datetime import datetime

from writers_app.interfaces.store import BaseStore
from writers_app.strategies.stores.models import Document
from writers_app.strategies.template_engine.models import TemplateCategory, utcnow


class InMemoryDocumentStore(BaseStore[Document]):
    """Document store backed by a dict keyed on document id.

    Listings, category filters and searches are sorted by
    ``metadata.modified``, most recent first.

    Attributes:
        clock: Callable returning the current time. Injectable for tests.
    """

    def __init__(self, clock: Callable[[], datetime] = utcnow) -> None:
        self._documents: dict[uuid.UUID, Document] = {}
        self._clock = clock

    def add(self, record: Document) -> None:
        self._documents[record.id] = record.model_copy(deep=True)

    def get(self, record_id: uuid.UUID) -> Document | None:
        document = self._documents.get(record_id)
        return document.model_copy(deep=True) if document is not None else None

    def list_all(self) -> list[Document]:
        return self._sorted(self._documents.values())

    def list_by_category(self, category: TemplateCategory) -> list[Document]:
        return self._sorted(d for d in self._documents.values() if d.category == category)

    def search(self, query: str) -> list[Document]:
        """Match ``query`` against document title or content."""
        needle = query.lower()
        return self._sorted(
            d
            for d in self._documents.values()
            if needle in d.title.lower() or needle in d.content.lower()
        )

    def update(self, record: Document) -> None:
        """Replace the stored document, stamping ``modified`` with now.

        Any ``modified`` value supplied by the caller is overwritten. An
        unknown id inserts the document.
        """
        stored = record.model_copy(deep=True)
        stored.metadata.modified = self._clock()
        self._documents[stored.id] = stored

    def delete(self, record_id: uuid.UUID) -> None:
        self._documents.pop(record_id, None)

    def count(self) -> int:
        return len(self._documents)

    def mark_opened(self, record_id: uuid.UUID) -> None:
        """Set ``last_opened`` to now. Unknown ids are ignored."""
        document = self._documents.get(record_id)
        if document is not None:
            document.metadata.last_opened = self._clock()

    def total_word_count(self) -> int:
        """Sum of word counts across all documents."""
        return sum(d.word_count for d in self._documents.values())

    def progress_by_goal(self) -> list[tuple[Document, float]]:
        """Return ``(document, word_count / goal)`` pairs, highest ratio first.

        Documents without a positive word count goal are skipped.
        """
        progress = [
            (d.model_copy(deep=True), d.word_count / d.metadata.word_count_goal)
            for d in self._documents.values()
            if d.metadata.word_count_goal
        ]
        return sorted(progress, key=lambda pair: pair[1], reverse=True)

    def recent(self, limit: int = 10) -> list[Document]:
        """Return the ``limit`` most recently modified documents."""
        return self.list_all()[: max(0, limit)]

    @staticmethod
    def _sorted(documents: Iterable[Document]) -> list[Document]:
        return [
            d.model_copy(deep=True)
            for d in sorted(documents, key=lambda d: d.metadata.modified, reverse=True)
        ]
