"""Concrete in-memory store implementations."""

from writers_app.strategies.stores.document_store import InMemoryDocumentStore
from writers_app.strategies.stores.models import Document, DocumentMetadata
from writers_app.strategies.stores.template_store import InMemoryTemplateStore

__all__ = [
    "Document",
    "DocumentMetadata",
    "InMemoryDocumentStore",
    "InMemoryTemplateStore",
]
