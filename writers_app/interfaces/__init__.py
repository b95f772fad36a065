"""Abstract base classes for application strategies."""

from writers_app.interfaces.exporter import BaseExporter, ExportFormat
from writers_app.interfaces.store import (
    BaseStore,
    DocumentNotFoundError,
    RecordNotFoundError,
    TemplateNotFoundError,
)
from writers_app.interfaces.text_generator import (
    AIDisabledError,
    APIStatusError,
    AuthenticationError,
    BaseTextGenerator,
    InvalidEndpointError,
    MalformedResponseError,
    NetworkError,
    TextGenerationError,
)

__all__ = [
    "AIDisabledError",
    "APIStatusError",
    "AuthenticationError",
    "BaseExporter",
    "BaseStore",
    "BaseTextGenerator",
    "DocumentNotFoundError",
    "ExportFormat",
    "InvalidEndpointError",
    "MalformedResponseError",
    "NetworkError",
    "RecordNotFoundError",
    "TemplateNotFoundError",
    "TextGenerationError",
]
