"""Abstract base class for document export strategies."""

import enum
from abc import ABC, abstractmethod
from datetime import datetime

from writers_app.strategies.stores.models import Document


class ExportFormat(str, enum.Enum):
    """Supported export formats."""

    PLAIN_TEXT = "plain"
    MARKDOWN = "markdown"
    HTML = "html"


class BaseExporter(ABC):
    """Abstract base class for rendering a document to a string.

    Example:
        ```python
        class PlainTextExporter(BaseExporter):
            def export(self, document: Document) -> str:
                return document.content
        ```
    """

    @abstractmethod
    def export(self, document: Document) -> str:
        """Render ``document`` in this exporter's format.

        Args:
            document: The document to render.

        Returns:
            The rendered document.
        """
        ...

    @property
    @abstractmethod
    def format(self) -> ExportFormat:
        """Return the format this exporter produces."""
        ...

    @property
    def file_extension(self) -> str:
        """Return the conventional file extension, dot included."""
        return ".txt"


def format_date(value: datetime) -> str:
    """Format a timestamp as e.g. ``Oct 16, 2026 at 3:04 PM``."""
    hour = value.strftime("%I").lstrip("0") or "12"
    return f"{value.strftime('%b')} {value.day}, {value.year} at {hour}:{value.strftime('%M %p')}"
