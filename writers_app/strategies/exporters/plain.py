"""Plain text exporter."""

from writers_app.interfaces.exporter import BaseExporter, ExportFormat
from writers_app.strategies.stores.models import Document


class PlainTextExporter(BaseExporter):
    """Exports the document content as-is."""

    def export(self, document: Document) -> str:
        return document.content

    @property
    def format(self) -> ExportFormat:
        return ExportFormat.PLAIN_TEXT
