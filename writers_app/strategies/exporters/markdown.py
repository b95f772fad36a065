"""Markdown exporter.

Prefixes the content with a title heading and a bold-labelled metadata
block, separated from the body by a horizontal rule.
"""

from writers_app.interfaces.exporter import BaseExporter, ExportFormat, format_date
from writers_app.strategies.stores.models import Document


class MarkdownExporter(BaseExporter):
    """Exports a document as Markdown with a metadata header."""

    def export(self, document: Document) -> str:
        """Render title, category, dates, word count and content."""
        return (
            f"# {document.title}\n"
            "\n"
            f"**Category:** {document.category.value}\n"
            f"**Created:** {format_date(document.metadata.created)}\n"
            f"**Modified:** {format_date(document.metadata.modified)}\n"
            f"**Word Count:** {document.word_count}\n"
            "\n"
            "---\n"
            "\n"
            f"{document.content}"
        )

    @property
    def format(self) -> ExportFormat:
        return ExportFormat.MARKDOWN

    @property
    def file_extension(self) -> str:
        return ".md"
