"""HTML exporter.

Renders a fixed, minimal standalone page. Title and content are escaped;
the content keeps its line breaks inside a ``<pre>`` block.
"""

from html import escape

from writers_app.interfaces.exporter import BaseExporter, ExportFormat, format_date
from writers_app.strategies.stores.models import Document

HTML_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>{title}</title>
    <meta charset="UTF-8">
    <style>
        body {{ font-family: Georgia, serif; max-width: 800px; margin: 0 auto; padding: 20px; }}
        h1 {{ color: #333; }}
        .metadata {{ color: #666; font-size: 0.9em; }}
        .content {{ line-height: 1.6; }}
    </style>
</head>
<body>
    <h1>{title}</h1>
    <div class="metadata">
        <p>Category: {category}</p>
        <p>Word Count: {word_count}</p>
        <p>Created: {created}</p>
    </div>
    <div class="content">
        <pre>{content}</pre>
    </div>
</body>
</html>"""


class HTMLExporter(BaseExporter):
    """Exports a document as a standalone HTML page."""

    def export(self, document: Document) -> str:
        return HTML_PAGE_TEMPLATE.format(
            title=escape(document.title),
            category=escape(document.category.value),
            word_count=document.word_count,
            created=format_date(document.metadata.created),
            content=escape(document.content),
        )

    @property
    def format(self) -> ExportFormat:
        return ExportFormat.HTML

    @property
    def file_extension(self) -> str:
        return ".html"
