"""Concrete document exporter implementations."""

from writers_app.strategies.exporters.html import HTMLExporter
from writers_app.strategies.exporters.markdown import MarkdownExporter
from writers_app.strategies.exporters.plain import PlainTextExporter

__all__ = [
    "HTMLExporter",
    "MarkdownExporter",
    "PlainTextExporter",
]
