"""Application services."""

from writers_app.services.assistant import WritingAssistant
from writers_app.services.workspace import AppStatistics, WritersApp

__all__ = [
    "AppStatistics",
    "WritersApp",
    "WritingAssistant",
]
