"""Core configuration and factory components."""

from writers_app.core.config import Settings, get_settings
from writers_app.core.factory import ComponentFactory

__all__ = [
    "Settings",
    "get_settings",
    "ComponentFactory",
]
