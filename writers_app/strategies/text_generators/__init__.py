"""Concrete text generator implementations."""

from writers_app.strategies.text_generators.anthropic import AnthropicTextGenerator

__all__ = [
    "AnthropicTextGenerator",
]
