"""Template engine strategies.

Implements template models, the built-in template set and atomic
placeholder substitution.
"""

from writers_app.strategies.template_engine.defaults import default_templates
from writers_app.strategies.template_engine.models import (
    Placeholder,
    Template,
    TemplateCategory,
    TemplateMetadata,
)
from writers_app.strategies.template_engine.renderer import (
    create_document,
    extract_placeholder_keys,
    render,
    strip_markers,
    tokenize,
)

__all__ = [
    "Placeholder",
    "Template",
    "TemplateCategory",
    "TemplateMetadata",
    "create_document",
    "default_templates",
    "extract_placeholder_keys",
    "render",
    "strip_markers",
    "tokenize",
]
