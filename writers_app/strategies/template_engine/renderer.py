"""Placeholder substitution engine.

Renders template content by locating every ``{{key}}`` marker in a single
left-to-right scan of the original text and resolving each one on its own.
Substituted values are copied into the output and never rescanned, so a
value that itself looks like ``{{other}}`` appears verbatim.
"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Sequence, Union

from writers_app.strategies.template_engine.models import Placeholder, Template

if TYPE_CHECKING:
    from writers_app.strategies.stores.models import Document

# The first "}}" after "{{" closes a marker; keys cannot contain "}".
MARKER_PATTERN = re.compile(r"\{\{([^}]+)\}\}")

TITLE_KEY = "title"


@dataclass(frozen=True)
class Literal:
    """A span of content copied to the output unchanged."""

    text: str


@dataclass(frozen=True)
class Marker:
    """A ``{{key}}`` occurrence in the original content."""

    key: str
    raw: str


Segment = Union[Literal, Marker]


def tokenize(content: str) -> list[Segment]:
    """Split content into ordered literal and marker segments.

    An unterminated ``{{`` never matches and stays inside a literal span.

    Args:
        content: Template content.

    Returns:
        Segments that concatenate back to ``content``.
    """
    segments: list[Segment] = []
    position = 0

    for match in MARKER_PATTERN.finditer(content):
        if match.start() > position:
            segments.append(Literal(content[position:match.start()]))
        segments.append(Marker(key=match.group(1), raw=match.group(0)))
        position = match.end()

    if position < len(content):
        segments.append(Literal(content[position:]))

    return segments


def render(
    content: str,
    placeholders: Sequence[Placeholder],
    values: Mapping[str, str],
) -> str:
    """Substitute markers in ``content``.

    Each marker resolves to the supplied value, else the placeholder's
    default value, else stays as the literal ``{{key}}`` text.

    Args:
        content: Template content containing zero or more markers.
        placeholders: Placeholder definitions supplying default values.
        values: Caller-supplied replacement values keyed by marker key.

    Returns:
        The rendered text.
    """
    defaults = {
        p.key: p.default_value for p in placeholders if p.default_value is not None
    }

    parts: list[str] = []
    for segment in tokenize(content):
        if isinstance(segment, Literal):
            parts.append(segment.text)
        elif segment.key in values:
            parts.append(values[segment.key])
        elif segment.key in defaults:
            parts.append(defaults[segment.key])
        else:
            parts.append(segment.raw)

    return "".join(parts)


def create_document(template: Template, values: Mapping[str, str]) -> "Document":
    """Create a document from a template and a values mapping.

    The reserved ``title`` value names the document; without it the
    template name is used. Required placeholders are not enforced here.
    """
    from writers_app.strategies.stores.models import Document

    title = values[TITLE_KEY] if TITLE_KEY in values else template.name

    return Document(
        title=title,
        content=render(template.content, template.placeholders, values),
        template_id=template.id,
        category=template.category,
    )


def extract_placeholder_keys(content: str) -> list[str]:
    """Return marker keys in order of appearance, duplicates included."""
    return [match.group(1) for match in MARKER_PATTERN.finditer(content)]


def strip_markers(content: str) -> str:
    """Remove every marker from ``content``."""
    return MARKER_PATTERN.sub("", content)
