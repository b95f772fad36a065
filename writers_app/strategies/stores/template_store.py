"""In-memory template store."""

import uuid

from writers_app.interfaces.store import BaseStore
from writers_app.strategies.template_engine.defaults import default_templates
from writers_app.strategies.template_engine.models import Template, TemplateCategory


class InMemoryTemplateStore(BaseStore[Template]):
    """Template store backed by a dict keyed on template id.

    Listings are sorted by name in ordinal (code point) order. Templates
    are copied on write and on read, so callers never share the stored
    placeholder and tag lists.
    """

    def __init__(self, load_defaults: bool = True) -> None:
        """Initialize the store.

        Args:
            load_defaults: Whether to load the built-in templates.
        """
        self._templates: dict[uuid.UUID, Template] = {}

        if load_defaults:
            for template in default_templates():
                self.add(template)

    def add(self, record: Template) -> None:
        self._templates[record.id] = record.model_copy(deep=True)

    def get(self, record_id: uuid.UUID) -> Template | None:
        template = self._templates.get(record_id)
        return template.model_copy(deep=True) if template is not None else None

    def list_all(self) -> list[Template]:
        return self._sorted(self._templates.values())

    def list_by_category(self, category: TemplateCategory) -> list[Template]:
        return self._sorted(t for t in self._templates.values() if t.category == category)

    def search(self, query: str) -> list[Template]:
        """Match ``query`` against template name or description."""
        needle = query.lower()
        return self._sorted(
            t
            for t in self._templates.values()
            if needle in t.name.lower() or needle in t.description.lower()
        )

    def update(self, record: Template) -> None:
        self._templates[record.id] = record.model_copy(deep=True)

    def delete(self, record_id: uuid.UUID) -> None:
        self._templates.pop(record_id, None)

    def count(self) -> int:
        return len(self._templates)

    @staticmethod
    def _sorted(templates) -> list[Template]:
        return [t.model_copy(deep=True) for t in sorted(templates, key=lambda t: t.name)]
