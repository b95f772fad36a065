"""Shared test fixtures."""

import pytest

from tests.fakes import FakeClock, FakeTextGenerator
from writers_app.interfaces.text_generator import TextGenerationError
from writers_app.services.assistant import WritingAssistant
from writers_app.services.workspace import WritersApp
from writers_app.strategies.stores.document_store import InMemoryDocumentStore
from writers_app.strategies.stores.template_store import InMemoryTemplateStore


@pytest.fixture
def fake_generator():
    return FakeTextGenerator()


@pytest.fixture
def failing_generator():
    return FakeTextGenerator([TextGenerationError("boom")])


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def writers_app(clock):
    """Application with the built-in templates and AI disabled."""
    return WritersApp(
        template_store=InMemoryTemplateStore(),
        document_store=InMemoryDocumentStore(clock=clock),
    )


@pytest.fixture
def ai_writers_app(clock, fake_generator):
    """Application with the built-in templates and a fake text generator."""
    return WritersApp(
        template_store=InMemoryTemplateStore(),
        document_store=InMemoryDocumentStore(clock=clock),
        assistant=WritingAssistant(fake_generator),
    )
