"""Unit tests for the HTTP API."""

import uuid

import pytest
from fastapi.testclient import TestClient

from tests.fakes import FakeTextGenerator
from writers_app.core.config import Settings
from writers_app.interfaces.text_generator import APIStatusError, AuthenticationError
from writers_app.main import create_app
from writers_app.services.assistant import WritingAssistant
from writers_app.services.workspace import WritersApp


def make_client(writers_app: WritersApp) -> TestClient:
    settings = Settings(_env_file=None, anthropic_api_key="")
    return TestClient(create_app(settings=settings, writers_app=writers_app))


@pytest.fixture
def client(writers_app):
    return make_client(writers_app)


@pytest.fixture
def ai_client(ai_writers_app):
    return make_client(ai_writers_app)


def short_story_id(client: TestClient) -> str:
    templates = client.get("/templates", params={"category": "Short Story"}).json()["templates"]
    return templates[0]["id"]


# =============================================================================
# Health Tests
# =============================================================================


class TestHealth:
    """Test suite for the health endpoint."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["ai_enabled"] is False


# =============================================================================
# Template Endpoint Tests
# =============================================================================


class TestTemplateEndpoints:
    """Test suite for /templates."""

    def test_list_templates(self, client):
        data = client.get("/templates").json()
        names = [t["name"] for t in data["templates"]]

        assert data["total"] == 7
        assert names == sorted(names)

    def test_filter_by_category(self, client):
        data = client.get("/templates", params={"category": "Screenplay"}).json()

        assert [t["name"] for t in data["templates"]] == ["Screenplay Scene"]

    def test_search(self, client):
        data = client.get("/templates", params={"q": "NOVEL"}).json()

        assert data["total"] >= 1

    def test_get_unknown_template(self, client):
        assert client.get(f"/templates/{uuid.uuid4()}").status_code == 404

    def test_invalid_id_is_validation_error(self, client):
        response = client.get("/templates/not-a-uuid")

        assert response.status_code == 422
        assert response.json()["detail"] == "Validation error"

    def test_create_get_delete_template(self, client):
        payload = {
            "name": "Haiku",
            "category": "Poetry",
            "content": "{{line_1}}\n{{line_2}}\n{{line_3}}",
            "placeholders": [
                {"key": "line_1", "label": "First line"},
                {"key": "line_2", "label": "Second line"},
                {"key": "line_3", "label": "Third line", "default_value": "silence"},
            ],
        }

        created = client.post("/templates", json=payload)
        assert created.status_code == 201
        template_id = created.json()["id"]

        assert client.get(f"/templates/{template_id}").json()["name"] == "Haiku"

        assert client.delete(f"/templates/{template_id}").status_code == 204
        assert client.get(f"/templates/{template_id}").status_code == 404

    def test_render_rejects_missing_required(self, client):
        response = client.post(
            f"/templates/{short_story_id(client)}/documents",
            json={"values": {"title": "Untold"}},
        )

        assert response.status_code == 422
        assert "author" in response.json()["detail"]

    def test_render_creates_document(self, client):
        values = {
            "title": "The Lighthouse",
            "author": "Ann",
            "act_one": "Storm.",
            "act_two": "Rescue.",
            "act_three": "Calm.",
        }

        response = client.post(
            f"/templates/{short_story_id(client)}/documents",
            json={"values": values},
        )

        assert response.status_code == 201
        document = response.json()
        assert document["title"] == "The Lighthouse"
        assert document["category"] == "Short Story"
        assert "~5000 words" in document["content"]
        assert client.get(f"/documents/{document['id']}").status_code == 200

    def test_render_unknown_template(self, client):
        response = client.post(f"/templates/{uuid.uuid4()}/documents", json={"values": {}})

        assert response.status_code == 404


# =============================================================================
# Document Endpoint Tests
# =============================================================================


class TestDocumentEndpoints:
    """Test suite for /documents."""

    def create(self, client, title="Draft", category="Essay") -> dict:
        response = client.post("/documents", json={"title": title, "category": category})
        assert response.status_code == 201
        return response.json()

    def test_create_and_get_marks_opened(self, client):
        document = self.create(client)
        assert document["metadata"]["last_opened"] is None

        fetched = client.get(f"/documents/{document['id']}").json()

        assert fetched["metadata"]["last_opened"] is not None

    def test_update_content(self, client):
        document = self.create(client)

        response = client.patch(
            f"/documents/{document['id']}",
            json={"content": "one two three", "word_count_goal": 6, "tags": ["draft"]},
        )

        assert response.status_code == 200
        updated = response.json()
        assert updated["title"] == "Draft"
        assert updated["word_count"] == 3
        assert updated["metadata"]["word_count_goal"] == 6
        assert updated["metadata"]["tags"] == ["draft"]

    @pytest.mark.parametrize("field", ["title", "content", "tags", "notes"])
    def test_update_rejects_null(self, client, field):
        """Test that an explicit null leaves the stored document usable."""
        document = self.create(client, title="Harbor")

        response = client.patch(f"/documents/{document['id']}", json={field: None})

        assert response.status_code == 422
        assert client.get("/documents", params={"q": "harbor"}).json()["total"] == 1
        assert client.get("/documents/statistics").status_code == 200

    def test_update_clears_goal_with_null(self, client):
        document = self.create(client)
        client.patch(f"/documents/{document['id']}", json={"word_count_goal": 10})

        response = client.patch(f"/documents/{document['id']}", json={"word_count_goal": None})

        assert response.status_code == 200
        assert response.json()["metadata"]["word_count_goal"] is None

    def test_update_unknown(self, client):
        response = client.patch(f"/documents/{uuid.uuid4()}", json={"content": "x"})

        assert response.status_code == 404

    def test_list_and_search(self, client):
        self.create(client, title="Sea Shanty", category="Poetry")
        self.create(client, title="Tax Memo", category="Business Letter")

        assert client.get("/documents").json()["total"] == 2
        assert client.get("/documents", params={"q": "shanty"}).json()["total"] == 1
        assert client.get("/documents", params={"category": "Poetry"}).json()["total"] == 1

    def test_delete(self, client):
        document = self.create(client)

        assert client.delete(f"/documents/{document['id']}").status_code == 204
        assert client.get(f"/documents/{document['id']}").status_code == 404

    def test_export(self, client):
        document = self.create(client, title="<Draft>")

        response = client.get(f"/documents/{document['id']}/export", params={"format": "html"})

        assert response.status_code == 200
        assert response.json()["format"] == "html"
        assert "&lt;Draft&gt;" in response.json()["content"]

    def test_export_unknown_document(self, client):
        response = client.get(f"/documents/{uuid.uuid4()}/export")

        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"
        assert response.json()["extra"]["record_type"] == "Document"

    def test_statistics(self, client):
        self.create(client, category="Novel")
        self.create(client, category="Novel")
        self.create(client, category="Article")

        stats = client.get("/documents/statistics").json()

        assert stats["total_documents"] == 3
        assert stats["documents_by_category"] == {"Novel": 2, "Article": 1}
        assert stats["total_templates"] == 7

    def test_recent_and_progress(self, client):
        document = self.create(client)
        client.patch(
            f"/documents/{document['id']}",
            json={"content": "one two", "word_count_goal": 4},
        )

        recent = client.get("/documents/recent", params={"limit": 1}).json()
        progress = client.get("/documents/progress").json()

        assert [d["id"] for d in recent["documents"]] == [document["id"]]
        assert progress[0]["progress"] == 0.5


# =============================================================================
# Assistance Endpoint Tests
# =============================================================================


class TestAssistanceEndpoints:
    """Test suite for AI assistance routes."""

    def test_disabled_returns_503(self, client):
        response = client.post(
            "/assistance",
            json={"text": "hi", "assistance": {"kind": "summarize"}},
        )

        assert response.status_code == 503
        assert response.json()["error_code"] == "AI_DISABLED"

    def test_free_text_assistance(self, ai_client):
        response = ai_client.post(
            "/assistance",
            json={
                "text": "hi",
                "assistance": {"kind": "change-tone", "tone": "casual"},
                "context": {"genre": "Comedy"},
            },
        )

        assert response.status_code == 200
        assert response.json()["generated_content"] == "generated"
        assert response.json()["model"] == "fake-model"

    def test_invalid_assistance_type(self, ai_client):
        response = ai_client.post(
            "/assistance",
            json={"text": "hi", "assistance": {"kind": "change-tone"}},
        )

        assert response.status_code == 422

    def test_continue_and_apply(self, ai_client):
        document = ai_client.post("/documents", json={"title": "Story", "category": "Novel"}).json()

        response = ai_client.post(
            f"/documents/{document['id']}/assistance/continue",
            json={"apply": True},
        )

        assert response.status_code == 200
        assert response.json()["applied"] is True
        assert ai_client.get(f"/documents/{document['id']}").json()["content"] == "generated"

    def test_improve_without_apply(self, ai_client):
        document = ai_client.post("/documents", json={"title": "Story", "category": "Novel"}).json()

        response = ai_client.post(f"/documents/{document['id']}/assistance/improve", json={})

        assert response.json()["generated_content"] == "generated"
        assert ai_client.get(f"/documents/{document['id']}").json()["content"] == ""

    def test_titles(self, writers_app):
        writers_app.enable_ai(WritingAssistant(FakeTextGenerator(["1. One\n2) Two"])))
        client = make_client(writers_app)
        document = client.post("/documents", json={"title": "Story", "category": "Novel"}).json()

        response = client.post(f"/documents/{document['id']}/assistance/titles", json={})

        assert response.json()["titles"] == ["One", "Two"]

    def test_analysis_and_insights(self, ai_client):
        document = ai_client.post("/documents", json={"title": "Story", "category": "Novel"}).json()

        analysis = ai_client.post(f"/documents/{document['id']}/assistance/analysis")
        insights = ai_client.post(f"/documents/{document['id']}/assistance/insights")

        assert analysis.json()["analysis"] == "generated"
        assert insights.json()["insights"] == "generated"

    def test_unknown_document(self, ai_client):
        response = ai_client.post(f"/documents/{uuid.uuid4()}/assistance/analysis")

        assert response.status_code == 404

    @pytest.mark.parametrize(
        "error, upstream_status",
        [(APIStatusError(500, "down"), 500), (AuthenticationError(401, "bad key"), 401)],
    )
    def test_ai_failure_returns_502(self, writers_app, error, upstream_status):
        writers_app.enable_ai(WritingAssistant(FakeTextGenerator([error])))
        client = make_client(writers_app)

        response = client.post(
            "/assistance",
            json={"text": "hi", "assistance": {"kind": "summarize"}},
        )

        assert response.status_code == 502
        assert response.json()["error_code"] == "AI_REQUEST_FAILED"
        assert response.json()["extra"]["upstream_status"] == upstream_status
