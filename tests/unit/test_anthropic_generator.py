"""Unit tests for the Anthropic Messages API text generator."""

import asyncio
import json

import httpx
import pytest

from writers_app.interfaces.text_generator import (
    APIStatusError,
    AuthenticationError,
    InvalidEndpointError,
    MalformedResponseError,
    NetworkError,
    TextGenerationError,
)
from writers_app.strategies.text_generators.anthropic import AnthropicTextGenerator


def make_generator(handler, **kwargs) -> AnthropicTextGenerator:
    """Create a generator whose requests are answered by ``handler``."""
    return AnthropicTextGenerator(
        api_key="test-key",
        model="claude-test",
        max_tokens=256,
        temperature=0.5,
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


def success(text: str = "Once upon a time") -> httpx.Response:
    return httpx.Response(200, json={"content": [{"type": "text", "text": text}]})


# =============================================================================
# Request Tests
# =============================================================================


class TestRequest:
    """Test suite for the outgoing request."""

    def test_request_body_and_headers(self):
        """Test that one message is posted with the required headers."""
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["request"] = request
            return success()

        generator = make_generator(handler)
        asyncio.run(generator.generate("Write a story"))

        request = captured["request"]
        assert request.method == "POST"
        assert str(request.url) == "https://api.anthropic.com/v1/messages"
        assert request.headers["x-api-key"] == "test-key"
        assert request.headers["anthropic-version"] == "2023-06-01"
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == {
            "model": "claude-test",
            "max_tokens": 256,
            "temperature": 0.5,
            "messages": [{"role": "user", "content": "Write a story"}],
        }

    def test_custom_endpoint_and_version(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["request"] = request
            return success()

        generator = make_generator(
            handler,
            api_url="https://proxy.example.com/messages",
            api_version="2024-01-01",
        )
        asyncio.run(generator.generate("prompt"))

        assert str(captured["request"].url) == "https://proxy.example.com/messages"
        assert captured["request"].headers["anthropic-version"] == "2024-01-01"

    def test_temperature_out_of_range(self):
        with pytest.raises(ValueError):
            AnthropicTextGenerator(api_key="k", temperature=1.5)

    def test_model_property(self):
        assert make_generator(lambda request: success()).model == "claude-test"


# =============================================================================
# Response Tests
# =============================================================================


class TestResponse:
    """Test suite for response handling and the error taxonomy."""

    def test_returns_first_text_block(self):
        generator = make_generator(lambda request: success("Generated text"))

        assert asyncio.run(generator.generate("prompt")) == "Generated text"

    @pytest.mark.parametrize("status_code", [401, 403])
    def test_auth_failure(self, status_code):
        generator = make_generator(lambda request: httpx.Response(status_code, text="bad key"))

        with pytest.raises(AuthenticationError) as exc_info:
            asyncio.run(generator.generate("prompt"))

        assert exc_info.value.status_code == status_code
        assert exc_info.value.body == "bad key"

    def test_non_success_status(self):
        generator = make_generator(lambda request: httpx.Response(529, text="overloaded"))

        with pytest.raises(APIStatusError) as exc_info:
            asyncio.run(generator.generate("prompt"))

        assert not isinstance(exc_info.value, AuthenticationError)
        assert exc_info.value.status_code == 529
        assert exc_info.value.body == "overloaded"

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="not json"),
            httpx.Response(200, json={"content": []}),
            httpx.Response(200, json={"content": [{"type": "tool_use"}]}),
            httpx.Response(200, json=["unexpected"]),
        ],
    )
    def test_malformed_response(self, response):
        generator = make_generator(lambda request: response)

        with pytest.raises(MalformedResponseError):
            asyncio.run(generator.generate("prompt"))

    def test_network_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        generator = make_generator(handler)

        with pytest.raises(NetworkError):
            asyncio.run(generator.generate("prompt"))

    def test_timeout_is_network_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        generator = make_generator(handler)

        with pytest.raises(NetworkError):
            asyncio.run(generator.generate("prompt"))

    def test_invalid_endpoint(self):
        """Test that a URL without a scheme is reported as an invalid endpoint."""
        generator = AnthropicTextGenerator(api_key="k", api_url="not-a-url")

        with pytest.raises(InvalidEndpointError):
            asyncio.run(generator.generate("prompt"))

    def test_all_failures_share_base_class(self):
        generator = make_generator(lambda request: httpx.Response(500, text="oops"))

        with pytest.raises(TextGenerationError):
            asyncio.run(generator.generate("prompt"))
