"""Anthropic Messages API text generator.

Sends one user message per request over httpx and returns the text of
the first content block.
"""

import httpx
import structlog

from writers_app.interfaces.text_generator import (
    APIStatusError,
    AuthenticationError,
    BaseTextGenerator,
    InvalidEndpointError,
    MalformedResponseError,
    NetworkError,
)

logger = structlog.stdlib.get_logger(__name__)

DEFAULT_API_URL = "https://api.anthropic.com/v1/messages"
DEFAULT_API_VERSION = "2023-06-01"


class AnthropicTextGenerator(BaseTextGenerator):
    """Text generator backed by the Anthropic Messages API.

    There is no retry or backoff: each call sends exactly one request and
    any failure is raised to the caller as a ``TextGenerationError``.

    Attributes:
        model: The model identifier sent with every request.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "claude-3-5-sonnet-20241022",
        max_tokens: int = 4096,
        temperature: float = 0.7,
        api_url: str = DEFAULT_API_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            api_key: Anthropic API key sent in the x-api-key header.
            model: Model identifier.
            max_tokens: Maximum number of tokens to generate.
            temperature: Sampling temperature between 0.0 and 1.0.
            api_url: Messages endpoint URL.
            api_version: Value of the anthropic-version header.
            timeout: Seconds to wait for the endpoint.
            transport: Optional httpx transport, used by tests.
        """
        if not 0.0 <= temperature <= 1.0:
            raise ValueError(f"temperature must be between 0.0 and 1.0, got {temperature}")

        self._api_key = api_key
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._api_url = api_url
        self._api_version = api_version
        self._timeout = timeout
        self._transport = transport

    def build_request_body(self, prompt: str) -> dict:
        """Return the JSON body for a single-message request."""
        return {
            "model": self._model,
            "max_tokens": self._max_tokens,
            "temperature": self._temperature,
            "messages": [
                {
                    "role": "user",
                    "content": prompt,
                }
            ],
        }

    async def generate(self, prompt: str) -> str:
        """Send ``prompt`` and return the generated text.

        Raises:
            InvalidEndpointError: If the endpoint URL is unusable.
            NetworkError: On transport failures and timeouts.
            AuthenticationError: On HTTP 401 or 403.
            APIStatusError: On any other non-200 status.
            MalformedResponseError: If the body lacks ``content[0].text``.
        """
        headers = {
            "x-api-key": self._api_key,
            "anthropic-version": self._api_version,
            "content-type": "application/json",
        }

        logger.debug("ai_request_sent", model=self._model, prompt_chars=len(prompt))

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self._api_url,
                    headers=headers,
                    json=self.build_request_body(prompt),
                )
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            logger.error("ai_invalid_url", url=self._api_url, error=str(e))
            raise InvalidEndpointError(f"Invalid API URL: {self._api_url}") from e
        except httpx.TransportError as e:
            logger.error("ai_network_error", url=self._api_url, error=str(e))
            raise NetworkError(f"Network error: {e}") from e

        if response.status_code != 200:
            logger.error("ai_request_failed", status=response.status_code, body=response.text)
            if response.status_code in (401, 403):
                raise AuthenticationError(response.status_code, response.text)
            raise APIStatusError(response.status_code, response.text)

        text = self._extract_text(response)
        logger.info(
            "ai_response_received",
            model=self._model,
            status=response.status_code,
            response_chars=len(text),
        )
        return text

    @staticmethod
    def _extract_text(response: httpx.Response) -> str:
        """Pull ``content[0].text`` out of a success response."""
        try:
            data = response.json()
        except ValueError as e:
            logger.error("ai_response_not_json", error=str(e))
            raise MalformedResponseError("Could not parse API response") from e

        content = data.get("content") if isinstance(data, dict) else None
        if not isinstance(content, list) or not content:
            raise MalformedResponseError("API response has no content blocks")

        first = content[0]
        text = first.get("text") if isinstance(first, dict) else None
        if not isinstance(text, str):
            raise MalformedResponseError("First content block has no text")

        return text

    @property
    def model(self) -> str:
        """Return the model name."""
        return self._model
