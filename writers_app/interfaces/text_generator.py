"""Abstract base class for text generation backends.

The Strategy Pattern allows any prompt-in, text-out backend to stand in
for the Anthropic Messages API.
"""

from abc import ABC, abstractmethod


class BaseTextGenerator(ABC):
    """Abstract base class for text generation strategies.

    Example:
        ```python
        class EchoGenerator(BaseTextGenerator):
            async def generate(self, prompt: str) -> str:
                return prompt

            @property
            def model(self) -> str:
                return "echo"
        ```
    """

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Generate text for a single prompt.

        Args:
            prompt: The complete prompt to send.

        Returns:
            The generated text.

        Raises:
            TextGenerationError: If the request fails for any reason.
        """
        ...

    @property
    @abstractmethod
    def model(self) -> str:
        """Return the model identifier used for generation."""
        ...


class TextGenerationError(Exception):
    """Base exception for failed text generation requests."""

    pass


class InvalidEndpointError(TextGenerationError):
    """The configured endpoint URL cannot be used."""

    pass


class NetworkError(TextGenerationError):
    """The request could not be sent or no response was received."""

    pass


class APIStatusError(TextGenerationError):
    """The endpoint answered with a non-success status code."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"API error (status {status_code}): {body}")


class AuthenticationError(APIStatusError):
    """The endpoint rejected the API key (401 or 403)."""

    pass


class MalformedResponseError(TextGenerationError):
    """A success response did not carry generated text where expected."""

    pass


class AIDisabledError(RuntimeError):
    """An AI operation was requested while no text generator is configured."""

    def __init__(self) -> None:
        super().__init__("AI features are disabled. Set ANTHROPIC_API_KEY to enable them.")
