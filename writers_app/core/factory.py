"""Component Factory for strategy instantiation.

The Factory Pattern allows the application to instantiate
different strategy implementations at runtime based on
configuration or environment variables.
"""

import logging

from writers_app.core.config import Settings, get_settings
from writers_app.interfaces.exporter import BaseExporter, ExportFormat
from writers_app.interfaces.text_generator import BaseTextGenerator
from writers_app.services.assistant import WritingAssistant
from writers_app.services.workspace import WritersApp
from writers_app.strategies.exporters import HTMLExporter, MarkdownExporter, PlainTextExporter
from writers_app.strategies.text_generators import AnthropicTextGenerator

logger = logging.getLogger(__name__)


class ComponentFactory:
    """Factory for creating component instances based on configuration.

    Example:
        ```python
        factory = ComponentFactory(get_settings())

        app = factory.create_writers_app()
        if app.is_ai_enabled:
            ...
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the factory with optional settings.

        Args:
            settings: Application settings. If None, uses global settings.
        """
        self._settings = settings or get_settings()
        self._text_generator_cache: BaseTextGenerator | None = None
        self._exporter_cache: dict[ExportFormat, BaseExporter] = {}

    def get_text_generator(self, provider: str | None = None) -> BaseTextGenerator | None:
        """Get a text generator for the configured provider.

        Args:
            provider: The provider to instantiate. If None, uses settings.

        Returns:
            A BaseTextGenerator implementation, or None when no API key is
            configured.

        Raises:
            ValueError: If the provider is unknown.
        """
        if not self._settings.ai_enabled:
            logger.info("No API key configured; AI features disabled")
            return None

        if self._text_generator_cache is None or provider is not None:
            provider = provider or self._settings.ai_provider

            logger.info(f"Instantiating text generator: {provider}")

            match provider:
                case "anthropic":
                    self._text_generator_cache = AnthropicTextGenerator(
                        api_key=self._settings.anthropic_api_key,
                        model=self._settings.ai_model,
                        max_tokens=self._settings.ai_max_tokens,
                        temperature=self._settings.ai_temperature,
                        api_url=self._settings.anthropic_api_url,
                        api_version=self._settings.anthropic_api_version,
                        timeout=self._settings.ai_request_timeout,
                    )
                case _:
                    raise ValueError(
                        f"Unknown text generator provider: {provider}. "
                        f"Valid options: 'anthropic'"
                    )

        return self._text_generator_cache

    def get_assistant(self) -> WritingAssistant | None:
        """Get a writing assistant, or None when AI features are disabled."""
        generator = self.get_text_generator()
        if generator is None:
            return None
        return WritingAssistant(generator)

    def get_exporter(self, export_format: ExportFormat | str) -> BaseExporter:
        """Get an exporter for the given format.

        Raises:
            ValueError: If the format is unknown.
        """
        export_format = ExportFormat(export_format)

        if export_format not in self._exporter_cache:
            match export_format:
                case ExportFormat.PLAIN_TEXT:
                    exporter: BaseExporter = PlainTextExporter()
                case ExportFormat.MARKDOWN:
                    exporter = MarkdownExporter()
                case ExportFormat.HTML:
                    exporter = HTMLExporter()
            self._exporter_cache[export_format] = exporter

        return self._exporter_cache[export_format]

    def create_writers_app(self) -> WritersApp:
        """Create an application instance with its own empty document store."""
        return WritersApp(
            assistant=self.get_assistant(),
            exporters={fmt: self.get_exporter(fmt) for fmt in ExportFormat},
        )

    def clear_cache(self) -> None:
        """Clear all cached component instances.

        This forces new instances to be created on next access.
        """
        self._text_generator_cache = None
        self._exporter_cache.clear()
        logger.debug("Component factory cache cleared")
