"""Application configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
and provides type-safe access throughout the application.
"""

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file. AI features are enabled only
    when ``ANTHROPIC_API_KEY`` is set.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Anthropic
    anthropic_api_key: str = Field(
        default="",
        description="Anthropic API key. Leave empty to disable AI features.",
    )
    anthropic_api_url: str = Field(
        default="https://api.anthropic.com/v1/messages",
        description="Messages endpoint URL.",
    )
    anthropic_api_version: str = Field(
        default="2023-06-01",
        description="Value sent in the anthropic-version header.",
    )

    # Text generation
    ai_provider: str = Field(
        default="anthropic",
        description="Text generator strategy to use: 'anthropic'.",
    )
    ai_model: str = Field(
        default="claude-3-5-sonnet-20241022",
        description="Model identifier sent with every request.",
    )
    ai_max_tokens: int = Field(
        default=4096,
        gt=0,
        description="Maximum number of tokens to generate.",
    )
    ai_temperature: float = Field(
        default=0.7,
        description="Sampling temperature between 0.0 and 1.0.",
    )
    ai_request_timeout: float = Field(
        default=60.0,
        gt=0,
        description="Seconds to wait for the text generation endpoint.",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Optional directory for info.log and error.log files.",
    )

    @field_validator("ai_temperature")
    @classmethod
    def validate_temperature(cls, v: float) -> float:
        """Ensure temperature is within the range accepted by the API."""
        if not 0.0 <= v <= 1.0:
            raise ValueError(f"ai_temperature must be between 0.0 and 1.0, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    @property
    def ai_enabled(self) -> bool:
        """Whether an API key is configured."""
        return bool(self.anthropic_api_key.strip())

    def configure_logging(self) -> None:
        """Configure structlog on top of the stdlib logging tree."""
        import structlog

        level = getattr(logging, self.log_level, logging.WARNING)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logger.setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings
