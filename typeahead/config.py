"""Configuration for Typeahead Service."""

from functools import lru_cache
from typing import Literal, Tuple

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Hand-selected emojis given extra precedence in typeahead and in the
# emoji picker. "Popular" is historical; it was never measured. Growing
# this list has to fit the picker's layout.
POPULAR_EMOJIS: Tuple[str, ...] = (
    "1f44d",  # +1
    "1f389",  # tada
    "1f642",  # smile
    "2764",  # heart
    "1f6e0",  # working_on_it
    "1f419",  # octopus
)


class Settings(BaseSettings):
    """
    Typeahead service configuration.

    All settings can be overridden via environment variables.
    """

    # Service configuration
    SERVICE_NAME: str = Field(default="typeahead-service")
    SERVICE_VERSION: str = Field(default="1.0.0")
    SERVICE_HOST: str = Field(default="0.0.0.0")
    SERVICE_PORT: int = Field(default=8000, ge=1, le=65535)
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    LOG_JSON: bool = Field(default=True)

    # Typeahead
    TYPEAHEAD_MAX_RESULTS: int = Field(default=50, ge=1)
    TYPEAHEAD_POPULAR_EMOJIS: Tuple[str, ...] = Field(default=POPULAR_EMOJIS)

    # CORS
    CORS_ORIGINS: str = Field(default="*")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
