"""Configuration module using pydantic-settings for type-safe env variable loading."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BRAVE_SEARCH_API_URL = "https://api.search.brave.com/res/v1/web/search"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Uses pydantic-settings for type-safe configuration with validation.
    Automatically loads from .env file if present.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Brave Search API Configuration
    brave_search_api_key: str = Field(
        default="",
        description="Brave Web Search subscription token (empty disables competitor search)",
    )
    brave_search_api_url: str = Field(
        default=BRAVE_SEARCH_API_URL,
        description="Brave Web Search endpoint",
    )

    # Search Configuration
    search_timeout: float = Field(
        default=5.0,
        ge=1.0,
        le=60.0,
        description="Client-side timeout in seconds for the search request",
    )
    search_result_count: int = Field(
        default=10,
        ge=1,
        le=20,
        description="Number of raw results requested from the search service (Brave max is 20)",
    )

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # API Server Configuration
    api_cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"],
        description="Origins allowed to call the HTTP API (JSON list in env)",
    )


# Global settings instance
settings = Settings()
