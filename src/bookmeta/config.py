"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BookmetaSettings(BaseSettings):
    """Application configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="BOOKMETA_",
    )

    # Sources
    openbd_base_url: str = Field(
        default="https://api.openbd.jp/v1",
        description="openBD API base URL",
    )
    openbd_enabled: bool = Field(
        default=True,
        description="Query openBD (primary source)",
    )
    google_books_base_url: str = Field(
        default="https://www.googleapis.com/books/v1",
        description="Google Books API base URL",
    )
    google_books_api_key: str | None = Field(
        default=None,
        description="Google Books API key (optional, increases rate limits)",
    )
    google_books_enabled: bool = Field(
        default=True,
        description="Query Google Books (identifier and keyword fallback)",
    )
    user_agent: str = Field(
        default="bookmeta/0.1",
        description="User-Agent header sent to sources",
    )

    # Resolution
    request_timeout: float = Field(
        default=10.0,
        gt=0.0,
        description="Per-request timeout in seconds",
    )
    total_timeout: float | None = Field(
        default=30.0,
        description="Deadline for a whole resolution in seconds (unset to disable)",
    )
    keyword_max_results: int = Field(
        default=10,
        ge=1,
        le=40,
        description="maxResults sent with keyword searches",
    )
    validate_isbn: bool = Field(
        default=False,
        description="Reject invalid ISBN-13 input before any network call",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache
def get_settings() -> BookmetaSettings:
    """Get cached settings instance."""
    return BookmetaSettings()
