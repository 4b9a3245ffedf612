"""Configuration management for the application."""

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./ats.db")

    # Backend Server
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=5000)

    # Frontend origins allowed by CORS
    cors_origins: list[str] = Field(default=["http://localhost:3000"])

    # Pagination defaults shared by every CRUD controller
    default_page_size: int = Field(default=10)
    max_page_size: int = Field(default=100)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: Literal["text", "json"] = "text"

    @model_validator(mode="after")
    def check_page_sizes(self) -> "Settings":
        """Ensure the default page size fits inside ``[1, max_page_size]``."""
        if self.max_page_size < 1:
            raise ValueError("max_page_size must be at least 1")
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise ValueError(
                f"default_page_size must be between 1 and max_page_size ({self.max_page_size})"
            )
        return self


# Global settings instance
settings = Settings()
