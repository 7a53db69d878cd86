"""Application configuration."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Geocoder settings.

    Environment variables will be loaded and validated using Pydantic. The
    provider adapters never read these directly; only the registry does.
    """

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    # Transport Settings
    GEOCODING_TIMEOUT: int = Field(default=10, gt=0)
    GEOCODING_MAX_REDIRECTS: int = Field(default=20, ge=0)
    GEOCODING_MAX_RETRIES: int = Field(default=2, ge=0)
    GEOCODING_USER_AGENT: str = "spatial-geocoder/0.1.0"

    # API Keys
    GOOGLE_API_KEY: str | None = None
    HERE_API_KEY: str | None = None
    TOMTOM_API_KEY: str | None = None
    TAMU_API_KEY: str | None = None

    # Reverse geocoding
    HERE_LOCALE: str = "en-US"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",  # Allow extra fields in environment
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.lower()
        if level not in ("debug", "info", "warning", "error", "critical"):
            raise ValueError(f"Unknown log level: {v}")
        return level.upper()


# Create settings instance
settings = Settings()
