"""Application configuration."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Geocoder settings.

    Environment variables will be loaded and validated using Pydantic.
    """

    # ArcGIS Settings
    ARCGIS_USE_HTTPS: bool = True
    ARCGIS_SCORE_THRESHOLD: float | None = Field(default=None, ge=0, le=100)
    ARCGIS_ALL_RESULTS: bool = False
    ARCGIS_TIMEOUT: int = Field(default=10, gt=0)  # seconds, per request

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # .env may hold unrelated variables
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalise the log level name and reject unknown levels."""
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


# Create settings instance
settings = Settings()
