"""
Configuration management for PawMatch.
Loads settings from environment variables and provides typed configuration access.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment: development, staging, production")
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Matching Settings
    matching_default_limit: int = Field(
        default=20,
        ge=1,
        description="Number of matches returned when the caller gives no limit"
    )
    matching_min_score: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Minimum compatibility score for a match to be returned"
    )
    matching_include_special_needs: bool = Field(
        default=False,
        description="Include special-needs animals in match results by default"
    )
    matching_max_concurrency: int = Field(
        default=10,
        ge=1,
        description="Maximum concurrent animal profile lookups per matching request"
    )

    # Testing
    testing_mode: bool = Field(default=False, description="Enable testing mode")

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = Settings()
    return _settings


# Convenience access
settings = get_settings()
