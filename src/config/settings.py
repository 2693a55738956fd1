"""
Configuration settings for termctl.
Loads environment variables and provides validated settings throughout the application.
"""

from pathlib import Path
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Display Configuration
    app_name: str = Field(default="termctl", description="Name shown in the welcome panel")
    status_lines: int = Field(default=3, ge=1, description="Lines rendered by the status demo")
    status_delay: float = Field(
        default=0.5,
        ge=0,
        description="Seconds between status demo updates"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: str = Field(default="termctl.log", description="Log file path")

    # Application Configuration
    project_root: Path = Field(default_factory=lambda: Path(__file__).parent.parent.parent)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v_upper

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        return self.project_root / "src" / "config"

    @property
    def command_registry_path(self) -> Path:
        """Get the command registry YAML file path."""
        return self.config_dir / "command_registry.yaml"


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the singleton Settings instance.

    Returns:
        Settings: The application settings instance

    Raises:
        ValidationError: If settings cannot be loaded
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
