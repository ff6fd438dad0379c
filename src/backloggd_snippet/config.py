# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to HTTP, rendering, export, and logging settings

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = "backloggd-snippet/0.1 (+https://github.com/backloggd-snippet/backloggd-snippet)"

# Letterboxd's link convention, applied to links inside the review body on export
DEFAULT_EXPORT_LINK_STYLE = "color: #cbd4dc; text-decoration: none; border-bottom: 1px dotted #c2cbd3"


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="BACKLOGGD_SNIPPET_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # HTTP Configuration
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header sent to backloggd.com")
    request_timeout: float = Field(default=10.0, description="Per-request timeout in seconds")

    # Rendering hints
    include_image: bool = Field(default=True, description="Include the game cover image in rendered snippets")
    attribution: bool = Field(default=True, description="Include reviewer attribution in rendered snippets")

    # Export Configuration
    export_link_style: str = Field(
        default=DEFAULT_EXPORT_LINK_STYLE, description="Inline style forced onto links inside the review body"
    )

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
