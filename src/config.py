"""
Configuration management using Pydantic for the meme compositor.
Provides type-safe configuration with validation and environment variable support.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.constants import EncoderConstants, SystemConstants

logger = logging.getLogger(__name__)


class RenderConfig(BaseSettings):
    """Meme rendering configuration."""

    png_compression: int = Field(
        default=EncoderConstants.DEFAULT_PNG_COMPRESSION,
        ge=EncoderConstants.MIN_PNG_COMPRESSION,
        le=EncoderConstants.MAX_PNG_COMPRESSION,
        description="zlib compression level for PNG output",
    )

    model_config = SettingsConfigDict(env_prefix="MEME_RENDER_", extra="ignore")


class SystemConfig(BaseSettings):
    """System configuration."""

    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default=SystemConstants.LOG_LEVEL_DEFAULT, description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        v_upper = v.upper()
        if v_upper not in SystemConstants.VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of {SystemConstants.VALID_LOG_LEVELS}"
            )
        return v_upper

    model_config = SettingsConfigDict(env_prefix="MEME_SYSTEM_", extra="ignore")


class Settings(BaseSettings):
    """Main application settings."""

    # Sub-configurations
    render: RenderConfig = Field(default_factory=RenderConfig)
    system: SystemConfig = Field(default_factory=SystemConfig)

    # Environment
    environment: str = Field(
        default="production", description="Environment (development, staging, production)"
    )

    # Config file support
    config_file: Optional[str] = Field(default=None, description="Path to YAML config file")

    @model_validator(mode="before")
    @classmethod
    def load_config_file(cls, values):
        """Load configuration from YAML file if specified."""
        if not isinstance(values, dict):
            return values

        config_file = values.get("config_file") or os.getenv("MEME_CONFIG_FILE")

        if config_file and Path(config_file).exists():
            import yaml

            try:
                with open(config_file, "r") as f:
                    file_config = yaml.safe_load(f)
                    if file_config:
                        # Merge file config with values (env vars take precedence)
                        for key, value in file_config.items():
                            if key not in values or values[key] is None:
                                values[key] = value
            except (OSError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config file {config_file}: {e}")

        return values

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment value."""
        if v not in SystemConstants.VALID_ENVIRONMENTS:
            raise ValueError(
                f"Invalid environment: {v}. Must be one of {SystemConstants.VALID_ENVIRONMENTS}"
            )
        return v

    model_config = SettingsConfigDict(
        env_prefix="MEME_",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with validated configuration
    """
    return Settings()


# Convenience function to reload settings (clears cache)
def reload_settings() -> Settings:
    """
    Reload settings, clearing the cache.

    Returns:
        Fresh Settings object
    """
    get_settings.cache_clear()
    return get_settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    level = "DEBUG" if settings.system.debug else settings.system.log_level
    logging.basicConfig(level=getattr(logging, level), format=SystemConstants.LOG_FORMAT)
