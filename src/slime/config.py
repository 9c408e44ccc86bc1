"""
Configuration management for the slime bot.
Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from typing import Literal, Optional

from pydantic import AliasChoices, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    """
    The logging subset of the configuration.

    Logging is initialized before the token is read, so this loads even
    when ``DISCORD_TOKEN`` is missing.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_prefix="SLIME_",
        populate_by_name=True,
    )

    environment: Literal["development", "production"] = Field(
        default="development",
        description="Deployment flavour; picks the default log level",
    )
    log_level: Optional[LogLevel] = Field(
        default=None, description="Logging level override"
    )

    @field_validator("log_level", mode="before")
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper() or None
        return v

    @property
    def effective_log_level(self) -> str:
        """Explicit override, else DEBUG in development and INFO in production."""
        if self.log_level:
            return self.log_level
        return "DEBUG" if self.environment == "development" else "INFO"


class Settings(LoggingSettings):
    """Main configuration class for the slime bot."""

    discord_token: SecretStr = Field(
        validation_alias=AliasChoices("DISCORD_TOKEN", "discord_token"),
        description="Discord bot token from Discord Developer Portal",
    )

    @field_validator("discord_token")
    def validate_discord_token(cls, v):
        """Ensure Discord token is set to a real value."""
        token_value = v.get_secret_value() if isinstance(v, SecretStr) else str(v)

        if not token_value or token_value.strip() == "":
            raise ValueError(
                "Discord bot token must be set. Please configure DISCORD_TOKEN environment variable."
            )

        return v


def load_settings() -> Settings:
    """
    Build settings from the environment.

    Raises:
        ConfigError: if ``DISCORD_TOKEN`` is absent or blank, or any other
            setting fails validation.
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigError(e) from e


def load_logging_settings() -> LoggingSettings:
    """Logging settings, falling back to defaults if the environment is malformed."""
    try:
        return LoggingSettings()
    except ValidationError:
        return LoggingSettings.model_construct()
