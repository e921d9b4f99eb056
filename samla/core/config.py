"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", alias="SAMLA_LOG_LEVEL", description="Console logging level")
    format: str = Field(
        default="detailed", alias="SAMLA_LOG_FORMAT", description="Log line format (simple, detailed or json)"
    )
    enable_file: bool = Field(
        default=False, alias="SAMLA_ENABLE_FILE_LOGGING", description="Also write DEBUG logs to a file"
    )
    file_dir: str = Field(default="logs", alias="SAMLA_LOG_FILE_DIR", description="Directory for the log file")

    model_config = {"populate_by_name": True}


class LocaleConfig(BaseModel):
    """UI locale configuration."""

    default_locale: str = Field(
        default="de", alias="SAMLA_DEFAULT_LOCALE", description="Locale used when no preference was saved"
    )
    storage_key: str = Field(
        default="samla-locale",
        alias="SAMLA_LOCALE_STORAGE_KEY",
        description="Preference key holding the last selected locale",
    )
    preferences_file: str = Field(
        default="preferences.json",
        alias="SAMLA_PREFERENCES_FILE",
        description="Preferences file name, relative to the application base directory",
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Logging
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Samla logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="SAMLA_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Samla log format (simple, detailed, json)",
        alias="SAMLA_LOG_FORMAT",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Write a DEBUG log file next to the console output",
        alias="SAMLA_ENABLE_FILE_LOGGING",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory the log file is written to",
        alias="SAMLA_LOG_FILE_DIR",
    )

    # =====================================================================
    # Application Folders
    # =====================================================================
    base_dir: Optional[str] = Field(
        default=None,
        description="Override for the application base directory (defaults to <user config dir>/Samla)",
        alias="SAMLA_BASE_DIR",
    )

    # =====================================================================
    # Localization
    # =====================================================================
    default_locale: str = Field(
        default="de",
        description="Locale used when no preference was saved",
        alias="SAMLA_DEFAULT_LOCALE",
    )
    locale_storage_key: str = Field(
        default="samla-locale",
        description="Preference key holding the last selected locale",
        alias="SAMLA_LOCALE_STORAGE_KEY",
    )
    preferences_file: str = Field(
        default="preferences.json",
        description="Preferences file name, relative to the application base directory",
        alias="SAMLA_PREFERENCES_FILE",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def locale(self) -> LocaleConfig:
        """Get locale configuration from environment variables."""
        return LocaleConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
