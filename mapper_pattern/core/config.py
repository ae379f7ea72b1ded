"""
Application configuration.

Loads settings from environment variables and .env file.
Every setting has a default, so nothing has to be configured.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name used in the startup banner.
        version: Current package version string.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        show_banner: Log the project banner before rendering.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MAPPER_PATTERN_",
        extra="ignore",
    )

    project_name: str = "Mapper Pattern"
    version: str = "0.1.0"
    log_level: str = "WARNING"
    show_banner: bool = False


settings = Settings()
