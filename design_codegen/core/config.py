"""
Configuration module - centralized settings for the service layer.
Uses pydantic-settings to load values from environment variables and .env file.

The analysis and normalization core never reads these values directly;
the service and HTTP layers pass them in as explicit parameters.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    To override:
        export SCSS_MAX_NESTING_DEPTH=3
        export LOG_LEVEL=DEBUG
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs and logging
    APP_NAME: str = "Design Codegen"

    # DEBUG: Enable debug mode (more verbose logging)
    DEBUG: bool = False

    # LOG_LEVEL: Level for the design_codegen logger hierarchy
    LOG_LEVEL: str = "INFO"

    # ---------------------------------------------------------------------------
    # NORMALIZATION SETTINGS
    # ---------------------------------------------------------------------------
    # SCSS_MAX_NESTING_DEPTH: Lines nested deeper than this get a warning comment
    SCSS_MAX_NESTING_DEPTH: int = 4

    # ---------------------------------------------------------------------------
    # PROMPT SETTINGS
    # ---------------------------------------------------------------------------
    # PROMPT_JSON_INDENT: Indentation of the scene JSON embedded in prompts
    PROMPT_JSON_INDENT: int = 2


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from design_codegen.core.config import settings
settings = Settings()
