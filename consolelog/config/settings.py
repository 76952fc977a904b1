from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings

from consolelog.types import ColorMode
from consolelog.utils.logger import get_logger

# Get logger for this module
logger = get_logger(__name__)

VALID_LEVELS = ['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'NOTSET']


class Settings(BaseSettings):
    """
    Console logger settings, read from CONSOLELOG_* environment variables or a
    .env file in the working directory.
    """

    # --- Console output ---
    COLOR_MODE: ColorMode = ColorMode.ALWAYS

    # --- Diagnostics ---
    DIAGNOSTICS_LEVEL: str = 'WARNING'

    # === Validators ===

    @field_validator('COLOR_MODE', mode='before')
    def normalize_color_mode(cls, value: Any) -> Any:
        """Accept COLOR_MODE in any case."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator('DIAGNOSTICS_LEVEL', mode='before')
    def validate_diagnostics_level(cls, value: Any) -> str:
        """Validate DIAGNOSTICS_LEVEL."""
        if not value:
            raise ValueError("DIAGNOSTICS_LEVEL must not be empty.")
        value = str(value).strip().upper()
        if value not in VALID_LEVELS:
            raise ValueError(f"Invalid DIAGNOSTICS_LEVEL '{value}'. Must be one of {VALID_LEVELS}")
        return value

    def display_settings(self):
        """Logs the loaded settings to the diagnostics logger."""
        logger.info("--- Current consolelog Settings ---")
        for key, value in self.model_dump().items():
            if isinstance(value, ColorMode):
                value = value.value
            logger.info(f"{key}: {value}")
        logger.info("--- End consolelog Settings ---")

    class Config:
        env_prefix = 'CONSOLELOG_'
        env_file = '.env'
        env_file_encoding = 'utf-8'
        extra = 'ignore'  # Ignore unrelated keys from .env
