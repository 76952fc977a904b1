import logging
import sys
from typing import Optional

from consolelog.config.settings import Settings
from consolelog.utils.logger import DATE_FORMAT, LOG_FORMAT, PACKAGE_LOGGER

# Marks the handler installed here so repeated setup does not stack handlers
_HANDLER_NAME = "consolelog-diagnostics"


class LoggingConfig:
    """Configuration for the library's own diagnostics logging."""

    @staticmethod
    def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
        """
        Set up the package diagnostics logger.

        Diagnostics always go to stderr so they never interleave with console
        lines on stdout. Calling this again replaces the previous handler.

        Args:
            settings (Optional[Settings]): Source of DIAGNOSTICS_LEVEL. Loaded
                from the environment when omitted.

        Returns:
            logging.Logger: The configured package logger.
        """
        if settings is None:
            settings = Settings()

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.setLevel(getattr(logging, settings.DIAGNOSTICS_LEVEL, logging.WARNING))

        # Remove a handler left by a previous setup
        for handler in package_logger.handlers[:]:
            if handler.get_name() == _HANDLER_NAME:
                package_logger.removeHandler(handler)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        package_logger.addHandler(console_handler)

        package_logger.debug(f"Diagnostics logging initialized with level {settings.DIAGNOSTICS_LEVEL}")
        return package_logger
