"""
consolelog: timestamped, ANSI-colored console messages.

Build a ConsoleLogger and hold or pass it where it is needed. The module-level
`logger` instance is a convenience for scripts with a single call site.
"""
import logging

from .types import Color, ColorMode, Severity
from .console_logger import ConsoleLogger

__version__ = "1.0.0"

# Diagnostics stay silent until LoggingConfig.setup_logging is called
logging.getLogger(__name__).addHandler(logging.NullHandler())

logger = ConsoleLogger()

__all__ = ["ConsoleLogger", "Severity", "Color", "ColorMode", "logger"]
