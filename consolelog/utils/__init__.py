"""
Utilities package for consolelog.

Modules Included:
- Logger: diagnostics loggers under the package namespace.
- Colored Formatter: timestamped, ANSI-colored console line construction.
- Process: hard process termination for fatal messages.
"""

from .logger import get_logger
from .colored_formatter import ColoredFormatter, colorize, TIMESTAMP_FORMAT
from .process import terminate, FATAL_EXIT_CODE

__all__ = [
    # Logger
    "get_logger",
    # Formatting
    "ColoredFormatter",
    "colorize",
    "TIMESTAMP_FORMAT",
    # Process
    "terminate",
    "FATAL_EXIT_CODE",
]
