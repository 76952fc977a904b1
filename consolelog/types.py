"""
Type definitions shared by the formatter, the console logger and settings.
"""
from enum import Enum
from typing import Dict, Optional


class Severity(Enum):
    """Severity of a console message."""
    PLAIN = "plain"
    HIGHLIGHT = "highlight"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


class Color(Enum):
    """ANSI color codes for terminal output."""
    GRAY = "\033[90m"
    PURPLE = "\033[35m"
    YELLOW = "\033[33m"
    RED = "\033[31m"


RESET = "\033[0m"

# Timestamps are always gray; plain messages are never wrapped
TIMESTAMP_COLOR = Color.GRAY

SEVERITY_COLORS: Dict[Severity, Optional[Color]] = {
    Severity.PLAIN: None,
    Severity.HIGHLIGHT: Color.PURPLE,
    Severity.WARNING: Color.YELLOW,
    Severity.ERROR: Color.RED,
    Severity.FATAL: Color.RED,
}


class ColorMode(str, Enum):
    """When escape sequences are emitted."""
    ALWAYS = "always"  # Unconditionally, even to files and pipes
    AUTO = "auto"  # Only when the stream is a terminal
    NEVER = "never"
