"""
Formatter that builds colored, timestamped console lines.
"""
from datetime import datetime
from typing import Callable, Optional

from consolelog.types import Color, RESET, SEVERITY_COLORS, Severity, TIMESTAMP_COLOR

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def colorize(content: str, color: Optional[Color]) -> str:
    """Wrap content in the escape sequence for color and a reset."""
    if color is None:
        return content
    return f"{color.value}{content}{RESET}"


class ColoredFormatter:
    """
    Builds `timestamp + " " + body` lines for the console logger.

    The timestamp is wrapped in gray and the body in the color mapped from the
    message severity. With use_color disabled no escape sequences are produced.

    Args:
        use_color (bool): Whether to emit ANSI escape sequences.
        clock (Callable[[], datetime]): Source of the current wall-clock time.
    """

    def __init__(self, use_color: bool = True, clock: Callable[[], datetime] = datetime.now):
        self.use_color = use_color
        self.clock = clock

    def _wrap(self, content: str, color: Optional[Color]) -> str:
        return colorize(content, color) if self.use_color else content

    def format_timestamp(self, moment: Optional[datetime] = None) -> str:
        moment = moment or self.clock()
        return self._wrap(moment.strftime(TIMESTAMP_FORMAT), TIMESTAMP_COLOR)

    def format_body(self, severity: Severity, message: str) -> str:
        if not isinstance(severity, Severity):
            raise ValueError(f"Unknown severity: {severity!r}")
        return self._wrap(str(message), SEVERITY_COLORS[severity])

    def format_line(self, severity: Severity, message: str, moment: Optional[datetime] = None) -> str:
        """
        Format a full console line without the trailing newline.

        Args:
            severity (Severity): Severity that selects the body color.
            message (str): Message text, written as-is.
            moment (Optional[datetime]): Time to stamp. Defaults to the clock.

        Returns:
            str: The formatted line.
        """
        body = self.format_body(severity, message)
        return f"{self.format_timestamp(moment)} {body}"
