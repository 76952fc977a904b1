"""
Console logger that prints timestamped, colored messages to standard output.
"""
import sys
from datetime import datetime
from typing import Callable, Optional, TextIO

from consolelog.types import ColorMode, Severity
from consolelog.utils.colored_formatter import ColoredFormatter
from consolelog.utils.logger import get_logger
from consolelog.utils.process import FATAL_EXIT_CODE, terminate

logger = get_logger(__name__)


def _is_terminal(stream) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


class ConsoleLogger:
    """
    Writes one line per call: a gray timestamp followed by the message in the
    color of its severity. fatal() terminates the process after writing.

    Args:
        stream (Optional[TextIO]): Target stream. Defaults to sys.stdout,
            looked up on every write.
        formatter (Optional[ColoredFormatter]): Line formatter. Built from
            color_mode and clock when omitted.
        exit_func (Callable[[int], None]): Called with the exit code by fatal().
        clock (Callable[[], datetime]): Wall-clock source for timestamps.
        color_mode (ColorMode): When to emit escape sequences.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        formatter: Optional[ColoredFormatter] = None,
        exit_func: Callable[[int], None] = terminate,
        clock: Callable[[], datetime] = datetime.now,
        color_mode: ColorMode = ColorMode.ALWAYS,
    ):
        self._stream = stream
        self.exit_func = exit_func
        if formatter is None:
            formatter = ColoredFormatter(use_color=self._resolve_color(ColorMode(color_mode)), clock=clock)
        self.formatter = formatter

    @classmethod
    def from_settings(cls, settings, **kwargs) -> "ConsoleLogger":
        """Build a logger honoring the COLOR_MODE of the given settings."""
        kwargs.setdefault("color_mode", settings.COLOR_MODE)
        return cls(**kwargs)

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _resolve_color(self, color_mode: ColorMode) -> bool:
        if color_mode is ColorMode.AUTO:
            return _is_terminal(self.stream)
        return color_mode is ColorMode.ALWAYS

    def _write(self, line: str) -> None:
        # Write failures are not surfaced to callers
        try:
            stream = self.stream
            stream.write(line + "\n")
            stream.flush()
        except (OSError, ValueError, AttributeError) as e:
            logger.debug(f"Console write failed: {e}")

    def log(self, severity: Severity, message: str) -> None:
        """Write message at the given severity. FATAL also terminates."""
        line = self.formatter.format_line(severity, message)
        self._write(line)
        if severity is Severity.FATAL:
            self.exit_func(FATAL_EXIT_CODE)

    def print(self, message: str) -> None:
        self.log(Severity.PLAIN, message)

    def highlight(self, message: str) -> None:
        self.log(Severity.HIGHLIGHT, message)

    def warning(self, message: str) -> None:
        self.log(Severity.WARNING, message)

    def error(self, message: str) -> None:
        self.log(Severity.ERROR, message)

    def fatal(self, message: str) -> None:
        """Write message in red, then terminate the process with exit code 1."""
        self.log(Severity.FATAL, message)
