"""
Process termination used by fatal console messages.
"""
import os
import sys

from consolelog.utils.logger import get_logger

logger = get_logger(__name__)

FATAL_EXIT_CODE = 1


def terminate(code: int = FATAL_EXIT_CODE) -> None:
    """
    Terminate the process immediately with the given exit code.

    Standard streams are flushed first. No SystemExit is raised, so finally
    blocks and atexit handlers do not run and callers cannot intercept it.
    """
    logger.debug(f"Terminating process with exit code {code}")
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError, AttributeError):
            pass
    os._exit(code)
