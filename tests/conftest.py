"""
Pytest configuration and shared fixtures for the consolelog test suite.
"""
import io
import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to path so tests run without an install
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

FIXED_MOMENT = datetime(2024, 1, 2, 3, 4, 5)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep CONSOLELOG_* variables and any .env file out of each test."""
    for key in list(os.environ):
        if key.startswith("CONSOLELOG_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handlers and level changes made by LoggingConfig.setup_logging."""
    package_logger = logging.getLogger("consolelog")
    handlers, level = package_logger.handlers[:], package_logger.level
    yield package_logger
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)


@pytest.fixture
def fixed_clock():
    return Mock(return_value=FIXED_MOMENT)


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def exit_func():
    return Mock()


class TTYStream(io.StringIO):
    """StringIO that claims to be a terminal."""

    def isatty(self):
        return True


@pytest.fixture
def tty_stream():
    return TTYStream()
