from .settings import Settings
from .logging_config import LoggingConfig

__all__ = ["Settings", "LoggingConfig"]
