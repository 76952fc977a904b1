#!/usr/bin/env python3
"""
Demonstration driver: prints one message at every severity, ending with fatal.
"""
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from consolelog.config import LoggingConfig, Settings
from consolelog.console_logger import ConsoleLogger
from consolelog.utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_ERROR_EXIT_CODE = 2


def main() -> int:
    # Only the working directory, matching Settings.Config.env_file
    load_dotenv(Path.cwd() / ".env")

    try:
        settings = Settings()
    except ValidationError as e:
        sys.stderr.write(f"Invalid consolelog configuration:\n{e}\n")
        return CONFIG_ERROR_EXIT_CODE

    LoggingConfig.setup_logging(settings)
    settings.display_settings()
    logger.info("Running console demo")

    console = ConsoleLogger.from_settings(settings)
    console.print("This is just a standard print")
    console.highlight("This is just a highlighted print")
    console.warning("This is just a warning print")
    console.error("This is just an error print")
    console.fatal("This is just a fatal print")

    # Only reached when fatal() is given a non-terminating exit_func
    return 0


# --- Entry Point --- #
if __name__ == "__main__":
    sys.exit(main())
