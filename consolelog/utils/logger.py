import logging

# Every diagnostics logger lives under this namespace
PACKAGE_LOGGER = "consolelog"

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(module_name: str) -> logging.Logger:
    """
    Return the diagnostics logger for the specified module.

    Handlers are not attached here; LoggingConfig.setup_logging configures the
    package logger once and module loggers propagate to it.

    Args:
        module_name (str): Name of the module using the logger.

    Returns:
        logging.Logger: Logger placed under the package namespace.
    """
    if module_name != PACKAGE_LOGGER and not module_name.startswith(PACKAGE_LOGGER + "."):
        module_name = f"{PACKAGE_LOGGER}.{module_name}"
    return logging.getLogger(module_name)
