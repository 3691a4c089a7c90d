import logging
from logging import Logger
from sys import stdout

from pull_sdk.common.logging import LOG_FORMAT


def setup_logging(logger: Logger, log_level: str) -> None:
    """
    Set up the logging configuration based on the provided log level.

    Args:
        logger: The logger to update
        log_level: The logging level to set (e.g., "DEBUG", "INFO").
    """
    numeric_log_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_log_level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    formatter = logging.Formatter(LOG_FORMAT)

    for handler in logger.handlers:
        handler.setFormatter(formatter)
        handler.setLevel(numeric_log_level)

    if not logger.handlers:
        stream_handler = logging.StreamHandler(stdout)
        stream_handler.setFormatter(formatter)
        stream_handler.setLevel(numeric_log_level)
        logger.addHandler(stream_handler)

    logger.setLevel(numeric_log_level)
    logging.getLogger().setLevel(numeric_log_level)
