import logging
from sys import stdout
from typing import Optional

LOG_FORMAT = "[%(asctime)s] %(levelname)s:%(name)s.%(module)s:%(message)s"


class PullLogger:
    _instance: Optional[logging.Logger] = None

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """
        Return the `pull_sdk` logger, writing to stdout with ``LOG_FORMAT``.
        It does not propagate to the root logger and defaults to DEBUG.
        """
        if cls._instance is None:
            logger = logging.getLogger("pull_sdk")
            logger.propagate = False
            logger.setLevel(logging.DEBUG)

            if not logger.handlers:
                stream_handler = logging.StreamHandler(stdout)
                stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
                logger.addHandler(stream_handler)

            cls._instance = logger

        return cls._instance


def get_pull_sdk_logger() -> logging.Logger:
    return PullLogger.get_logger()


def set_pull_sdk_log_level(log_level: str) -> logging.Logger:
    """
    Change the level of the pull sdk logger, e.g ``set_pull_sdk_log_level("info")``.

    :raises ValueError: if the level is unknown
    """
    numeric_log_level = logging.getLevelName(log_level.upper())
    if not isinstance(numeric_log_level, int):
        raise ValueError(f"Invalid log level: {log_level}")
    logger = get_pull_sdk_logger()
    logger.setLevel(numeric_log_level)
    return logger
