import logging

import pytest

from pull_sdk.common.logging import get_pull_sdk_logger, set_pull_sdk_log_level


def test_pull_sdk_logger_is_a_singleton():
    logger = get_pull_sdk_logger()

    assert logger is get_pull_sdk_logger()
    assert logger.name == "pull_sdk"
    assert not logger.propagate
    assert len(logger.handlers) == 1


def test_set_pull_sdk_log_level():
    try:
        assert set_pull_sdk_log_level("warning").level == logging.WARNING
        assert get_pull_sdk_logger().level == logging.WARNING

        with pytest.raises(ValueError):
            set_pull_sdk_log_level("LOUD")
    finally:
        set_pull_sdk_log_level("DEBUG")
