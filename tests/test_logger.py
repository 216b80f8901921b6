import logging

import pytest

from pomodoro_desk.utils.logger import setup_logging


@pytest.fixture
def app_logger():
    logger = logging.getLogger("pomodoro_desk")
    saved = (logger.level, list(logger.handlers), logger.propagate)
    logger.handlers = []
    yield logger
    logger.setLevel(saved[0])
    logger.handlers = saved[1]
    logger.propagate = saved[2]


def test_setup_logging_sets_level_and_single_handler(app_logger):
    setup_logging("debug")
    setup_logging("warning")

    assert app_logger.level == logging.WARNING
    assert len(app_logger.handlers) == 1
    assert app_logger.propagate is False


def test_unknown_level_falls_back_to_info(app_logger):
    setup_logging("chatty")

    assert app_logger.level == logging.INFO
