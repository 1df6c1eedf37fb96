import pytest

from uricomponent.common.config import conf
from uricomponent.logger.colored_logger import logger


@pytest.fixture(autouse=True)
def reset_conf():
    """The config and logger are process-wide singletons; restore them after each test."""
    level = logger.level
    yield
    conf.reset()
    logger.setLevel(level)


@pytest.fixture
def records():
    """Collect records emitted by the package logger (it does not propagate to root)."""
    import logging

    collected: list[logging.LogRecord] = []

    class _ListHandler(logging.Handler):
        def emit(self, record):
            collected.append(record)

    handler = _ListHandler(level=logging.DEBUG)
    logger.addHandler(handler)
    yield collected
    logger.removeHandler(handler)
