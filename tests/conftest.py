import pytest
from loguru import logger

from spatial_types import reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Restore the global configuration around every test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def caplog(caplog):
    """Enable logging for the package"""
    logger.remove()
    logger.enable("spatial_types")
    handler_id = logger.add(caplog.handler, format="{message}")
    yield caplog
    logger.remove(handler_id)
