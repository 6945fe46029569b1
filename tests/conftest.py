import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _drop_log_handlers():
    """Handlers added by cli.main point at captured streams; drop them after each test."""
    yield
    logger.remove()
