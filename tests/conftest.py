"""Shared test fixtures."""

import pytest
from loguru import logger

from pybeat._constants import DAY, UTC_OFFSET

# Internet Time midnight (00:00 UTC+01:00) on 2018-05-02
BMT_MIDNIGHT = 17653 * DAY - UTC_OFFSET

SAMPLE_TIMESTAMPS = [
    0,
    1,
    -1,
    -UTC_OFFSET,
    -UTC_OFFSET - 1,
    BMT_MIDNIGHT,
    BMT_MIDNIGHT - 1,
    1525221281000,
    1525244393059,
    1525251972000,
    1525294572000,
    -1525244393059,
    10**18 + 7,
    1525244393059.5,
    -0.25,
]


@pytest.fixture
def log_messages():
    """Collect pybeat's loguru output for the duration of a test."""
    messages = []
    logger.enable("pybeat")
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("pybeat")
