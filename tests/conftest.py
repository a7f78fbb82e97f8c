import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def error_messages():
    messages: list[str] = []
    handler_id = logger.add(
        lambda msg: messages.append(msg.record["message"]), level="ERROR"
    )
    yield messages
    logger.remove(handler_id)
