"""Master test configuration and fixtures.

All tests can access fixtures defined here or in the tests/fixtures/ modules.

Organization:
- Auto-use fixtures (logging state) - Always run
- Stash fixtures - From tests/fixtures/stash/
- Config fixtures - From tests/fixtures/core/
"""

import pytest
from loguru import logger

import config.logging as logging_config

# Import all factories and fixtures using wildcard
from tests.fixtures import *  # noqa: F403


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Reset centralized logging state between tests.

    load_config installs loguru handlers (including a file handler) and
    a debug flag; none of that may leak into the next test.
    """
    yield
    logger.remove()
    logging_config._handler_ids = []
    logging_config._config = None
    logging_config._debug_enabled = False


@pytest.fixture
def captured_logs():
    """Collect messages logged through the stash loggers.

    Yields:
        list[loguru.Message]: Messages with ``.record`` attached
    """
    messages = []
    handler_id = logger.add(
        messages.append,
        level="DEBUG",
        filter=lambda record: record["extra"].get("stash", False),
        format="{message}",
    )
    yield messages
    logger.remove(handler_id)
