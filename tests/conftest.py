"""Shared fixtures for PowerStrip tests."""

from collections.abc import Iterator
from typing import Any

import pytest
import structlog
from structlog.testing import capture_logs


@pytest.fixture(autouse=True)
def log_events() -> Iterator[list[dict[str, Any]]]:
    """Capture structlog events instead of printing them.

    The CLI reconfigures structlog, so defaults are restored around each test.
    """
    structlog.reset_defaults()
    with capture_logs() as events:
        yield events
    structlog.reset_defaults()
