"""Shared pytest fixtures."""

from collections.abc import Generator

import pytest
import structlog

from gemfetch.fetch.metrics import FetchMetrics


@pytest.fixture(autouse=True)
def reset_global_state() -> Generator[None, None, None]:
    """Give every test fresh metrics and default logging configuration."""
    FetchMetrics.reset()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    yield
    FetchMetrics.reset()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
