"""Shared fixtures for the test suite."""

from collections.abc import Iterator

import pytest
import structlog

from easyconfig.observability.metrics import StoreMetrics


@pytest.fixture(autouse=True)
def fresh_metrics() -> Iterator[StoreMetrics]:
    """Give every test its own metrics singleton."""
    StoreMetrics.reset()
    yield StoreMetrics.get_instance()
    StoreMetrics.reset()


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore default structlog configuration after every test."""
    yield
    structlog.reset_defaults()
