"""Observability module for logging and metrics."""

from easyconfig.observability.logging import configure_logging, get_logger
from easyconfig.observability.metrics import StoreMetrics


__all__ = [
    "StoreMetrics",
    "configure_logging",
    "get_logger",
]
