"""
Observability module: structured logging, run IDs, metrics.

Usage:
    from paid_time.observability import RunContext, configure_logging

    configure_logging(level="INFO", json_format=True)
    with RunContext(agent_id=1):
        logger.info("Resolving", extra={"agent_id": 1})

Metrics:
    from paid_time.observability import REGISTRY

    print(REGISTRY.to_prometheus())
"""

from .context import RunContext, get_run_id
from .logging import HumanFormatter, JSONFormatter, configure_logging
from .metrics import (
    REGISTRY,
    Counter,
    Histogram,
    MetricsRegistry,
    resolution_errors_total,
    resolution_seconds,
    resolutions_total,
)

__all__ = [
    # Logging
    "configure_logging",
    "JSONFormatter",
    "HumanFormatter",
    # Context
    "RunContext",
    "get_run_id",
    # Metrics
    "REGISTRY",
    "Counter",
    "Histogram",
    "MetricsRegistry",
    "resolutions_total",
    "resolution_errors_total",
    "resolution_seconds",
]
