"""
Paid-time calculator - fetch, filter, validate, resolve, measure.

Wraps the pure resolver with the collaborators it needs in practice:
an event source, the agent/window filter, input validation, timing and
optional post-resolution invariant checks.
"""

import logging
import time
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime, timedelta

from paid_time.config import ResolverSettings
from paid_time.contracts import (
    InvariantViolation,
    ValidationError,
    enforce_invariants_strict,
    validate_events,
    validate_window,
)
from paid_time.observability.metrics import (
    resolution_errors_total,
    resolution_seconds,
    resolutions_total,
)
from paid_time.schedule.aggregator import sum_paid_time
from paid_time.schedule.events import Event
from paid_time.schedule.resolver import flatten_events
from paid_time.schedule.window import filter_events_for_agent
from paid_time.sources import EventSourceError

logger = logging.getLogger(__name__)


class PaidTimeCalculator:
    """
    Paid time for one agent over a window.

    Assumptions on the data:
    - events belong to agents many-to-one
    - no two same-priority events of one agent overlap (rejected by default)

    Not assumed:
    - that the lowest priority events contain all the others
    - that events of one priority are all paid or all unpaid
    """

    def __init__(
        self,
        fetch_all_events: Callable[[], Iterable[Event]],
        settings: ResolverSettings | None = None,
    ):
        self.fetch_all_events = fetch_all_events
        self.settings = settings or ResolverSettings()

    def calculate_paid_time_for_agent(
        self, window_start: datetime, window_end: datetime, agent_id: int
    ) -> timedelta:
        """
        Total paid time the agent is scheduled for in the window.

        Args:
            window_start: No event may start before this instant
            window_end: No event may end after this instant
            agent_id: The agent the events pertain to

        Raises:
            ValidationError: malformed window or events
            EventSourceError: the event source could not be read
            InvariantViolation: the resolver broke one of its invariants
        """
        try:
            validate_window(window_start, window_end)
            events = self.fetch_events_for_agent(window_start, window_end, agent_id)
            validate_events(
                events,
                reject_same_priority_overlap=self.settings.reject_same_priority_overlap,
            )
        except (ValidationError, EventSourceError):
            resolution_errors_total.inc()
            raise

        logger.info(
            "Calculating paid time for agent %s over %d events",
            agent_id,
            len(events),
            extra={"agent_id": agent_id, "event_count": len(events)},
        )
        return self.calculate_paid_time_measured(events)

    def fetch_events_for_agent(
        self, window_start: datetime, window_end: datetime, agent_id: int
    ) -> list[Event]:
        return filter_events_for_agent(self.fetch_all_events(), window_start, window_end, agent_id)

    def calculate_paid_time_measured(self, events: Sequence[Event]) -> timedelta:
        """Resolve and sum, logging how long the algorithm took. Does not alter the result."""
        start = time.perf_counter()
        try:
            segments = flatten_events(events)
            paid_time = sum_paid_time(segments)
        except InvariantViolation:
            resolution_errors_total.inc()
            logger.exception("Resolver invariant violated")
            raise
        elapsed = time.perf_counter() - start

        resolution_seconds.observe(elapsed)
        resolutions_total.inc()
        logger.info(
            "Time elapsed on algorithm: %.3f ms",
            elapsed * 1000,
            extra={"elapsed_ms": elapsed * 1000, "segment_count": len(segments)},
        )

        if self.settings.verify_invariants:
            try:
                enforce_invariants_strict(events, segments)
            except InvariantViolation:
                resolution_errors_total.inc()
                logger.exception("Flattened segments failed invariant checks")
                raise

        return paid_time
