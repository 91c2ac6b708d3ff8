"""
Priority Resolver - flatten overlapping events into disjoint segments.

The core of paid-time calculation. Each instant covered by some event is
attributed to the highest-priority event covering it.

Invariants:
- Output segments never overlap
- Union of output segments equals union of input events
- A slot claimed by an event is never re-attributed
"""

import logging
from collections.abc import Sequence

from paid_time.schedule.boundary_index import BoundaryIndex
from paid_time.schedule.events import Event

logger = logging.getLogger(__name__)


def order_by_priority(events: Sequence[Event]) -> list[Event]:
    """Highest priority first. sorted() is stable, so ties keep input order."""
    return sorted(events, key=lambda e: -e.priority)


def flatten_events(events: Sequence[Event], index: BoundaryIndex | None = None) -> list[Event]:
    """
    Resolve overlapping events into non-overlapping flattened segments.

    Events are swept highest priority first. For every event, the boundary
    slots between its start and end are walked: slots already claimed belong
    to an earlier (higher or equal priority) event and are skipped; each
    maximal run of unclaimed slots is claimed and emitted as one segment
    carrying the event's agent, priority and paid flag. An event therefore
    yields zero, one or several segments.

    Precondition: no two events of equal priority overlap. When they do,
    the one earlier in input order keeps the shared slots.

    Args:
        events: Events of a single agent
        index: Fresh boundary index built from the same events (built if None)

    Returns:
        Flattened segments, in the order they were claimed

    Raises:
        InvariantViolation: an event boundary is missing from the index
    """
    if index is None:
        index = BoundaryIndex.from_events(events)

    segments: list[Event] = []

    for e in order_by_priority(events):
        i = index.position(e.start)
        end_idx = index.position(e.end)

        while i < end_idx:
            if index.is_claimed(i):
                i += 1
                continue

            run_start = i
            while i < end_idx and not index.is_claimed(i):
                index.claim(i)
                i += 1

            segments.append(e.narrowed(index.instant(run_start), index.instant(i)))

    logger.debug(
        "Flattened %d events into %d segments over %d boundaries",
        len(events),
        len(segments),
        len(index),
    )
    return segments
