"""
Paid-Time Aggregator - totals over flattened segments.
"""

from collections.abc import Iterable, Sequence
from datetime import timedelta

from paid_time.schedule.events import Event
from paid_time.schedule.resolver import flatten_events


def sum_paid_time(segments: Iterable[Event]) -> timedelta:
    """Sum of (end - start) over paid segments. Zero for no segments."""
    return sum((s.duration for s in segments if s.paid), timedelta(0))


def sum_unpaid_time(segments: Iterable[Event]) -> timedelta:
    return sum((s.duration for s in segments if not s.paid), timedelta(0))


def resolve_paid_time(events: Sequence[Event]) -> timedelta:
    """
    Total paid time for one agent's events, honouring priorities.

    Preconditions (not re-validated here):
    - all events belong to one agent
    - all events lie inside the caller's window
    - no two same-priority events overlap
    """
    return sum_paid_time(flatten_events(events))
