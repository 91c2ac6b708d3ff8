"""
Validation Module - input checks run before resolution.

Malformed input is rejected here with a ValidationError so the resolver
can rely on its preconditions.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from datetime import datetime
from itertools import chain
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paid_time.schedule.events import Event


class ValidationError(ValueError):
    """Raised when input to a paid-time calculation is malformed."""

    pass


class InvalidIntervalError(ValidationError):
    """Raised when an interval ends before it starts."""

    pass


class SamePriorityOverlapError(ValidationError):
    """Raised when two events of one agent share a priority and overlap."""

    def __init__(self, first: Event, second: Event):
        self.first = first
        self.second = second
        super().__init__(
            f"Agent {first.agent_id} has overlapping priority-{first.priority} events: "
            f"[{first.start.isoformat()}, {first.end.isoformat()}) and "
            f"[{second.start.isoformat()}, {second.end.isoformat()})"
        )


class MixedTimestampError(ValidationError):
    """Raised when naive and timezone-aware timestamps meet in one calculation."""

    pass


def _is_aware(instant: datetime) -> bool:
    return instant.utcoffset() is not None


def validate_timestamp_kinds(events: Sequence[Event], *instants: datetime) -> None:
    """
    All timestamps must be naive, or all timezone-aware.

    Covers the extra instants (typically the window bounds) and both ends of
    every event. Must run before any of them are compared.

    Raises:
        MixedTimestampError: naive and aware timestamps are mixed
    """
    first: datetime | None = None
    for instant in chain(instants, *((e.start, e.end) for e in events)):
        if first is None:
            first = instant
        elif _is_aware(instant) != _is_aware(first):
            raise MixedTimestampError(
                f"Cannot mix naive and timezone-aware timestamps: "
                f"{first.isoformat()} and {instant.isoformat()}"
            )


def validate_window(start: datetime, end: datetime) -> None:
    validate_timestamp_kinds((), start, end)
    if start > end:
        raise InvalidIntervalError(
            f"Window start {start.isoformat()} is after window end {end.isoformat()}"
        )


def validate_intervals(events: Sequence[Event]) -> None:
    """Every event must satisfy start <= end."""
    for e in events:
        if e.start > e.end:
            raise InvalidIntervalError(
                f"Event for agent {e.agent_id} starts at {e.start.isoformat()} "
                f"after it ends at {e.end.isoformat()}"
            )


def find_same_priority_overlap(events: Sequence[Event]) -> tuple[Event, Event] | None:
    """
    First pair of same-agent, same-priority events that overlap, or None.

    Sorting each (agent, priority) group by start means an overlap, if any,
    shows up between some event and the furthest-reaching one before it.
    """
    groups: dict[tuple[int, int], list[Event]] = defaultdict(list)
    for e in events:
        groups[(e.agent_id, e.priority)].append(e)

    for group in groups.values():
        ordered = sorted((e for e in group if e.start < e.end), key=lambda e: e.start)
        reach: Event | None = None
        for e in ordered:
            if reach is not None and e.start < reach.end:
                return reach, e
            if reach is None or e.end > reach.end:
                reach = e
    return None


def validate_events(events: Sequence[Event], reject_same_priority_overlap: bool = True) -> None:
    """
    Validate events before resolution.

    Raises:
        MixedTimestampError: naive and aware timestamps are mixed
        InvalidIntervalError: an event ends before it starts
        SamePriorityOverlapError: two same-priority events overlap (when enabled)
    """
    validate_timestamp_kinds(events)
    validate_intervals(events)
    if reject_same_priority_overlap:
        pair = find_same_priority_overlap(events)
        if pair is not None:
            raise SamePriorityOverlapError(*pair)
