"""
Event - the atomic unit of scheduled agent time.

A flattened segment produced by the resolver is also an Event: same shape,
with start/end narrowed to the sub-range its source event won.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timedelta


@dataclass(frozen=True)
class Event:
    start: datetime
    end: datetime
    agent_id: int
    priority: int
    paid: bool

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def overlaps(self, other: "Event") -> bool:
        """True when the half-open ranges [start, end) share a positive-length stretch."""
        return max(self.start, other.start) < min(self.end, other.end)

    def narrowed(self, start: datetime, end: datetime) -> "Event":
        """Copy of this event restricted to [start, end)."""
        return replace(self, start=start, end=end)
