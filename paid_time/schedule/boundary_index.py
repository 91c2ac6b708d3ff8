"""
Boundary Index - sorted, duplicate-free event boundaries with claim flags.

Position i stands for the slot [instant(i), instant(i + 1)). A slot is
claimed at most once and never released.
"""

import bisect
from collections.abc import Iterable, Iterator
from datetime import datetime

from paid_time.contracts.invariants import InvariantViolation
from paid_time.schedule.events import Event


class BoundaryIndex:
    def __init__(self, instants: Iterable[datetime]):
        self._instants: list[datetime] = sorted(set(instants))
        self._claimed: list[bool] = [False] * len(self._instants)

    @classmethod
    def from_events(cls, events: Iterable[Event]) -> "BoundaryIndex":
        boundaries: list[datetime] = []
        for e in events:
            boundaries.append(e.start)
            boundaries.append(e.end)
        return cls(boundaries)

    def __len__(self) -> int:
        return len(self._instants)

    def __iter__(self) -> Iterator[datetime]:
        return iter(self._instants)

    def instant(self, position: int) -> datetime:
        return self._instants[position]

    def position(self, instant: datetime) -> int:
        """
        Exact position of an instant.

        Raises:
            InvariantViolation: instant is not a boundary of this index
        """
        i = bisect.bisect_left(self._instants, instant)
        if i == len(self._instants) or self._instants[i] != instant:
            raise InvariantViolation(
                f"Boundary {instant.isoformat()} missing from index; "
                "index was not built from the same events"
            )
        return i

    def is_claimed(self, position: int) -> bool:
        return self._claimed[position]

    def claim(self, position: int) -> None:
        self._claimed[position] = True

    @property
    def claimed_count(self) -> int:
        return sum(self._claimed)
