"""
Invariants Module - Semantic Correctness Checks on flattened segments.

These verify MEANING of a resolution, not just shape:
- segments never overlap
- segments cover exactly what the input events cover
- every segment belongs to the highest-priority event covering it

They run in tests and, when `resolver.verify_invariants` is enabled, in
production after every resolution.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from paid_time.schedule.events import Event


class InvariantViolation(Exception):
    """Raised when an internal invariant of the resolver is violated."""

    pass


def merge_ranges(ranges: Sequence[tuple[datetime, datetime]]) -> list[tuple[datetime, datetime]]:
    """Union of half-open ranges as sorted, disjoint, non-touching ranges. Empty ranges vanish."""
    merged: list[tuple[datetime, datetime]] = []
    for start, end in sorted(r for r in ranges if r[0] < r[1]):
        if merged and start <= merged[-1][1]:
            if end > merged[-1][1]:
                merged[-1] = (merged[-1][0], end)
        else:
            merged.append((start, end))
    return merged


# =============================================================================
# INVARIANT FUNCTIONS
# =============================================================================


def check_segments_disjoint(events: Sequence[Event], segments: Sequence[Event]) -> None:
    """
    INVARIANT: no two flattened segments overlap.

    Raises:
        InvariantViolation: If two segments share a positive-length stretch
    """
    ordered = sorted(segments, key=lambda s: (s.start, s.end))
    for prev, cur in zip(ordered, ordered[1:]):
        if cur.start < prev.end:
            raise InvariantViolation(
                f"Segments overlap: [{prev.start.isoformat()}, {prev.end.isoformat()}) "
                f"and [{cur.start.isoformat()}, {cur.end.isoformat()})"
            )


def check_coverage_conserved(events: Sequence[Event], segments: Sequence[Event]) -> None:
    """
    INVARIANT: union of segments == union of input events.

    Raises:
        InvariantViolation: If some covered instant was lost or invented
    """
    expected = merge_ranges([(e.start, e.end) for e in events])
    actual = merge_ranges([(s.start, s.end) for s in segments])
    if expected != actual:
        raise InvariantViolation(
            f"Coverage mismatch: events cover {len(expected)} ranges, "
            f"segments cover {len(actual)} ranges ({expected!r} != {actual!r})"
        )


def check_priority_domination(events: Sequence[Event], segments: Sequence[Event]) -> None:
    """
    INVARIANT: each segment carries the highest priority covering it, and
    comes from an input event with that priority and paid flag.

    Raises:
        InvariantViolation: If a higher-priority event overlaps a segment,
            or no source event exists for it
    """
    for s in segments:
        overlapping = [e for e in events if e.overlaps(s)]
        top = max((e.priority for e in overlapping), default=None)
        if top is not None and top > s.priority:
            raise InvariantViolation(
                f"Segment [{s.start.isoformat()}, {s.end.isoformat()}) has priority "
                f"{s.priority} but is covered by priority {top}"
            )
        if not any(
            e.start <= s.start and s.end <= e.end and e.priority == s.priority and e.paid == s.paid
            for e in events
        ):
            raise InvariantViolation(
                f"Segment [{s.start.isoformat()}, {s.end.isoformat()}) has no source event"
            )


ALL_INVARIANTS = [
    check_segments_disjoint,
    check_coverage_conserved,
    check_priority_domination,
]


# =============================================================================
# ENFORCEMENT
# =============================================================================


def enforce_invariants(events: Sequence[Event], segments: Sequence[Event]) -> list[str]:
    """
    Run all invariants. Returns list of violations.

    Returns:
        List of violation messages. Empty = pass.
    """
    violations = []

    for invariant in ALL_INVARIANTS:
        try:
            invariant(events, segments)
        except InvariantViolation as e:
            violations.append(f"INVARIANT_VIOLATION: {str(e)}")

    return violations


def enforce_invariants_strict(events: Sequence[Event], segments: Sequence[Event]) -> None:
    """
    Strict enforcement - raises on first violation.

    Raises:
        InvariantViolation: If any invariant fails
    """
    for invariant in ALL_INVARIANTS:
        invariant(events, segments)
