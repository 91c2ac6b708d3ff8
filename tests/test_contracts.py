"""
Tests for input validation and resolution invariants.
"""

import pytest

from paid_time.contracts import (
    InvalidIntervalError,
    InvariantViolation,
    MixedTimestampError,
    SamePriorityOverlapError,
    ValidationError,
    check_coverage_conserved,
    check_priority_domination,
    check_segments_disjoint,
    enforce_invariants,
    enforce_invariants_strict,
    find_same_priority_overlap,
    validate_events,
    validate_timestamp_kinds,
    validate_window,
)
from paid_time.contracts.invariants import merge_ranges
from tests.fixtures import at, event, scenario_a, worked_example


def naive(e):
    return e.narrowed(e.start.replace(tzinfo=None), e.end.replace(tzinfo=None))


# =============================================================================
# VALIDATION
# =============================================================================


class TestValidateEvents:
    def test_valid_schedule_passes(self):
        validate_events(worked_example())

    def test_inverted_interval_rejected(self):
        with pytest.raises(InvalidIntervalError, match="after it ends"):
            validate_events([event("10:00", "09:00", 1, True)])

    def test_inverted_interval_is_validation_error(self):
        with pytest.raises(ValidationError):
            validate_events([event("10:00", "09:00", 1, True)])

    def test_zero_length_is_valid(self):
        validate_events([event("10:00", "10:00", 1, True)])

    def test_same_priority_overlap_rejected(self):
        first = event("08:00", "09:00", 1, True)
        second = event("08:30", "09:30", 1, False)
        with pytest.raises(SamePriorityOverlapError) as exc_info:
            validate_events([first, second])
        assert exc_info.value.first == first
        assert exc_info.value.second == second
        assert "priority-1" in str(exc_info.value)

    def test_same_priority_overlap_allowed_when_disabled(self):
        events = [event("08:00", "09:00", 1, True), event("08:30", "09:30", 1, False)]
        validate_events(events, reject_same_priority_overlap=False)

    def test_inverted_interval_rejected_even_when_overlap_allowed(self):
        with pytest.raises(InvalidIntervalError):
            validate_events([event("10:00", "09:00", 1, True)], reject_same_priority_overlap=False)


class TestFindSamePriorityOverlap:
    def test_touching_events_do_not_overlap(self):
        events = [event("08:00", "09:00", 1, True), event("09:00", "10:00", 1, True)]
        assert find_same_priority_overlap(events) is None

    def test_different_priorities_may_overlap(self):
        assert find_same_priority_overlap(scenario_a()) is None

    def test_different_agents_may_overlap(self):
        events = [
            event("08:00", "09:00", 1, True, agent_id=1),
            event("08:30", "09:30", 1, True, agent_id=2),
        ]
        assert find_same_priority_overlap(events) is None

    def test_overlap_hidden_behind_long_event(self):
        long = event("08:00", "12:00", 1, True)
        short = event("08:30", "09:00", 1, True)
        later = event("10:00", "11:00", 1, True)
        pair = find_same_priority_overlap([later, short, long])
        assert pair is not None
        assert long in pair

    def test_zero_length_inside_other_is_not_overlap(self):
        events = [event("08:00", "09:00", 1, True), event("08:30", "08:30", 1, False)]
        assert find_same_priority_overlap(events) is None


class TestValidateWindow:
    def test_inverted_window_rejected(self):
        with pytest.raises(InvalidIntervalError, match="Window start"):
            validate_window(at("10:00"), at("09:00"))

    def test_empty_window_valid(self):
        validate_window(at("10:00"), at("10:00"))

    def test_naive_and_aware_bounds_rejected(self):
        with pytest.raises(MixedTimestampError, match="naive and timezone-aware"):
            validate_window(at("09:00").replace(tzinfo=None), at("10:00"))

    def test_naive_window_valid(self):
        validate_window(at("09:00").replace(tzinfo=None), at("10:00").replace(tzinfo=None))


class TestValidateTimestampKinds:
    def test_all_aware_passes(self):
        validate_timestamp_kinds(worked_example(), at("00:00"), at("23:59"))

    def test_all_naive_passes(self):
        events = [naive(e) for e in worked_example()]
        validate_timestamp_kinds(events, at("00:00").replace(tzinfo=None))

    def test_mixed_events_rejected(self):
        events = [event("08:00", "09:00", 1, True), naive(event("10:00", "11:00", 2, False))]
        with pytest.raises(MixedTimestampError):
            validate_timestamp_kinds(events)

    def test_naive_events_with_aware_window_rejected(self):
        events = [naive(event("08:00", "09:00", 1, True))]
        with pytest.raises(MixedTimestampError):
            validate_timestamp_kinds(events, at("00:00"), at("23:59"))

    def test_is_validation_error(self):
        events = [event("08:00", "09:00", 1, True), naive(event("10:00", "11:00", 1, True))]
        with pytest.raises(ValidationError):
            validate_events(events)

    def test_no_timestamps_passes(self):
        validate_timestamp_kinds([])


# =============================================================================
# INVARIANTS
# =============================================================================


class TestMergeRanges:
    def test_merges_overlapping_and_touching(self):
        ranges = [
            (at("09:00"), at("10:00")),
            (at("08:00"), at("09:00")),
            (at("11:00"), at("12:00")),
        ]
        assert merge_ranges(ranges) == [(at("08:00"), at("10:00")), (at("11:00"), at("12:00"))]

    def test_drops_empty_ranges(self):
        assert merge_ranges([(at("08:00"), at("08:00"))]) == []


class TestInvariantChecks:
    def test_overlapping_segments_detected(self):
        segments = [event("08:00", "09:00", 1, True), event("08:30", "09:30", 2, True)]
        with pytest.raises(InvariantViolation, match="Segments overlap"):
            check_segments_disjoint([], segments)

    def test_lost_coverage_detected(self):
        events = [event("08:00", "10:00", 1, True)]
        segments = [event("08:00", "09:00", 1, True)]
        with pytest.raises(InvariantViolation, match="Coverage mismatch"):
            check_coverage_conserved(events, segments)

    def test_wrong_winner_detected(self):
        events = [event("08:00", "10:00", 1, True), event("08:00", "10:00", 2, False)]
        segments = [event("08:00", "10:00", 1, True)]
        with pytest.raises(InvariantViolation, match="covered by priority 2"):
            check_priority_domination(events, segments)

    def test_segment_without_source_detected(self):
        events = [event("08:00", "10:00", 1, True)]
        segments = [event("08:00", "10:00", 1, False)]
        with pytest.raises(InvariantViolation, match="no source event"):
            check_priority_domination(events, segments)

    def test_enforce_collects_all_violations(self):
        events = [event("08:00", "10:00", 1, True), event("08:00", "10:00", 2, False)]
        segments = [event("08:00", "09:00", 1, True), event("08:30", "09:00", 1, True)]
        violations = enforce_invariants(events, segments)
        assert len(violations) == 3
        assert all(v.startswith("INVARIANT_VIOLATION: ") for v in violations)

    def test_enforce_strict_raises_first(self):
        segments = [event("08:00", "09:00", 1, True), event("08:30", "09:30", 1, True)]
        with pytest.raises(InvariantViolation, match="Segments overlap"):
            enforce_invariants_strict(segments, segments)
