"""
Contracts Module - validation and invariant checks for paid-time resolution.

This module provides:
- validation.py: Input checks run before resolution (ValidationError family)
- invariants.py: Semantic correctness checks on flattened segments

Validation failures are caller errors. Invariant violations are internal
errors and abort the calculation.
"""

from .invariants import (
    ALL_INVARIANTS,
    InvariantViolation,
    check_coverage_conserved,
    check_priority_domination,
    check_segments_disjoint,
    enforce_invariants,
    enforce_invariants_strict,
)
from .validation import (
    InvalidIntervalError,
    MixedTimestampError,
    SamePriorityOverlapError,
    ValidationError,
    find_same_priority_overlap,
    validate_events,
    validate_timestamp_kinds,
    validate_window,
)

__all__ = [
    # Invariants
    "ALL_INVARIANTS",
    "InvariantViolation",
    "check_coverage_conserved",
    "check_priority_domination",
    "check_segments_disjoint",
    "enforce_invariants",
    "enforce_invariants_strict",
    # Validation
    "InvalidIntervalError",
    "MixedTimestampError",
    "SamePriorityOverlapError",
    "ValidationError",
    "find_same_priority_overlap",
    "validate_events",
    "validate_timestamp_kinds",
    "validate_window",
]
