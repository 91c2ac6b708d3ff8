"""
Test fixtures for deterministic testing.

This module provides:
- schedules: pinned event lists with known paid totals
"""

from .schedules import (
    DAY,
    at,
    event,
    scenario_a,
    scenario_b,
    scenario_c,
    scenario_d,
    worked_example,
)

__all__ = [
    "DAY",
    "at",
    "event",
    "scenario_a",
    "scenario_b",
    "scenario_c",
    "scenario_d",
    "worked_example",
]
