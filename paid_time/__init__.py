# paid-time - Core Library
"""
Paid time for an agent from overlapping, priority-ranked events.

Usage:
    from paid_time import Event, resolve_paid_time

    total = resolve_paid_time(events)  # timedelta
"""

from .schedule import Event, PaidTimeCalculator, flatten_events, resolve_paid_time, sum_paid_time

__version__ = "0.1.0"

__all__ = [
    "Event",
    "PaidTimeCalculator",
    "flatten_events",
    "resolve_paid_time",
    "sum_paid_time",
]
