"""
Schedule Module

Resolves an agent's overlapping, priority-ranked events into paid time.

Objects:
- Event (start, end, agent_id, priority, paid)
- BoundaryIndex (sorted event boundaries with claim flags)
- PaidTimeCalculator (source + filter + validation + measured resolution)

Invariants:
- Flattened segments never overlap
- Flattened segments cover exactly the union of the input events
- Each instant belongs to the highest-priority event covering it
"""

from .aggregator import resolve_paid_time, sum_paid_time, sum_unpaid_time
from .boundary_index import BoundaryIndex
from .calculator import PaidTimeCalculator
from .events import Event
from .resolver import flatten_events, order_by_priority
from .window import filter_events_for_agent

__all__ = [
    "BoundaryIndex",
    "Event",
    "PaidTimeCalculator",
    "filter_events_for_agent",
    "flatten_events",
    "order_by_priority",
    "resolve_paid_time",
    "sum_paid_time",
    "sum_unpaid_time",
]
