"""
Window filter - the agent/containment selection done before resolution.
"""

from collections.abc import Iterable
from datetime import datetime

from paid_time.contracts.validation import validate_timestamp_kinds
from paid_time.schedule.events import Event


def filter_events_for_agent(
    events: Iterable[Event], window_start: datetime, window_end: datetime, agent_id: int
) -> list[Event]:
    """
    Events of one agent lying fully inside [window_start, window_end].

    Raises:
        MixedTimestampError: the agent's events and the window mix naive and
            timezone-aware timestamps
    """
    agent_events = [e for e in events if e.agent_id == agent_id]
    validate_timestamp_kinds(agent_events, window_start, window_end)
    return [e for e in agent_events if not (e.start < window_start or e.end > window_end)]
