"""
Event sources - providers of "all events in the system".

A source is any zero-argument callable returning an iterable of Events.
The calculator fetches from it and filters to one agent and window.
"""

import csv
import logging
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from paid_time.schedule.events import Event

logger = logging.getLogger(__name__)

CSV_COLUMNS = ("agent_id", "start", "end", "priority", "paid")

_TRUE_VALUES = frozenset(("true", "1", "yes", "y"))
_FALSE_VALUES = frozenset(("false", "0", "no", "n"))


class EventSourceError(Exception):
    """Raised when a source cannot produce events."""

    pass


class InMemoryEventSource:
    """Source backed by a list. Each fetch returns a fresh copy."""

    def __init__(self, events: Iterable[Event] = ()):
        self._events = list(events)

    def __call__(self) -> list[Event]:
        return list(self._events)


def parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def parse_instant(raw: str) -> datetime:
    """ISO-8601 timestamp; a trailing 'Z' is read as UTC."""
    return datetime.fromisoformat(raw.strip())


class CsvEventSource:
    """
    Source reading events from a CSV file.

    Header must contain agent_id,start,end,priority,paid (any order,
    extra columns ignored). The file is re-read on every fetch.
    """

    def __init__(self, path: Path | str, delimiter: str = ","):
        self.path = Path(path)
        self.delimiter = delimiter

    def __call__(self) -> list[Event]:
        try:
            with open(self.path, newline="") as f:
                return self._read(f)
        except OSError as exc:
            raise EventSourceError(f"Cannot read events from {self.path}: {exc}") from exc

    def _read(self, f) -> list[Event]:
        reader = csv.DictReader(f, delimiter=self.delimiter)
        missing = [c for c in CSV_COLUMNS if c not in (reader.fieldnames or [])]
        if missing:
            raise EventSourceError(f"{self.path}: missing columns {', '.join(missing)}")

        events = []
        for row in reader:
            try:
                events.append(
                    Event(
                        start=parse_instant(row["start"]),
                        end=parse_instant(row["end"]),
                        agent_id=int(row["agent_id"]),
                        priority=int(row["priority"]),
                        paid=parse_bool(row["paid"]),
                    )
                )
            except (ValueError, TypeError, AttributeError) as exc:
                raise EventSourceError(f"{self.path}:{reader.line_num}: {exc}") from exc

        logger.debug("Loaded %d events from %s", len(events), self.path)
        return events

