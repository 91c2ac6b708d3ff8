"""
In-process metrics for paid-time resolutions.

The calculator records into the module-level REGISTRY. `paid-time --metrics`
prints the registry in Prometheus text format on stderr once the run ends.
"""

import threading
from dataclasses import dataclass, field


@dataclass
class Counter:
    """Thread-safe counter metric."""

    name: str
    description: str
    _value: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def inc(self, amount: int = 1) -> None:
        with self._lock:
            self._value += amount

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def samples(self) -> list[tuple[str, float]]:
        return [(self.name, self.value)]


@dataclass
class Histogram:
    """Running count, sum and maximum of observed durations (seconds)."""

    name: str
    description: str
    _count: int = 0
    _sum: float = 0.0
    _max: float = 0.0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def observe(self, value: float) -> None:
        with self._lock:
            self._count += 1
            self._sum += value
            self._max = max(self._max, value)

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    @property
    def sum(self) -> float:
        with self._lock:
            return self._sum

    @property
    def max(self) -> float:
        with self._lock:
            return self._max

    def samples(self) -> list[tuple[str, float]]:
        with self._lock:
            return [
                (f"{self.name}_count", self._count),
                (f"{self.name}_sum", self._sum),
                (f"{self.name}_max", self._max),
            ]


class MetricsRegistry:
    """Named metrics, get-or-create."""

    def __init__(self) -> None:
        self._metrics: dict[str, Counter | Histogram] = {}
        self._lock = threading.Lock()

    def _get(self, kind: type, name: str, description: str):
        with self._lock:
            metric = self._metrics.setdefault(name, kind(name, description))
        if not isinstance(metric, kind):
            raise TypeError(f"Metric {name} is already registered as {type(metric).__name__}")
        return metric

    def counter(self, name: str, description: str = "") -> Counter:
        return self._get(Counter, name, description)

    def histogram(self, name: str, description: str = "") -> Histogram:
        return self._get(Histogram, name, description)

    def to_prometheus(self) -> str:
        """Export metrics in Prometheus text format, sorted by name."""
        with self._lock:
            metrics = sorted(self._metrics.values(), key=lambda m: m.name)

        lines: list[str] = []
        for metric in metrics:
            if metric.description:
                lines.append(f"# HELP {metric.name} {metric.description}")
            kind = "counter" if isinstance(metric, Counter) else "summary"
            lines.append(f"# TYPE {metric.name} {kind}")
            lines.extend(f"{sample} {value}" for sample, value in metric.samples())
        return "\n".join(lines) + "\n"


REGISTRY = MetricsRegistry()

resolutions_total = REGISTRY.counter("paid_time_resolutions_total", "Total paid-time resolutions")
resolution_errors_total = REGISTRY.counter(
    "paid_time_resolution_errors_total", "Paid-time calculations rejected or aborted"
)
resolution_seconds = REGISTRY.histogram(
    "paid_time_resolution_seconds", "Time spent in the priority resolver"
)
