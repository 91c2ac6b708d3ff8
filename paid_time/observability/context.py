"""
Run ID of the paid-time calculation in progress.

The CLI opens one run per agent; the log formatters stamp every record
emitted inside it with the run ID.
"""

import contextvars
import uuid

_run_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar("run_id", default=None)


def get_run_id() -> str | None:
    return _run_id_var.get()


class RunContext:
    """
    Scope one calculation run.

    Usage:
        with RunContext(agent_id=7) as run:
            calculator.calculate_paid_time_for_agent(start, end, 7)
            # run.run_id == "run-7-<12 hex>", also on every log record
    """

    def __init__(self, agent_id: int | None = None, run_id: str | None = None):
        if run_id is None:
            suffix = uuid.uuid4().hex[:12]
            run_id = f"run-{agent_id}-{suffix}" if agent_id is not None else f"run-{suffix}"
        self.run_id = run_id
        self._token: contextvars.Token | None = None

    def __enter__(self) -> "RunContext":
        self._token = _run_id_var.set(self.run_id)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self._token is not None:
            _run_id_var.reset(self._token)
            self._token = None
