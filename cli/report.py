"""
Pydantic models for the CLI's JSON output.

Shape: {window_start, window_end, agents: [{agent_id, paid_seconds, paid_minutes, paid_time}]}
"""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field


class AgentPaidTime(BaseModel):
    """Paid time of one agent over the report window."""

    agent_id: int = Field(description="Agent the events pertain to")
    paid_seconds: float = Field(ge=0, description="Total paid time in seconds")
    paid_minutes: float = Field(ge=0, description="Total paid time in minutes")
    paid_time: str = Field(description="Total paid time as H:MM:SS")

    @classmethod
    def from_duration(cls, agent_id: int, paid: timedelta) -> "AgentPaidTime":
        seconds = paid.total_seconds()
        return cls(
            agent_id=agent_id,
            paid_seconds=seconds,
            paid_minutes=seconds / 60,
            paid_time=str(paid),
        )


class PaidTimeReport(BaseModel):
    """Paid time per agent for one window."""

    window_start: datetime
    window_end: datetime
    agents: list[AgentPaidTime] = Field(default_factory=list)
