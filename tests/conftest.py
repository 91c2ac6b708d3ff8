"""
Test configuration - ensures repo root is in sys.path + settings isolation.

This allows tests to import from top-level packages (paid_time, cli, tests.fixtures).
Every test runs with PAID_TIME_HOME and PAID_TIME_CONFIG pointed at a temp
directory so a developer's own settings file can never change a result.
"""

import sys
from pathlib import Path

import pytest

# Add repo root to sys.path so tests can import paid_time.*, cli.*, tests.fixtures.*
REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from tests.fixtures import scenario_a  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point settings lookups at an empty temp home."""
    home = tmp_path / "paid_time_home"
    monkeypatch.setenv("PAID_TIME_HOME", str(home))
    monkeypatch.delenv("PAID_TIME_CONFIG", raising=False)
    return home


@pytest.fixture
def base_events():
    """Three staggered events: p1 paid, p2 unpaid, p3 paid (60 paid minutes)."""
    return scenario_a()


@pytest.fixture
def write_csv(tmp_path):
    """Write rows to an events CSV and return its path."""

    def _write(rows: list[str], header: str = "agent_id,start,end,priority,paid") -> Path:
        path = tmp_path / "events.csv"
        path.write_text("\n".join([header, *rows]) + "\n")
        return path

    return _write
