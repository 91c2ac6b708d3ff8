#!/usr/bin/env python3
"""
Paid Time CLI

Usage:
    paid-time events.csv --agent 1 --start 2022-07-06T00:00:00Z --end 2022-07-07T00:00:00Z
    paid-time events.csv --agent 1 --agent 2 --start ... --end ... --json
    paid-time events.csv --agent 1 --start ... --end ... --metrics 2>metrics.prom
    python -m cli.main events.csv --agent 1 --start ... --end ...
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from cli.report import AgentPaidTime, PaidTimeReport
from paid_time.config import LOG_JSON, LOG_LEVEL, load_settings
from paid_time.contracts import ValidationError
from paid_time.observability import REGISTRY, RunContext, configure_logging
from paid_time.schedule import PaidTimeCalculator
from paid_time.sources import CsvEventSource, EventSourceError, parse_instant

logger = logging.getLogger(__name__)


def _instant(raw: str):
    try:
        return parse_instant(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid ISO-8601 timestamp: {raw!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paid-time",
        description="Paid time per agent from overlapping, priority-ranked events",
    )
    parser.add_argument("events", type=Path, help="CSV file: agent_id,start,end,priority,paid")
    parser.add_argument(
        "--agent",
        "-a",
        dest="agents",
        type=int,
        action="append",
        required=True,
        help="Agent ID (repeat for several agents)",
    )
    parser.add_argument("--start", "-s", type=_instant, required=True, help="Window start ISO-8601")
    parser.add_argument("--end", "-e", type=_instant, required=True, help="Window end ISO-8601")
    parser.add_argument("--json", "-j", action="store_true", help="Output JSON")
    parser.add_argument("--config", "-c", type=Path, help="Settings YAML file")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Log level (default: %(default)s)")
    parser.add_argument(
        "--metrics",
        action="store_true",
        help="Print resolver metrics (Prometheus text format) to stderr on exit",
    )
    parser.add_argument(
        "--allow-same-priority-overlap",
        action="store_true",
        help="Resolve overlapping same-priority events by input order instead of rejecting them",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    finally:
        if args.metrics:
            sys.stderr.write(REGISTRY.to_prometheus())


def run(args: argparse.Namespace) -> int:
    configure_logging(level=args.log_level, json_format=LOG_JSON)

    settings = load_settings(args.config)
    if args.allow_same_priority_overlap:
        settings = replace(settings, reject_same_priority_overlap=False)

    source = CsvEventSource(args.events, delimiter=settings.csv_delimiter)
    calculator = PaidTimeCalculator(source, settings=settings)

    report = PaidTimeReport(window_start=args.start, window_end=args.end)
    try:
        for agent_id in args.agents:
            with RunContext(agent_id=agent_id):
                paid = calculator.calculate_paid_time_for_agent(args.start, args.end, agent_id)
            report.agents.append(AgentPaidTime.from_duration(agent_id, paid))
    except (ValidationError, EventSourceError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        for entry in report.agents:
            print(f"agent {entry.agent_id}: {entry.paid_time} paid ({entry.paid_minutes:.1f} min)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
