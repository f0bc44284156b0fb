"""Command-line entry point for workplanner.

Usage:
    workplanner plan request.json [--now 2026-03-02T09:00:00Z] [--json]
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from dateutil import parser as date_parser
from pydantic import ValidationError

from workplanner.config import LOG_LEVEL
from workplanner.engine.optimizer import optimize_work_plan
from workplanner.models.plan_request import WorkPlanOptimizeRequest
from workplanner.models.plan_response import WorkPlanOptimizeResponse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="workplanner", description="Build a day-by-day study plan.")
    subcommands = parser.add_subparsers(dest="command", required=True)

    plan = subcommands.add_parser("plan", help="Plan a work-plan request stored as JSON")
    plan.add_argument("request", type=Path, help="Path to a WorkPlanOptimizeRequest JSON file")
    plan.add_argument("--now", help="Planning instant (ISO-8601); defaults to the current time")
    plan.add_argument("--json", action="store_true", help="Print the full response as JSON")
    return parser


def render_plan(response: WorkPlanOptimizeResponse) -> str:
    """Human-readable rendering of a plan."""
    summary = response.summary
    action = response.next_best_action
    lines = [
        f"Planned {summary.total_work_items} work items over {summary.days_planned} days "
        f"({summary.total_scheduled_hours}h scheduled of {summary.total_estimated_hours}h estimated)",
        "",
        f"Next: {action.action}",
        f"  {action.reason}",
        "",
        "Adjustments:",
    ]
    lines.extend(f"  [{adjustment.kind}] {adjustment.title}: {adjustment.description}" for adjustment in response.adjustments)
    lines.append("")
    lines.append("Why:")
    lines.extend(f"  - {explanation}" for explanation in response.explanations)

    for day in response.daily_plan:
        lines.append("")
        lines.append(f"{day.date} ({day.focus_window}, {day.total_minutes} min)")
        for task in day.tasks:
            late = " LATE" if task.is_late_placement else ""
            lines.append(f"  #{task.priority_rank} {task.minutes:>3} min {task.mode:<17} {task.title}{late}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    try:
        request = WorkPlanOptimizeRequest.model_validate_json(args.request.read_text())
    except OSError as e:
        print(f"Cannot read {args.request}: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Invalid request in {args.request}:\n{e}", file=sys.stderr)
        return 1

    if args.now:
        try:
            now = date_parser.isoparse(args.now)
        except ValueError:
            print(f"Invalid --now value: {args.now!r}", file=sys.stderr)
            return 2
    else:
        now = datetime.now(timezone.utc)

    response = optimize_work_plan(request, now=now)

    if args.json:
        print(response.model_dump_json(by_alias=True, indent=2))
    else:
        print(render_plan(response))
    return 0


if __name__ == "__main__":
    sys.exit(main())
