"""Command-line interface over the roster analytics engine.

Each subcommand loads the roster once, runs one analytics component and prints
the result to stdout as JSON. Subcommands are implemented as `cmd_*` functions
that accept the loaded snapshot and the argparse namespace.
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Callable

import pandas as pd
from dotenv import load_dotenv
from pydantic import BaseModel

from hr_analytics.analytics import (
    apply_query,
    bucket_tenure_at_exit,
    build_monthly_series,
    compute_kpis,
    exit_tenure_records,
    exit_type_breakdown,
    list_managers,
    tally_field,
    team_members,
    yearly_exit_trends,
)
from hr_analytics.config import get_settings
from hr_analytics.exceptions import RosterLoadError
from hr_analytics.ingest import load_roster
from hr_analytics.logging_config import configure_logging
from hr_analytics.models import RosterFilters, RosterSort
from hr_analytics.snapshot import RosterSnapshot

log = logging.getLogger(__name__)

BREAKDOWN_FIELDS = ("department", "location", "gender", "designation")


# --------------------------------------------------
# Helpers
# --------------------------------------------------
def _jsonable(result: Any) -> Any:
    """Convert models (or containers of models) into JSON-compatible values."""
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json")
    if isinstance(result, dict):
        return {k: _jsonable(v) for k, v in result.items()}
    if isinstance(result, (list, tuple)):
        return [_jsonable(v) for v in result]
    return result


def _as_of_date(value: str) -> pd.Timestamp:
    """argparse type for --as-of; rejects values pandas cannot parse."""
    try:
        return pd.Timestamp(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date: {value!r}") from exc


def emit(result: Any) -> None:
    """Print `result` to stdout as indented JSON."""
    json.dump(_jsonable(result), sys.stdout, indent=2)
    sys.stdout.write("\n")


# --------------------------------------------------
# Commands
# --------------------------------------------------
def cmd_summary(roster: RosterSnapshot, args: argparse.Namespace) -> None:
    """Print the KPI snapshot."""
    emit(compute_kpis(roster, args.as_of))


def cmd_breakdown(roster: RosterSnapshot, args: argparse.Namespace) -> None:
    """Print a categorical tally for one field."""
    emit(tally_field(roster, args.field, active_only=args.active_only))


def cmd_exit_types(roster: RosterSnapshot, _: argparse.Namespace) -> None:
    emit(exit_type_breakdown(roster))


def cmd_exit_trends(roster: RosterSnapshot, _: argparse.Namespace) -> None:
    emit(yearly_exit_trends(roster))


def cmd_tenure(roster: RosterSnapshot, args: argparse.Namespace) -> None:
    """Print tenure-at-exit buckets, or per-employee rows with --detail."""
    if args.detail:
        emit(exit_tenure_records(roster))
    else:
        emit(bucket_tenure_at_exit(roster))


def cmd_monthly(roster: RosterSnapshot, args: argparse.Namespace) -> None:
    window = args.window_months or get_settings().window_months
    emit(build_monthly_series(roster, args.as_of, window_months=window))


def cmd_managers(roster: RosterSnapshot, args: argparse.Namespace) -> None:
    emit(
        list_managers(
            roster,
            search=args.search,
            sort_by=args.sort_by,
            direction=args.direction,
            active_only=not args.all,
        )
    )


def cmd_team(roster: RosterSnapshot, args: argparse.Namespace) -> None:
    emit(team_members(roster, args.manager_id, active_only=not args.all))


def cmd_roster(roster: RosterSnapshot, args: argparse.Namespace) -> None:
    """Print one page of the filtered and sorted roster."""
    filters = RosterFilters(
        search_term=args.search,
        department=args.department,
        location=args.location,
        status=args.status,
    )
    sort = RosterSort(field=args.sort_field, direction=args.sort_direction)
    emit(apply_query(roster, filters, sort, page=args.page, page_size=get_settings().page_size))


COMMANDS: dict[str, Callable[[RosterSnapshot, argparse.Namespace], None]] = {
    "summary": cmd_summary,
    "breakdown": cmd_breakdown,
    "exit-types": cmd_exit_types,
    "exit-trends": cmd_exit_trends,
    "tenure": cmd_tenure,
    "monthly": cmd_monthly,
    "managers": cmd_managers,
    "team": cmd_team,
    "roster": cmd_roster,
}


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    Returns:
        Configured argparse.ArgumentParser with one subcommand per entry in
        `COMMANDS`.
    """
    p = argparse.ArgumentParser(prog="hr-analytics")
    p.add_argument("--roster", default=None, help="CSV path or URL (default: HR_ROSTER_SOURCE)")
    p.add_argument(
        "--as-of", default=None, type=_as_of_date, help="Reference date, YYYY-MM-DD (default: now)"
    )
    p.add_argument("--refresh", action="store_true", help="Re-download a remote roster")
    p.add_argument("--log-level", default="INFO")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("summary")

    p_breakdown = sub.add_parser("breakdown")
    p_breakdown.add_argument("--field", choices=BREAKDOWN_FIELDS, default="department")
    p_breakdown.add_argument("--active-only", action="store_true")

    sub.add_parser("exit-types")
    sub.add_parser("exit-trends")

    p_tenure = sub.add_parser("tenure")
    p_tenure.add_argument("--detail", action="store_true")

    p_monthly = sub.add_parser("monthly")
    p_monthly.add_argument("--window-months", type=int, default=None)

    p_managers = sub.add_parser("managers")
    p_managers.add_argument("--search", default="")
    p_managers.add_argument("--sort-by", choices=["name", "department", "team_size"], default="team_size")
    p_managers.add_argument("--direction", choices=["asc", "desc"], default="desc")
    p_managers.add_argument("--all", action="store_true", help="Include exited reports")

    p_team = sub.add_parser("team")
    p_team.add_argument("--manager-id", required=True)
    p_team.add_argument("--all", action="store_true", help="Include exited reports")

    p_roster = sub.add_parser("roster")
    p_roster.add_argument("--search", default="")
    p_roster.add_argument("--department", default="")
    p_roster.add_argument("--location", default="")
    p_roster.add_argument("--status", choices=["all", "active", "exited"], default="all")
    p_roster.add_argument(
        "--sort-field",
        choices=["id", "name", "designation", "department", "location", "join_date"],
        default="id",
    )
    p_roster.add_argument("--sort-direction", choices=["asc", "desc"], default="asc")
    p_roster.add_argument("--page", type=int, default=1)

    return p


def run(args: argparse.Namespace) -> None:
    """Load the roster named by `args` and dispatch to the subcommand."""
    settings = get_settings()
    source = args.roster or settings.roster_source
    roster = load_roster(source, cache_dir=settings.cache_dir, force_download=args.refresh)
    COMMANDS[args.cmd](roster, args)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_path, level=args.log_level)

    try:
        run(args)
    except RosterLoadError as exc:
        log.error("%s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
