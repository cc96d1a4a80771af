"""
Command-line interface for the season statistics engine.

Weekly workflow:
    pufc-stats process-match --file match.json
    pufc-stats sync 2026
    pufc-stats show 2026 --board performance --top 10

Season housekeeping:
    pufc-stats create-season 2027 --days sat tue
    pufc-stats migrate 2024
    pufc-stats update-percentages 2026
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pufc_stats.model.errors import StructuralError
from pufc_stats.model.leaderboard import AttendanceLeaderboard, refresh_percentages
from pufc_stats.model.match import Match, entry_name
from pufc_stats.model.migration import backfill_day_labels, backfill_performance_fields
from pufc_stats.model.profiles import ProfileDirectory
from pufc_stats.model.reports import attendance_frame, format_leaderboard, performance_frame
from pufc_stats.model.season_shell import DEFAULT_MATCH_DAYS, create_season_shell
from pufc_stats.model.sync import SyncResult, process_match, sync_season
from pufc_stats.model.tracker import Tracker, parse_season
from pufc_stats.tools.season_files import DEFAULT_DATA_DIR, SeasonFiles, read_json, write_json
from pufc_stats.utils.logging import (
    print_error,
    print_info,
    print_section,
    print_success,
    print_totals,
    print_warning,
    print_warnings,
    setup_logging,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pufc-stats",
        description="Season attendance and performance statistics"
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DEFAULT_DATA_DIR,
        help=f"Directory holding the season JSON files (default: {DEFAULT_DATA_DIR})"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log warnings and errors"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Sync command
    sync_parser = subparsers.add_parser(
        "sync",
        help="Recompute a season and update both leaderboards"
    )
    sync_parser.add_argument("year", help="Season year")

    # Process-match command
    match_parser = subparsers.add_parser(
        "process-match",
        help="Record one match and update the season"
    )
    match_parser.add_argument(
        "payload",
        nargs="?",
        default=None,
        help='JSON payload {"year": ..., "matchData": {...}} (default: read stdin)'
    )
    match_parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Read the JSON payload from a file"
    )
    match_parser.add_argument(
        "--strict",
        action="store_true",
        help="Abort without saving if the match raises any consistency warning"
    )

    # Update-percentages command
    pct_parser = subparsers.add_parser(
        "update-percentages",
        help="Recompute attendance percentages from the leaderboard summary"
    )
    pct_parser.add_argument("year", help="Season year")

    # Create-season command
    create_parser = subparsers.add_parser(
        "create-season",
        help="Create an empty season tracker"
    )
    create_parser.add_argument("year", help="Season year")
    create_parser.add_argument(
        "--days",
        nargs="+",
        default=list(DEFAULT_MATCH_DAYS),
        help="Match weekdays, e.g. sat tue (default: Tuesday Saturday)"
    )
    create_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing tracker"
    )

    # Migrate command
    migrate_parser = subparsers.add_parser(
        "migrate",
        help="Back-fill season files written by older versions"
    )
    migrate_parser.add_argument("year", help="Season year")

    # Show command
    show_parser = subparsers.add_parser(
        "show",
        help="Display a leaderboard"
    )
    show_parser.add_argument("year", help="Season year")
    show_parser.add_argument(
        "--board",
        choices=["performance", "attendance"],
        default="performance",
        help="Leaderboard to display"
    )
    show_parser.add_argument(
        "--top",
        type=int,
        default=None,
        help="Number of rows to show"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {
        "sync": run_sync,
        "process-match": run_process_match,
        "update-percentages": run_update_percentages,
        "create-season": run_create_season,
        "migrate": run_migrate,
        "show": run_show,
    }
    if args.command not in commands:
        parser.print_help()
        return 1

    setup_logging(verbose=not args.quiet)
    files = SeasonFiles(args.data_dir)

    try:
        return commands[args.command](args, files)
    except (StructuralError, FileNotFoundError) as e:
        print_error(str(e))
        return 1
    except ValueError as e:
        # json.JSONDecodeError and bad weekday names
        print_error(f"Invalid input: {e}")
        return 1


# ============================================================================
# Commands
# ============================================================================

def run_sync(args, files: SeasonFiles) -> int:
    """Recompute the tracker and reconcile both leaderboards."""
    season = parse_season(args.year)
    print_section(f"Syncing season {season}")

    tracker = files.load_tracker(season)
    attendance, performance = _load_leaderboards(files, season)

    result = sync_season(tracker, attendance, performance, files.load_profiles())
    _save_result(files, season, result)
    _print_result(result)
    return 0


def run_process_match(args, files: SeasonFiles) -> int:
    """Upsert one match from a JSON payload and resync the season."""
    payload = _read_payload(args)
    if not isinstance(payload, dict) or "matchData" not in payload:
        raise StructuralError('Payload must be an object with "year" and "matchData"')

    season = parse_season(payload.get("year"))
    profiles = files.load_profiles()
    match = Match.from_dict(fill_group_status(payload["matchData"], profiles))
    print_section(f"Processing match {match.id} ({season})")

    if files.tracker_path(season).exists():
        tracker = files.load_tracker(season)
    else:
        print_warning(f"No tracker for {season}, starting an empty one")
        tracker = Tracker(season=season)
    attendance, performance = _load_leaderboards(files, season)

    result = process_match(tracker, match, attendance, performance, profiles)

    if print_warnings(result.warnings) and args.strict:
        print_error("Aborting (--strict); nothing was saved")
        return 1

    _save_result(files, season, result)
    _print_result(result)
    return 0


def run_update_percentages(args, files: SeasonFiles) -> int:
    """Recompute attendance percentages without touching game counts."""
    season = parse_season(args.year)
    leaderboard, changed = refresh_percentages(files.load_attendance(season))
    files.save_attendance(season, leaderboard)

    print_success(f"Updated percentages for {len(leaderboard.players)} players")
    if changed:
        print_info(f"Changed: {', '.join(changed)}")
    return 0


def run_create_season(args, files: SeasonFiles) -> int:
    """Write an empty tracker for a new season."""
    season = parse_season(args.year)
    path = files.tracker_path(season)
    if path.exists() and not args.force:
        print_error(f"{path} already exists (use --force to overwrite)")
        return 1

    tracker = create_season_shell(season, args.days)
    files.save_tracker(tracker)
    print_success(f"Created {path} with {len(tracker.matches)} fixtures")
    return 0


def run_migrate(args, files: SeasonFiles) -> int:
    """Back-fill legacy performance fields and day labels."""
    season = parse_season(args.year)
    print_section(f"Migrating season {season}")

    performance_path = files.performance_path(season)
    if performance_path.exists():
        records, changed = backfill_performance_fields(read_json(performance_path))
        write_json(performance_path, records)
        print_success(f"Performance leaderboard: {changed} of {len(records)} rows updated")
    else:
        print_info(f"No performance leaderboard at {performance_path}")

    if files.tracker_path(season).exists():
        tracker, relabelled = backfill_day_labels(files.load_tracker(season))
        files.save_tracker(tracker)
        print_success(f"Tracker: {len(relabelled)} match day labels updated")
    else:
        print_info(f"No tracker at {files.tracker_path(season)}")
    return 0


def run_show(args, files: SeasonFiles) -> int:
    """Display a leaderboard as a table."""
    season = parse_season(args.year)

    if args.board == "attendance":
        leaderboard = files.load_attendance(season)
        summary = leaderboard.summary
        print(f"\nAttendance {season}: {summary.total_games} games "
              f"({summary.weekend_games} weekend, {summary.midweek_games} midweek)")
        df = attendance_frame(leaderboard)
    else:
        print(f"\nPerformance {season}:")
        df = performance_frame(files.load_performance(season))

    print("=" * 60)
    print(format_leaderboard(df, max_rows=args.top))
    return 0


# ============================================================================
# Helpers
# ============================================================================

def _read_payload(args) -> dict:
    if args.file is not None:
        return read_json(args.file)
    if args.payload is not None:
        return json.loads(args.payload)
    return json.load(sys.stdin)


def fill_group_status(match_data: dict, profiles: ProfileDirectory) -> dict:
    """
    Give team-layout appearances without a ``groupStatus`` their roster default.

    Returns a new match document; the input is not modified.
    """
    if not isinstance(match_data, dict) or not isinstance(match_data.get("attendance"), dict):
        return match_data

    attendance = {}
    for team, players in match_data["attendance"].items():
        attendance[team] = [
            {**p, "groupStatus": profiles.group_status(entry_name(p))}
            if isinstance(p, dict) and entry_name(p) and not p.get("groupStatus")
            else p
            for p in players or []
        ]
    return {**match_data, "attendance": attendance}


def _load_leaderboards(files: SeasonFiles, season: int):
    if files.attendance_path(season).exists():
        attendance = files.load_attendance(season)
    else:
        print_info(f"No attendance leaderboard for {season}, starting an empty one")
        attendance = AttendanceLeaderboard()

    if files.performance_path(season).exists():
        performance = files.load_performance(season)
    else:
        print_info(f"No performance leaderboard for {season}, starting an empty one")
        performance = []

    return attendance, performance


def _save_result(files: SeasonFiles, season: int, result: SyncResult) -> None:
    files.save_tracker(result.tracker)
    files.save_attendance(season, result.attendance)
    files.save_performance(season, result.performance)


def _print_result(result: SyncResult) -> None:
    tracker = result.tracker
    print_success(f"Tracker saved: {result.played_count} played matches")
    print_totals({
        "Total goals": tracker.total_goals,
        "Weekend goals": tracker.weekend_goals,
        "Weekday goals": tracker.weekday_goals,
        "Own goals": result.total_own_goals,
        "Players": len(tracker.all_players),
    })

    if result.added_attendance:
        print_info(f"New on attendance leaderboard: {', '.join(result.added_attendance)}")
    if result.added_performance:
        print_info(f"New on performance leaderboard: {', '.join(result.added_performance)}")


if __name__ == "__main__":
    sys.exit(main())
