"""
Season statistics engine: match records, tracker recomputation, per-player
aggregation and leaderboard reconciliation.
"""

from pufc_stats.model.errors import StructuralError, ConsistencyWarning
from pufc_stats.model.config import StatsConfig
from pufc_stats.model.match import Match, PlayerAppearance, match_date
from pufc_stats.model.tracker import Tracker, parse_season, recompute_tracker
from pufc_stats.model.accumulator import (
    PeriodStats,
    AttendanceTally,
    AttendanceSummary,
    PlayerSeasonStats,
    SeasonAggregate,
    accumulate,
    attendance_summary,
)
from pufc_stats.model.profiles import PlayerProfile, ProfileDirectory
from pufc_stats.model.leaderboard import (
    AttendanceEntry,
    AttendanceLeaderboard,
    PerformanceEntry,
    performance_entries,
    reconcile_attendance,
    reconcile_performance,
    refresh_percentages,
    round_half_away,
)
from pufc_stats.model.validation import check_match_consistency
from pufc_stats.model.upsert import upsert_match, upsert_match_checked
from pufc_stats.model.sync import SyncResult, sync_season, process_match
from pufc_stats.model.season_shell import create_season_shell
from pufc_stats.model.migration import backfill_performance_fields, backfill_day_labels

__all__ = [
    "StructuralError",
    "ConsistencyWarning",
    "StatsConfig",
    "Match",
    "PlayerAppearance",
    "match_date",
    "Tracker",
    "parse_season",
    "recompute_tracker",
    "PeriodStats",
    "AttendanceTally",
    "AttendanceSummary",
    "PlayerSeasonStats",
    "SeasonAggregate",
    "accumulate",
    "attendance_summary",
    "PlayerProfile",
    "ProfileDirectory",
    "AttendanceEntry",
    "AttendanceLeaderboard",
    "PerformanceEntry",
    "performance_entries",
    "reconcile_attendance",
    "reconcile_performance",
    "refresh_percentages",
    "round_half_away",
    "check_match_consistency",
    "upsert_match",
    "upsert_match_checked",
    "SyncResult",
    "sync_season",
    "process_match",
    "create_season_shell",
    "backfill_performance_fields",
    "backfill_day_labels",
]
