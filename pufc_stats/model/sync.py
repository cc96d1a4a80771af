"""
Season synchronisation: tracker → statistics → leaderboards.

``process_match`` is the write path for one match record:
    upsert → recompute tracker → accumulate → reconcile both leaderboards

``sync_season`` runs the last three steps alone, for a tracker that is
already up to date (e.g. after hand-editing the season file).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pufc_stats.model.accumulator import accumulate, attendance_summary
from pufc_stats.model.config import StatsConfig
from pufc_stats.model.errors import ConsistencyWarning
from pufc_stats.model.leaderboard import (
    AttendanceLeaderboard,
    PerformanceEntry,
    reconcile_attendance,
    reconcile_performance,
)
from pufc_stats.model.match import Match
from pufc_stats.model.profiles import ProfileLookup
from pufc_stats.model.tracker import Tracker, recompute_tracker
from pufc_stats.model.upsert import upsert_match_checked
from pufc_stats.model.validation import check_match_consistency

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """Updated season documents plus what changed on the way."""

    tracker: Tracker
    attendance: AttendanceLeaderboard | None = None
    performance: list[PerformanceEntry] | None = None
    warnings: list[ConsistencyWarning] = field(default_factory=list)
    added_attendance: list[str] = field(default_factory=list)
    added_performance: list[str] = field(default_factory=list)

    @property
    def played_count(self) -> int:
        return len(self.tracker.played_matches())

    @property
    def total_own_goals(self) -> int:
        if self.performance is None:
            return 0
        return sum(e.totals.own_goals for e in self.performance)


def sync_season(
    tracker: Tracker,
    attendance: AttendanceLeaderboard,
    performance: list[PerformanceEntry],
    profile_lookup: ProfileLookup | None = None,
    config: StatsConfig | None = None,
) -> SyncResult:
    """
    Bring both leaderboards in line with the tracker.

    Args:
        tracker: Season tracker (recomputed before use)
        attendance: Persisted attendance leaderboard
        performance: Persisted performance leaderboard rows
        profile_lookup: Roster lookup for first-seen players
        config: Aggregation settings

    Returns:
        SyncResult with the recomputed tracker and updated leaderboards
    """
    tracker = recompute_tracker(tracker, config)
    played = tracker.played_matches()
    logger.info(f"Processing {len(played)} played matches for {tracker.season}")

    aggregate = accumulate(played, config)

    attendance, added_attendance = reconcile_attendance(
        attendance,
        aggregate.attendance,
        profile_lookup,
        summary=attendance_summary(played, config),
        season=tracker.season,
        config=config,
    )
    performance, added_performance = reconcile_performance(
        performance, aggregate.performance, profile_lookup, config
    )

    return SyncResult(
        tracker=tracker,
        attendance=attendance,
        performance=performance,
        added_attendance=added_attendance,
        added_performance=added_performance,
    )


def process_match(
    tracker: Tracker,
    match: Match,
    attendance: AttendanceLeaderboard | None = None,
    performance: list[PerformanceEntry] | None = None,
    profile_lookup: ProfileLookup | None = None,
    config: StatsConfig | None = None,
) -> SyncResult:
    """
    Record one match and, when leaderboards are given, resync them.

    Consistency warnings for the incoming record (scoreline mismatch,
    overwriting a played match) are collected on the result; they do not
    stop processing. Leaderboards are only reconciled when both are given.
    """
    warnings = check_match_consistency(match)

    tracker, overwrite = upsert_match_checked(tracker, match, config)
    if overwrite is not None:
        warnings.append(overwrite)

    if attendance is None or performance is None:
        return SyncResult(tracker=tracker, warnings=warnings)

    result = sync_season(tracker, attendance, performance, profile_lookup, config)
    result.warnings = warnings
    return result
