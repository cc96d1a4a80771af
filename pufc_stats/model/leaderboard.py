"""
Leaderboard entries and reconciliation of fresh aggregates into them.

Two leaderboards are derived from a season's tracker:
- the attendance leaderboard (games attended, percentages, prior-year
  comparison and free-text notes)
- the performance leaderboard (results, goals, clean sheets, hat-tricks and
  own goals, with weekend/weekday splits)

Reconciliation overwrites only the statistical fields of existing entries and
appends entries for players seen for the first time. Identity fields
(``category``, ``sno``, ``id``, ``position``) are assigned once, at creation,
from the current collection, and never recomputed. Nothing is ever deleted.
"""

from __future__ import annotations

import copy
import logging
import re
from dataclasses import dataclass, field, replace
from typing import Any

import numpy as np

from pufc_stats.model.accumulator import (
    AttendanceSummary,
    AttendanceTally,
    PeriodStats,
    PlayerSeasonStats,
)
from pufc_stats.model.config import DEFAULT_CONFIG, StatsConfig
from pufc_stats.model.errors import StructuralError
from pufc_stats.model.profiles import ProfileLookup

logger = logging.getLogger(__name__)

# Prior-season games column, e.g. "games2024" on the 2025 leaderboard
PRIOR_GAMES_KEY = re.compile(r"^games(\d{4})$")

_ATTENDANCE_KEYS = frozenset({
    "category", "sno", "name", "midweekGames", "weekendGames", "totalGames",
    "midweekPercentage", "weekendPercentage", "totalPercentage", "difference",
    "notes",
})
_PERFORMANCE_KEYS = frozenset(
    {"id", "name", "position", "weekendStats", "weekdayStats"}
    | set(PeriodStats._JSON_KEYS.values())
)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, with halves rounded away from zero."""
    return int(np.sign(value) * np.floor(np.abs(value) + 0.5))


def percentage(games: int, out_of: int) -> int:
    """Whole-number percentage of ``out_of``; 0 when there is nothing to divide by."""
    if out_of <= 0:
        return 0
    return round_half_away(games / out_of * 100)


# ============================================================================
# Attendance leaderboard
# ============================================================================

@dataclass
class AttendanceEntry:
    """One player's row on the attendance leaderboard."""

    name: str
    category: str
    sno: int
    midweek_games: int = 0
    weekend_games: int = 0
    total_games: int = 0
    midweek_percentage: int = 0
    weekend_percentage: int = 0
    total_percentage: int = 0
    prior_year: int | None = None  # year of the games<Year> column, if any
    prior_games: int | None = None
    difference: int | None = None
    notes: Any = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> AttendanceEntry:
        prior_year = prior_games = None
        extra = {}
        for key, value in data.items():
            match = PRIOR_GAMES_KEY.match(key)
            if match and prior_year is None:
                prior_year, prior_games = int(match.group(1)), value
            elif key not in _ATTENDANCE_KEYS:
                extra[key] = value

        return cls(
            name=data.get("name", ""),
            category=data.get("category") or DEFAULT_CONFIG.default_category,
            sno=int(data.get("sno") or 0),
            midweek_games=int(data.get("midweekGames") or 0),
            weekend_games=int(data.get("weekendGames") or 0),
            total_games=int(data.get("totalGames") or 0),
            midweek_percentage=data.get("midweekPercentage") or 0,
            weekend_percentage=data.get("weekendPercentage") or 0,
            total_percentage=data.get("totalPercentage") or 0,
            prior_year=prior_year,
            prior_games=prior_games,
            difference=data.get("difference"),
            notes=data.get("notes"),
            extra=extra,
        )

    def to_dict(self) -> dict:
        data = {
            "category": self.category,
            "sno": self.sno,
            "name": self.name,
            "midweekGames": self.midweek_games,
            "weekendGames": self.weekend_games,
            "totalGames": self.total_games,
            "midweekPercentage": self.midweek_percentage,
            "weekendPercentage": self.weekend_percentage,
            "totalPercentage": self.total_percentage,
        }
        if self.prior_year is not None:
            data[f"games{self.prior_year}"] = self.prior_games
        data["difference"] = self.difference
        data["notes"] = self.notes
        data.update(self.extra)
        return data


@dataclass
class AttendanceLeaderboard:
    """The attendance leaderboard document: a summary plus player rows."""

    summary: AttendanceSummary = field(default_factory=AttendanceSummary)
    players: list[AttendanceEntry] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict | None) -> AttendanceLeaderboard:
        data = data or {}
        players = data.get("players") or []
        if not isinstance(players, list):
            raise StructuralError("Attendance leaderboard 'players' must be a list")
        return cls(
            summary=AttendanceSummary.from_dict(data.get("summary")),
            players=[AttendanceEntry.from_dict(p) for p in players],
            extra={k: v for k, v in data.items() if k not in ("summary", "players")},
        )

    def to_dict(self) -> dict:
        data = {
            "summary": self.summary.to_dict(),
            "players": [p.to_dict() for p in self.players],
        }
        data.update(self.extra)
        return data


def next_sno(entries: list[AttendanceEntry], category: str) -> int:
    """Next serial number within a category (1 for an empty category)."""
    return max((e.sno for e in entries if e.category == category), default=0) + 1


def _apply_percentages(entry: AttendanceEntry, summary: AttendanceSummary) -> None:
    entry.midweek_percentage = percentage(entry.midweek_games, summary.midweek_games)
    entry.weekend_percentage = percentage(entry.weekend_games, summary.weekend_games)
    entry.total_percentage = percentage(entry.total_games, summary.total_games)


def refresh_percentages(
    leaderboard: AttendanceLeaderboard,
) -> tuple[AttendanceLeaderboard, list[str]]:
    """
    Recompute every player's attendance percentages against the summary.

    Returns:
        (leaderboard, changed) tuple, where ``changed`` lists the players whose
        percentages moved
    """
    board = copy.deepcopy(leaderboard)
    changed = []
    for entry in board.players:
        before = (entry.midweek_percentage, entry.weekend_percentage, entry.total_percentage)
        _apply_percentages(entry, board.summary)
        after = (entry.midweek_percentage, entry.weekend_percentage, entry.total_percentage)
        if before != after:
            changed.append(entry.name)
    return board, changed


def _category_for(name: str, lookup: ProfileLookup | None, config: StatsConfig) -> str:
    profile = lookup(name) if lookup is not None else None
    availability = profile.availability if profile is not None else None
    if availability in config.categories:
        return availability
    if profile is None:
        logger.info(f"No profile for {name}, using category {config.default_category}")
    return config.default_category


def reconcile_attendance(
    leaderboard: AttendanceLeaderboard,
    tallies: dict[str, AttendanceTally],
    profile_lookup: ProfileLookup | None = None,
    summary: AttendanceSummary | None = None,
    season: int | None = None,
    config: StatsConfig | None = None,
) -> tuple[AttendanceLeaderboard, list[str]]:
    """
    Merge fresh attendance tallies into the attendance leaderboard.

    Args:
        leaderboard: Persisted leaderboard (not modified)
        tallies: Fresh per-player attendance, from ``accumulate``
        profile_lookup: Gives the availability category of new players
        summary: Fresh season summary; the leaderboard's own summary if None
        season: Season year, used to name the prior-year games column of new
            players
        config: Category defaults

    Returns:
        (leaderboard, added) tuple, where ``added`` lists new players in the
        order they were appended
    """
    config = config or DEFAULT_CONFIG
    board = copy.deepcopy(leaderboard)
    if summary is not None:
        board.summary = replace(summary)

    by_name: dict[str, AttendanceEntry] = {}
    for entry in board.players:
        by_name.setdefault(entry.name, entry)

    added = []
    for name, tally in tallies.items():
        entry = by_name.get(name)
        if entry is None:
            category = _category_for(name, profile_lookup, config)
            entry = AttendanceEntry(
                name=name,
                category=category,
                sno=next_sno(board.players, category),
                prior_year=season - 1 if season is not None else None,
            )
            board.players.append(entry)
            by_name[name] = entry
            added.append(name)
            logger.info(f"Added {name} to attendance leaderboard ({category})")

        entry.midweek_games = tally.midweek_games
        entry.weekend_games = tally.weekend_games
        entry.total_games = tally.total_games
        if entry.prior_games is not None:
            entry.difference = entry.total_games - entry.prior_games

    for entry in board.players:
        _apply_percentages(entry, board.summary)

    return board, added


# ============================================================================
# Performance leaderboard
# ============================================================================

@dataclass
class PerformanceEntry:
    """One player's row on the performance leaderboard."""

    id: int
    name: str
    position: Any = field(default_factory=lambda: list(DEFAULT_CONFIG.default_position))
    totals: PeriodStats = field(default_factory=PeriodStats)
    weekend_stats: PeriodStats = field(default_factory=PeriodStats)
    weekday_stats: PeriodStats = field(default_factory=PeriodStats)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> PerformanceEntry:
        try:
            entry_id = int(data.get("id") or 0)
        except (TypeError, ValueError) as e:
            raise StructuralError(
                f"Leaderboard id for {data.get('name')!r} is not a number: {data.get('id')!r}"
            ) from e

        return cls(
            id=entry_id,
            name=data.get("name", ""),
            position=data.get("position"),
            totals=PeriodStats.from_dict(data),
            weekend_stats=PeriodStats.from_dict(data.get("weekendStats")),
            weekday_stats=PeriodStats.from_dict(data.get("weekdayStats")),
            extra={k: v for k, v in data.items() if k not in _PERFORMANCE_KEYS},
        )

    def to_dict(self) -> dict:
        data = {"id": self.id, "name": self.name, "position": self.position}
        data.update(self.totals.to_dict())
        data["weekendStats"] = self.weekend_stats.to_dict()
        data["weekdayStats"] = self.weekday_stats.to_dict()
        data.update(self.extra)
        return data


def performance_entries(records: list[dict] | None) -> list[PerformanceEntry]:
    """Parse the performance leaderboard document (a flat list of rows)."""
    if records is None:
        return []
    if not isinstance(records, list):
        raise StructuralError("Performance leaderboard must be a list")
    return [PerformanceEntry.from_dict(r) for r in records]


def _position_for(name: str, lookup: ProfileLookup | None, config: StatsConfig) -> list:
    profile = lookup(name) if lookup is not None else None
    if profile is not None and isinstance(profile.position, list):
        return list(profile.position)
    logger.info(f"No position list for {name}, using {list(config.default_position)}")
    return list(config.default_position)


def reconcile_performance(
    entries: list[PerformanceEntry],
    stats: dict[str, PlayerSeasonStats],
    profile_lookup: ProfileLookup | None = None,
    config: StatsConfig | None = None,
) -> tuple[list[PerformanceEntry], list[str]]:
    """
    Merge fresh performance statistics into the performance leaderboard.

    New players get ``id`` values continuing from the highest existing id, in
    the order they are met in ``stats``, so several new players in one pass
    receive distinct, contiguous ids.

    Returns:
        (entries, added) tuple; the input list is not modified
    """
    config = config or DEFAULT_CONFIG
    board = copy.deepcopy(list(entries))

    by_name: dict[str, PerformanceEntry] = {}
    for entry in board:
        by_name.setdefault(entry.name, entry)

    base_id = max((e.id for e in board), default=0)
    added = []
    for name, player_stats in stats.items():
        entry = by_name.get(name)
        if entry is None:
            entry = PerformanceEntry(
                id=base_id + 1 + len(added),
                name=name,
                position=_position_for(name, profile_lookup, config),
            )
            board.append(entry)
            by_name[name] = entry
            added.append(name)
            logger.info(f"Added {name} to performance leaderboard ({entry.position})")

        entry.totals = replace(player_stats.overall)
        entry.weekend_stats = replace(player_stats.weekend)
        entry.weekday_stats = replace(player_stats.weekday)

    return board, added
