"""
Per-player season statistics from played matches.

``accumulate`` folds a season's played matches into two maps keyed by player
name: attendance counts and performance statistics (overall plus a weekend
and a weekday split). It is a pure function of its input.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from pufc_stats.model.config import DEFAULT_CONFIG, StatsConfig
from pufc_stats.model.match import Match


@dataclass
class PeriodStats:
    """Performance counts for one period (overall, weekend or weekday)."""

    matches: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0
    clean_sheets: int = 0
    goals: int = 0
    hat_tricks: int = 0
    own_goals: int = 0

    _JSON_KEYS = {
        "matches": "matches",
        "wins": "wins",
        "losses": "losses",
        "draws": "draws",
        "clean_sheets": "cleanSheets",
        "goals": "goals",
        "hat_tricks": "hatTricks",
        "own_goals": "ownGoals",
    }

    @classmethod
    def from_dict(cls, data: dict | None) -> PeriodStats:
        data = data or {}
        return cls(**{
            attr: int(data.get(key) or 0) for attr, key in cls._JSON_KEYS.items()
        })

    def to_dict(self) -> dict:
        return {key: getattr(self, attr) for attr, key in self._JSON_KEYS.items()}

    def __add__(self, other: PeriodStats) -> PeriodStats:
        return PeriodStats(**{
            f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)
        })


@dataclass
class AttendanceTally:
    """Games attended by one player."""

    midweek_games: int = 0
    weekend_games: int = 0
    total_games: int = 0


@dataclass
class AttendanceSummary:
    """Number of played matches in each period."""

    midweek_games: int = 0
    weekend_games: int = 0
    total_games: int = 0

    @classmethod
    def from_dict(cls, data: dict | None) -> AttendanceSummary:
        data = data or {}
        return cls(
            midweek_games=int(data.get("midweekGames") or 0),
            weekend_games=int(data.get("weekendGames") or 0),
            total_games=int(data.get("totalGames") or 0),
        )

    def to_dict(self) -> dict:
        return {
            "totalGames": self.total_games,
            "midweekGames": self.midweek_games,
            "weekendGames": self.weekend_games,
        }


@dataclass
class PlayerSeasonStats:
    """A player's performance over the season."""

    overall: PeriodStats = field(default_factory=PeriodStats)
    weekend: PeriodStats = field(default_factory=PeriodStats)
    weekday: PeriodStats = field(default_factory=PeriodStats)


@dataclass
class SeasonAggregate:
    """Output of ``accumulate``: both maps are keyed by player name."""

    attendance: dict[str, AttendanceTally] = field(default_factory=dict)
    performance: dict[str, PlayerSeasonStats] = field(default_factory=dict)


def attendance_summary(
    matches: list[Match], config: StatsConfig | None = None
) -> AttendanceSummary:
    """Count played matches overall and per period."""
    config = config or DEFAULT_CONFIG
    played = [m for m in matches if m.is_played]
    return AttendanceSummary(
        midweek_games=sum(1 for m in played if config.is_midweek(m.day)),
        weekend_games=sum(1 for m in played if config.is_weekend(m.day)),
        total_games=len(played),
    )


def accumulate(
    matches: list[Match], config: StatsConfig | None = None
) -> SeasonAggregate:
    """
    Compute attendance and performance statistics for every player.

    Args:
        matches: Matches of one season; unplayed or cancelled ones are skipped
        config: Period labels and hat-trick threshold

    Returns:
        SeasonAggregate with players in order of their first appearance

    Each player present in a match is credited, in both the overall block and
    the period block for the match's day:
        - one match played
        - a win if named in winners, else a loss if named in losers, else a
          draw when the match has no winners and no losers at all
        - goals summed over their appearances, and a hat-trick when that sum
          reaches the threshold
        - a clean sheet if any of their appearances kept one
        - own goals summed over their appearances

    Example:
        >>> aggregate = accumulate(tracker.played_matches())
        >>> aggregate.performance["Ana"].overall.goals
        3
    """
    config = config or DEFAULT_CONFIG
    aggregate = SeasonAggregate()

    for match in matches:
        if not match.is_played:
            continue

        weekend = config.is_weekend(match.day)
        midweek = config.is_midweek(match.day)
        winners, losers = match.result_lists()
        winners, losers = set(winners), set(losers)
        is_draw = not winners and not losers

        # Merge duplicate entries for the same name within the match
        per_player: dict[str, PeriodStats] = {}
        for appearance in match.appearances():
            line = per_player.setdefault(appearance.name, PeriodStats())
            line.goals += appearance.goals
            line.own_goals += appearance.own_goals
            if appearance.clean_sheet:
                line.clean_sheets = 1

        for name, line in per_player.items():
            tally = aggregate.attendance.setdefault(name, AttendanceTally())
            tally.total_games += 1
            if midweek:
                tally.midweek_games += 1
            if weekend:
                tally.weekend_games += 1

            line.matches = 1
            if name in winners:
                line.wins = 1
            elif name in losers:
                line.losses = 1
            elif is_draw:
                line.draws = 1
            if line.goals >= config.hat_trick_threshold:
                line.hat_tricks = 1

            stats = aggregate.performance.setdefault(name, PlayerSeasonStats())
            stats.overall = stats.overall + line
            if weekend:
                stats.weekend = stats.weekend + line
            else:
                stats.weekday = stats.weekday + line

    return aggregate
