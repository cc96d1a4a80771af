"""
Season tracker and its recomputation.

The tracker's goal totals, match order and roster are caches derived from its
match list. ``recompute_tracker`` is the single place they are rebuilt, and
every write path runs it before the tracker is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from pufc_stats.model.config import DEFAULT_CONFIG, StatsConfig
from pufc_stats.model.errors import StructuralError
from pufc_stats.model.match import Match, match_date

_TRACKER_KEYS = frozenset(
    {"season", "totalGoals", "weekendGoals", "weekdayGoals", "matches", "allPlayers"}
)


def parse_season(value: Any) -> int:
    """
    Parse a season identifier (e.g. ``2026`` or ``"2026"``).

    Raises:
        StructuralError: If the value is missing or not a four-digit year
    """
    if value is None or isinstance(value, bool):
        raise StructuralError("Season year is required")
    text = str(value).strip()
    if len(text) != 4 or not text.isdigit():
        raise StructuralError(f"Season must be a four-digit year, got {value!r}")
    return int(text)


@dataclass
class Tracker:
    """One season's match log plus cached season totals."""

    season: int
    matches: list[Match] = field(default_factory=list)
    all_players: list[str] = field(default_factory=list)
    total_goals: int = 0
    weekend_goals: int = 0
    weekday_goals: int = 0
    extra: dict[str, Any] = field(default_factory=dict)

    def played_matches(self) -> list[Match]:
        """Matches that count towards statistics (played and not cancelled)."""
        return [m for m in self.matches if m.is_played]

    def find_match(self, match_id: str) -> int | None:
        """Index of the match with this id, or None."""
        for i, match in enumerate(self.matches):
            if match.id == match_id:
                return i
        return None

    @classmethod
    def from_dict(cls, data: dict) -> Tracker:
        if not isinstance(data, dict):
            raise StructuralError(f"Tracker must be an object, got {type(data).__name__}")
        return cls(
            season=parse_season(data.get("season")),
            matches=[Match.from_dict(m) for m in data.get("matches") or []],
            all_players=list(data.get("allPlayers") or []),
            total_goals=data.get("totalGoals") or 0,
            weekend_goals=data.get("weekendGoals") or 0,
            weekday_goals=data.get("weekdayGoals") or 0,
            extra={k: v for k, v in data.items() if k not in _TRACKER_KEYS},
        )

    def to_dict(self) -> dict:
        # Goal totals first so they are visible at the top of the file
        data = {
            "season": self.season,
            "totalGoals": self.total_goals,
            "weekendGoals": self.weekend_goals,
            "weekdayGoals": self.weekday_goals,
            "matches": [m.to_dict() for m in self.matches],
            "allPlayers": list(self.all_players),
        }
        data.update(self.extra)
        return data


def sort_matches(matches: list[Match]) -> list[Match]:
    """Matches in ascending calendar order of their ids (stable for equal dates)."""
    return sorted(matches, key=lambda m: match_date(m.id))


def roster(matches: list[Match]) -> list[str]:
    """Sorted unique names of everyone appearing in any of the matches."""
    return sorted({a.name for m in matches for a in m.appearances()})


def recompute_tracker(tracker: Tracker, config: StatsConfig | None = None) -> Tracker:
    """
    Rebuild a tracker's derived fields from its match list.

    - Played matches without ``total_goals`` get it from their scorer goals
    - Season, weekend and midweek goal totals are summed over played matches
    - Matches are sorted by the date in their id
    - ``all_players`` is rebuilt from every match, played or not

    The input tracker is left untouched. Running this on its own output
    returns an equal tracker.

    Raises:
        StructuralError: If a match id cannot be parsed as a date
    """
    config = config or DEFAULT_CONFIG

    matches = []
    total = weekend = weekday = 0

    for match in tracker.matches:
        if match.is_played:
            if match.total_goals is None:
                match = replace(match, total_goals=match.scorer_goals())

            goals = match.total_goals
            total += goals
            if config.is_weekend(match.day):
                weekend += goals
            elif config.is_midweek(match.day):
                weekday += goals
        matches.append(match)

    matches = sort_matches(matches)

    return replace(
        tracker,
        matches=matches,
        all_players=roster(matches),
        total_goals=total,
        weekend_goals=weekend,
        weekday_goals=weekday,
        extra=dict(tracker.extra),
    )
