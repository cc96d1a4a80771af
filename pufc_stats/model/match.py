"""
Match records and ingestion of match documents.

A match document arrives in one of two shapes:
- team layout: ``attendance`` maps a team colour to a list of appearance
  objects, each carrying its own goals, own goals and clean sheet flag
- name layout (older seasons): ``attendance`` is a flat list of player names
  and the top-level ``scorers``/``ownGoals``/``cleanSheets`` arrays hold the
  statistics

Both are resolved here, once, into a list of ``PlayerAppearance`` objects so
that aggregation code never looks at the source shape.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date as calendar_date, datetime
from typing import Any

from pufc_stats.model.errors import StructuralError
from pufc_stats.utils.constants import MATCH_ID_FORMAT, REGULAR

logger = logging.getLogger(__name__)

TEAM_LAYOUT = "teams"
NAME_LAYOUT = "names"

# Team key holding name-layout appearances
UNASSIGNED = "UNASSIGNED"

_APPEARANCE_KEYS = frozenset(
    {"name", "position", "goals", "ownGoals", "cleanSheet", "groupStatus"}
)
_MATCH_KEYS = frozenset({
    "id", "date", "day", "matchPlayed", "matchCancelled", "attendance",
    "scoreline", "totalGoals", "winners", "losers", "scorers", "ownGoals",
    "cleanSheets",
})


def match_date(match_id: str) -> calendar_date:
    """
    Parse a canonical ``DD-MM-YYYY`` match id into a calendar date.

    Raises:
        StructuralError: If the id is not a valid date in that format
    """
    if not isinstance(match_id, str):
        raise StructuralError(f"Match id must be a string, got {match_id!r}")
    try:
        parsed = datetime.strptime(match_id, MATCH_ID_FORMAT).date()
    except ValueError as e:
        raise StructuralError(
            f"Match id {match_id!r} is not a DD-MM-YYYY date"
        ) from e
    # strptime also accepts unpadded fields such as "1-3-2025"
    if parsed.strftime(MATCH_ID_FORMAT) != match_id:
        raise StructuralError(
            f"Match id {match_id!r} is not in canonical form {parsed.strftime(MATCH_ID_FORMAT)!r}"
        )
    return parsed


def parse_count(value: Any, field_name: str, default: int | None = 0) -> int | None:
    """
    Coerce a goal count from a match document.

    Missing values (``None`` or empty string) become ``default``. Anything that
    is not a whole, non-negative number is a structural error.
    """
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        raise StructuralError(f"{field_name} must be a whole number, got {value!r}")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if not isinstance(value, int):
        raise StructuralError(f"{field_name} must be a whole number, got {value!r}")
    if value < 0:
        raise StructuralError(f"{field_name} cannot be negative, got {value}")
    return value


def entry_name(entry: Any) -> str | None:
    """
    Player name of an entry given either as a string or a ``{name}`` object.

    Every name read from a match document goes through here, so surrounding
    whitespace is dropped the same way for appearances, result lists and stat
    arrays. Blank names give None.
    """
    name = entry.get("name") if isinstance(entry, dict) else entry
    if isinstance(name, str):
        return name.strip() or None
    return None


@dataclass
class PlayerAppearance:
    """One player's appearance in one match."""

    name: str
    position: str | None = None
    goals: int = 0
    own_goals: int = 0
    clean_sheet: bool = False
    group_status: str = REGULAR
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict | str) -> PlayerAppearance:
        name = entry_name(data)
        if name is None:
            raise StructuralError(f"Appearance is missing a player name: {data!r}")
        if isinstance(data, str):
            return cls(name=name)

        return cls(
            name=name,
            position=data.get("position"),
            goals=parse_count(data.get("goals"), f"{name}.goals"),
            own_goals=parse_count(data.get("ownGoals"), f"{name}.ownGoals"),
            clean_sheet=bool(data.get("cleanSheet", False)),
            group_status=data.get("groupStatus") or REGULAR,
            extra={k: v for k, v in data.items() if k not in _APPEARANCE_KEYS},
        )

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"name": self.name}
        if self.position is not None:
            data["position"] = self.position
        data["goals"] = self.goals
        data["ownGoals"] = self.own_goals
        data["cleanSheet"] = self.clean_sheet
        data["groupStatus"] = self.group_status
        data.update(self.extra)
        return data


@dataclass
class Match:
    """
    One scheduled or played fixture.

    ``total_goals``, ``winners``, ``losers``, ``scoreline`` and the raw stat
    arrays are ``None`` when the key is absent from the source document, so a
    record is written back with the same keys it was read with.
    """

    id: str
    date: str | None = None
    day: str | None = None
    match_played: bool = False
    match_cancelled: bool = False
    attendance: dict[str, list[PlayerAppearance]] = field(default_factory=dict)
    scoreline: dict[str, int] | None = None
    total_goals: int | None = None
    winners: list[str] | None = None
    losers: list[str] | None = None

    # Top-level stat arrays, kept verbatim
    scorers: list | None = None
    own_goal_entries: list | None = None
    clean_sheet_entries: list | None = None

    layout: str = TEAM_LAYOUT
    extra: dict[str, Any] = field(default_factory=dict)

    @property
    def is_played(self) -> bool:
        """True if the match counts towards statistics."""
        return bool(self.match_played) and not self.match_cancelled

    def appearances(self) -> list[PlayerAppearance]:
        """All appearances, team by team in document order."""
        return [a for team in self.attendance.values() for a in team]

    def player_names(self) -> list[str]:
        """Unique player names in order of first appearance."""
        return list(dict.fromkeys(a.name for a in self.appearances()))

    def team_of(self, name: str) -> str | None:
        for team, players in self.attendance.items():
            if any(p.name == name for p in players):
                return team
        return None

    def scorer_goals(self) -> int:
        """Regular goals credited to players in this match."""
        return sum(a.goals for a in self.appearances())

    def own_goal_total(self) -> int:
        return sum(a.own_goals for a in self.appearances())

    def scoreline_total(self) -> int | None:
        if not self.scoreline:
            return None
        return sum(self.scoreline.values())

    def result_lists(self) -> tuple[list[str], list[str]]:
        """
        Winners and losers of the match.

        Explicit lists are used as given (both empty means a draw). When the
        record carries neither list, they are derived from a two-team
        scoreline: the winning side's attendance wins, the other side loses,
        and a level score gives two empty lists.
        """
        if self.winners is not None or self.losers is not None:
            return list(self.winners or []), list(self.losers or [])

        if not self.scoreline or len(self.scoreline) != 2:
            return [], []

        (team1, score1), (team2, score2) = self.scoreline.items()
        if score1 == score2:
            return [], []
        winning, losing = (team1, team2) if score1 > score2 else (team2, team1)

        def names(team):
            return list(dict.fromkeys(p.name for p in self.attendance.get(team, [])))

        return names(winning), names(losing)

    @classmethod
    def from_dict(cls, data: dict) -> Match:
        """
        Build a match from its JSON document.

        Raises:
            StructuralError: If the id is missing or a count is not a number
        """
        if not isinstance(data, dict):
            raise StructuralError(f"Match record must be an object, got {type(data).__name__}")

        match_id = data.get("id")
        if not match_id:
            raise StructuralError("Match record is missing an id")
        match_date(match_id)

        raw_attendance = data.get("attendance")
        if isinstance(raw_attendance, list):
            layout = NAME_LAYOUT
            attendance = {UNASSIGNED: _read_appearances(raw_attendance, match_id)}
        elif raw_attendance is None or isinstance(raw_attendance, dict):
            layout = TEAM_LAYOUT
            attendance = {
                team: _read_appearances(players or [], match_id)
                for team, players in (raw_attendance or {}).items()
            }
        else:
            raise StructuralError(f"{match_id}: attendance must be a team mapping or a name list")

        scorers = data.get("scorers")
        own_goal_entries = data.get("ownGoals")
        clean_sheet_entries = data.get("cleanSheets")

        if layout == NAME_LAYOUT:
            _apply_stat_arrays(
                attendance[UNASSIGNED], scorers, own_goal_entries, clean_sheet_entries, match_id
            )

        scoreline = data.get("scoreline")
        if scoreline is not None:
            if not isinstance(scoreline, dict):
                raise StructuralError(f"{match_id}: scoreline must map team to goals")
            scoreline = {
                team: parse_count(goals, f"{match_id} scoreline.{team}")
                for team, goals in scoreline.items()
            }

        return cls(
            id=match_id,
            date=data.get("date"),
            day=data.get("day"),
            match_played=bool(data.get("matchPlayed", False)),
            match_cancelled=bool(data.get("matchCancelled", False)),
            attendance=attendance,
            scoreline=scoreline,
            total_goals=parse_count(data.get("totalGoals"), f"{match_id} totalGoals", default=None),
            winners=_read_names(data.get("winners"), f"{match_id} winners"),
            losers=_read_names(data.get("losers"), f"{match_id} losers"),
            scorers=scorers,
            own_goal_entries=own_goal_entries,
            clean_sheet_entries=clean_sheet_entries,
            layout=layout,
            extra={k: v for k, v in data.items() if k not in _MATCH_KEYS},
        )

    def to_dict(self) -> dict:
        data: dict[str, Any] = {"id": self.id}
        if self.date is not None:
            data["date"] = self.date
        if self.day is not None:
            data["day"] = self.day
        data["matchPlayed"] = self.match_played
        data["matchCancelled"] = self.match_cancelled

        if self.layout == NAME_LAYOUT:
            data["attendance"] = [a.name for a in self.appearances()]
        else:
            data["attendance"] = {
                team: [a.to_dict() for a in players]
                for team, players in self.attendance.items()
            }

        optional = (
            ("scoreline", self.scoreline),
            ("totalGoals", self.total_goals),
            ("winners", self.winners),
            ("losers", self.losers),
            ("scorers", self.scorers),
            ("ownGoals", self.own_goal_entries),
            ("cleanSheets", self.clean_sheet_entries),
        )
        for key, value in optional:
            if value is not None:
                data[key] = value

        data.update(self.extra)
        return data


def _read_names(value: Any, field_name: str) -> list[str] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise StructuralError(f"{field_name} must be a list of names, got {value!r}")
    return [name for name in (entry_name(v) for v in value) if name]


def _read_appearances(entries: list, match_id: str) -> list[PlayerAppearance]:
    appearances = []
    for entry in entries:
        if entry_name(entry) is None:
            logger.warning(f"Skipping appearance without a name in match {match_id}: {entry!r}")
            continue
        appearances.append(PlayerAppearance.from_dict(entry))
    return appearances


def _apply_stat_arrays(
    appearances: list[PlayerAppearance],
    scorers: list | None,
    own_goal_entries: list | None,
    clean_sheet_entries: list | None,
    match_id: str,
) -> None:
    """
    Fill name-layout appearances from the top-level stat arrays.

    An array that is present replaces the matching per-appearance value.
    Players named only in an array are appended to the appearance list.
    """
    by_name: dict[str, PlayerAppearance] = {}
    for appearance in appearances:
        by_name.setdefault(appearance.name, appearance)

    def lookup(name: str) -> PlayerAppearance:
        if name not in by_name:
            by_name[name] = PlayerAppearance(name=name)
            appearances.append(by_name[name])
        return by_name[name]

    if scorers is not None:
        for appearance in appearances:
            appearance.goals = 0
        for entry in scorers:
            name = entry_name(entry)
            if name is None:
                continue
            goals = entry.get("goals") if isinstance(entry, dict) else None
            lookup(name).goals += parse_count(goals, f"{match_id} scorers.{name}")

    if own_goal_entries is not None:
        for appearance in appearances:
            appearance.own_goals = 0
        for entry in own_goal_entries:
            name = entry_name(entry)
            if name is None:
                continue
            count = None
            if isinstance(entry, dict):
                count = entry.get("goals", entry.get("count"))
            lookup(name).own_goals += parse_count(count, f"{match_id} ownGoals.{name}", default=1)

    if clean_sheet_entries is not None:
        for appearance in appearances:
            appearance.clean_sheet = False
        for entry in clean_sheet_entries:
            name = entry_name(entry)
            if name is not None:
                lookup(name).clean_sheet = True
