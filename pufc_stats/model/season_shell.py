"""
Empty season trackers.

A new season starts as a tracker holding one unplayed fixture for every
match day of the year. Matches are filled in later through ``process_match``.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from pufc_stats.model.config import DEFAULT_CONFIG, StatsConfig
from pufc_stats.model.match import Match
from pufc_stats.model.tracker import Tracker, parse_season, recompute_tracker
from pufc_stats.utils.constants import MATCH_DATE_FORMAT, MATCH_ID_FORMAT, WEEKEND_DAY_NAMES

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Tuesday and Saturday
DEFAULT_MATCH_DAYS = ("Tuesday", "Saturday")


def canonical_day(value: str | int) -> str:
    """
    Resolve a weekday given as a name, an abbreviation or a number (Monday=0).

    Examples:
        >>> canonical_day("sat")
        'Saturday'
        >>> canonical_day(1)
        'Tuesday'
    """
    if isinstance(value, int) and not isinstance(value, bool):
        if 0 <= value < 7:
            return DAY_NAMES[value]
        raise ValueError(f"Weekday number must be 0-6, got {value}")

    text = str(value).strip().lower()
    if len(text) >= 3:
        for name in DAY_NAMES:
            if name.lower().startswith(text):
                return name
    raise ValueError(f"Unknown weekday: {value!r}")


def create_season_shell(
    season: int | str,
    match_days: Iterable[str | int] = DEFAULT_MATCH_DAYS,
    config: StatsConfig | None = None,
) -> Tracker:
    """
    Build an empty tracker with a fixture on every selected weekday.

    Args:
        season: Season year
        match_days: Weekdays the league plays on
        config: Labels used for the ``day`` field

    Returns:
        Tracker with unplayed matches in date order and no players
    """
    config = config or DEFAULT_CONFIG
    season = parse_season(season)
    days = {canonical_day(d) for d in match_days}
    if not days:
        raise ValueError("Select at least one match day")

    dates = pd.date_range(f"{season}-01-01", f"{season}-12-31", freq="D")
    dates = dates[dates.day_name().isin(days)]

    matches = [
        Match(
            id=day.strftime(MATCH_ID_FORMAT),
            date=day.strftime(MATCH_DATE_FORMAT),
            day=config.weekend_label if day.day_name() in WEEKEND_DAY_NAMES else config.midweek_label,
        )
        for day in dates
    ]
    return recompute_tracker(Tracker(season=season, matches=matches), config)
