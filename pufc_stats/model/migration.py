"""
Back-fill of season documents written by older versions of the scripts.

- Performance rows from before the weekend/weekday split lack ``ownGoals``,
  ``weekendStats`` and ``weekdayStats``
- Some trackers label matches with a literal weekday name (``"Saturday"``)
  or ``"weekday"`` instead of ``Weekend``/``Midweek``
"""

from __future__ import annotations

import copy
from dataclasses import replace

from pufc_stats.model.accumulator import PeriodStats
from pufc_stats.model.config import DEFAULT_CONFIG, StatsConfig
from pufc_stats.model.match import match_date
from pufc_stats.model.tracker import Tracker, recompute_tracker
from pufc_stats.utils.constants import MIDWEEK_DAY_NAMES, WEEKEND_DAY_NAMES


def backfill_performance_fields(records: list[dict]) -> tuple[list[dict], int]:
    """
    Add missing ``ownGoals``, ``weekendStats`` and ``weekdayStats`` to rows.

    Returns:
        (records, changed) tuple: updated copies and the number of rows that
        needed at least one field
    """
    updated = []
    changed = 0
    for record in records:
        record = copy.deepcopy(record)
        missing = False
        if record.get("ownGoals") is None:
            record["ownGoals"] = 0
            missing = True
        for key in ("weekendStats", "weekdayStats"):
            if not record.get(key):
                record[key] = PeriodStats().to_dict()
                missing = True
        if missing:
            changed += 1
        updated.append(record)
    return updated, changed


def canonical_day_label(day: str | None, match_id: str, config: StatsConfig | None = None) -> str:
    """Weekend/Midweek label for a legacy day value (or the date, if there is none)."""
    config = config or DEFAULT_CONFIG
    if day in (config.weekend_label, config.midweek_label):
        return day
    if day in WEEKEND_DAY_NAMES:
        return config.weekend_label
    if day in MIDWEEK_DAY_NAMES or (day or "").lower() == "weekday":
        return config.midweek_label
    if day:
        raise ValueError(f"Match {match_id}: unrecognised day label {day!r}")
    weekday = match_date(match_id).weekday()
    return config.weekend_label if weekday >= 5 else config.midweek_label


def backfill_day_labels(
    tracker: Tracker, config: StatsConfig | None = None
) -> tuple[Tracker, list[str]]:
    """
    Relabel legacy ``day`` values as Weekend/Midweek.

    Returns:
        (tracker, changed) tuple: the recomputed tracker and the ids of the
        matches that were relabelled
    """
    matches = []
    changed = []
    for match in tracker.matches:
        label = canonical_day_label(match.day, match.id, config)
        if label != match.day:
            match = replace(match, day=label)
            changed.append(match.id)
        matches.append(match)
    return recompute_tracker(replace(tracker, matches=matches), config), changed
