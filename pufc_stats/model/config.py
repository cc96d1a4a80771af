"""Configuration for season statistics aggregation."""

from __future__ import annotations

from dataclasses import dataclass

from pufc_stats.utils.constants import (
    CATEGORIES,
    DEFAULT_POSITION,
    HAT_TRICK_GOALS,
    MIDWEEK,
    OTHERS,
    REGULAR,
    WEEKEND,
)


@dataclass(frozen=True)
class StatsConfig:
    """Tunables shared by recomputation, aggregation and reconciliation."""

    # Values of Match.day that select the period buckets
    weekend_label: str = WEEKEND
    midweek_label: str = MIDWEEK

    # Regular goals in one match needed for a hat-trick
    hat_trick_threshold: int = HAT_TRICK_GOALS

    # Defaults for players missing from the profile roster
    default_position: tuple[str, ...] = DEFAULT_POSITION
    default_category: str = OTHERS
    default_group_status: str = REGULAR

    # Availability values that map onto an attendance category of the same name
    categories: tuple[str, ...] = CATEGORIES

    def is_weekend(self, day: str | None) -> bool:
        return day == self.weekend_label

    def is_midweek(self, day: str | None) -> bool:
        return day == self.midweek_label


DEFAULT_CONFIG = StatsConfig()
