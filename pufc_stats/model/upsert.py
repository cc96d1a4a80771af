"""Insert or replace a single match in a season tracker."""

from __future__ import annotations

import logging
from dataclasses import replace

from pufc_stats.model.config import StatsConfig
from pufc_stats.model.errors import ConsistencyWarning
from pufc_stats.model.match import Match
from pufc_stats.model.tracker import Tracker, recompute_tracker
from pufc_stats.model.validation import overwrite_warning

logger = logging.getLogger(__name__)


def upsert_match_checked(
    tracker: Tracker, match: Match, config: StatsConfig | None = None
) -> tuple[Tracker, ConsistencyWarning | None]:
    """
    Add a match to the tracker, replacing any match with the same id.

    The whole record is replaced, never merged. The input tracker is not
    modified.

    Returns:
        (tracker, warning) tuple: the recomputed tracker, ready to persist,
        and an ``overwrite_played`` warning if the replaced match had already
        been played (None otherwise)
    """
    matches = list(tracker.matches)
    index = tracker.find_match(match.id)
    warning = None

    if index is None:
        matches.append(match)
        logger.info(f"Added new match {match.id}")
    else:
        if matches[index].match_played:
            warning = overwrite_warning(matches[index])
            logger.warning(str(warning))
        matches[index] = match
        logger.info(f"Updated existing match {match.id}")

    return recompute_tracker(replace(tracker, matches=matches), config), warning


def upsert_match(
    tracker: Tracker, match: Match, config: StatsConfig | None = None
) -> Tracker:
    """Like ``upsert_match_checked``, returning only the recomputed tracker."""
    updated, _ = upsert_match_checked(tracker, match, config)
    return updated
