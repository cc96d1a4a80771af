"""
Consistency checks for match records.

These checks never raise: they return ``ConsistencyWarning`` records for the
caller (or operator) to review, and processing continues unless the caller
chooses to abort. Structural problems are raised earlier, while the record
is read.
"""

from __future__ import annotations

import logging

from pufc_stats.model.errors import ConsistencyWarning
from pufc_stats.model.match import Match

logger = logging.getLogger(__name__)

SCORELINE_MISMATCH = "scoreline_mismatch"
OVERWRITE_PLAYED = "overwrite_played"


def check_match_consistency(match: Match) -> list[ConsistencyWarning]:
    """
    Compare a played match's scoreline with the goals credited to players.

    The scoreline total should equal regular goals plus own goals recorded
    on the appearances. Unplayed matches and matches without a scoreline are
    not checked.
    """
    warnings = []
    if not match.is_played:
        return warnings

    scoreline_total = match.scoreline_total()
    if scoreline_total is None:
        return warnings

    goals = match.scorer_goals()
    own_goals = match.own_goal_total()
    if scoreline_total != goals + own_goals:
        warnings.append(ConsistencyWarning(
            kind=SCORELINE_MISMATCH,
            match_id=match.id,
            message=(
                f"Scoreline total ({scoreline_total}) doesn't match player goals "
                f"({goals + own_goals}: {goals} regular, {own_goals} own goals)"
            ),
        ))

    for warning in warnings:
        logger.warning(str(warning))
    return warnings


def overwrite_warning(existing: Match) -> ConsistencyWarning:
    """Warning raised when an already-played match is replaced."""
    return ConsistencyWarning(
        kind=OVERWRITE_PLAYED,
        match_id=existing.id,
        message="Overwriting a match that already has played data",
    )
