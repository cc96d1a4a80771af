"""
Display tables for the two leaderboards.

Converts leaderboard entries to DataFrames sorted for display, and renders
them as plain-text tables for the command line.
"""

from __future__ import annotations

import pandas as pd

from pufc_stats.model.leaderboard import AttendanceLeaderboard, PerformanceEntry
from pufc_stats.utils.constants import CATEGORIES

PERFORMANCE_COLUMNS = [
    'rank', 'name', 'position', 'matches', 'wins', 'draws', 'losses',
    'goals', 'hat_tricks', 'clean_sheets', 'own_goals',
    'win_pct', 'goals_per_match',
]

ATTENDANCE_COLUMNS = [
    'category', 'sno', 'name', 'midweek_games', 'weekend_games', 'total_games',
    'midweek_pct', 'weekend_pct', 'total_pct', 'difference',
]


def performance_frame(entries: list[PerformanceEntry]) -> pd.DataFrame:
    """
    Performance leaderboard as a DataFrame.

    Sorted by matches played, then wins, then goals (all descending), with a
    1-based ``rank`` column. ``win_pct`` and ``goals_per_match`` are 0 for
    players without matches.
    """
    if not entries:
        return pd.DataFrame(columns=PERFORMANCE_COLUMNS)

    df = pd.DataFrame([
        {
            'id': e.id,
            'name': e.name,
            'position': "/".join(e.position) if isinstance(e.position, list) else e.position,
            'matches': e.totals.matches,
            'wins': e.totals.wins,
            'draws': e.totals.draws,
            'losses': e.totals.losses,
            'goals': e.totals.goals,
            'hat_tricks': e.totals.hat_tricks,
            'clean_sheets': e.totals.clean_sheets,
            'own_goals': e.totals.own_goals,
        }
        for e in entries
    ])

    played = df['matches'].where(df['matches'] > 0)
    df['win_pct'] = (df['wins'] / played * 100).fillna(0).round(1)
    df['goals_per_match'] = (df['goals'] / played).fillna(0).round(2)

    df = df.sort_values(
        by=['matches', 'wins', 'goals', 'id'],
        ascending=[False, False, False, True],
    ).reset_index(drop=True)
    df['rank'] = range(1, len(df) + 1)

    return df[PERFORMANCE_COLUMNS]


def attendance_frame(leaderboard: AttendanceLeaderboard) -> pd.DataFrame:
    """Attendance leaderboard as a DataFrame, ordered by category then ``sno``."""
    if not leaderboard.players:
        return pd.DataFrame(columns=ATTENDANCE_COLUMNS)

    df = pd.DataFrame([
        {
            'category': e.category,
            'sno': e.sno,
            'name': e.name,
            'midweek_games': e.midweek_games,
            'weekend_games': e.weekend_games,
            'total_games': e.total_games,
            'midweek_pct': e.midweek_percentage,
            'weekend_pct': e.weekend_percentage,
            'total_pct': e.total_percentage,
            'difference': e.difference,
        }
        for e in leaderboard.players
    ])

    order = {category: i for i, category in enumerate(CATEGORIES)}
    df['_order'] = df['category'].map(order).fillna(len(order))
    df = df.sort_values(by=['_order', 'sno']).reset_index(drop=True)

    return df[ATTENDANCE_COLUMNS]


def format_leaderboard(df: pd.DataFrame, max_rows: int | None = None) -> str:
    """
    Format a leaderboard DataFrame as a human-readable table.

    Args:
        df: Output of ``performance_frame`` or ``attendance_frame``
        max_rows: Maximum number of rows to display

    Returns:
        Formatted table string
    """
    if max_rows:
        df = df.head(max_rows)

    def cell(col, value):
        if col == 'name':
            return f"{'' if pd.isna(value) else value:<20}"
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            value = '-'
        return f"{value:>8}" if col in ('category', 'position') else f"{value:>6}"

    header = " | ".join(cell(col, col) if col != 'name' else f"{'name':<20}" for col in df.columns)
    lines = [header, "-" * len(header)]
    for _, row in df.iterrows():
        lines.append(" | ".join(cell(col, row[col]) for col in df.columns))

    return "\n".join(lines)
