"""
PUFC Stats: season statistics engine for an amateur football league.

This package provides:
- Match record ingestion (team-sheet and legacy name-list formats)
- Tracker recomputation (season goal totals, match order, roster)
- Per-player attendance and performance aggregation
- Reconciliation of fresh aggregates into persisted leaderboards
- Season file helpers and a command-line interface for weekly updates
"""

__version__ = "0.1.0"
