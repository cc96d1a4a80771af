"""
Error and warning types for season data.

Structural problems (missing identifiers, unparseable dates or counts) are
raised as ``StructuralError`` and abort the whole update. Consistency problems
are reported as ``ConsistencyWarning`` records and never stop processing on
their own.
"""

from __future__ import annotations

from dataclasses import dataclass


class StructuralError(ValueError):
    """A season document is malformed and must not be persisted."""


@dataclass(frozen=True)
class ConsistencyWarning:
    """A non-fatal inconsistency found in a match record."""

    kind: str  # "scoreline_mismatch" | "overwrite_played"
    match_id: str
    message: str

    def __str__(self) -> str:
        return f"[{self.match_id}] {self.message}"
