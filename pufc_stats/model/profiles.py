"""
Player profile lookup.

Profiles come from the league's roster file and tell the reconcilers which
attendance category and positions a player should start with. Players missing
from the roster fall back to the defaults in ``StatsConfig``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from pufc_stats.utils.constants import ONLOAN, REGULAR

_PROFILE_KEYS = frozenset({"name", "groupAvailibility", "groupAvailability", "position"})


@dataclass
class PlayerProfile:
    """A roster entry for one player."""

    name: str
    availability: str | None = None  # ALLGAMES | WEEKEND | MIDWEEK | ONLOAN | ...
    position: Any = None  # list of position codes when well formed
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> PlayerProfile:
        # Older roster files spell the key "groupAvailibility"
        availability = data.get("groupAvailibility", data.get("groupAvailability"))
        return cls(
            name=data.get("name", ""),
            availability=availability,
            position=data.get("position"),
            extra={k: v for k, v in data.items() if k not in _PROFILE_KEYS},
        )


ProfileLookup = Callable[[str], Optional[PlayerProfile]]


class ProfileDirectory:
    """
    Name-indexed access to player profiles.

    Usage:
        >>> profiles = ProfileDirectory.from_records(json.load(f))
        >>> profiles("Ana")
        PlayerProfile(name='Ana', availability='WEEKEND', ...)

    An instance is callable, so it can be passed anywhere a ``ProfileLookup``
    is expected.
    """

    def __init__(self, profiles: list[PlayerProfile] | None = None):
        self._by_name: dict[str, PlayerProfile] = {}
        self._by_lower: dict[str, PlayerProfile] = {}
        for profile in profiles or []:
            # First profile wins for duplicate names
            self._by_name.setdefault(profile.name, profile)
            self._by_lower.setdefault(profile.name.lower(), profile)

    @classmethod
    def from_records(cls, records: list[dict] | None) -> ProfileDirectory:
        return cls([
            PlayerProfile.from_dict(r) for r in records or [] if isinstance(r, dict)
        ])

    def __call__(self, name: str) -> PlayerProfile | None:
        return self._by_name.get(name)

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def group_status(self, name: str) -> str:
        """Default group status for an appearance (case-insensitive name match)."""
        profile = self._by_lower.get(name.strip().lower())
        if profile is not None and profile.availability == ONLOAN:
            return ONLOAN
        return REGULAR
