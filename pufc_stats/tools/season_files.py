"""
Reading and writing the season JSON documents.

Directory layout (relative to the data directory):
    attendance-data/{year}.json               season tracker
    attendance-data/leaderboard/{year}.json   attendance leaderboard
    leaderboard-data/{year}.json              performance leaderboard
    player-profiles.json                      player roster
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pufc_stats.model.leaderboard import (
    AttendanceLeaderboard,
    PerformanceEntry,
    performance_entries,
)
from pufc_stats.model.profiles import ProfileDirectory
from pufc_stats.model.tracker import Tracker, parse_season

DEFAULT_DATA_DIR = Path("src/data")


class SeasonFiles:
    """
    Locate, load and save one data directory's season documents.

    Usage:
        >>> files = SeasonFiles("src/data")
        >>> tracker = files.load_tracker(2026)
        >>> files.save_tracker(tracker)
    """

    def __init__(self, data_dir: str | Path = DEFAULT_DATA_DIR):
        self.data_dir = Path(data_dir)

    def tracker_path(self, season: int | str) -> Path:
        return self.data_dir / "attendance-data" / f"{parse_season(season)}.json"

    def attendance_path(self, season: int | str) -> Path:
        return self.data_dir / "attendance-data" / "leaderboard" / f"{parse_season(season)}.json"

    def performance_path(self, season: int | str) -> Path:
        return self.data_dir / "leaderboard-data" / f"{parse_season(season)}.json"

    @property
    def profiles_path(self) -> Path:
        return self.data_dir / "player-profiles.json"

    # Loading

    def load_tracker(self, season: int | str) -> Tracker:
        return Tracker.from_dict(read_json(self.tracker_path(season)))

    def load_attendance(self, season: int | str) -> AttendanceLeaderboard:
        return AttendanceLeaderboard.from_dict(read_json(self.attendance_path(season)))

    def load_performance(self, season: int | str) -> list[PerformanceEntry]:
        return performance_entries(read_json(self.performance_path(season)))

    def load_profiles(self) -> ProfileDirectory:
        """Player roster; empty when the roster file is missing."""
        if not self.profiles_path.exists():
            return ProfileDirectory()
        return ProfileDirectory.from_records(read_json(self.profiles_path))

    # Saving

    def save_tracker(self, tracker: Tracker) -> Path:
        return write_json(self.tracker_path(tracker.season), tracker.to_dict())

    def save_attendance(self, season: int | str, leaderboard: AttendanceLeaderboard) -> Path:
        return write_json(self.attendance_path(season), leaderboard.to_dict())

    def save_performance(self, season: int | str, entries: list[PerformanceEntry]) -> Path:
        return write_json(self.performance_path(season), [e.to_dict() for e in entries])


def read_json(path: Path) -> Any:
    """Read a JSON document, raising FileNotFoundError with the path if missing."""
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, data: Any) -> Path:
    """Write a JSON document with two-space indentation and a trailing newline."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")
    return path
