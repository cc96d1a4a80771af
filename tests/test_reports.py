"""Unit tests for pufc_stats.model.reports module."""

import pandas as pd
import pytest

from pufc_stats.model.accumulator import PeriodStats
from pufc_stats.model.leaderboard import (
    AttendanceEntry,
    AttendanceLeaderboard,
    PerformanceEntry,
)
from pufc_stats.model.reports import (
    ATTENDANCE_COLUMNS,
    PERFORMANCE_COLUMNS,
    attendance_frame,
    format_leaderboard,
    performance_frame,
)


@pytest.fixture
def performance():
    return [
        PerformanceEntry(id=1, name='Ana', position=['FWD', 'MID'],
                         totals=PeriodStats(matches=4, wins=3, goals=6)),
        PerformanceEntry(id=2, name='Ben', position=['GK'],
                         totals=PeriodStats(matches=5, wins=1, losses=4, goals=1)),
        PerformanceEntry(id=3, name='Cas', totals=PeriodStats()),
        PerformanceEntry(id=4, name='Dev', totals=PeriodStats(matches=4, wins=3, goals=2)),
    ]


@pytest.fixture
def attendance():
    return AttendanceLeaderboard(players=[
        AttendanceEntry(name='Zed', category='Others', sno=1, total_games=1),
        AttendanceEntry(name='Ana', category='WEEKEND', sno=2, total_games=5),
        AttendanceEntry(name='Ben', category='ALLGAMES', sno=1, total_games=7),
        AttendanceEntry(name='Eve', category='WEEKEND', sno=1, total_games=6),
    ])


class TestPerformanceFrame:
    """Test the performance display table."""

    def test_sort_order(self, performance):
        df = performance_frame(performance)

        assert list(df['name']) == ['Ben', 'Ana', 'Dev', 'Cas']
        assert list(df['rank']) == [1, 2, 3, 4]
        assert list(df.columns) == PERFORMANCE_COLUMNS

    def test_rates(self, performance):
        df = performance_frame(performance).set_index('name')

        assert df.loc['Ana', 'win_pct'] == 75.0
        assert df.loc['Ana', 'goals_per_match'] == 1.5
        assert df.loc['Cas', 'win_pct'] == 0
        assert df.loc['Ana', 'position'] == 'FWD/MID'

    def test_empty(self):
        df = performance_frame([])
        assert df.empty
        assert list(df.columns) == PERFORMANCE_COLUMNS


class TestAttendanceFrame:
    """Test the attendance display table."""

    def test_category_then_sno(self, attendance):
        df = attendance_frame(attendance)

        assert list(df['name']) == ['Ben', 'Eve', 'Ana', 'Zed']
        assert list(df.columns) == ATTENDANCE_COLUMNS

    def test_empty(self):
        assert attendance_frame(AttendanceLeaderboard()).empty


class TestFormatLeaderboard:
    """Test text rendering."""

    def test_max_rows(self, performance):
        text = format_leaderboard(performance_frame(performance), max_rows=2)
        lines = text.splitlines()

        assert len(lines) == 4
        assert lines[0].split('|')[1].strip() == 'name'
        assert 'Ben' in lines[2]
        assert 'Cas' not in text

    def test_missing_values(self, attendance):
        text = format_leaderboard(attendance_frame(attendance))
        # difference is unset for every player
        assert text.splitlines()[2].rstrip().endswith('-')

    def test_plain_dataframe(self):
        df = pd.DataFrame({'name': ['Ana'], 'goals': [3]})
        assert format_leaderboard(df).splitlines()[-1].startswith('Ana')
