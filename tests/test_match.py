"""Unit tests for pufc_stats.model.match module."""

import pytest

from pufc_stats.model.errors import StructuralError
from pufc_stats.model.match import (
    NAME_LAYOUT,
    TEAM_LAYOUT,
    Match,
    PlayerAppearance,
    match_date,
    parse_count,
)


@pytest.fixture
def team_record():
    """A played team-layout match: RED beat BLUE 3-1."""
    return {
        'id': '01-03-2025',
        'date': '01/03/2025',
        'day': 'Weekend',
        'matchPlayed': True,
        'matchCancelled': False,
        'attendance': {
            'RED': [
                {'name': 'Ana', 'position': 'FWD', 'goals': 3, 'ownGoals': 0, 'cleanSheet': False},
                {'name': 'Cas', 'goals': 0, 'ownGoals': 0, 'cleanSheet': False},
            ],
            'BLUE': [
                {'name': 'Ben', 'goals': 1, 'ownGoals': 0, 'cleanSheet': True},
            ],
        },
        'scoreline': {'RED': 3, 'BLUE': 1},
        'winners': ['Ana', 'Cas'],
        'losers': ['Ben'],
        'notesForAdmin': 'keep me',
    }


@pytest.fixture
def name_record():
    """A legacy name-layout match with top-level stat arrays."""
    return {
        'id': '04-03-2025',
        'day': 'Midweek',
        'matchPlayed': True,
        'attendance': ['Ana', 'Ben', 'Cas'],
        'scorers': [{'name': 'Ana', 'goals': 2}, {'name': 'Dev', 'goals': 1}],
        'ownGoals': ['Ben'],
        'cleanSheets': [{'name': 'Cas'}],
        'winners': ['Ana', 'Dev'],
        'losers': ['Ben', 'Cas'],
    }


class TestMatchDate:
    """Test parsing of canonical match ids."""

    def test_valid_id(self):
        d = match_date('01-03-2025')
        assert (d.year, d.month, d.day) == (2025, 3, 1)

    @pytest.mark.parametrize('bad', ['2025-03-01', '32-01-2025', 'tomorrow', ''])
    def test_invalid_id(self, bad):
        with pytest.raises(StructuralError):
            match_date(bad)

    def test_non_string_id(self):
        with pytest.raises(StructuralError):
            match_date(20250301)

    @pytest.mark.parametrize('bad', ['1-3-2025', '01-3-2025', ' 01-03-2025', '01-03-2025 '])
    def test_non_canonical_id(self, bad):
        with pytest.raises(StructuralError):
            match_date(bad)

    def test_match_with_non_canonical_id_rejected(self, team_record):
        team_record['id'] = '1-3-2025'
        with pytest.raises(StructuralError):
            Match.from_dict(team_record)


class TestParseCount:
    """Test goal count coercion."""

    def test_missing_uses_default(self):
        assert parse_count(None, 'goals') == 0
        assert parse_count('', 'goals', default=None) is None

    def test_numeric_strings_and_whole_floats(self):
        assert parse_count('2', 'goals') == 2
        assert parse_count(3.0, 'goals') == 3

    @pytest.mark.parametrize('bad', [-1, 'two', 1.5, True])
    def test_rejects_bad_counts(self, bad):
        with pytest.raises(StructuralError):
            parse_count(bad, 'goals')


class TestTeamLayout:
    """Test reading team-layout match documents."""

    def test_appearances(self, team_record):
        match = Match.from_dict(team_record)

        assert match.layout == TEAM_LAYOUT
        assert match.player_names() == ['Ana', 'Cas', 'Ben']
        assert match.team_of('Ben') == 'BLUE'
        assert match.scorer_goals() == 4
        assert match.scoreline_total() == 4
        assert match.is_played

    def test_appearance_defaults(self):
        appearance = PlayerAppearance.from_dict({'name': 'Ana'})
        assert appearance.goals == 0
        assert appearance.own_goals == 0
        assert appearance.clean_sheet is False
        assert appearance.group_status == 'REGULAR'

    def test_nameless_appearance_skipped(self, team_record):
        team_record['attendance']['RED'].append({'goals': 2})
        match = Match.from_dict(team_record)
        assert match.player_names() == ['Ana', 'Cas', 'Ben']

    def test_top_level_arrays_ignored_for_stats(self, team_record):
        team_record['scorers'] = [{'name': 'Ana', 'goals': 7}]
        match = Match.from_dict(team_record)
        assert match.scorer_goals() == 4

    def test_missing_id_raises(self, team_record):
        del team_record['id']
        with pytest.raises(StructuralError):
            Match.from_dict(team_record)

    def test_bad_goal_count_raises(self, team_record):
        team_record['attendance']['RED'][0]['goals'] = 'three'
        with pytest.raises(StructuralError):
            Match.from_dict(team_record)

    def test_round_trip_keeps_unknown_keys(self, team_record):
        data = Match.from_dict(team_record).to_dict()
        assert data['notesForAdmin'] == 'keep me'
        assert data['attendance']['RED'][0]['position'] == 'FWD'
        assert 'totalGoals' not in data

    def test_cancelled_match_not_played(self, team_record):
        team_record['matchCancelled'] = True
        assert not Match.from_dict(team_record).is_played


class TestNameLayout:
    """Test reading legacy name-layout match documents."""

    def test_stat_arrays_applied(self, name_record):
        match = Match.from_dict(name_record)
        by_name = {a.name: a for a in match.appearances()}

        assert match.layout == NAME_LAYOUT
        assert by_name['Ana'].goals == 2
        assert by_name['Ben'].own_goals == 1
        assert by_name['Cas'].clean_sheet is True

    def test_scorer_missing_from_attendance_is_appended(self, name_record):
        match = Match.from_dict(name_record)
        assert match.player_names() == ['Ana', 'Ben', 'Cas', 'Dev']
        assert match.scorer_goals() == 3

    def test_own_goal_objects_with_counts(self, name_record):
        name_record['ownGoals'] = [{'name': 'Ben', 'goals': 2}]
        match = Match.from_dict(name_record)
        assert match.own_goal_total() == 2

    def test_written_back_as_name_list(self, name_record):
        data = Match.from_dict(name_record).to_dict()
        assert data['attendance'] == ['Ana', 'Ben', 'Cas', 'Dev']
        assert data['scorers'] == name_record['scorers']
        assert data['cleanSheets'] == [{'name': 'Cas'}]


class TestResultLists:
    """Test winners/losers resolution."""

    def test_explicit_lists(self, team_record):
        winners, losers = Match.from_dict(team_record).result_lists()
        assert winners == ['Ana', 'Cas']
        assert losers == ['Ben']

    def test_explicit_empty_lists_mean_draw(self, team_record):
        team_record['winners'] = []
        team_record['losers'] = []
        assert Match.from_dict(team_record).result_lists() == ([], [])

    def test_derived_from_scoreline(self, team_record):
        del team_record['winners']
        del team_record['losers']
        winners, losers = Match.from_dict(team_record).result_lists()
        assert winners == ['Ana', 'Cas']
        assert losers == ['Ben']

    def test_level_scoreline_is_draw(self, team_record):
        del team_record['winners']
        del team_record['losers']
        team_record['scoreline'] = {'RED': 2, 'BLUE': 2}
        assert Match.from_dict(team_record).result_lists() == ([], [])

    def test_object_entries_in_result_lists(self, team_record):
        team_record['winners'] = [{'name': 'Ana'}, 'Cas']
        winners, _ = Match.from_dict(team_record).result_lists()
        assert winners == ['Ana', 'Cas']

    def test_result_list_must_be_a_list(self, team_record):
        team_record['winners'] = 'Ana'
        with pytest.raises(StructuralError):
            Match.from_dict(team_record)


class TestNamePadding:
    """Test that surrounding whitespace never splits one player into two."""

    def test_name_layout_padding(self):
        match = Match.from_dict({
            'id': '04-03-2025',
            'day': 'Midweek',
            'matchPlayed': True,
            'attendance': ['Ana ', 'Ben'],
            'cleanSheets': [' Ana'],
            'winners': ['Ana '],
            'losers': ['Ben'],
        })
        by_name = {a.name: a for a in match.appearances()}

        assert match.player_names() == ['Ana', 'Ben']
        assert by_name['Ana'].clean_sheet is True
        assert match.result_lists() == (['Ana'], ['Ben'])

    def test_team_layout_padding(self, team_record):
        team_record['attendance']['RED'][0]['name'] = 'Ana '
        team_record['winners'] = ['Ana ', ' Cas']
        match = Match.from_dict(team_record)

        assert match.player_names() == ['Ana', 'Cas', 'Ben']
        assert match.team_of('Ana') == 'RED'
        assert match.result_lists()[0] == ['Ana', 'Cas']

    def test_blank_name_appearance_rejected(self):
        with pytest.raises(StructuralError):
            PlayerAppearance.from_dict({'name': '   '})
