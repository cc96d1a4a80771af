"""Unit tests for pufc_stats.utils.logging module."""

import pytest

from pufc_stats.utils.logging import (
    STATUS_SYMBOLS,
    print_error,
    print_info,
    print_status,
    print_success,
    print_totals,
    print_warning,
    print_warnings,
)


class TestStatusLines:
    """Test one-line status output."""

    @pytest.mark.parametrize('printer, kind', [
        (print_success, 'success'),
        (print_error, 'error'),
        (print_warning, 'warning'),
        (print_info, 'info'),
    ])
    def test_prefix_per_kind(self, printer, kind, capsys):
        printer('Tracker saved')
        assert capsys.readouterr().out == f"{STATUS_SYMBOLS[kind]}Tracker saved\n"

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            print_status('debug', 'nope')


class TestSummaryOutput:
    """Test totals and warning listings."""

    def test_totals(self, capsys):
        print_totals({'Total goals': 12, 'Players': 4})
        assert capsys.readouterr().out == "  Total goals: 12\n  Players: 4\n"

    def test_warnings_counted_and_listed(self, capsys):
        count = print_warnings(['[01-03-2025] scoreline mismatch'], title='Checks')
        out = capsys.readouterr().out

        assert count == 1
        assert 'Checks' in out
        assert STATUS_SYMBOLS['warning'] + '[01-03-2025] scoreline mismatch' in out

    def test_no_warnings_prints_nothing(self, capsys):
        assert print_warnings([]) == 0
        assert capsys.readouterr().out == ''
