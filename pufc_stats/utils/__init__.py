"""Shared utilities for the pufc-stats project."""

from .logging import (
    setup_logging,
    print_section,
    print_subsection,
    print_success,
    print_error,
    print_warning,
    print_info,
    print_status,
    print_totals,
    print_warnings,
)
from .constants import (
    WEEKEND,
    MIDWEEK,
    CATEGORIES,
    OTHERS,
    DEFAULT_POSITION,
    HAT_TRICK_GOALS,
)

__all__ = [
    "setup_logging",
    "print_section",
    "print_subsection",
    "print_success",
    "print_error",
    "print_warning",
    "print_info",
    "print_status",
    "print_totals",
    "print_warnings",
    "WEEKEND",
    "MIDWEEK",
    "CATEGORIES",
    "OTHERS",
    "DEFAULT_POSITION",
    "HAT_TRICK_GOALS",
]
