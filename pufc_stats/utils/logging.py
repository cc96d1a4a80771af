"""Logging and console output for the command line."""

from __future__ import annotations

import sys
from functools import partial
from typing import Iterable

RULE_WIDTH = 60


def setup_logging(verbose: bool = True) -> None:
    """
    Configure logging for CLI runs.

    Log records go to stderr so that tables printed on stdout can be piped.
    """
    import logging

    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def print_section(title: str) -> None:
    """Print a section header between two rules."""
    print("=" * RULE_WIDTH)
    print(title)
    print("=" * RULE_WIDTH)


def print_subsection(title: str) -> None:
    print("\n" + "-" * RULE_WIDTH)
    print(title)
    print("-" * RULE_WIDTH)


# Prefix for each kind of one-line status message
STATUS_SYMBOLS = {
    "success": "✓ ",
    "error": "✗ ",
    "warning": "⚠️  ",
    "info": "ℹ  ",
}


def print_status(kind: str, message: str) -> None:
    """Print a one-line status message prefixed with the symbol for ``kind``."""
    if kind not in STATUS_SYMBOLS:
        raise ValueError(f"Unknown status kind: {kind!r}")
    print(f"{STATUS_SYMBOLS[kind]}{message}")


print_success = partial(print_status, "success")
print_error = partial(print_status, "error")
print_warning = partial(print_status, "warning")
print_info = partial(print_status, "info")


def print_totals(totals: dict[str, object]) -> None:
    """Print indented ``label: value`` lines, e.g. season goal totals."""
    for label, value in totals.items():
        print(f"  {label}: {value}")


def print_warnings(warnings: Iterable[object], title: str = "Consistency warnings") -> int:
    """Print each warning under a subsection header; returns how many there were."""
    warnings = list(warnings)
    if warnings:
        print_subsection(title)
        for warning in warnings:
            print_warning(str(warning))
    return len(warnings)
