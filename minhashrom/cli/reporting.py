"""
Report formatting and display for the CLI interface.

Provides functions to print build progress lines, match results and
match counters in a human-readable format.
"""

from __future__ import annotations

from ..models import BuildStats, Match, MatchStats
from ..utils.formatters import format_entries, format_similarity

SEPARATOR = "------"


def print_build_header(db_path: str, chunk_size: int) -> None:
    """Announce the database being created."""
    print(f"creating db file {db_path}")
    print(f"chunk size {chunk_size}")


def print_build_summary(stats: BuildStats) -> None:
    """Print the number of entries written."""
    print(f"{format_entries(stats.entries_written)} written")


def print_match_header(db_path: str, chunk_size: int) -> None:
    """Print verbose match-mode preamble."""
    print(f"matching with db file {db_path}")
    print(f"with chunk size {chunk_size}")
    print(SEPARATOR)


def format_match_line(match: Match) -> str:
    """
    Format a single match result line.

    Examples:
        >>> format_match_line(Match(similarity=100.0, name='a.bin'))
        '100.00%   a.bin'
    """
    return f"{format_similarity(match.similarity)}   {match.display_name}"


def print_match(match: Match) -> None:
    """Print a single match result."""
    print(format_match_line(match))


def print_match_summary(stats: MatchStats) -> None:
    """
    Print verbose match counters.

    Notes:
        - Called even when a scan aborts, so the counts reflect the
          entries processed before the failure
    """
    print(SEPARATOR)
    print(f"{format_entries(stats.entries_matched)} matched")
    print(f"{format_entries(stats.entries_checked)} checked")


__all__ = [
    'print_build_header',
    'print_build_summary',
    'print_match_header',
    'format_match_line',
    'print_match',
    'print_match_summary',
]
