"""
Formatting utilities for the MinHash ROM matcher.

Provides human-readable formatting for counts and similarity scores.
"""

from __future__ import annotations


def format_entries(count: int) -> str:
    """
    Format an entry count with the right plural.

    Examples:
        >>> format_entries(1)
        '1 entry'
        >>> format_entries(3)
        '3 entries'
    """
    noun = "entry" if count == 1 else "entries"
    return f"{count} {noun}"


def format_similarity(similarity: float) -> str:
    """
    Format a similarity percentage as a fixed-width column.

    Examples:
        >>> format_similarity(100.0)
        '100.00%'
        >>> format_similarity(87.5)
        ' 87.50%'
    """
    return f"{similarity:6.2f}%"


__all__ = ['format_entries', 'format_similarity']
