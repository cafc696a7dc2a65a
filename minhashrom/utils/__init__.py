"""
Utilities package for the MinHash ROM matcher.

Provides:
- formatters: Human-readable formatting for counts and similarity scores
- validators: Build and match parameter validation
"""

from __future__ import annotations

# Import submodules for convenient access
from . import formatters
from . import validators

# Export commonly used functions
from .formatters import format_entries, format_similarity
from .validators import (
    validate_chunk_size,
    require_chunk_size,
    validate_threshold,
    validate_directory,
)

__all__ = [
    # Submodules
    'formatters',
    'validators',
    # Formatters
    'format_entries',
    'format_similarity',
    # Validators
    'validate_chunk_size',
    'require_chunk_size',
    'validate_threshold',
    'validate_directory',
]
