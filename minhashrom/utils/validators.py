"""
Input validation for the MinHash ROM matcher.

Provides validators for build parameters, match parameters and paths.
"""

from __future__ import annotations

import math
import os

from ..config import IMAGE_SIZE, MIN_CHUNK_SIZE, MAX_CHUNK_SIZE
from ..errors import InvalidChunkSizeError


def validate_chunk_size(chunk_size: int) -> tuple[bool, str]:
    """
    Validate a chunk size for building a signature database.

    Args:
        chunk_size: Bytes per chunk

    Returns:
        Tuple of (is_valid, error_message)

    Examples:
        >>> validate_chunk_size(64)
        (True, '')
        >>> validate_chunk_size(100)
        (False, 'chunk size must divide equally into 4096')
    """
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        return False, "chunk size must be an integer"
    if chunk_size < MIN_CHUNK_SIZE:
        return False, f"chunk size of less than {MIN_CHUNK_SIZE} is pointless"
    if chunk_size > MAX_CHUNK_SIZE:
        return False, f"chunk size of more than {MAX_CHUNK_SIZE} is pointless"
    if IMAGE_SIZE % chunk_size != 0:
        return False, f"chunk size must divide equally into {IMAGE_SIZE}"
    return True, ""


def require_chunk_size(chunk_size: int) -> int:
    """
    Validate a chunk size, raising instead of returning a status.

    Returns:
        The chunk size unchanged

    Raises:
        InvalidChunkSizeError: If validate_chunk_size rejects it
    """
    is_valid, error = validate_chunk_size(chunk_size)
    if not is_valid:
        raise InvalidChunkSizeError(error, chunk_size)
    return chunk_size


def validate_threshold(threshold: float) -> tuple[bool, str]:
    """
    Validate a similarity threshold percentage.

    Values outside 0-100 are allowed (they simply match everything or
    nothing) but the threshold must be a real number.

    Examples:
        >>> validate_threshold(80.0)
        (True, '')
        >>> validate_threshold(float('nan'))
        (False, 'Threshold must be a number')
    """
    try:
        threshold = float(threshold)
    except (ValueError, TypeError):
        return False, "Threshold must be a number"
    if math.isnan(threshold):
        return False, "Threshold must be a number"
    return True, ""


def validate_directory(directory: str) -> tuple[bool, str]:
    """
    Validate that a directory exists and is accessible.

    Args:
        directory: Directory path to validate

    Returns:
        Tuple of (is_valid, error_message)

    Examples:
        >>> validate_directory('/nonexistent/directory')
        (False, 'Directory not found: /nonexistent/directory')
    """
    if not directory:
        return False, "Directory path is required"

    if not os.path.exists(directory):
        return False, f"Directory not found: {directory}"

    if not os.path.isdir(directory):
        return False, f"Path is not a directory: {directory}"

    if not os.access(directory, os.R_OK):
        return False, f"Cannot read directory (permission denied): {directory}"

    return True, ""


__all__ = [
    'validate_chunk_size',
    'require_chunk_size',
    'validate_threshold',
    'validate_directory',
]
