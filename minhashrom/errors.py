"""
Error types for MinHash ROM matcher.

Every failure the library raises derives from MinHashRomError so callers
can report problems with a single except clause.
"""

from __future__ import annotations

from typing import Any, Optional


class MinHashRomError(Exception):
    """
    Base exception for all MinHash ROM errors.

    Carries a human-readable message plus an optional details dict for
    structured reporting.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """
        Initialize error.

        Args:
            message: Error message
            details: Optional detailed error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UnsupportedSizeError(MinHashRomError):
    """Raised when a file cannot be normalized to a canonical ROM image."""

    def __init__(self, size: int, path: Optional[str] = None):
        super().__init__(
            f"unsupported file size: {size} bytes",
            {'size': size, 'path': path},
        )
        self.size = size
        self.path = path


class InvalidChunkSizeError(MinHashRomError):
    """Raised when a chunk size is out of range or does not divide the image size."""

    def __init__(self, message: str, chunk_size: int):
        super().__init__(message, {'chunk_size': chunk_size})
        self.chunk_size = chunk_size


class UnsupportedVersionError(MinHashRomError):
    """Raised when a database header carries a version we cannot read."""

    def __init__(self, version: int):
        super().__init__(
            "invalid database file: unsupported version",
            {'version': version},
        )
        self.version = version


class CorruptDatabaseError(MinHashRomError):
    """Raised when a database record is structurally malformed."""

    def __init__(self, reason: str, offset: Optional[int] = None):
        super().__init__(f"invalid database file: {reason}", {'offset': offset})
        self.reason = reason
        self.offset = offset


class DatabaseIOError(MinHashRomError):
    """
    Wraps an OS-level failure with the path and operation that hit it.

    Attributes:
        path: File or directory involved
        operation: What was being attempted (e.g. 'reading database')
    """

    def __init__(self, message: str, path: str, operation: str):
        super().__init__(message, {'path': path, 'operation': operation})
        self.path = path
        self.operation = operation


__all__ = [
    'MinHashRomError',
    'UnsupportedSizeError',
    'InvalidChunkSizeError',
    'UnsupportedVersionError',
    'CorruptDatabaseError',
    'DatabaseIOError',
]
