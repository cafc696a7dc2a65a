"""
ROM image normalization for the scanner package.

Turns raw file bytes into a canonical IMAGE_SIZE buffer, the unit all
signature hashing operates on.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from ..config import IMAGE_SIZE, HALF_IMAGE_SIZE
from ..errors import UnsupportedSizeError, DatabaseIOError
from ..dependencies import _logger


def normalize_image(data: bytes, path: Optional[str] = None) -> bytes:
    """
    Produce a canonical ROM image from raw file contents.

    Args:
        data: Raw file contents
        path: Source path, only used for error reporting

    Returns:
        Exactly IMAGE_SIZE bytes

    Raises:
        UnsupportedSizeError: If data is neither HALF_IMAGE_SIZE bytes
                              nor at least IMAGE_SIZE bytes

    Examples:
        >>> len(normalize_image(bytes(2048)))
        4096
        >>> len(normalize_image(bytes(8192)))
        4096
    """
    size = len(data)
    if size == HALF_IMAGE_SIZE:
        # 2k ROMs are mirrored to fill the 4k address space
        return bytes(data) + bytes(data)
    if size >= IMAGE_SIZE:
        return bytes(data[:IMAGE_SIZE])
    raise UnsupportedSizeError(size, path)


def load_rom(filepath: str | Path) -> bytes:
    """
    Read a file from disk and normalize it.

    Args:
        filepath: Path to the ROM file

    Returns:
        Canonical IMAGE_SIZE byte buffer

    Raises:
        DatabaseIOError: If the file cannot be read
        UnsupportedSizeError: If the file size cannot be normalized
    """
    filepath = os.fspath(filepath)
    try:
        # Bytes past IMAGE_SIZE are discarded by normalization anyway
        with open(filepath, 'rb') as f:
            data = f.read(IMAGE_SIZE)
    except OSError as e:
        _logger.debug(f"Reading ROM failed for {filepath}: {e}")
        raise DatabaseIOError(f"error opening {filepath}", filepath, 'opening ROM') from e

    return normalize_image(data, filepath)


__all__ = ['normalize_image', 'load_rom']
