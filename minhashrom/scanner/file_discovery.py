"""
File discovery module for the scanner package.

Provides functionality to enumerate candidate ROM files in a directory
tree, skipping anything too large to be a cartridge image.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Optional

from ..config import MAX_CANDIDATE_SIZE
from ..errors import DatabaseIOError
from ..dependencies import _logger


def iter_candidate_files(
    root_path: str | Path,
    max_size: int = MAX_CANDIDATE_SIZE,
    exclude: Optional[set[str]] = None,
) -> Iterator[str]:
    """
    Yield regular files under root_path that could be ROM images.

    Args:
        root_path: Directory to search
        max_size: Files of this size or larger are skipped
        exclude: Resolved paths to leave out (e.g. the database being written)

    Yields:
        File paths as strings, in sorted directory-walk order

    Raises:
        DatabaseIOError: If a directory cannot be listed

    Notes:
        - Directory symlinks are not followed
        - Oversized files are not an error, just not candidates
    """
    root = os.fspath(root_path)
    exclude = exclude or set()

    def _on_error(err: OSError) -> None:
        raise DatabaseIOError(
            f"error reading ROMs: {err}",
            err.filename or root,
            'walking directory',
        ) from err

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        # Walk in lexical order so entry order is reproducible
        dirnames.sort()
        for filename in sorted(filenames):
            filepath = os.path.join(dirpath, filename)
            if not os.path.isfile(filepath):
                continue
            if os.path.realpath(filepath) in exclude:
                _logger.debug(f"Skipping excluded file {filepath}")
                continue
            try:
                size = os.path.getsize(filepath)
            except OSError as e:
                raise DatabaseIOError(
                    f"error reading ROMs: {e}", filepath, 'reading file size'
                ) from e
            if size >= max_size:
                _logger.debug(f"Skipping {filepath}: {size} bytes is too large for a ROM")
                continue
            yield filepath


def find_candidate_files(root_path: str | Path, max_size: int = MAX_CANDIDATE_SIZE) -> list[str]:
    """
    Find all candidate ROM files in the given directory.

    Args:
        root_path: Directory path to search
        max_size: Files of this size or larger are skipped

    Returns:
        List of file paths as strings
    """
    return list(iter_candidate_files(root_path, max_size=max_size))


__all__ = ['iter_candidate_files', 'find_candidate_files']
