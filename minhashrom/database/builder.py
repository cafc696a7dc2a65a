"""
Signature database builder.

Walks a directory of candidate ROMs, signs every file that normalizes to a
canonical image and writes one entry per file.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Any

from ..config import DEFAULT_CHUNK_SIZE, DEFAULT_DB_FILE, MAX_CANDIDATE_SIZE
from ..errors import DatabaseIOError, UnsupportedSizeError
from ..minhash import HashFamily
from ..models import BuildStats
from ..scanner import iter_candidate_files, load_rom, compute_signature
from ..dependencies import HAS_TQDM, _tqdm_class
from ..utils.validators import require_chunk_size, validate_directory
from .writer import DatabaseWriter


logger = logging.getLogger(__name__)


def build_database(
    rom_dir: str | Path,
    db_path: str | Path = DEFAULT_DB_FILE,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    family: Optional[HashFamily] = None,
    show_progress: bool = False,
    max_size: int = MAX_CANDIDATE_SIZE,
) -> BuildStats:
    """
    Build a signature database from a directory of ROMs.

    Args:
        rom_dir: Directory to scan recursively
        db_path: Database file to create (overwritten if it exists)
        chunk_size: Bytes per sketch chunk; 8-2048 and divides 4096
        family: Hash family for signatures (default xxh64 / xxh3_64)
        show_progress: Whether to show a tqdm progress bar
        max_size: Files of this size or larger are not candidates

    Returns:
        BuildStats with the number of entries written

    Raises:
        InvalidChunkSizeError: Before any file I/O if chunk_size is invalid
        DatabaseIOError: If the directory, a ROM or the database cannot be
                         read or written

    Notes:
        - Files that fail normalization are skipped, not errors
        - Entries are written in sorted directory-walk order
        - The database file itself is never signed, even inside rom_dir
    """
    require_chunk_size(chunk_size)

    rom_dir = os.fspath(rom_dir)
    is_valid, error = validate_directory(rom_dir)
    if not is_valid:
        raise DatabaseIOError(f"error reading ROMs: {error}", rom_dir, 'walking directory')

    stats = BuildStats(chunk_size=chunk_size)
    exclude = {os.path.realpath(db_path)}

    logger.info(f"Building {db_path} from {rom_dir} (chunk size {chunk_size})")

    pbar: Optional[Any] = None
    if HAS_TQDM and show_progress and _tqdm_class is not None:
        pbar = _tqdm_class(desc="Signing ROMs", unit="file", ncols=80)

    try:
        with DatabaseWriter(db_path, chunk_size) as writer:
            for filepath in iter_candidate_files(rom_dir, max_size=max_size, exclude=exclude):
                stats.files_visited += 1
                if pbar is not None:
                    pbar.update(1)

                try:
                    image = load_rom(filepath)
                except UnsupportedSizeError as e:
                    logger.debug(f"Skipping {filepath}: {e}")
                    stats.files_skipped += 1
                    stats.skipped_paths.append(filepath)
                    continue

                signature = compute_signature(image, chunk_size, family)
                writer.add(filepath, signature)
                stats.entries_written = writer.count
    finally:
        if pbar is not None:
            pbar.close()

    logger.info(
        f"Wrote {stats.entries_written:,} entries "
        f"({stats.files_skipped:,} of {stats.files_visited:,} files skipped)"
    )
    return stats


__all__ = ['build_database']
