"""
Scanner package for the MinHash ROM matcher.

Turns files on disk into MinHash signatures.

Public API:
- iter_candidate_files: Lazily discover candidate ROM files in directories
- find_candidate_files: Discover candidate ROM files as a list
- normalize_image: Normalize raw bytes to a canonical ROM image
- load_rom: Read and normalize a ROM file
- compute_signature: Calculate the chunk MinHash signature of an image
- sign_rom: Load a ROM file and calculate its signature
- has_progress_support: Check if tqdm progress bars are available
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

# Import public functions from submodules
from .file_discovery import iter_candidate_files, find_candidate_files
from .normalize import normalize_image, load_rom
from .hashing import compute_signature

# Import dependencies for has_progress_support function
from ..dependencies import HAS_TQDM, np
from ..minhash import HashFamily


def has_progress_support() -> bool:
    """Check if tqdm progress bars are available."""
    return HAS_TQDM


def sign_rom(
    filepath: str | Path,
    chunk_size: int,
    family: Optional[HashFamily] = None,
) -> np.ndarray:
    """Load a ROM file and return its MinHash signature."""
    return compute_signature(load_rom(filepath), chunk_size, family)


# Public API exports
__all__ = [
    # File discovery
    'iter_candidate_files',
    'find_candidate_files',
    # Normalization
    'normalize_image',
    'load_rom',
    # Hashing
    'compute_signature',
    'sign_rom',
    # Feature detection
    'has_progress_support',
]
