"""
MinHash ROM Matcher
===================
Approximate near-duplicate detection for cartridge ROM dumps.

Features:
- Normalizes 2K and 4K+ ROM images to a canonical 4K buffer
- Chunk-based MinHash signatures (configurable chunk size)
- Compact binary signature database, built in one pass
- Streaming similarity scan with a percentage threshold
- CLI for building databases and matching ROMs
"""

__version__ = "1.0.0"
__author__ = "Zedidence"

from .models import DatabaseHeader, Entry, Match, BuildStats, MatchStats
from .config import IMAGE_SIZE, DEFAULT_CHUNK_SIZE, DEFAULT_THRESHOLD, DEFAULT_DB_FILE
from .errors import (
    MinHashRomError,
    UnsupportedSizeError,
    InvalidChunkSizeError,
    UnsupportedVersionError,
    CorruptDatabaseError,
    DatabaseIOError,
)
from .minhash import HashFamily, DoubleHashFamily, MinHashSketch, similarity
from .scanner import (
    normalize_image,
    load_rom,
    compute_signature,
    sign_rom,
    iter_candidate_files,
)
from .database import DatabaseWriter, EntryReader, read_entries, build_database
from .matcher import SimilarityMatcher, match_rom

__all__ = [
    "DatabaseHeader",
    "Entry",
    "Match",
    "BuildStats",
    "MatchStats",
    "IMAGE_SIZE",
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_THRESHOLD",
    "DEFAULT_DB_FILE",
    "MinHashRomError",
    "UnsupportedSizeError",
    "InvalidChunkSizeError",
    "UnsupportedVersionError",
    "CorruptDatabaseError",
    "DatabaseIOError",
    "HashFamily",
    "DoubleHashFamily",
    "MinHashSketch",
    "similarity",
    "normalize_image",
    "load_rom",
    "compute_signature",
    "sign_rom",
    "iter_candidate_files",
    "DatabaseWriter",
    "EntryReader",
    "read_entries",
    "build_database",
    "SimilarityMatcher",
    "match_rom",
]
