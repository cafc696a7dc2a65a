"""
Similarity matching against a signature database.

The matcher streams entries out of a database one at a time, estimates the
similarity of each to a query signature and yields the entries that reach
the threshold. Matches come out in database order; callers that want them
ranked sort the results themselves.

Usage:
    with EntryReader.open('minhash.db') as reader:
        query = sign_rom('query.bin', reader.chunk_size)
        matcher = SimilarityMatcher(query, threshold=80.0)
        for match in matcher.scan(reader):
            print(match.similarity, match.name)
        print(matcher.stats.entries_checked)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .dependencies import np
from .config import DEFAULT_THRESHOLD, DEFAULT_DB_FILE
from .database import EntryReader
from .errors import DatabaseIOError
from .minhash import HashFamily, similarity
from .models import Entry, Match, MatchStats
from .scanner import load_rom, compute_signature


logger = logging.getLogger(__name__)


class SimilarityMatcher:
    """
    Compares database entries against one query signature.

    Attributes:
        query: uint64 signature of the query ROM
        threshold: Minimum similarity percentage for a match
        stats: Counters updated as entries are scanned; valid even if a
               scan is aborted part way through
    """

    def __init__(self, query: np.ndarray, threshold: float = DEFAULT_THRESHOLD):
        self.query = np.asarray(query, dtype=np.uint64)
        self.threshold = threshold
        self.stats = MatchStats()

    def score(self, entry: Entry) -> float:
        """Similarity of an entry to the query, as a percentage (0-100)."""
        return similarity(entry.signature, self.query) * 100

    def scan(self, entries: Iterable[Entry]) -> Iterator[Match]:
        """
        Yield every entry whose similarity reaches the threshold.

        Args:
            entries: Entries to check, typically an EntryReader

        Yields:
            Match objects in the order entries are read
        """
        for entry in entries:
            percent = self.score(entry)
            self.stats.entries_checked += 1
            if percent >= self.threshold:
                self.stats.entries_matched += 1
                logger.debug(f"Matched {entry.display_name} at {percent:.2f}%")
                yield Match(similarity=percent, name=entry.name)


def resolve_rom_path(rom_path: str | Path) -> str:
    """
    Resolve symlinks in a query path.

    Raises:
        DatabaseIOError: If the path does not exist
    """
    rom_path = os.fspath(rom_path)
    try:
        return os.path.realpath(rom_path, strict=True)
    except OSError as e:
        raise DatabaseIOError(
            f"ROM does not exist: {rom_path}", rom_path, 'resolving ROM'
        ) from e


def match_rom(
    rom_path: str | Path,
    db_path: str | Path = DEFAULT_DB_FILE,
    threshold: float = DEFAULT_THRESHOLD,
    family: Optional[HashFamily] = None,
    sort: bool = False,
) -> tuple[list[Match], MatchStats]:
    """
    Find database entries similar to a ROM file.

    Args:
        rom_path: Query ROM file
        db_path: Signature database to scan
        threshold: Minimum similarity percentage
        family: Hash family the database was built with
        sort: Sort matches by similarity (highest first) instead of
              database order

    Returns:
        Tuple of (list of Match objects, MatchStats)

    Raises:
        DatabaseIOError: Query ROM or database cannot be read
        UnsupportedSizeError: Query ROM cannot be normalized
        UnsupportedVersionError / InvalidChunkSizeError: Bad database header
        CorruptDatabaseError: Malformed database record
    """
    image = load_rom(resolve_rom_path(rom_path))

    with EntryReader.open(db_path) as reader:
        query = compute_signature(image, reader.chunk_size, family)
        matcher = SimilarityMatcher(query, threshold)
        matches = list(matcher.scan(reader))

    if sort:
        matches.sort(key=lambda m: -m.similarity)
    return matches, matcher.stats


__all__ = ['SimilarityMatcher', 'match_rom', 'resolve_rom_path']
