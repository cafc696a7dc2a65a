"""
Data models for MinHash ROM matcher.

Contains dataclasses for database headers, stored entries, match results
and the counters returned by build and match runs.
"""

from dataclasses import dataclass, field
import os

from .dependencies import np
from .config import IMAGE_SIZE


@dataclass(frozen=True)
class DatabaseHeader:
    """
    Fixed header at the start of every signature database.

    Attributes:
        version: Database format version
        chunk_size: Chunk size every entry in the file was signed with
    """
    version: int
    chunk_size: int

    @property
    def signature_length(self) -> int:
        """Number of uint64 components in each stored signature."""
        return IMAGE_SIZE // self.chunk_size

    @property
    def record_signature_bytes(self) -> int:
        """Size in bytes of one encoded signature."""
        return self.signature_length * 8


@dataclass(eq=False)
class Entry:
    """
    One named signature read from (or written to) the database.

    Attributes:
        name: ROM base name, possibly truncated to fit the name block
        signature: uint64 MinHash signature vector
    """
    name: str
    signature: np.ndarray

    def __eq__(self, other):
        if not isinstance(other, Entry):
            return False
        return self.name == other.name and np.array_equal(self.signature, other.signature)

    @property
    def display_name(self) -> str:
        """Name safe for printing, undecodable bytes replaced."""
        return os.fsencode(self.name).decode('utf-8', errors='replace')


@dataclass
class Match:
    """A database entry whose similarity reached the threshold."""
    similarity: float
    name: str

    @property
    def display_name(self) -> str:
        """Name safe for printing, undecodable bytes replaced."""
        return os.fsencode(self.name).decode('utf-8', errors='replace')


@dataclass
class BuildStats:
    """Counters collected while building a signature database."""
    chunk_size: int = 0
    files_visited: int = 0
    files_skipped: int = 0
    entries_written: int = 0
    skipped_paths: list[str] = field(default_factory=list)


@dataclass
class MatchStats:
    """Counters collected while scanning a signature database."""
    entries_checked: int = 0
    entries_matched: int = 0
