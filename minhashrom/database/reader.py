"""
Streaming reader for signature databases.

Provides EntryReader, a finite, non-restartable iterator over the entries
of a database file. Only one entry's signature is held in memory at a
time; the whole file is never loaded.
"""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import BinaryIO, Iterator, Optional

from ..config import NAME_BLOCK_SIZE
from ..errors import CorruptDatabaseError, DatabaseIOError
from ..models import DatabaseHeader, Entry
from .codec import NAME_TERMINATOR, read_header, decode_signature


logger = logging.getLogger(__name__)


class EntryReader:
    """
    Sequential reader over database entries.

    The header is read and validated on open, so an unsupported version
    or chunk size fails before any entry is touched.

    Usage:
        with EntryReader.open('minhash.db') as reader:
            print(reader.header.chunk_size)
            for entry in reader:
                ...
    """

    def __init__(self, stream: BinaryIO, path: Optional[str] = None):
        """
        Initialize the reader over an already open binary stream.

        Args:
            stream: Seekable binary stream positioned at the header
            path: Path of the stream, used for error messages

        Raises:
            UnsupportedVersionError: Header version is not supported
            InvalidChunkSizeError: Header chunk size is invalid
            CorruptDatabaseError: Stream is shorter than a header
        """
        self._stream = stream
        self.path = path or getattr(stream, 'name', '<stream>')
        self.header: DatabaseHeader = self._wrap_io(lambda: read_header(stream))
        self._entries = self._iter_entries()

    @classmethod
    def open(cls, db_path: str | Path) -> EntryReader:
        """
        Open a database file for reading.

        Raises:
            DatabaseIOError: If the file cannot be opened
        """
        db_path = os.fspath(db_path)
        try:
            stream = open(db_path, 'rb')
        except OSError as e:
            raise DatabaseIOError(
                f"cannot open database: {db_path}", db_path, 'opening database'
            ) from e
        try:
            return cls(stream, db_path)
        except BaseException:
            stream.close()
            raise

    @property
    def chunk_size(self) -> int:
        """Chunk size all entries in this database were signed with."""
        return self.header.chunk_size

    @property
    def signature_length(self) -> int:
        """Number of components in each stored signature."""
        return self.header.signature_length

    def _wrap_io(self, operation):
        try:
            return operation()
        except OSError as e:
            raise DatabaseIOError(
                f"error reading database: {e}", self.path, 'reading database'
            ) from e

    def _read_entry(self) -> Optional[Entry]:
        stream = self._stream
        offset = stream.tell()

        block = stream.read(NAME_BLOCK_SIZE)
        if not block:
            return None

        end = block.find(NAME_TERMINATOR)
        if end == -1:
            if len(block) < NAME_BLOCK_SIZE:
                raise CorruptDatabaseError("unexpected end of file", offset)
            raise CorruptDatabaseError("entry name is not terminated", offset)

        # Rewind to the byte after the terminator, where the signature starts
        stream.seek(-(len(block) - end - 1), io.SEEK_CUR)

        expected = self.header.record_signature_bytes
        data = stream.read(expected)
        if len(data) != expected:
            raise CorruptDatabaseError("unexpected end of file", offset + end + 1)

        return Entry(name=os.fsdecode(block[:end]), signature=decode_signature(data))

    def _iter_entries(self) -> Iterator[Entry]:
        while True:
            entry = self._wrap_io(self._read_entry)
            if entry is None:
                return
            yield entry

    def __iter__(self) -> Iterator[Entry]:
        return self

    def __next__(self) -> Entry:
        return next(self._entries)

    def close(self) -> None:
        """Close the underlying stream."""
        self._stream.close()

    def __enter__(self) -> EntryReader:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def read_entries(db_path: str | Path) -> Iterator[Entry]:
    """
    Iterate over every entry in a database file.

    The file is closed once the iterator is exhausted or discarded.
    """
    with EntryReader.open(db_path) as reader:
        logger.debug(f"Reading {db_path} (chunk size {reader.chunk_size})")
        yield from reader


__all__ = ['EntryReader', 'read_entries']
