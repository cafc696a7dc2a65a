"""
Signature database writer.

Provides DatabaseWriter, which creates (or truncates) a database file,
writes its header and appends entries one at a time.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

from ..dependencies import np
from ..config import IMAGE_SIZE
from ..errors import DatabaseIOError
from ..utils.validators import require_chunk_size
from .codec import write_header, write_entry


class DatabaseWriter:
    """
    Writes a complete signature database in one pass.

    The database is rebuilt from scratch every time; an existing file at
    db_path is truncated. Concurrent writers to the same file are not
    supported.

    Usage:
        with DatabaseWriter('minhash.db', chunk_size=64) as writer:
            writer.add('pitfall.bin', signature)
        print(writer.count)
    """

    def __init__(self, db_path: str | Path, chunk_size: int):
        """
        Create the database file and write its header.

        Args:
            db_path: Path of the database file to create
            chunk_size: Chunk size every entry will be signed with

        Raises:
            InvalidChunkSizeError: If chunk_size is invalid (before the file is touched)
            DatabaseIOError: If the file cannot be created
        """
        self.chunk_size = require_chunk_size(chunk_size)
        self.signature_length = IMAGE_SIZE // self.chunk_size
        self.db_path = os.fspath(db_path)
        self.count = 0
        self._stream: BinaryIO = self._open()

    def _open(self) -> BinaryIO:
        try:
            stream = open(self.db_path, 'wb')
            write_header(stream, self.chunk_size)
        except OSError as e:
            raise DatabaseIOError(
                f"error creating database: {e}", self.db_path, 'creating database'
            ) from e
        return stream

    def add(self, name: str | bytes, signature: np.ndarray) -> None:
        """
        Append one entry.

        Args:
            name: ROM name or path (directory components are stripped)
            signature: Signature computed with this database's chunk size

        Raises:
            ValueError: If the signature length does not match the chunk size
            DatabaseIOError: If the write fails
        """
        if len(signature) != self.signature_length:
            raise ValueError(
                f"Signature has {len(signature)} components, "
                f"database expects {self.signature_length}"
            )
        try:
            write_entry(self._stream, name, signature)
        except OSError as e:
            raise DatabaseIOError(
                f"error creating database: {e}", self.db_path, 'writing entry'
            ) from e
        self.count += 1

    def close(self) -> None:
        """Flush and close the database file."""
        try:
            self._stream.close()
        except OSError as e:
            raise DatabaseIOError(
                f"error creating database: {e}", self.db_path, 'closing database'
            ) from e

    def __enter__(self) -> DatabaseWriter:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ['DatabaseWriter']
