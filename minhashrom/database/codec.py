"""
Binary codec for the signature database format.

Layout (no alignment padding anywhere):

    Header:  version     uint16 big-endian   (SUPPORTED_VERSION)
             chunk_size  uint16 big-endian   (divides IMAGE_SIZE)
    Entry*:  name        up to NAME_BLOCK_SIZE - 1 bytes, then one 0x00
             signature   k x uint64 little-endian, k = IMAGE_SIZE / chunk_size

Entries follow each other directly; the signature of an entry starts on
the byte after its name terminator.
"""

from __future__ import annotations

import os
import struct
from typing import BinaryIO

from ..dependencies import np
from ..config import IMAGE_SIZE, SUPPORTED_VERSION, HEADER_SIZE, NAME_BLOCK_SIZE
from ..errors import CorruptDatabaseError, InvalidChunkSizeError, UnsupportedVersionError
from ..models import DatabaseHeader


HEADER_STRUCT = struct.Struct('>HH')
SIGNATURE_DTYPE = np.dtype('<u8')
NAME_TERMINATOR = b'\x00'


def encode_header(chunk_size: int, version: int = SUPPORTED_VERSION) -> bytes:
    """
    Encode a database header.

    Args:
        chunk_size: Chunk size the database entries are signed with
        version: Format version to record

    Returns:
        HEADER_SIZE bytes

    Examples:
        >>> encode_header(64).hex()
        '00010040'
    """
    return HEADER_STRUCT.pack(version, chunk_size)


def decode_header(data: bytes) -> DatabaseHeader:
    """
    Decode and validate a database header.

    Args:
        data: The first HEADER_SIZE bytes of a database file

    Returns:
        Validated DatabaseHeader

    Raises:
        CorruptDatabaseError: If fewer than HEADER_SIZE bytes are given
        UnsupportedVersionError: If the version is not SUPPORTED_VERSION
        InvalidChunkSizeError: If the chunk size does not divide IMAGE_SIZE
    """
    if len(data) < HEADER_SIZE:
        raise CorruptDatabaseError("no header found", offset=0)

    version, chunk_size = HEADER_STRUCT.unpack(data[:HEADER_SIZE])
    if version != SUPPORTED_VERSION:
        raise UnsupportedVersionError(version)
    if chunk_size <= 0 or IMAGE_SIZE % chunk_size != 0:
        raise InvalidChunkSizeError("invalid database file: invalid chunk size", chunk_size)

    return DatabaseHeader(version=version, chunk_size=chunk_size)


def truncate_name(name: str | bytes) -> bytes:
    """
    Encode a ROM name to fit inside a name block.

    Directory components are stripped and the result is cut to
    NAME_BLOCK_SIZE - 1 bytes, leaving room for the terminator.

    Examples:
        >>> truncate_name('roms/pitfall.bin')
        b'pitfall.bin'
    """
    raw = os.fsencode(name)
    raw = os.path.basename(raw)
    return raw[:NAME_BLOCK_SIZE - 1]


def encode_signature(signature: np.ndarray) -> bytes:
    """Encode signature components as little-endian uint64 values."""
    return np.asarray(signature, dtype=np.uint64).astype(SIGNATURE_DTYPE, copy=False).tobytes()


def decode_signature(data: bytes) -> np.ndarray:
    """Decode little-endian uint64 values into a native uint64 array."""
    if len(data) % SIGNATURE_DTYPE.itemsize != 0:
        raise CorruptDatabaseError("unexpected end of file")
    return np.frombuffer(data, dtype=SIGNATURE_DTYPE).astype(np.uint64)


def encode_entry(name: str | bytes, signature: np.ndarray) -> bytes:
    """
    Encode one database entry.

    Args:
        name: ROM name or path; truncated with truncate_name
        signature: uint64 signature vector

    Returns:
        Name bytes, terminator and signature bytes

    Raises:
        ValueError: If the name contains a NUL byte
    """
    raw = truncate_name(name)
    if NAME_TERMINATOR in raw:
        raise ValueError(f"ROM name cannot contain NUL bytes: {raw!r}")
    return raw + NAME_TERMINATOR + encode_signature(signature)


def write_header(stream: BinaryIO, chunk_size: int) -> None:
    """Write the database header at the current stream position."""
    stream.write(encode_header(chunk_size))


def read_header(stream: BinaryIO) -> DatabaseHeader:
    """Read and validate the database header from the current stream position."""
    return decode_header(stream.read(HEADER_SIZE))


def write_entry(stream: BinaryIO, name: str | bytes, signature: np.ndarray) -> int:
    """
    Write one entry at the current stream position.

    Returns:
        Number of bytes written
    """
    record = encode_entry(name, signature)
    stream.write(record)
    return len(record)


__all__ = [
    'HEADER_STRUCT',
    'encode_header',
    'decode_header',
    'truncate_name',
    'encode_signature',
    'decode_signature',
    'encode_entry',
    'write_header',
    'read_header',
    'write_entry',
]
