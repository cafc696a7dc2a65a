"""
Signature database for the MinHash ROM matcher.

A database is a flat binary file: a four byte header followed by one
record per ROM. It is created in a single pass and read sequentially;
there is no in-place update or append.

Public API:
- DatabaseWriter: Create a database and append entries
- EntryReader: Stream entries out of a database
- read_entries: Iterate over a database file's entries
- build_database: Sign a directory of ROMs into a new database
- encode_header / decode_header / encode_entry: Low-level codec
"""

from __future__ import annotations

from .codec import (
    encode_header,
    decode_header,
    encode_entry,
    truncate_name,
    read_header,
    write_header,
    write_entry,
)
from .reader import EntryReader, read_entries
from .writer import DatabaseWriter
from .builder import build_database


__all__ = [
    'DatabaseWriter',
    'EntryReader',
    'read_entries',
    'build_database',
    'encode_header',
    'decode_header',
    'encode_entry',
    'truncate_name',
    'read_header',
    'write_header',
    'write_entry',
]
