"""
Configuration constants for MinHash ROM matcher.

This module contains all configurable settings including:
- Canonical ROM image geometry
- Signature database layout
- Default build and match parameters
"""

# Canonical image size; every ROM is normalized to exactly this many bytes
IMAGE_SIZE = 4096

# Half-size ROMs are doubled up to IMAGE_SIZE
HALF_IMAGE_SIZE = 2048

# Files at or above this size are never treated as candidate ROMs
MAX_CANDIDATE_SIZE = 65536

# Chunk size limits (bytes per sketch window)
# Must also divide IMAGE_SIZE evenly
MIN_CHUNK_SIZE = 8
MAX_CHUNK_SIZE = 2048
DEFAULT_CHUNK_SIZE = 64

# Signature database layout
SUPPORTED_VERSION = 1   # Only database version this build reads and writes
HEADER_SIZE = 4         # version (uint16 BE) + chunk size (uint16 BE)
NAME_BLOCK_SIZE = 256   # Name plus terminator never exceeds this
HASH_SIZE = 8           # Each signature component is a uint64 LE

# Default similarity threshold (percentage, 0-100)
DEFAULT_THRESHOLD = 80.0

# Default signature database location (relative to working directory)
DEFAULT_DB_FILE = 'minhash.db'
