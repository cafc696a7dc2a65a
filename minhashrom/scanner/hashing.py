"""
Hashing module for the scanner package.

Provides chunk-based MinHash signature computation for canonical ROM
images.
"""

from __future__ import annotations

from typing import Optional

from ..config import IMAGE_SIZE
from ..minhash import HashFamily, MinHashSketch
from ..errors import InvalidChunkSizeError
from ..dependencies import np


def compute_signature(
    image: bytes,
    chunk_size: int,
    family: Optional[HashFamily] = None,
) -> np.ndarray:
    """
    Calculate the MinHash signature of a canonical ROM image.

    The image is walked in non-overlapping chunk_size windows. Each window
    pushed into the sketch stops one byte short of the chunk end, which is
    how every existing signature database was built; changing the window
    changes every signature.

    Args:
        image: Canonical image, exactly IMAGE_SIZE bytes
        chunk_size: Bytes per chunk; must divide IMAGE_SIZE
        family: Hash family for the sketch (default xxh64 / xxh3_64)

    Returns:
        uint64 array of length IMAGE_SIZE // chunk_size

    Raises:
        InvalidChunkSizeError: If chunk_size does not divide IMAGE_SIZE
        ValueError: If image is not a canonical image
    """
    if chunk_size <= 0 or IMAGE_SIZE % chunk_size != 0:
        raise InvalidChunkSizeError(
            f"chunk size must divide equally into {IMAGE_SIZE}", chunk_size
        )
    if len(image) != IMAGE_SIZE:
        raise ValueError(f"Expected a {IMAGE_SIZE} byte image, got {len(image)} bytes")

    sketch = MinHashSketch(IMAGE_SIZE // chunk_size, family)
    view = memoryview(image)
    for offset in range(0, IMAGE_SIZE, chunk_size):
        sketch.push(view[offset:offset + chunk_size - 1])

    return sketch.signature


__all__ = ['compute_signature']
