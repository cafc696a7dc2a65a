"""
MinHash sketches for approximate ROM similarity.

A sketch keeps, for each of k hash functions, the smallest hash value seen
over every chunk pushed into it. Two sketches built with the same k and the
same hash family estimate the Jaccard similarity of their chunk sets as the
fraction of components that are bit-identical.

The k hash functions come from a HashFamily. The default family derives
them from two independent 64-bit primitives by double hashing:

    h_i(c) = H1(c) + i * H2(c)   (mod 2**64)

so only two real hash computations are needed per chunk regardless of k.

Usage:
    sketch = MinHashSketch(size=64)
    for chunk in chunks:
        sketch.push(chunk)

    other = MinHashSketch.from_signature(stored_signature)
    percent = sketch.similarity(other) * 100
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

from .dependencies import np, xxhash


UINT64_MASK = (1 << 64) - 1
UINT64_MAX = np.iinfo(np.uint64).max

# A primitive maps a byte string to an unsigned 64-bit integer
HashPrimitive = Callable[[bytes], int]


class HashFamily(ABC):
    """
    A family of independent 64-bit hash functions indexed by seed.

    Sketch code only talks to this interface, so the primitives behind it
    can be swapped without touching the sketch logic.
    """

    @abstractmethod
    def hash(self, index: int, data: bytes) -> int:
        """
        Hash data with the index-th function of the family.

        Args:
            index: Which function of the family to use (0-based)
            data: Bytes to hash

        Returns:
            Unsigned 64-bit hash value
        """

    def hash_all(self, data: bytes, count: int) -> np.ndarray:
        """
        Hash data with functions 0..count-1.

        Subclasses should override this with something faster than a
        Python loop when they can.

        Returns:
            uint64 array of length count
        """
        return np.fromiter(
            (self.hash(i, data) for i in range(count)),
            dtype=np.uint64,
            count=count,
        )


class DoubleHashFamily(HashFamily):
    """
    Hash family built from two primitives by double hashing.

    Function i is H1(data) + i * H2(data) with wrapping 64-bit arithmetic.
    Defaults to xxh64 for H1 and xxh3_64 for H2, both unseeded.
    """

    def __init__(
        self,
        h1: Optional[HashPrimitive] = None,
        h2: Optional[HashPrimitive] = None,
    ):
        self.h1 = h1 or xxhash.xxh64_intdigest
        self.h2 = h2 or xxhash.xxh3_64_intdigest

    def hash(self, index: int, data: bytes) -> int:
        return (self.h1(data) + index * self.h2(data)) & UINT64_MASK

    def hash_all(self, data: bytes, count: int) -> np.ndarray:
        base = np.uint64(self.h1(data))
        step = np.uint64(self.h2(data))
        # uint64 array arithmetic wraps modulo 2**64
        return base + np.arange(count, dtype=np.uint64) * step


_default_family: Optional[HashFamily] = None


def default_family() -> HashFamily:
    """Return the shared default hash family (xxh64 / xxh3_64)."""
    global _default_family
    if _default_family is None:
        _default_family = DoubleHashFamily()
    return _default_family


class MinHashSketch:
    """
    Fixed-size array of running minimums, one per hash function.

    Every component starts at the largest uint64 value and only ever
    decreases as chunks are pushed.
    """

    def __init__(self, size: int, family: Optional[HashFamily] = None):
        """
        Initialize an empty sketch.

        Args:
            size: Number of hash functions (signature length k)
            family: Hash family to draw functions from. Uses the default
                    double-hashing family if None.
        """
        if size < 1:
            raise ValueError(f"Sketch size must be positive, got {size}")
        self.size = size
        self.family = family or default_family()
        self.minimums = np.full(size, UINT64_MAX, dtype=np.uint64)

    def push(self, data: bytes) -> None:
        """Fold one chunk into the sketch."""
        hashes = self.family.hash_all(bytes(data), self.size)
        np.minimum(self.minimums, hashes, out=self.minimums)

    @property
    def signature(self) -> np.ndarray:
        """Copy of the current minimums, in function index order."""
        return self.minimums.copy()

    @classmethod
    def from_signature(
        cls,
        signature: np.ndarray,
        family: Optional[HashFamily] = None,
    ) -> MinHashSketch:
        """Rebuild a sketch from a stored signature."""
        values = np.asarray(signature, dtype=np.uint64)
        sketch = cls(len(values), family)
        sketch.minimums = values.copy()
        return sketch

    def similarity(self, other: MinHashSketch) -> float:
        """Estimated Jaccard similarity with another sketch (0.0-1.0)."""
        return similarity(self.minimums, other.minimums)

    def __len__(self) -> int:
        return self.size


def similarity(a: np.ndarray, b: np.ndarray) -> float:
    """
    Estimate Jaccard similarity from two signatures.

    Args:
        a: First uint64 signature
        b: Second uint64 signature, same length as a

    Returns:
        Fraction of components that are identical (0.0-1.0)

    Raises:
        ValueError: If the signatures differ in length or are empty
    """
    if len(a) != len(b):
        raise ValueError(
            f"Cannot compare signatures of different length ({len(a)} vs {len(b)})"
        )
    if len(a) == 0:
        raise ValueError("Cannot compare empty signatures")
    matching = int(np.count_nonzero(np.asarray(a) == np.asarray(b)))
    return matching / len(a)


__all__ = [
    'HashFamily',
    'DoubleHashFamily',
    'MinHashSketch',
    'default_family',
    'similarity',
    'UINT64_MAX',
]
