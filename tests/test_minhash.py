"""
Unit tests for MinHash sketches and chunk signatures.
"""

import numpy as np
import pytest
from minhashrom.errors import InvalidChunkSizeError
from minhashrom.minhash import (
    DoubleHashFamily,
    HashFamily,
    MinHashSketch,
    UINT64_MAX,
    default_family,
    similarity,
)
from minhashrom.scanner import compute_signature


class ConstantFamily(HashFamily):
    """Family whose i-th function always returns 100 - i."""

    def hash(self, index, data):
        return 100 - index


class TestDoubleHashFamily:
    """Test DoubleHashFamily class."""

    def test_hash_all_matches_hash(self):
        """Test that the vectorized path agrees with single hashes."""
        family = DoubleHashFamily()
        values = family.hash_all(b"pitfall", 16)
        assert values.dtype == np.uint64
        assert [int(v) for v in values] == [family.hash(i, b"pitfall") for i in range(16)]

    def test_double_hashing_formula(self):
        """Test that function i is h1 + i * h2."""
        family = DoubleHashFamily(h1=lambda d: 7, h2=lambda d: 3)
        assert [int(v) for v in family.hash_all(b"", 4)] == [7, 10, 13, 16]
        assert family.hash(5, b"") == 22

    def test_arithmetic_wraps(self):
        """Test that values wrap modulo 2**64."""
        family = DoubleHashFamily(h1=lambda d: 2**64 - 1, h2=lambda d: 2)
        assert family.hash(1, b"") == 1
        assert int(family.hash_all(b"", 2)[1]) == 1

    def test_default_family_shared(self):
        """Test that the default family is created once."""
        assert default_family() is default_family()

    def test_base_class_hash_all(self):
        """Test the generic hash_all fallback on the base class."""
        values = ConstantFamily().hash_all(b"x", 3)
        assert [int(v) for v in values] == [100, 99, 98]


class TestMinHashSketch:
    """Test MinHashSketch class."""

    def test_initial_state(self):
        """Test that a new sketch is filled with the maximum value."""
        sketch = MinHashSketch(8)
        assert len(sketch) == 8
        assert all(int(v) == int(UINT64_MAX) for v in sketch.signature)

    def test_push_keeps_minimum(self):
        """Test that pushing only ever lowers components."""
        values = {b"a": 50, b"b": 10, b"c": 30}
        family = DoubleHashFamily(h1=lambda d: values[bytes(d)], h2=lambda d: 1)
        sketch = MinHashSketch(3, family)
        for chunk in (b"a", b"b", b"c"):
            sketch.push(chunk)
        assert [int(v) for v in sketch.signature] == [10, 11, 12]

    def test_signature_is_copy(self):
        """Test that mutating the returned signature does not touch the sketch."""
        family = DoubleHashFamily(h1=lambda d: 5, h2=lambda d: 1)
        sketch = MinHashSketch(4, family)
        sketch.push(b"chunk")
        sig = sketch.signature
        sig[0] = 0
        assert int(sketch.signature[0]) == 5

    def test_from_signature_roundtrip(self):
        """Test rebuilding a sketch from a stored signature."""
        sketch = MinHashSketch(16)
        sketch.push(b"adventure")
        rebuilt = MinHashSketch.from_signature(sketch.signature)
        assert rebuilt.similarity(sketch) == 1.0

    def test_invalid_size(self):
        """Test that a zero-size sketch is rejected."""
        with pytest.raises(ValueError):
            MinHashSketch(0)


class TestSimilarity:
    """Test similarity function."""

    def test_identical(self):
        """Test that equal signatures score 1.0."""
        a = np.array([1, 2, 3, 4], dtype=np.uint64)
        assert similarity(a, a.copy()) == 1.0

    def test_partial(self):
        """Test that the score is the fraction of equal components."""
        a = np.array([1, 2, 3, 4], dtype=np.uint64)
        b = np.array([1, 2, 9, 9], dtype=np.uint64)
        assert similarity(a, b) == 0.5

    def test_length_mismatch(self):
        """Test that signatures of different lengths are rejected."""
        with pytest.raises(ValueError):
            similarity(np.zeros(4, dtype=np.uint64), np.zeros(8, dtype=np.uint64))


class TestComputeSignature:
    """Test compute_signature function."""

    def test_signature_length(self, rom_bytes):
        """Test that k = 4096 / chunk_size."""
        image = rom_bytes(4096, seed=20)
        assert len(compute_signature(image, 64)) == 64
        assert len(compute_signature(image, 2048)) == 2
        assert len(compute_signature(image, 8)) == 512

    def test_deterministic(self, rom_bytes):
        """Test that identical input yields a bit-identical signature."""
        image = rom_bytes(4096, seed=21)
        first = compute_signature(image, 64)
        second = compute_signature(bytes(image), 64)
        assert np.array_equal(first, second)

    def test_self_similarity(self, rom_bytes):
        """Test that an image is exactly 100% similar to itself."""
        sig = compute_signature(rom_bytes(4096, seed=22), 128)
        assert similarity(sig, sig) * 100 == 100.0

    def test_last_byte_of_chunk_ignored(self):
        """Test that the final byte of every chunk does not affect the signature."""
        image = bytearray(4096)
        image[63] = 0xFF
        image[127] = 0x42
        assert np.array_equal(
            compute_signature(bytes(image), 64),
            compute_signature(bytes(4096), 64),
        )

    def test_first_byte_of_chunk_counts(self):
        """Test that other bytes of a chunk change the signature."""
        image = bytearray(4096)
        image[64] = 0xFF
        assert not np.array_equal(
            compute_signature(bytes(image), 64),
            compute_signature(bytes(4096), 64),
        )

    def test_similar_images_score_high(self, rom_bytes):
        """Test that changing one chunk out of 64 keeps similarity high."""
        image = rom_bytes(4096, seed=23)
        modified = bytearray(image)
        modified[100:110] = bytes(10)
        score = similarity(compute_signature(image, 64), compute_signature(bytes(modified), 64))
        assert score > 0.8

    def test_unrelated_images_score_low(self, rom_bytes):
        """Test that unrelated random images share few components."""
        a = compute_signature(rom_bytes(4096, seed=24), 64)
        b = compute_signature(rom_bytes(4096, seed=25), 64)
        assert similarity(a, b) < 0.2

    def test_invalid_chunk_size(self):
        """Test that a chunk size that does not divide 4096 is rejected."""
        with pytest.raises(InvalidChunkSizeError):
            compute_signature(bytes(4096), 100)

    def test_non_canonical_image(self):
        """Test that images of the wrong length are rejected."""
        with pytest.raises(ValueError):
            compute_signature(bytes(2048), 64)

    def test_custom_family(self):
        """Test that a custom hash family is used for every component."""
        sig = compute_signature(bytes(4096), 2048, family=ConstantFamily())
        assert [int(v) for v in sig] == [100, 99]
