"""
Unit tests for validators, formatters and dependency checks.
"""

import importlib
import sys

import pytest
from minhashrom import dependencies
from minhashrom.errors import InvalidChunkSizeError
from minhashrom.utils import (
    format_entries,
    format_similarity,
    require_chunk_size,
    validate_chunk_size,
    validate_directory,
    validate_threshold,
)


class TestValidateChunkSize:
    """Test chunk size validation."""

    @pytest.mark.parametrize("chunk_size", [8, 16, 64, 512, 2048])
    def test_valid(self, chunk_size):
        """Test that powers of two from 8 to 2048 are accepted."""
        assert validate_chunk_size(chunk_size) == (True, "")

    def test_too_small(self):
        """Test the message for chunk sizes below 8."""
        is_valid, error = validate_chunk_size(4)
        assert not is_valid
        assert "less than 8" in error

    def test_too_large(self):
        """Test the message for chunk sizes above 2048."""
        is_valid, error = validate_chunk_size(4096)
        assert not is_valid
        assert "more than 2048" in error

    def test_does_not_divide(self):
        """Test the message for chunk sizes that do not divide 4096."""
        assert validate_chunk_size(100) == (False, "chunk size must divide equally into 4096")

    def test_require_raises(self):
        """Test that require_chunk_size raises with the bad value attached."""
        with pytest.raises(InvalidChunkSizeError) as exc_info:
            require_chunk_size(100)
        assert exc_info.value.chunk_size == 100

    def test_require_returns_value(self):
        """Test that a valid chunk size is passed through."""
        assert require_chunk_size(64) == 64


class TestValidateThreshold:
    """Test threshold validation."""

    def test_valid(self):
        """Test that an ordinary percentage is accepted."""
        assert validate_threshold(80.0) == (True, "")

    def test_nan(self):
        """Test that NaN is rejected."""
        assert validate_threshold(float("nan"))[0] is False

    def test_not_a_number(self):
        """Test that non-numeric thresholds are rejected."""
        assert validate_threshold("high")[0] is False


class TestValidateDirectory:
    """Test directory validation."""

    def test_existing(self, temp_dir):
        """Test that an existing directory is accepted."""
        assert validate_directory(str(temp_dir)) == (True, "")

    def test_missing(self, temp_dir):
        """Test that a missing directory is reported as not found."""
        is_valid, error = validate_directory(str(temp_dir / "nope"))
        assert not is_valid
        assert "not found" in error

    def test_file(self, zero_query):
        """Test that a regular file is not accepted as a directory."""
        assert validate_directory(str(zero_query))[0] is False


class TestFormatters:
    """Test formatting helpers."""

    def test_format_entries(self):
        """Test singular and plural entry counts."""
        assert format_entries(0) == "0 entries"
        assert format_entries(1) == "1 entry"
        assert format_entries(2) == "2 entries"

    def test_format_similarity(self):
        """Test fixed-width percentages with two decimals."""
        assert format_similarity(100.0) == "100.00%"
        assert format_similarity(5.5) == "  5.50%"


class TestDependencies:
    """Test required dependency checks."""

    def test_numpy_shared_by_modules(self):
        """Test that modules get numpy and xxhash from the dependency module."""
        from minhashrom import matcher, minhash, models
        assert minhash.np is dependencies.np
        assert minhash.xxhash is dependencies.xxhash
        assert models.np is dependencies.np
        assert matcher.np is dependencies.np

    @pytest.mark.parametrize("missing", ["numpy", "xxhash"])
    def test_missing_package_install_hint(self, monkeypatch, missing):
        """Test that a missing required package names the install command."""
        monkeypatch.setitem(sys.modules, missing, None)
        with pytest.raises(ImportError, match="pip install numpy xxhash"):
            importlib.reload(dependencies)
        monkeypatch.undo()
        importlib.reload(dependencies)
