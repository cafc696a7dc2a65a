"""
Pytest configuration and shared fixtures for test suite.
"""

import pytest
import random
import tempfile
import shutil
from pathlib import Path


def make_rom(size: int, seed: int) -> bytes:
    """Deterministic pseudo-random ROM contents."""
    return random.Random(seed).randbytes(size)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def rom_dir(temp_dir):
    """
    Create a directory of sample ROM files for testing.

    Returns:
        Path to a directory containing:
        - a.bin (4096 zero bytes)
        - half.bin (2048 random bytes, doubled on load)
        - large.bin (8192 random bytes, truncated on load)
        - nested/deep.bin (4096 random bytes, in a subdirectory)
        - notes.txt (100 bytes, unsupported size)
        - odd.bin (3000 bytes, unsupported size)
        - huge.bin (65536 bytes, above the candidate size guard)
    """
    roms = temp_dir / "roms"
    roms.mkdir()

    (roms / "a.bin").write_bytes(bytes(4096))
    (roms / "half.bin").write_bytes(make_rom(2048, seed=1))
    (roms / "large.bin").write_bytes(make_rom(8192, seed=2))

    nested = roms / "nested"
    nested.mkdir()
    (nested / "deep.bin").write_bytes(make_rom(4096, seed=3))

    (roms / "notes.txt").write_bytes(b"x" * 100)
    (roms / "odd.bin").write_bytes(make_rom(3000, seed=4))
    (roms / "huge.bin").write_bytes(make_rom(65536, seed=5))

    return roms


@pytest.fixture
def zero_rom_dir(temp_dir):
    """A directory holding a single all-zero 4096 byte ROM named a.bin."""
    roms = temp_dir / "zero_roms"
    roms.mkdir()
    (roms / "a.bin").write_bytes(bytes(4096))
    return roms


@pytest.fixture
def zero_query(temp_dir):
    """An all-zero 4096 byte query ROM outside the ROM directory."""
    path = temp_dir / "query.bin"
    path.write_bytes(bytes(4096))
    return path


@pytest.fixture
def db_path(temp_dir):
    """Path for a temporary signature database."""
    return temp_dir / "test_minhash.db"


@pytest.fixture
def rom_bytes():
    """Factory for deterministic pseudo-random ROM contents."""
    return make_rom
