"""Shared test fixtures for sfd_hash test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from sfd_hash.hasher import CHUNK_SIZE


# ---------------------------------------------------------------------------
# Sample files
# ---------------------------------------------------------------------------

@pytest.fixture()
def empty_file(tmp_path: Path) -> Path:
    path = tmp_path / "empty"
    path.write_bytes(b"")
    return path


@pytest.fixture()
def single_a_file(tmp_path: Path) -> Path:
    """File containing the single byte 0x61."""
    path = tmp_path / "a.txt"
    path.write_bytes(b"a")
    return path


@pytest.fixture()
def chunk_file(tmp_path: Path) -> Path:
    """Exactly one staging buffer of zero bytes."""
    path = tmp_path / "zeros.bin"
    path.write_bytes(b"\x00" * CHUNK_SIZE)
    return path
