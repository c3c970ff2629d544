"""Streaming SHA-256 file hashing.

The file is read through a single fixed-size staging buffer, so memory use is
bounded by CHUNK_SIZE regardless of the file size. Failures are reported as one
of two coarse categories:

  - FileIOError:  the file could not be opened or read
  - HashingError: the digest primitive failed or produced a bad digest
"""

from __future__ import annotations

import enum
import hashlib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable

logger = logging.getLogger(__name__)

ALGORITHM = "sha256"
CHUNK_SIZE = 64 * 1024
DIGEST_SIZE = 32


# ---------------------------------------------------------------------------
# Failure taxonomy
# ---------------------------------------------------------------------------


class FailureKind(enum.IntEnum):
    """Failure categories; each value is the process exit status."""

    USAGE = 1
    IO = 2
    HASHING = 3

    @property
    def message(self) -> str:
        """Fixed stderr line; the usage line is built by the CLI."""
        if self is FailureKind.USAGE:
            raise ValueError("usage message depends on the program name")
        return _MESSAGES[self]


_MESSAGES = {
    FailureKind.IO: "File I/O error",
    FailureKind.HASHING: "Hashing error",
}


class DigestError(Exception):
    """Base class for hashing pipeline failures."""

    kind: FailureKind

    def __init__(self, path: str | Path, detail: str) -> None:
        self.path = str(path)
        self.detail = detail
        super().__init__(f"{self.kind.message} for {self.path}: {detail}")


class FileIOError(DigestError):
    """Raised when the file cannot be opened or read."""

    kind = FailureKind.IO


class HashingError(DigestError):
    """Raised when the SHA-256 context fails to initialize, update or finalize."""

    kind = FailureKind.HASHING


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileDigest:
    """Digest of a file together with the number of bytes fed into it."""

    digest: bytes
    bytes_read: int

    @property
    def hexdigest(self) -> str:
        return hex_lower(self.digest)


def hex_lower(data: bytes) -> str:
    """Encode bytes as lowercase hex, two characters per byte, no separators."""
    return data.hex()


# ---------------------------------------------------------------------------
# Hashing
# ---------------------------------------------------------------------------


def hash_file(
    path: str | Path,
    *,
    digest_factory: Callable[[], Any] = hashlib.sha256,
) -> FileDigest:
    """Compute the SHA-256 digest of a file, reading in CHUNK_SIZE chunks.

    Raises FileIOError if the file cannot be opened or a read fails, and
    HashingError if the digest context fails or yields other than 32 bytes.
    """
    try:
        # Unbuffered: every readinto() is one read of at most CHUNK_SIZE bytes
        f = open(path, "rb", buffering=0)
    except (OSError, ValueError) as exc:
        # ValueError: path with an embedded null byte
        logger.debug("Cannot open %s: %s", path, exc)
        raise FileIOError(path, str(exc)) from exc

    try:
        with f:
            digest, total = _stream(f, path, digest_factory)
    except OSError as exc:
        logger.debug("Close failed for %s: %s", path, exc)
        raise FileIOError(path, str(exc)) from exc

    if len(digest) != DIGEST_SIZE:
        raise HashingError(path, f"unexpected digest length {len(digest)}")

    logger.debug("Hashed %s (%d bytes)", path, total)
    return FileDigest(digest=bytes(digest), bytes_read=total)


def _stream(f: Any, path: str | Path, digest_factory: Callable[[], Any]) -> tuple[bytes, int]:
    try:
        ctx = digest_factory()
    except Exception as exc:
        logger.debug("Cannot initialize %s context: %s", ALGORITHM, exc)
        raise HashingError(path, f"init failed: {exc}") from exc

    buf = memoryview(bytearray(CHUNK_SIZE))
    total = 0
    while True:
        try:
            n = f.readinto(buf)
        except OSError as exc:
            logger.debug("Read failed for %s after %d bytes: %s", path, total, exc)
            raise FileIOError(path, str(exc)) from exc
        if not n:
            break
        try:
            ctx.update(buf[:n])
        except Exception as exc:
            logger.debug("Digest update failed for %s: %s", path, exc)
            raise HashingError(path, f"update failed: {exc}") from exc
        total += n

    try:
        digest = ctx.digest()
    except Exception as exc:
        logger.debug("Digest finalize failed for %s: %s", path, exc)
        raise HashingError(path, f"finalize failed: {exc}") from exc
    return digest, total
