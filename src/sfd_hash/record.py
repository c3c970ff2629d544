"""Deterministic one-line JSON digest records."""

from __future__ import annotations

import json
import re

from sfd_hash.hasher import ALGORITHM, DIGEST_SIZE, FileDigest

_HEX_RE = re.compile(rf"^[0-9a-f]{{{DIGEST_SIZE * 2}}}$")


def format_record(result: FileDigest) -> str:
    """Return the record line for a digest, without the trailing newline.

    Field order is fixed: algorithm, hash, bytes. No whitespace.
    """
    record = {
        "algorithm": ALGORITHM,
        "hash": result.hexdigest,
        "bytes": result.bytes_read,
    }
    return json.dumps(record, separators=(",", ":"))


def parse_record(text: str) -> FileDigest:
    """Parse and validate a record line produced by format_record.

    The hash is trimmed and lower-cased before validation. A missing `bytes`
    field is rejected rather than read as 0: format_record always writes it.
    Raises ValueError if the text is not a valid sha256 record.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Record is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("Record must be a JSON object")

    algorithm = str(data.get("algorithm", "")).strip()
    if algorithm != ALGORITHM:
        raise ValueError(f"Unexpected algorithm: {algorithm!r}")

    hex_hash = str(data.get("hash", "")).strip().lower()
    if len(hex_hash) != DIGEST_SIZE * 2:
        raise ValueError(f"Unexpected hash length: {len(hex_hash)}")
    if not _HEX_RE.match(hex_hash):
        raise ValueError("Hash is not valid hex")

    nbytes = data.get("bytes")
    # bool is an int subclass
    if isinstance(nbytes, bool) or not isinstance(nbytes, int) or nbytes < 0:
        raise ValueError(f"Invalid byte count: {nbytes!r}")

    return FileDigest(digest=bytes.fromhex(hex_hash), bytes_read=nbytes)
