"""
Summary: Streaming BLAKE2b content hashing for single files.
Why: Identify files by content alone while keeping memory bounded per worker.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

from copy_confirmer.config.settings import DIGEST_SIZE, HASH_CHUNK_SIZE

from ..domain.errors import ReadError
from ..domain.models import ContentDigest


def hash_file(path: Path, *, chunk_size: int | None = None) -> ContentDigest:
    """Return the BLAKE2b digest of the bytes stored at ``path``.

    Args:
        path: File to hash.
        chunk_size: Bytes read per iteration; defaults to ``HASH_CHUNK_SIZE``.

    Raises:
        ReadError: If the file cannot be opened or read.
    """

    block_size = chunk_size or HASH_CHUNK_SIZE
    hasher = hashlib.blake2b(digest_size=DIGEST_SIZE)
    try:
        with open(path, "rb") as handle:
            for byte_block in iter(lambda: handle.read(block_size), b""):
                hasher.update(byte_block)
    except OSError as exc:
        raise ReadError(path, exc) from exc
    return hasher.digest()


__all__ = ["hash_file"]
