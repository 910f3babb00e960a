"""Streaming SHA-256 helpers."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import BinaryIO

DEFAULT_CHUNK_SIZE = 1024


def sha256_hash_stream(
    stream: BinaryIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> bytes:
    """Compute SHA-256 of a binary stream in a streaming way.

    Reads until an empty read signals end-of-stream. Any ``OSError`` raised by
    ``stream.read`` propagates before the digest is finalized.
    """
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
        raise TypeError(f"chunk_size must be an int, got {type(chunk_size).__name__}")
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")

    h = hashlib.sha256()
    for chunk in iter(lambda: stream.read(chunk_size), b""):
        h.update(chunk)
    return h.digest()


def sha256_hash_file(
    path: str | Path,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """Compute SHA-256 of a file and return it as lowercase hex."""
    with open(path, "rb") as f:
        return sha256_hash_stream(f, chunk_size).hex()


__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "sha256_hash_file",
    "sha256_hash_stream",
]
