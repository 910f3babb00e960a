"""Per-source digest computation with independent failure capture."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, Iterable, List, Optional, Union

from .sources import NamedSource, open_source
from .utils.hashing import DEFAULT_CHUNK_SIZE, sha256_hash_stream

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DigestResult:
    """Digest of one fully read source, paired with its label."""

    label: str
    digest: bytes

    @property
    def hexdigest(self) -> str:
        return self.digest.hex()


@dataclass(frozen=True)
class HashFailure:
    """An I/O error captured while opening or reading one source."""

    label: str
    error: OSError

    @property
    def message(self) -> str:
        return str(self.error)


HashResult = Union[DigestResult, HashFailure]


def compute_digest(
    stream: BinaryIO,
    label: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> DigestResult:
    """Hash ``stream`` to exhaustion and pair the digest with ``label``."""
    return DigestResult(label=label, digest=sha256_hash_stream(stream, chunk_size))


def hash_source(
    source: NamedSource,
    stdin: Optional[BinaryIO] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> HashResult:
    """Hash one source, returning a ``HashFailure`` instead of raising OSError."""
    logger.debug("hashing %s", source.label)
    try:
        with open_source(source, stdin) as stream:
            result = compute_digest(stream, source.label, chunk_size)
    except OSError as exc:
        logger.debug("failed to hash %s: %s", source.label, exc)
        return HashFailure(label=source.label, error=exc)
    logger.debug("hashed %s -> %s", source.label, result.hexdigest)
    return result


def hash_sources(
    sources: Iterable[NamedSource],
    stdin: Optional[BinaryIO] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> List[HashResult]:
    """Hash each source in order; one failure does not stop the rest."""
    return [hash_source(source, stdin, chunk_size) for source in sources]


__all__ = [
    "DigestResult",
    "HashFailure",
    "HashResult",
    "compute_digest",
    "hash_source",
    "hash_sources",
]
