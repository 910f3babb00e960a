"""Turn command-line arguments into named byte sources."""

from __future__ import annotations

import errno
import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import BinaryIO, Iterator, List, Optional, Sequence

STDIN_LABEL = "-"


@dataclass(frozen=True)
class NamedSource:
    """A byte source plus the label it is reported under.

    ``path`` is ``None`` for standard input.
    """

    label: str
    path: Optional[str] = None

    @property
    def is_stdin(self) -> bool:
        return self.path is None


def resolve_sources(args: Sequence[str]) -> List[NamedSource]:
    """Map CLI arguments to sources, defaulting to standard input."""
    if not args:
        return [NamedSource(label=STDIN_LABEL)]
    # Labels are the literal arguments, never resolved paths.
    return [NamedSource(label=arg, path=arg) for arg in args]


@contextmanager
def open_source(
    source: NamedSource, stdin: Optional[BinaryIO] = None
) -> Iterator[BinaryIO]:
    """Yield a binary stream for ``source``.

    Files are closed on exit; ``stdin`` belongs to the caller and stays open.
    A missing ``stdin`` (closed descriptor) raises ``EBADF``.
    """
    if source.is_stdin:
        if stdin is None:
            raise OSError(errno.EBADF, os.strerror(errno.EBADF))
        yield stdin
        return
    with open(source.path, "rb") as handle:
        yield handle


__all__ = [
    "STDIN_LABEL",
    "NamedSource",
    "open_source",
    "resolve_sources",
]
