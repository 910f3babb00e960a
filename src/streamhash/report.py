"""Render hash outcomes as output lines."""

from __future__ import annotations

from typing import Iterable, TextIO

from .digest import HashFailure, HashResult


def format_result(result: HashResult) -> str:
    """Render one outcome as a digest line or an error line."""
    if isinstance(result, HashFailure):
        return f"Error: {result.message}"
    return f"{result.hexdigest}\t{result.label}"


def write_report(results: Iterable[HashResult], out: TextIO) -> None:
    """Write one line per outcome to ``out``, in order."""
    for result in results:
        out.write(format_result(result) + "\n")


__all__ = ["format_result", "write_report"]
