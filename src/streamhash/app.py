"""Minimal CLI entrypoint (package namespace)."""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from streamhash.digest import HashFailure, hash_sources
from streamhash.report import write_report
from streamhash.sources import resolve_sources
from streamhash.utils.hashing import DEFAULT_CHUNK_SIZE


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="streamhash",
        description="Print SHA-256 digests of files, or of standard input",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Files to hash (default: read standard input, labelled '-')",
    )
    parser.add_argument(
        "--chunk-size",
        type=_positive_int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Bytes per read (default: {DEFAULT_CHUNK_SIZE})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log per-file progress to stderr",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    files: List[str] = args.files
    results = hash_sources(
        resolve_sources(files),
        stdin=None if files else getattr(sys.stdin, "buffer", None),
        chunk_size=args.chunk_size,
    )
    write_report(results, sys.stdout)
    sys.stdout.flush()

    if any(isinstance(result, HashFailure) for result in results):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
