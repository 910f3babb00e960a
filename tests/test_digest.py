import hashlib
import io
import logging

import pytest

from streamhash.digest import (
    DigestResult,
    HashFailure,
    compute_digest,
    hash_source,
    hash_sources,
)
from streamhash.sources import NamedSource, resolve_sources


class FailsMidStream(io.RawIOBase):
    def __init__(self):
        self.reads = 0

    def readable(self):
        return True

    def read(self, size=-1):
        self.reads += 1
        if self.reads == 1:
            return b"partial"
        raise OSError(5, "Input/output error")


def test_compute_digest_pairs_label():
    result = compute_digest(io.BytesIO(b"abc"), "some label")
    assert result.label == "some label"
    assert result.hexdigest == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_digest_result_is_immutable():
    result = compute_digest(io.BytesIO(b""), "-")
    with pytest.raises(AttributeError):
        result.label = "other"


def test_hash_source_reads_stdin():
    result = hash_source(NamedSource(label="-"), io.BytesIO(b"Hello, World"))
    assert isinstance(result, DigestResult)
    assert result.label == "-"
    assert result.digest == hashlib.sha256(b"Hello, World").digest()


def test_hash_source_missing_file(tmp_path, caplog):
    missing = str(tmp_path / "nope.txt")
    with caplog.at_level(logging.DEBUG, logger="streamhash.digest"):
        result = hash_source(NamedSource(label=missing, path=missing))
    assert isinstance(result, HashFailure)
    assert isinstance(result.error, FileNotFoundError)
    assert result.label == missing
    assert "No such file or directory" in result.message
    assert missing in caplog.text


def test_hash_source_read_error_mid_stream():
    stream = FailsMidStream()
    result = hash_source(NamedSource(label="-"), stream, chunk_size=4)
    assert isinstance(result, HashFailure)
    assert result.error.errno == 5
    # No further reads after the failure.
    assert stream.reads == 2


def test_hash_sources_continues_after_failure(tmp_path):
    good = tmp_path / "good.txt"
    good.write_bytes(b"hello world")
    other = tmp_path / "other.txt"
    other.write_bytes(b"")
    missing = tmp_path / "missing.txt"

    results = hash_sources(resolve_sources([str(good), str(missing), str(other)]))

    assert [r.label for r in results] == [str(good), str(missing), str(other)]
    assert isinstance(results[0], DigestResult)
    assert isinstance(results[1], HashFailure)
    assert isinstance(results[2], DigestResult)
    assert results[2].hexdigest == hashlib.sha256(b"").hexdigest()


def test_hash_sources_directory_is_io_failure(tmp_path):
    (result,) = hash_sources(resolve_sources([str(tmp_path)]))
    assert isinstance(result, HashFailure)


def test_chunk_size_independent_across_sources(tmp_path):
    p = tmp_path / "blob.bin"
    p.write_bytes(bytes(range(256)) * 17)
    source = NamedSource(label="blob.bin", path=str(p))

    one = hash_source(source, chunk_size=1)
    big = hash_source(source, chunk_size=1 << 16)
    assert one == big
