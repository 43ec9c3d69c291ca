import io
import os
import stat

import pytest

from relkit.fs import (
    TempDir,
    TempFile,
    get_sha1_checksum,
    get_sha1_checksums,
    is_writable,
    set_executable_mode,
)


def test_tempdir_created_and_removed():
    td = TempDir()
    assert td.path.is_dir()
    td.cleanup()
    assert not td.path.exists()


def test_tempdir_context_manager_removes_contents():
    with TempDir() as td:
        (td.path / "inner.txt").write_text("x")
        path = td.path
        assert (path / "inner.txt").is_file()
    assert not path.exists()


def test_tempdirs_are_distinct():
    with TempDir() as a, TempDir() as b:
        assert a.path != b.path


def test_tempfile_created_empty():
    with TempFile() as tf:
        assert tf.path.is_file()
        assert tf.size() == 0


def test_tempfile_write_and_read():
    with TempFile() as tf:
        with tf.open() as f:
            f.write(b"hello")
        assert tf.size() == 5
        with tf.open() as f:
            assert f.read() == b"hello"


def test_tempfile_cleanup_removes_file():
    tf = TempFile()
    path = tf.path
    tf.cleanup()
    assert not path.exists()


def test_tempfile_take_moves_file(tmp_path):
    source = tmp_path / "data.bin"
    source.write_bytes(b"abcdef")
    tf = TempFile.take(source)
    try:
        assert not source.exists()
        assert tf.path.read_bytes() == b"abcdef"
        assert tf.size() == 6
    finally:
        tf.cleanup()
    assert not tf.path.exists()


def test_take_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        TempFile.take(tmp_path / "missing")


def test_is_writable(tmp_path):
    existing = tmp_path / "file.txt"
    existing.write_text("x")
    assert is_writable(existing) is True
    assert is_writable(tmp_path / "missing.txt") is False
    assert existing.read_text() == "x"


def test_set_executable_mode(tmp_path):
    target = tmp_path / "script.sh"
    target.write_text("#!/bin/sh\n")
    os.chmod(target, 0o600)
    before = stat.S_IMODE(os.stat(target).st_mode)
    set_executable_mode(target)
    after = stat.S_IMODE(os.stat(target).st_mode)
    assert after == (0o755 if os.name != "nt" else before)


def test_sha1_of_abc():
    assert get_sha1_checksum(b"abc") == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_sha1_stream_matches_bytes():
    data = bytes(range(256)) * 200
    assert get_sha1_checksum(io.BytesIO(data)) == get_sha1_checksum(data)


def test_checksums_total_matches_single():
    data = bytes(range(256)) * 10
    total, chunks = get_sha1_checksums(data, 512)
    assert total == get_sha1_checksum(data)
    assert len(chunks) == 5
    assert chunks[0] == get_sha1_checksum(data[:512])
    assert chunks[-1] == get_sha1_checksum(data[2048:])


def test_checksums_partial_last_chunk():
    data = b"x" * 10
    total, chunks = get_sha1_checksums(data, 4)
    assert len(chunks) == 3
    assert chunks[2] == get_sha1_checksum(b"xx")
    assert total == get_sha1_checksum(data)


def test_checksums_empty_data():
    total, chunks = get_sha1_checksums(b"", 8)
    assert chunks == []
    assert total == get_sha1_checksum(b"")


@pytest.mark.parametrize("size", [0, 3, 6, 100])
def test_checksums_reject_non_power_of_two(size):
    with pytest.raises(ValueError, match="Chunk size must be a power of two"):
        get_sha1_checksums(b"data", size)