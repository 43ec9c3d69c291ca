"""Temporary files and directories, permission helpers and SHA1 checksums."""

from __future__ import annotations

import contextlib
import hashlib
import os
import shutil
import tempfile
import uuid
import weakref
from pathlib import Path
from typing import BinaryIO

_READ_BLOCK = 16384


def _fresh_temp_path() -> Path:
    return Path(tempfile.gettempdir()) / str(uuid.uuid4())


def _remove_file(path: Path) -> None:
    with contextlib.suppress(OSError):
        os.remove(path)


class TempDir:
    """A uniquely named directory in the system temp location, removed on cleanup."""

    def __init__(self) -> None:
        self.path = _fresh_temp_path()
        self.path.mkdir()
        self._finalizer = weakref.finalize(self, shutil.rmtree, self.path, True)

    def cleanup(self) -> None:
        """Remove the directory and everything below it."""
        self._finalizer()

    def __enter__(self) -> TempDir:
        return self

    def __exit__(self, *args) -> None:
        self.cleanup()


class TempFile:
    """A uniquely named file in the system temp location, removed on cleanup."""

    def __init__(self) -> None:
        self._adopt(_fresh_temp_path())
        self.open().close()

    def _adopt(self, path: Path) -> None:
        self.path = path
        self._finalizer = weakref.finalize(self, _remove_file, path)

    @classmethod
    def take(cls, path: str | os.PathLike) -> TempFile:
        """Move an existing file to a temp location and take ownership of it."""
        destination = _fresh_temp_path()
        shutil.move(os.fspath(path), destination)
        temp = cls.__new__(cls)
        temp._adopt(destination)
        return temp

    def open(self) -> BinaryIO:
        """Open the file for reading and writing, positioned at the start."""
        flags = os.O_RDWR | os.O_CREAT | getattr(os, "O_BINARY", 0)
        fd = os.open(self.path, flags, 0o666)
        return os.fdopen(fd, "r+b")

    def size(self) -> int:
        """Return the size of the file in bytes."""
        with self.open() as f:
            return f.seek(0, os.SEEK_END)

    def cleanup(self) -> None:
        """Delete the file."""
        self._finalizer()

    def __enter__(self) -> TempFile:
        return self

    def __exit__(self, *args) -> None:
        self.cleanup()


def is_writable(path: str | os.PathLike) -> bool:
    """Return True if the existing file at ``path`` can be opened for writing."""
    try:
        fd = os.open(path, os.O_WRONLY)
    except OSError:
        return False
    os.close(fd)
    return True


def set_executable_mode(path: str | os.PathLike) -> None:
    """Set the mode of ``path`` to 755; does nothing on Windows."""
    if os.name != "nt":
        os.chmod(path, 0o755)


def get_sha1_checksum(stream: bytes | bytearray | memoryview | BinaryIO) -> str:
    """Return the hex SHA1 digest of a bytes object or a binary stream."""
    sha = hashlib.sha1()
    if isinstance(stream, (bytes, bytearray, memoryview)):
        sha.update(stream)
    else:
        for block in iter(lambda: stream.read(_READ_BLOCK), b""):
            sha.update(block)
    return sha.hexdigest()


def get_sha1_checksums(data: bytes, chunk_size: int) -> tuple[str, list[str]]:
    """Return the SHA1 of ``data`` and of each ``chunk_size`` chunk of it.

    ``chunk_size`` must be a power of two.
    """
    if chunk_size <= 0 or chunk_size & (chunk_size - 1):
        raise ValueError("Chunk size must be a power of two")

    view = memoryview(data)
    total = hashlib.sha1()
    chunks = []
    for start in range(0, len(view), chunk_size):
        chunk = view[start : start + chunk_size]
        total.update(chunk)
        chunks.append(hashlib.sha1(chunk).hexdigest())
    return total.hexdigest(), chunks