"""Shared test fixtures for the btoa_converter test suite.

WHY: Several test modules need the same sample payloads and fake streams
that fail on demand. Centralizing them keeps the failure-injection logic
in one place.

HOW: Plain helper classes for failing streams, plus pytest fixtures for
sample payloads and files written to tmp_path.

RULES:
- Sample files live under tmp_path; nothing is written to the repo
- FailingReader / FailingWriter raise OSError, like a real I/O fault
"""

import io
from typing import List

import pytest

# Nine bytes: one full line of eight plus one leftover.
NINE_BYTES = bytes([0x00, 0x01, 0x0A, 0x10, 0x7F, 0x80, 0xAB, 0xFF, 0x42])


class FailingReader:
    """Binary source that yields ``data`` then raises OSError on the next read."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self.reads = 0

    def read(self, size: int) -> bytes:
        self.reads += 1
        if self._data:
            chunk, self._data = self._data[:size], self._data[size:]
            return chunk
        raise OSError(5, "Input/output error")


class FailingWriter(io.StringIO):
    """Text sink that accepts ``allowed_writes`` writes and then raises OSError."""

    def __init__(self, allowed_writes: int) -> None:
        super().__init__()
        self.allowed_writes = allowed_writes
        self.writes: List[str] = []

    def write(self, s: str) -> int:
        if len(self.writes) >= self.allowed_writes:
            raise OSError(28, "No space left on device")
        self.writes.append(s)
        return super().write(s)


@pytest.fixture
def nine_bytes():
    return NINE_BYTES


@pytest.fixture
def sample_file(tmp_path):
    """A 9-byte file named like the documented example."""
    path = tmp_path / "login-screen.bmp"
    path.write_bytes(NINE_BYTES)
    return path


@pytest.fixture
def empty_file(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    return path


@pytest.fixture
def failing_reader():
    """The FailingReader class, for tests that build their own sources."""
    return FailingReader


@pytest.fixture
def failing_writer():
    return FailingWriter
