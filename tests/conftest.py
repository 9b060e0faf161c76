"""Shared fixtures for the rangepass test suite."""

from typing import Iterable

import pytest
import structlog

from rangepass.core.domain.errors import EntropyUnavailableError
from rangepass.core.interfaces.entropy import EntropySource


class ScriptedEntropySource(EntropySource):
    """Replays fixed chunks so the sampling loop can be checked byte by byte."""

    def __init__(self, chunks: Iterable[bytes], secure: bool = True):
        self.chunks = list(chunks)
        self.requests: list[int] = []
        self.closed = False
        self._secure = secure

    @property
    def name(self) -> str:
        return "scripted"

    @property
    def is_secure(self) -> bool:
        return self._secure

    def next_chunk(self, n: int) -> bytes:
        self.requests.append(n)
        if not self.chunks:
            raise EntropyUnavailableError("scripted source exhausted")
        return self.chunks.pop(0)[:n]

    def close(self) -> None:
        self.closed = True


class CyclingEntropySource(EntropySource):
    """Yields 0, 1, ..., 255, 0, 1, ... forever."""

    def __init__(self, start: int = 0):
        self.position = start
        self.requests = 0

    @property
    def name(self) -> str:
        return "cycling"

    @property
    def is_secure(self) -> bool:
        return True

    def next_chunk(self, n: int) -> bytes:
        self.requests += 1
        data = bytes((self.position + i) % 256 for i in range(n))
        self.position = (self.position + n) % 256
        return data


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test (e.g. the CLI) applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def cycling_source() -> CyclingEntropySource:
    return CyclingEntropySource()


@pytest.fixture
def scripted_source_factory():
    def make(chunks: Iterable[bytes], secure: bool = True) -> ScriptedEntropySource:
        return ScriptedEntropySource(chunks, secure=secure)

    return make


@pytest.fixture
def missing_device(tmp_path) -> str:
    return str(tmp_path / "no-such-random-device")

