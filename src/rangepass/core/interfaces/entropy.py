"""
Entropy Source Interface

Abstract base class for suppliers of raw random bytes. The accumulator only
depends on this contract, so strong and weak sources (and test fakes) are
interchangeable.
"""

from abc import ABC, abstractmethod


class EntropySource(ABC):
    """Base class for all entropy sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier reported on generated passwords."""

    @property
    @abstractmethod
    def is_secure(self) -> bool:
        """True when the bytes are suitable for secrets."""

    @abstractmethod
    def next_chunk(self, n: int) -> bytes:
        """
        Return exactly n raw random bytes.

        Raises:
            EntropyUnavailableError: If the bytes cannot be produced
        """

    def close(self) -> None:
        """Release any underlying resources."""

    def __enter__(self) -> "EntropySource":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
