"""
Filter Accumulator

Rejection-sampling loop that turns raw entropy into accepted character codes.

Each round draws one fixed-size chunk from the entropy source, appends it to
the working buffer and filters the new region in place, keeping only bytes
accepted by the membership predicate. The loop stops as soon as the buffer
holds at least the requested number of bytes.

Since every source byte is uniform over 0-255 and rejection keeps the
conditional distribution, accepted bytes are uniform over the allowed set.
The expected number of rounds grows as the allowed set shrinks; an empty
allowed set would never terminate and is rejected before any entropy is read.
"""

from dataclasses import dataclass
from typing import Callable

import structlog

from rangepass.core.domain.errors import EmptyAllowedSetError
from rangepass.core.domain.models import BYTE_DOMAIN
from rangepass.core.interfaces.entropy import EntropySource

DEFAULT_CHUNK_SIZE = 100

logger = structlog.get_logger()


@dataclass
class Accumulation:
    """
    Outcome of one accumulation run.

    Attributes:
        buffer: Accepted bytes, at least as many as requested
        rounds: Number of chunks drawn from the entropy source
        bytes_drawn: Raw bytes read in total
    """

    buffer: bytes
    rounds: int = 0
    bytes_drawn: int = 0


class FilterAccumulator:
    """Drives the draw-filter-append loop against an injected entropy source."""

    def __init__(self, source: EntropySource, chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.source = source
        self.chunk_size = chunk_size
        self.logger = logger.bind(component="filter_accumulator", source=source.name)

    def accumulate(self, length: int, allowed: Callable[[int], bool]) -> Accumulation:
        """
        Collect at least ``length`` accepted bytes.

        Args:
            length: Number of accepted bytes required
            allowed: Membership predicate over byte values

        Returns:
            Accumulation with the buffer and draw statistics

        Raises:
            ValueError: If length is negative
            EmptyAllowedSetError: If the predicate accepts no byte value
            EntropyUnavailableError: If the source fails to supply a chunk
        """
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        if length == 0:
            return Accumulation(buffer=b"")
        if not any(allowed(code) for code in BYTE_DOMAIN):
            raise EmptyAllowedSetError(include="<predicate>")

        buffer = bytearray()
        rounds = 0
        while len(buffer) < length:
            chunk = self.source.next_chunk(self.chunk_size)
            rounds += 1
            boundary = len(buffer)
            buffer += chunk
            buffer[boundary:] = bytes(code for code in buffer[boundary:] if allowed(code))

        self.logger.debug(
            "accumulation.completed",
            requested=length,
            accepted=len(buffer),
            rounds=rounds,
            bytes_drawn=rounds * self.chunk_size,
        )
        return Accumulation(buffer=bytes(buffer), rounds=rounds, bytes_drawn=rounds * self.chunk_size)

    def generate(self, length: int, allowed: Callable[[int], bool]) -> bytes:
        """Return at least ``length`` accepted bytes."""
        return self.accumulate(length, allowed).buffer
