"""Fallback entropy source built on the non-cryptographic ``random`` module."""

import random
import warnings
from typing import Optional

import structlog

from rangepass.core.domain.errors import InsecureEntropyWarning
from rangepass.core.interfaces.entropy import EntropySource

INSECURE_MESSAGE = (
    "Password bytes are coming from a pseudo-random generator; "
    "the result is not suitable as a secret"
)


class PseudoRandomEntropySource(EntropySource):
    """
    Mersenne Twister byte supplier for systems without an entropy device.

    Every chunk emits an InsecureEntropyWarning and a structured log event,
    so the weakness is visible to the caller each time the source is used.
    A seed makes the output reproducible, which is only useful in tests.
    """

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self.logger = structlog.get_logger().bind(component="prng_entropy")

    @property
    def name(self) -> str:
        return "prng"

    @property
    def is_secure(self) -> bool:
        return False

    def next_chunk(self, n: int) -> bytes:
        warnings.warn(INSECURE_MESSAGE, InsecureEntropyWarning, stacklevel=2)
        self.logger.warning("entropy.insecure_chunk", requested=n)
        return self._rng.randbytes(n)
