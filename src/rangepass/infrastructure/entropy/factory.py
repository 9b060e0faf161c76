"""
Entropy Source Selection

Chooses the entropy source for a generation call from an explicit strategy
name. Nothing here is global: callers pass the strategy in (usually from
GeneratorSettings) and own the returned source.

Strategies:
- "strong": OS entropy device only, fails if it is unavailable
- "weak": pseudo-random generator, always flagged insecure
- "auto": OS entropy device, falling back to the pseudo-random generator
"""

from pathlib import Path
from typing import Optional, Union

import structlog

from rangepass.core.domain.errors import EntropyUnavailableError
from rangepass.core.interfaces.entropy import EntropySource
from rangepass.infrastructure.entropy.strong import DEFAULT_DEVICE, DeviceEntropySource
from rangepass.infrastructure.entropy.weak import PseudoRandomEntropySource

logger = structlog.get_logger()

STRATEGIES = ("auto", "strong", "weak")


def open_entropy_source(
    strategy: str = "auto",
    device: Union[str, Path] = DEFAULT_DEVICE,
    allow_weak_fallback: bool = True,
    seed: Optional[int] = None,
) -> EntropySource:
    """
    Open an entropy source for the given strategy.

    Args:
        strategy: One of "auto", "strong", "weak"
        device: Path of the OS entropy device
        allow_weak_fallback: Whether "auto" may fall back to the weak source
        seed: Optional seed for the weak source

    Returns:
        An open EntropySource; the caller is responsible for closing it

    Raises:
        EntropyUnavailableError: If a strong source is required but unavailable
        ValueError: If the strategy is unknown
    """
    if strategy == "weak":
        return PseudoRandomEntropySource(seed=seed)

    if strategy == "strong":
        return DeviceEntropySource(device)

    if strategy == "auto":
        try:
            return DeviceEntropySource(device)
        except EntropyUnavailableError as e:
            if not allow_weak_fallback:
                raise
            logger.warning(
                "entropy.fallback",
                device=str(device),
                reason=str(e),
                fallback="prng",
            )
            return PseudoRandomEntropySource(seed=seed)

    raise ValueError(f"Unknown entropy strategy: {strategy} (expected one of {', '.join(STRATEGIES)})")
