"""
Application Layer - Password Generator Service

This module wires the core pieces together for CLI and library callers.

The PasswordGenerator:
- Expands presets and compiles include/exclude specs into an AllowedSet
- Rejects empty allowed sets before any entropy is consumed
- Opens the configured entropy source (or uses an injected one)
- Runs the FilterAccumulator and the PasswordAssembler
- Logs generation metadata, never the password itself
"""

from typing import Optional

import structlog

from rangepass.application.presets import expand_preset
from rangepass.config.settings import GeneratorSettings
from rangepass.core.domain.accumulator import DEFAULT_CHUNK_SIZE, FilterAccumulator
from rangepass.core.domain.assembler import PasswordAssembler
from rangepass.core.domain.models import AllowedSet, GeneratedPassword
from rangepass.core.domain.range_spec import resolve_allowed_set
from rangepass.core.interfaces.entropy import EntropySource
from rangepass.infrastructure.entropy.factory import open_entropy_source
from rangepass.infrastructure.entropy.strong import DEFAULT_DEVICE

logger = structlog.get_logger()


class PasswordGenerator:
    """Service layer orchestrating password generation.

    An injected entropy source is used as-is and left open; otherwise a
    source is opened from the settings for each call and closed afterwards.
    With expand_presets off, "@name" specs are compiled literally.
    """

    def __init__(
        self,
        settings: Optional[GeneratorSettings] = None,
        entropy_source: Optional[EntropySource] = None,
        expand_presets: bool = True,
    ):
        self.settings = settings or GeneratorSettings()
        self.entropy_source = entropy_source
        self.expand_presets = expand_presets
        self.assembler = PasswordAssembler()
        self.logger = logger.bind(component="password_generator")

    def generate(
        self,
        length: Optional[int] = None,
        include: Optional[str] = None,
        exclude: Optional[str] = None,
    ) -> GeneratedPassword:
        """Generate one password; omitted arguments fall back to settings."""
        return self.generate_many(1, length=length, include=include, exclude=exclude)[0]

    def generate_many(
        self,
        count: int,
        length: Optional[int] = None,
        include: Optional[str] = None,
        exclude: Optional[str] = None,
    ) -> list[GeneratedPassword]:
        """
        Generate ``count`` passwords sharing one allowed set and entropy source.

        Args:
            count: Number of passwords to generate
            length: Password length (default: settings.default_length)
            include: Include spec or "@preset" (default: settings.default_include)
            exclude: Exclude spec or "@preset" (default: settings.default_exclude)

        Returns:
            List of GeneratedPassword results

        Raises:
            ValueError: If count or length is negative
            InvalidSpecError: If a spec is malformed
            EmptyAllowedSetError: If include minus exclude is empty
            EntropyUnavailableError: If entropy cannot be obtained
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        length = self.settings.default_length if length is None else length
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        include = self.settings.default_include if include is None else include
        exclude = self.settings.default_exclude if exclude is None else exclude

        if self.expand_presets:
            include, exclude = expand_preset(include), expand_preset(exclude)
        allowed = resolve_allowed_set(include, exclude)

        self.logger.info(
            "password.generation.started",
            count=count,
            length=length,
            alphabet_size=len(allowed),
        )

        if count == 0:
            return []
        if length == 0:
            # Nothing to draw, so no source is opened
            return [
                GeneratedPassword(value="", source="none", secure=True, alphabet_size=len(allowed))
                for _ in range(count)
            ]

        if self.entropy_source is not None:
            return [self._generate_one(self.entropy_source, length, allowed) for _ in range(count)]

        with self._open_source() as source:
            return [self._generate_one(source, length, allowed) for _ in range(count)]

    def _open_source(self) -> EntropySource:
        return open_entropy_source(
            strategy=self.settings.entropy_strategy,
            device=self.settings.entropy_device,
            allow_weak_fallback=self.settings.allow_weak_fallback,
        )

    def _generate_one(self, source: EntropySource, length: int, allowed: AllowedSet) -> GeneratedPassword:
        accumulator = FilterAccumulator(source, chunk_size=self.settings.chunk_size)
        accumulation = accumulator.accumulate(length, allowed)
        value = self.assembler.assemble(accumulation.buffer, length)

        result = GeneratedPassword(
            value=value,
            source=source.name,
            secure=source.is_secure,
            alphabet_size=len(allowed),
            rounds=accumulation.rounds,
            bytes_drawn=accumulation.bytes_drawn,
        )
        self.logger.info(
            "password.generation.completed",
            length=result.length,
            source=result.source,
            secure=result.secure,
            rounds=result.rounds,
        )
        return result


def generate(
    length: int,
    include_spec: str,
    exclude_spec: Optional[str] = None,
    *,
    entropy_source: Optional[EntropySource] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> str:
    """
    Generate a password of exactly ``length`` characters.

    Every character is matched by ``include_spec`` and not by ``exclude_spec``;
    both are compiled literally, so "@hex" means the characters @, h, e and x.
    Environment variables and .env files do not affect this call.
    Without an explicit ``entropy_source`` the OS entropy device is used,
    falling back to a pseudo-random generator with an InsecureEntropyWarning.

    Example:
        >>> password = generate(32, "A-Za-z0-9")
        >>> len(password)
        32
    """
    # model_construct skips the RANGEPASS_* and .env lookup
    settings = GeneratorSettings.model_construct(
        chunk_size=chunk_size,
        entropy_strategy="auto",
        entropy_device=str(DEFAULT_DEVICE),
        allow_weak_fallback=True,
    )
    generator = PasswordGenerator(settings=settings, entropy_source=entropy_source, expand_presets=False)
    result = generator.generate(length=length, include=include_spec, exclude=exclude_spec or "")
    return result.value
