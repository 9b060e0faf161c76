"""
Domain Errors

Error taxonomy for password generation. Every failure is raised synchronously
to the caller; nothing in the core swallows or retries an error.

- InvalidSpecError: malformed character-range syntax in an include/exclude spec
- EmptyAllowedSetError: include minus exclude leaves no eligible character
- EntropyUnavailableError: the entropy source cannot be opened or read

InsecureEntropyWarning is not an error: it is emitted through the warnings
module every time a non-cryptographic source supplies bytes.
"""

import warnings
from typing import Optional


class RangepassError(Exception):
    """Base class for all rangepass errors."""


class InvalidSpecError(RangepassError, ValueError):
    """
    Raised when a character-range specification cannot be compiled.

    Attributes:
        spec: The specification string that failed to compile
        position: Index of the offending character, if known
    """

    def __init__(self, message: str, spec: str = "", position: Optional[int] = None):
        self.spec = spec
        self.position = position
        if position is not None:
            message = f"{message} (at position {position} in {spec!r})"
        super().__init__(message)


class EmptyAllowedSetError(RangepassError, ValueError):
    """Raised when the resolved allowed set contains no characters."""

    def __init__(self, include: str, exclude: Optional[str] = None):
        self.include = include
        self.exclude = exclude
        message = f"No characters left to draw from: include={include!r}"
        if exclude:
            message += f", exclude={exclude!r}"
        super().__init__(message)


class EntropyUnavailableError(RangepassError, OSError):
    """Raised when an entropy source cannot be opened or read."""


class InsecureEntropyWarning(UserWarning):
    """Emitted whenever bytes come from a non-cryptographic generator."""


def always_show_insecure_warnings() -> None:
    """Show InsecureEntropyWarning on every occurrence, not once per call site.

    Appended, so filters installed by the application still take precedence.
    """
    warnings.filterwarnings("always", category=InsecureEntropyWarning, append=True)


always_show_insecure_warnings()
