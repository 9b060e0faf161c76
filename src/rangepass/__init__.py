"""rangepass - random passwords from character-range specifications."""

from rangepass.application.generator import PasswordGenerator, generate
from rangepass.core.domain.errors import (
    EmptyAllowedSetError,
    EntropyUnavailableError,
    InsecureEntropyWarning,
    InvalidSpecError,
    RangepassError,
)
from rangepass.core.domain.models import GeneratedPassword

__version__ = "0.1.0"

__all__ = [
    "EmptyAllowedSetError",
    "EntropyUnavailableError",
    "GeneratedPassword",
    "InsecureEntropyWarning",
    "InvalidSpecError",
    "PasswordGenerator",
    "RangepassError",
    "generate",
]
