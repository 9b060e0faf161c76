"""
Named character-range presets.

A spec starting with "@" names a preset, e.g. "@alnum". Anything else is
returned unchanged and compiled as a literal range spec.
"""

from typing import Optional

from rangepass.core.domain.errors import InvalidSpecError

PRESET_PREFIX = "@"

PRESETS: dict[str, str] = {
    "alnum": "A-Za-z0-9",
    "alpha": "A-Za-z",
    "digits": "0-9",
    "hex": "0-9a-f",
    "lower": "a-z",
    "upper": "A-Z",
    "printable": "!-~",
    "punct": "!-/:-@[-`{-~",
}


def expand_preset(spec: Optional[str]) -> Optional[str]:
    """Replace a preset reference with its range spec."""
    if not spec or spec == PRESET_PREFIX or not spec.startswith(PRESET_PREFIX):
        return spec

    name = spec[len(PRESET_PREFIX):]
    try:
        return PRESETS[name]
    except KeyError:
        raise InvalidSpecError(
            f"Unknown preset '{name}' (available: {', '.join(sorted(PRESETS))})",
            spec=spec,
        ) from None
