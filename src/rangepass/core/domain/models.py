"""
Core Domain Models

This module defines the data models used throughout password generation:
- CharacterRange: one literal or inclusive range parsed from a spec
- CharacterRangeSpec: the ordered items of a parsed spec string
- AllowedSet: the resolved include-minus-exclude membership predicate
- GeneratedPassword: the final output together with generation metadata

Character codes live in the byte domain (0-255): each entropy byte maps to
the character with the same code point.
"""

from dataclasses import dataclass, field

BYTE_DOMAIN = range(256)


@dataclass(frozen=True)
class CharacterRange:
    """
    Inclusive range of character codes.

    A literal character is a range whose bounds are equal.

    Attributes:
        start: Lower bound character
        end: Upper bound character (inclusive)
    """

    start: str
    end: str

    @property
    def is_literal(self) -> bool:
        return self.start == self.end

    def codes(self) -> range:
        return range(ord(self.start), ord(self.end) + 1)

    def __str__(self) -> str:
        if self.is_literal:
            return self.start
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class CharacterRangeSpec:
    """
    Parsed character-range specification.

    Attributes:
        source: The original specification string
        items: Literals and ranges in the order they appeared
    """

    source: str
    items: tuple[CharacterRange, ...] = ()

    def codes(self) -> frozenset[int]:
        """Union of all character codes matched by the spec."""
        matched: set[int] = set()
        for item in self.items:
            matched.update(item.codes())
        return frozenset(matched)


@dataclass(frozen=True)
class AllowedSet:
    """
    Resolved set of character codes eligible for output.

    Computed once per generation call and immutable afterwards. Instances are
    callable so they can be injected anywhere a membership predicate is
    expected.

    Attributes:
        codes: Character codes that may appear in the password
    """

    codes: frozenset[int]

    def __call__(self, code: int) -> bool:
        return code in self.codes

    def __contains__(self, code: object) -> bool:
        if isinstance(code, str):
            return len(code) == 1 and ord(code) in self.codes
        return code in self.codes

    def __len__(self) -> int:
        return len(self.codes)

    @property
    def is_empty(self) -> bool:
        return not self.codes

    def characters(self) -> str:
        """Eligible characters in code-point order."""
        return "".join(chr(code) for code in sorted(self.codes))


@dataclass
class GeneratedPassword:
    """
    Result of a single password generation.

    Attributes:
        value: The password itself
        source: Name of the entropy source that supplied the bytes
        secure: False when a non-cryptographic source was used
        alphabet_size: Number of characters in the allowed set
        rounds: Number of entropy chunks drawn
        bytes_drawn: Total raw bytes read from the entropy source
    """

    value: str = field(repr=False)
    source: str
    secure: bool
    alphabet_size: int
    rounds: int = 0
    bytes_drawn: int = 0

    @property
    def length(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.value
