from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Tuple


@dataclass(frozen=True)
class CharacterClass:
    """A named, ordered set of characters a password may draw from."""

    name: str
    characters: str

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and len(char) == 1 and char in self.characters

    def __len__(self) -> int:
        return len(self.characters)


LOWERCASE: Final[CharacterClass] = CharacterClass('lowercase', 'abcdefghijklmnopqrstuvwxyz')
UPPERCASE: Final[CharacterClass] = CharacterClass('uppercase', 'ABCDEFGHIJKLMNOPQRSTUVWXYZ')
NUMBERS: Final[CharacterClass] = CharacterClass('numbers', '0123456789')
SYMBOLS: Final[CharacterClass] = CharacterClass('symbols', '!@#$%^&*()_+-=[]{}|;:,.<>?')

# Order in which classes are pooled and guaranteed.
CANONICAL_ORDER: Final[Tuple[CharacterClass, ...]] = (
    LOWERCASE,
    UPPERCASE,
    NUMBERS,
    SYMBOLS,
)
