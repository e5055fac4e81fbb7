from __future__ import annotations

import logging

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .config import GenerationConfig
from .random_source import RandomSource, default_source
from .settings import DEFAULT_LENGTH

logger = logging.getLogger(__name__)


def available_chars(config: GenerationConfig) -> str:
    """Return the pool of every enabled class, concatenated in canonical order."""
    return ''.join(char_class.characters for char_class in config.enabled_classes)


def pick_char(chars: str, rng: RandomSource) -> str:
    """Return one character drawn uniformly from chars."""
    return chars[rng.randbelow(len(chars))]


def guaranteed_chars(config: GenerationConfig, rng: RandomSource) -> List[str]:
    """Draw one character from each enabled class, in canonical order."""
    return [pick_char(char_class.characters, rng) for char_class in config.enabled_classes]


def fill_chars(pool: str, count: int, rng: RandomSource) -> List[str]:
    """Draw count characters from pool, with replacement."""
    return [pick_char(pool, rng) for _ in range(count)]


def shuffle(chars: Sequence[str], rng: RandomSource) -> List[str]:
    """
    Return a uniformly shuffled copy of chars.

    Fisher-Yates: position i swaps with a random index in [0, i].
    """
    shuffled = list(chars)

    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randbelow(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]

    return shuffled


def generate(config: GenerationConfig, rng: Optional[RandomSource] = None) -> str:
    """
    Return a random password built from config.

    Every enabled class contributes at least one character; the rest
    is filled from the combined pool and the result is shuffled.

    Args:
        config: Requested length and character classes.
        rng: Random source; defaults to the system CSPRNG.

    Raises:
        InvalidConfiguration: If config cannot produce a password.
    """
    config.validate()

    if rng is None:
        rng = default_source()

    logger.debug(
        'Generating password: length=%d classes=%s',
        config.length,
        [char_class.name for char_class in config.enabled_classes],
    )

    pool = available_chars(config)
    guaranteed = guaranteed_chars(config, rng)
    remaining = config.length - len(guaranteed)
    filled = fill_chars(pool, remaining, rng)

    return ''.join(shuffle(guaranteed + filled, rng))


@dataclass
class PasswordGenerator:
    """Generate random passwords based on configurable rules."""

    length: int = DEFAULT_LENGTH
    use_lower: bool = True
    use_upper: bool = True
    use_digits: bool = True
    use_special: bool = True
    rng: Optional[RandomSource] = field(default=None, repr=False)

    def to_config(self) -> GenerationConfig:
        """Snapshot the current rules as an immutable GenerationConfig."""
        return GenerationConfig(
            length=self.length,
            include_lowercase=self.use_lower,
            include_uppercase=self.use_upper,
            include_numbers=self.use_digits,
            include_symbols=self.use_special,
        )

    def generate_password(self) -> str:
        """
        Return a randomly generated password.

        Raises:
            InvalidConfiguration: If no character sets are enabled or the
                length is too short for the enabled sets.
        """
        return generate(self.to_config(), self.rng)
