from __future__ import annotations

import logging

from dataclasses import dataclass
from typing import Tuple

from .charsets import CANONICAL_ORDER, CharacterClass
from .exceptions import InvalidConfiguration
from .settings import DEFAULT_LENGTH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationConfig:
    """
    Immutable description of the password to generate.

    Building a config never raises; call validate() (or hand it to
    generate(), which does) to reject unusable combinations.
    """

    length: int = DEFAULT_LENGTH
    include_lowercase: bool = True
    include_uppercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True

    @property
    def enabled_classes(self) -> Tuple[CharacterClass, ...]:
        """Enabled character classes, in canonical order."""
        flags = (
            self.include_lowercase,
            self.include_uppercase,
            self.include_numbers,
            self.include_symbols,
        )
        return tuple(
            char_class for char_class, enabled in zip(CANONICAL_ORDER, flags) if enabled
        )

    def validate(self) -> None:
        """
        Check that a password can be generated from this config.

        Raises:
            InvalidConfiguration: If no class is enabled, the length is
                below 1, or the length cannot fit one character per
                enabled class.
        """
        enabled = self.enabled_classes

        if not enabled:
            msg = 'At least one character class must be enabled.'
            logger.info('Rejected config %r: no class enabled', self)
            raise InvalidConfiguration(msg)

        if self.length < 1:
            msg = f'Password length must be at least 1, got {self.length}.'
            logger.info('Rejected config %r: length below 1', self)
            raise InvalidConfiguration(msg)

        if self.length < len(enabled):
            msg = (
                f'Password length {self.length} is too short to include '
                f'{len(enabled)} character classes.'
            )
            logger.info('Rejected config %r: length below class count', self)
            raise InvalidConfiguration(msg)
