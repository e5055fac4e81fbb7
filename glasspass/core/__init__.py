from .charsets import CANONICAL_ORDER, LOWERCASE, NUMBERS, SYMBOLS, UPPERCASE, CharacterClass
from .config import GenerationConfig
from .exceptions import GlassPassError, InvalidConfiguration
from .password_generator import PasswordGenerator, generate
from .random_source import RandomSource, SeededRandomSource, SystemRandomSource
from .strength import StrengthReport, evaluate

__all__ = [
    'CANONICAL_ORDER',
    'LOWERCASE',
    'NUMBERS',
    'SYMBOLS',
    'UPPERCASE',
    'CharacterClass',
    'GenerationConfig',
    'GlassPassError',
    'InvalidConfiguration',
    'PasswordGenerator',
    'RandomSource',
    'SeededRandomSource',
    'SystemRandomSource',
    'StrengthReport',
    'evaluate',
    'generate',
]
