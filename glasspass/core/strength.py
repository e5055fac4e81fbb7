from __future__ import annotations

import string

from dataclasses import dataclass
from typing import Final, List, Tuple

VERY_STRONG: Final[str] = 'very strong'
STRONG: Final[str] = 'strong'
MEDIUM: Final[str] = 'medium'
WEAK: Final[str] = 'weak'

SHORT_PASSWORD_FEEDBACK: Final[str] = 'use at least 8 characters'

_ALPHANUMERIC: Final[str] = string.ascii_letters + string.digits


@dataclass(frozen=True)
class StrengthReport:
    """Advisory summary of how complex a password looks."""

    score: int
    strength: str
    feedback: Tuple[str, ...] = ()


def _label_for(score: int) -> str:
    if score >= 6:
        return VERY_STRONG
    if score >= 4:
        return STRONG
    if score >= 2:
        return MEDIUM
    return WEAK


def evaluate(password: str) -> StrengthReport:
    """
    Score a password from its literal characters.

    Length earns up to 2 points; each of lowercase, uppercase, digit and
    any other character earns 1 point.

    Args:
        password: Any string, including the empty string.

    Returns:
        StrengthReport with score, label and feedback messages.
    """
    score = 0
    feedback: List[str] = []

    if len(password) >= 12:
        score += 2
    elif len(password) >= 8:
        score += 1
    else:
        feedback.append(SHORT_PASSWORD_FEEDBACK)

    if any(c in string.ascii_lowercase for c in password):
        score += 1
    if any(c in string.ascii_uppercase for c in password):
        score += 1
    if any(c in string.digits for c in password):
        score += 1
    if any(c not in _ALPHANUMERIC for c in password):
        score += 1

    return StrengthReport(score=score, strength=_label_for(score), feedback=tuple(feedback))
