from __future__ import annotations

import logging
import os

from typing import Final

DEFAULT_LENGTH: Final[int] = 16
MIN_LENGTH: Final[int] = 4
MAX_LENGTH: Final[int] = 64

# GUI timings, in milliseconds.
TOAST_MS: Final[int] = 3000
COPY_FEEDBACK_MS: Final[int] = 2000

LOG_LEVEL_ENV: Final[str] = 'GLASSPASS_LOG_LEVEL'
DEFAULT_LOG_LEVEL: Final[str] = 'WARNING'


def configure_logging() -> None:
    """
    Configure root logging for the GlassPass entry points.

    The level is read from the GLASSPASS_LOG_LEVEL environment variable
    and falls back to WARNING when unset or unknown.
    """
    level_name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)

    if not isinstance(level, int):
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
