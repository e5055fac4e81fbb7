from __future__ import annotations


class GlassPassError(Exception):
    """Base class for errors raised by the GlassPass core."""


class InvalidConfiguration(GlassPassError, ValueError):
    """Raised when a GenerationConfig cannot produce a password."""
