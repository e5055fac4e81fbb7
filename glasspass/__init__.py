"""GlassPass: random password generation with an advisory strength score."""

__version__ = '1.0.0'
