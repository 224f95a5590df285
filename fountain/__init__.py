"""Emoji fountain: a looping pygame particle animation."""

__version__ = "0.1.0"

__all__ = ["__version__"]
