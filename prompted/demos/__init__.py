"""Small interactive programs built on the prompted primitives."""

from . import cylon, guess, phases

__all__ = ["cylon", "guess", "phases"]
