"""Spell out non-negative integers in words from a number dictionary."""

__version__ = "0.1.0"
__all__ = ["cli", "convert", "dictionary"]