"""Crimson: a line-oriented scripting language executed in a single parse pass."""

__version__ = "0.1.0"
