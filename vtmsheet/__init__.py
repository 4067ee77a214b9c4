"""Vampire: The Masquerade character sheet model with JSON save files."""

__version__ = "0.1.0"