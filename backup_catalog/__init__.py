"""Backup catalog entries for hosted site environments."""

__version__ = "0.1.0"
