"""Data models for cheatview."""

from .sheets import Catalog, Entry, EntryExample, EntryOption

__all__ = ["Catalog", "Entry", "EntryExample", "EntryOption"]
