"""Status enum for the passwords table load."""

from enum import Enum


class LoadStatus(str, Enum):
    """Outcome of loading the precomputed passwords file."""
    LOADED = "LOADED"
    MISSING = "MISSING"
    UNREADABLE = "UNREADABLE"
    NOT_LOADED = "NOT_LOADED"  # constructed in memory, no source file
