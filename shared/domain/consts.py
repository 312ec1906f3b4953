"""Constants to avoid string typos and magic numbers."""

from enum import Enum
from typing import Literal


class ResultStatus(str, Enum):
    """Result status constants for a decipher request."""
    DECIPHERED = "DECIPHERED"
    NO_RESULT = "NO_RESULT"
    ERROR = "ERROR"


# Type alias for result status literals
ResultStatusLiteral = Literal["DECIPHERED", "NO_RESULT", "ERROR"]


class HashAlgorithm:
    """Hash algorithm constants."""
    MD5 = "md5"


class HashDisplay:
    """Constants for hash display."""
    PREFIX_LENGTH = 8  # Number of characters to show in logs (e.g., "5d41402a...")


class RecordFormat:
    """Delimiters of the colon-separated formats."""
    FIELD_SEPARATOR = ":"
    NEWLINE = "\n"
    CARRIAGE_RETURN = "\r"


class Wordlists:
    """Wordlist directory conventions."""
    EXTENSION = ".txt"
    PRECOMPUTED_FILENAME = "precomputed_hashes.txt"


# Marker returned in place of an empty string when there was nothing to decipher
NO_RESULT_MARKER = "no result"
