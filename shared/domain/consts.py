"""Constants to avoid string typos and magic numbers."""

from enum import Enum
from typing import Literal


class ResultStatus(str, Enum):
    """Result status constants."""
    EXHAUSTED = "EXHAUSTED"
    CANCELLED = "CANCELLED"
    ERROR = "ERROR"
    INVALID_INPUT = "INVALID_INPUT"


# Type alias for result status literals
ResultStatusLiteral = Literal["EXHAUSTED", "CANCELLED", "ERROR", "INVALID_INPUT"]


class AlphabetPresetName(str, Enum):
    """Alphabet preset name constants."""
    LOWER_ALNUM = "lower_alnum"
    LOWER = "lower"
    DIGITS = "digits"
    ALNUM = "alnum"
    HEX = "hex"


class CredentialsTemplate:
    """Byte template wrapping a candidate pair before hashing."""
    USERNAME_FIELD = b"username="
    PASSWORD_FIELD = b"&password="


class HashWidth:
    """Rolling hash width constants."""
    BITS = 32
    MASK = 0xFFFFFFFF
    MIN_SIGNED = -(1 << 31)
    MAX_SIGNED = (1 << 31) - 1


class OutputFormat:
    """Match line format written to the output file."""
    MATCH_LINE = "username: {username} password: {password}\n"


class ProgressDisplay:
    """Constants for progress display."""
    RATE_UNIT = 1_000_000  # Rates are shown in millions of pairs per second


class CancelSearchFields:
    """Field names for cancel search request."""
    SEARCH_ID = "search_id"


class CancelSearchResponseFields:
    """JSON field names for cancel-search responses."""
    STATUS = "status"
    ERROR = "error"


class CancelSearchResponseStatus(str, Enum):
    """Status values for cancel-search responses."""
    OK = "OK"
    ERROR = "ERROR"
