"""Status enums for the search driver."""

from enum import Enum


class SearchState(str, Enum):
    """Driver state machine states."""
    SCANNING = "SCANNING"
    EXHAUSTED = "EXHAUSTED"
    CANCELLED = "CANCELLED"

    def is_terminal(self) -> bool:
        """Check if no further pairs will be produced."""
        return self in (SearchState.EXHAUSTED, SearchState.CANCELLED)
