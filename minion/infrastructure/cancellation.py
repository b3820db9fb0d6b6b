"""Cancellation registry for search cancellation."""

import threading
import logging
from typing import Set

logger = logging.getLogger(__name__)


class CancellationRegistry:
    """
    Process-wide registry of cancelled search ids.

    State lives on the class, so every ``CancellationRegistry()`` sees the same
    set: a cancel issued by the `/cancel-search` endpoint or by a failing
    parallel subrange is visible to every driver polling the same search id.

    All operations take the class lock.

    Example:
        CancellationRegistry().cancel("search-1")
        assert CancellationRegistry().is_cancelled("search-1")
    """

    _cancelled_searches: Set[str] = set()
    _lock = threading.Lock()

    def cancel(self, search_id: str) -> None:
        """
        Mark a search as cancelled.

        Idempotent: cancelling the same search again has no further effect.
        """
        with self._lock:
            self._cancelled_searches.add(search_id)
            logger.debug(f"Search {search_id} marked as cancelled")

    def is_cancelled(self, search_id: str) -> bool:
        """
        Check if a search is cancelled.

        Returns:
            True if search is cancelled, False otherwise.
        """
        with self._lock:
            return search_id in self._cancelled_searches

    def discard(self, search_id: str) -> None:
        """Forget a search id so it can be reused."""
        with self._lock:
            self._cancelled_searches.discard(search_id)
