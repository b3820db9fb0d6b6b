"""Listener interface for search events."""

from shared.domain.models import MatchFound, ProgressTick, SearchExhausted, SearchCancelled


class SearchListener:
    """Receives events produced by the search driver.

    Every hook is a no-op by default; collaborators override the ones they
    consume.
    """

    def on_match(self, event: MatchFound) -> None:
        pass

    def on_progress(self, event: ProgressTick) -> None:
        pass

    def on_exhausted(self, event: SearchExhausted) -> None:
        pass

    def on_cancelled(self, event: SearchCancelled) -> None:
        pass
