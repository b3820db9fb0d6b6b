"""Progress reporting for running searches."""

import logging
from shared.domain.consts import ProgressDisplay
from shared.domain.models import ProgressTick, SearchExhausted, SearchCancelled
from shared.interfaces.search_listener import SearchListener

logger = logging.getLogger(__name__)


def format_rate(rate: float) -> str:
    """Render a pairs-per-second rate in millions."""
    return f"{rate / ProgressDisplay.RATE_UNIT:.2f} M/s"


class ProgressReporter(SearchListener):
    """Logs throughput and the current pair on every progress tick."""

    def __init__(self, label: str = "search"):
        self.label = label
        self.ticks = 0

    def on_progress(self, event: ProgressTick) -> None:
        self.ticks += 1
        logger.info(
            f"[{self.label}] Iterations: {event.iterations} "
            f"({format_rate(event.rate)}) | {event.credentials}"
        )

    def on_exhausted(self, event: SearchExhausted) -> None:
        logger.info(
            f"[{self.label}] Search exhausted after {event.iterations} pairs "
            f"in {event.elapsed:.3f}s"
        )

    def on_cancelled(self, event: SearchCancelled) -> None:
        logger.info(
            f"[{self.label}] Search cancelled after {event.iterations} pairs "
            f"in {event.elapsed:.3f}s"
        )
