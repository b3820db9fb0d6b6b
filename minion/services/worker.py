"""Unified worker logic for searching username ranges (sequential and parallel)."""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Sequence
from shared.config.config import config
from shared.domain.consts import ResultStatus
from shared.domain.models import (
    MatchFound,
    ProgressTick,
    SearchCancelled,
    SearchExhausted,
    SearchResultPayload,
    SearchSettings,
)
from shared.interfaces.search_listener import SearchListener
from minion.infrastructure.cancellation import CancellationRegistry
from minion.services.bruteforce import Bruteforce

logger = logging.getLogger(__name__)


class ListenerFanout(SearchListener):
    """
    Forwards match and progress events from parallel subranges to shared listeners.

    Events are delivered one at a time under a lock, so a match line from one
    subrange is never interleaved with another. Terminal events are not
    forwarded: the worker reports a single SearchExhausted/SearchCancelled for
    the whole range once every subrange has finished.
    """

    def __init__(self, listeners: Sequence[SearchListener]):
        self.listeners = list(listeners)
        self._lock = threading.Lock()

    def on_match(self, event: MatchFound) -> None:
        with self._lock:
            for listener in self.listeners:
                listener.on_match(event)

    def on_progress(self, event: ProgressTick) -> None:
        with self._lock:
            for listener in self.listeners:
                listener.on_progress(event)


def search_range(
    settings: SearchSettings,
    start_index: int,
    end_index: int,
    search_id: str,
    listeners: Sequence[SearchListener] = (),
    collect_matches: bool = False,
) -> SearchResultPayload:
    """
    Search every pair whose username index lies in [start_index, end_index].

    This is the single entry point for searching on the minion side.
    Automatically chooses between sequential and parallel processing based on:
    - config.WORKER_THREADS (must be > 1 for parallel)
    - Range size (must be >= config.PARALLEL_THRESHOLD for parallel)

    Construction errors (ConfigurationError, out-of-bounds range) are raised
    before any pair is enumerated.

    Error handling:
    - Sequential mode: Any exception while searching returns ERROR status.
    - Parallel mode: Any exception in a subrange cancels the search and the
      entire operation returns ERROR status.

    Returns:
        SearchResultPayload with status (EXHAUSTED/CANCELLED/ERROR) and matches
        (matches are only listed when collect_matches is set).
    """
    check_interval = config.CANCELLATION_CHECK_EVERY
    num_threads = config.WORKER_THREADS
    range_size = end_index - start_index + 1

    use_parallel = (
        num_threads > 1 and
        range_size >= config.PARALLEL_THRESHOLD
    )

    if use_parallel:
        logger.debug(
            f"Search {search_id}: Using parallel mode "
            f"(threads={num_threads}, range_size={range_size})"
        )
        return _search_range_parallel(
            settings=settings,
            start_index=start_index,
            end_index=end_index,
            search_id=search_id,
            listeners=listeners,
            collect_matches=collect_matches,
            check_interval=check_interval,
            num_threads=num_threads,
            range_size=range_size,
        )
    else:
        logger.debug(
            f"Search {search_id}: Using sequential mode "
            f"(threads={num_threads}, range_size={range_size})"
        )
        return _search_range_sequential(
            settings=settings,
            start_index=start_index,
            end_index=end_index,
            search_id=search_id,
            listeners=listeners,
            collect_matches=collect_matches,
            check_interval=check_interval,
        )


def _search_range_sequential(
    settings: SearchSettings,
    start_index: int,
    end_index: int,
    search_id: str,
    listeners: Sequence[SearchListener],
    collect_matches: bool,
    check_interval: int,
) -> SearchResultPayload:
    """
    Sequential search: one driver over the whole username range.

    Returns:
        SearchResultPayload with result (EXHAUSTED/CANCELLED/ERROR).
    """
    driver = Bruteforce.from_settings(
        settings,
        listeners=listeners,
        search_id=search_id,
        start_index=start_index,
        end_index=end_index,
        check_interval=check_interval,
        collect_matches=collect_matches,
    )

    try:
        return driver.run()
    except Exception as e:
        logger.error(
            f"Search {search_id}: Error in sequential search_range "
            f"range [{start_index}, {end_index}]: {e}",
            exc_info=True,
        )
        return SearchResultPayload(
            status=ResultStatus.ERROR,
            matches=[],
            iterations=driver.iterations,
            last_index_processed=max(driver.username_index, start_index),
            error_message=str(e),
        )


def _search_subrange(driver: Bruteforce) -> SearchResultPayload:
    """
    Run one subrange driver (used by parallel workers).

    Any exception propagates to the caller, which treats it as an ERROR for
    the entire parallel operation.
    """
    return driver.run()


def _split_subranges(start_index: int, end_index: int, subrange_size: int) -> List[tuple]:
    """
    Split an inclusive index range into contiguous, gap-free subranges.

    Returns:
        List of (subrange_start, subrange_end) tuples, both inclusive.
    """
    subranges = []
    current_start = start_index
    while current_start <= end_index:
        current_end = min(current_start + subrange_size - 1, end_index)
        subranges.append((current_start, current_end))
        current_start = current_end + 1
    return subranges


def _cancel_all_futures(futures: list[tuple]) -> None:
    """Cancel all futures in the list."""
    for f, _, _ in futures:
        f.cancel()


def _merge_results(
    results: List[SearchResultPayload],
    start_index: int,
    end_index: int,
) -> SearchResultPayload:
    """
    Merge subrange results (given in subrange order) into one payload.

    A cancelled merge reports the lowest username index any subrange reached.
    """
    cancelled = any(r.status == ResultStatus.CANCELLED for r in results)
    matches = [m for r in results for m in r.matches]
    if cancelled:
        last_index = max(min(r.last_index_processed for r in results), start_index)
    else:
        last_index = end_index
    return SearchResultPayload(
        status=ResultStatus.CANCELLED if cancelled else ResultStatus.EXHAUSTED,
        matches=matches,
        iterations=sum(r.iterations for r in results),
        last_index_processed=last_index,
        error_message=None,
    )


def _search_range_parallel(
    settings: SearchSettings,
    start_index: int,
    end_index: int,
    search_id: str,
    listeners: Sequence[SearchListener],
    collect_matches: bool,
    check_interval: int,
    num_threads: int,
    range_size: int,
) -> SearchResultPayload:
    """
    Parallel search using ThreadPoolExecutor.

    Splits the username range into subranges, each searched by its own
    driver (a private username/password generator pair). Matches from all
    subranges reach the listeners through a serialized fanout.

    If any subrange raises an exception, the search id is cancelled to stop
    the other subranges, remaining futures are cancelled and the operation
    returns ERROR. A cancel issued here is released once the executor has
    joined; a cancel requested from outside is left in place.

    Returns:
        SearchResultPayload with result (EXHAUSTED/CANCELLED/ERROR).
    """
    cancellation_registry = CancellationRegistry()
    fanout = ListenerFanout(listeners)
    started_at = time.perf_counter()

    subrange_size = max(config.SUBRANGE_MIN_SIZE, range_size // num_threads)
    subranges = _split_subranges(start_index, end_index, subrange_size)

    # Build every driver up front so construction errors surface before any work starts
    drivers = [
        Bruteforce.from_settings(
            settings,
            listeners=[fanout],
            search_id=search_id,
            start_index=sub_start,
            end_index=sub_end,
            check_interval=check_interval,
            collect_matches=collect_matches,
        )
        for sub_start, sub_end in subranges
    ]

    logger.debug(
        f"Search {search_id}: Starting parallel search over usernames "
        f"[{start_index}, {end_index}], {num_threads} threads, "
        f"{len(subranges)} subranges of up to {subrange_size}"
    )

    # Set when this call cancelled the search id itself to stop sibling subranges
    issued_cancel = False
    try:
        with ThreadPoolExecutor(max_workers=num_threads) as executor:
            futures = [
                (executor.submit(_search_subrange, driver), driver.start_index, driver.end_index)
                for driver in drivers
            ]
            results = {}
            for future in as_completed([f[0] for f in futures]):
                try:
                    results[future] = future.result()
                except Exception as e:
                    if not cancellation_registry.is_cancelled(search_id):
                        issued_cancel = True
                        cancellation_registry.cancel(search_id)
                    _cancel_all_futures(futures)
                    logger.error(
                        f"Search {search_id}: Subrange error in parallel search "
                        f"range [{start_index}, {end_index}]: {e}",
                        exc_info=True,
                    )
                    return SearchResultPayload(
                        status=ResultStatus.ERROR,
                        matches=[],
                        iterations=sum(d.iterations for d in drivers),
                        last_index_processed=start_index,
                        error_message=f"Subrange error: {str(e)}",
                    )

        merged = _merge_results(
            [results[f] for f, _, _ in futures], start_index, end_index
        )
    except Exception as e:
        logger.error(
            f"Search {search_id}: Unexpected error in parallel search_range "
            f"range [{start_index}, {end_index}]: {e}",
            exc_info=True,
        )
        return SearchResultPayload(
            status=ResultStatus.ERROR,
            matches=[],
            iterations=sum(d.iterations for d in drivers),
            last_index_processed=start_index,
            error_message=str(e),
        )
    finally:
        # Executor has joined; release the id so the same search can be retried
        if issued_cancel:
            cancellation_registry.discard(search_id)

    elapsed = time.perf_counter() - started_at
    if merged.status == ResultStatus.CANCELLED:
        event = SearchCancelled(iterations=merged.iterations, elapsed=elapsed)
        for listener in listeners:
            listener.on_cancelled(event)
    else:
        event = SearchExhausted(iterations=merged.iterations, elapsed=elapsed)
        for listener in listeners:
            listener.on_exhausted(event)

    return merged
