"""Bruteforce driver: username x password enumeration against a target hash."""

import logging
import time
from typing import List, Optional, Sequence, Tuple
from shared.config.config import config
from shared.domain.consts import ResultStatus
from shared.domain.errors import ConfigurationError
from shared.domain.models import (
    Alphabet,
    Credentials,
    MatchDict,
    MatchFound,
    ProgressTick,
    SearchCancelled,
    SearchExhausted,
    SearchResultPayload,
    SearchSettings,
)
from shared.domain.status import SearchState
from shared.implementations.generators import StringGenerator
from shared.implementations.hashing import rolling_hash
from shared.interfaces.search_listener import SearchListener
from minion.infrastructure.cancellation import CancellationRegistry

logger = logging.getLogger(__name__)


def username_space_bounds(settings: SearchSettings) -> Tuple[int, int]:
    """Return the valid username index range (inclusive) for the settings.

    Raises:
        ConfigurationError: If the alphabet or length bounds are invalid
    """
    generator = StringGenerator(settings.build_alphabet(), settings.min_length, settings.max_length)
    return (0, generator.count() - 1)


class Bruteforce:
    """
    Drives two string generators over the cross-product of usernames and passwords.

    The password generator is the fast inner axis, the username generator the
    slow outer axis. Each step verifies exactly one pair; every pair of the
    cross-product is verified once, in nested order. Every match is reported,
    the search does not stop at the first one.

    The username axis can be bounded to an index range so that disjoint
    ranges can be searched independently.

    Events go to the listeners: MatchFound for every match, ProgressTick every
    ``progress_every`` pairs (starting with the first), then exactly one of
    SearchExhausted or SearchCancelled.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        min_length: int,
        max_length: int,
        target_hash: int,
        listeners: Sequence[SearchListener] = (),
        search_id: Optional[str] = None,
        start_index: int = 0,
        end_index: Optional[int] = None,
        progress_every: Optional[int] = None,
        check_interval: Optional[int] = None,
        collect_matches: bool = False,
    ):
        self.username = StringGenerator(alphabet, min_length, max_length)
        self.password = StringGenerator(alphabet, min_length, max_length)
        self.target_hash = target_hash
        self.listeners = list(listeners)
        self.search_id = search_id
        self.progress_every = config.PROGRESS_EVERY if progress_every is None else progress_every
        self.check_interval = (
            config.CANCELLATION_CHECK_EVERY if check_interval is None else check_interval
        )
        if self.progress_every < 1:
            raise ConfigurationError(f"progress_every must be positive, got {self.progress_every}")
        if self.check_interval < 1:
            raise ConfigurationError(f"check_interval must be positive, got {self.check_interval}")
        self.collect_matches = collect_matches

        last_index = self.username.count() - 1
        if end_index is None:
            end_index = last_index
        if start_index < 0 or end_index > last_index or start_index > end_index:
            raise IndexError(
                f"Username range [{start_index}, {end_index}] is outside [0, {last_index}]"
            )
        self.start_index = start_index
        self.end_index = end_index
        if start_index:
            self.username.seek(start_index)

        self.state = SearchState.SCANNING
        self.iterations = 0
        self.matches: List[Credentials] = []
        # Index of the current username; start_index - 1 until the outer axis is primed
        self.username_index = start_index - 1
        self._username = b""
        self._prefix: Optional[int] = None
        self._started_at: Optional[float] = None
        self._cancellation = CancellationRegistry()

    @classmethod
    def from_settings(cls, settings: SearchSettings, **kwargs) -> "Bruteforce":
        return cls(
            settings.build_alphabet(),
            settings.min_length,
            settings.max_length,
            settings.target_hash,
            **kwargs,
        )

    @property
    def elapsed(self) -> float:
        if self._started_at is None:
            return 0.0
        return time.perf_counter() - self._started_at

    def step(self) -> Optional[Credentials]:
        """
        Verify the next pair.

        Returns:
            The pair that was verified, or None once the search is exhausted or cancelled.
        """
        if self.state.is_terminal():
            return None

        if self._prefix is None:
            self._started_at = time.perf_counter()
            self._next_username()
            if self._is_cancelled():
                return self._cancel()
        elif self.iterations % self.check_interval == 0 and self._is_cancelled():
            return self._cancel()

        if not self.password.advance():
            if not self._next_username():
                return self._exhaust()
            if self._is_cancelled():
                return self._cancel()
            self.password.reset()
            self.password.advance()

        password = self.password.current()
        credentials = Credentials(self._username, password)

        if self.iterations % self.progress_every == 0:
            self._emit_progress(credentials)

        if rolling_hash.to_signed(rolling_hash.fold(password, self._prefix)) == self.target_hash:
            self._emit_match(credentials)

        self.iterations += 1
        return credentials

    def run(self) -> SearchResultPayload:
        """
        Verify pairs until the search is exhausted or cancelled.

        Listener errors (e.g. a failed match write) propagate and abort the run.

        Returns:
            SearchResultPayload with status EXHAUSTED or CANCELLED.
        """
        logger.debug(
            f"Search {self.search_id}: Starting over usernames [{self.start_index}, {self.end_index}] "
            f"(lengths {self.username.min_length}-{self.username.max_length}, "
            f"alphabet size {len(self.username.alphabet)})"
        )

        while self.step() is not None:
            pass

        status = (
            ResultStatus.EXHAUSTED if self.state == SearchState.EXHAUSTED
            else ResultStatus.CANCELLED
        )
        return SearchResultPayload(
            status=status,
            matches=[MatchDict.from_credentials(c) for c in self.matches],
            iterations=self.iterations,
            last_index_processed=max(self.username_index, self.start_index),
            error_message=None,
        )

    def _next_username(self) -> bool:
        """Advance the outer axis within the assigned range."""
        if self.username_index >= self.end_index:
            return False
        if not self.username.advance():
            return False
        self.username_index += 1
        self._username = self.username.current()
        self._prefix = rolling_hash.prefix_state(self._username)
        return True

    def _is_cancelled(self) -> bool:
        return self.search_id is not None and self._cancellation.is_cancelled(self.search_id)

    def _cancel(self) -> None:
        self.state = SearchState.CANCELLED
        logger.info(
            f"Search {self.search_id}: Cancelled at username index {self.username_index} "
            f"after {self.iterations} pairs"
        )
        event = SearchCancelled(iterations=self.iterations, elapsed=self.elapsed)
        for listener in self.listeners:
            listener.on_cancelled(event)
        return None

    def _exhaust(self) -> None:
        self.state = SearchState.EXHAUSTED
        logger.debug(
            f"Search {self.search_id}: Exhausted usernames [{self.start_index}, {self.end_index}] "
            f"after {self.iterations} pairs"
        )
        event = SearchExhausted(iterations=self.iterations, elapsed=self.elapsed)
        for listener in self.listeners:
            listener.on_exhausted(event)
        return None

    def _emit_progress(self, credentials: Credentials) -> None:
        event = ProgressTick(
            iterations=self.iterations,
            elapsed=self.elapsed,
            credentials=credentials,
        )
        for listener in self.listeners:
            listener.on_progress(event)

    def _emit_match(self, credentials: Credentials) -> None:
        if self.collect_matches:
            self.matches.append(credentials)
        event = MatchFound(credentials)
        for listener in self.listeners:
            listener.on_match(event)
