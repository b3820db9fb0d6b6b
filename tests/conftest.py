"""Pytest configuration and fixtures."""

import itertools
import uuid
import pytest
from shared.domain.models import Alphabet, SearchSettings
from shared.interfaces.search_listener import SearchListener


def _enumerate_strings(symbols: str, min_length: int, max_length: int) -> list[str]:
    """Every string of every length in [min_length, max_length], shortest first, lexicographic."""
    return [
        "".join(chars)
        for length in range(min_length, max_length + 1)
        for chars in itertools.product(symbols, repeat=length)
    ]


class RecordingListener(SearchListener):
    """Listener that records every event it receives."""

    def __init__(self):
        self.matches = []
        self.progress = []
        self.exhausted = []
        self.cancelled = []

    def on_match(self, event):
        self.matches.append(event)

    def on_progress(self, event):
        self.progress.append(event)

    def on_exhausted(self, event):
        self.exhausted.append(event)

    def on_cancelled(self, event):
        self.cancelled.append(event)


@pytest.fixture
def abc_alphabet():
    """Three-symbol alphabet used by most enumeration tests."""
    return Alphabet.from_text("abc")


@pytest.fixture
def recorder():
    """Fresh recording listener."""
    return RecordingListener()


@pytest.fixture
def search_id():
    """Unique search id so cancellation state never leaks between tests."""
    return f"test-search-{uuid.uuid4()}"


@pytest.fixture
def small_settings():
    """Factory for small search settings over 'abc'."""
    def _make(target_hash: int, min_length: int = 1, max_length: int = 2, alphabet: str = "abc"):
        return SearchSettings(
            alphabet=alphabet,
            min_length=min_length,
            max_length=max_length,
            target_hash=target_hash,
        )
    return _make


@pytest.fixture
def enumerate_strings():
    """Reference enumeration built on itertools.product."""
    return _enumerate_strings
