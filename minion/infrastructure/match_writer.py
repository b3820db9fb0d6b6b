"""Append-only match output file."""

import logging
import threading
from pathlib import Path
from typing import Optional, TextIO
from shared.domain.errors import OutputSinkError
from shared.domain.models import MatchFound
from shared.interfaces.search_listener import SearchListener

logger = logging.getLogger(__name__)


class MatchWriter(SearchListener):
    """
    Writes one line per matching pair to an append-only text file.

    The file is opened once (create-or-append) and held for the whole run.
    Each line is written and flushed under a lock, so matches coming from
    parallel subranges never interleave.

    Use as a context manager to guarantee the file is closed on every exit
    path:

        with MatchWriter("credentials.txt") as writer:
            search_range(settings, 0, end, search_id, listeners=[writer])
    """

    def __init__(self, output_file: str):
        self.output_file = output_file
        self.matches_written = 0
        self._file: Optional[TextIO] = None
        self._lock = threading.Lock()

    def open(self) -> "MatchWriter":
        """
        Open the output file in append mode, creating parent directories.

        Raises:
            OutputSinkError: If the file cannot be opened.
        """
        try:
            Path(self.output_file).parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.output_file, "a", encoding="utf-8")
        except OSError as e:
            raise OutputSinkError(f"Failed to open output file {self.output_file}: {e}") from e
        logger.info(f"Appending matches to {self.output_file}")
        return self

    def close(self) -> None:
        """Flush and close the output file (safe to call twice)."""
        with self._lock:
            if self._file is None:
                return
            try:
                self._file.close()
            finally:
                self._file = None

    def on_match(self, event: MatchFound) -> None:
        """
        Append the match line.

        Raises:
            OutputSinkError: If the writer is not open or the write fails.
        """
        line = event.credentials.to_line()
        with self._lock:
            if self._file is None:
                raise OutputSinkError(f"Output file {self.output_file} is not open")
            try:
                self._file.write(line)
                self._file.flush()
            except OSError as e:
                raise OutputSinkError(f"Failed to write to output file {self.output_file}: {e}") from e
            self.matches_written += 1
        logger.info(f"Match found: {event.credentials}")

    def __enter__(self) -> "MatchWriter":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
