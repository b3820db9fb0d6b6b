"""Main entry point for the credentials bruteforcer."""

import logging
import sys
import time
import uuid
from typing import Optional
from pydantic import ValidationError
from shared.config.config import config
from shared.domain.consts import HashWidth, ResultStatus
from shared.domain.errors import ConfigurationError, OutputSinkError
from shared.domain.models import SearchSettings
from shared.factories.alphabet_factory import resolve_alphabet
from minion.infrastructure.match_writer import MatchWriter
from minion.infrastructure.progress_reporter import ProgressReporter
from minion.services.bruteforce import username_space_bounds
from minion.services.worker import search_range

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)


def parse_target_hash(value: str) -> int:
    """
    Parse a signed 32-bit target hash.

    Raises:
        ValueError: If value is not an integer in the signed 32-bit range
    """
    try:
        target = int(value, 0)
    except ValueError:
        raise ValueError(f"Target hash is not an integer: {value}")
    if not HashWidth.MIN_SIGNED <= target <= HashWidth.MAX_SIGNED:
        raise ValueError(f"Target hash {target} is outside the signed 32-bit range")
    return target


def build_settings(target_hash: Optional[int] = None) -> SearchSettings:
    """
    Build search settings from config, optionally overriding the target hash.

    Raises:
        ConfigurationError: If the alphabet is invalid
        ValueError: If the alphabet preset is unknown
        ValidationError: If lengths or target are out of range
    """
    alphabet = resolve_alphabet(config.ALPHABET, config.ALPHABET_PRESET)
    return SearchSettings(
        alphabet=alphabet.text(),
        min_length=config.MIN_LENGTH,
        max_length=config.MAX_LENGTH,
        target_hash=config.TARGET_HASH if target_hash is None else target_hash,
    )


def main() -> None:
    """Main execution function."""
    if len(sys.argv) > 2:
        print("Usage: python main.py [target_hash]")
        sys.exit(1)

    try:
        target_hash = parse_target_hash(sys.argv[1]) if len(sys.argv) == 2 else None
        settings = build_settings(target_hash)
        _, max_index = username_space_bounds(settings)
    except (ConfigurationError, ValidationError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    search_id = str(uuid.uuid4())
    logger.info(
        f"Search {search_id}: target hash {settings.target_hash}, "
        f"alphabet {settings.alphabet!r}, lengths {settings.min_length}-{settings.max_length}, "
        f"{max_index + 1} usernames"
    )

    start = time.perf_counter()
    try:
        with MatchWriter(config.OUTPUT_FILE) as writer:
            result = search_range(
                settings=settings,
                start_index=0,
                end_index=max_index,
                search_id=search_id,
                listeners=[writer, ProgressReporter(search_id[:8])],
            )
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    except OutputSinkError as e:
        logger.error(f"Output file error: {e}")
        sys.exit(1)

    print(f"Time: {int((time.perf_counter() - start) * 1000)}ms")

    if result.status == ResultStatus.ERROR:
        logger.error(f"Search {search_id} failed: {result.error_message}")
        sys.exit(1)

    logger.info(
        f"Search {search_id} {result.status}: {writer.matches_written} matches "
        f"in {result.iterations} pairs"
    )


if __name__ == "__main__":
    main()
