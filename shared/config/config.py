"""Configuration loaded from environment variables."""

import os


def _get_env_int(key: str, default: str) -> int:
    """Get integer environment variable with validation."""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        raise ValueError(f"Invalid integer value for {key}")


class Config:
    """Centralized configuration from environment variables."""

    # Search space
    # ALPHABET lists the symbols explicitly; when empty, ALPHABET_PRESET picks a named alphabet
    ALPHABET: str = os.getenv("ALPHABET", "")
    ALPHABET_PRESET: str = os.getenv("ALPHABET_PRESET", "lower_alnum")
    MIN_LENGTH: int = _get_env_int("MIN_LENGTH", "1")
    MAX_LENGTH: int = _get_env_int("MAX_LENGTH", "3")

    # Target
    TARGET_HASH: int = _get_env_int("TARGET_HASH", "1315459805")

    # Output
    OUTPUT_FILE: str = os.getenv("OUTPUT_FILE", "credentials.txt")

    # Progress reporting: emit a progress tick every N verified pairs
    PROGRESS_EVERY: int = _get_env_int("PROGRESS_EVERY", "1000000")

    # Cancellation is checked on every username step and every N pairs
    CANCELLATION_CHECK_EVERY: int = _get_env_int("CANCELLATION_CHECK_EVERY", "100000")

    # Worker threads (1 = sequential)
    WORKER_THREADS: int = _get_env_int("WORKER_THREADS", "1")

    # Minimum number of usernames in a range before it is split across threads
    PARALLEL_THRESHOLD: int = _get_env_int("PARALLEL_THRESHOLD", "64")

    # Each parallel subrange gets at least this many usernames
    SUBRANGE_MIN_SIZE: int = _get_env_int("SUBRANGE_MIN_SIZE", "1")


config = Config()
