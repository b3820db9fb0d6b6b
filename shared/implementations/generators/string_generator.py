"""Mixed-radix string generator (odometer) over an alphabet."""

from typing import List
from shared.domain.errors import ConfigurationError
from shared.domain.models import Alphabet
from shared.interfaces.candidate_generator import CandidateGenerator


class StringGenerator(CandidateGenerator):
    """Enumerates strings of length min_length..max_length over an alphabet.

    Strings are produced like an odometer whose digits are alphabet symbols:
    the rightmost position varies fastest, and every string of length L comes
    before any string of length L + 1.

    The sequence starts from the first ``min_length`` symbols of the alphabet
    (alphabet ``abc`` with ``min_length=2`` starts at ``ab``, not ``aa``).

    The buffer is mutated in place on every advance; use current() to take a
    snapshot that outlives the next advance.
    """

    def __init__(self, alphabet: Alphabet, min_length: int, max_length: int):
        if not alphabet:
            raise ConfigurationError("Alphabet must not be empty")
        if min_length < 1:
            raise ConfigurationError(f"min_length must be positive, got {min_length}")
        if min_length > max_length:
            raise ConfigurationError(
                f"min_length ({min_length}) must be less than or equal to max_length ({max_length})"
            )
        if min_length > len(alphabet):
            raise ConfigurationError(
                f"min_length ({min_length}) exceeds alphabet size ({len(alphabet)})"
            )

        self.alphabet = alphabet
        self.min_length = min_length
        self.max_length = max_length

        self._symbols = alphabet.symbols
        self._first = alphabet.first
        self._last_index = len(alphabet) - 1

        # Current value and the alphabet position of each of its characters
        self.value = bytearray()
        self.indexes: List[int] = []
        self.started = False
        self.exhausted = False

        self.reset()

    def reset(self) -> None:
        self.value[:] = self._symbols[:self.min_length]
        self.indexes[:] = [self.alphabet.index_of(byte) for byte in self.value]
        self.started = False
        self.exhausted = False

    def advance(self) -> bool:
        if self.exhausted:
            return False

        if not self.started:
            self.started = True
            return True

        value = self.value
        indexes = self.indexes
        i = len(value)
        while i > 0:
            i -= 1
            idx = indexes[i]
            if idx == self._last_index:
                value[i] = self._first
                indexes[i] = 0
            else:
                idx += 1
                value[i] = self._symbols[idx]
                indexes[i] = idx
                return True

        if len(value) < self.max_length:
            value.append(self._first)
            indexes.append(0)
            return True

        # Full wraparound at max length: every position held the last symbol
        length = len(value)
        value[:] = bytes([self.alphabet.last]) * length
        indexes[:] = [self._last_index] * length
        self.exhausted = True
        return False

    def current(self) -> bytes:
        return bytes(self.value)

    def text(self) -> str:
        """Current value as text (checked ASCII decode)."""
        return self.value.decode("ascii")

    def is_exhausted(self) -> bool:
        return self.exhausted

    def count(self) -> int:
        return self._total() - self._seed_rank()

    def seek(self, index: int) -> None:
        total = self.count()
        if index < 0 or index >= total:
            raise IndexError(f"Index {index} is outside [0, {total - 1}]")

        rank = self._seed_rank() + index
        radix = len(self.alphabet)
        length = self.min_length
        while rank >= radix ** length:
            rank -= radix ** length
            length += 1

        digits = [0] * length
        for position in range(length - 1, -1, -1):
            rank, digits[position] = divmod(rank, radix)

        self.value[:] = bytes(self._symbols[d] for d in digits)
        self.indexes[:] = digits
        self.started = False
        self.exhausted = False

    def _total(self) -> int:
        """Number of strings of every length in [min_length, max_length]."""
        radix = len(self.alphabet)
        return sum(radix ** length for length in range(self.min_length, self.max_length + 1))

    def _seed_rank(self) -> int:
        """Lexicographic rank of the reset value among strings of min_length."""
        radix = len(self.alphabet)
        rank = 0
        for idx in range(self.min_length):
            rank = rank * radix + idx
        return rank

    def __str__(self) -> str:
        return self.text()

    def __repr__(self) -> str:
        return (
            f"StringGenerator(alphabet={self.alphabet.text()!r}, "
            f"min_length={self.min_length}, max_length={self.max_length}, "
            f"value={self.text()!r})"
        )
