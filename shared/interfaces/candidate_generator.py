"""Abstract candidate generator interface."""

from abc import ABC, abstractmethod


class CandidateGenerator(ABC):
    """Abstract candidate generator interface.

    A generator owns one mutable "current candidate" and steps it through a
    finite sequence. It is an explicit state object rather than a Python
    iterator: callers advance it, then read the current value.

    All candidate generators must implement:
    - reset: Return to the first value of the sequence
    - advance: Move to the next value
    - current: Snapshot of the current value
    - is_exhausted: Whether the sequence has ended
    - count: Number of values the sequence yields from the reset state
    - seek: Position the generator at an index of its sequence
    """

    @abstractmethod
    def reset(self) -> None:
        """Return to the initial value; the next advance() yields it."""
        pass

    @abstractmethod
    def advance(self) -> bool:
        """Move to the next candidate.

        Returns:
            True if a candidate is available, False once the sequence is exhausted
        """
        pass

    @abstractmethod
    def current(self) -> bytes:
        """Return an immutable snapshot of the current candidate."""
        pass

    @abstractmethod
    def is_exhausted(self) -> bool:
        """Return True once advance() has reported the end of the sequence."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of values yielded from the reset state."""
        pass

    @abstractmethod
    def seek(self, index: int) -> None:
        """Position the generator so the next advance() yields value ``index``.

        Args:
            index: Zero-based position in the sequence

        Raises:
            IndexError: If index is outside [0, count())
        """
        pass
