"""Domain models for alphabets, credentials, events, and payloads."""

from dataclasses import dataclass, field
from typing import List, Optional
from pydantic import BaseModel, Field, model_validator, ConfigDict
from shared.domain.consts import HashWidth, OutputFormat, ResultStatus, ResultStatusLiteral
from shared.domain.errors import ConfigurationError
from shared.implementations.hashing import rolling_hash


@dataclass(frozen=True)
class Alphabet:
    """Ordered, duplicate-free set of ASCII symbols.

    Position in ``symbols`` defines successor ordering for the odometer.
    ASCII-only means any byte string built from the alphabet is valid text.
    """
    symbols: bytes
    _positions: dict = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.symbols:
            raise ConfigurationError("Alphabet must not be empty")
        if any(byte > 0x7F for byte in self.symbols):
            raise ConfigurationError("Alphabet must contain ASCII characters only")
        if len(set(self.symbols)) != len(self.symbols):
            raise ConfigurationError(f"Alphabet has duplicate characters: {self.symbols!r}")
        object.__setattr__(
            self, "_positions", {byte: i for i, byte in enumerate(self.symbols)}
        )

    @classmethod
    def from_text(cls, text: str) -> "Alphabet":
        """Build an alphabet from a string of characters."""
        try:
            return cls(text.encode("ascii"))
        except UnicodeEncodeError:
            raise ConfigurationError("Alphabet must contain ASCII characters only")

    def __len__(self) -> int:
        return len(self.symbols)

    @property
    def first(self) -> int:
        return self.symbols[0]

    @property
    def last(self) -> int:
        return self.symbols[-1]

    def index_of(self, byte: int) -> int:
        """Position of a symbol in the alphabet.

        Raises:
            ValueError: If the byte is not part of the alphabet
        """
        try:
            return self._positions[byte]
        except KeyError:
            raise ValueError(f"Byte {byte!r} is not in the alphabet")

    def text(self) -> str:
        return self.symbols.decode("ascii")


@dataclass(frozen=True)
class Credentials:
    """One (username, password) candidate pair.

    Holds owned byte snapshots, so it stays valid after the generators move on.
    """
    username: bytes
    password: bytes

    @classmethod
    def from_text(cls, username: str, password: str) -> "Credentials":
        return cls(username.encode("utf-8"), password.encode("utf-8"))

    def compute_hash(self) -> int:
        """Signed 32-bit rolling hash of the credentials template."""
        return rolling_hash.credentials_hash(self.username, self.password)

    def verify(self, target_hash: int) -> bool:
        """Check whether this pair hashes to the target."""
        return self.compute_hash() == target_hash

    @property
    def username_text(self) -> str:
        return self.username.decode("utf-8")

    @property
    def password_text(self) -> str:
        return self.password.decode("utf-8")

    def to_line(self) -> str:
        """Render the output file line for this pair."""
        return OutputFormat.MATCH_LINE.format(
            username=self.username_text,
            password=self.password_text,
        )

    def __str__(self) -> str:
        return f"username: {self.username_text} password: {self.password_text}"


@dataclass(frozen=True)
class MatchFound:
    """Emitted for every pair whose hash equals the target."""
    credentials: Credentials


@dataclass(frozen=True)
class ProgressTick:
    """Emitted at the progress cadence with the current pair."""
    iterations: int
    elapsed: float  # seconds
    credentials: Credentials

    @property
    def rate(self) -> float:
        """Pairs per second (falls back to the raw count before any time has passed)."""
        if self.elapsed == 0:
            return float(self.iterations)
        return self.iterations / self.elapsed


@dataclass(frozen=True)
class SearchExhausted:
    """Emitted once when every pair of the search space has been verified."""
    iterations: int
    elapsed: float


@dataclass(frozen=True)
class SearchCancelled:
    """Emitted when a search stops because it was cancelled."""
    iterations: int
    elapsed: float


class SearchSettings(BaseModel):
    """Search space and target hash."""
    alphabet: str = Field(..., min_length=1, description="Ordered, distinct ASCII characters")
    min_length: int = Field(..., ge=1, description="Shortest candidate length")
    max_length: int = Field(..., ge=1, description="Longest candidate length")
    target_hash: int = Field(
        ...,
        ge=HashWidth.MIN_SIGNED,
        le=HashWidth.MAX_SIGNED,
        description="Signed 32-bit target hash",
    )

    @model_validator(mode='after')
    def validate_lengths(self) -> 'SearchSettings':
        """Validate that max_length >= min_length."""
        if self.max_length < self.min_length:
            raise ValueError(
                f"max_length ({self.max_length}) must be >= min_length ({self.min_length})"
            )
        return self

    def build_alphabet(self) -> Alphabet:
        return Alphabet.from_text(self.alphabet)


class RangeDict(BaseModel):
    """Range dictionary model."""
    start_index: int = Field(..., description="Start index (inclusive)", ge=0)
    end_index: int = Field(..., description="End index (inclusive)", ge=0)

    @model_validator(mode='after')
    def validate_range(self) -> 'RangeDict':
        """Validate that end_index >= start_index."""
        if self.end_index < self.start_index:
            raise ValueError(f"end_index ({self.end_index}) must be >= start_index ({self.start_index})")
        return self


class SearchRangePayload(BaseModel):
    """Payload for search-range request."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "settings": {
                    "alphabet": "abcdefghijklmnopqrstuvwxyz0123456789",
                    "min_length": 1,
                    "max_length": 3,
                    "target_hash": 1315459805,
                },
                "range": {"start_index": 0, "end_index": 35},
                "search_id": "123e4567-e89b-12d3-a456-426614174000",
                "request_id": "abc123"
            }
        }
    )

    settings: SearchSettings = Field(..., description="Search space and target hash")
    range: RangeDict = Field(..., description="Username index range to search")
    search_id: str = Field(..., description="Search identifier (used for cancellation)")
    request_id: str = Field(..., description="Request identifier for tracing")


class MatchDict(BaseModel):
    """One matching pair."""
    username: str
    password: str

    @classmethod
    def from_credentials(cls, credentials: Credentials) -> 'MatchDict':
        return cls(username=credentials.username_text, password=credentials.password_text)


class SearchResultPayload(BaseModel):
    """Result of searching a username range."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "EXHAUSTED",
                "matches": [{"username": "a", "password": "b"}],
                "iterations": 1764,
                "last_index_processed": 35,
                "error_message": None
            }
        }
    )

    status: ResultStatusLiteral = Field(
        ...,
        description="Result status: EXHAUSTED, CANCELLED, ERROR, or INVALID_INPUT"
    )
    matches: List[MatchDict] = Field(default_factory=list, description="Every matching pair found")
    iterations: int = Field(0, ge=0, description="Number of pairs verified")
    last_index_processed: int = Field(0, ge=0, description="Last username index processed")
    error_message: Optional[str] = Field(None, description="Error message if status is ERROR")

    @classmethod
    def failure(cls, status: ResultStatus, start_index: int, message: str) -> 'SearchResultPayload':
        """Build an ERROR or INVALID_INPUT result."""
        return cls(
            status=status,
            matches=[],
            iterations=0,
            last_index_processed=start_index,
            error_message=message,
        )
