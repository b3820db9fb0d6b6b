"""Tests for domain models."""

import pytest
from pydantic import ValidationError
from shared.domain.consts import ResultStatus
from shared.domain.errors import ConfigurationError
from shared.domain.models import (
    Alphabet,
    Credentials,
    MatchDict,
    ProgressTick,
    RangeDict,
    SearchRangePayload,
    SearchResultPayload,
    SearchSettings,
)


class TestAlphabet:
    """Tests for Alphabet."""

    def test_from_text(self):
        """Test building an alphabet from text."""
        alphabet = Alphabet.from_text("abc")
        assert alphabet.symbols == b"abc"
        assert len(alphabet) == 3
        assert alphabet.first == ord("a")
        assert alphabet.last == ord("c")
        assert alphabet.text() == "abc"

    def test_index_of(self):
        """Test symbol position lookup."""
        alphabet = Alphabet.from_text("xyz")
        assert alphabet.index_of(ord("x")) == 0
        assert alphabet.index_of(ord("z")) == 2

    def test_index_of_unknown_symbol_raises(self):
        """Test lookup of a byte outside the alphabet."""
        with pytest.raises(ValueError):
            Alphabet.from_text("xyz").index_of(ord("a"))

    def test_empty_alphabet_raises(self):
        """Test that an empty alphabet is rejected."""
        with pytest.raises(ConfigurationError):
            Alphabet(b"")

    def test_duplicate_symbols_raise(self):
        """Test that duplicate symbols are rejected."""
        with pytest.raises(ConfigurationError):
            Alphabet.from_text("abca")

    def test_non_ascii_text_raises(self):
        """Test that non-ASCII text is rejected."""
        with pytest.raises(ConfigurationError):
            Alphabet.from_text("abé")

    def test_non_ascii_bytes_raise(self):
        """Test that bytes above 0x7F are rejected."""
        with pytest.raises(ConfigurationError):
            Alphabet(b"ab\xc3")

    def test_alphabet_is_immutable(self):
        """Test that the alphabet cannot be modified."""
        alphabet = Alphabet.from_text("abc")
        with pytest.raises(AttributeError):
            alphabet.symbols = b"xyz"

    def test_equality_uses_symbols(self):
        """Test that alphabets with the same symbols compare equal."""
        assert Alphabet.from_text("abc") == Alphabet(b"abc")
        assert Alphabet.from_text("abc") != Alphabet.from_text("cba")


class TestCredentials:
    """Tests for Credentials."""

    def test_str_format(self):
        """Test the display format."""
        assert str(Credentials(b"foo", b"bar")) == "username: foo password: bar"

    def test_to_line(self):
        """Test the output file line."""
        assert Credentials(b"foo", b"bar").to_line() == "username: foo password: bar\n"

    def test_from_text(self):
        """Test building credentials from text."""
        credentials = Credentials.from_text("foo", "bar")
        assert credentials.username == b"foo"
        assert credentials.password == b"bar"

    def test_invalid_utf8_raises_on_render(self):
        """Test that rendering is a checked conversion."""
        with pytest.raises(UnicodeDecodeError):
            str(Credentials(b"\xff", b"bar"))

    def test_credentials_are_hashable_values(self):
        """Test that equal pairs compare and hash equal."""
        assert Credentials(b"a", b"b") == Credentials(b"a", b"b")
        assert len({Credentials(b"a", b"b"), Credentials(b"a", b"b")}) == 1


class TestProgressTick:
    """Tests for ProgressTick."""

    def test_rate(self):
        """Test pairs per second."""
        tick = ProgressTick(iterations=1000, elapsed=2.0, credentials=Credentials(b"a", b"b"))
        assert tick.rate == 500.0

    def test_rate_with_zero_elapsed(self):
        """Test that zero elapsed time reports the raw count."""
        tick = ProgressTick(iterations=7, elapsed=0.0, credentials=Credentials(b"a", b"b"))
        assert tick.rate == 7.0


class TestSearchSettings:
    """Tests for SearchSettings."""

    def test_valid_settings(self):
        """Test that valid settings build an alphabet."""
        settings = SearchSettings(alphabet="abc", min_length=1, max_length=3, target_hash=0)
        assert settings.build_alphabet() == Alphabet.from_text("abc")

    def test_min_greater_than_max_raises(self):
        """Test that max_length must be >= min_length."""
        with pytest.raises(ValidationError):
            SearchSettings(alphabet="abc", min_length=3, max_length=1, target_hash=0)

    def test_zero_length_raises(self):
        """Test that lengths must be positive."""
        with pytest.raises(ValidationError):
            SearchSettings(alphabet="abc", min_length=0, max_length=1, target_hash=0)

    def test_empty_alphabet_raises(self):
        """Test that the alphabet must not be empty."""
        with pytest.raises(ValidationError):
            SearchSettings(alphabet="", min_length=1, max_length=1, target_hash=0)

    @pytest.mark.parametrize("target", [2 ** 31, -(2 ** 31) - 1])
    def test_target_outside_32_bits_raises(self, target):
        """Test that the target must fit a signed 32-bit integer."""
        with pytest.raises(ValidationError):
            SearchSettings(alphabet="abc", min_length=1, max_length=1, target_hash=target)

    def test_duplicate_alphabet_fails_on_build(self):
        """Test that alphabet content is validated when the alphabet is built."""
        settings = SearchSettings(alphabet="aab", min_length=1, max_length=1, target_hash=0)
        with pytest.raises(ConfigurationError):
            settings.build_alphabet()


class TestRangeDict:
    """Tests for RangeDict."""

    def test_valid_range(self):
        """Test a valid inclusive range."""
        range_dict = RangeDict(start_index=0, end_index=10)
        assert range_dict.start_index == 0
        assert range_dict.end_index == 10

    def test_single_index_range(self):
        """Test that start == end is allowed."""
        assert RangeDict(start_index=5, end_index=5).end_index == 5

    def test_end_before_start_raises(self):
        """Test that end_index must be >= start_index."""
        with pytest.raises(ValidationError):
            RangeDict(start_index=10, end_index=5)

    def test_negative_index_raises(self):
        """Test that indexes must be non-negative."""
        with pytest.raises(ValidationError):
            RangeDict(start_index=-1, end_index=5)


class TestPayloads:
    """Tests for request/result payloads."""

    def test_search_range_payload_from_dict(self):
        """Test parsing a nested request payload."""
        payload = SearchRangePayload.model_validate({
            "settings": {"alphabet": "abc", "min_length": 1, "max_length": 2, "target_hash": 5},
            "range": {"start_index": 0, "end_index": 11},
            "search_id": "s-1",
            "request_id": "r-1",
        })
        assert payload.settings.target_hash == 5
        assert payload.range.end_index == 11

    def test_result_payload_accepts_status_enum(self):
        """Test that ResultStatus members are valid status values."""
        result = SearchResultPayload(status=ResultStatus.EXHAUSTED, iterations=3)
        assert result.status == ResultStatus.EXHAUSTED
        assert result.matches == []

    def test_result_payload_rejects_unknown_status(self):
        """Test that unknown statuses are rejected."""
        with pytest.raises(ValidationError):
            SearchResultPayload(status="FOUND")

    def test_failure_factory(self):
        """Test building an error result."""
        result = SearchResultPayload.failure(ResultStatus.INVALID_INPUT, 4, "bad")
        assert result.status == ResultStatus.INVALID_INPUT
        assert result.last_index_processed == 4
        assert result.error_message == "bad"

    def test_match_dict_from_credentials(self):
        """Test converting credentials to a match entry."""
        match = MatchDict.from_credentials(Credentials(b"foo", b"bar"))
        assert match.model_dump() == {"username": "foo", "password": "bar"}
