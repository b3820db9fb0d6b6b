"""Tests for alphabet factory."""

import pytest
from shared.domain.consts import AlphabetPresetName
from shared.domain.errors import ConfigurationError
from shared.domain.models import Alphabet
from shared.factories.alphabet_factory import PRESETS, create_alphabet, resolve_alphabet


class TestAlphabetFactory:
    """Tests for create_alphabet and resolve_alphabet."""

    def test_create_lower_alnum(self):
        """Test the default 36-symbol alphabet."""
        alphabet = create_alphabet("lower_alnum")
        assert alphabet.text() == "abcdefghijklmnopqrstuvwxyz0123456789"
        assert len(alphabet) == 36

    def test_create_with_enum(self):
        """Test creating an alphabet with the enum member."""
        assert create_alphabet(AlphabetPresetName.DIGITS).text() == "0123456789"

    def test_every_preset_is_valid(self):
        """Test that every preset builds a valid alphabet."""
        for name in PRESETS:
            assert isinstance(create_alphabet(name), Alphabet)

    def test_unknown_preset_raises(self):
        """Test that unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown alphabet preset"):
            create_alphabet("klingon")

    def test_resolve_prefers_explicit_symbols(self):
        """Test that explicit symbols win over the preset."""
        assert resolve_alphabet("xyz", "lower_alnum").text() == "xyz"

    def test_resolve_falls_back_to_preset(self):
        """Test that an empty symbol string uses the preset."""
        assert resolve_alphabet("", "hex").text() == "0123456789abcdef"

    def test_resolve_validates_symbols(self):
        """Test that explicit symbols are validated."""
        with pytest.raises(ConfigurationError):
            resolve_alphabet("xxy", "lower_alnum")
