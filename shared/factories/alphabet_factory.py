"""Factory for creating alphabet instances."""

import string
from shared.domain.models import Alphabet
from shared.domain.consts import AlphabetPresetName


PRESETS: dict[str, str] = {
    AlphabetPresetName.LOWER_ALNUM: string.ascii_lowercase + string.digits,
    AlphabetPresetName.LOWER: string.ascii_lowercase,
    AlphabetPresetName.DIGITS: string.digits,
    AlphabetPresetName.ALNUM: string.ascii_lowercase + string.ascii_uppercase + string.digits,
    AlphabetPresetName.HEX: string.digits + "abcdef",
}


def create_alphabet(preset_name: str) -> Alphabet:
    """Factory for creating preset alphabets.

    Returns:
        Alphabet instance

    Raises:
        ValueError: If preset_name is unknown
    """
    try:
        symbols = PRESETS[preset_name]
    except KeyError:
        raise ValueError(f"Unknown alphabet preset: {preset_name}")
    return Alphabet.from_text(symbols)


def resolve_alphabet(symbols: str, preset_name: str) -> Alphabet:
    """Use explicit symbols when given, otherwise the named preset."""
    if symbols:
        return Alphabet.from_text(symbols)
    return create_alphabet(preset_name)
