"""
alphabets.py

Named character sets and custom alphabets.

Presets (fixed; entropy figures depend on them):

- lowercase     a-z                                  26
- uppercase     A-Z                                  26
- digits        0-9                                  10
- alphanumeric  lowercase + uppercase + digits       62
- punctuation   string.punctuation                   32
                !"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~
- special       alphanumeric + punctuation           94
                (printable ASCII 33..126, a.k.a. Base94)

Quick start
>>> from passgen.alphabets import get_alphabet, custom_alphabet
>>> get_alphabet("alphanumeric").size
62
>>> custom_alphabet("aabbcc").symbols
('a', 'b', 'c')
"""

from __future__ import annotations

from typing import Dict, Optional
import string

from .errors import ConflictingSource, EmptyAlphabet, UnknownPreset
from .symbols import SymbolKind, SymbolSet


#Alphabets
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
DIGITS = string.digits
ALPHANUMERIC = LOWERCASE + UPPERCASE + DIGITS
PUNCTUATION = string.punctuation
SPECIAL = ALPHANUMERIC + PUNCTUATION

DEFAULT_ALPHABET = "special"

_PRESETS: Dict[str, str] = {
    "lowercase": LOWERCASE,
    "uppercase": UPPERCASE,
    "digits": DIGITS,
    "alphanumeric": ALPHANUMERIC,
    "punctuation": PUNCTUATION,
    "special": SPECIAL,
}

_BUILT: Dict[str, SymbolSet] = {
    name: SymbolSet(kind=SymbolKind.CHARACTERS, symbols=tuple(chars), name=name)
    for name, chars in _PRESETS.items()
}


def alphabet_names() -> list:
    """Registered preset names, in registry order."""
    return list(_PRESETS)


def get_alphabet(name: str) -> SymbolSet:
    """Resolve a preset name. Unknown names raise `UnknownPreset`."""
    try:
        return _BUILT[name]
    except KeyError:
        raise UnknownPreset("alphabet", name, _PRESETS) from None


def custom_alphabet(chars: str) -> SymbolSet:
    """Build an alphabet from caller text, dropping repeated characters."""
    if not chars:
        raise EmptyAlphabet("custom alphabet is empty; supply at least one character")
    return SymbolSet.from_iterable(SymbolKind.CHARACTERS, chars, name="custom")


def resolve_alphabet(
    name: Optional[str] = None,
    custom: Optional[str] = None,
    default: str = DEFAULT_ALPHABET,
) -> SymbolSet:
    """
    Pick the alphabet for a request: a custom string, a preset name, or
    `default` when neither is given. Supplying both is an error.
    """
    if name is not None and custom is not None:
        raise ConflictingSource("give either an alphabet name or a custom alphabet, not both")
    if custom is not None:
        return custom_alphabet(custom)
    return get_alphabet(name if name is not None else default)


__all__ = [
    "LOWERCASE",
    "UPPERCASE",
    "DIGITS",
    "ALPHANUMERIC",
    "PUNCTUATION",
    "SPECIAL",
    "DEFAULT_ALPHABET",
    "alphabet_names",
    "get_alphabet",
    "custom_alphabet",
    "resolve_alphabet",
]
