"""
strength.py

Entropy-based strength estimates for passwords and passphrases.

What this module does

- Computes entropy as H = length * log2(symbol_space_size).
- Infers the symbol space from the character classes a password actually
  uses when the caller does not assert an alphabet.
- Maps entropy bits to a qualitative tier.
- Flags passwords found in a small packaged list of well-known passwords.

Tiers (bits, half-open ranges covering [0, inf))

- [0, 28)     very weak
- [28, 36)    weak
- [36, 60)    reasonable
- [60, 128)   strong
- [128, inf)  very strong

Detected classes

- lowercase 26, uppercase 26, digits 10, punctuation 32 (string.punctuation)
- other 100: any remaining character (space, non-ASCII). Like every other
  class it contributes its full size once any member appears, so "éééé"
  scores as a 100-symbol space.

Quick start

>>> from passgen.strength import analyze
>>> r = analyze("aaaa")
>>> round(r.bits, 1), r.tier.value
(18.8, 'very weak')
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from importlib import resources
from typing import FrozenSet, Optional, Tuple
import math
import string

from .errors import AlphabetMismatch, InvalidRange
from .symbols import SymbolKind, SymbolSet


#Tiers
class Tier(Enum):
    VERY_WEAK = "very weak"
    WEAK = "weak"
    REASONABLE = "reasonable"
    STRONG = "strong"
    VERY_STRONG = "very strong"


# (lower bound in bits, tier), highest first
TIER_THRESHOLDS: Tuple[Tuple[float, Tier], ...] = (
    (128.0, Tier.VERY_STRONG),
    (60.0, Tier.STRONG),
    (36.0, Tier.REASONABLE),
    (28.0, Tier.WEAK),
    (0.0, Tier.VERY_WEAK),
)


def classify(bits: float) -> Tier:
    """Tier for an entropy value (bits >= 0)."""
    if bits < 0 or math.isnan(bits):
        raise ValueError(f"entropy must be a non-negative number (got {bits})")
    for bound, tier in TIER_THRESHOLDS:
        if bits >= bound:
            return tier
    return Tier.VERY_WEAK


#Character classes
OTHER_CLASS_SIZE = 100

CHARACTER_CLASSES: Tuple[Tuple[str, str], ...] = (
    ("lowercase", string.ascii_lowercase),
    ("uppercase", string.ascii_uppercase),
    ("digits", string.digits),
    ("punctuation", string.punctuation),
)


def detect_symbol_space(text: str) -> Tuple[Tuple[str, ...], int]:
    """
    Return (observed class names, summed class size) for `text`.

    >>> detect_symbol_space("abc1")
    (('lowercase', 'digits'), 36)
    """
    remaining = set(text)
    classes = []
    size = 0
    for name, chars in CHARACTER_CLASSES:
        members = set(chars)
        if remaining & members:
            classes.append(name)
            size += len(members)
            remaining -= members
    if remaining:
        classes.append("other")
        size += OTHER_CLASS_SIZE
    return tuple(classes), size


#Entropy
def entropy_bits(length: int, symbol_space_size: int) -> float:
    """
    H = length * log2(symbol_space_size).

    A zero length always gives 0 bits; a space of size 1 gives 0 bits
    whatever the length.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative (got {length})")
    if length == 0:
        return 0.0
    if symbol_space_size < 1:
        raise InvalidRange(symbol_space_size)
    return length * math.log2(symbol_space_size)


@lru_cache(maxsize=None)
def common_passwords() -> FrozenSet[str]:
    """Packaged list of well-known passwords, loaded once."""
    text = (resources.files("passgen") / "wordlists" / "common_passwords.txt").read_text(
        encoding="utf-8"
    )
    return frozenset(
        line.strip().lower()
        for line in text.splitlines()
        if line.strip() and not line.startswith("#")
    )


def is_common(text: str) -> bool:
    return bool(text) and text.lower() in common_passwords()


#Reports
@dataclass(frozen=True)
class StrengthReport:
    """
    Derived strength figures for one input.

    `length` is in characters for passwords and in words for passphrases.
    `alphabet` names the asserted symbol set, or is None when the space
    was inferred from `classes`.
    """

    bits: float
    tier: Tier
    symbol_space_size: int
    length: int
    classes: Tuple[str, ...] = ()
    alphabet: Optional[str] = None
    common: bool = False

    @property
    def label(self) -> str:
        return self.tier.value


def analyze(text: str, symbol_space_size: Optional[int] = None) -> StrengthReport:
    """
    Estimate the strength of `text`.

    With `symbol_space_size` the caller asserts the size of the alphabet
    the password was drawn from; without it the size is inferred from the
    character classes present in `text`.
    """
    length = len(text)
    if symbol_space_size is None:
        classes, space = detect_symbol_space(text)
    else:
        classes, space = (), symbol_space_size
    bits = entropy_bits(length, space)
    return StrengthReport(
        bits=bits,
        tier=classify(bits),
        symbol_space_size=space,
        length=length,
        classes=classes,
        common=is_common(text),
    )


def analyze_against(text: str, alphabet: SymbolSet) -> StrengthReport:
    """
    Strength of `text` assuming it was drawn from `alphabet`.

    Raises AlphabetMismatch when `text` uses characters outside the set,
    since the estimate would otherwise be meaningless.
    """
    alphabet.require(SymbolKind.CHARACTERS)
    offending = [c for c in text if c not in alphabet]
    if offending:
        raise AlphabetMismatch(alphabet.name, offending)
    bits = entropy_bits(len(text), alphabet.size)
    return StrengthReport(
        bits=bits,
        tier=classify(bits),
        symbol_space_size=alphabet.size,
        length=len(text),
        alphabet=alphabet.name,
        common=is_common(text),
    )


def analyze_passphrase(word_count: int, wordlist: SymbolSet) -> StrengthReport:
    """Strength of a passphrase of `word_count` uniform draws from `wordlist`."""
    wordlist.require(SymbolKind.WORDS)
    bits = entropy_bits(word_count, wordlist.size)
    return StrengthReport(
        bits=bits,
        tier=classify(bits),
        symbol_space_size=wordlist.size,
        length=word_count,
        alphabet=wordlist.name,
    )


__all__ = [
    "Tier",
    "TIER_THRESHOLDS",
    "CHARACTER_CLASSES",
    "OTHER_CLASS_SIZE",
    "StrengthReport",
    "classify",
    "detect_symbol_space",
    "entropy_bits",
    "common_passwords",
    "is_common",
    "analyze",
    "analyze_against",
    "analyze_passphrase",
]
