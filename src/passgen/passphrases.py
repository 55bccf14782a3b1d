"""
passphrases.py

Diceware-style passphrases: `word_count` independent, unbiased draws from
a wordlist (with replacement), joined by a separator.

The separator is used verbatim: no trimming, no case changes, and the
empty string is allowed.

Quick start
>>> from passgen.wordlists import get_wordlist
>>> from passgen.passphrases import generate_passphrase
>>> generate_passphrase(get_wordlist("embedded"), 4, separator=".")
'otter.quartz.lamp.ferry'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from . import sampler
from .batch import generate_n
from .errors import InvalidLength
from .symbols import SymbolKind, SymbolSet
from .wordlists import DEFAULT_WORDLIST, get_wordlist

DEFAULT_SEPARATOR = "-"


@dataclass
class PassphraseGenerator:
    """
    Generate passphrases over one wordlist.

    Parameters

    wordlist : SymbolSet, default=the embedded list
    separator : str, default="-"
    pool : sampler.BitPool, optional
    """

    wordlist: SymbolSet = field(default_factory=lambda: get_wordlist(DEFAULT_WORDLIST))
    separator: str = DEFAULT_SEPARATOR
    pool: Optional[sampler.BitPool] = None

    def __post_init__(self) -> None:
        if self.pool is None:
            self.pool = sampler.default_pool()
        self.wordlist.require(SymbolKind.WORDS)

    @property
    def per_word_entropy_bits(self) -> float:
        return self.wordlist.entropy_per_symbol

    def entropy_bits(self, word_count: int) -> float:
        if word_count < 1:
            raise InvalidLength(word_count, unit="word count")
        return word_count * self.per_word_entropy_bits

    def passphrase(self, word_count: int) -> str:
        if word_count < 1:
            raise InvalidLength(word_count, unit="word count")
        idxs = self.pool.uniform_ints(self.wordlist.size, size=word_count)
        return self.separator.join(self.wordlist[i] for i in idxs)

    def passphrases(self, word_count: int, count: int) -> List[str]:
        return generate_n(count, lambda: self.passphrase(word_count))


def generate_passphrase(
    wordlist: SymbolSet,
    word_count: int,
    separator: str = DEFAULT_SEPARATOR,
    pool: Optional[sampler.BitPool] = None,
) -> str:
    """One-shot helper: a single passphrase of `word_count` words."""
    gen = PassphraseGenerator(wordlist=wordlist, separator=separator, pool=pool)
    return gen.passphrase(word_count)


__all__ = [
    "DEFAULT_SEPARATOR",
    "PassphraseGenerator",
    "generate_passphrase",
]
