"""
passwords.py

Random passwords over a character alphabet.

Every character is an independent draw from `BitPool.uniform_ints`, so a
password of length L over an alphabet of size N carries L * log2(N) bits.
Characters may repeat.

>>> from passgen.alphabets import get_alphabet
>>> from passgen.passwords import generate_password
>>> len(generate_password(get_alphabet("special"), 16))
16
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from . import sampler
from .alphabets import DEFAULT_ALPHABET, get_alphabet
from .batch import generate_n
from .errors import InvalidLength
from .symbols import SymbolKind, SymbolSet


@dataclass
class PasswordGenerator:
    """
    Password source bound to one alphabet and one bit pool.

    A word list is refused with `SymbolKindMismatch`; when no pool is
    given the process-wide `sampler.default_pool()` is used.
    """

    alphabet: SymbolSet = field(default_factory=lambda: get_alphabet(DEFAULT_ALPHABET))
    pool: Optional[sampler.BitPool] = None

    def __post_init__(self) -> None:
        self.alphabet.require(SymbolKind.CHARACTERS)
        if self.pool is None:
            self.pool = sampler.default_pool()

    def entropy_bits(self, length: int) -> float:
        if length < 1:
            raise InvalidLength(length)
        return length * self.alphabet.entropy_per_symbol

    def password(self, length: int) -> str:
        if length < 1:
            raise InvalidLength(length)
        picks = self.pool.uniform_ints(self.alphabet.size, size=length)
        return "".join(self.alphabet[i] for i in picks)

    def passwords(self, length: int, count: int) -> List[str]:
        """`count` independent passwords, in generation order."""
        return generate_n(count, lambda: self.password(length))


def generate_password(
    alphabet: SymbolSet,
    length: int,
    pool: Optional[sampler.BitPool] = None,
) -> str:
    return PasswordGenerator(alphabet=alphabet, pool=pool).password(length)


__all__ = [
    "PasswordGenerator",
    "generate_password",
]
