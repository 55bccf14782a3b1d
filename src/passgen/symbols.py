"""
symbols.py

The ordered, duplicate-free symbol sets that generators draw from.

A `SymbolSet` is tagged with its `SymbolKind`: characters (alphabets) or
words (wordlists). Every symbol in a set is an equally likely outcome of
one draw, so the set never holds duplicates and is never empty.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from enum import Enum
from typing import Iterable, Iterator, Tuple
import math

from .errors import EmptyAlphabet, EmptyWordlist, SymbolKindMismatch


class SymbolKind(Enum):
    CHARACTERS = "characters"
    WORDS = "words"


@dataclass(frozen=True)
class SymbolSet:
    """
    Immutable symbol set.

    Build it with `SymbolSet.from_iterable`, which removes duplicates;
    the constructor assumes `symbols` is already unique.
    """

    kind: SymbolKind
    symbols: Tuple[str, ...]
    name: str = "custom"

    def __post_init__(self) -> None:
        if not self.symbols:
            raise _empty_error(self.kind)
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError("symbols must be unique; use SymbolSet.from_iterable")
        if self.kind is SymbolKind.CHARACTERS and any(len(s) != 1 for s in self.symbols):
            raise ValueError("character sets hold single characters only")

    @classmethod
    def from_iterable(
        cls,
        kind: SymbolKind,
        items: Iterable[str],
        name: str = "custom",
    ) -> "SymbolSet":
        """Deduplicate `items`, keeping first-seen order."""
        unique = tuple(dict.fromkeys(items))
        if not unique:
            raise _empty_error(kind)
        return cls(kind=kind, symbols=unique, name=name)

    @property
    def size(self) -> int:
        return len(self.symbols)

    @property
    def entropy_per_symbol(self) -> float:
        """Bits contributed by one uniform draw: log2(size)."""
        return math.log2(self.size)

    def require(self, kind: SymbolKind) -> "SymbolSet":
        """Return self, or raise if this set is of another kind."""
        if self.kind is not kind:
            raise SymbolKindMismatch(
                f"'{self.name}' is a set of {self.kind.value}, expected {kind.value}"
            )
        return self

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __contains__(self, item: object) -> bool:
        return item in self._members

    def __getitem__(self, index: int) -> str:
        return self.symbols[index]

    @cached_property
    def _members(self) -> frozenset:
        return frozenset(self.symbols)


def _empty_error(kind: SymbolKind) -> Exception:
    if kind is SymbolKind.WORDS:
        return EmptyWordlist()
    return EmptyAlphabet()


__all__ = ["SymbolKind", "SymbolSet"]
