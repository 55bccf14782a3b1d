"""
errors.py

Every failure passgen reports to a caller.

All kinds derive from `PassgenError`, itself a `ValueError`, so library
callers may catch either. The CLI catches `PassgenError` once, prints the
message and exits non-zero.
"""

from __future__ import annotations

from typing import Iterable


class PassgenError(ValueError):
    """Base class for passgen errors."""


class InvalidRange(PassgenError):
    """A sampling range or symbol space of size < 1."""

    def __init__(self, n: int) -> None:
        super().__init__(f"range size must be >= 1 (got {n})")
        self.n = n


class EmptyAlphabet(PassgenError):
    def __init__(self, message: str = "alphabet is empty; supply at least one character") -> None:
        super().__init__(message)


class EmptyWordlist(PassgenError):
    def __init__(self, message: str = "wordlist is empty; supply at least one word") -> None:
        super().__init__(message)


class UnknownPreset(PassgenError):
    """An alphabet or wordlist name that is not registered."""

    def __init__(self, kind: str, name: str, valid: Iterable[str]) -> None:
        self.kind = kind
        self.name = name
        self.valid = sorted(valid)
        super().__init__(
            f"unknown {kind} '{name}'; choose one of: {', '.join(self.valid)}"
        )


class InvalidLength(PassgenError):
    def __init__(self, length: int, unit: str = "length") -> None:
        super().__init__(f"{unit} must be >= 1 (got {length})")
        self.length = length


class InvalidCount(PassgenError):
    def __init__(self, count: int) -> None:
        super().__init__(f"count must be >= 1 (got {count})")
        self.count = count


class ConflictingSource(PassgenError):
    """Both a preset name and custom symbols were supplied."""


class SymbolKindMismatch(PassgenError):
    """A word set was handed to a character generator, or vice versa."""


class AlphabetMismatch(PassgenError):
    """A checked password holds characters outside the asserted alphabet."""

    def __init__(self, alphabet: str, offending: Iterable[str]) -> None:
        self.offending = sorted(set(offending))
        shown = "".join(self.offending)
        super().__init__(
            f"password contains characters not in the '{alphabet}' alphabet: {shown!r}"
        )


class WordlistUnavailable(PassgenError):
    """A wordlist data file is missing or malformed."""


class ConfigError(PassgenError):
    """The settings file could not be used."""


__all__ = [
    "PassgenError",
    "InvalidRange",
    "EmptyAlphabet",
    "EmptyWordlist",
    "UnknownPreset",
    "InvalidLength",
    "InvalidCount",
    "ConflictingSource",
    "SymbolKindMismatch",
    "AlphabetMismatch",
    "WordlistUnavailable",
    "ConfigError",
]
