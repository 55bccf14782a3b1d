"""
wordlists.py

Diceware wordlists: the packaged default, the EFF lists and custom lists.

Aim:
1) Resolve a wordlist name to a `SymbolSet` of words.
2) Load each list at most once per process, and only when it is asked for.
3) Accept both plain files (one word per line) and the EFF layout
   ("11111<TAB>abacus").

Registered lists

- embedded    1296 words, 4 dice  (embedded.txt)
- eff-large   7776 words, 5 dice  (eff_large_wordlist.txt)
- eff-short1  1296 words, 4 dice  (eff_short_wordlist_1.txt)
- eff-short2  1296 words, 4 dice  (eff_short_wordlist_2_0.txt)

All four files ship in the package's `wordlists/` data directory. When a
wordlist directory is configured, a file of the same name there takes
precedence over the packaged copy.

The EFF lists are published by the Electronic Frontier Foundation under
CC BY 3.0 US.

Quick start
>>> from passgen.wordlists import get_wordlist
>>> get_wordlist("embedded").size
1296
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union
import logging
import threading

from .errors import ConflictingSource, EmptyWordlist, UnknownPreset, WordlistUnavailable
from .symbols import SymbolKind, SymbolSet

logger = logging.getLogger(__name__)

DEFAULT_WORDLIST = "embedded"
DATA_PACKAGE = "passgen"
DATA_DIR = "wordlists"

PathLike = Union[str, Path]


@dataclass(frozen=True)
class _Preset:
    filename: str
    dice: int

    @property
    def expected_size(self) -> int:
        return 6 ** self.dice


_REGISTRY: Dict[str, _Preset] = {
    "embedded": _Preset("embedded.txt", 4),
    "eff-large": _Preset("eff_large_wordlist.txt", 5),
    "eff-short1": _Preset("eff_short_wordlist_1.txt", 4),
    "eff-short2": _Preset("eff_short_wordlist_2_0.txt", 4),
}

# (name, search_dir) -> loaded list; filled lazily, never mutated afterwards
_cache: Dict[Tuple[str, Optional[str]], SymbolSet] = {}
_cache_lock = threading.Lock()


#Parsing
def parse_line(line: str) -> Optional[str]:
    """
    Extract the word from one wordlist line, or None for blanks/comments.

    >>> parse_line("11111\\tabacus")
    'abacus'
    >>> parse_line("abacus")
    'abacus'
    """
    text = line.strip()
    if not text or text.startswith("#"):
        return None
    if "\t" in text:
        word = text.split("\t", 1)[1].strip()
        return word or None
    head, _, tail = text.partition(" ")
    if tail and head.isdigit() and set(head) <= set("123456"):
        return tail.strip() or None
    return text


def parse_lines(lines: Iterable[str]) -> List[str]:
    words = []
    for line in lines:
        word = parse_line(line)
        if word is not None:
            words.append(word)
    return words


#Loading
def load_wordlist_file(path: PathLike, name: Optional[str] = None) -> SymbolSet:
    """Read a wordlist file from disk. Repeated words are dropped."""
    p = Path(path).expanduser()
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise WordlistUnavailable(f"cannot read wordlist file {p}: {exc.strerror or exc}") from exc
    words = parse_lines(text.splitlines())
    if not words:
        raise EmptyWordlist(f"wordlist file {p} contains no words")
    return SymbolSet.from_iterable(SymbolKind.WORDS, words, name=name or p.name)


def _read_preset_text(preset: _Preset, search_dir: Optional[PathLike]) -> Tuple[str, str]:
    searched = []
    if search_dir is not None:
        candidate = Path(search_dir).expanduser() / preset.filename
        searched.append(str(candidate))
        if candidate.is_file():
            return candidate.read_text(encoding="utf-8"), str(candidate)
    packaged = resources.files(DATA_PACKAGE) / DATA_DIR / preset.filename
    searched.append(str(packaged))
    if packaged.is_file():
        return packaged.read_text(encoding="utf-8"), str(packaged)
    raise WordlistUnavailable(
        f"wordlist file '{preset.filename}' not found; searched: {', '.join(searched)}"
    )


def _load_preset(name: str, search_dir: Optional[PathLike]) -> SymbolSet:
    preset = _REGISTRY[name]
    text, origin = _read_preset_text(preset, search_dir)
    words = SymbolSet.from_iterable(SymbolKind.WORDS, parse_lines(text.splitlines()), name=name)
    if words.size != preset.expected_size:
        raise WordlistUnavailable(
            f"wordlist '{name}' at {origin} has {words.size} unique words, "
            f"expected {preset.expected_size}"
        )
    logger.debug("loaded wordlist %s (%d words) from %s", name, words.size, origin)
    return words


#Registry
def wordlist_names() -> list:
    return list(_REGISTRY)


def get_wordlist(name: str, search_dir: Optional[PathLike] = None) -> SymbolSet:
    """
    Resolve a registered wordlist, loading it on first use.

    Unknown names raise `UnknownPreset`; missing or malformed data files
    raise `WordlistUnavailable`.
    """
    if name not in _REGISTRY:
        raise UnknownPreset("wordlist", name, _REGISTRY)
    key = (name, str(search_dir) if search_dir is not None else None)
    cached = _cache.get(key)
    if cached is not None:
        return cached
    with _cache_lock:
        if key not in _cache:
            _cache[key] = _load_preset(name, search_dir)
        return _cache[key]


def clear_cache() -> None:
    """Forget every loaded list (tests only)."""
    with _cache_lock:
        _cache.clear()


def custom_wordlist(words: Sequence[str]) -> SymbolSet:
    """Build a wordlist from caller words; blanks are dropped, repeats removed."""
    cleaned = [w.strip() for w in words if w and w.strip()]
    if not cleaned:
        raise EmptyWordlist("custom wordlist is empty; supply at least one word")
    return SymbolSet.from_iterable(SymbolKind.WORDS, cleaned, name="custom")


def resolve_wordlist(
    name: Optional[str] = None,
    custom: Optional[Sequence[str]] = None,
    custom_file: Optional[PathLike] = None,
    search_dir: Optional[PathLike] = None,
    default: str = DEFAULT_WORDLIST,
) -> SymbolSet:
    """Pick exactly one word source for a request; `default` when none is given."""
    given = [src for src in (name, custom, custom_file) if src is not None]
    if len(given) > 1:
        raise ConflictingSource(
            "give only one of a wordlist name, custom words or a custom wordlist file"
        )
    if custom is not None:
        return custom_wordlist(custom)
    if custom_file is not None:
        return load_wordlist_file(custom_file)
    return get_wordlist(name if name is not None else default, search_dir)


__all__ = [
    "DEFAULT_WORDLIST",
    "parse_line",
    "parse_lines",
    "load_wordlist_file",
    "wordlist_names",
    "get_wordlist",
    "clear_cache",
    "custom_wordlist",
    "resolve_wordlist",
]
