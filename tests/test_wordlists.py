import itertools

import pytest

from passgen import wordlists
from passgen.errors import (
    ConflictingSource,
    EmptyWordlist,
    UnknownPreset,
    WordlistUnavailable,
)
from passgen.symbols import SymbolKind
from passgen.wordlists import (
    custom_wordlist,
    get_wordlist,
    load_wordlist_file,
    parse_line,
    resolve_wordlist,
)


def _write_eff(path, dice, prefix="w"):
    rolls = ["".join(r) for r in itertools.product("123456", repeat=dice)]
    path.write_text(
        "".join(f"{roll}\t{prefix}{i}\n" for i, roll in enumerate(rolls)),
        encoding="utf-8",
    )
    return len(rolls)


def test_parse_line_formats():
    assert parse_line("11111\tabacus") == "abacus"
    assert parse_line("11112\tabdomen\n") == "abdomen"
    assert parse_line("1111 abacus") == "abacus"
    assert parse_line("abacus") == "abacus"
    assert parse_line("") is None
    assert parse_line("   ") is None
    assert parse_line("# comment") is None


def test_embedded_wordlist():
    words = get_wordlist("embedded")
    assert words.kind is SymbolKind.WORDS
    assert words.size == 1296
    assert len(set(words)) == 1296
    assert all(w.isalpha() and w.islower() for w in words)


def test_wordlists_are_cached():
    assert get_wordlist("embedded") is get_wordlist("embedded")


def test_unknown_wordlist():
    with pytest.raises(UnknownPreset) as excinfo:
        get_wordlist("bogus")
    assert "eff-large" in str(excinfo.value)


def test_wordlist_dir_overrides_packaged_lists(tmp_path):
    assert _write_eff(tmp_path / "eff_large_wordlist.txt", 5) == 7776
    _write_eff(tmp_path / "eff_short_wordlist_1.txt", 4, prefix="a")
    _write_eff(tmp_path / "eff_short_wordlist_2_0.txt", 4, prefix="b")

    large = get_wordlist("eff-large", tmp_path)
    short1 = get_wordlist("eff-short1", tmp_path)
    short2 = get_wordlist("eff-short2", tmp_path)

    assert large.size == 7776
    assert short1.size == 1296
    assert short2.size == 1296
    assert short1.symbols != short2.symbols
    assert large[0] == "w0"


def test_only_requested_list_is_loaded(tmp_path):
    _write_eff(tmp_path / "eff_short_wordlist_1.txt", 4)
    get_wordlist("eff-short1", tmp_path)
    assert list(wordlists._cache) == [("eff-short1", str(tmp_path))]


def test_missing_eff_file(tmp_path, monkeypatch):
    monkeypatch.setattr(wordlists, "DATA_DIR", "no-such-dir")
    with pytest.raises(WordlistUnavailable) as excinfo:
        get_wordlist("eff-large", tmp_path)
    assert str(tmp_path) in str(excinfo.value)


def test_eff_file_with_wrong_size(tmp_path):
    (tmp_path / "eff_short_wordlist_1.txt").write_text("1111\tone\n1112\ttwo\n", encoding="utf-8")
    with pytest.raises(WordlistUnavailable):
        get_wordlist("eff-short1", tmp_path)


@pytest.mark.parametrize(
    "name,size,first,last",
    [
        ("eff-large", 7776, "abacus", "zoom"),
        ("eff-short1", 1296, "acid", "zoom"),
        ("eff-short2", 1296, "aardvark", "zucchini"),
    ],
)
def test_packaged_eff_lists(name, size, first, last):
    words = get_wordlist(name)
    assert words.size == size
    assert len(set(words)) == size
    assert words[0] == first
    assert words[-1] == last


def test_packaged_eff_large_keeps_dice_order():
    words = get_wordlist("eff-large")
    assert words[:3] == ("abacus", "abdomen", "abdominal")
    assert "abdomen" in words


def test_packaged_eff_short_lists_differ():
    assert get_wordlist("eff-short1").symbols != get_wordlist("eff-short2").symbols


def test_custom_wordlist_cleans_input():
    words = custom_wordlist(["apple", " banana ", "", "apple", "  "])
    assert words.symbols == ("apple", "banana")


@pytest.mark.parametrize("words", [[], [""], ["  ", "\t"]])
def test_empty_custom_wordlist(words):
    with pytest.raises(EmptyWordlist):
        custom_wordlist(words)


def test_load_wordlist_file_plain(tmp_path):
    path = tmp_path / "mine.txt"
    path.write_text("# mine\nkiwi\nfig\n\nkiwi\n", encoding="utf-8")
    words = load_wordlist_file(path)
    assert words.symbols == ("kiwi", "fig")
    assert words.name == "mine.txt"


def test_load_wordlist_file_missing(tmp_path):
    with pytest.raises(WordlistUnavailable):
        load_wordlist_file(tmp_path / "nope.txt")


def test_load_wordlist_file_empty(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("# nothing here\n", encoding="utf-8")
    with pytest.raises(EmptyWordlist):
        load_wordlist_file(path)


def test_resolve_wordlist_sources(tmp_path):
    assert resolve_wordlist().name == "embedded"
    assert resolve_wordlist(custom=["a", "b"]).size == 2
    path = tmp_path / "w.txt"
    path.write_text("x\ny\nz\n", encoding="utf-8")
    assert resolve_wordlist(custom_file=path).size == 3


def test_resolve_wordlist_rejects_two_sources():
    with pytest.raises(ConflictingSource):
        resolve_wordlist(name="embedded", custom=["a"])


def test_resolve_wordlist_unknown_name():
    with pytest.raises(UnknownPreset):
        resolve_wordlist(name="bogus")
