"""Tests for password and passphrase generation."""

import math

import pytest

from passgen.alphabets import custom_alphabet, get_alphabet
from passgen.errors import InvalidCount, InvalidLength, SymbolKindMismatch
from passgen.passphrases import PassphraseGenerator, generate_passphrase
from passgen.passwords import PasswordGenerator, generate_password
from passgen.wordlists import custom_wordlist, get_wordlist


@pytest.mark.parametrize("name", ["lowercase", "uppercase", "digits", "alphanumeric", "special"])
@pytest.mark.parametrize("length", [1, 2, 12, 64])
def test_password_length_and_membership(name, length):
    alphabet = get_alphabet(name)
    pw = generate_password(alphabet, length)
    assert len(pw) == length
    assert all(c in alphabet for c in pw)


def test_deduplicated_custom_alphabet_only_yields_its_symbols():
    alphabet = custom_alphabet("aabbcc")
    for _ in range(50):
        pw = generate_password(alphabet, 10)
        assert len(pw) == 10
        assert set(pw) <= {"a", "b", "c"}


def test_single_symbol_alphabet():
    assert generate_password(custom_alphabet("x"), 7) == "xxxxxxx"


def test_password_follows_draw_order(scripted_pool):
    # two symbols -> one bit per draw
    pool = scripted_pool(bytes([0b10100000]))
    assert generate_password(custom_alphabet("ab"), 4, pool=pool) == "baba"


def test_password_draws_with_replacement(scripted_pool):
    pool = scripted_pool(bytes([0b11111111]))
    assert generate_password(custom_alphabet("abcd"), 4, pool=pool) == "dddd"


@pytest.mark.parametrize("length", [0, -3])
def test_password_rejects_bad_length(length):
    with pytest.raises(InvalidLength):
        generate_password(get_alphabet("lowercase"), length)


def test_password_generator_rejects_wordlist():
    with pytest.raises(SymbolKindMismatch):
        PasswordGenerator(alphabet=custom_wordlist(["one", "two"]))


def test_password_generator_entropy():
    gen = PasswordGenerator()
    assert gen.alphabet.size == 94
    assert gen.entropy_bits(16) == pytest.approx(16 * math.log2(94))


def test_passwords_batch():
    out = PasswordGenerator(alphabet=get_alphabet("alphanumeric")).passwords(length=20, count=4)
    assert len(out) == 4
    assert all(len(p) == 20 for p in out)


def test_passwords_batch_rejects_zero_count():
    with pytest.raises(InvalidCount):
        PasswordGenerator().passwords(length=8, count=0)


@pytest.mark.parametrize("word_count", [1, 3, 8])
def test_passphrase_word_count(word_count):
    wordlist = get_wordlist("embedded")
    phrase = generate_passphrase(wordlist, word_count)
    parts = phrase.split("-")
    assert len(parts) == word_count
    assert all(p in wordlist for p in parts)


@pytest.mark.parametrize("separator", [" ", "_", " :: ", "."])
def test_passphrase_separator_is_verbatim(separator):
    wordlist = custom_wordlist(["apple", "banana", "cherry"])
    phrase = generate_passphrase(wordlist, 3, separator=separator)
    parts = phrase.split(separator)
    assert len(parts) == 3
    assert all(p in {"apple", "banana", "cherry"} for p in parts)


def test_passphrase_empty_separator(scripted_pool):
    pool = scripted_pool(bytes([0b00011011]))
    wordlist = custom_wordlist(["ab", "cd", "ef", "gh"])
    assert generate_passphrase(wordlist, 4, separator="", pool=pool) == "abcdefgh"


def test_passphrase_follows_draw_order(scripted_pool):
    pool = scripted_pool(bytes([0b11100100]))
    wordlist = custom_wordlist(["zero", "one", "two", "three"])
    assert generate_passphrase(wordlist, 4, pool=pool) == "three-two-one-zero"


def test_single_word_passphrase_has_no_separator():
    assert generate_passphrase(custom_wordlist(["single"]), 1) == "single"


def test_passphrase_keeps_word_case():
    phrase = generate_passphrase(custom_wordlist(["MiXeD"]), 2, separator="+")
    assert phrase == "MiXeD+MiXeD"


@pytest.mark.parametrize("word_count", [0, -1])
def test_passphrase_rejects_bad_word_count(word_count):
    with pytest.raises(InvalidLength):
        generate_passphrase(get_wordlist("embedded"), word_count)


def test_passphrase_generator_rejects_alphabet():
    with pytest.raises(SymbolKindMismatch):
        PassphraseGenerator(wordlist=get_alphabet("lowercase"))


def test_passphrase_generator_entropy_and_batch():
    gen = PassphraseGenerator(separator=" ")
    assert gen.entropy_bits(5) == pytest.approx(5 * math.log2(1296))
    phrases = gen.passphrases(word_count=5, count=3)
    assert len(phrases) == 3
    assert all(len(p.split(" ")) == 5 for p in phrases)


def test_passphrases_vary():
    wordlist = custom_wordlist([f"word{i}" for i in range(6)])
    phrases = {generate_passphrase(wordlist, 3) for _ in range(10)}
    assert len(phrases) > 1
