import itertools

import pytest

from passgen.alphabets import get_alphabet
from passgen.batch import generate_n
from passgen.errors import InvalidCount, InvalidLength
from passgen.passwords import generate_password


def test_batch_of_passwords():
    alphabet = get_alphabet("special")
    out = generate_n(5, lambda: generate_password(alphabet, 10))
    assert isinstance(out, list)
    assert len(out) == 5
    assert all(len(p) == 10 for p in out)
    assert len(set(out)) == 5


def test_batch_keeps_call_order():
    counter = itertools.count()
    assert generate_n(4, lambda: str(next(counter))) == ["0", "1", "2", "3"]


@pytest.mark.parametrize("n", [0, -2])
def test_batch_rejects_bad_count(n):
    calls = []
    with pytest.raises(InvalidCount):
        generate_n(n, lambda: calls.append(1) or "x")
    assert calls == []


def test_batch_propagates_first_failure():
    calls = []

    def flaky():
        calls.append(1)
        if len(calls) == 3:
            raise InvalidLength(0)
        return "ok"

    with pytest.raises(InvalidLength):
        generate_n(5, flaky)
    assert len(calls) == 3
