import logging

import pytest

from passgen import wordlists
from passgen.sampler import BitPool


class ScriptedEntropy:
    """Hands out a fixed byte script, then zero bytes; counts every request."""

    def __init__(self, script: bytes = b""):
        self.script = bytearray(script)
        self.calls = 0

    def __call__(self, n: int) -> bytes:
        self.calls += 1
        head = bytes(self.script[:n])
        del self.script[:n]
        return head + bytes(n - len(head))


@pytest.fixture
def scripted_pool():
    """Build a BitPool whose bits are fully known in advance."""

    def make(script: bytes, refill_bytes: int = 1) -> BitPool:
        return BitPool(refill_bytes=refill_bytes, entropy=ScriptedEntropy(script))

    return make


@pytest.fixture(autouse=True)
def fresh_wordlist_cache():
    wordlists.clear_cache()
    yield
    wordlists.clear_cache()


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """No user settings file and no wordlist directory override."""
    monkeypatch.setenv("PASSGEN_CONFIG", str(tmp_path / "absent-settings.json"))
    monkeypatch.delenv("PASSGEN_WORDLIST_DIR", raising=False)
    return tmp_path


@pytest.fixture(autouse=True)
def detach_cli_log_handlers():
    """The CLI binds a handler to the captured stderr of the test that ran it."""
    yield
    logger = logging.getLogger("passgen")
    for handler in [h for h in logger.handlers if getattr(h, "_passgen", False)]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
