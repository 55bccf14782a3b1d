from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PASSGEN_CONFIG"
WORDLIST_DIR_ENV_VAR = "PASSGEN_WORDLIST_DIR"
DEFAULT_CONFIG_PATH = Path("~/.config/passgen/settings.json")


@dataclass(frozen=True)
class Settings:
    password_length: int = 12
    passphrase_words: int = 3
    separator: str = "-"
    count: int = 1
    alphabet: str = "special"
    wordlist: str = "embedded"
    wordlist_dir: Optional[str] = None
    refill_bytes: int = 256


_TYPES = {
    "password_length": int,
    "passphrase_words": int,
    "separator": str,
    "count": int,
    "alphabet": str,
    "wordlist": str,
    "wordlist_dir": (str, type(None)),
    "refill_bytes": int,
}


def default_settings() -> Settings:
    return Settings()


def config_path(explicit: Optional[str] = None) -> Path:
    if explicit:
        return Path(explicit).expanduser()
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return DEFAULT_CONFIG_PATH.expanduser()


def load_json(path: Path) -> Any:
    if not path.exists():
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"settings file {path} is not valid JSON: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"cannot read settings file {path}: {exc}") from exc


def settings_from_mapping(data: dict, source: str = "settings") -> Settings:
    known = {f.name for f in fields(Settings)}
    values = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("ignoring unknown key %r in %s", key, source)
            continue
        expected = _TYPES[key]
        # bool is an int subclass; reject it for numeric fields
        if isinstance(value, bool) or not isinstance(value, expected):
            raise ConfigError(f"{source}: '{key}' has the wrong type ({type(value).__name__})")
        if key == "refill_bytes" and value < 1:
            raise ConfigError(f"{source}: 'refill_bytes' must be >= 1 (got {value})")
        values[key] = value
    return replace(default_settings(), **values)


def load_settings(path: Optional[str] = None) -> Settings:
    """
    Defaults, overlaid with the JSON settings file (if present) and then
    with PASSGEN_WORDLIST_DIR. The file is only ever read.
    """
    target = config_path(path)
    data = load_json(target)
    if data is None:
        if path:
            raise ConfigError(f"settings file {target} does not exist")
        settings = default_settings()
    elif not isinstance(data, dict):
        raise ConfigError(f"settings file {target} must hold a JSON object")
    else:
        settings = settings_from_mapping(data, source=str(target))
        logger.info("loaded settings from %s", target)

    env_dir = os.environ.get(WORDLIST_DIR_ENV_VAR)
    if env_dir:
        settings = replace(settings, wordlist_dir=env_dir)
    return settings
