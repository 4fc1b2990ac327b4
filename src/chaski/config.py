"""Configuration for Chaski.

Reads from config/chaski.ini if present, environment variables override.
The obfuscation secret is never checked into version control.
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

_CONFIG_FILE = Path(__file__).resolve().parent.parent.parent / "config" / "chaski.ini"


@dataclass(frozen=True)
class ChaskiConfig:
    """Parameter accessor configuration. Immutable once loaded."""

    leader: str = ""
    secret: str = ""
    min_length: int = 8
    labels: tuple[str, ...] = ()


def _split_labels(raw: str) -> tuple[str, ...]:
    return tuple(label.strip() for label in raw.split(",") if label.strip())


def load_config(config_path: Path | None = None) -> ChaskiConfig:
    """Load config from INI file, then override with environment variables."""
    path = config_path or _CONFIG_FILE
    kwargs: dict = {}

    if path.exists():
        parser = configparser.ConfigParser()
        parser.read(path)
        if parser.has_section("cgi"):
            val = parser.get("cgi", "leader", fallback=None)
            if val is not None:
                kwargs["leader"] = val
        if parser.has_section("obfuscator"):
            val = parser.get("obfuscator", "secret", fallback=None)
            if val is not None:
                kwargs["secret"] = val
            min_length_str = parser.get("obfuscator", "min_length", fallback=None)
            if min_length_str is not None:
                kwargs["min_length"] = int(min_length_str)
            labels_str = parser.get("obfuscator", "labels", fallback=None)
            if labels_str is not None:
                kwargs["labels"] = _split_labels(labels_str)

    env_map = {
        "CHASKI_LEADER": "leader",
        "CHASKI_SECRET": "secret",
        "CHASKI_MIN_LENGTH": "min_length",
        "CHASKI_LABELS": "labels",
    }
    for env_key, config_key in env_map.items():
        val = os.getenv(env_key)
        if val is not None:
            if config_key == "min_length":
                kwargs[config_key] = int(val)
            elif config_key == "labels":
                kwargs[config_key] = _split_labels(val)
            else:
                kwargs[config_key] = val

    if "leader" in kwargs:
        kwargs["leader"] = kwargs["leader"].rstrip("/")
    return ChaskiConfig(**kwargs)
