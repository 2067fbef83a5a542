import os
import sys
from functools import lru_cache
from pathlib import Path
from typing import TextIO

import yaml

STREAMS = ("stdout", "stderr")


def config_file() -> Path:
    """Return the config file path, honoring TIMEDTASK_CONFIG."""
    override = os.environ.get("TIMEDTASK_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "timedtask" / "config.yaml"


def _normalize_stream(value, source: str) -> str:
    name = str(value).strip().lower()
    if name not in STREAMS:
        raise ValueError(f"{source} must be one of {', '.join(STREAMS)}, got {value!r}")
    return name


def _validate_config(cfg: dict) -> None:
    """Validate config structure. Fail fast on invalid types."""
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a dict, got {type(cfg).__name__}")

    if cfg.get("stream") is not None:
        cfg["stream"] = _normalize_stream(cfg["stream"], "Config 'stream'")


def _clear_cache():
    load_config.cache_clear()


@lru_cache(maxsize=1)
def load_config() -> dict:
    """Load the config file, returning its content or an empty dict if not found."""
    path = config_file()
    if not path.exists():
        return {}
    with open(path) as f:
        cfg = yaml.safe_load(f) or {}
    _validate_config(cfg)
    return cfg


def default_stream_name() -> str:
    name = os.environ.get("TIMEDTASK_STREAM")
    if name:
        return _normalize_stream(name, "TIMEDTASK_STREAM")
    return load_config().get("stream") or "stdout"


def default_output() -> TextIO:
    """Return the process-wide default output stream, looked up at call time."""
    if default_stream_name() == "stderr":
        return sys.stderr
    return sys.stdout
