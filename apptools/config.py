"""
Config — process-wide settings loaded from an optional YAML file
=================================================================
Schema (all fields optional):

    platform: android       # default target platform, default "android"
    verbose: false          # debug-level diagnostics, default false
    quiet: false            # suppress non-error terminal output, default false

The file is located through the APPTOOLS_CONFIG environment variable (the
CLI loads a .env file first, so it may be set there). With the variable
unset, defaults are used.

Usage:
    from apptools.config import get_config
    platform = get_config().platform
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .exceptions import ConfigError

logger = logging.getLogger("apptools.config")

CONFIG_ENV_VAR = "APPTOOLS_CONFIG"

_KNOWN_KEYS = frozenset({"platform", "verbose", "quiet"})

# ── Module-level singleton (reset between tests) ───────────────────────────────
_config: Optional["Config"] = None


@dataclass
class Config:
    platform: str = "android"
    verbose: bool = False
    quiet: bool = False
    source: Optional[Path] = None   # file the values came from, None → defaults


def load_config(path: Union[str, Path]) -> Config:
    """
    Parse a YAML config file and return a Config.

    Raises
    ------
    ConfigError — file missing, not valid YAML, not a mapping, or bad values
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw: Any = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"'{path}': invalid YAML: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"'{path}': top level must be a mapping")

    for key in sorted(set(raw) - _KNOWN_KEYS):
        logger.warning("'%s': ignoring unknown config key '%s'", path, key)

    platform = str(raw.get("platform", "android")).strip()
    if not platform:
        raise ConfigError(f"'{path}': 'platform' must not be empty")

    return Config(
        platform=platform,
        verbose=_as_bool(raw.get("verbose", False), "verbose", path),
        quiet=_as_bool(raw.get("quiet", False), "quiet", path),
        source=path,
    )


def get_config() -> Config:
    """Return the process-wide Config, loading it on first use."""
    global _config
    if _config is None:
        env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if env_path:
            _config = load_config(env_path)
            logger.debug("Config loaded from %s", env_path)
        else:
            _config = Config()
    return _config


def reset_config() -> None:
    global _config
    _config = None


def _as_bool(value: Any, key: str, source: Path) -> bool:
    if isinstance(value, bool):
        return value
    raise ConfigError(f"'{source}': '{key}' must be true or false, got {value!r}")
