"""
Configuration — loads settings from .shared_diff.yaml, environment variables,
and built-in defaults (in that priority order: env > YAML > defaults).
"""

from __future__ import annotations

import logging
import os

import yaml

logger = logging.getLogger(__name__)


_DEFAULTS = {
    "log_level": "WARNING",
    "log_dir": "",
    "summary_top_n": 0,
}

# Config file search locations
_CONFIG_FILENAMES = [".shared_diff.yaml", ".shared_diff.yml"]


def _find_config_file(explicit_path: str | None = None) -> str | None:
    """Find the config file. Checks explicit path, CWD, then user home."""
    if explicit_path:
        if os.path.isfile(explicit_path):
            return explicit_path
        return None

    # Search CWD first, then home directory
    search_dirs = [os.getcwd(), os.path.expanduser("~")]
    for d in search_dirs:
        for name in _CONFIG_FILENAMES:
            path = os.path.join(d, name)
            if os.path.isfile(path):
                return path
    return None


def _load_yaml(path: str) -> dict:
    """Load YAML file, returns empty dict on failure."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("[Config] Could not read %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


class Config:
    """Library configuration.

    Settings are resolved in priority order:
    1. Environment variables
    2. .shared_diff.yaml config file
    3. Built-in defaults
    """

    def __init__(self, yaml_data: dict | None = None):
        yd = yaml_data or {}

        # Helper: env var > yaml > default
        def _get(env_key: str, yaml_key: str, default, cast=str):
            for raw in (os.getenv(env_key), yd.get(yaml_key)):
                if raw is None:
                    continue
                try:
                    return cast(raw)
                except (TypeError, ValueError):
                    logger.warning("[Config] Invalid value for %s: %r",
                                   yaml_key, raw)
                    return default
            return default

        self.LOG_LEVEL = _get("SHARED_DIFF_LOG_LEVEL", "log_level",
                              _DEFAULTS["log_level"]).upper()
        self.LOG_DIR = _get("SHARED_DIFF_LOG_DIR", "log_dir",
                            _DEFAULTS["log_dir"])
        self.SUMMARY_TOP_N = _get("SHARED_DIFF_SUMMARY_TOP_N", "summary_top_n",
                                  _DEFAULTS["summary_top_n"], cast=int)

    @classmethod
    def load(cls, config_path: str | None = None) -> "Config":
        """Load config from YAML file (if found) + env vars + defaults."""
        path = _find_config_file(config_path)
        yaml_data = _load_yaml(path) if path else {}
        return cls(yaml_data)
