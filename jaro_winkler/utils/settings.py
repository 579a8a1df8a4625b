"""
Settings management for jaro_winkler.

Settings are loaded from a YAML file merged over built-in defaults. They never
change the scoring constants themselves: ``get_jaro_winkler_params`` turns the
``jaro_winkler`` section into keyword arguments that callers pass explicitly
to ``jaro_winkler_distance``.
"""

import copy
import functools
import math
import os
from pathlib import Path
from typing import Any, Dict, List

import yaml

from jaro_winkler.similarity.constants import (
    JARO_WINKLER_BOOST_THRESHOLD,
    JARO_WINKLER_PREFIX_SIZE,
    JARO_WINKLER_SCALING_FACTOR,
)
from jaro_winkler.utils.logging_utils import DEFAULT_LOG_FORMAT, get_logger

logger = get_logger(__name__)

__all__ = [
    "DEFAULTS",
    "clear_settings_cache",
    "get_jaro_winkler_params",
    "get_settings",
    "load_settings",
    "reload_settings",
    "validate_settings",
]

SETTINGS_PATH_ENV = "JW_SETTINGS_PATH"
LOG_LEVEL_ENV = "JW_LOG_LEVEL"
DEFAULT_SETTINGS_PATH = str(Path("config") / "settings.yaml")

DEFAULTS: Dict[str, Any] = {
    "jaro_winkler": {
        "prefix_weight": JARO_WINKLER_SCALING_FACTOR,
        "prefix_size": JARO_WINKLER_PREFIX_SIZE,
        "boost_threshold": JARO_WINKLER_BOOST_THRESHOLD,
    },
    "logging": {
        "level": "INFO",
        "format": DEFAULT_LOG_FORMAT,
        "file": None,
    },
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _deep_merge(base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in update.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


@functools.lru_cache(maxsize=8)
def _read_settings(path: str) -> Dict[str, Any]:
    defaults = copy.deepcopy(DEFAULTS)

    try:
        with open(path, encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Settings file not found: {path}. Using defaults.")
        return defaults
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Error loading settings from {path}: {e}. Using defaults.")
        return defaults

    if not isinstance(user_config, dict):
        logger.error(
            f"Settings file {path} must contain a mapping, "
            f"got {type(user_config).__name__}. Using defaults."
        )
        return defaults

    logger.debug(f"Settings loaded from {path}")
    return _deep_merge(defaults, user_config)


def load_settings(path: str) -> Dict[str, Any]:
    """Load settings from YAML file with defaults.

    Parsing is cached to prevent repeated file I/O; each call returns its own
    copy, so callers may mutate the result. Use reload_settings() to force a
    fresh load.

    Args:
        path: Path to settings YAML file

    Returns:
        Dictionary with settings (user config merged over defaults)

    """
    return copy.deepcopy(_read_settings(path))


def clear_settings_cache() -> None:
    """Drop cached file reads and the cached application settings."""
    _read_settings.cache_clear()
    get_settings.cache_clear()


def reload_settings(path: str) -> Dict[str, Any]:
    """Force reload settings from file (clears cache).

    Args:
        path: Path to settings YAML file

    Returns:
        Freshly loaded settings

    """
    clear_settings_cache()
    return load_settings(path)


@functools.lru_cache(maxsize=1)
def get_settings() -> Dict[str, Any]:
    """Get application settings with caching.

    The file path comes from ``JW_SETTINGS_PATH`` (default
    ``config/settings.yaml``); ``JW_LOG_LEVEL`` overrides ``logging.level``.
    """
    path = os.environ.get(SETTINGS_PATH_ENV, DEFAULT_SETTINGS_PATH)
    settings = load_settings(path)

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        settings.setdefault("logging", {})["level"] = env_level.upper()

    return settings


def _param_warnings(params: Dict[str, Any]) -> Dict[str, str]:
    """Map each invalid jaro_winkler parameter to a warning message."""
    problems: Dict[str, str] = {}

    prefix_size = params.get("prefix_size", JARO_WINKLER_PREFIX_SIZE)
    if isinstance(prefix_size, bool) or not isinstance(prefix_size, int) or prefix_size < 0:
        problems["prefix_size"] = (
            f"jaro_winkler.prefix_size must be a non-negative int, got {prefix_size!r}"
        )

    prefix_weight = params.get("prefix_weight", JARO_WINKLER_SCALING_FACTOR)
    if isinstance(prefix_weight, bool) or not isinstance(prefix_weight, (int, float)):
        problems["prefix_weight"] = (
            f"jaro_winkler.prefix_weight must be a number, got {prefix_weight!r}"
        )
    elif not math.isfinite(prefix_weight) or prefix_weight < 0:
        problems["prefix_weight"] = (
            f"jaro_winkler.prefix_weight must be a finite number >= 0, got {prefix_weight!r}"
        )
    elif "prefix_size" not in problems and prefix_weight * prefix_size > 1.0:
        problems["prefix_weight"] = (
            f"jaro_winkler.prefix_weight * prefix_size must be <= 1, "
            f"got {prefix_weight!r} * {prefix_size!r}"
        )

    boost_threshold = params.get("boost_threshold", JARO_WINKLER_BOOST_THRESHOLD)
    if (
        isinstance(boost_threshold, bool)
        or not isinstance(boost_threshold, (int, float))
        or not 0.0 <= boost_threshold <= 1.0
    ):
        problems["boost_threshold"] = (
            f"jaro_winkler.boost_threshold must be a number in [0, 1], got {boost_threshold!r}"
        )

    return problems


def get_jaro_winkler_params(settings: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Returns keyword arguments for ``jaro_winkler_distance``.

    Precedence order: config > default. Invalid entries are logged and
    replaced by their defaults.

    Args:
        settings: Settings dict to use. If None, uses get_settings().

    Returns:
        Dict with prefix_weight, prefix_size and boost_threshold.

    """
    if settings is None:
        settings = get_settings()

    section = settings.get("jaro_winkler") or {}
    if not isinstance(section, dict):
        logger.warning("jaro_winkler settings must be a mapping; using defaults")
        section = {}
    params = {**DEFAULTS["jaro_winkler"], **section}
    params = {key: params[key] for key in DEFAULTS["jaro_winkler"]}

    for key, message in _param_warnings(params).items():
        logger.warning(f"{message}; using default {DEFAULTS['jaro_winkler'][key]!r}")
        params[key] = DEFAULTS["jaro_winkler"][key]

    # A valid weight can still overflow once paired with a defaulted size
    if params["prefix_weight"] * params["prefix_size"] > 1.0:
        params["prefix_weight"] = DEFAULTS["jaro_winkler"]["prefix_weight"]
        params["prefix_size"] = DEFAULTS["jaro_winkler"]["prefix_size"]

    return params


def validate_settings(settings: Dict[str, Any] | None = None) -> List[str]:
    """Returns list of validation warnings.

    Args:
        settings: Settings dict to validate. If None, uses get_settings().

    Returns:
        List of validation warning messages.

    """
    warnings: List[str] = []
    if settings is None:
        settings = get_settings()

    section = settings.get("jaro_winkler") or {}
    if not isinstance(section, dict):
        warnings.append(f"jaro_winkler must be a mapping, got {type(section).__name__}")
        section = {}

    unknown = sorted(set(section) - set(DEFAULTS["jaro_winkler"]))
    if unknown:
        warnings.append(f"jaro_winkler has unknown keys: {', '.join(unknown)}")

    warnings.extend(_param_warnings(section).values())

    level = (settings.get("logging") or {}).get("level", "INFO")
    if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
        warnings.append(f"logging.level must be one of {sorted(_LOG_LEVELS)}, got {level!r}")

    return warnings
