"""Overlay configuration: setup options and persisted defaults.

``config_from_options`` applies a ``setup()`` table strictly and raises
``ConfigError`` on bad input. ``load_user_config`` reads the JSON defaults
file defensively: a missing or malformed file falls back to built-ins.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from platformdirs import user_config_dir

from .highlights import DEFAULT_HIGHLIGHTS, DEFAULT_SYMBOLS, SymbolSet, is_hex_color
from .scheduler import DEFAULT_DEBOUNCE_DELAY_MS
from .status_cache import DEFAULT_CACHE_TIMEOUT_MS

logger = logging.getLogger(__name__)

APP_NAME = "git-oil"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


class ConfigError(ValueError):
    """Raised for invalid ``setup()`` options."""


@dataclass(frozen=True)
class GitOilConfig:
    cache_timeout_ms: float = DEFAULT_CACHE_TIMEOUT_MS
    debounce_delay_ms: float = DEFAULT_DEBOUNCE_DELAY_MS
    symbols: SymbolSet = DEFAULT_SYMBOLS
    highlights: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HIGHLIGHTS))


def _non_negative_ms(key: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{key} must be a number of milliseconds, got {value!r}")
    if value < 0:
        raise ConfigError(f"{key} must be >= 0, got {value!r}")
    return float(value)


def _symbol_overrides(value: object) -> dict[str, str]:
    if not isinstance(value, Mapping):
        raise ConfigError(f"symbols must be a table, got {value!r}")
    known = SymbolSet.keys()
    overrides: dict[str, str] = {}
    for key, glyph in value.items():
        if key not in known:
            raise ConfigError(f"unknown symbol {key!r}; expected one of {', '.join(known)}")
        if not isinstance(glyph, str):
            raise ConfigError(f"symbol {key!r} must be a string, got {glyph!r}")
        overrides[key] = glyph
    return overrides


def _highlight_overrides(value: object) -> dict[str, str]:
    """Accept ``{group: "#rrggbb"}`` or ``{group: {"fg": "#rrggbb"}}``."""
    if not isinstance(value, Mapping):
        raise ConfigError(f"highlights must be a table, got {value!r}")
    overrides: dict[str, str] = {}
    for group, hl in value.items():
        if group not in DEFAULT_HIGHLIGHTS:
            raise ConfigError(f"unknown highlight group {group!r}")
        color = hl.get("fg") if isinstance(hl, Mapping) else hl
        if not is_hex_color(color):
            raise ConfigError(f"highlight {group!r} needs a '#rrggbb' color, got {hl!r}")
        overrides[group] = color
    return overrides


def config_from_options(
    options: Mapping[str, object] | None,
    base: GitOilConfig | None = None,
) -> GitOilConfig:
    """Merge ``setup()`` options over ``base`` (built-in defaults when omitted)."""
    config = base or GitOilConfig()
    if not options:
        return config
    if not isinstance(options, Mapping):
        raise ConfigError(f"setup options must be a table, got {options!r}")

    changes: dict[str, object] = {}
    if options.get("cache_timeout") is not None:
        changes["cache_timeout_ms"] = _non_negative_ms("cache_timeout", options["cache_timeout"])
    if options.get("debounce_delay") is not None:
        changes["debounce_delay_ms"] = _non_negative_ms("debounce_delay", options["debounce_delay"])
    if options.get("symbols") is not None:
        changes["symbols"] = config.symbols.with_overrides(_symbol_overrides(options["symbols"]))
    if options.get("highlights") is not None:
        changes["highlights"] = {**config.highlights, **_highlight_overrides(options["highlights"])}
    return replace(config, **changes)


def load_config_data(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON object; empty dict when missing or malformed."""
    config_path = path or CONFIG_PATH
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", config_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_user_config(path: Path | None = None) -> GitOilConfig:
    """Build a config from the persisted defaults file.

    Each key is applied on its own so one bad value does not discard the rest.
    """
    config = GitOilConfig()
    for key, value in load_config_data(path).items():
        try:
            config = config_from_options({key: value}, base=config)
        except ConfigError as exc:
            logger.warning("ignoring config value %r: %s", key, exc)
    return config
