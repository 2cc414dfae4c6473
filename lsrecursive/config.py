"""Persistent JSON config helpers.

Stores listing defaults: threshold limit and scope, negation handling, and
extra excluded names. All access is defensive: malformed or missing config
falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .listing.threshold import DEFAULT_LIMIT

APP_NAME = "ls-recursive"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class ListingDefaults:
    """Config-backed defaults that CLI flags may override."""

    limit: int = DEFAULT_LIMIT
    per_directory: bool = False
    honor_negation: bool = False
    excludes: tuple[str, ...] = ()


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _coerce_limit(value: object) -> int:
    """Accept only positive integers; booleans and other types give the default."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_LIMIT
    return value


def _coerce_bool(value: object) -> bool:
    return value if isinstance(value, bool) else False


def _coerce_names(value: object) -> tuple[str, ...]:
    """Keep non-empty string names from a JSON list, dropping anything else."""
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str) and item)


def load_listing_defaults() -> ListingDefaults:
    """Read listing defaults with per-key validation."""
    data = load_config()
    return ListingDefaults(
        limit=_coerce_limit(data.get("limit")),
        per_directory=_coerce_bool(data.get("per_directory")),
        honor_negation=_coerce_bool(data.get("honor_negation")),
        excludes=_coerce_names(data.get("excludes")),
    )


def save_listing_defaults(defaults: ListingDefaults) -> None:
    """Persist listing defaults, keeping unrelated keys already in the file."""
    config = load_config()
    config["limit"] = _coerce_limit(defaults.limit)
    config["per_directory"] = bool(defaults.per_directory)
    config["honor_negation"] = bool(defaults.honor_negation)
    config["excludes"] = list(_coerce_names(list(defaults.excludes)))
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "ListingDefaults",
    "load_config",
    "save_config",
    "load_listing_defaults",
    "save_listing_defaults",
]
