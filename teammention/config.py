"""Load filter options from TOML (e.g. teammention.toml).

Config file is looked up in order:
  1. The path passed to load_filter_context()
  2. Path in TEAMMENTION_CONFIG env var (if set)
  3. teammention.toml in the current working directory

If no file is found, FilterContext defaults are used (base_url="/", spans
rather than links, ignoring <pre>, <code> and <a>).

Example file:
    [filter]
    base_url = "https://example.com"
    render_links = true
    ignore_parents = ["pre", "code", "a", "kbd"]
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from teammention.context import FilterContext

CONFIG_ENV_VAR = "TEAMMENTION_CONFIG"
CONFIG_FILENAME = "teammention.toml"


def _default_config_paths() -> list[Path]:
    """Return paths to check for teammention.toml (first existing wins)."""
    paths: list[Path] = []
    if os.environ.get(CONFIG_ENV_VAR):
        paths.append(Path(os.environ[CONFIG_ENV_VAR]))
    paths.append(Path.cwd() / CONFIG_FILENAME)
    return paths


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ValueError(f"Could not read filter config {path}: {e}") from e


def load_filter_config(path: str | Path | None = None) -> dict[str, Any]:
    """Return the [filter] table of the first config file found, or {}.

    An explicitly passed path must exist and parse. Paths found through the
    environment or the working directory are read only if they exist.
    """
    if path is not None:
        path = Path(path)
        if not path.is_file():
            raise ValueError(f"Filter config not found: {path}")
        return dict(_read_toml(path).get("filter", {}))
    for candidate in _default_config_paths():
        if candidate.is_file():
            return dict(_read_toml(candidate).get("filter", {}))
    return {}


def load_filter_context(path: str | Path | None = None) -> FilterContext:
    """Build a FilterContext from the config file, falling back to defaults."""
    data = load_filter_config(path)
    if "ignore_parents" in data:
        data["ignore_parents"] = tuple(data["ignore_parents"])
    return FilterContext(**data)
