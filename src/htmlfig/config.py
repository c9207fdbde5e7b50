"""Options and TOML config loading."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "htmlfig.toml"
CONFIG_TABLE = "htmlfig"


@dataclass(frozen=True, slots=True)
class Options:
    """Behaviour switches for a figure binding."""

    strict: bool = True
    debug: bool = False


def load_config(config_path: Path | None, base_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else base_dir / CONFIG_FILENAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(
    config: dict[str, Any],
    *,
    strict: bool | None = None,
    debug: bool | None = None,
) -> Options:
    """Merge a loaded config and explicit arguments into Options.

    Precedence: defaults < config file < arguments. Config values of the wrong
    type are ignored.
    """
    table = config.get(CONFIG_TABLE)
    if not isinstance(table, dict):
        table = {}

    resolved_strict = True
    cfg_strict = table.get("strict")
    if isinstance(cfg_strict, bool):
        resolved_strict = cfg_strict
    if strict is not None:
        resolved_strict = strict

    resolved_debug = False
    cfg_debug = table.get("debug")
    if isinstance(cfg_debug, bool):
        resolved_debug = cfg_debug
    if debug is not None:
        resolved_debug = debug

    return Options(strict=resolved_strict, debug=resolved_debug)
