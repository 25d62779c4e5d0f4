"""Defaults file loading (JSON/YAML) for the dvplconv CLI.

A defaults file holds per-user preferences; explicit command-line flags
always win over it. Recognised keys::

    keep_originals: false
    strict_compression: false
    fail_on_error: false
    reporter: plain        # plain | rich | json | silent
    verbose: 0
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .codec.errors import config_error
from .reporting import REPORTER_CHOICES

__all__ = ["CliDefaults", "load_defaults"]


@dataclass(slots=True)
class CliDefaults:
    keep_originals: bool = False
    strict_compression: bool = False
    fail_on_error: bool = False
    reporter: str = "plain"
    verbose: int = 0


def load_defaults(path: str | Path | None) -> CliDefaults:
    if path is None:
        return CliDefaults()
    p = Path(path)
    if not p.exists():
        raise config_error(f"Config file not found: {p}", {"path": str(p)})
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise config_error(
            f"Cannot read config file {p}: {e}", {"path": str(p)}
        ) from e
    try:
        if p.suffix.lower() in {".yaml", ".yml"}:
            data: Any = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise config_error(
            f"Cannot parse config file {p}: {e}", {"path": str(p)}
        ) from e
    if data is None:
        return CliDefaults()
    if not isinstance(data, dict):
        raise config_error("Root of config file must be a mapping")
    return _parse_defaults_dict(data)


def _parse_defaults_dict(data: dict[str, Any]) -> CliDefaults:
    known = {f.name for f in fields(CliDefaults)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise config_error(
            f"Unknown config keys: {', '.join(unknown)}", {"keys": unknown}
        )
    defaults = CliDefaults()
    for key in ("keep_originals", "strict_compression", "fail_on_error"):
        if key in data:
            if not isinstance(data[key], bool):
                raise config_error(f"{key} must be a boolean")
            setattr(defaults, key, data[key])
    if "reporter" in data:
        if data["reporter"] not in REPORTER_CHOICES:
            raise config_error(
                f"reporter must be one of {', '.join(REPORTER_CHOICES)}"
            )
        defaults.reporter = data["reporter"]
    if "verbose" in data:
        v = data["verbose"]
        if isinstance(v, bool) or not isinstance(v, int) or v < 0:
            raise config_error("verbose must be a non-negative integer")
        defaults.verbose = v
    return defaults
