"""Navigation settings.

Settings are read from a TOML or YAML file, optionally nested under a
``navigation`` table::

    [navigation]
    channel_name = "utils/Url"
    notes_root   = "notes"
    blob_origin  = "https://notes.example.com"

Environment variables (all optional; file values are overridden):
    NOTESNAV_CHANNEL      – request/reply channel name (default: ``utils/Url``)
    NOTESNAV_NOTES_ROOT   – first path segment of notes links (default: ``notes``)
    NOTESNAV_BLOB_ORIGIN  – origin embedded in object URLs (default: ``null``)

Keyword arguments passed to :class:`~notesnav.url.UrlHelper` override both.
"""

from __future__ import annotations

import os
import sys
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

_ENV = {
    "channel_name": "NOTESNAV_CHANNEL",
    "notes_root": "NOTESNAV_NOTES_ROOT",
    "blob_origin": "NOTESNAV_BLOB_ORIGIN",
}


@dataclass(frozen=True)
class NavConfig:
    channel_name: str = "utils/Url"
    notes_root: str = "notes"
    blob_origin: str = "null"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NavConfig":
        section = data.get("navigation", data) or {}
        known = {f.name for f in fields(cls)}
        for key in section:
            if key not in known:
                print(f"[warn] Ignoring unknown navigation setting {key!r}", file=sys.stderr)
        return cls(**{k: str(v) for k, v in section.items() if k in known})

    def with_env(self) -> "NavConfig":
        """Return a copy with ``NOTESNAV_*`` environment overrides applied."""
        overrides = {name: os.environ[var] for name, var in _ENV.items() if os.getenv(var)}
        return replace(self, **overrides)


def load_config(path: Path | str | None = None) -> NavConfig:
    """Load settings from *path* (``.toml``, ``.yaml`` or ``.yml``) plus the environment.

    Without *path*, only defaults and environment overrides apply.
    """
    if path is None:
        return NavConfig().with_env()

    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with open(path, "rb") as fh:
            data = tomllib.load(fh)
    elif suffix in {".yaml", ".yml"}:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        raise ValueError(f"Unsupported config file type '{path.suffix}' (expected .toml, .yaml or .yml).")

    return NavConfig.from_dict(data).with_env()
