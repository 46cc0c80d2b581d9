"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from doc_index.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "index": {
        "warn_on_redefinition": False,
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Config file not found: {path}"
            raise SystemExit(msg)
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        if not isinstance(user_config, dict):
            msg = f"Config file must contain a mapping: {path}"
            raise SystemExit(msg)
        config = deep_merge(config, user_config)
    return config
