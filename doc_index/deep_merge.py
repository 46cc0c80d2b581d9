"""Logic for layering a user configuration file over the index defaults."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two configuration dictionaries.

    Sections such as 'index' and 'logging' are merged key by key, so a user
    file that only sets 'logging.level' keeps the default 'index' settings.
    Any other value in 'update', lists included, replaces the one in 'base'.
    Neither input is modified.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
