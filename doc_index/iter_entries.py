"""Utility for iterating over the entries of a fact document section."""

from collections.abc import Iterable
from typing import Any


def iter_entries(doc: dict[str, Any], section: str) -> Iterable[dict[str, Any]]:
    """Iterate over the mapping entries in one section of a fact document."""
    entries = doc.get(section) or []
    for entry in entries:
        if isinstance(entry, dict):
            yield entry
