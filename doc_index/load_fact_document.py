"""Logic for loading scanner fact YAML files."""

from pathlib import Path
from typing import Any

import yaml


def load_fact_document(path: Path) -> dict[str, Any]:
    """Load and parse a YAML file of scanner facts."""
    doc = yaml.safe_load(path.read_text(encoding="utf-8"))
    if doc is None:
        return {}
    if not isinstance(doc, dict):
        msg = f"Expected a mapping at the top of {path}"
        raise SystemExit(msg)
    return doc
