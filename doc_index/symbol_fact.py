"""Data model for one symbol definition reported by a source scanner."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SymbolFact:
    """Represents a symbol found in a class and file while scanning sources."""

    symbol: str
    class_name: str | None  # None for global scope
    file: str
    type: str
    prototype: str | None = None
    summary: str | None = None


def fact_from_dict(raw: dict[str, Any]) -> SymbolFact:
    """Build a SymbolFact from a parsed mapping.

    Raises KeyError when symbol, file, or type is missing. An empty or missing
    class means the global scope.
    """
    class_name = raw.get("class")
    return SymbolFact(
        symbol=str(raw["symbol"]),
        class_name=str(class_name) if class_name else None,
        file=str(raw["file"]),
        type=str(raw["type"]),
        prototype=_optional_text(raw.get("prototype")),
        summary=_optional_text(raw.get("summary")),
    )


def _optional_text(v: object) -> str | None:
    """Join list values into lines and map blank text to None."""
    if v is None:
        return None
    if isinstance(v, list):
        text = "\n".join(str(x).strip() for x in v if str(x).strip())
    else:
        text = str(v).strip()
    return text or None
