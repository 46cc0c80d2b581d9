"""Data model for a resolved cross-reference destination."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReferenceTarget:
    """Represents the definition a reference points to."""

    class_name: str | None  # None for global scope
    symbol: str
    file: str
    type: str
    prototype: str | None = None
    summary: str | None = None
