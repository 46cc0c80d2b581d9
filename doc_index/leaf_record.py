"""Data model for the terminal payload of one symbol definition."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LeafRecord:
    """Represents one concrete definition of a symbol in a class and file."""

    type: str  # Function/Class/Variable/etc.
    prototype: str | None = None
    summary: str | None = None
