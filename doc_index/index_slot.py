"""Slot variants for the class and file levels of an index element."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from doc_index.index_element import IndexElement


@dataclass(frozen=True)
class Single:
    """A level with exactly one value, stored inline on the element.

    For the class level a ``name`` of None means the global scope.
    """

    name: str | None


@dataclass
class Multiple:
    """A level that fans out into child elements, one per distinct value."""

    elements: list[IndexElement] = field(default_factory=list)


# None means the level is not tracked on this element at all.
Slot = Single | Multiple | None
