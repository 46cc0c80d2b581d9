"""Logic for converting a sorted index into plain data for inspection."""

from typing import Any

from doc_index.index_element import IndexElement
from doc_index.index_slot import Multiple, Single


def dump_index(elements: list[IndexElement]) -> list[dict[str, Any]]:
    """Convert index entries to nested dicts mirroring their shape."""
    return [dump_element(e) for e in elements]


def dump_element(element: IndexElement) -> dict[str, Any]:
    """Convert one element, keeping only the members defined at its level."""
    out: dict[str, Any] = {}
    if element.symbol is not None:
        out["symbol"] = element.symbol

    if isinstance(element.class_slot, Multiple):
        out["classes"] = [dump_element(e) for e in element.class_slot.elements]
    elif isinstance(element.class_slot, Single):
        out["class"] = element.class_slot.name

    if isinstance(element.file_slot, Multiple):
        out["files"] = [dump_element(e) for e in element.file_slot.elements]
    elif isinstance(element.file_slot, Single):
        out["file"] = element.file_slot.name

    if element.definition is not None:
        out["type"] = element.definition.type
        if element.definition.prototype is not None:
            out["prototype"] = element.definition.prototype
        if element.definition.summary is not None:
            out["summary"] = element.definition.summary
    return out
