"""Logic for flattening index entries into reference targets."""

from collections.abc import Iterable, Iterator

from doc_index.index_element import IndexElement
from doc_index.reference_target import ReferenceTarget


def build_reference_targets(
    elements: Iterable[IndexElement],
) -> dict[str, list[ReferenceTarget]]:
    """Build a map of symbols to every definition they have, in index order."""
    targets: dict[str, list[ReferenceTarget]] = {}
    for element in elements:
        if element.symbol is None:
            continue
        targets[element.symbol] = list(_iter_targets(element, element.symbol))
    return targets


def _iter_targets(element: IndexElement, symbol: str) -> Iterator[ReferenceTarget]:
    """Walk the class and file levels of one entry."""
    classes = element.get_class()
    if isinstance(classes, list):
        for class_element in classes:
            yield from _iter_file_targets(
                class_element, symbol, class_element.class_name
            )
    else:
        yield from _iter_file_targets(element, symbol, element.class_name)


def _iter_file_targets(
    element: IndexElement,
    symbol: str,
    class_name: str | None,
) -> Iterator[ReferenceTarget]:
    files = element.get_file()
    leaves = files if isinstance(files, list) else [element]
    for leaf in leaves:
        file = leaf.file_name
        if leaf.definition is None or file is None:
            continue
        yield ReferenceTarget(
            class_name=class_name,
            symbol=symbol,
            file=file,
            type=leaf.definition.type,
            prototype=leaf.definition.prototype,
            summary=leaf.definition.summary,
        )
