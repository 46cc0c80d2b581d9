"""Logic for the collapsing symbol index tree.

Indexes are ordered by symbol, then class, then file. When a symbol has only
one class, or a class only one defining file, that value is stored inline on
the element. A second distinct value promotes the level into a list of child
elements instead. For example, a symbol defined once looks like::

    [Element]
    - symbol, class, file, type, prototype, summary

and a symbol defined by two classes, one of which has two files::

    [Element]
    - symbol
    - class
        [Element]
        - class, file, type, prototype, summary
        [Element]
        - class
        - file
            [Element]
            - file, type, prototype, summary
            [Element]
            - file, type, prototype, summary

Children never repeat the symbol, and file-level children never carry a class.
A renderer can tell whether a sub-index is needed purely by checking whether a
slot is ``Single`` or ``Multiple``.
"""

from __future__ import annotations

from dataclasses import dataclass

from doc_index.index_slot import Multiple, Single, Slot
from doc_index.leaf_record import LeafRecord
from doc_index.string_sort import string_sort_key


@dataclass
class IndexElement:
    """One level of a symbol's index entry."""

    symbol: str | None
    class_slot: Slot
    file_slot: Slot
    definition: LeafRecord | None

    @classmethod
    def new_leaf(
        cls,
        symbol: str | None,
        class_name: str | None,
        file: str,
        type: str,  # noqa: A002
        prototype: str | None = None,
        summary: str | None = None,
    ) -> IndexElement:
        """Create the element for a symbol's first occurrence."""
        if symbol is not None and not symbol:
            msg = "An index entry needs a non-empty symbol name"
            raise ValueError(msg)
        return cls(
            symbol=symbol,
            class_slot=Single(class_name),
            file_slot=Single(file),
            definition=LeafRecord(type, prototype, summary),
        )

    @classmethod
    def _file_leaf(
        cls,
        file: str,
        type: str,  # noqa: A002
        prototype: str | None,
        summary: str | None,
    ) -> IndexElement:
        return cls(
            symbol=None,
            class_slot=None,
            file_slot=Single(file),
            definition=LeafRecord(type, prototype, summary),
        )

    def merge(
        self,
        class_name: str | None,
        file: str,
        type: str,  # noqa: A002
        prototype: str | None = None,
        summary: str | None = None,
    ) -> bool:
        """Add another occurrence of the same symbol.

        Returns False when the occurrence duplicates an existing class and file
        pair and was ignored.
        """
        slot = self.class_slot
        if isinstance(slot, Single):
            if slot.name == class_name:
                return self.merge_file(file, type, prototype, summary)

            existing = IndexElement(
                symbol=None,
                class_slot=slot,
                file_slot=self.file_slot,
                definition=self.definition,
            )
            added = IndexElement.new_leaf(
                None, class_name, file, type, prototype, summary
            )
            self.class_slot = Multiple([existing, added])
            self.file_slot = None
            self.definition = None
            return True

        if isinstance(slot, Multiple):
            for element in slot.elements:
                if element.class_name == class_name:
                    return element.merge_file(file, type, prototype, summary)

            slot.elements.append(
                IndexElement.new_leaf(None, class_name, file, type, prototype, summary)
            )
            return True

        msg = "merge() needs an element that tracks the class level"
        raise TypeError(msg)

    def merge_file(
        self,
        file: str,
        type: str,  # noqa: A002
        prototype: str | None = None,
        summary: str | None = None,
    ) -> bool:
        """Add another definition within this element's class.

        A definition for a file that is already present is ignored; the first
        one recorded wins. Returns whether the definition was added.
        """
        slot = self.file_slot
        if isinstance(slot, Single):
            if slot.name == file:
                return False

            existing = IndexElement(
                symbol=None,
                class_slot=None,
                file_slot=slot,
                definition=self.definition,
            )
            added = IndexElement._file_leaf(file, type, prototype, summary)
            self.file_slot = Multiple([existing, added])
            self.definition = None
            return True

        if isinstance(slot, Multiple):
            if any(element.file_name == file for element in slot.elements):
                return False
            slot.elements.append(
                IndexElement._file_leaf(file, type, prototype, summary)
            )
            return True

        msg = "merge_file() needs an element that tracks the file level"
        raise TypeError(msg)

    def sort(self) -> None:
        """Sort the class and file lists of the entry in place."""
        if isinstance(self.file_slot, Multiple):
            self.file_slot.elements.sort(key=lambda e: string_sort_key(e.file_name))

        if isinstance(self.class_slot, Multiple):
            self.class_slot.elements.sort(key=lambda e: string_sort_key(e.class_name))
            for element in self.class_slot.elements:
                if isinstance(element.file_slot, Multiple):
                    element.file_slot.elements.sort(
                        key=lambda e: string_sort_key(e.file_name)
                    )

    def get_class(self) -> str | None | list[IndexElement]:
        """Return the class name, None for global, or the per-class children."""
        return _slot_value(self.class_slot)

    def get_file(self) -> str | None | list[IndexElement]:
        """Return the defining file, or the per-file children."""
        return _slot_value(self.file_slot)

    @property
    def class_name(self) -> str | None:
        """Class name held inline, or None when global, branching, or absent."""
        return self.class_slot.name if isinstance(self.class_slot, Single) else None

    @property
    def file_name(self) -> str | None:
        """File name held inline, or None when branching or absent."""
        return self.file_slot.name if isinstance(self.file_slot, Single) else None

    @property
    def has_multiple_classes(self) -> bool:
        """Whether more than one class defines the symbol."""
        return isinstance(self.class_slot, Multiple)

    @property
    def has_multiple_files(self) -> bool:
        """Whether more than one file defines the symbol in this class."""
        return isinstance(self.file_slot, Multiple)

    @property
    def type(self) -> str | None:
        """Topic type of the definition, if defined at this level."""
        return self.definition.type if self.definition else None

    @property
    def prototype(self) -> str | None:
        """Prototype of the definition, if defined at this level."""
        return self.definition.prototype if self.definition else None

    @property
    def summary(self) -> str | None:
        """Summary of the definition, if defined at this level."""
        return self.definition.summary if self.definition else None


def _slot_value(slot: Slot) -> str | None | list[IndexElement]:
    if isinstance(slot, Multiple):
        return slot.elements
    if isinstance(slot, Single):
        return slot.name
    return None
