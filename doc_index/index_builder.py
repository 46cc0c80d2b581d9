"""Logic for building the symbol index and per-file class registries."""

import logging
from typing import Any

from doc_index.class_file_registry import ClassFileRegistry
from doc_index.file_symbols import FileSymbols
from doc_index.index_element import IndexElement
from doc_index.string_sort import string_sort_key
from doc_index.symbol_fact import SymbolFact

logger = logging.getLogger(__name__)


class IndexBuilder:
    """Collects scanner facts into index elements and class registries.

    The builder owns everything it creates until finish() is called; after
    that the elements are meant to be read, not merged into.
    """

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        """Initialize an empty index with optional configuration."""
        index_config = (config or {}).get("index", {})
        self.warn_on_redefinition = bool(
            index_config.get("warn_on_redefinition", False)
        )

        self.elements: dict[str, IndexElement] = {}
        self.class_files: dict[str, ClassFileRegistry] = {}
        self.file_symbols: dict[str, FileSymbols] = {}
        self.ignored_count = 0

    def add_fact(self, fact: SymbolFact) -> bool:
        """Merge a scanner fact into the index."""
        return self.add_symbol(
            fact.symbol,
            fact.class_name,
            fact.file,
            fact.type,
            fact.prototype,
            fact.summary,
        )

    def add_symbol(
        self,
        symbol: str,
        class_name: str | None,
        file: str,
        type: str,  # noqa: A002
        prototype: str | None = None,
        summary: str | None = None,
    ) -> bool:
        """Merge one symbol definition, returning False if it was a duplicate."""
        element = self.elements.get(symbol)
        if element is None:
            self.elements[symbol] = IndexElement.new_leaf(
                symbol, class_name, file, type, prototype, summary
            )
            self._record_symbol(file, symbol)
            return True

        added = element.merge(class_name, file, type, prototype, summary)
        self._record_symbol(file, symbol)
        if added:
            return True

        self.ignored_count += 1
        level = logging.WARNING if self.warn_on_redefinition else logging.DEBUG
        logger.log(
            level,
            "Ignoring redefinition of %s in class %s, file %s",
            symbol,
            class_name or "(global)",
            file,
        )
        return False

    def _record_symbol(self, file: str, symbol: str) -> None:
        self.file_symbols.setdefault(file, FileSymbols()).add_symbol(symbol)

    def add_reference(self, file: str, reference: str) -> None:
        """Record a reference found in a file."""
        self.file_symbols.setdefault(file, FileSymbols()).add_reference(reference)

    def add_class(self, file: str, class_name: str) -> None:
        """Record that a file defines a class."""
        self.class_files.setdefault(file, ClassFileRegistry()).add_class(class_name)

    def add_parent(self, file: str, class_name: str, parent: str) -> None:
        """Record a parent declared for a class in a file."""
        registry = self.class_files.setdefault(file, ClassFileRegistry())
        registry.add_parent(class_name, parent)

    def delete_class(self, file: str, class_name: str) -> None:
        """Remove a class from a file's registry."""
        registry = self.class_files.get(file)
        if registry is None:
            return
        registry.delete_class(class_name)
        if registry.is_empty():
            del self.class_files[file]

    def delete_parent(self, file: str, class_name: str, parent: str) -> None:
        """Remove a parent from a class in a file's registry."""
        registry = self.class_files.get(file)
        if registry is not None:
            registry.delete_parent(class_name, parent)

    def delete_file(self, file: str) -> None:
        """Forget the class and symbol records of a file."""
        self.class_files.pop(file, None)
        self.file_symbols.pop(file, None)
        logger.debug("Dropped class and symbol records for %s", file)

    def classes_defined_in(self, file: str) -> set[str]:
        """Return the classes a file defines."""
        registry = self.class_files.get(file)
        return registry.classes() if registry is not None else set()

    def parents_of(self, class_name: str) -> set[str]:
        """Return the parents declared for a class across all files."""
        parents: set[str] = set()
        for registry in self.class_files.values():
            parents |= registry.parents_of(class_name)
        return parents

    def finish(self) -> list[IndexElement]:
        """Sort every entry and return them in index order."""
        ordered = sorted(
            self.elements.values(), key=lambda e: string_sort_key(e.symbol)
        )
        for element in ordered:
            element.sort()
        logger.info(
            "Indexed %d symbols from %d files (%d redefinitions ignored)",
            len(ordered),
            len(self.file_symbols),
            self.ignored_count,
        )
        return ordered
