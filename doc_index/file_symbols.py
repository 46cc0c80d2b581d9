"""Logic for tracking which symbols and references a file contains."""


class FileSymbols:
    """Stores the symbol and reference strings found in one source file."""

    def __init__(self) -> None:
        """Initialize with no symbols or references."""
        self._symbols: set[str] = set()
        self._references: set[str] = set()

    def add_symbol(self, symbol: str) -> None:
        """Record a symbol definition."""
        self._symbols.add(symbol)

    def delete_symbol(self, symbol: str) -> None:
        """Remove a symbol definition."""
        self._symbols.discard(symbol)

    def add_reference(self, reference: str) -> None:
        """Record a reference."""
        self._references.add(reference)

    def delete_reference(self, reference: str) -> None:
        """Remove a reference."""
        self._references.discard(reference)

    def has_anything(self) -> bool:
        """Return whether the file has any symbols or references at all."""
        return bool(self._symbols or self._references)

    def symbols(self) -> set[str]:
        return set(self._symbols)

    def references(self) -> set[str]:
        return set(self._references)

    def defines_symbol(self, symbol: str) -> bool:
        return symbol in self._symbols

    def defines_reference(self, reference: str) -> bool:
        return reference in self._references
