"""Tests for per-file symbol and reference tracking."""

from doc_index.file_symbols import FileSymbols


def test_empty_file() -> None:
    """Verify that a new record has nothing."""
    record = FileSymbols()
    assert not record.has_anything()
    assert record.symbols() == set()
    assert record.references() == set()


def test_symbols_and_references() -> None:
    """Verify adding and removing symbols and references."""
    record = FileSymbols()
    record.add_symbol("Widget.draw")
    record.add_symbol("Widget.draw")
    record.add_reference("Gadget")

    assert record.has_anything()
    assert record.symbols() == {"Widget.draw"}
    assert record.defines_symbol("Widget.draw")
    assert record.defines_reference("Gadget")
    assert not record.defines_reference("Widget.draw")

    record.delete_symbol("Widget.draw")
    assert record.has_anything()
    record.delete_reference("Gadget")
    record.delete_reference("Missing")
    assert not record.has_anything()
