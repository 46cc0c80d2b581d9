"""Tests for the per-file class registry."""

from doc_index.class_file_registry import ClassFileRegistry


def test_add_parent_creates_class() -> None:
    """Verify that adding a parent registers the class too."""
    registry = ClassFileRegistry()
    registry.add_parent("X", "Y")

    assert registry.has_class("X")
    assert registry.parents_of("X") == {"Y"}
    assert registry.has_parent("X", "Y")


def test_deleting_last_parent_keeps_class() -> None:
    """Verify that a parentless class is still defined by the file."""
    registry = ClassFileRegistry()
    registry.add_parent("X", "Y")
    registry.delete_parent("X", "Y")

    assert registry.has_class("X")
    assert registry.parents_of("X") == set()
    assert not registry.has_parent("X", "Y")
    assert registry.classes() == {"X"}


def test_add_class_is_idempotent() -> None:
    """Verify that re-adding a class keeps its parents."""
    registry = ClassFileRegistry()
    registry.add_parent("X", "Y")
    registry.add_class("X")
    registry.add_class("Z")

    assert registry.parents_of("X") == {"Y"}
    assert registry.parents_of("Z") == set()
    assert registry.classes() == {"X", "Z"}


def test_add_parent_is_idempotent() -> None:
    """Verify that a parent is recorded once."""
    registry = ClassFileRegistry()
    registry.add_parent("X", "Y")
    registry.add_parent("X", "Y")
    registry.add_parent("X", "W")

    assert registry.parents_of("X") == {"Y", "W"}


def test_delete_class_removes_everything() -> None:
    """Verify that deleting a class drops it and its parents."""
    registry = ClassFileRegistry()
    registry.add_parent("X", "Y")
    registry.delete_class("X")

    assert not registry.has_class("X")
    assert registry.parents_of("X") == set()
    assert registry.is_empty()


def test_queries_on_missing_class() -> None:
    """Verify that unknown classes answer empty or false."""
    registry = ClassFileRegistry()
    registry.delete_parent("Nope", "Y")
    registry.delete_class("Nope")

    assert not registry.has_class("Nope")
    assert not registry.has_parent("Nope", "Y")
    assert registry.parents_of("Nope") == set()
    assert registry.classes() == set()


def test_returned_sets_are_copies() -> None:
    """Verify that callers cannot mutate the registry through query results."""
    registry = ClassFileRegistry()
    registry.add_parent("X", "Y")
    registry.parents_of("X").add("Injected")
    registry.classes().add("Injected")

    assert registry.parents_of("X") == {"Y"}
    assert not registry.has_class("Injected")
