"""Tests for flattening index entries into reference targets."""

from doc_index.build_reference_targets import build_reference_targets
from doc_index.index_element import IndexElement
from doc_index.reference_target import ReferenceTarget


def test_single_definition_target() -> None:
    """Verify that an inline entry yields one target."""
    element = IndexElement.new_leaf("foo", None, "a.c", "function", "foo()", "Foo.")
    targets = build_reference_targets([element])

    assert targets == {
        "foo": [ReferenceTarget(None, "foo", "a.c", "function", "foo()", "Foo.")]
    }


def test_nested_definitions_keep_path() -> None:
    """Verify that class and file levels are carried onto each target."""
    element = IndexElement.new_leaf("draw", "Widget", "w1.c", "function")
    element.merge("Widget", "w2.c", "function")
    element.merge("Gadget", "g.c", "macro", "DRAW()")
    element.sort()

    targets = build_reference_targets([element])["draw"]
    assert [(t.class_name, t.file, t.type) for t in targets] == [
        ("Gadget", "g.c", "macro"),
        ("Widget", "w1.c", "function"),
        ("Widget", "w2.c", "function"),
    ]
    assert all(t.symbol == "draw" for t in targets)
    assert targets[0].prototype == "DRAW()"


def test_file_list_under_single_class() -> None:
    """Verify that files under one class all get that class."""
    element = IndexElement.new_leaf("foo", "Widget", "b.c", "function")
    element.merge("Widget", "a.c", "function")
    element.sort()

    targets = build_reference_targets([element])["foo"]
    assert [(t.class_name, t.file) for t in targets] == [
        ("Widget", "a.c"),
        ("Widget", "b.c"),
    ]
