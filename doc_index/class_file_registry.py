"""Logic for tracking the class hierarchy information present in one file."""


class ClassFileRegistry:
    """Records which classes a source file defines and their declared parents.

    The registry does not store the file name; owners keep it in a mapping
    keyed by file. A class mapped to None is defined by the file but has no
    parents recorded, which differs from the class not being present at all.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._classes: dict[str, set[str] | None] = {}

    def add_class(self, class_name: str) -> None:
        """Add a class to the file. Does nothing if it is already present."""
        self._classes.setdefault(class_name, None)

    def delete_class(self, class_name: str) -> None:
        """Remove a class and all of its parents from the file."""
        self._classes.pop(class_name, None)

    def add_parent(self, class_name: str, parent: str) -> None:
        """Add a parent to a class, adding the class if needed."""
        parents = self._classes.get(class_name)
        if parents is None:
            parents = set()
            self._classes[class_name] = parents
        parents.add(parent)

    def delete_parent(self, class_name: str, parent: str) -> None:
        """Remove a parent from a class. The class itself stays defined."""
        parents = self._classes.get(class_name)
        if parents is None:
            return
        parents.discard(parent)
        if not parents:
            self._classes[class_name] = None

    def classes(self) -> set[str]:
        """Return the classes defined by this file."""
        return set(self._classes)

    def has_class(self, class_name: str) -> bool:
        """Return whether the file defines the class."""
        return class_name in self._classes

    def parents_of(self, class_name: str) -> set[str]:
        """Return the parents of a class, empty if it has none or is absent."""
        return set(self._classes.get(class_name) or ())

    def has_parent(self, class_name: str, parent: str) -> bool:
        """Return whether the file defines the class with the given parent."""
        parents = self._classes.get(class_name)
        return parents is not None and parent in parents

    def is_empty(self) -> bool:
        """Return whether the file defines no classes."""
        return not self._classes
