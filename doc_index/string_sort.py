"""Logic for ordering names the way documentation indexes list them.

A proper sort orders characters as follows:

- End of string.
- Whitespace: line break, carriage return, tab, space.
- Symbols, by code point.
- Digits 0-9.
- Letters, case-insensitive except to break ties (lowercase first).

Plain string sorting would scatter symbols between digits and letters and
force a choice between case sensitivity and arbitrary tie-breaking.
"""

_WHITESPACE_ORDINALS = {"\n": 1, "\r": 2, "\t": 3, " ": 4}
_DIGIT_BASE = 60000  # above the symbol code points in common use
_LETTER_BASE = 60010  # beyond the digits


def sort_ordinal(character: str) -> int:
    """Return the sort weight of a single character."""
    if "a" <= character <= "z" or "A" <= character <= "Z":
        return ((ord(character.lower()) - ord("a")) << 1) + _LETTER_BASE
    if character in _WHITESPACE_ORDINALS:
        return _WHITESPACE_ORDINALS[character]
    if "0" <= character <= "9":
        return ord(character) - ord("0") + _DIGIT_BASE
    return ord(character) + 4


def string_sort_key(value: str | None) -> tuple:
    """Return a key giving a total order over names and the global marker.

    None (the global scope) sorts before every string. Strings that are equal
    ignoring case are ordered with lowercase first.
    """
    if value is None:
        return (0, (), ())
    ordinals = tuple(sort_ordinal(c) for c in value)
    # Same ordinals imply same length, so the inverted code points only ever
    # compare strings of equal length.
    tie_break = tuple(-ord(c) for c in value)
    return (1, ordinals, tie_break)


def string_compare(a: str | None, b: str | None) -> int:
    """Compare two names; negative if a sorts first, zero if equal."""
    key_a = string_sort_key(a)
    key_b = string_sort_key(b)
    return (key_a > key_b) - (key_a < key_b)
