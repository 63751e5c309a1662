"""Common type aliases and constants.

``EntryName`` is the identity key of a stored stack; ``Weight`` is its size.
"""

EntryName = str
Weight = int

DEFAULT_CAPACITY: Weight = 100


def is_weight_value(value: object) -> bool:
    """True for a plain ``int`` (``bool`` excluded)."""
    return isinstance(value, int) and not isinstance(value, bool)
