"""Entry value object (a named stack of weight)."""

from dataclasses import dataclass

from weighted_inventory.types import EntryName, Weight


@dataclass(eq=False)
class Entry:
    """Named stack of weight handled by :class:`~weighted_inventory.inventory.Inventory`.

    Equality and hashing depend only on ``name`` so two entries describe the
    same inventory slot regardless of quantity. ``weight`` stays mutable on
    the caller's side; the inventory never holds on to an instance it was
    given or hands out, it works with copies.

    Attributes:
        name:
            Identity key. Matching is exact and case-sensitive.
        weight:
            Stack size. Stored entries always have ``weight > 0``.
    """

    name: EntryName
    weight: Weight

    def clone(self) -> "Entry":
        """Return an independent copy with the same name and weight."""
        return Entry(name=self.name, weight=self.weight)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)
