"""Exceptions raised by inventory operations.

All failures are synchronous and leave the inventory untouched.
"""

from weighted_inventory.types import EntryName, Weight


class InventoryError(Exception):
    """Base class for inventory errors."""


class InvalidEntryError(InventoryError, ValueError):
    """Raised for a missing entry or a non-positive weight."""


class CapacityExceededError(InventoryError):
    """Raised when an add would push the total weight above capacity."""

    def __init__(self, current: Weight, added: Weight, capacity: Weight) -> None:
        self.current = current
        self.added = added
        self.capacity = capacity
        super().__init__(
            "Cannot add entry. Weight would exceed maximum. "
            f"Current: {current}, Added: {added}, Max: {capacity}"
        )


class InsufficientQuantityError(InventoryError):
    """Raised when a remove asks for more weight than the entry holds."""

    def __init__(self, name: EntryName, requested: Weight, available: Weight) -> None:
        self.name = name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot remove {requested} weight of {name!r}. Entry has only {available}"
        )
