"""weighted_inventory
=================================

Thread-safe, weight-capped inventory of named, stackable entries.

The symbols re-exported here form the public API, so callers can import from
a single place, e.g.::

    from weighted_inventory import Entry, Inventory, CapacityExceededError

Stored contents live in an immutable :class:`InventoryState`; the
:class:`Inventory` guards it with a lock and hands out copies only.
"""

from .config import InventoryConfig
from .entry import Entry
from .errors import (
    CapacityExceededError,
    InsufficientQuantityError,
    InvalidEntryError,
    InventoryError,
)
from .inventory import Inventory
from .state import InventoryState
from .types import DEFAULT_CAPACITY, EntryName, Weight

__all__ = [
    "DEFAULT_CAPACITY",
    "CapacityExceededError",
    "Entry",
    "EntryName",
    "InsufficientQuantityError",
    "InvalidEntryError",
    "Inventory",
    "InventoryConfig",
    "InventoryError",
    "InventoryState",
    "Weight",
]
