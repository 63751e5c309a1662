"""Thread-safe, weight-capped inventory.

:class:`Inventory` owns an immutable :class:`~weighted_inventory.state.InventoryState`
and one ``threading.Lock``. Every public operation, read or write, runs with
the lock held: writes compute a new state through the reducers in
:mod:`weighted_inventory.utils.inventory` and swap it in, reads build fresh
:class:`~weighted_inventory.entry.Entry` objects from the current state.

No caller ever receives a reference into stored data, and no entry passed in
is kept: only its name and weight are read.

Example::

    inventory = Inventory()
    inventory.add(Entry("Potion", 5))
    inventory.add(Entry("Potion", 3))
    inventory.items  # (Entry(name='Potion', weight=8),)
"""

import logging
import threading
from typing import Iterator, List, Optional, Tuple

from weighted_inventory.config import InventoryConfig
from weighted_inventory.entry import Entry
from weighted_inventory.errors import InventoryError, InvalidEntryError
from weighted_inventory.state import EMPTY_STATE, InventoryState
from weighted_inventory.types import DEFAULT_CAPACITY, EntryName, Weight
from weighted_inventory.utils.inventory import (
    add_weight,
    find_names,
    remove_name,
    remove_weight,
    to_entries,
)

logger = logging.getLogger(__name__)


def _require_entry(entry: object) -> Entry:
    if entry is None:
        raise InvalidEntryError("Entry must not be None")
    if not isinstance(entry, Entry):
        raise InvalidEntryError(f"Expected an Entry, got {type(entry).__name__}")
    return entry


class Inventory:
    """Bounded collection of named stacks with a total-weight cap.

    Args:
        capacity: Maximum total weight, defaults to ``DEFAULT_CAPACITY`` (100).

    Raises:
        ValueError: ``capacity`` is not a positive integer.
    """

    def __init__(self, capacity: Weight = DEFAULT_CAPACITY) -> None:
        self._config = InventoryConfig(capacity=capacity)
        self._state: InventoryState = EMPTY_STATE
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: InventoryConfig) -> "Inventory":
        """Build an inventory from an :class:`InventoryConfig`."""
        return cls(capacity=config.capacity)

    @property
    def capacity(self) -> Weight:
        """Maximum total weight, fixed at construction."""
        return self._config.capacity

    @property
    def current_weight(self) -> Weight:
        """Total stored weight at the instant of the call."""
        with self._lock:
            return self._state.total_weight

    @property
    def remaining_capacity(self) -> Weight:
        with self._lock:
            return self._config.capacity - self._state.total_weight

    def snapshot(self) -> InventoryState:
        """Current immutable state, read atomically.

        The returned value is never modified, so holding it cannot affect the
        inventory; names, weights and the total always agree with each other.
        """
        with self._lock:
            return self._state

    @property
    def items(self) -> Tuple[Entry, ...]:
        """Copies of all stored entries in insertion order."""
        with self._lock:
            return tuple(to_entries(self._state))

    def add(self, entry: Entry) -> None:
        """Store ``entry``'s weight, merging into an existing stack of the same name.

        Raises:
            InvalidEntryError: ``entry`` is missing, or its name or weight is invalid.
            CapacityExceededError: the total would exceed :attr:`capacity`.
        """
        entry = _require_entry(entry)
        with self._lock:
            try:
                self._state = add_weight(
                    self._state, entry.name, entry.weight, self._config.capacity
                )
            except InventoryError as exc:
                logger.debug("Rejected add of %r: %s", entry.name, exc)
                raise
            logger.debug(
                "Added %d of %r (total %d/%d)",
                entry.weight,
                entry.name,
                self._state.total_weight,
                self._config.capacity,
            )

    def remove(self, entry: Entry) -> bool:
        """Take ``entry.weight`` from the stack named ``entry.name``.

        Returns:
            bool: ``False`` if no stack has that name, ``True`` otherwise. A
            stack emptied by the removal is dropped.

        Raises:
            InvalidEntryError: ``entry`` is missing, or its name or weight is invalid.
            InsufficientQuantityError: the stack holds less than requested.
        """
        entry = _require_entry(entry)
        with self._lock:
            try:
                self._state, found = remove_weight(
                    self._state, entry.name, entry.weight
                )
            except InventoryError as exc:
                logger.debug("Rejected remove of %r: %s", entry.name, exc)
                raise
            if found:
                logger.debug(
                    "Removed %d of %r (total %d)",
                    entry.weight,
                    entry.name,
                    self._state.total_weight,
                )
            return found

    def remove_by_name(self, name: Optional[EntryName]) -> bool:
        """Drop the whole stack called ``name``, whatever its weight."""
        if name is None:
            return False
        with self._lock:
            self._state, found = remove_name(self._state, name)
            if found:
                logger.debug(
                    "Removed stack %r (total %d)", name, self._state.total_weight
                )
            return found

    def find(self, search_term: Optional[str]) -> List[Entry]:
        """Copies of entries whose name contains ``search_term``, ignoring case.

        A blank term returns an empty list rather than every entry.
        """
        with self._lock:
            return to_entries(self._state, find_names(self._state, search_term))

    def get(self, name: EntryName) -> Optional[Entry]:
        """Copy of the stack called ``name``, or ``None``."""
        with self._lock:
            if name not in self._state:
                return None
            return Entry(name=name, weight=self._state.weights[name])

    def clear(self) -> None:
        with self._lock:
            self._state = EMPTY_STATE
            logger.debug("Cleared inventory")

    def __iter__(self) -> Iterator[Entry]:
        # Snapshot taken now; later mutations are not observed.
        return iter(self.items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._state)

    def __contains__(self, item: object) -> bool:
        name = item.name if isinstance(item, Entry) else item
        with self._lock:
            return name in self._state

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"{type(self).__name__}(entries={len(self._state)}, "
                f"weight={self._state.total_weight}, capacity={self._config.capacity})"
            )
