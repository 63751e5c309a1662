"""Immutable inventory contents.

:class:`InventoryState` is the value an :class:`~weighted_inventory.inventory.Inventory`
guards with its lock. Every mutation builds a new state with the pure
reducers in :mod:`weighted_inventory.utils.inventory` and swaps the reference;
a state, once built, is never modified in place.

Design notes:

* ``weights`` is a **persistent map** (``pyrsistent.PMap``) keyed by entry
    name, giving O(1) lookup of an existing stack.
* ``order`` is a persistent vector of the same names in first-insertion order,
    which is the order snapshots and searches report.
* ``total_weight`` caches ``sum(weights.values())`` so reads stay O(1).
"""

from dataclasses import dataclass
from typing import Any

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from weighted_inventory.types import EntryName, Weight


@dataclass(frozen=True)
class InventoryState:
    """Immutable snapshot of stored stacks.

    Attributes:
        order (PVector[EntryName]): Stored names in insertion order, unique.
        weights (PMap[EntryName, Weight]): Stack size per stored name, always positive.
        total_weight (Weight): Sum of all values in ``weights``.
    """

    order: PVector[EntryName] = pvector()
    weights: PMap[EntryName, Weight] = pmap()
    total_weight: Weight = 0

    def __len__(self) -> int:
        return len(self.order)

    def __contains__(self, name: object) -> bool:
        return name in self.weights

    @property
    def description(self) -> PMap[str, Any]:
        """Diagnostic view of the total and the stored stacks.

        Returns:
            PMap[str, Any]: ``total_weight`` and ``entries``, the latter mapping
            each stored name to its weight. An empty state yields
            ``{"total_weight": 0, "entries": {}}``.
        """
        return pmap(
            {
                "total_weight": self.total_weight,
                "entries": pmap({name: self.weights[name] for name in self.order}),
            }
        )


EMPTY_STATE = InventoryState()
