"""Inventory state reducers.

Pure functions taking an :class:`InventoryState` and returning a new one. They
hold the merge / split / capacity rules; locking is the caller's concern.
Failures raise before anything is built, so the input state is always left
as the valid current state.
"""

from typing import Iterable, List, Optional, Tuple

from weighted_inventory.entry import Entry
from weighted_inventory.errors import (
    CapacityExceededError,
    InsufficientQuantityError,
    InvalidEntryError,
)
from weighted_inventory.state import InventoryState
from weighted_inventory.types import EntryName, Weight, is_weight_value


def _require_stack(name: object, weight: object) -> None:
    if not isinstance(name, str):
        raise InvalidEntryError(f"Name must be a string, got {type(name).__name__}")
    if not is_weight_value(weight):
        raise InvalidEntryError(f"Weight must be an integer, got {weight!r}")
    if weight <= 0:  # type: ignore[operator]
        raise InvalidEntryError(f"Weight must be positive, got {weight}")


def add_weight(
    state: InventoryState, name: EntryName, weight: Weight, capacity: Weight
) -> InventoryState:
    """Return a new state with ``weight`` merged into the stack ``name``.

    A new name is appended after the existing ones; a known name keeps its
    position and grows.

    Raises:
        InvalidEntryError: ``name`` is not a string or ``weight`` is not a positive int.
        CapacityExceededError: the new total would exceed ``capacity``.
    """
    _require_stack(name, weight)
    new_total = state.total_weight + weight
    if new_total > capacity:
        raise CapacityExceededError(state.total_weight, weight, capacity)

    existing = state.weights.get(name)
    if existing is None:
        return InventoryState(
            order=state.order.append(name),
            weights=state.weights.set(name, weight),
            total_weight=new_total,
        )
    return InventoryState(
        order=state.order,
        weights=state.weights.set(name, existing + weight),
        total_weight=new_total,
    )


def remove_weight(
    state: InventoryState, name: EntryName, weight: Weight
) -> Tuple[InventoryState, bool]:
    """Take ``weight`` from the stack ``name``.

    Returns:
        Tuple[InventoryState, bool]: the new state and whether ``name`` was
        stored. A stack reduced to zero is dropped entirely.

    Raises:
        InvalidEntryError: ``name`` is not a string or ``weight`` is not a positive int.
        InsufficientQuantityError: the stack holds less than ``weight``.
    """
    _require_stack(name, weight)
    existing = state.weights.get(name)
    if existing is None:
        return state, False
    if existing < weight:
        raise InsufficientQuantityError(name, weight, existing)
    if existing == weight:
        return _drop(state, name, existing), True
    return (
        InventoryState(
            order=state.order,
            weights=state.weights.set(name, existing - weight),
            total_weight=state.total_weight - weight,
        ),
        True,
    )


def remove_name(state: InventoryState, name: EntryName) -> Tuple[InventoryState, bool]:
    """Drop the whole stack ``name`` whatever its weight."""
    existing = state.weights.get(name)
    if existing is None:
        return state, False
    return _drop(state, name, existing), True


def _drop(state: InventoryState, name: EntryName, weight: Weight) -> InventoryState:
    return InventoryState(
        order=state.order.remove(name),
        weights=state.weights.remove(name),
        total_weight=state.total_weight - weight,
    )


def find_names(state: InventoryState, search_term: Optional[str]) -> List[EntryName]:
    """Return stored names containing ``search_term``, ignoring case.

    A missing or blank term matches nothing.

    Raises:
        InvalidEntryError: ``search_term`` is neither ``None`` nor a string.
    """
    if search_term is None:
        return []
    if not isinstance(search_term, str):
        raise InvalidEntryError(
            f"Search term must be a string, got {type(search_term).__name__}"
        )
    if not search_term.strip():
        return []
    needle = search_term.casefold()
    return [name for name in state.order if needle in name.casefold()]


def to_entries(
    state: InventoryState, names: Optional[Iterable[EntryName]] = None
) -> List[Entry]:
    """Build fresh :class:`Entry` objects for ``names`` (default: all, in order)."""
    if names is None:
        names = state.order
    return [Entry(name=name, weight=state.weights[name]) for name in names]
