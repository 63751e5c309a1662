# tests/unit/test_config.py

import pytest

from weighted_inventory.config import InventoryConfig
from weighted_inventory.inventory import Inventory
from weighted_inventory.types import DEFAULT_CAPACITY


def test_default_capacity() -> None:
    assert InventoryConfig().capacity == DEFAULT_CAPACITY == 100
    assert Inventory().capacity == 100


@pytest.mark.parametrize("capacity", [0, -1, 2.5, "10", True])
def test_invalid_capacity_rejected(capacity: object) -> None:
    with pytest.raises(ValueError):
        InventoryConfig(capacity=capacity)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        Inventory(capacity=capacity)  # type: ignore[arg-type]


def test_from_config() -> None:
    inventory = Inventory.from_config(InventoryConfig(capacity=7))
    assert inventory.capacity == 7
    assert inventory.remaining_capacity == 7
