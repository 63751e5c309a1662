from dataclasses import dataclass

from weighted_inventory.types import DEFAULT_CAPACITY, Weight, is_weight_value


@dataclass(frozen=True)
class InventoryConfig:
    """Construction-time settings for an inventory.

    Attributes:
        capacity:
            Maximum total weight. Must be a positive integer.
    """

    capacity: Weight = DEFAULT_CAPACITY

    def __post_init__(self) -> None:
        if not is_weight_value(self.capacity):
            raise ValueError(f"Capacity must be an integer, got {self.capacity!r}")
        if self.capacity <= 0:
            raise ValueError(f"Capacity must be positive, got {self.capacity}")
