"""Items and stacks of items held in inventories."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Item:
    """A kind of item with its per-unit mass (kg) and volume (m³)."""

    id: int
    name: str
    mass_per_unit: float
    volume_per_unit: float


@dataclass
class ItemStack:
    """A quantity of a single item."""

    item: Item
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("quantity must not be negative")

    def total_mass(self) -> float:
        return self.item.mass_per_unit * self.quantity

    def total_volume(self) -> float:
        return self.item.volume_per_unit * self.quantity

    def add(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("amount must not be negative")
        self.quantity += amount

    def remove(self, amount: int) -> int:
        """Remove up to ``amount`` units and return how many were removed."""
        if amount < 0:
            raise ValueError("amount must not be negative")
        removed = min(self.quantity, amount)
        self.quantity -= removed
        return removed