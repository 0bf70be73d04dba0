"""Inventories limited by both volume and mass."""

from __future__ import annotations

import math

from spacegrid.items import Item, ItemStack


def _units_that_fit(room: float, per_unit: float, quantity: int) -> int:
    """How many units of ``per_unit`` fit into ``room``, capped at ``quantity``."""
    if per_unit == 0:
        return quantity if room > 0 else 0
    ratio = room / per_unit
    if math.isnan(ratio) or ratio <= 0:
        return 0
    if math.isinf(ratio):
        return quantity
    return min(math.floor(ratio), quantity)


class Inventory:
    """A set of item stacks bounded by a maximum volume (m³) and mass (kg)."""

    def __init__(self, max_volume: float, max_mass: float) -> None:
        self.max_volume = max_volume
        self.max_mass = max_mass
        self._slots: list[ItemStack] = []

    @property
    def slots(self) -> tuple[ItemStack, ...]:
        return tuple(self._slots)

    def current_volume(self) -> float:
        return sum(slot.total_volume() for slot in self._slots)

    def current_mass(self) -> float:
        return sum(slot.total_mass() for slot in self._slots)

    def max_mass_to_add(self, item: Item, quantity: int) -> int:
        room = self.max_mass - self.current_mass()
        return _units_that_fit(room, item.mass_per_unit, quantity)

    def max_volume_to_add(self, item: Item, quantity: int) -> int:
        room = self.max_volume - self.current_volume()
        return _units_that_fit(room, item.volume_per_unit, quantity)

    def max_to_add(self, item: Item, quantity: int) -> int:
        return min(
            self.max_mass_to_add(item, quantity),
            self.max_volume_to_add(item, quantity),
        )

    def can_add(self, item: Item, quantity: int) -> bool:
        return self.max_to_add(item, quantity) > 0

    def _find_stack(self, item: Item) -> ItemStack | None:
        return next((s for s in self._slots if s.item.id == item.id), None)

    def add(self, item: Item, quantity: int) -> bool:
        """Add the whole quantity if at least one unit fits.

        An existing stack of the same item is topped up and a new stack is
        pushed as well.
        """
        if not self.can_add(item, quantity):
            return False
        stack = self._find_stack(item)
        if stack is not None:
            stack.add(quantity)
        self._slots.append(ItemStack(item, quantity))
        return True

    def add_max(self, item: Item, quantity: int) -> bool:
        """Add as many units as fit, up to ``quantity``."""
        to_add = self.max_to_add(item, quantity)
        if to_add <= 0:
            return False
        stack = self._find_stack(item)
        if stack is not None:
            stack.add(to_add)
        else:
            self._slots.append(ItemStack(item, to_add))
        return True