import pytest

from spacegrid.inventory import Inventory
from spacegrid.items import Item


@pytest.fixture
def ore():
    return Item(7, "Ore", 1.0, 1.0)


def test_new_inventory_is_empty(ore):
    inv = Inventory(10.0, 10.0)
    assert inv.current_mass() == 0.0
    assert inv.current_volume() == 0.0
    assert inv.slots == ()


def test_max_to_add_capped_by_quantity(ore):
    inv = Inventory(10.0, 10.0)
    assert inv.max_to_add(ore, 5) == 5


def test_max_to_add_capped_by_capacity(ore):
    inv = Inventory(10.0, 100.0)
    assert inv.max_volume_to_add(ore, 50) == 10
    assert inv.max_mass_to_add(ore, 50) == 50
    assert inv.max_to_add(ore, 50) == 10


def test_max_to_add_is_min_of_limits(ore):
    inv = Inventory(30.0, 12.0)
    expected = min(inv.max_mass_to_add(ore, 100), inv.max_volume_to_add(ore, 100))
    assert inv.max_to_add(ore, 100) == expected


def test_add_into_empty_inventory(ore):
    inv = Inventory(10.0, 10.0)
    assert inv.add(ore, 5) is True
    assert inv.current_mass() == pytest.approx(5.0)
    assert len(inv.slots) == 1


def test_add_full_quantity_even_if_only_partly_fits(ore):
    inv = Inventory(10.0, 10.0)
    assert inv.add(ore, 50) is True
    assert inv.current_mass() == pytest.approx(50.0)
    assert inv.can_add(ore, 1) is False


def test_add_rejected_when_full(ore):
    inv = Inventory(10.0, 10.0)
    inv.add_max(ore, 10)
    assert inv.can_add(ore, 1) is False
    assert inv.add(ore, 1) is False
    assert inv.add_max(ore, 1) is False


def test_add_max_adds_only_what_fits(ore):
    inv = Inventory(10.0, 100.0)
    assert inv.add_max(ore, 25) is True
    assert inv.current_volume() == pytest.approx(10.0)
    assert inv.slots[0].quantity == 10


def test_add_max_tops_up_existing_stack(ore):
    inv = Inventory(100.0, 100.0)
    inv.add_max(ore, 3)
    inv.add_max(ore, 4)
    assert len(inv.slots) == 1
    assert inv.slots[0].quantity == 7


def test_weightless_item_limited_only_by_volume():
    feather = Item(2, "Feather", 0.0, 1.0)
    inv = Inventory(4.0, 1.0)
    assert inv.max_mass_to_add(feather, 9) == 9
    assert inv.max_to_add(feather, 9) == 4


def test_zero_quantity_cannot_be_added(ore):
    inv = Inventory(10.0, 10.0)
    assert inv.can_add(ore, 0) is False
    assert inv.add(ore, 0) is False