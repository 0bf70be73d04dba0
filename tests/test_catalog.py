import pytest

from spacegrid import catalog
from spacegrid.blockdefs import BlockDef, BlockFace, BlockId, Model3DRef, MountPoint
from spacegrid.catalog import BlockRegistry

CATEGORIES = [
    catalog.armor_blocks,
    catalog.power_blocks,
    catalog.production_blocks,
    catalog.thruster_blocks,
    catalog.weapon_blocks,
    catalog.utility_blocks,
    catalog.cockpit_blocks,
]


def all_defs():
    return [d for category in CATEGORIES for d in category()]


def test_light_armor_large_values():
    d = catalog.create_light_armor_large()
    assert d.id == BlockId.large(1)
    assert d.name == "Light Armor Block"
    assert d.mass == 300.0
    assert d.integrity == 400.0
    assert d.block_type == "Armor"
    assert d.model.path == "models/blocks/armor_light_large.glb"
    assert d.available_components == []


def test_heavy_armor_small_values():
    d = catalog.create_heavy_armor_small()
    assert d.id == BlockId.small(2)
    assert d.mass == 50.0
    assert d.integrity == 200.0


def test_battery_large_components():
    d = catalog.create_battery_large()
    assert d.id == BlockId.large(100)
    assert d.name == "Battery Block"
    assert d.mass == 800.0
    assert d.available_components == ["power_storage", "power_consumer"]


def test_reactor_large_values():
    d = catalog.create_reactor_large()
    assert d.mass == 2500.0
    assert d.integrity == 600.0
    assert d.available_components == ["power_producer", "inventory"]


def test_refinery_footprint():
    d = catalog.create_refinery_large()
    assert d.footprint == (1, 1, 2)
    assert d.mass == 2000.0
    assert d.available_components == ["producer", "power_consumer", "inventory"]


def test_large_thruster_values():
    d = catalog.create_large_thruster()
    assert d.id == BlockId.large(300)
    assert d.footprint == (1, 1, 2)
    assert d.available_components == ["thruster", "power_consumer"]


def test_missile_launcher_values():
    d = catalog.create_missile_launcher_large()
    assert d.id == BlockId.large(401)
    assert d.mass == 1500.0
    assert d.block_type == "Weapon"


def test_small_cargo_container_is_large_grid():
    d = catalog.create_cargo_container_small()
    assert d.id == BlockId.large(601)
    assert d.name == "Small Cargo Container"
    assert d.available_components == ["inventory"]


def test_connector_values():
    d = catalog.create_connector_large()
    assert d.block_type == "Utility"
    assert d.available_components == ["inventory", "power_consumer"]


def test_cockpit_mounts_exclude_front_and_top():
    d = catalog.create_cockpit_large()
    assert set(d.mount_points) == {
        BlockFace.BACK, BlockFace.LEFT, BlockFace.RIGHT, BlockFace.BOTTOM
    }
    assert d.available_components == ["control", "power_consumer", "inventory"]


def test_cockpit_cannot_connect_from_front():
    cockpit = catalog.create_cockpit_large()
    armor = catalog.create_light_armor_large()
    assert not cockpit.can_connect_to(BlockFace.FRONT, armor, BlockFace.BACK)
    assert cockpit.can_connect_to(BlockFace.BACK, armor, BlockFace.FRONT)


def test_flight_seat_is_full_cube():
    d = catalog.create_flight_seat_large()
    assert set(d.mount_points) == set(BlockFace)
    assert d.available_components == ["control"]


def test_non_cockpit_blocks_have_one_full_mount_per_face():
    cockpit_faces = {BlockFace.BACK, BlockFace.LEFT, BlockFace.RIGHT, BlockFace.BOTTOM}
    definitions = [d for category in CATEGORIES for d in category()]
    assert len(definitions) == 21
    for definition in definitions:
        faces = cockpit_faces if definition.name == "Cockpit" else set(BlockFace)
        assert set(definition.mount_points) == faces, definition.model.path
        for mounts in definition.mount_points.values():
            assert mounts == [MountPoint.full_face()], definition.model.path


def test_factories_return_fresh_objects():
    a = catalog.create_light_armor_large()
    b = catalog.create_light_armor_large()
    a.with_component("extra")
    assert b.available_components == []


def test_catalogue_ids_are_unique():
    ids = [d.id for category in CATEGORIES for d in category()]
    assert len(ids) == 21
    assert len(set(ids)) == 21
    assert len(BlockRegistry()) == 21


def test_category_types():
    assert {d.block_type for d in catalog.armor_blocks()} == {"Armor"}
    assert {d.block_type for d in catalog.power_blocks()} == {"Power"}
    assert {d.block_type for d in catalog.cockpit_blocks()} == {"Control"}


def test_registry_holds_whole_catalogue():
    registry = BlockRegistry()
    assert len(registry.list_all()) == len(all_defs())
    for d in all_defs():
        found = registry.get(d.id)
        assert found is not None
        assert found.name == d.name


def test_registry_distinguishes_large_and_small():
    registry = BlockRegistry()
    assert registry.get(BlockId.large(1)).mass == 300.0
    assert registry.get(BlockId.small(1)).mass == 15.0


def test_registry_get_unknown_returns_none():
    registry = BlockRegistry()
    assert registry.get(BlockId.large(9999)) is None
    assert BlockId.large(9999) not in registry


def test_registry_get_returns_shared_definition():
    registry = BlockRegistry()
    first = registry.get(BlockId.large(100))
    assert first.name == "Battery Block"
    first.with_component("extra")
    second = registry.get(BlockId.large(100))
    assert second.available_components == ["power_storage", "power_consumer", "extra"]
    assert second is first


def test_list_by_type():
    registry = BlockRegistry()
    cargo = registry.list_by_type("Cargo")
    assert {d.id for d in cargo} == {BlockId.large(600), BlockId.large(601)}
    assert registry.list_by_type("Nothing") == []
    power = registry.list_by_type("Power")
    assert len(power) == len(catalog.power_blocks())


def test_register_adds_and_replaces():
    registry = BlockRegistry()
    before = len(registry)
    custom = BlockDef(
        BlockId.large(9000), "Custom", (1, 1, 1), 1.0, 1.0, "Custom",
        Model3DRef("models/custom.glb"),
    )
    registry.register(custom)
    assert len(registry) == before + 1
    assert registry.get(BlockId.large(9000)) is custom

    replacement = BlockDef(
        BlockId.large(1), "Replacement", (1, 1, 1), 1.0, 1.0, "Armor",
        Model3DRef("models/replacement.glb"),
    )
    registry.register(replacement)
    assert len(registry) == before + 1
    assert registry.get(BlockId.large(1)).name == "Replacement"