"""The built-in block catalogue and a registry indexing it by block id."""

from __future__ import annotations

from collections.abc import Iterable

from spacegrid.blockdefs import BlockDef, BlockFace, BlockId, Model3DRef, MountPoint


def _define(
    block_id: BlockId,
    name: str,
    footprint: tuple[int, int, int],
    mass: float,
    integrity: float,
    block_type: str,
    model_path: str,
    components: Iterable[str] = (),
    *,
    full_cube: bool = True,
) -> BlockDef:
    definition = BlockDef(
        id=block_id,
        name=name,
        footprint=footprint,
        mass=mass,
        integrity=integrity,
        block_type=block_type,
        model=Model3DRef(model_path),
    )
    if full_cube:
        definition.set_full_cube_mounts()
    for component in components:
        definition.with_component(component)
    return definition


# Armour and structure

def create_light_armor_large() -> BlockDef:
    return _define(
        BlockId.large(1), "Light Armor Block", (1, 1, 1), 300.0, 400.0,
        "Armor", "models/blocks/armor_light_large.glb",
    )


def create_heavy_armor_large() -> BlockDef:
    return _define(
        BlockId.large(2), "Heavy Armor Block", (1, 1, 1), 1000.0, 1500.0,
        "Armor", "models/blocks/armor_heavy_large.glb",
    )


def create_light_armor_small() -> BlockDef:
    return _define(
        BlockId.small(1), "Light Armor Block", (1, 1, 1), 15.0, 50.0,
        "Armor", "models/blocks/armor_light_small.glb",
    )


def create_heavy_armor_small() -> BlockDef:
    return _define(
        BlockId.small(2), "Heavy Armor Block", (1, 1, 1), 50.0, 200.0,
        "Armor", "models/blocks/armor_heavy_small.glb",
    )


def armor_blocks() -> list[BlockDef]:
    return [
        create_light_armor_large(),
        create_heavy_armor_large(),
        create_light_armor_small(),
        create_heavy_armor_small(),
    ]


# Power

def create_battery_large() -> BlockDef:
    return _define(
        BlockId.large(100), "Battery Block", (1, 1, 1), 800.0, 400.0,
        "Power", "models/blocks/battery_large.glb",
        ("power_storage", "power_consumer"),
    )


def create_battery_small() -> BlockDef:
    return _define(
        BlockId.small(100), "Battery Block", (1, 1, 1), 50.0, 80.0,
        "Power", "models/blocks/battery_small.glb",
        ("power_storage", "power_consumer"),
    )


def create_reactor_large() -> BlockDef:
    return _define(
        BlockId.large(101), "Large Reactor", (1, 1, 1), 2500.0, 600.0,
        "Power", "models/blocks/reactor_large.glb",
        ("power_producer", "inventory"),
    )


def create_reactor_small() -> BlockDef:
    return _define(
        BlockId.small(101), "Small Reactor", (1, 1, 1), 150.0, 100.0,
        "Power", "models/blocks/reactor_small.glb",
        ("power_producer", "inventory"),
    )


def create_solar_panel_large() -> BlockDef:
    return _define(
        BlockId.large(102), "Solar Panel", (1, 1, 1), 150.0, 200.0,
        "Power", "models/blocks/solar_panel_large.glb",
        ("power_producer",),
    )


def power_blocks() -> list[BlockDef]:
    return [
        create_battery_large(),
        create_battery_small(),
        create_reactor_large(),
        create_reactor_small(),
        create_solar_panel_large(),
    ]


# Production

def create_assembler_large() -> BlockDef:
    return _define(
        BlockId.large(500), "Assembler", (1, 1, 1), 1200.0, 500.0,
        "Production", "models/blocks/assembler_large.glb",
        ("producer", "power_consumer", "inventory"),
    )


def create_refinery_large() -> BlockDef:
    return _define(
        BlockId.large(501), "Refinery", (1, 1, 2), 2000.0, 600.0,
        "Production", "models/blocks/refinery_large.glb",
        ("producer", "power_consumer", "inventory"),
    )


def production_blocks() -> list[BlockDef]:
    return [create_assembler_large(), create_refinery_large()]


# Thrusters

def create_large_thruster() -> BlockDef:
    return _define(
        BlockId.large(300), "Large Thruster", (1, 1, 2), 1200.0, 500.0,
        "Thruster", "models/blocks/thruster_large.glb",
        ("thruster", "power_consumer"),
    )


def create_small_thruster() -> BlockDef:
    return _define(
        BlockId.small(300), "Small Thruster", (1, 1, 1), 80.0, 120.0,
        "Thruster", "models/blocks/thruster_small.glb",
        ("thruster", "power_consumer"),
    )


def thruster_blocks() -> list[BlockDef]:
    return [create_large_thruster(), create_small_thruster()]


# Weapons

def create_gatling_turret_large() -> BlockDef:
    return _define(
        BlockId.large(400), "Gatling Turret", (1, 1, 1), 800.0, 400.0,
        "Weapon", "models/blocks/gatling_turret_large.glb",
        ("weapon", "power_consumer", "inventory"),
    )


def create_missile_launcher_large() -> BlockDef:
    return _define(
        BlockId.large(401), "Missile Launcher", (1, 1, 2), 1500.0, 500.0,
        "Weapon", "models/blocks/missile_launcher_large.glb",
        ("weapon", "power_consumer", "inventory"),
    )


def weapon_blocks() -> list[BlockDef]:
    return [create_gatling_turret_large(), create_missile_launcher_large()]


# Utility

def create_cargo_container_large() -> BlockDef:
    return _define(
        BlockId.large(600), "Large Cargo Container", (1, 1, 1), 1000.0, 500.0,
        "Cargo", "models/blocks/cargo_large.glb",
        ("inventory",),
    )


def create_cargo_container_small() -> BlockDef:
    return _define(
        BlockId.large(601), "Small Cargo Container", (1, 1, 1), 500.0, 300.0,
        "Cargo", "models/blocks/cargo_small.glb",
        ("inventory",),
    )


def create_connector_large() -> BlockDef:
    return _define(
        BlockId.large(602), "Connector", (1, 1, 1), 300.0, 400.0,
        "Utility", "models/blocks/connector_large.glb",
        ("inventory", "power_consumer"),
    )


def utility_blocks() -> list[BlockDef]:
    return [
        create_cargo_container_large(),
        create_cargo_container_small(),
        create_connector_large(),
    ]


# Cockpits and control

_COCKPIT_FACES = (BlockFace.BACK, BlockFace.LEFT, BlockFace.RIGHT, BlockFace.BOTTOM)


def _with_cockpit_mounts(definition: BlockDef) -> BlockDef:
    for face in _COCKPIT_FACES:
        definition.add_mount_point(face, MountPoint.full_face())
    return definition


def create_cockpit_large() -> BlockDef:
    return _with_cockpit_mounts(_define(
        BlockId.large(200), "Cockpit", (1, 1, 1), 400.0, 350.0,
        "Control", "models/blocks/cockpit_large.glb",
        ("control", "power_consumer", "inventory"),
        full_cube=False,
    ))


def create_cockpit_small() -> BlockDef:
    return _with_cockpit_mounts(_define(
        BlockId.small(200), "Cockpit", (1, 1, 1), 50.0, 80.0,
        "Control", "models/blocks/cockpit_small.glb",
        ("control", "power_consumer", "inventory"),
        full_cube=False,
    ))


def create_flight_seat_large() -> BlockDef:
    return _define(
        BlockId.large(201), "Flight Seat", (1, 1, 1), 150.0, 200.0,
        "Control", "models/blocks/flight_seat_large.glb",
        ("control",),
    )


def cockpit_blocks() -> list[BlockDef]:
    return [
        create_cockpit_large(),
        create_cockpit_small(),
        create_flight_seat_large(),
    ]


_CATEGORIES = (
    armor_blocks,
    power_blocks,
    production_blocks,
    thruster_blocks,
    weapon_blocks,
    utility_blocks,
    cockpit_blocks,
)


class BlockRegistry:
    """Every known block definition, indexed by its id.

    A new registry holds the whole built-in catalogue. Definitions are shared:
    ``get`` returns the registered object itself.
    """

    def __init__(self) -> None:
        self._blocks: dict[BlockId, BlockDef] = {}
        for category in _CATEGORIES:
            for definition in category():
                self.register(definition)

    def register(self, definition: BlockDef) -> None:
        """Register a definition, replacing any with the same id."""
        self._blocks[definition.id] = definition

    def get(self, block_id: BlockId) -> BlockDef | None:
        return self._blocks.get(block_id)

    def list_all(self) -> list[BlockDef]:
        return list(self._blocks.values())

    def list_by_type(self, block_type: str) -> list[BlockDef]:
        return [d for d in self._blocks.values() if d.block_type == block_type]

    def __len__(self) -> int:
        return len(self._blocks)

    def __contains__(self, block_id: object) -> bool:
        return block_id in self._blocks