# spacegrid

Core game objects for a space construction game. The package covers items and inventories, factions, block definitions with mount points, and a catalogue of stock blocks. It also covers placed blocks, whose state changes are recorded as deltas that can be merged.

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Modules

### `spacegrid.items`

- `Item` holds an id, a name, a mass per unit and a volume per unit.
- `ItemStack` holds a quantity of one item.
  - `total_mass()` and `total_volume()` give the stack's totals.
  - `add(amount)` increases the quantity.
  - `remove(amount)` removes at most the quantity held and returns how many units it removed.
  - A negative quantity or amount raises `ValueError`.

### `spacegrid.inventory`

`Inventory(max_volume, max_mass)` holds item stacks, limited by volume and by mass.

- `current_volume()` and `current_mass()` give the totals held.
- `max_mass_to_add`, `max_volume_to_add` and `max_to_add` give how many units of an item still fit, capped at the quantity asked for.
- `can_add(item, quantity)` is true when at least one unit fits.
- `add(item, quantity)` runs when at least one unit fits.
  - It stores the whole quantity as a new stack.
  - If a stack of the same item is already there, that stack is also topped up by the same quantity.
  - Neither step checks the quantity against the limits.
- `add_max(item, quantity)` stores only as many units as fit. It tops up an existing stack of the same item, or else starts a new one.
- Both `add` and `add_max` return `False` when nothing fits.
- The `slots` property returns the stacks as a tuple.

### `spacegrid.factions`

`Faction` has an id, a name and an ordered list of member ids.

- `add_member` ignores an id that is already a member.
- `remove_member` drops the id.

### `spacegrid.blockdefs`

- `GridSize` names the two grid size classes, `LARGE` and `SMALL`.
- `BlockId` identifies a block type.
  - Create one with `BlockId.large(n)` or `BlockId.small(n)`. A large id never equals a small id with the same value.
  - `unique_key()` packs the size class and the value into one integer.
  - A value that does not fit in 32 bits raises `ValueError`.
- `BlockFace` lists the six faces. It provides `opposite()` and `is_opposite(other)`.
- `MountPoint` is a connectable area on a face, in normalised 0..1 coordinates.
  - It has the constructors `full_face()` and `from_grid(...)`. `from_grid` raises `ValueError` on a zero grid dimension.
  - `overlaps(other)` and `overlap_area(other)` compare two mount points.
- `Model3DRef` holds a model path and a scale.
- `BlockDef` holds the fixed properties of a block type: footprint, mass, integrity, type, model, mount points per face, and the names of its available components.
  - `add_mount_point(face, mount_point)` adds a mount point to one face.
  - `set_full_cube_mounts()` makes every face fully connectable.
  - `with_component(name)` and `with_available_components(names)` set the available components and return the definition.
  - `can_connect_to(self_face, other, other_face)` is true when the two faces are opposite and at least one pair of their mount points overlaps.

### `spacegrid.catalog`

The catalogue has one factory function per stock block, for example `create_light_armor_large()` and `create_cockpit_small()`. It also has one function per category that returns that category's blocks:

- `armor_blocks()`
- `power_blocks()`
- `production_blocks()`
- `thruster_blocks()`
- `weapon_blocks()`
- `utility_blocks()`
- `cockpit_blocks()`

`BlockRegistry()` is filled with the whole catalogue when it is created.

- `register(definition)` adds a definition, replacing any definition with the same id.
- `get(block_id)` returns the registered definition, or `None` if there is none.
- `list_all()` returns every definition, and `list_by_type(block_type)` returns those of one type.
- A registry also supports `len()` and `in`.

### `spacegrid.blocks`

`Block` is a placed instance of a `BlockDef`. Its current mass defaults to the definition's mass.

A block carries runtime components in a dictionary keyed by name. The component kinds are:

- `InventoryComponent`
- `PowerProducerComponent`
- `PowerConsumerComponent`
- `PowerStorageComponent`
- `ProducerComponent`
- `ThrusterComponent`
- `WeaponComponent`
- `ControlComponent`

`BlockDelta` describes changes to one block: integrity, mass, and per-component changes. A component change is one of:

- `ComponentAdded`
- `ComponentRemoved`
- `ComponentModified`, which wraps a partial change such as `InventoryChange` or `ControlChange`.

For `ControlChange`, `UNCHANGED` marks the occupant as not changed, and `None` means the seat was vacated.

`BlockDelta` methods:

- `merge(deltas)` sorts the deltas by sequence number and lets later values win. It returns `None` for no deltas.
- `apply_to(block)` applies the delta to a block. A modification whose kind does not match the component it targets is ignored.
- `is_empty()` is true when the delta changes nothing.
- `estimated_size()` gives a rough size in bytes.

`Block` delta methods:

- `record_delta(delta)` queues a delta.
- `compute_and_apply_pending_deltas()` merges the queued deltas, applies the result, clears the queue and returns the merged delta.
- `create_integrity_delta`, `create_mass_delta` and `create_component_delta` build single-change deltas for the block.

## Example

    from spacegrid.catalog import BlockRegistry
    from spacegrid.blockdefs import BlockFace, BlockId

    registry = BlockRegistry()
    armor = registry.get(BlockId.large(1))
    cockpit = registry.get(BlockId.large(200))

    # The cockpit has no mount point on its front face.
    armor.can_connect_to(BlockFace.BACK, cockpit, BlockFace.FRONT)  # False
    armor.can_connect_to(BlockFace.FRONT, cockpit, BlockFace.BACK)  # True

    power_blocks = registry.list_by_type("Power")

Inventories:

    from spacegrid.items import Item
    from spacegrid.inventory import Inventory

    ore = Item(1, "Iron Ore", 1.0, 0.37)
    cargo = Inventory(max_volume=10.0, max_mass=100.0)
    cargo.add_max(ore, 50)   # True; 27 units fit by volume
    cargo.current_mass()

Deltas:

    from spacegrid.blocks import Block
    from spacegrid.catalog import create_battery_large

    battery = Block(in_grid_id=42, definition=create_battery_large(),
                    current_integrity=400.0)
    battery.record_delta(battery.create_integrity_delta(350.0, timestamp=1, sequence=1))
    battery.record_delta(battery.create_mass_delta(790.0, timestamp=2, sequence=2))
    merged = battery.compute_and_apply_pending_deltas()
    battery.current_integrity, battery.current_mass  # (350.0, 790.0)

## What this package does not do

This is a library of game objects only. It does not include:

- Grids or ships that hold blocks. `Block.grid` is an untyped reference.
- Free-moving bodies or a world, and no physics.
- Networking or a server.
- Rendering or a game client.
- Storage of game state.
- Any command to run.