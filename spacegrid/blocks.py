"""Placed blocks, their runtime components and the deltas that change them."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Union

from spacegrid.blockdefs import BlockDef, BlockFace


class _Unchanged(Enum):
    UNCHANGED = "unchanged"

    def __repr__(self) -> str:
        return "UNCHANGED"


UNCHANGED = _Unchanged.UNCHANGED
"""Marks a field whose own value may be ``None`` as left unchanged."""


@dataclass
class InventoryItem:
    """Items of one kind stored in an inventory component."""

    item_id: str
    quantity: float
    volume_per_unit: float


@dataclass
class ProductionItem:
    """An entry of a production queue."""

    blueprint_id: str
    quantity: int
    progress: float


# Runtime components a placed block may carry.

@dataclass
class InventoryComponent:
    max_volume: float
    current_volume: float = 0.0
    items: list[InventoryItem] = field(default_factory=list)


@dataclass
class PowerProducerComponent:
    max_output: float
    current_output: float = 0.0
    efficiency: float = 1.0
    fuel_consumption: float = 0.0


@dataclass
class PowerConsumerComponent:
    required_power: float
    current_draw: float = 0.0
    is_powered: bool = False


@dataclass
class PowerStorageComponent:
    max_capacity: float
    current_charge: float = 0.0
    charge_rate: float = 0.0
    discharge_rate: float = 0.0


@dataclass
class ProducerComponent:
    production_queue: list[ProductionItem] = field(default_factory=list)
    production_speed: float = 1.0
    current_progress: float = 0.0


@dataclass
class ThrusterComponent:
    max_force: float
    direction: BlockFace
    current_force: float = 0.0
    fuel_efficiency: float = 1.0


@dataclass
class WeaponComponent:
    damage: float
    range: float
    fire_rate: float
    ammo_type: str
    current_ammo: int = 0


@dataclass
class ControlComponent:
    can_pilot: bool = True
    has_occupant: bool = False
    occupant_id: int | None = None


BlockComponent = Union[
    InventoryComponent,
    PowerProducerComponent,
    PowerConsumerComponent,
    PowerStorageComponent,
    ProducerComponent,
    ThrusterComponent,
    WeaponComponent,
    ControlComponent,
]


# Partial changes, one kind per component kind. ``None`` means unchanged.

@dataclass
class InventoryChange:
    volume_change: float | None = None
    items_added: list[InventoryItem] = field(default_factory=list)
    items_removed: list[str] = field(default_factory=list)


@dataclass
class PowerProducerChange:
    output_change: float | None = None
    efficiency_change: float | None = None


@dataclass
class PowerStorageChange:
    charge_change: float | None = None


@dataclass
class PowerConsumerChange:
    power_draw_change: float | None = None
    is_powered_change: bool | None = None


@dataclass
class ProducerChange:
    queue_change: list[ProductionItem] | None = None
    progress_change: float | None = None


@dataclass
class ThrusterChange:
    force_change: float | None = None


@dataclass
class WeaponChange:
    ammo_change: int | None = None


@dataclass
class ControlChange:
    """``occupant_change`` is ``UNCHANGED``, ``None`` (vacated) or an occupant id."""

    occupant_change: int | None | _Unchanged = UNCHANGED


ComponentChange = Union[
    InventoryChange,
    PowerProducerChange,
    PowerStorageChange,
    PowerConsumerChange,
    ProducerChange,
    ThrusterChange,
    WeaponChange,
    ControlChange,
]


@dataclass
class ComponentAdded:
    component: BlockComponent


@dataclass
class ComponentRemoved:
    pass


@dataclass
class ComponentModified:
    change: ComponentChange


ComponentDelta = Union[ComponentAdded, ComponentRemoved, ComponentModified]


def _apply_inventory(comp: InventoryComponent, change: InventoryChange) -> None:
    if change.volume_change is not None:
        comp.current_volume = change.volume_change
    comp.items.extend(copy.deepcopy(change.items_added))
    removed = set(change.items_removed)
    comp.items = [item for item in comp.items if item.item_id not in removed]


def _apply_storage(comp: PowerStorageComponent, change: PowerStorageChange) -> None:
    if change.charge_change is not None:
        comp.current_charge = change.charge_change


def _apply_producer_power(
    comp: PowerProducerComponent, change: PowerProducerChange
) -> None:
    if change.output_change is not None:
        comp.current_output = change.output_change
    if change.efficiency_change is not None:
        comp.efficiency = change.efficiency_change


def _apply_consumer(comp: PowerConsumerComponent, change: PowerConsumerChange) -> None:
    if change.power_draw_change is not None:
        comp.current_draw = change.power_draw_change
    if change.is_powered_change is not None:
        comp.is_powered = change.is_powered_change


def _apply_thruster(comp: ThrusterComponent, change: ThrusterChange) -> None:
    if change.force_change is not None:
        comp.current_force = change.force_change


def _apply_weapon(comp: WeaponComponent, change: WeaponChange) -> None:
    if change.ammo_change is not None:
        comp.current_ammo = change.ammo_change


def _apply_control(comp: ControlComponent, change: ControlChange) -> None:
    if change.occupant_change is not UNCHANGED:
        comp.occupant_id = change.occupant_change
        comp.has_occupant = change.occupant_change is not None


def _apply_production(comp: ProducerComponent, change: ProducerChange) -> None:
    if change.progress_change is not None:
        comp.current_progress = change.progress_change
    if change.queue_change is not None:
        comp.production_queue = copy.deepcopy(change.queue_change)


_CHANGE_HANDLERS: dict[type, tuple[type, Callable[..., None]]] = {
    InventoryChange: (InventoryComponent, _apply_inventory),
    PowerStorageChange: (PowerStorageComponent, _apply_storage),
    PowerProducerChange: (PowerProducerComponent, _apply_producer_power),
    PowerConsumerChange: (PowerConsumerComponent, _apply_consumer),
    ThrusterChange: (ThrusterComponent, _apply_thruster),
    WeaponChange: (WeaponComponent, _apply_weapon),
    ControlChange: (ControlComponent, _apply_control),
    ProducerChange: (ProducerComponent, _apply_production),
}


def _apply_component_change(component: BlockComponent, change: ComponentChange) -> None:
    """Apply a change if it matches the component's kind; ignore it otherwise."""
    handler = _CHANGE_HANDLERS.get(type(change))
    if handler is None:
        return
    component_type, apply = handler
    if isinstance(component, component_type):
        apply(component, change)


_BASE_DELTA_SIZE = 88
_COMPONENT_CHANGE_SIZE = 64


@dataclass
class BlockDelta:
    """Changes to one placed block, identified by its id within its grid.

    Position and orientation never appear: a block does not move in its grid.
    """

    in_grid_id: int
    integrity: float | None = None
    mass: float | None = None
    component_changes: dict[str, ComponentDelta] = field(default_factory=dict)
    timestamp: int = 0
    sequence: int = 0

    @classmethod
    def empty(cls, in_grid_id: int, timestamp: int, sequence: int) -> BlockDelta:
        return cls(in_grid_id, timestamp=timestamp, sequence=sequence)

    def apply_to(self, block: Block) -> None:
        if self.integrity is not None:
            block.current_integrity = self.integrity
        if self.mass is not None:
            block.current_mass = self.mass
        for key, change in self.component_changes.items():
            if isinstance(change, ComponentAdded):
                block.components[key] = copy.deepcopy(change.component)
            elif isinstance(change, ComponentRemoved):
                block.components.pop(key, None)
            elif isinstance(change, ComponentModified):
                component = block.components.get(key)
                if component is not None:
                    _apply_component_change(component, change.change)

    @classmethod
    def merge(cls, deltas: Iterable[BlockDelta]) -> BlockDelta | None:
        """Fold deltas in sequence order; later values win. ``None`` if empty."""
        ordered = sorted(deltas, key=lambda d: d.sequence)
        if not ordered:
            return None
        merged = copy.deepcopy(ordered[0])
        for delta in ordered[1:]:
            if delta.integrity is not None:
                merged.integrity = delta.integrity
            if delta.mass is not None:
                merged.mass = delta.mass
            for key, change in delta.component_changes.items():
                merged.component_changes[key] = copy.deepcopy(change)
            merged.timestamp = delta.timestamp
            merged.sequence = delta.sequence
        return merged

    def is_empty(self) -> bool:
        return (
            self.integrity is None
            and self.mass is None
            and not self.component_changes
        )

    def estimated_size(self) -> int:
        """Rough size in bytes of the delta on the wire."""
        return _BASE_DELTA_SIZE + len(self.component_changes) * _COMPONENT_CHANGE_SIZE


@dataclass
class Block:
    """A placed instance of a block definition inside a grid."""

    in_grid_id: int
    definition: BlockDef
    current_integrity: float
    position: tuple[int, int, int] = (0, 0, 0)
    orientation: tuple[int, int, int] = (0, 0, 0)
    faction_id: int = 0
    grid: object | None = None
    current_mass: float | None = None
    components: dict[str, BlockComponent] = field(default_factory=dict)
    pending_deltas: list[BlockDelta] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.current_mass is None:
            self.current_mass = self.definition.mass

    def update_component(self, component_type: str, new_state: BlockComponent) -> None:
        self.components[component_type] = new_state

    def get_component(self, component_type: str) -> BlockComponent | None:
        return self.components.get(component_type)

    def with_components(
        self, components: Iterable[tuple[str, BlockComponent]]
    ) -> Block:
        for key, component in components:
            self.components[key] = component
        return self

    def has_component(self, component_type: str) -> bool:
        return component_type in self.components

    def record_delta(self, delta: BlockDelta) -> None:
        self.pending_deltas.append(delta)

    def compute_and_apply_pending_deltas(self) -> BlockDelta | None:
        """Merge and apply the queued deltas, clear the queue, return the merge."""
        if not self.pending_deltas:
            return None
        merged = BlockDelta.merge(self.pending_deltas)
        if merged is not None:
            merged.apply_to(self)
        self.pending_deltas.clear()
        return merged

    def create_integrity_delta(
        self, new_integrity: float, timestamp: int, sequence: int
    ) -> BlockDelta:
        return BlockDelta(
            self.in_grid_id, integrity=new_integrity,
            timestamp=timestamp, sequence=sequence,
        )

    def create_mass_delta(
        self, new_mass: float, timestamp: int, sequence: int
    ) -> BlockDelta:
        return BlockDelta(
            self.in_grid_id, mass=new_mass, timestamp=timestamp, sequence=sequence
        )

    def create_component_delta(
        self,
        component_key: str,
        change: ComponentDelta,
        timestamp: int,
        sequence: int,
    ) -> BlockDelta:
        return BlockDelta(
            self.in_grid_id,
            component_changes={component_key: change},
            timestamp=timestamp,
            sequence=sequence,
        )