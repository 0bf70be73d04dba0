"""Block identifiers, faces, mount points and block definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class GridSize(Enum):
    """Grid size class a block belongs to."""

    LARGE = 1
    SMALL = 2


@dataclass(frozen=True)
class BlockId:
    """Identifier of a block type; large and small ids never compare equal."""

    size: GridSize
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value < 2**32:
            raise ValueError("block id value must fit in 32 bits")

    @classmethod
    def large(cls, value: int) -> BlockId:
        return cls(GridSize.LARGE, value)

    @classmethod
    def small(cls, value: int) -> BlockId:
        return cls(GridSize.SMALL, value)

    def is_large(self) -> bool:
        return self.size is GridSize.LARGE

    def is_small(self) -> bool:
        return self.size is GridSize.SMALL

    def unique_key(self) -> int:
        """A single integer encoding both the size class and the value."""
        return (self.size.value << 32) | self.value


class BlockFace(Enum):
    """Faces of a block, relative to its default orientation."""

    FRONT = "front"    # +Z
    BACK = "back"      # -Z
    LEFT = "left"      # -X
    RIGHT = "right"    # +X
    TOP = "top"        # +Y
    BOTTOM = "bottom"  # -Y

    def opposite(self) -> BlockFace:
        return _OPPOSITES[self]

    def is_opposite(self, other: BlockFace) -> bool:
        return self.opposite() is other


_OPPOSITES = {
    BlockFace.FRONT: BlockFace.BACK,
    BlockFace.BACK: BlockFace.FRONT,
    BlockFace.LEFT: BlockFace.RIGHT,
    BlockFace.RIGHT: BlockFace.LEFT,
    BlockFace.TOP: BlockFace.BOTTOM,
    BlockFace.BOTTOM: BlockFace.TOP,
}


@dataclass
class MountPoint:
    """A connectable area on a face, in normalised (0..1) face coordinates."""

    start: tuple[float, float]
    size: tuple[float, float]

    @classmethod
    def full_face(cls) -> MountPoint:
        return cls((0.0, 0.0), (1.0, 1.0))

    @classmethod
    def from_grid(
        cls,
        start_x: int,
        start_y: int,
        width: int,
        height: int,
        grid_w: int,
        grid_h: int,
    ) -> MountPoint:
        """Build a mount point from cells of a face subdivided into a grid."""
        if grid_w == 0 or grid_h == 0:
            raise ValueError("grid dimensions must be non-zero")
        return cls(
            (start_x / grid_w, start_y / grid_h),
            (width / grid_w, height / grid_h),
        )

    def overlaps(self, other: MountPoint) -> bool:
        x1, y1 = self.start
        w1, h1 = self.size
        x2, y2 = other.start
        w2, h2 = other.size
        return not (
            x1 + w1 <= x2 or x2 + w2 <= x1 or y1 + h1 <= y2 or y2 + h2 <= y1
        )

    def overlap_area(self, other: MountPoint) -> float:
        if not self.overlaps(other):
            return 0.0
        x1, y1 = self.start
        w1, h1 = self.size
        x2, y2 = other.start
        w2, h2 = other.size
        overlap_x = min(x1 + w1, x2 + w2) - max(x1, x2)
        overlap_y = min(y1 + h1, y2 + h2) - max(y1, y2)
        return overlap_x * overlap_y


@dataclass
class Model3DRef:
    """Reference to a 3D model asset."""

    path: str
    scale: float = 1.0


@dataclass
class BlockDef:
    """Fixed properties shared by every placed block of one type."""

    id: BlockId
    name: str
    footprint: tuple[int, int, int]
    mass: float
    integrity: float
    block_type: str
    model: Model3DRef
    mount_points: dict[BlockFace, list[MountPoint]] = field(default_factory=dict)
    available_components: list[str] = field(default_factory=list)

    def add_mount_point(self, face: BlockFace, mount_point: MountPoint) -> None:
        self.mount_points.setdefault(face, []).append(mount_point)

    def with_available_components(self, components: list[str]) -> BlockDef:
        self.available_components = list(components)
        return self

    def with_component(self, component_name: str) -> BlockDef:
        self.available_components.append(component_name)
        return self

    def set_full_cube_mounts(self) -> None:
        """Make every face fully connectable."""
        for face in BlockFace:
            self.add_mount_point(face, MountPoint.full_face())

    def can_connect_to(
        self, self_face: BlockFace, other: BlockDef, other_face: BlockFace
    ) -> bool:
        """Whether two opposite faces have at least one overlapping mount point."""
        if not self_face.is_opposite(other_face):
            return False
        mine = self.mount_points.get(self_face, [])
        theirs = other.mount_points.get(other_face, [])
        return any(s.overlaps(o) for s in mine for o in theirs)