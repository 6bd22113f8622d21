"""Sparse voxel grid keyed by integer coordinates, with vector helpers."""

from __future__ import annotations

import math
from typing import Generic, Iterator, Optional, Sequence, TypeVar

MAX_GRID_RESOLUTION = 1024
LOG_MAX_GRID_RESOLUTION = 10
MAX_ABS_VOXEL_COORD = MAX_GRID_RESOLUTION // 2

_SIZE_T_MASK = (1 << 64) - 1

VoxelCoords = tuple[int, int, int]
State = TypeVar("State")


def to_rgbf(value: int) -> tuple[float, float, float]:
    """Unpack a 0xRRGGBB integer into normalised float channels."""
    r, g, b = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
    return (r / 255.0, g / 255.0, b / 255.0)


def degrees(value: float) -> float:
    """Return ``value`` as a float angle in degrees."""
    return float(value)


def _lround(x: float) -> int:
    lower = math.floor(x)
    diff = x - lower
    if diff > 0.5 or (diff == 0.5 and x > 0):
        return int(lower) + 1
    return int(lower)


def lround_vector(v: Sequence[float]) -> tuple[int, ...]:
    """Round each component to the nearest integer, halves away from zero."""
    return tuple(_lround(c) for c in v)


def to_voxel(v: Sequence[float]) -> VoxelCoords:
    """Return the integer voxel containing point ``v``."""
    return tuple(int(math.floor(c)) for c in v)  # type: ignore[return-value]


def manhattan_distance(a: Sequence[int], b: Sequence[int]) -> int:
    """Sum of absolute coordinate differences."""
    return sum(abs(x - y) for x, y in zip(a, b))


def voxel_hash(coords: Sequence[int]) -> int:
    """Pack voxel coordinates into one integer, 10 bits per axis."""
    shift = LOG_MAX_GRID_RESOLUTION
    x, y, z = (c + MAX_ABS_VOXEL_COORD for c in coords)
    return ((x << (2 * shift)) + (y << shift) + z) & _SIZE_T_MASK


class VoxelGrid(Generic[State]):
    """Sparse map from voxel coordinates to per-voxel state."""

    def __init__(self, voxel_count: int, origin: Sequence[float], voxel_size: float):
        if voxel_size == 0:
            raise ValueError("voxel size must be non-zero")
        self.voxel_count = voxel_count
        self.origin = tuple(float(c) for c in origin)
        self.voxel_size = float(voxel_size)
        self._grid: dict[VoxelCoords, State] = {}

    def clear(self) -> None:
        """Remove every voxel."""
        self._grid = {}

    def has_voxel(self, coords: Sequence[int]) -> bool:
        return tuple(coords) in self._grid

    def get(self, coords: Sequence[int]) -> Optional[State]:
        """Return the state at ``coords`` or None if the voxel is empty."""
        return self._grid.get(tuple(coords))  # type: ignore[arg-type]

    def get_with_vector(self, v: Sequence[float]) -> Optional[State]:
        """Return the state of the voxel containing point ``v``."""
        return self.get(self.get_coords(v))

    def set(self, coords: Sequence[int], state: State) -> None:
        self._grid[tuple(coords)] = state  # type: ignore[index]

    def remove(self, coords: Sequence[int]) -> None:
        """Remove the voxel at ``coords`` if present."""
        self._grid.pop(tuple(coords), None)  # type: ignore[arg-type]

    def get_coords(self, v: Sequence[float]) -> VoxelCoords:
        """Convert a point in space to voxel coordinates."""
        scaled = [(c - o) / self.voxel_size for c, o in zip(v, self.origin)]
        return to_voxel(scaled)

    def items(self) -> Iterator[tuple[VoxelCoords, State]]:
        return iter(self._grid.items())

    def __len__(self) -> int:
        return len(self._grid)