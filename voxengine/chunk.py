"""A 32x32x32 bit-packed voxel chunk and its face mesher."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from voxengine.direction import Axis, Direction
from voxengine.quad import Quad

CHUNK_SIZE = 32
VOXEL_SIZE = 1.0

_TOP_BIT = 0x80000000
_U32 = 0xFFFFFFFF
_ROWS = CHUNK_SIZE * CHUNK_SIZE

Color = tuple[int, int, int, int]


def _check(*coords: int) -> None:
    for value in coords:
        if not 0 <= value < CHUNK_SIZE:
            raise IndexError(f"voxel coordinate {value} outside 0..{CHUNK_SIZE - 1}")


def _color_key(x: int, y: int, z: int) -> int:
    return (z * _ROWS + (31 - y) * 32 + x) & 0xFFFF


def _exposed(buffer: list[list[int]], step: int) -> Iterator[tuple[int, int, int]]:
    """Yield (layer, row, column) of set bits whose neighbour layer is empty."""
    for n in range(1, CHUNK_SIZE + 1):
        mid = buffer[n]
        neighbour = buffer[n + step]
        for a in range(CHUNK_SIZE):
            mask = mid[a] & ~neighbour[a] & _U32
            while mask:
                b = 32 - mask.bit_length()
                yield n - 1, a, b
                mask &= ~(_TOP_BIT >> b)


class Chunk:
    """Voxel occupancy in a left-handed 32^3 grid, with a colour per set voxel."""

    __slots__ = ("_voxels", "_colors")

    def __init__(self) -> None:
        self._voxels: list[int] = [0] * _ROWS
        self._colors: dict[int, Color] = {}

    @classmethod
    def empty(cls) -> Chunk:
        return cls()

    def set(
        self, x: int, y: int, z: int, state: bool, color: Sequence[int] | bytes
    ) -> None:
        """Set or clear the voxel at (x, y, z) and record its colour."""
        _check(x, y, z)
        components = tuple(color)
        if len(components) != 4:
            raise ValueError(f"colour must have 4 components, got {len(components)}")
        self._colors[_color_key(x, y, z)] = components  # type: ignore[assignment]
        row = z * 32 + (31 - y)
        bit = _TOP_BIT >> x
        if state:
            self._voxels[row] |= bit
        else:
            self._voxels[row] &= _U32 ^ bit

    def get_occupied(self, x: int, y: int, z: int) -> bool:
        _check(x, y, z)
        return self._voxels[z * 32 + (31 - y)] & (_TOP_BIT >> x) != 0

    def get_color(self, x: int, y: int, z: int) -> Color | None:
        _check(x, y, z)
        return self._colors.get(_color_key(x, y, z))

    def slice(self, axis: Axis, n: int) -> list[int]:
        """Return layer n across the given axis as 32 rows of 32-bit masks."""
        if not 0 <= n < CHUNK_SIZE:
            raise IndexError(f"slice index {n} outside 0..{CHUNK_SIZE - 1}")
        voxels = self._voxels
        if axis is Axis.X:
            rows = [0] * CHUNK_SIZE
            for y in range(CHUNK_SIZE):
                row = 0
                for z in range(CHUNK_SIZE):
                    row |= ((voxels[z * 32 + y] << n) & _TOP_BIT) >> z
                rows[y] = row
            return rows
        if axis is Axis.Y:
            rows = [0] * CHUNK_SIZE
            for z in range(CHUNK_SIZE):
                rows[31 - z] = voxels[z * 32 + (31 - n)]
            return rows
        if axis is Axis.Z:
            return voxels[n * 32 : n * 32 + 32]
        raise ValueError(f"unknown axis {axis!r}")

    def _layers(self, axis: Axis) -> list[list[int]]:
        empty = [0] * CHUNK_SIZE
        return [empty, *(self.slice(axis, n) for n in range(CHUNK_SIZE)), empty]

    def remesh(self) -> tuple[list[Quad], tuple[int, int, int, int, int, int]]:
        """Build the visible faces.

        Returns the quads and, for each face direction in order
        (Left, Right, Up, Down, Front, Back), the index just past its quads.
        """
        quads: list[Quad] = []
        offsets: list[int] = []
        colors = self._colors

        def emit(direction: Direction, x: int, y: int, z: int) -> None:
            quads.append(Quad(direction, x, y, z, colors[_color_key(x, y, z)]))

        buffer = self._layers(Axis.X)
        for n, a, b in _exposed(buffer, 1):
            emit(Direction.Left, n, 31 - a, b)
        offsets.append(len(quads) & 0xFFFF)
        for n, a, b in _exposed(buffer, -1):
            emit(Direction.Right, n, 31 - a, b)
        offsets.append(len(quads) & 0xFFFF)

        buffer = self._layers(Axis.Y)
        for n, a, b in _exposed(buffer, 1):
            emit(Direction.Up, b, n, 31 - a)
        offsets.append(len(quads) & 0xFFFF)
        for n, a, b in _exposed(buffer, -1):
            emit(Direction.Down, b, n, 31 - a)
        offsets.append(len(quads) & 0xFFFF)

        buffer = self._layers(Axis.Z)
        for n, a, b in _exposed(buffer, -1):
            emit(Direction.Front, b, 31 - a, n)
        offsets.append(len(quads) & 0xFFFF)
        for n, a, b in _exposed(buffer, 1):
            emit(Direction.Back, b, 31 - a, n)
        offsets.append(len(quads) & 0xFFFF)

        return quads, tuple(offsets)  # type: ignore[return-value]

    def count(self) -> int:
        """Return the number of occupied voxels."""
        return sum(row.bit_count() for row in self._voxels)

    def __copy__(self) -> Chunk:
        clone = Chunk()
        clone._voxels = list(self._voxels)
        clone._colors = dict(self._colors)
        return clone

    def __deepcopy__(self, memo: dict) -> Chunk:
        return self.__copy__()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chunk):
            return NotImplemented
        return self._voxels == other._voxels and self._colors == other._colors

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Chunk(count={self.count()})"