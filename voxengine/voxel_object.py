"""A transformed object built from voxel chunks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

import numpy as np

from voxengine.chunk import CHUNK_SIZE, Chunk
from voxengine.chunk_mesh import ChunkMesh

_I32_MAX = 2**31 - 1
_I32_MIN = -(2**31)

ChunkKey = tuple[int, int, int]


def _key(position: Sequence[int]) -> ChunkKey:
    key = tuple(int(v) for v in position)
    if len(key) != 3:
        raise ValueError(f"chunk position must have 3 components, got {len(key)}")
    return key  # type: ignore[return-value]


def _check_i32(value: int) -> int:
    if not _I32_MIN <= value <= _I32_MAX:
        raise OverflowError(f"voxel coordinate {value} outside 32-bit range")
    return value


def _saturating_add(a: int, b: int) -> int:
    return max(_I32_MIN, min(_I32_MAX, a + b))


class VoxelObject:
    """Chunks keyed by chunk position, placed in the world by one transform."""

    def __init__(self, transform: Sequence[Sequence[float]] | np.ndarray | None = None) -> None:
        self.transform = transform
        self._chunks: dict[ChunkKey, ChunkMesh] = {}

    @property
    def transform(self) -> np.ndarray:
        return self._transform

    @transform.setter
    def transform(self, value: Sequence[Sequence[float]] | np.ndarray | None) -> None:
        matrix = np.identity(4) if value is None else np.array(value, dtype=np.float64)
        if matrix.shape != (4, 4):
            raise ValueError(f"transform must be 4x4, got shape {matrix.shape}")
        self._transform = matrix

    def count(self) -> int:
        """Return the number of occupied voxels over all chunks."""
        return sum(mesh.chunk.count() for mesh in self._chunks.values())

    @classmethod
    def from_voxels(
        cls,
        transform: Sequence[Sequence[float]] | np.ndarray | None,
        voxels: Iterable[tuple[Sequence[int], Sequence[int]]],
    ) -> VoxelObject:
        """Build an object from (position, colour) pairs, meshing every chunk.

        Each axis is shifted by the absolute value of its smallest coordinate
        before the voxels are split into chunks.
        """
        entries = []
        for position, color in voxels:
            coords = tuple(_check_i32(int(v)) for v in position)
            if len(coords) != 3:
                raise ValueError(f"voxel position must have 3 components, got {len(coords)}")
            entries.append((coords, tuple(color)))

        mins = [_I32_MAX] * 3
        for coords, _ in entries:
            mins = [min(m, v) for m, v in zip(mins, coords)]
        shifts = [_check_i32(abs(m)) for m in mins]

        obj = cls(transform)
        for coords, color in entries:
            shifted = [_saturating_add(v, s) for v, s in zip(coords, shifts)]
            key = tuple(v // CHUNK_SIZE for v in shifted)
            mesh = obj._chunks.setdefault(key, ChunkMesh(Chunk.empty()))  # type: ignore[arg-type]
            x, y, z = (v % CHUNK_SIZE for v in shifted)
            mesh.chunk.set(x, y, z, True, color)

        for mesh in obj._chunks.values():
            mesh.remesh()
            mesh.allocate()
        return obj

    def add_chunk(self, offset: Sequence[int], chunk: Chunk, allocate: bool = True) -> None:
        """Insert a chunk at a chunk position, meshing and packing it if asked."""
        mesh = ChunkMesh(chunk)
        if allocate:
            mesh.remesh()
            mesh.allocate()
        self._chunks[_key(offset)] = mesh

    def remove_chunk(self, position: Sequence[int]) -> Chunk | None:
        """Remove and return the chunk at a position, or None if there is none."""
        mesh = self._chunks.pop(_key(position), None)
        return None if mesh is None else mesh.into_chunk()

    def get_chunk(self, position: Sequence[int]) -> ChunkMesh | None:
        return self._chunks.get(_key(position))

    def chunks(self) -> Iterator[tuple[ChunkKey, ChunkMesh]]:
        """Iterate over (chunk position, mesh) pairs."""
        return iter(self._chunks.items())

    def __len__(self) -> int:
        return len(self._chunks)

    def __repr__(self) -> str:
        return f"VoxelObject(chunks={len(self._chunks)}, voxels={self.count()})"