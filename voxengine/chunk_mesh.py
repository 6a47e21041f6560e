"""A chunk together with its generated face mesh and packed vertex buffer."""

from __future__ import annotations

from voxengine.chunk import Chunk
from voxengine.quad import Quad, pack_quads

_NO_OFFSETS = (0, 0, 0, 0, 0, 0)


class ChunkMesh:
    """Owns a chunk, the quads built from it and their packed instance buffer."""

    __slots__ = ("chunk", "_quads", "_buffer", "_offsets")

    def __init__(self, chunk: Chunk | None = None) -> None:
        self.chunk = chunk if chunk is not None else Chunk.empty()
        self._quads: list[Quad] | None = None
        self._buffer: bytes | None = None
        self._offsets: tuple[int, ...] = _NO_OFFSETS

    @property
    def offsets(self) -> tuple[int, ...]:
        """Index just past the quads of each face (Left, Right, Up, Down, Front, Back)."""
        return self._offsets

    @property
    def quads(self) -> tuple[Quad, ...] | None:
        """The quads of the last remesh, or None if the chunk was never meshed."""
        return None if self._quads is None else tuple(self._quads)

    @property
    def buffer(self) -> bytes | None:
        """The packed instance buffer, or None if nothing is allocated."""
        return self._buffer

    def remesh(self) -> None:
        """Rebuild the quads and face offsets from the chunk."""
        quads, offsets = self.chunk.remesh()
        self._quads = quads
        self._offsets = offsets

    def allocate(self) -> bool:
        """Pack the current quads into a buffer; return False if there are none yet."""
        if self._quads is None:
            return False
        self._buffer = pack_quads(self._quads)
        return True

    def deallocate(self) -> None:
        """Release the packed buffer."""
        self._buffer = None

    def into_chunk(self) -> Chunk:
        """Return the chunk this mesh was built around."""
        return self.chunk

    def __repr__(self) -> str:
        meshed = "unmeshed" if self._quads is None else f"{len(self._quads)} quads"
        return f"ChunkMesh({self.chunk!r}, {meshed})"