"""Packed per-face instance data for the voxel renderer."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence

from voxengine.direction import Direction

_U32 = 0xFFFFFFFF
_COORD_MASK = 0b111111
_DIRECTION_MASK = 0b111
_TEXTURE_MASK = 0b01111111
_LAYOUT = struct.Struct("<II")


class Quad:
    """One visible voxel face: position, direction and colour in two 32-bit words."""

    __slots__ = ("_low", "_color")

    def __init__(
        self,
        direction: Direction | int,
        x: int,
        y: int,
        z: int,
        color: Sequence[int] | bytes,
    ) -> None:
        direction = Direction(direction)
        raw = bytes(color)
        if len(raw) != 4:
            raise ValueError(f"colour must have 4 components, got {len(raw)}")
        self._low = (x | (y << 6) | (z << 12) | (int(direction) << 18)) & _U32
        self._color = int.from_bytes(raw, "big")

    def x(self) -> int:
        return self._low & _COORD_MASK

    def y(self) -> int:
        return (self._low >> 6) & _COORD_MASK

    def z(self) -> int:
        return (self._low >> 12) & _COORD_MASK

    def direction(self) -> Direction:
        """Return the face direction; raise ValueError if the bits hold none."""
        bits = (self._low >> 18) & _DIRECTION_MASK
        try:
            return Direction(bits)
        except ValueError:
            raise ValueError("invalid direction") from None

    def color(self) -> tuple[int, int, int, int]:
        """Return the colour word as its little-endian bytes."""
        return tuple(self._color.to_bytes(4, "little"))  # type: ignore[return-value]

    def set_texture_id(self, texture_id: int) -> None:
        """Store a 7-bit texture id in bits 21 to 27."""
        self._low &= ~(_TEXTURE_MASK << 21) & _U32
        self._low |= (_TEXTURE_MASK & texture_id) << 21

    def to_bytes(self) -> bytes:
        """Return the 8-byte GPU layout of this quad."""
        return _LAYOUT.pack(self._low, self._color)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quad):
            return NotImplemented
        return self._low == other._low and self._color == other._color

    def __hash__(self) -> int:
        return hash((self._low, self._color))

    def __repr__(self) -> str:
        bits = (self._low >> 18) & _DIRECTION_MASK
        direction = Direction(bits).name if bits < len(Direction) else bits
        return (
            f"Quad(x={self.x()}, y={self.y()}, z={self.z()}, "
            f"direction={direction}, color={self.color()})"
        )


def pack_quads(quads: Iterable[Quad]) -> bytes:
    """Concatenate the GPU layout of several quads."""
    return b"".join(quad.to_bytes() for quad in quads)