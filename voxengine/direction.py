"""Axes and face directions of the voxel grid."""

from __future__ import annotations

import enum


class Axis(enum.Enum):
    """One of the three axes of a chunk."""

    X = "x"
    Y = "y"
    Z = "z"


class Direction(enum.IntEnum):
    """The six faces of a voxel, numbered as they are packed into a quad."""

    Left = 0
    """Left (X+)"""
    Right = 1
    """Right (X-)"""
    Up = 2
    """Up (Y+)"""
    Down = 3
    """Down (Y-)"""
    Front = 4
    """Front (Z+)"""
    Back = 5
    """Back (Z-)"""

    def unit_vector(self) -> tuple[float, float, float]:
        """Return the outward unit normal of this face."""
        return _UNIT_VECTORS[self]


_UNIT_VECTORS: dict[Direction, tuple[float, float, float]] = {
    Direction.Left: (1.0, 0.0, 0.0),
    Direction.Right: (-1.0, 0.0, 0.0),
    Direction.Up: (0.0, 1.0, 0.0),
    Direction.Down: (0.0, -1.0, 0.0),
    Direction.Front: (0.0, 0.0, 1.0),
    Direction.Back: (0.0, 0.0, -1.0),
}