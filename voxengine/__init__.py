"""Voxel chunks, face meshing, packed quads, camera matrices and frame statistics."""

__version__ = "0.1.0"