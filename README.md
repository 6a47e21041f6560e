# voxengine

Voxel chunk storage, face meshing and camera math for a small voxel renderer.

A chunk is a 32 × 32 × 32 grid of voxels. Occupancy is kept as 32-bit rows,
and each voxel that is set also records an RGBA colour. Meshing produces one
`Quad` for every exposed voxel face, grouped by direction. A quad packs its
position and direction into one 32-bit word and its colour into a second one.
That 8-byte record is the layout of a GPU instance buffer.

## Installation

```
pip install voxengine
```

## Chunks and meshing

```python
from voxengine.chunk import Chunk

chunk = Chunk.empty()
chunk.set(0, 0, 0, True, (255, 0, 0, 255))
chunk.set(1, 0, 0, True, (0, 255, 0, 255))

assert chunk.get_occupied(0, 0, 0)
print(chunk.get_color(1, 0, 0))   # (0, 255, 0, 255)
print(chunk.count())              # 2

quads, offsets = chunk.remesh()
print(len(quads))                 # 10 exposed faces
print(offsets)                    # index just past each face group:
                                  # Left, Right, Up, Down, Front, Back
```

A coordinate outside `0..31` raises `IndexError`. A colour that does not have
exactly four components raises `ValueError`.

`Chunk.slice(axis, n)` returns layer `n` along an `Axis` (`Axis.X`, `Axis.Y`,
`Axis.Z`) as 32 integer bit masks.

## Directions and quads

`Direction` is an `IntEnum` with these members:

| Member  | Value | Normal |
|---------|-------|--------|
| `Left`  | 0     | X+     |
| `Right` | 1     | X-     |
| `Up`    | 2     | Y+     |
| `Down`  | 3     | Y-     |
| `Front` | 4     | Z+     |
| `Back`  | 5     | Z-     |

`Direction.unit_vector()` returns the outward normal of a face as a tuple.

```python
from voxengine.direction import Direction
from voxengine.quad import Quad, pack_quads

quad = Quad(Direction.Up, 3, 4, 5, (1, 2, 3, 4))
print(quad.x(), quad.y(), quad.z())   # 3 4 5
assert quad.direction() is Direction.Up
quad.set_texture_id(7)                # 7-bit id stored in bits 21..27
record = quad.to_bytes()              # 8 bytes, little-endian words
data = pack_quads(quads)              # all records concatenated
```

## Chunk meshes

`voxengine.chunk_mesh.ChunkMesh` holds a chunk together with its mesh:

- `remesh()` rebuilds `quads` and `offsets` from `mesh.chunk`.
- `allocate()` packs the quads into `buffer` as bytes. It returns `False` if
  the chunk has not been meshed yet.
- `deallocate()` clears `buffer`.
- `into_chunk()` returns the chunk.

## Objects made of many chunks

```python
import numpy as np
from voxengine.voxel_object import VoxelObject

obj = VoxelObject.from_voxels(
    np.identity(4),
    [((0, 0, 0), (255, 255, 255, 255)),
     ((40, 0, 0), (0, 0, 255, 255))],
)
print(obj.count())                    # 2
for position, mesh in obj.chunks():
    print(position, len(mesh.quads))  # (0, 0, 0) 6, then (1, 0, 0) 6
```

`from_voxels` first shifts each axis by the absolute value of its smallest
coordinate. It then splits the voxels into chunks of 32 and meshes and packs
every chunk. `add_chunk(offset, chunk, allocate=True)` inserts a chunk at a
chunk position. `remove_chunk(position)` and `get_chunk(position)` return
`None` when there is no chunk at that position. `transform` is a 4 × 4 numpy
array, and the identity matrix is used when none is given.

## Camera

`voxengine.camera` has two functions that build 4 × 4 numpy matrices:

- `look_at_rh(eye, target, up)` builds a right-handed view matrix.
- `perspective(fovy_degrees, aspect, znear, zfar)` builds an OpenGL-style
  projection. It raises `ValueError` for impossible parameters.

`Camera(aspect)` starts at the origin and looks along +Z with Y up. Its field
of view is 45°, its near plane 0.1 and its far plane 100.

- `move_to(eye)` and `point_at(target)` change the position and the point the
  camera looks at. Each recomputes the uniform unless it is called with
  `update=False`.
- `view_projection()` returns the combined matrix, with depth mapped to the
  range 0..1.
- `camera.uniform` is a `CameraUniform`. Its `to_bytes()` returns the 64-byte
  column-major float32 layout used for a uniform buffer.

`voxengine.size.Size(width, height, pixels_per_point=1.0)` is a frozen
surface size. Its `aspect()` method returns width divided by height.

## Frame statistics

`voxengine.performance.Stats` keeps the last 100 frame rates and frame times,
most recent first. Frame times are in milliseconds.

- Call `record()` once per frame, or add a sample directly with
  `push(fps, timing)`.
- `avg_fps(n)` and `avg_timing(n)` add up the `n` most recent values and
  divide the sum by `n`.
- `summary()` returns the text `FPS <avg> / <avg>ms` over the last 25 frames.

The clock is a constructor argument, so tests can supply their own.

## What this package does not do

The package has no window, no event loop, no GPU device and no drawing of any
kind. Its buffers are plain `bytes` and its matrices are numpy arrays. Passing
them to a graphics API, and showing the statistics on screen, is left to the
application.

## Running the tests

```
pip install "voxengine[test]"
pytest
```