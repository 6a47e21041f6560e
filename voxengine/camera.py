"""Perspective camera and the uniform block it feeds to the vertex shader."""

from __future__ import annotations

import math
import threading
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

# Maps OpenGL clip-space depth to the range the GPU backend expects.
OPENGL_TO_WGPU_MATRIX = np.array(
    [
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 0.5, 0.0],
        [0.0, 0.0, 0.5, 1.0],
    ]
)
OPENGL_TO_WGPU_MATRIX.setflags(write=False)

Vec3 = tuple[float, float, float]


def _vec3(value: Sequence[float] | np.ndarray) -> np.ndarray:
    vector = np.asarray(value, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {vector.shape}")
    return vector


def _normalize(vector: np.ndarray) -> np.ndarray:
    with np.errstate(divide="ignore", invalid="ignore"):
        return vector / np.linalg.norm(vector)


def look_at_rh(eye, target, up) -> np.ndarray:
    """Right-handed view matrix looking from eye towards target."""
    eye, target, up = _vec3(eye), _vec3(target), _vec3(up)
    f = _normalize(target - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)
    return np.array(
        [
            [s[0], s[1], s[2], -eye @ s],
            [u[0], u[1], u[2], -eye @ u],
            [-f[0], -f[1], -f[2], eye @ f],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def perspective(fovy_degrees: float, aspect: float, znear: float, zfar: float) -> np.ndarray:
    """OpenGL-style perspective projection with vertical field of view in degrees."""
    if not 0.0 < fovy_degrees < 180.0:
        raise ValueError(f"field of view must lie in (0, 180) degrees, got {fovy_degrees}")
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if znear <= 0.0:
        raise ValueError(f"near plane must be positive, got {znear}")
    if zfar <= 0.0:
        raise ValueError(f"far plane must be positive, got {zfar}")
    if math.isclose(znear, zfar):
        raise ValueError("near and far planes must differ")
    f = 1.0 / math.tan(math.radians(fovy_degrees) / 2.0)
    depth = znear - zfar
    return np.array(
        [
            [f / aspect, 0.0, 0.0, 0.0],
            [0.0, f, 0.0, 0.0],
            [0.0, 0.0, (zfar + znear) / depth, 2.0 * zfar * znear / depth],
            [0.0, 0.0, -1.0, 0.0],
        ]
    )


@dataclass
class CameraUniform:
    """The view-projection matrix as the shader receives it."""

    view_proj: np.ndarray = field(default_factory=lambda: np.identity(4, dtype=np.float32))

    def update_view_proj(self, camera: Camera) -> None:
        self.view_proj = camera.view_projection().astype(np.float32)

    def to_bytes(self) -> bytes:
        """Return the 64-byte column-major little-endian float layout."""
        return np.asarray(self.view_proj, dtype="<f4").tobytes(order="F")


class Camera:
    """A perspective camera; its uniform is refreshed by update()."""

    def __init__(self, aspect: float) -> None:
        self._lock = threading.Lock()
        self._eye = np.zeros(3)
        self._target = np.array([0.0, 0.0, 1.0])
        self._up = np.array([0.0, 1.0, 0.0])
        self.aspect = float(aspect)
        self.fovy = 45.0
        self.znear = 0.1
        self.zfar = 100.0
        self.uniform = CameraUniform()
        self.update()

    @property
    def eye(self) -> Vec3:
        with self._lock:
            return tuple(float(v) for v in self._eye)  # type: ignore[return-value]

    @property
    def target(self) -> Vec3:
        with self._lock:
            return tuple(float(v) for v in self._target)  # type: ignore[return-value]

    @property
    def up(self) -> Vec3:
        return tuple(float(v) for v in self._up)  # type: ignore[return-value]

    def view_projection(self) -> np.ndarray:
        with self._lock:
            eye, target = self._eye.copy(), self._target.copy()
        view = look_at_rh(eye, target, self._up)
        proj = perspective(self.fovy, self.aspect, self.znear, self.zfar)
        return OPENGL_TO_WGPU_MATRIX @ proj @ view

    def update(self) -> None:
        """Recompute the uniform from the current eye, target and aspect."""
        self.uniform.update_view_proj(self)

    def point_at(self, target, update: bool = True) -> None:
        """Set the point the camera looks at."""
        vector = _vec3(target)
        with self._lock:
            self._target = vector
        if update:
            self.update()

    def move_to(self, eye, update: bool = True) -> None:
        """Set the camera position."""
        vector = _vec3(eye)
        with self._lock:
            self._eye = vector
        if update:
            self.update()