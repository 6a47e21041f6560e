import numpy as np
import pytest

from voxengine.camera import (
    OPENGL_TO_WGPU_MATRIX,
    Camera,
    CameraUniform,
    look_at_rh,
    perspective,
)


def test_camera_defaults():
    camera = Camera(1.0)
    assert camera.eye == (0.0, 0.0, 0.0)
    assert camera.target == (0.0, 0.0, 1.0)
    assert camera.up == (0.0, 1.0, 0.0)
    assert camera.fovy == 45.0
    assert (camera.znear, camera.zfar) == (0.1, 100.0)


def test_look_at_maps_eye_to_origin():
    eye = np.array([1.0, 2.0, 3.0])
    view = look_at_rh(eye, [4.0, 6.0, 3.0], [0.0, 1.0, 0.0])
    assert np.allclose(view @ np.append(eye, 1.0), [0.0, 0.0, 0.0, 1.0])


def test_look_at_puts_target_on_negative_z():
    eye = np.array([1.0, 2.0, 3.0])
    target = np.array([4.0, 6.0, 3.0])
    view = look_at_rh(eye, target, [0.0, 1.0, 0.0])
    distance = np.linalg.norm(target - eye)
    assert np.allclose(view @ np.append(target, 1.0), [0.0, 0.0, -distance, 1.0])


def test_look_at_rotation_is_orthonormal():
    view = look_at_rh([0.5, -1.0, 2.0], [3.0, 1.0, -2.0], [0.0, 1.0, 0.0])
    rotation = view[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.identity(3))
    assert np.isclose(np.linalg.det(rotation), 1.0)


def test_perspective_maps_near_and_far_planes():
    near, far = 0.5, 50.0
    proj = perspective(60.0, 1.5, near, far)
    near_clip = proj @ np.array([0.0, 0.0, -near, 1.0])
    far_clip = proj @ np.array([0.0, 0.0, -far, 1.0])
    assert np.isclose(near_clip[2] / near_clip[3], -1.0)
    assert np.isclose(far_clip[2] / far_clip[3], 1.0)


@pytest.mark.parametrize(
    "args",
    [
        (0.0, 1.0, 0.1, 100.0),
        (180.0, 1.0, 0.1, 100.0),
        (45.0, 0.0, 0.1, 100.0),
        (45.0, 1.0, 0.0, 100.0),
        (45.0, 1.0, 0.1, -1.0),
        (45.0, 1.0, 5.0, 5.0),
    ],
)
def test_perspective_rejects_bad_parameters(args):
    with pytest.raises(ValueError):
        perspective(*args)


def test_camera_with_zero_aspect_fails():
    with pytest.raises(ValueError):
        Camera(0.0)


def test_view_projection_composes_depth_fixup():
    camera = Camera(1.25)
    proj = perspective(camera.fovy, camera.aspect, camera.znear, camera.zfar)
    view = look_at_rh(camera.eye, camera.target, camera.up)
    assert np.allclose(camera.view_projection(), OPENGL_TO_WGPU_MATRIX @ proj @ view)


def test_initial_uniform_matches_view_projection():
    camera = Camera(1.5)
    assert np.allclose(camera.uniform.view_proj, camera.view_projection(), atol=1e-6)


def test_move_without_update_keeps_uniform():
    camera = Camera(1.0)
    before = camera.uniform.view_proj.copy()
    camera.move_to((0.0, 0.0, -5.0), update=False)
    assert camera.eye == (0.0, 0.0, -5.0)
    assert np.array_equal(camera.uniform.view_proj, before)
    camera.update()
    assert not np.allclose(camera.uniform.view_proj, before)
    assert np.allclose(camera.uniform.view_proj, camera.view_projection(), atol=1e-6)


def test_point_at_updates_uniform():
    camera = Camera(1.0)
    camera.point_at((1.0, 0.0, 1.0))
    assert camera.target == (1.0, 0.0, 1.0)
    assert np.allclose(camera.uniform.view_proj, camera.view_projection(), atol=1e-6)


def test_point_at_rejects_wrong_shape():
    camera = Camera(1.0)
    with pytest.raises(ValueError):
        camera.point_at((1.0, 2.0))


def test_aspect_scales_first_row():
    camera = Camera(1.0)
    wide = camera.view_projection()
    camera.aspect = 2.0
    narrow = camera.view_projection()
    assert np.allclose(wide[0], 2.0 * narrow[0])
    assert np.allclose(wide[1:], narrow[1:])


def test_default_uniform_is_identity():
    uniform = CameraUniform()
    assert uniform.to_bytes() == np.identity(4, dtype="<f4").tobytes()


def test_uniform_bytes_are_column_major():
    camera = Camera(1.0)
    camera.move_to((2.0, 3.0, -4.0))
    data = camera.uniform.to_bytes()
    assert len(data) == 64
    decoded = np.frombuffer(data, dtype="<f4").reshape((4, 4), order="F")
    assert np.array_equal(decoded, camera.uniform.view_proj)


def test_update_view_proj_from_camera():
    camera = Camera(0.75)
    uniform = CameraUniform()
    uniform.update_view_proj(camera)
    assert uniform.view_proj.dtype == np.float32
    assert np.allclose(uniform.view_proj, camera.view_projection(), atol=1e-6)