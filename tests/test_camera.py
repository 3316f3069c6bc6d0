import numpy as np
import pytest

from teapotscene.camera import Camera
from teapotscene.maths import look_at, perspective, radians


def _camera():
    return Camera(np.array([0.0, 0.0, 5.0]), np.array([0.0, 0.0, 0.0]))


def test_defaults_match_source():
    cam = _camera()
    assert cam.fov == pytest.approx(radians(45.0))
    assert cam.aspect == pytest.approx(1024.0 / 768.0)
    assert cam.near == pytest.approx(0.2)
    assert cam.far == pytest.approx(100.0)
    assert cam.yaw == pytest.approx(radians(-90.0))
    assert np.allclose(cam.front, [0.0, 0.0, -1.0])
    assert np.allclose(cam.view, np.identity(4))


def test_default_vectors_are_close_to_initial_values():
    cam = _camera()
    cam.calculate_camera_vectors()
    assert np.allclose(cam.front, [0.0, 0.0, -1.0], atol=1e-4)
    assert np.allclose(cam.right, [1.0, 0.0, 0.0], atol=1e-4)
    assert np.allclose(cam.up, [0.0, 1.0, 0.0], atol=1e-4)


@pytest.mark.parametrize("yaw,pitch", [(0.0, 0.0), (1.0, 0.4), (-2.0, -0.8), (3.0, 1.2)])
def test_camera_vectors_form_orthonormal_basis(yaw, pitch):
    cam = _camera()
    cam.yaw, cam.pitch = yaw, pitch
    cam.calculate_camera_vectors()
    assert np.linalg.norm(cam.front) == pytest.approx(1.0)
    assert np.linalg.norm(cam.right) == pytest.approx(1.0)
    assert np.linalg.norm(cam.up) == pytest.approx(1.0)
    assert np.dot(cam.front, cam.right) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(cam.front, cam.up) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(cam.right, cam.world_up) == pytest.approx(0.0, abs=1e-12)


def test_pitch_changes_vertical_component():
    cam = _camera()
    cam.pitch = 0.5
    cam.calculate_camera_vectors()
    assert cam.front[1] == pytest.approx(np.sin(0.5))


def test_straight_up_raises():
    cam = _camera()
    cam.pitch = np.pi / 2
    with pytest.raises(ValueError):
        cam.calculate_camera_vectors()


def test_calculate_matrices_uses_eye_and_front():
    cam = _camera()
    cam.yaw = 0.7
    cam.pitch = -0.2
    cam.calculate_matrices()
    expected_view = look_at(cam.eye, cam.eye + cam.front, cam.world_up)
    assert np.allclose(cam.view, expected_view)
    assert np.allclose(cam.projection, perspective(cam.fov, cam.aspect, cam.near, cam.far))


def test_view_places_eye_at_origin():
    cam = _camera()
    cam.eye = np.array([3.0, -1.0, 2.0])
    cam.calculate_matrices()
    moved = cam.view @ np.append(cam.eye, 1.0)
    assert np.allclose(moved[:3], 0.0)
    ahead = cam.view @ np.append(cam.eye + cam.front, 1.0)
    assert np.allclose(ahead[:3], [0.0, 0.0, -1.0])


def test_eye_is_copied():
    eye = np.array([1.0, 2.0, 3.0])
    cam = Camera(eye, np.zeros(3))
    eye[0] = 100.0
    assert cam.eye[0] == 1.0