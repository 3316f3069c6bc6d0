"""A first-person camera steered by yaw and pitch angles."""

from dataclasses import dataclass, field

import numpy as np

from teapotscene.maths import look_at, perspective, radians


def _array(*values):
    return lambda: np.array(values, dtype=float)


@dataclass
class Camera:
    """Camera position, orientation and the view and projection it produces."""

    eye: np.ndarray
    target: np.ndarray
    fov: float = radians(45.0)
    aspect: float = 1024.0 / 768.0
    near: float = 0.2
    far: float = 100.0
    yaw: float = radians(-90.0)
    pitch: float = 0.0
    roll: float = 0.0
    world_up: np.ndarray = field(default_factory=_array(0.0, 1.0, 0.0))
    right: np.ndarray = field(default_factory=_array(1.0, 0.0, 0.0))
    up: np.ndarray = field(default_factory=_array(0.0, 1.0, 0.0))
    front: np.ndarray = field(default_factory=_array(0.0, 0.0, -1.0))
    view: np.ndarray = field(default_factory=lambda: np.identity(4))
    projection: np.ndarray = field(default_factory=lambda: np.identity(4))

    def __post_init__(self):
        self.eye = np.array(self.eye, dtype=float)
        self.target = np.array(self.target, dtype=float)
        self.world_up = np.array(self.world_up, dtype=float)

    def calculate_matrices(self):
        """Refresh the camera vectors, then the view and projection matrices."""
        self.calculate_camera_vectors()
        self.view = look_at(self.eye, self.eye + self.front, self.world_up)
        self.projection = perspective(self.fov, self.aspect, self.near, self.far)

    def calculate_camera_vectors(self):
        """Derive front, right and up from the yaw and pitch angles."""
        cos_pitch = np.cos(self.pitch)
        self.front = np.array(
            [np.cos(self.yaw) * cos_pitch, np.sin(self.pitch), np.sin(self.yaw) * cos_pitch]
        )
        side = np.cross(self.front, self.world_up)
        length = float(np.linalg.norm(side))
        if length == 0.0:
            raise ValueError("camera front is parallel to the world up vector")
        self.right = side / length
        self.up = np.cross(self.right, self.front)