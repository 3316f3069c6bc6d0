"""The scene: teapots on a stone floor, lit by point lights, viewed by a camera."""

import enum
from dataclasses import dataclass, field

import numpy as np

from teapotscene.maths import radians, rotate, scale, translate

WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768
MOVE_SPEED = 5.0
MOUSE_SENSITIVITY = 0.005
LIGHT_SCALE = 0.1

_TEAPOT_POSITIONS = (
    (0.0, 0.0, 0.0),
    (2.0, 5.0, -10.0),
    (-3.0, -2.0, -3.0),
    (-4.0, -2.0, -8.0),
    (2.0, 2.0, -6.0),
    (-4.0, 3.0, -8.0),
    (0.0, -2.0, -5.0),
    (4.0, 2.0, -4.0),
    (2.0, 0.0, -2.0),
    (-1.0, 1.0, -2.0),
)


def _vector(*values):
    return lambda: np.array(values, dtype=float)


@dataclass
class SceneObject:
    """A placed instance of a model: position, rotation axis and angle, and scale."""

    name: str = ""
    position: np.ndarray = field(default_factory=_vector(0.0, 0.0, 0.0))
    rotation: np.ndarray = field(default_factory=_vector(0.0, 1.0, 0.0))
    scale: np.ndarray = field(default_factory=_vector(1.0, 1.0, 1.0))
    angle: float = 0.0

    def __post_init__(self):
        self.position = np.array(self.position, dtype=float)
        self.rotation = np.array(self.rotation, dtype=float)
        self.scale = np.array(self.scale, dtype=float)

    def model_matrix(self):
        """Return translate * rotate * scale for this object."""
        return translate(self.position) @ rotate(self.angle, self.rotation) @ scale(self.scale)


@dataclass
class Light:
    """A light source with colour and distance attenuation coefficients."""

    position: np.ndarray
    colour: np.ndarray = field(default_factory=_vector(1.0, 1.0, 1.0))
    constant: float = 1.0
    linear: float = 0.1
    quadratic: float = 0.02
    type: int = 1

    def __post_init__(self):
        self.position = np.array(self.position, dtype=float)
        self.colour = np.array(self.colour, dtype=float)


class Key(enum.Enum):
    """Keys the scene responds to."""

    ESCAPE = "escape"
    W = "w"
    S = "s"
    A = "a"
    D = "d"


def default_lights():
    """Return the two white point lights of the scene."""
    return [
        Light(position=(2.0, 2.0, 2.0)),
        Light(position=(1.0, 1.0, -8.0)),
    ]


def default_objects():
    """Return the ten teapots followed by the floor."""
    objects = [
        SceneObject(
            name="teapot",
            position=position,
            rotation=(1.0, 1.0, 1.0),
            scale=(0.75, 0.75, 0.75),
            angle=radians(20.0 * i),
        )
        for i, position in enumerate(_TEAPOT_POSITIONS)
    ]
    objects.append(
        SceneObject(
            name="floor",
            position=(0.0, -0.85, 0.0),
            rotation=(0.0, 1.0, 0.0),
            scale=(1.0, 1.0, 1.0),
            angle=0.0,
        )
    )
    return objects


def light_uniforms(lights, view):
    """Return shader uniform values for the lights, positions in view space."""
    view = np.asarray(view, dtype=float)
    uniforms = {}
    for i, light in enumerate(lights):
        prefix = f"lightSources[{i}]."
        view_position = (view @ np.append(light.position, 1.0))[:3]
        uniforms[prefix + "colour"] = light.colour.copy()
        uniforms[prefix + "position"] = view_position
        uniforms[prefix + "constant"] = light.constant
        uniforms[prefix + "linear"] = light.linear
        uniforms[prefix + "quadratic"] = light.quadratic
        uniforms[prefix + "type"] = light.type
    return uniforms


def light_model_matrix(light):
    """Return the model matrix of the small sphere drawn at a light's position."""
    return translate(light.position) @ scale((LIGHT_SCALE, LIGHT_SCALE, LIGHT_SCALE))


def move_camera(camera, keys, delta_time):
    """Move the camera for the held keys; return True when the window should close."""
    keys = set(keys)
    step = MOVE_SPEED * delta_time
    if Key.W in keys:
        camera.eye = camera.eye + step * camera.front
    if Key.S in keys:
        camera.eye = camera.eye - step * camera.front
    if Key.A in keys:
        camera.eye = camera.eye - step * camera.right
    if Key.D in keys:
        camera.eye = camera.eye + step * camera.right
    return Key.ESCAPE in keys


def look(camera, x_pos, y_pos):
    """Turn the camera by the cursor's offset from the window centre."""
    centre_x = WINDOW_WIDTH // 2
    centre_y = WINDOW_HEIGHT // 2
    camera.yaw += MOUSE_SENSITIVITY * (x_pos - centre_x)
    camera.pitch += MOUSE_SENSITIVITY * (centre_y - y_pos)
    camera.calculate_camera_vectors()