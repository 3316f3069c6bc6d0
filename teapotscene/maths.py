"""Vector and matrix helpers for building model, view and projection transforms.

Matrices are 4x4 numpy arrays indexed as ``m[row, column]`` and act on
column vectors, so ``m @ [x, y, z, 1]`` transforms a point.
"""

import math

import numpy as np

_PI = 3.1416


def _vec3(v):
    arr = np.asarray(v, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr


def _unit(v):
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return v / length


def translate(v):
    """Return the matrix that moves points by the vector ``v``."""
    matrix = np.identity(4)
    matrix[:3, 3] = _vec3(v)
    return matrix


def scale(v):
    """Return the matrix that scales each axis by the matching component of ``v``."""
    matrix = np.identity(4)
    matrix[[0, 1, 2], [0, 1, 2]] = _vec3(v)
    return matrix


def radians(angle):
    """Convert degrees to radians using the value 3.1416 for pi."""
    return angle * _PI / 180.0


def rotate(angle, axis):
    """Return the matrix rotating by ``angle`` radians about ``axis``."""
    x, y, z = _unit(_vec3(axis))
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    return np.array(
        [
            [t * x * x + c, t * x * y - z * s, t * x * z + y * s, 0.0],
            [t * x * y + z * s, t * y * y + c, t * y * z - x * s, 0.0],
            [t * x * z - y * s, t * y * z + x * s, t * z * z + c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def look_at(eye, center, up):
    """Return a right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = _vec3(eye)
    forward = _unit(_vec3(center) - eye)
    side = _unit(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[0, 3] = -np.dot(side, eye)
    matrix[1, 3] = -np.dot(upward, eye)
    matrix[2, 3] = np.dot(forward, eye)
    return matrix


def perspective(fov, aspect, near, far):
    """Return a right-handed perspective projection with clip depth -1..1."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fov / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must be non-zero")
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix