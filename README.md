# teapotscene

This package holds the parts of a small 3D scene that work without a graphics window. The scene has ten teapots on a stone floor, two point lights, and a first-person camera. Everything is plain Python data and numpy arrays. You can use it to work out what a renderer would draw, to test that, or to pass the values to an OpenGL binding of your choice.

## Modules

### `teapotscene.maths`

Builds 4×4 transforms as numpy arrays. They are indexed `m[row, column]` and act on column vectors, so `m @ [x, y, z, 1]` transforms a point.

- `translate(v)` and `scale(v)` take a 3-vector.
- `rotate(angle, axis)` rotates by `angle` radians about `axis`. The axis is normalised first, and a zero axis raises `ValueError`.
- `radians(angle)` converts degrees to radians, taking pi as 3.1416.
- `look_at(eye, center, up)` builds a right-handed view matrix.
- `perspective(fov, aspect, near, far)` builds a right-handed projection with clip depth -1..1. It raises `ValueError` for a zero aspect ratio, for `near == far`, or for a zero field of view.

### `teapotscene.camera`

`Camera(eye, target)` is a dataclass with these defaults:

- fov 45°, aspect 1024/768, near 0.2, far 100
- yaw -90°, pitch 0
- world up (0, 1, 0)

Its two methods:

- `calculate_camera_vectors()` sets `front`, `right` and `up` from `yaw` and `pitch`. It raises `ValueError` if `front` is parallel to the world up vector.
- `calculate_matrices()` calls `calculate_camera_vectors()`, then sets `view` (looking from `eye` along `front`) and `projection`.

### `teapotscene.model`

- `parse_obj(lines)` reads Wavefront OBJ text with `v`, `vt`, `vn` and `f` lines. Faces must be triangles written as `v/vt/vn` triples. Other lines are ignored.
  - It returns a `Mesh` with `vertices`, `uvs` and `normals` arrays, expanded to one row per triangle corner. `len(mesh)` is the number of corners.
  - It raises `ObjFormatError`, a subclass of `ValueError`, for a malformed number, for a face corner that is not `v/vt/vn`, or for an index out of range.
- `load_obj(path)` does the same for a file.
- `Model(path)` loads a mesh into `model.mesh`.
  - It has material coefficients `ka`, `kd`, `ks` and `Ns`, all 0.0 until you set them.
  - It keeps a list of `Texture(path, type)` entries.
  - `add_texture(path, type)` records a texture. If the file does not exist it logs a warning, and records the texture anyway.
  - `material_uniforms()` returns `{"ka": ..., "kd": ..., "ks": ..., "Ns": ...}`.
  - `texture_uniforms()` maps `"<type>Map"` to the texture unit, which is the texture's position in the list. A later texture of the same type wins.

### `teapotscene.scene`

- `SceneObject` has a name, position, rotation axis, angle and scale. `model_matrix()` returns translate · rotate · scale.
- `default_objects()` returns ten teapots followed by the floor:
  - each teapot is scaled by 0.75, turns about (1, 1, 1), and is rotated 20° more than the one before it;
  - the floor is at (0, -0.85, 0).
- `Light` has a position, a colour (white by default), attenuation `constant`/`linear`/`quadratic` (1.0, 0.1 and 0.02 by default) and a `type` (1 by default).
- `default_lights()` returns two white point lights, at (2, 2, 2) and (1, 1, -8).
- `light_uniforms(lights, view)` returns a dict keyed `lightSources[i].colour`, `.position`, `.constant`, `.linear`, `.quadratic` and `.type`. The positions are in view space.
- `light_model_matrix(light)` places a sphere scaled by 0.1 at the light.
- `move_camera(camera, keys, delta_time)` moves the camera at 5 units per second for each held `Key`:
  - W and S move along `front`;
  - A and D move along `right`.

  It returns `True` when `Key.ESCAPE` is held.
- `look(camera, x_pos, y_pos)` changes yaw and pitch by 0.005 × the cursor's offset from the centre of a 1024×768 window. It then recomputes the camera vectors.

## Install

```
pip install .
```

## Example

```python
import numpy as np
from teapotscene.camera import Camera
from teapotscene.scene import Key, default_lights, default_objects, light_uniforms, look, move_camera

camera = Camera(np.array([0.0, 0.0, 5.0]), np.array([0.0, 0.0, 0.0]))
move_camera(camera, {Key.W}, delta_time=0.1)   # step forwards
look(camera, 522.0, 384.0)                     # cursor 10 px right of centre
camera.calculate_matrices()

for obj in default_objects():
    mv = camera.view @ obj.model_matrix()
    mvp = camera.projection @ mv

uniforms = light_uniforms(default_lights(), camera.view)
```

## What it does not do

This package does not:

- open a window or read the keyboard or mouse;
- compile shaders or draw anything;
- decode texture images. A `Texture` is only a path and a sampler type.

Pair it with a windowing and OpenGL library to render the scene.

## Tests

```
pip install .[test]
pytest
```