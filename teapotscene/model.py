"""Wavefront OBJ meshes together with their textures and material coefficients."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

import numpy as np

log = logging.getLogger(__name__)

_CORNER = re.compile(r"([+-]?\d+)/([+-]?\d+)/([+-]?\d+)")


class ObjFormatError(ValueError):
    """Raised when an OBJ file cannot be read."""


@dataclass(frozen=True)
class Texture:
    """An image bound to a shader sampler named ``<type>Map``."""

    path: str
    type: str


@dataclass(frozen=True, eq=False)
class Mesh:
    """Per-corner triangle attributes, three rows per triangle."""

    vertices: np.ndarray
    uvs: np.ndarray
    normals: np.ndarray

    def __len__(self):
        return len(self.vertices)


def _floats(args, count, lineno):
    if len(args) < count:
        raise ObjFormatError(f"line {lineno}: expected {count} numbers")
    try:
        return tuple(float(a) for a in args[:count])
    except ValueError as exc:
        raise ObjFormatError(f"line {lineno}: {exc}") from None


def _face(args, lineno):
    if len(args) < 3:
        raise ObjFormatError(f"line {lineno}: face needs three vertex/uv/normal triples")
    corners = []
    for token in args[:3]:
        match = _CORNER.fullmatch(token)
        if match is None:
            raise ObjFormatError(
                f"line {lineno}: face corner {token!r} is not vertex/uv/normal"
            )
        corners.append(tuple(int(part) for part in match.groups()))
    return corners


def _pick(table, index, kind):
    if not 1 <= index <= len(table):
        raise ObjFormatError(f"{kind} index {index} out of range 1..{len(table)}")
    return table[index - 1]


def parse_obj(lines):
    """Parse OBJ text lines into a triangle mesh with attributes expanded per corner."""
    positions, tex_coords, normals, corners = [], [], [], []
    for lineno, line in enumerate(lines, 1):
        tokens = line.split()
        if not tokens:
            continue
        header, args = tokens[0], tokens[1:]
        if header == "v":
            positions.append(_floats(args, 3, lineno))
        elif header == "vt":
            tex_coords.append(_floats(args, 2, lineno))
        elif header == "vn":
            normals.append(_floats(args, 3, lineno))
        elif header == "f":
            corners.extend(_face(args, lineno))

    out_vertices = [_pick(positions, v, "vertex") for v, _, _ in corners]
    out_uvs = [_pick(tex_coords, t, "uv") for _, t, _ in corners]
    out_normals = [_pick(normals, n, "normal") for _, _, n in corners]
    return Mesh(
        vertices=np.array(out_vertices, dtype=float).reshape(-1, 3),
        uvs=np.array(out_uvs, dtype=float).reshape(-1, 2),
        normals=np.array(out_normals, dtype=float).reshape(-1, 3),
    )


def load_obj(path):
    """Read an OBJ file from ``path``."""
    log.info("Loading file %s", path)
    with open(path, encoding="utf-8") as handle:
        return parse_obj(handle)


class Model:
    """A mesh loaded from an OBJ file with textures and lighting coefficients."""

    def __init__(self, path):
        self.path = str(path)
        self.mesh = load_obj(path)
        self.textures = []
        self.ka = 0.0
        self.kd = 0.0
        self.ks = 0.0
        self.Ns = 0.0

    def add_texture(self, path, type):
        """Attach a texture image for the sampler ``<type>Map``."""
        if not Path(path).is_file():
            log.warning("Texture %s failed to load.", path)
        texture = Texture(str(path), type)
        self.textures.append(texture)
        return texture

    def material_uniforms(self):
        """Return the material coefficients keyed by their shader uniform names."""
        return {"ka": self.ka, "kd": self.kd, "ks": self.ks, "Ns": self.Ns}

    def texture_uniforms(self):
        """Return the texture unit bound to each sampler uniform; later textures win."""
        return {f"{texture.type}Map": unit for unit, texture in enumerate(self.textures)}