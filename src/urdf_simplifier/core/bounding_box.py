"""Axis-aligned bounding boxes of triangle meshes.

Meshes are loaded with trimesh and their vertices reduced to min/max corners
with a JIT-compiled JAX kernel. The result is an immutable PyTree so it can be
passed through JAX transformations like any other array container.
"""

import os
from typing import Optional, Sequence, Tuple

import jax
import jax.numpy as jnp
import numpy as np
import trimesh
from flax import struct
from jax import Array

from .exceptions import BoundingBoxError


@struct.dataclass
class BoundingBox:
    """Immutable axis-aligned bounding box.

    Attributes:
        lower: Array of shape (3,) with the minimum x, y, z coordinates.
        upper: Array of shape (3,) with the maximum x, y, z coordinates.
    """
    lower: Array
    upper: Array

    @property
    def dimensions(self) -> Tuple[float, float, float]:
        """Width, height and depth along x, y and z."""
        width, height, depth = (float(v) for v in self.upper - self.lower)
        return width, height, depth

    @property
    def center(self) -> Tuple[float, float, float]:
        """Midpoint of the box in mesh coordinates."""
        x, y, z = (float(v) for v in (self.lower + self.upper) / 2.0)
        return x, y, z


@jax.jit
def bounds_from_vertices(vertices: Array, scale: Array) -> Tuple[Array, Array]:
    """Compute the lower and upper corners of a scaled vertex cloud.

    Args:
        vertices: Array of shape (num_vertices, 3).
        scale: Array of shape (3,) with per-axis scale factors.

    Returns:
        Tuple of (lower, upper) corner arrays, each of shape (3,).
    """
    scaled = vertices * scale
    return jnp.min(scaled, axis=0), jnp.max(scaled, axis=0)


def compute_bounding_box(path: str, scale: Optional[Sequence[float]] = None) -> BoundingBox:
    """Load a mesh file and compute its axis-aligned bounding box.

    Args:
        path: Path to a mesh file in any format trimesh can load (STL, OBJ,
              PLY, ...).
        scale: Optional per-axis scale applied to the vertices first.

    Returns:
        BoundingBox: Extents of the mesh in its own frame.

    Raises:
        BoundingBoxError: If the file is missing, cannot be loaded as a mesh,
            or contains no vertices.
    """
    if not os.path.isfile(path):
        raise BoundingBoxError(f"file not found: {path}")

    try:
        mesh = trimesh.load(path, force="mesh")
    except Exception as exc:
        raise BoundingBoxError(f"could not load mesh {path}: {exc}") from exc

    vertices = np.asarray(getattr(mesh, "vertices", ()), dtype=np.float64)
    if vertices.ndim != 2 or vertices.shape[0] == 0:
        raise BoundingBoxError(f"mesh has no vertices: {path}")

    scale_arr = jnp.ones(3) if scale is None else jnp.asarray(scale, dtype=jnp.float64)
    lower, upper = bounds_from_vertices(jnp.asarray(vertices), scale_arr)
    return BoundingBox(lower=lower, upper=upper)
