"""Tests for bounding box computation."""

from pathlib import Path

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from urdf_simplifier.core import BoundingBox, BoundingBoxError, compute_bounding_box
from urdf_simplifier.core.bounding_box import bounds_from_vertices

FIXTURES = Path(__file__).parent / "fixtures"


def test_bounding_box_of_fixture_mesh():
    """Test dimensions and center of an offset box mesh."""
    bbox = compute_bounding_box(str(FIXTURES / "meshes" / "collision" / "shoulder.stl"))

    np.testing.assert_allclose(bbox.lower, [0.0, 0.0, 0.0], atol=1e-6)
    np.testing.assert_allclose(bbox.upper, [0.1, 0.2, 0.3], atol=1e-6)
    np.testing.assert_allclose(bbox.dimensions, (0.1, 0.2, 0.3), atol=1e-6)
    np.testing.assert_allclose(bbox.center, (0.05, 0.1, 0.15), atol=1e-6)


def test_bounding_box_scale(tmp_path, write_box_stl):
    """Test that mesh scale is applied before taking the bounds."""
    path = write_box_stl(tmp_path / "part.stl", (-1.0, 0.0, 2.0), (1.0, 4.0, 6.0))
    bbox = compute_bounding_box(str(path), scale=(0.001, 0.5, 2.0))

    np.testing.assert_allclose(bbox.dimensions, (0.002, 2.0, 8.0), atol=1e-9)
    np.testing.assert_allclose(bbox.center, (0.0, 1.0, 8.0), atol=1e-9)


def test_bounding_box_negative_scale(tmp_path, write_box_stl):
    """Test that a mirroring scale keeps dimensions non-negative."""
    path = write_box_stl(tmp_path / "part.stl", (1.0, 1.0, 1.0), (2.0, 3.0, 4.0))
    bbox = compute_bounding_box(str(path), scale=(-1.0, 1.0, 1.0))

    np.testing.assert_allclose(bbox.dimensions, (1.0, 2.0, 3.0), atol=1e-9)
    np.testing.assert_allclose(bbox.center, (-1.5, 2.0, 2.5), atol=1e-9)


def test_bounding_box_missing_file(tmp_path):
    """Test that a missing file raises BoundingBoxError."""
    with pytest.raises(BoundingBoxError, match="file not found"):
        compute_bounding_box(str(tmp_path / "missing.stl"))


def test_bounding_box_unreadable_mesh():
    """Test that a file that is not a mesh raises BoundingBoxError."""
    with pytest.raises(BoundingBoxError):
        compute_bounding_box(str(FIXTURES / "meshes" / "collision" / "broken.stl"))


def test_bounds_from_vertices():
    """Test the min/max reduction directly."""
    vertices = jnp.array([[0.0, 1.0, -2.0], [3.0, -1.0, 5.0], [1.0, 0.0, 0.0]])
    lower, upper = bounds_from_vertices(vertices, jnp.ones(3))

    np.testing.assert_allclose(lower, [0.0, -1.0, -2.0])
    np.testing.assert_allclose(upper, [3.0, 1.0, 5.0])


def test_bounding_box_is_pytree():
    """Test that BoundingBox is a valid JAX PyTree."""
    bbox = BoundingBox(lower=jnp.array([0.0, 0.0, 0.0]), upper=jnp.array([1.0, 2.0, 3.0]))

    flat, tree_def = jax.tree_util.tree_flatten(bbox)
    assert len(flat) == 2
    reconstructed = jax.tree_util.tree_unflatten(tree_def, flat)
    np.testing.assert_array_equal(reconstructed.lower, bbox.lower)
    np.testing.assert_array_equal(reconstructed.upper, bbox.upper)

    # Usable inside JIT-compiled functions
    volume = jax.jit(lambda b: jnp.prod(b.upper - b.lower))(bbox)
    np.testing.assert_allclose(volume, 6.0)


def test_bounding_box_uses_float64():
    """Test that bounds keep double precision."""
    bbox = BoundingBox(lower=jnp.zeros(3), upper=jnp.ones(3))
    assert bbox.lower.dtype == jnp.float64
