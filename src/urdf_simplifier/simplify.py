"""Per-link simplification: strip everything but collision boxes.

Each link loses its visual and inertial data, and every mesh collision is
replaced by the axis-aligned bounding box of the mesh, positioned at the box
center. A mesh whose box cannot be computed is left as a mesh.
"""

import logging
import os
from typing import Iterable

from .core import BoundingBoxError, compute_bounding_box
from .core.robot_model import Box, Collision, Link, Mesh, Origin
from .io.resolver import resolve_mesh_path
from .io.urdf_writer import format_vector

logger = logging.getLogger(__name__)


def simplify_link(link: Link, base_dir: str) -> int:
    """Simplify a link in place.

    The inertial origin is moved to the link before the inertial block is
    dropped, and overwrites any existing link origin.

    Args:
        link: Link to rewrite.
        base_dir: Directory mesh references are resolved against.

    Returns:
        Number of collision meshes that could not be replaced by a box.
    """
    if link.inertial is not None and link.inertial.origin is not None:
        link.origin = link.inertial.origin
    link.inertial = None
    link.visuals = []

    failures = 0
    for collision in link.collisions:
        if isinstance(collision.geometry, Mesh):
            if not _replace_mesh_with_box(collision, base_dir):
                failures += 1
    return failures


def simplify_links(links: Iterable[Link], base_dir: str) -> int:
    """Simplify every link in place.

    Returns:
        Total number of collision meshes left unreplaced.
    """
    return sum(simplify_link(link, base_dir) for link in links)


def _replace_mesh_with_box(collision: Collision, base_dir: str) -> bool:
    mesh = collision.geometry
    mesh_path = resolve_mesh_path(mesh.filename, base_dir)
    logger.info("Mesh path: %s", mesh_path)

    try:
        bbox = compute_bounding_box(mesh_path, mesh.scale)
    except BoundingBoxError as exc:
        logger.warning("Could not calculate bounding box for %s: %s", mesh.filename, exc)
        return False

    width, height, depth = bbox.dimensions
    center = bbox.center

    collision.geometry = Box(size=(width, height, depth))
    # Only the position moves to the box center; any rotation is kept.
    if collision.origin is None:
        collision.origin = Origin()
    collision.origin.xyz = format_vector(center)

    logger.info(
        "Replaced mesh %s with box of width, height, depth = (%.5f x %.5f x %.5f)",
        os.path.basename(mesh_path), width, height, depth,
    )
    logger.info("Set collision origin to center: (%.5f, %.5f, %.5f)", *center)
    return True
