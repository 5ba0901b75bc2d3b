"""Core data structures for robot descriptions.

This module provides the document model for robot descriptions and the
bounding-box computation used to replace collision meshes.
"""

from .bounding_box import BoundingBox, compute_bounding_box
from .exceptions import BoundingBoxError, URDFParseError
from .robot_model import (
    Box,
    Collision,
    Dynamics,
    Geometry,
    Inertia,
    Inertial,
    Joint,
    Limit,
    Link,
    Mesh,
    Origin,
    Robot,
    Visual,
)

__all__ = [
    "BoundingBox",
    "compute_bounding_box",
    "BoundingBoxError",
    "URDFParseError",
    "Box",
    "Collision",
    "Dynamics",
    "Geometry",
    "Inertia",
    "Inertial",
    "Joint",
    "Limit",
    "Link",
    "Mesh",
    "Origin",
    "Robot",
    "Visual",
]
