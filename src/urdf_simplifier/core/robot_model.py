"""Document model for robot descriptions.

This module defines the in-memory representation of a URDF document: a robot
owning its links and joints, where joints refer to links by name only. The
model is plain mutable data so the simplification passes can rewrite links in
place.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

Vector3 = Tuple[float, float, float]


@dataclass
class Origin:
    """Pose of an element relative to its parent frame.

    Attributes:
        xyz: Position as a textual triple, e.g. ``"0 0 0.1"``. ``None`` means
             zero translation.
        rpy: Roll-pitch-yaw as a textual triple. ``None`` means no rotation.
    """
    xyz: Optional[str] = None
    rpy: Optional[str] = None


@dataclass
class Mesh:
    """Triangle-mesh geometry referenced by filename or URI."""
    filename: str
    scale: Optional[Vector3] = None


@dataclass
class Box:
    """Axis-aligned box geometry with edge lengths along x, y and z."""
    size: Vector3


# Exactly one shape per geometry element.
Geometry = Union[Mesh, Box]


@dataclass
class Visual:
    name: Optional[str] = None
    origin: Optional[Origin] = None
    geometry: Optional[Geometry] = None


@dataclass
class Collision:
    name: Optional[str] = None
    origin: Optional[Origin] = None
    geometry: Optional[Geometry] = None


@dataclass
class Inertia:
    ixx: float = 0.0
    ixy: float = 0.0
    ixz: float = 0.0
    iyy: float = 0.0
    iyz: float = 0.0
    izz: float = 0.0


@dataclass
class Inertial:
    origin: Optional[Origin] = None
    mass: Optional[float] = None
    inertia: Optional[Inertia] = None


@dataclass
class Link:
    """A rigid body of the robot.

    Attributes:
        name: Unique link name, used by joints to reference this link.
        visuals: Rendering geometry, in document order.
        collisions: Collision geometry, in document order.
        inertial: Mass properties, if the document provides them.
        origin: Link-level pose. Not part of standard URDF; the simplifier
                fills it from the inertial origin.
    """
    name: str
    visuals: List[Visual] = field(default_factory=list)
    collisions: List[Collision] = field(default_factory=list)
    inertial: Optional[Inertial] = None
    origin: Optional[Origin] = None


@dataclass
class Limit:
    effort: Optional[float] = None
    lower: Optional[float] = None
    upper: Optional[float] = None
    velocity: Optional[float] = None


@dataclass
class Dynamics:
    damping: Optional[float] = None
    friction: Optional[float] = None


@dataclass
class Joint:
    """A connector between a parent and a child link.

    Attributes:
        name: Joint name.
        type: Motion type as written in the document, e.g. ``"revolute"``,
              ``"prismatic"``, ``"fixed"`` or ``"continuous"``.
        parent: Name of the parent link, or ``None`` if the element is absent.
        child: Name of the child link, or ``None`` if the element is absent.
        origin: Pose of the child frame in the parent frame.
        axis: Joint axis as a textual triple.
        limit: Position, velocity and effort limits.
        dynamics: Damping and friction.
    """
    name: str
    type: str
    parent: Optional[str] = None
    child: Optional[str] = None
    origin: Optional[Origin] = None
    axis: Optional[str] = None
    limit: Optional[Limit] = None
    dynamics: Optional[Dynamics] = None


@dataclass
class Robot:
    """Root of a robot description.

    The robot owns its links and joints. Joints reference links by name, so
    ``link_map`` is rebuilt from ``links`` on every access and never goes
    stale after links are added or removed.
    """
    name: str
    links: List[Link] = field(default_factory=list)
    joints: List[Joint] = field(default_factory=list)

    @property
    def link_map(self) -> Dict[str, Link]:
        return {link.name: link for link in self.links}

    @property
    def link_names(self) -> Tuple[str, ...]:
        return tuple(link.name for link in self.links)

    @property
    def joint_names(self) -> Tuple[str, ...]:
        return tuple(joint.name for joint in self.joints)
