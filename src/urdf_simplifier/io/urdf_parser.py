"""URDF parser for loading robot descriptions into the document model.

Optional sub-elements (origin, inertial, axis, limit, dynamics) may be absent;
they are read as ``None`` rather than treated as errors.
"""

from typing import Optional, Tuple

from lxml import etree

from urdf_simplifier.core.exceptions import URDFParseError
from urdf_simplifier.core.robot_model import (
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


def load_urdf(urdf_path: str) -> Robot:
    """Load a URDF file into a Robot.

    Args:
        urdf_path: Path to the URDF file to load.

    Returns:
        Robot: The parsed document.

    Raises:
        OSError: If the file cannot be read.
        URDFParseError: If the file is not a well-formed robot description.
    """
    with open(urdf_path, "rb") as f:
        data = f.read()
    return parse_urdf(data)


def parse_urdf(data: bytes) -> Robot:
    """Parse URDF document bytes into a Robot.

    Args:
        data: Raw document bytes, including any XML declaration.

    Returns:
        Robot: The parsed document.

    Raises:
        URDFParseError: If the XML is malformed, the root element is not
            ``robot``, or a numeric attribute cannot be read.
    """
    parser = etree.XMLParser(remove_comments=True, resolve_entities=False)
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as exc:
        raise URDFParseError(f"Malformed XML: {exc}") from exc

    if root.tag != "robot":
        raise URDFParseError(f"Expected root element 'robot', found '{root.tag}'")

    robot = Robot(name=root.get("name", ""))
    # Only direct children; nested <link> tags inside extensions are not links.
    for link_elem in root.findall("link"):
        robot.links.append(_parse_link(link_elem))
    for joint_elem in root.findall("joint"):
        robot.joints.append(_parse_joint(joint_elem))
    return robot


def _parse_link(elem: etree._Element) -> Link:
    link = Link(name=elem.get("name", ""))
    for visual_elem in elem.findall("visual"):
        link.visuals.append(Visual(
            name=visual_elem.get("name"),
            origin=_parse_origin(visual_elem.find("origin")),
            geometry=_parse_geometry(visual_elem.find("geometry")),
        ))
    for collision_elem in elem.findall("collision"):
        link.collisions.append(Collision(
            name=collision_elem.get("name"),
            origin=_parse_origin(collision_elem.find("origin")),
            geometry=_parse_geometry(collision_elem.find("geometry")),
        ))

    inertial_elem = elem.find("inertial")
    if inertial_elem is not None:
        link.inertial = _parse_inertial(inertial_elem)

    link.origin = _parse_origin(elem.find("origin"))
    return link


def _parse_inertial(elem: etree._Element) -> Inertial:
    inertial = Inertial(origin=_parse_origin(elem.find("origin")))

    mass_elem = elem.find("mass")
    if mass_elem is not None:
        inertial.mass = _parse_float(mass_elem, "value")

    inertia_elem = elem.find("inertia")
    if inertia_elem is not None:
        inertial.inertia = Inertia(**{
            key: _parse_float(inertia_elem, key, 0.0)
            for key in ("ixx", "ixy", "ixz", "iyy", "iyz", "izz")
        })
    return inertial


def _parse_joint(elem: etree._Element) -> Joint:
    joint = Joint(name=elem.get("name", ""), type=elem.get("type", ""))

    parent_elem = elem.find("parent")
    if parent_elem is not None:
        joint.parent = parent_elem.get("link")
    child_elem = elem.find("child")
    if child_elem is not None:
        joint.child = child_elem.get("link")

    joint.origin = _parse_origin(elem.find("origin"))

    axis_elem = elem.find("axis")
    if axis_elem is not None:
        joint.axis = axis_elem.get("xyz")

    limit_elem = elem.find("limit")
    if limit_elem is not None:
        joint.limit = Limit(
            effort=_parse_float(limit_elem, "effort"),
            lower=_parse_float(limit_elem, "lower"),
            upper=_parse_float(limit_elem, "upper"),
            velocity=_parse_float(limit_elem, "velocity"),
        )

    dynamics_elem = elem.find("dynamics")
    if dynamics_elem is not None:
        joint.dynamics = Dynamics(
            damping=_parse_float(dynamics_elem, "damping"),
            friction=_parse_float(dynamics_elem, "friction"),
        )
    return joint


def _parse_origin(elem: Optional[etree._Element]) -> Optional[Origin]:
    if elem is None:
        return None
    return Origin(xyz=elem.get("xyz"), rpy=elem.get("rpy"))


def _parse_geometry(elem: Optional[etree._Element]) -> Optional[Geometry]:
    """Read the shape inside a <geometry> element.

    Only meshes and boxes are modelled; any other shape reads as no geometry.
    """
    if elem is None:
        return None

    mesh_elem = elem.find("mesh")
    if mesh_elem is not None:
        scale = mesh_elem.get("scale")
        return Mesh(
            filename=mesh_elem.get("filename", ""),
            scale=_parse_vector3(scale, "mesh scale") if scale is not None else None,
        )

    box_elem = elem.find("box")
    if box_elem is not None:
        return Box(size=_parse_vector3(box_elem.get("size", "0 0 0"), "box size"))

    return None


def _parse_float(elem: etree._Element, key: str, default: Optional[float] = None) -> Optional[float]:
    value = elem.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise URDFParseError(
            f"Invalid value for '{key}' on <{elem.tag}> (line {elem.sourceline}): {value!r}"
        ) from exc


def _parse_vector3(text: str, what: str) -> Tuple[float, float, float]:
    parts = text.split()
    if len(parts) != 3:
        raise URDFParseError(f"Expected three values for {what}, got {text!r}")
    try:
        x, y, z = (float(p) for p in parts)
    except ValueError as exc:
        raise URDFParseError(f"Invalid {what}: {text!r}") from exc
    return x, y, z
