"""URDF writer for serializing the document model back to XML.

Output starts with an XML declaration and is indented by two spaces per level.
Links are written before joints, and absent optional elements are omitted.
"""

from typing import Optional, Sequence

import numpy as np
from lxml import etree

from urdf_simplifier.core.robot_model import (
    Box,
    Geometry,
    Inertial,
    Joint,
    Link,
    Mesh,
    Origin,
    Robot,
)


def format_float(value: float) -> str:
    """Format a float with the shortest text that reads back to the same value."""
    return np.format_float_positional(float(value), trim="-")


def format_vector(values: Sequence[float]) -> str:
    return " ".join(format_float(v) for v in values)


def serialize_urdf(robot: Robot) -> bytes:
    """Serialize a Robot to URDF document bytes.

    Args:
        robot: The document to write.

    Returns:
        UTF-8 encoded XML with a declaration header and a trailing newline.
    """
    root = etree.Element("robot", name=robot.name)
    for link in robot.links:
        _add_link(root, link)
    for joint in robot.joints:
        _add_joint(root, joint)
    return etree.tostring(root, pretty_print=True, xml_declaration=True, encoding="UTF-8")


def save_urdf(robot: Robot, urdf_path: str) -> None:
    """Write a Robot to a URDF file, replacing any existing file.

    Raises:
        OSError: If the file cannot be written.
    """
    data = serialize_urdf(robot)
    with open(urdf_path, "wb") as f:
        f.write(data)


def _add_link(parent: etree._Element, link: Link) -> None:
    elem = etree.SubElement(parent, "link", name=link.name)
    for visual in link.visuals:
        _add_shape(elem, "visual", visual)
    for collision in link.collisions:
        _add_shape(elem, "collision", collision)
    if link.inertial is not None:
        _add_inertial(elem, link.inertial)
    _add_origin(elem, link.origin)


def _add_shape(parent: etree._Element, tag: str, shape) -> None:
    # Visual and Collision share the same layout.
    elem = etree.SubElement(parent, tag)
    if shape.name is not None:
        elem.set("name", shape.name)
    _add_origin(elem, shape.origin)
    _add_geometry(elem, shape.geometry)


def _add_geometry(parent: etree._Element, geometry: Optional[Geometry]) -> None:
    if geometry is None:
        return
    elem = etree.SubElement(parent, "geometry")
    if isinstance(geometry, Mesh):
        mesh_elem = etree.SubElement(elem, "mesh", filename=geometry.filename)
        if geometry.scale is not None:
            mesh_elem.set("scale", format_vector(geometry.scale))
    elif isinstance(geometry, Box):
        etree.SubElement(elem, "box", size=format_vector(geometry.size))
    else:
        raise TypeError(f"Unsupported geometry type: {type(geometry).__name__}")


def _add_inertial(parent: etree._Element, inertial: Inertial) -> None:
    elem = etree.SubElement(parent, "inertial")
    if inertial.mass is not None:
        etree.SubElement(elem, "mass", value=format_float(inertial.mass))
    _add_origin(elem, inertial.origin)
    if inertial.inertia is not None:
        inertia = inertial.inertia
        etree.SubElement(
            elem,
            "inertia",
            ixx=format_float(inertia.ixx),
            ixy=format_float(inertia.ixy),
            ixz=format_float(inertia.ixz),
            iyy=format_float(inertia.iyy),
            iyz=format_float(inertia.iyz),
            izz=format_float(inertia.izz),
        )


def _add_joint(parent: etree._Element, joint: Joint) -> None:
    elem = etree.SubElement(parent, "joint", name=joint.name, type=joint.type)
    if joint.parent is not None:
        etree.SubElement(elem, "parent", link=joint.parent)
    if joint.child is not None:
        etree.SubElement(elem, "child", link=joint.child)
    _add_origin(elem, joint.origin)
    if joint.axis is not None:
        etree.SubElement(elem, "axis", xyz=joint.axis)
    if joint.limit is not None:
        _add_optional_floats(
            etree.SubElement(elem, "limit"),
            effort=joint.limit.effort,
            lower=joint.limit.lower,
            upper=joint.limit.upper,
            velocity=joint.limit.velocity,
        )
    if joint.dynamics is not None:
        _add_optional_floats(
            etree.SubElement(elem, "dynamics"),
            damping=joint.dynamics.damping,
            friction=joint.dynamics.friction,
        )


def _add_origin(parent: etree._Element, origin: Optional[Origin]) -> None:
    if origin is None:
        return
    elem = etree.SubElement(parent, "origin")
    if origin.rpy is not None:
        elem.set("rpy", origin.rpy)
    if origin.xyz is not None:
        elem.set("xyz", origin.xyz)


def _add_optional_floats(elem: etree._Element, **values: Optional[float]) -> None:
    for key, value in values.items():
        if value is not None:
            elem.set(key, format_float(value))
