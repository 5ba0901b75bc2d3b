"""Reduction of a robot to its main kinematic chain.

The main chain is made of the actuated joints (revolute and prismatic) and the
links they connect. Fixed mounting frames, tool flanges and world links carry
no motion and are dropped.
"""

import dataclasses
import logging

from .core import Robot

logger = logging.getLogger(__name__)

CHAIN_JOINT_TYPES = ("revolute", "prismatic")


def filter_main_chain(robot: Robot) -> Robot:
    """Keep only revolute/prismatic joints and the links they connect.

    Joint types are matched exactly, so ``continuous`` joints are dropped.
    A chain joint whose parent or child does not name a link in the robot is
    dropped as well. Links and joints keep their original relative order.
    Applying the filter to its own output returns the same robot.

    Args:
        robot: Robot to filter. It is not modified.

    Returns:
        Robot: A new robot holding the retained links and joints.
    """
    link_map = robot.link_map
    joints = [
        joint for joint in robot.joints
        if joint.type in CHAIN_JOINT_TYPES
        and joint.parent in link_map
        and joint.child in link_map
    ]

    chain_link_names = set()
    for joint in joints:
        chain_link_names.add(joint.parent)
        chain_link_names.add(joint.child)

    links = [link for link in robot.links if link.name in chain_link_names]

    logger.info("Filtered to main kinematic chain: %d links, %d joints", len(links), len(joints))
    return dataclasses.replace(robot, links=links, joints=joints)
