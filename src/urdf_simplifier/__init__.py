"""
URDF Simplifier: collision-box simplification of robot descriptions.

This library strips a URDF down to its main kinematic chain and replaces
triangle-mesh collision geometry with axis-aligned bounding boxes, so that
motion-planning collision checks run against boxes instead of meshes.
"""

import jax
jax.config.update("jax_enable_x64", True)

# Import core modules
from . import core
from . import io
from .chain import filter_main_chain
from .simplify import simplify_link, simplify_links

__version__ = "0.1.0"
__all__ = ["core", "io", "filter_main_chain", "simplify_link", "simplify_links"]
