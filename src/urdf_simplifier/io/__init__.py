"""I/O utilities for reading and writing robot descriptions.

This module provides URDF parsing and serialization and the resolution of
mesh references to files on disk.
"""

from .resolver import resolve_mesh_path
from .urdf_parser import load_urdf, parse_urdf
from .urdf_writer import save_urdf, serialize_urdf

__all__ = ["load_urdf", "parse_urdf", "save_urdf", "serialize_urdf", "resolve_mesh_path"]
