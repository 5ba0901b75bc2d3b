"""Shared fixtures and helpers for the test suite."""

import logging
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"

# Corner order for the 12 triangles of an axis-aligned box.
_BOX_FACES = [
    ((0, 0, 0), (1, 1, 0), (1, 0, 0)),
    ((0, 0, 0), (0, 1, 0), (1, 1, 0)),
    ((0, 0, 1), (1, 0, 1), (1, 1, 1)),
    ((0, 0, 1), (1, 1, 1), (0, 1, 1)),
    ((0, 0, 0), (1, 0, 0), (1, 0, 1)),
    ((0, 0, 0), (1, 0, 1), (0, 0, 1)),
    ((0, 1, 0), (0, 1, 1), (1, 1, 1)),
    ((0, 1, 0), (1, 1, 1), (1, 1, 0)),
    ((0, 0, 0), (0, 0, 1), (0, 1, 1)),
    ((0, 0, 0), (0, 1, 1), (0, 1, 0)),
    ((1, 0, 0), (1, 1, 0), (1, 1, 1)),
    ((1, 0, 0), (1, 1, 1), (1, 0, 1)),
]


def _write_box_stl(path, lower, upper):
    """Write an ASCII STL of the box spanning ``lower`` to ``upper``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = ["solid box"]
    for face in _BOX_FACES:
        lines.append("  facet normal 0 0 0")
        lines.append("    outer loop")
        for corner in face:
            coords = [upper[i] if corner[i] else lower[i] for i in range(3)]
            lines.append("      vertex " + " ".join(repr(float(c)) for c in coords))
        lines.append("    endloop")
        lines.append("  endfacet")
    lines.append("endsolid box")
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def write_box_stl():
    """Writer for ASCII STL box meshes: ``write_box_stl(path, lower, upper)``."""
    return _write_box_stl


@pytest.fixture
def ur_arm_path():
    return FIXTURES / "ur_arm.urdf"


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop stdout handlers installed by the CLI once a test finishes."""
    yield
    package_logger = logging.getLogger("urdf_simplifier")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
