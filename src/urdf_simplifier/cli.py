"""Command-line entry point for simplifying a URDF file.

Usage::

    urdf-simplify <input.urdf> <output.urdf> [--mesh-root DIR] [-q]

Progress and warnings go to stdout. The exit code is 0 on success, also when
individual meshes could not be replaced, and non-zero when the input cannot be
read or parsed or the output cannot be written.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .chain import filter_main_chain
from .core import URDFParseError
from .io import load_urdf, save_urdf
from .simplify import simplify_links

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "urdf_simplifier"


class OperatorFormatter(logging.Formatter):
    """Print progress as bare lines and prefix warnings and errors."""

    PREFIXES = {
        logging.WARNING: "Warning: ",
        logging.ERROR: "Error: ",
        logging.CRITICAL: "Error: ",
    }

    def format(self, record: logging.LogRecord) -> str:
        return self.PREFIXES.get(record.levelno, "") + super().format(record)


def configure_logging(quiet: bool = False) -> None:
    """Send package log records to stdout, replacing any earlier handler."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if isinstance(handler.formatter, OperatorFormatter):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(OperatorFormatter("%(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.WARNING if quiet else logging.INFO)


def simplify_urdf(input_path: str, output_path: str, mesh_root: Optional[str] = None) -> int:
    """Run the full pipeline: load, simplify links, filter, save.

    Args:
        input_path: URDF file to read.
        output_path: URDF file to write.
        mesh_root: Directory to resolve mesh references against. Defaults to
                   the directory containing ``input_path``.

    Returns:
        Number of collision meshes that could not be replaced by boxes.

    Raises:
        OSError: If the input cannot be read or the output cannot be written.
        URDFParseError: If the input is not a well-formed robot description.
    """
    robot = load_urdf(input_path)

    base_dir = mesh_root if mesh_root is not None else (os.path.dirname(input_path) or os.curdir)
    failures = simplify_links(robot.links, base_dir)

    robot = filter_main_chain(robot)
    save_urdf(robot, output_path)
    return failures


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="urdf-simplify",
        description="Replace URDF collision meshes with bounding boxes and keep only the main kinematic chain.",
    )
    parser.add_argument("input", help="Path to the input URDF file")
    parser.add_argument("output", help="Path to write the simplified URDF file")
    parser.add_argument(
        "--mesh-root",
        default=None,
        help="Directory to resolve mesh references against (default: directory of the input file)",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print warnings and errors")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.quiet)

    try:
        simplify_urdf(args.input, args.output, args.mesh_root)
    except URDFParseError as exc:
        logger.error("Could not parse URDF %s: %s", args.input, exc)
        return 1
    except OSError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Successfully simplified URDF: %s -> %s", args.input, args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
