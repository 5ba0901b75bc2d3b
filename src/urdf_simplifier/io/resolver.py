"""Resolution of mesh references to files on disk.

Robot descriptions usually reference meshes through ``package://`` URIs whose
package root does not match the layout on disk. Resolution tries the direct
path below the search root first and falls back to searching the tree for a
file whose trailing path components match.

When several files in the tree share the same trailing components, the first
one found in sorted walk order wins. Callers should not rely on which one.
"""

import logging
import os
from pathlib import PurePath
from typing import Optional

logger = logging.getLogger(__name__)

PACKAGE_SCHEME = "package://"


def strip_package_scheme(uri: str) -> str:
    """Remove the scheme and package name from a ``package://`` URI.

    ``package://ur_description/meshes/base.stl`` becomes ``meshes/base.stl``.
    A URI without a path after the package name is returned without its
    scheme only. Leading separators are dropped so the result stays relative,
    e.g. for ``package://pkg//meshes/base.stl``.
    """
    relative_path = uri[len(PACKAGE_SCHEME):]
    parts = relative_path.split("/", 1)
    if len(parts) == 2:
        relative_path = parts[1]
    return relative_path.lstrip("/")


def find_by_suffix(base_dir: str, relative_path: str) -> Optional[str]:
    """Search ``base_dir`` for a file whose path ends with ``relative_path``.

    Matching is done on whole path components, so ``meshes/arm.stl`` matches
    ``nested/meshes/arm.stl`` but not ``othermeshes/arm.stl``. The walk stops
    at the first match.

    Returns:
        Path of the first matching file, or ``None`` if there is none.
    """
    suffix = PurePath(relative_path.lstrip("/")).parts
    if not suffix:
        return None

    for dirpath, dirnames, filenames in os.walk(base_dir):
        dirnames.sort()
        for filename in sorted(filenames):
            if filename != suffix[-1]:
                continue
            path = os.path.join(dirpath, filename)
            if PurePath(path).parts[-len(suffix):] == suffix:
                return path
    return None


def resolve_mesh_path(uri: str, base_dir: str) -> str:
    """Resolve a mesh reference to a file path.

    Supports:
      - ``package://ur_description/meshes/ur20/collision/shoulder.stl``
      - ``meshes/shoulder.stl`` (relative to ``base_dir``)
      - ``/absolute/path/to/shoulder.stl``

    Args:
        uri: Mesh filename attribute from the document.
        base_dir: Directory to resolve against, normally the directory of the
                  input document.

    Returns:
        The resolved path. For ``package://`` URIs that cannot be found this
        is the direct candidate path, so the caller fails later with a
        file-not-found error naming it.
    """
    if uri.startswith(PACKAGE_SCHEME):
        relative_path = strip_package_scheme(uri)
        standard_path = os.path.join(base_dir, relative_path)
        if os.path.isfile(standard_path):
            return standard_path

        found_path = find_by_suffix(base_dir, relative_path)
        if found_path is not None:
            logger.debug("Found %s by searching %s", found_path, base_dir)
            return found_path
        return standard_path

    if os.path.isabs(uri):
        return uri

    return os.path.join(base_dir, uri)
