"""Exceptions raised while reading documents and measuring meshes."""


class URDFParseError(ValueError):
    """The input is not a well-formed robot description."""


class BoundingBoxError(RuntimeError):
    """A bounding box could not be computed for a mesh file."""
