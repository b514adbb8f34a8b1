class GeometryError(ValueError):
    """Base class of all errors raised by the geometry kernel."""


class InvalidRangeError(GeometryError):
    """
    An interval with lower > upper was requested, either directly or as the
    result of an enlargement or an edge offset.
    """


class DegeneratePolygonError(GeometryError):
    """
    A polygon has too few vertices, violates the edge alternation of a
    rectilinear polygon, or a point set cannot be turned into a polygon.
    """


class NoOverlapError(GeometryError):
    """The intersection of two disjoint objects was requested."""
