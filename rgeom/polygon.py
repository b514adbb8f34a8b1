import logging
from enum import Enum
from typing import Callable, Iterable, List, Tuple

from sortedcontainers import SortedKeyList

from .errors import DegeneratePolygonError, InvalidRangeError
from .generic import exact_quotient
from .interval import Interval
from .point import Point, Vector

logger = logging.getLogger(__name__)

KeyFunction = Callable[[Point], Tuple]


def xy_key(point: Point) -> Tuple:
    """Order points by x first and y second."""
    return point.x, point.y


def yx_key(point: Point) -> Tuple:
    """Order points by y first and x second."""
    return point.y, point.x


def _area_x2(vertices):
    origin = vertices[0]
    vecs = [vtx - origin for vtx in vertices[1:]]
    return sum(vec0.cross(vec1) for vec0, vec1 in zip(vecs, vecs[1:]))


def _edges(vertices) -> Iterable[Tuple[Point, Point]]:
    return zip(vertices, vertices[1:] + vertices[:1])


def _canonical(vertices: List[Point]) -> List[Point]:
    """
    Return the vertices in counter-clockwise order, starting at the smallest vertex.

        [(2,2), (2,0), (0,0), (0,2)]  ->  [(0,0), (2,0), (2,2), (0,2)]
    """
    if _area_x2(vertices) < 0:
        vertices = vertices[::-1]
    start = vertices.index(min(vertices))
    return vertices[start:] + vertices[:start]


def _drop_collinear(vertices: List[Point]) -> List[Point]:
    """
    Remove repeated vertices and vertices lying on the line through their neighbours. The latter includes the
    tips of zero-width spikes:

        o---o---o           o-------o
                |    ->             |
        o-------o           o-------o
    """
    changed = True
    while changed and len(vertices) >= 3:
        n = len(vertices)
        kept = [curr for prev, curr in zip(vertices[-1:] + vertices[:-1], vertices) if curr != prev]
        kept = [curr for prev, curr, nxt in zip(kept[-1:] + kept[:-1], kept, kept[1:] + kept[:1])
                if (curr - prev).cross(nxt - curr) != 0]
        changed = len(kept) != n
        vertices = kept
    return vertices


def _convex_hull(points: Iterable[Point]) -> List[Point]:
    """
    Andrew's monotone chain. Points lying on a hull edge are dropped, only the two extreme points of the edge
    remain:

        o-----o-----o          o-----------o
        |           |    ->    |           |
        o-----o-----o          o-----------o
    """
    pts = sorted(set(points))

    def half_hull(seq):
        chain = []
        for pt in seq:
            while len(chain) >= 2 and (chain[-1] - chain[-2]).cross(pt - chain[-2]) <= 0:
                chain.pop()
            chain.append(pt)
        return chain

    lower = half_hull(pts)
    upper = half_hull(reversed(pts))
    hull = lower[:-1] + upper[:-1]
    if len(hull) < 3:
        raise DegeneratePolygonError("the convex hull of collinear points is not a polygon")
    return hull


def _is_monotone(vertices, key_fn: KeyFunction) -> bool:
    n = len(vertices)
    if n <= 3:
        return True
    keys = [key_fn(vtx) for vtx in vertices]
    lowest = min(range(n), key=keys.__getitem__)
    highest = max(range(n), key=keys.__getitem__)
    i = lowest
    while i != highest:
        j = (i + 1) % n
        if keys[i][0] > keys[j][0]:
            return False
        i = j
    while i != lowest:
        j = (i + 1) % n
        if keys[i][0] < keys[j][0]:
            return False
        i = j
    return True


def _key_cross(first: Tuple, last: Tuple, key: Tuple):
    """Cross product of (last - first) and (key - first) in key space, positive if key lies above the line."""
    return (last[0] - first[0]) * (key[1] - first[1]) - (last[1] - first[1]) * (key[0] - first[0])


def _sorted_by_key(pointset: Iterable[Point], key_fn: KeyFunction) -> SortedKeyList:
    return SortedKeyList(set(pointset), key=lambda pt: (key_fn(pt), xy_key(pt)))


def _split_chains(points: SortedKeyList, key_fn: KeyFunction) -> Tuple[List[Point], List[Point]]:
    """
    Split the points between the smallest and the largest key at the line connecting both.

                   upper
           o    o     o        o
        L ------------------------ R
              o    o      o
                   lower

    Points on the line belong to the lower chain, unless the line is parallel to the primary axis and no
    point lies strictly above it. Both chains are returned in ascending key order, without L and R.
    """
    first, last = key_fn(points[0]), key_fn(points[-1])
    lower, upper, on_line = [], [], []
    for pt in points[1:-1]:
        cross = _key_cross(first, last, key_fn(pt))
        if cross < 0:
            lower.append(pt)
        elif cross > 0:
            upper.append(pt)
        else:
            on_line.append(pt)
    if on_line:
        if last[1] == first[1] and not upper:
            upper = on_line
        else:
            lower = sorted(lower + on_line, key=points.key)
    return lower, upper


def _offset_vertices(lines) -> List[Point]:
    """Intersect every offset line (start, end, nx, ny, c), i.e. n * X = c, with its predecessor."""
    vertices = []
    for (_, _, nx0, ny0, c0), (_, _, nx1, ny1, c1) in zip(lines[-1:] + lines[:-1], lines):
        det = nx0 * ny1 - ny0 * nx1
        vertices.append(Point(exact_quotient(c0 * ny1 - ny0 * c1, det),
                              exact_quotient(nx0 * c1 - c0 * nx1, det)))
    return vertices


def _drop_parallel(lines) -> bool:
    """
    Remove a pair of consecutive parallel offset lines. Lines facing each other enclose a pocket which has closed
    up, both go. Of two lines facing the same way only the outer one stays.

    :return bool: whether a line was removed.
    """
    for i in range(len(lines)):
        (_, _, nx0, ny0, c0), (_, _, nx1, ny1, c1) = lines[i - 1], lines[i]
        if nx0 * ny1 - ny0 * nx1 != 0:
            continue
        if nx0 * nx1 + ny0 * ny1 < 0:
            del lines[i]
            del lines[i - 1]
        elif c0 * (abs(nx1) + abs(ny1)) < c1 * (abs(nx0) + abs(ny0)):
            del lines[i - 1]
        else:
            del lines[i]
        return True
    return False


class Orientation(Enum):
    COUNTERCLOCKWISE = 1
    CLOCKWISE = -1
    DEGENERATE = 0


class Polygon:
    """
    This class represents a simple polygon as a closed sequence of at least three vertices.

    Simplicity (no self-intersection) is a precondition which is not checked. The vertex sequence is
    copied on construction and cannot be changed afterwards.
    """
    __slots__ = ("_vertices",)

    def __init__(self, vertices: Iterable[Point]):
        self._vertices: Tuple[Point, ...] = tuple(vertices)
        if len(self._vertices) < 3:
            raise DegeneratePolygonError(f"a polygon needs at least 3 vertices, got {len(self._vertices)}")

    @property
    def vertices(self) -> Tuple[Point, ...]:
        return self._vertices

    def signed_area_x2(self):
        """
        Twice the signed area, positive for counter-clockwise polygons. Exact for integer coordinates.
        """
        return _area_x2(self._vertices)

    def signed_area(self):
        """
        Signed area, positive for counter-clockwise polygons.

        For integer coordinates the result is an int if possible and a Fraction otherwise.
        """
        return exact_quotient(self.signed_area_x2(), 2)

    def orientation(self) -> Orientation:
        area = self.signed_area_x2()
        if area > 0:
            return Orientation.COUNTERCLOCKWISE
        if area < 0:
            return Orientation.CLOCKWISE
        return Orientation.DEGENERATE

    def is_anticlockwise(self) -> bool:
        return self.orientation() is Orientation.COUNTERCLOCKWISE

    def is_rectilinear(self) -> bool:
        """
        Test if every edge is horizontal or vertical.
        """
        return all(pt0.x == pt1.x or pt0.y == pt1.y for pt0, pt1 in _edges(list(self._vertices)))

    def is_convex(self) -> bool:
        """
        Test if all turns of the boundary go in the same direction. Collinear vertices are ignored.
        """
        vertices = list(self._vertices)
        turns = [(curr - prev).cross(nxt - curr)
                 for prev, curr, nxt in zip(vertices[-1:] + vertices[:-1], vertices, vertices[1:] + vertices[:1])]
        if all(turn == 0 for turn in turns):
            return False
        return all(turn >= 0 for turn in turns) or all(turn <= 0 for turn in turns)

    def is_xmonotone(self) -> bool:
        """
        Test if every vertical line crosses the boundary at most twice.
        """
        return _is_monotone(self._vertices, xy_key)

    def is_ymonotone(self) -> bool:
        """
        Test if every horizontal line crosses the boundary at most twice.
        """
        return _is_monotone(self._vertices, yx_key)

    def bounding_box(self) -> Point:
        """
        Return the smallest rectangle enclosing the polygon as a point with interval coordinates.
        """
        xs = [vtx.x for vtx in self._vertices]
        ys = [vtx.y for vtx in self._vertices]
        return Point(Interval(min(xs), max(xs)), Interval(min(ys), max(ys)))

    def contains(self, point: Point) -> bool:
        """
        Crossing number test.

        Points on the lower or left boundary are inside, points on the upper or right boundary are outside.
        """
        inside = False
        pt0 = self._vertices[-1]
        for pt1 in self._vertices:
            if pt1.y <= point.y < pt0.y or pt0.y <= point.y < pt1.y:
                det = (point - pt0).cross(pt1 - pt0)
                if (det < 0) if pt1.y > pt0.y else (det > 0):
                    inside = not inside
            pt0 = pt1
        return inside

    def reversed(self) -> 'Polygon':
        """
        Return the same polygon with opposite orientation, starting at the same vertex.
        """
        return self.__class__(self._vertices[:1] + self._vertices[:0:-1])

    def hull_with(self, other: 'Polygon') -> 'Polygon':
        """
        Return the convex hull of the vertices of both polygons.

        The hull is counter-clockwise and starts at its smallest vertex. Vertices lying on a hull edge are not
        part of the result.

        :param other: a polygon.
        :return Polygon:
        :raises DegeneratePolygonError: if all vertices are collinear.
        """
        hull = _convex_hull(self._vertices + other.vertices)
        logger.debug("convex hull of %d and %d vertices has %d vertices",
                     len(self._vertices), len(other.vertices), len(hull))
        return Polygon(hull)

    def enlarge_with(self, alpha) -> 'Polygon':
        """
        Move every edge outwards by alpha, measured in the Chebyshev metric.

        Each edge lies on a line n * X = c with outward normal n. Offsetting the edge by alpha in the Chebyshev
        metric shifts c by alpha * (|n.x| + |n.y|); the new vertices are the intersections of consecutive
        shifted lines. For a rectilinear polygon this moves every edge by exactly alpha:

                                      +-------------+
            +-------+                 |             |
            |       |   alpha = 1     |             |
            |       |      ->         |             |
            +-------+                 |             |
                                      +-------------+

        Growing a concave polygon can close up a pocket. An edge which would be inverted for a positive alpha is
        removed and its neighbours are extended until they meet; two neighbours facing each other close the
        pocket completely. The result then encloses the Minkowski sum with the square but may exceed it.
        `RPolygon` computes the exact sum.

        :param alpha: the offset, negative values shrink the polygon.
        :return: a polygon of the same class.
        :raises InvalidRangeError: if a negative alpha collapses or inverts an edge.
        :raises DegeneratePolygonError: if the polygon has zero area.
        """
        vertices = _drop_collinear(list(self._vertices))
        if len(vertices) < 3:
            raise DegeneratePolygonError(f"cannot enlarge the degenerate polygon {self!r}")
        sign = 1 if _area_x2(vertices) > 0 else -1

        lines = []
        for pt0, pt1 in _edges(vertices):
            edge = pt1 - pt0
            nx, ny = sign * edge.dy, -sign * edge.dx
            lines.append((pt0, pt1, nx, ny, nx * pt0.x + ny * pt0.y + alpha * (abs(nx) + abs(ny))))

        while True:
            if len(lines) < 3:
                raise InvalidRangeError(f"enlarging {self!r} by {alpha!r} leaves no area")
            if _drop_parallel(lines):
                continue
            enlarged = _offset_vertices(lines)
            inverted = [i for i, (line, new0, new1) in enumerate(zip(lines, enlarged, enlarged[1:] + enlarged[:1]))
                        if (line[1] - line[0]).dot(new1 - new0) <= 0]
            if not inverted:
                break
            old0, old1 = lines[inverted[0]][:2]
            if alpha < 0:
                raise InvalidRangeError(f"enlarging {self!r} by {alpha!r} would invert the edge {old0!r}-{old1!r}")
            logger.debug("edge %r-%r closed up while enlarging by %r", old0, old1, alpha)
            del lines[inverted[0]]
        return self.__class__(enlarged)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.__class__([vtx + other for vtx in self._vertices])

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.__class__([vtx - other for vtx in self._vertices])

    def __len__(self):
        return len(self._vertices)

    def __iter__(self):
        return iter(self._vertices)

    def __eq__(self, other):
        if not isinstance(other, Polygon):
            return NotImplemented
        return self._vertices == other._vertices

    def __hash__(self):
        return hash(self._vertices)

    def __copy__(self):
        return self.__class__(self._vertices)

    def __repr__(self):
        return f"{self.__class__.__name__}([{', '.join(repr(vtx) for vtx in self._vertices)}])"


def create_mono_polygon(pointset: Iterable[Point], key_fn: KeyFunction) -> Polygon:
    """
    Create a simple polygon through all points which is monotone with respect to the primary key.

    The points are split at the line connecting the smallest and the largest key into a lower and an upper
    chain, the lower chain is traversed in ascending and the upper one in descending key order.

    :param pointset: points in any order, duplicates are ignored.
    :param key_fn: maps a point to (primary, secondary), i.e. `xy_key` or `yx_key`.
    :return Polygon: counter-clockwise unless all points are collinear, starting at the smallest vertex.
    """
    points = _sorted_by_key(pointset, key_fn)
    if len(points) < 3:
        raise DegeneratePolygonError(f"a polygon needs at least 3 distinct points, got {len(points)}")
    lower, upper = _split_chains(points, key_fn)
    vertices = [points[0]] + lower + [points[-1]] + upper[::-1]
    if _area_x2(vertices) != 0:
        vertices = _canonical(vertices)
    logger.debug("created monotone polygon with %d vertices", len(vertices))
    return Polygon(vertices)


def create_xmono_polygon(pointset: Iterable[Point]) -> Polygon:
    """
    Create a simple x-monotone polygon through all points.

    :param pointset:
    :return Polygon:
    """
    return create_mono_polygon(pointset, xy_key)


def create_ymono_polygon(pointset: Iterable[Point]) -> Polygon:
    """
    Create a simple y-monotone polygon through all points.

    :param pointset:
    :return Polygon:
    """
    return create_mono_polygon(pointset, yx_key)
