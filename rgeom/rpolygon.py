import logging
from typing import Iterable, List, Optional

import portion as P
from sortedcontainers import SortedKeyList

from .errors import DegeneratePolygonError
from .interval import Interval
from .point import Point
from .polygon import (
    KeyFunction,
    Polygon,
    _canonical,
    _drop_collinear,
    _edges,
    _key_cross,
    _split_chains,
    xy_key,
    yx_key,
)

logger = logging.getLogger(__name__)


def _check_alternation(vertices) -> None:
    """
    Raise DegeneratePolygonError unless every edge is axis-aligned, non-empty, and horizontal and vertical
    edges take turns.
    """
    n = len(vertices)
    if n < 4 or n % 2 != 0:
        raise DegeneratePolygonError(f"a rectilinear polygon needs an even number of at least 4 vertices, got {n}")
    horizontal = []
    for pt0, pt1 in _edges(list(vertices)):
        if pt0 == pt1:
            raise DegeneratePolygonError(f"zero-length edge at {pt0!r}")
        if pt0.y == pt1.y:
            horizontal.append(True)
        elif pt0.x == pt1.x:
            horizontal.append(False)
        else:
            raise DegeneratePolygonError(f"edge {pt0!r}-{pt1!r} is neither horizontal nor vertical")
    for i in range(n):
        if horizontal[i] == horizontal[i - 1]:
            raise DegeneratePolygonError(f"consecutive edges meeting at {vertices[i]!r} do not alternate")


def _cross_sections(vertices, xs) -> List[P.Interval]:
    """
    Cut a rectilinear polygon into vertical slabs between consecutive values of xs, which has to include the
    x-coordinates of all vertices. For each slab the covered y-values are read off the horizontal edges spanning
    it:

        3 +-----+
          |     |              [0, 2]: [0,3]
        1 |     +-----+        [2, 4]: [0,1]
          |           |        [4, 5]: ()
        0 +-----------+
          0     2     4  5
    """
    edges = [(min(pt0.x, pt1.x), max(pt0.x, pt1.x), pt0.y)
             for pt0, pt1 in _edges(list(vertices)) if pt0.y == pt1.y and pt0.x != pt1.x]
    sections = []
    for x0, x1 in zip(xs, xs[1:]):
        ys = sorted(y for lower, upper, y in edges if lower <= x0 and x1 <= upper)
        covered = P.empty()
        for y0, y1 in zip(ys[::2], ys[1::2]):
            covered |= P.closed(y0, y1)
        sections.append(covered)
    return sections


def _slab_outline(xs, extents: List[Optional[Interval]]) -> List[Point]:
    """
    Return the counter-clockwise outline of the x-monotone polygon spanning extents[i] between xs[i] and
    xs[i + 1].

    An empty slab (None) takes the extent of its left neighbour. An extent sharing at most a single value with
    its left neighbour is widened to the hull of both, such that the outline does not pinch.
    """
    assert extents[0] is not None
    joined = []
    for extent in extents:
        if extent is None:
            extent = joined[-1]
        elif joined and max(joined[-1].lower, extent.lower) >= min(joined[-1].upper, extent.upper):
            extent = extent.hull_with(joined[-1])
        joined.append(extent)

    lower, upper = [], []
    for x0, x1, extent in zip(xs, xs[1:], joined):
        lower += [Point(x0, extent.lower), Point(x1, extent.lower)]
        upper += [Point(x0, extent.upper), Point(x1, extent.upper)]
    return _canonical(_drop_collinear(lower + upper[::-1]))


def _trace_cells(xs, ys, cells: List[List[bool]]) -> List[Point]:
    """
    Trace the boundary of a set of grid cells counter-clockwise. Cell (i, j) spans [xs[i], xs[i + 1]] in
    x-dimension and [ys[j], ys[j + 1]] in y-dimension and is part of the set if cells[i][j] is True.

    Empty cells which cannot be reached from outside the grid are filled first, so that an edge-connected set
    results in a single loop.
    """
    n, m = len(xs) - 1, len(ys) - 1
    stack = [(i, j) for i in range(n) for j in range(m)
             if not cells[i][j] and (i in (0, n - 1) or j in (0, m - 1))]
    outside = set(stack)
    while stack:
        i, j = stack.pop()
        for ni, nj in ((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1)):
            if 0 <= ni < n and 0 <= nj < m and not cells[ni][nj] and (ni, nj) not in outside:
                outside.add((ni, nj))
                stack.append((ni, nj))

    def filled(i, j):
        return 0 <= i < n and 0 <= j < m and (i, j) not in outside

    successor = {}
    for i in range(n):
        for j in range(m):
            if not filled(i, j):
                continue
            x0, x1, y0, y1 = xs[i], xs[i + 1], ys[j], ys[j + 1]
            if not filled(i, j - 1):
                successor[Point(x0, y0)] = Point(x1, y0)
            if not filled(i + 1, j):
                successor[Point(x1, y0)] = Point(x1, y1)
            if not filled(i, j + 1):
                successor[Point(x1, y1)] = Point(x0, y1)
            if not filled(i - 1, j):
                successor[Point(x0, y1)] = Point(x0, y0)

    start = min(successor)
    outline = [start]
    vtx = successor[start]
    while vtx != start:
        outline.append(vtx)
        vtx = successor[vtx]
    assert len(outline) == len(successor)
    return outline


class RPolygon(Polygon):
    """
    This class represents a rectilinear polygon, i.e. a simple polygon whose edges alternate between horizontal
    and vertical:

            +-----+
            |     |
            |     +-----+
            |           |
            +-----------+

    The alternation is checked on construction, so consecutive vertices always differ in exactly one coordinate
    and the number of vertices is even.
    """
    __slots__ = ()

    def __init__(self, vertices: Iterable[Point]):
        super().__init__(vertices)
        _check_alternation(self._vertices)

    @classmethod
    def from_box(cls, x_interval: Interval, y_interval: Interval) -> 'RPolygon':
        """
        Create a counter-clockwise rectangle as the product of two intervals.

        :param x_interval:
        :param y_interval:
        :return RPolygon:
        """
        return cls([
            Point(x_interval.lower, y_interval.lower),
            Point(x_interval.upper, y_interval.lower),
            Point(x_interval.upper, y_interval.upper),
            Point(x_interval.lower, y_interval.upper),
        ])

    def is_box(self) -> bool:
        return len(self._vertices) == 4

    def is_convex(self) -> bool:
        """
        Test for orthogonal convexity: every horizontal and every vertical line meets the polygon in a single
        segment.
        """
        return self.is_xmonotone() and self.is_ymonotone()

    def signed_area(self):
        """
        Signed area, positive for counter-clockwise polygons. Only vertical edges contribute, so the result
        stays in the coordinate domain.
        """
        return sum(pt0.x * (pt1.y - pt0.y) for pt0, pt1 in _edges(list(self._vertices)) if pt0.x == pt1.x)

    def signed_area_x2(self):
        return 2 * self.signed_area()

    def contains(self, point: Point) -> bool:
        """
        Ray cast to the right counting crossings with vertical edges.

        Lower and left boundaries belong to the polygon, upper and right ones do not. Hence for a polygon with
        integer vertices the number of contained lattice points equals its area.
        """
        inside = False
        pt0 = self._vertices[-1]
        for pt1 in self._vertices:
            if (pt1.y <= point.y < pt0.y or pt0.y <= point.y < pt1.y) and pt1.x > point.x:
                inside = not inside
            pt0 = pt1
        return inside

    def hull_with(self, other: Polygon) -> 'RPolygon':
        """
        Return a rectilinear polygon enclosing both polygons.

        Two boxes result in their bounding box. Otherwise both polygons are cut into vertical slabs at the
        x-coordinates of their vertices and every slab of the result spans from the lowest to the highest y-value
        covered in it:

            +-----+  +-+   +-+          +----------+   +-+
            |     |  | |   | |          |          |   | |
            |     |  | +---+ |    ->    |          +---+ |
            |     |  |       |          |                |
            +-----+  +-------+          +----------------+

        A polygon which is not rectilinear is replaced by its bounding box first.

        :param other: a polygon.
        :return RPolygon: a counter-clockwise, x-monotone rectilinear polygon.
        """
        if isinstance(other, RPolygon) and self.is_box() and other.is_box():
            box = self.bounding_box().hull_with(other.bounding_box())
            return self.__class__.from_box(box.x, box.y)
        if not other.is_rectilinear():
            box = other.bounding_box()
            other = RPolygon.from_box(box.x, box.y)

        xs = sorted({vtx.x for vtx in self._vertices + other.vertices})
        extents = []
        for own, others in zip(_cross_sections(self._vertices, xs), _cross_sections(other.vertices, xs)):
            covered = own | others
            extents.append(None if covered.empty else Interval(covered.lower, covered.upper))
        hull = _slab_outline(xs, extents)
        logger.debug("rectilinear hull of %d and %d vertices has %d vertices",
                     len(self._vertices), len(other.vertices), len(hull))
        return self.__class__(hull)

    def enlarge_with(self, alpha) -> 'RPolygon':
        """
        Move every edge outwards by alpha.

        A negative alpha shrinks the polygon edge by edge, see `Polygon.enlarge_with`. A positive alpha yields the
        Minkowski sum with the square [-alpha, alpha] x [-alpha, alpha]: every vertical slab of the polygon is
        enlarged on its own and the boundary of their union is traced. Pockets which close up are filled:

                                          +-------------+
            +---+ +---+                   |             |
            |   | |   |      alpha = 1    |             |
            |   +-+   |         ->        |             |
            +---------+                   |             |
                                          +-------------+

        :param alpha: the offset.
        :return RPolygon:
        :raises InvalidRangeError: if a negative alpha collapses or inverts an edge.
        """
        if alpha <= 0:
            return super().enlarge_with(alpha)

        xs = sorted({vtx.x for vtx in self._vertices})
        slabs = []
        for x0, x1, covered in zip(xs, xs[1:], _cross_sections(self._vertices, xs)):
            grown = P.empty()
            for atomic in covered:
                grown |= P.closed(atomic.lower - alpha, atomic.upper + alpha)
            slabs.append((x0 - alpha, x1 + alpha, grown))

        columns = sorted({x for x0, x1, _ in slabs for x in (x0, x1)})
        coverage = []
        for c0, c1 in zip(columns, columns[1:]):
            covered = P.empty()
            for x0, x1, grown in slabs:
                if x0 <= c0 and c1 <= x1:
                    covered |= grown
            coverage.append(covered)
        rows = sorted({bound for covered in coverage for atomic in covered for bound in (atomic.lower, atomic.upper)})
        cells = [[P.closed(y0, y1) in covered for y0, y1 in zip(rows, rows[1:])] for covered in coverage]

        vertices = _drop_collinear(_trace_cells(columns, rows, cells))
        logger.debug("enlarged %d vertices by %r into %d vertices", len(self._vertices), alpha, len(vertices))
        return self.__class__(_canonical(vertices))


def rbox(x_lower, x_upper, y_lower, y_upper) -> RPolygon:
    """
    Create a rectangle.

    :param x_lower: value of the lower bound in x-dimension
    :param x_upper: value of the upper bound in x-dimension
    :param y_lower: value of the lower bound in y-dimension
    :param y_upper: value of the upper bound in y-dimension
    :return RPolygon:
    """
    return RPolygon.from_box(Interval(x_lower, x_upper), Interval(y_lower, y_upper))


def _corner(primary_src: Point, secondary_src: Point, key_fn: KeyFunction) -> Point:
    """Return the point taking its primary key from primary_src and its secondary key from secondary_src."""
    target = (key_fn(primary_src)[0], key_fn(secondary_src)[1])
    for candidate in (Point(primary_src.x, secondary_src.y), Point(secondary_src.x, primary_src.y)):
        if key_fn(candidate) == target:
            return candidate
    raise ValueError("the key function has to return a permutation of the coordinates of a point")


def _staircase(chain: List[Point], key_fn: KeyFunction, first, last, side: int) -> List[Point]:
    """
    Connect consecutive points of a chain by one corner each. side is 1 for the lower and -1 for the upper
    chain; the lower chain is traversed in ascending, the upper chain in descending key order.

    Between a and b the corner which keeps the path closest to the outside (lowest for the lower chain) is
    always admissible. Moving along the primary axis first is preferred when that corner is strictly on the
    outer side of the line L-R as well and b is the only point of its column, such that b stays on the
    boundary:

        lower chain, a.s > b.s                    primary first        secondary first

               a                                   a-----+             a
                        b                                |             |
                                                         b             +--------b
    """
    keys = [key_fn(pt) for pt in chain]
    path = [chain[0]]
    for i in range(1, len(chain)):
        a, b = chain[i - 1], chain[i]
        if keys[i - 1][0] != keys[i][0]:
            corner = _corner(b, a, key_fn)
            if side * keys[i - 1][1] > side * keys[i][1]:
                stacked = i + 1 < len(chain) and keys[i + 1][0] == keys[i][0]
                if stacked or side * _key_cross(first, last, key_fn(corner)) >= 0:
                    corner = _corner(a, b, key_fn)
            path.append(corner)
        path.append(b)
    return path


def create_mono_rpolygon(pointset: Iterable[Point], key_fn: KeyFunction) -> RPolygon:
    """
    Create a monotone rectilinear polygon through or around all points.

    The points are split at the line L-R connecting the smallest and the largest key into a lower and an upper
    chain, see `_split_chains`. Each chain is turned into a staircase which never crosses L-R, so both chains
    only meet in L and R and the polygon is simple:

              +--o        +----R
              |  |        |
        L-----+  +--------+
        |                 |
        +---o             o

    Points are vertices of the result or lie on its boundary. A point whose column is left again in the
    direction it was entered from would need a zero-width spike; such points end up in the interior instead.

    :param pointset: points in any order, duplicates are ignored.
    :param key_fn: maps a point to (primary, secondary), i.e. `xy_key` or `yx_key`.
    :return RPolygon: a counter-clockwise polygon starting at its smallest vertex.
    :raises DegeneratePolygonError: for less than 2 distinct points, points sharing a key or collinear points.
    """
    points = SortedKeyList(set(pointset), key=key_fn)
    if len(points) < 2:
        raise DegeneratePolygonError(f"at least 2 distinct points are needed, got {len(points)}")
    keys = [key_fn(pt) for pt in points]
    for pt0, pt1, key0, key1 in zip(points, points[1:], keys, keys[1:]):
        if key0 == key1:
            raise DegeneratePolygonError(f"{pt0!r} and {pt1!r} cannot be ordered by their key {key0!r}")
    first, last = keys[0], keys[-1]
    if first[0] == last[0]:
        raise DegeneratePolygonError("all points share their primary coordinate")

    lower, upper = _split_chains(points, key_fn)
    path = _staircase([points[0]] + lower + [points[-1]], key_fn, first, last, 1)
    path += _staircase([points[-1]] + upper[::-1] + [points[0]], key_fn, first, last, -1)[1:-1]
    vertices = _drop_collinear(path)
    if len(vertices) < 4:
        raise DegeneratePolygonError("the points are collinear")
    logger.debug("created monotone rectilinear polygon with %d vertices from %d points", len(vertices), len(points))
    return RPolygon(_canonical(vertices))


def create_xmono_rpolygon(pointset: Iterable[Point]) -> RPolygon:
    """
    Create an x-monotone rectilinear polygon through or around all points.

    :param pointset:
    :return RPolygon:
    """
    return create_mono_rpolygon(pointset, xy_key)


def create_ymono_rpolygon(pointset: Iterable[Point]) -> RPolygon:
    """
    Create a y-monotone rectilinear polygon through or around all points.

    :param pointset:
    :return RPolygon:
    """
    return create_mono_rpolygon(pointset, yx_key)
