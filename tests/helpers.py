import random
from typing import List

import numpy as np

from rgeom import Point, Polygon


def random_points(rng: random.Random, n: int, x_max: int, y_max: int) -> List[Point]:
    """Return n points with coordinates in [0, x_max) x [0, y_max), duplicates included."""
    return [Point(rng.randrange(x_max), rng.randrange(y_max)) for _ in range(n)]


def on_boundary(polygon: Polygon, point: Point) -> bool:
    """Test if point lies on one of the edges of polygon."""
    vertices = polygon.vertices
    for pt0, pt1 in zip(vertices, vertices[1:] + vertices[:1]):
        if (pt1 - pt0).cross(point - pt0) != 0:
            continue
        if min(pt0.x, pt1.x) <= point.x <= max(pt0.x, pt1.x) and min(pt0.y, pt1.y) <= point.y <= max(pt0.y, pt1.y):
            return True
    return False


def covers(polygon: Polygon, point: Point) -> bool:
    return polygon.contains(point) or on_boundary(polygon, point)


def rasterize(polygon: Polygon, x_min: int, x_max: int, y_min: int, y_max: int) -> np.ndarray:
    """
    Evaluate polygon.contains on all lattice points of [x_min, x_max) x [y_min, y_max).

    Row i of the returned matrix belongs to y = y_min + i, column j to x = x_min + j, i.e. for the unit square

                 0  1
              +------
        arr = 0 | 1  0
              1 | 0  0
    """
    return np.array([[polygon.contains(Point(x, y)) for x in range(x_min, x_max)]
                     for y in range(y_min, y_max)], dtype=bool)


def rectilinear_edges_cross(polygon: Polygon) -> bool:
    """
    Test if two edges of a rectilinear polygon which are not adjacent share a point.

    Axis-aligned segments share a point exactly if their bounding boxes do, which is checked for all pairs at
    once.
    """
    vertices = polygon.vertices
    n = len(vertices)
    seg = np.array([(min(p0.x, p1.x), max(p0.x, p1.x), min(p0.y, p1.y), max(p0.y, p1.y))
                    for p0, p1 in zip(vertices, vertices[1:] + vertices[:1])])
    x_overlap = (seg[:, None, 0] <= seg[None, :, 1]) & (seg[None, :, 0] <= seg[:, None, 1])
    y_overlap = (seg[:, None, 2] <= seg[None, :, 3]) & (seg[None, :, 2] <= seg[:, None, 3])
    idx = np.arange(n)
    dist = np.abs(idx[:, None] - idx[None, :])
    adjacent = (dist <= 1) | (dist == n - 1)
    return bool(np.any(x_overlap & y_overlap & ~adjacent))


def dilate(arr: np.ndarray, alpha: int) -> np.ndarray:
    """
    Mark every cell within Chebyshev distance alpha of a marked cell of arr. As np.roll wraps around, a border
    of at least alpha cells of arr has to be empty.
    """
    out = np.zeros_like(arr)
    for dy in range(-alpha, alpha + 1):
        for dx in range(-alpha, alpha + 1):
            out |= np.roll(arr, (dy, dx), axis=(0, 1))
    return out
