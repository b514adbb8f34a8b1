from . import generic


class Vector:
    """
    This class represents the displacement between two points.
    """
    __slots__ = ("_dx", "_dy")

    def __init__(self, dx, dy):
        self._dx = dx
        self._dy = dy

    @property
    def dx(self):
        """
        Displacement in x-dimension.
        """
        return self._dx

    @property
    def dy(self):
        """
        Displacement in y-dimension.
        """
        return self._dy

    def cross(self, other: 'Vector'):
        """
        Return the z-component of the cross product, positive if other points to the left of self.
        """
        return self._dx * other._dy - self._dy * other._dx

    def dot(self, other: 'Vector'):
        return self._dx * other._dx + self._dy * other._dy

    def norm_sqr(self):
        """
        Squared Euclidean length.
        """
        return self.dot(self)

    def l1_norm(self):
        """
        Length in the Manhattan metric.
        """
        return abs(self._dx) + abs(self._dy)

    def norm_inf(self):
        """
        Length in the Chebyshev metric.
        """
        return max(abs(self._dx), abs(self._dy))

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self._dx + other._dx, self._dy + other._dy)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self._dx - other._dx, self._dy - other._dy)

    def __neg__(self):
        return Vector(-self._dx, -self._dy)

    def __mul__(self, factor):
        if isinstance(factor, (Vector, Point)):
            return NotImplemented
        return Vector(self._dx * factor, self._dy * factor)

    def __rmul__(self, factor):
        return self.__mul__(factor)

    def __truediv__(self, divisor):
        if isinstance(divisor, (Vector, Point)):
            return NotImplemented
        return Vector(generic.exact_quotient(self._dx, divisor), generic.exact_quotient(self._dy, divisor))

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._dx == other._dx and self._dy == other._dy

    def __hash__(self):
        return hash((Vector, self._dx, self._dy))

    def __repr__(self):
        return f"Vector({self._dx!r}, {self._dy!r})"


class Point:
    """
    This class represents a point of the plane.

    Each coordinate is either a scalar or an Interval. A point with two interval coordinates is an
    axis-aligned rectangle, which is why the region operations `overlaps`, `contains`, `hull_with`,
    `intersect_with`, `min_dist_with` and `enlarge_with` are defined for points as well:

        Point(0, 0).enlarge_with(1)  ->  Point(Interval(-1, 1), Interval(-1, 1))

    Points are ordered lexicographically, first by x and then by y.
    """
    __slots__ = ("_x", "_y")

    def __init__(self, x, y):
        self._x = x
        self._y = y

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def flip(self) -> 'Point':
        """
        Return the point mirrored at the diagonal, i.e. with x and y swapped.
        """
        return Point(self._y, self._x)

    def displace(self, other: 'Point') -> Vector:
        """
        Return the vector leading from other to self.
        """
        return self - other

    def overlaps(self, other: 'Point') -> bool:
        return generic.overlap(self._x, other._x) and generic.overlap(self._y, other._y)

    def contains(self, other: 'Point') -> bool:
        return generic.contain(self._x, other._x) and generic.contain(self._y, other._y)

    def hull_with(self, other: 'Point') -> 'Point':
        """
        Return the smallest rectangle containing self and other.

        :param other: a point with scalar or interval coordinates.
        :return Point: a point with interval coordinates.
        """
        return Point(generic.hull(self._x, other._x), generic.hull(self._y, other._y))

    def intersect_with(self, other: 'Point') -> 'Point':
        """
        Return the common part of self and other.

        :param other: a point with scalar or interval coordinates.
        :return Point:
        :raises NoOverlapError: if self and other do not overlap in one of the dimensions.
        """
        return Point(generic.intersection(self._x, other._x), generic.intersection(self._y, other._y))

    def min_dist_with(self, other: 'Point'):
        """
        Return the Manhattan distance between self and other.
        """
        return generic.min_dist(self._x, other._x) + generic.min_dist(self._y, other._y)

    def enlarge_with(self, alpha) -> 'Point':
        return Point(generic.enlarge(self._x, alpha), generic.enlarge(self._y, alpha))

    def _key(self):
        return self._x, self._y

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self._x + other.dx, self._y + other.dy)

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Point(self._x - other.dx, self._y - other.dy)
        if isinstance(other, Point):
            return Vector(self._x - other._x, self._y - other._y)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __lt__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._key() >= other._key()

    def __copy__(self):
        return self.__class__(self._x, self._y)

    def __repr__(self):
        return f"Point({self._x!r}, {self._y!r})"
