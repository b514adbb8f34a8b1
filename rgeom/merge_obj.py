import logging
from typing import Iterable, List

from sortedcontainers import SortedKeyList

from .errors import NoOverlapError
from .interval import Interval
from .point import Point, Vector

logger = logging.getLogger(__name__)


def _as_interval(value) -> Interval:
    if isinstance(value, Interval):
        return value
    return Interval(value, value)


def _halve(value):
    if isinstance(value, int):
        return value // 2
    return value / 2


class MergeObj:
    """
    This class represents a region in coordinates rotated by 45 degrees, u = x + y and v = x - y.

    Under this rotation the Manhattan distance of two points becomes the Chebyshev distance of their images, so
    the set of points within Manhattan distance alpha of a region is obtained by enlarging both intervals by
    alpha:

        y                                v
        |     /\\                        |   +-----+
        |    /  \\        rotate         |   |     |
        |    \\  /         ->            |   |     |
        |     \\/                        |   +-----+
        +----------- x                   +----------- u

    A merge object built from a single point has two degenerate intervals.
    """
    __slots__ = ("_impl",)

    def __init__(self, u, v):
        self._impl = Point(_as_interval(u), _as_interval(v))

    @classmethod
    def from_point(cls, point: Point) -> 'MergeObj':
        """
        Create the merge object of a single point.

        :param point: a point with scalar coordinates.
        :return MergeObj:
        """
        return cls(point.x + point.y, point.x - point.y)

    @classmethod
    def _from_impl(cls, impl: Point) -> 'MergeObj':
        return cls(impl.x, impl.y)

    @property
    def u_interval(self) -> Interval:
        return self._impl.x

    @property
    def v_interval(self) -> Interval:
        return self._impl.y

    def overlaps(self, other: 'MergeObj') -> bool:
        return self._impl.overlaps(other._impl)

    def enlarge_with(self, alpha) -> 'MergeObj':
        """
        Return the region of all points within Manhattan distance alpha.

        :param alpha: the clearance.
        :return MergeObj:
        :raises InvalidRangeError: if a negative alpha would invert one of the intervals.
        """
        return self._from_impl(self._impl.enlarge_with(alpha))

    def intersect_with(self, other: 'MergeObj') -> 'MergeObj':
        """
        Return the common region of self and other.

        :param other: a merge object.
        :return MergeObj:
        :raises NoOverlapError: if the u- or the v-intervals do not overlap.
        """
        if not self.overlaps(other):
            raise NoOverlapError(f"{self!r} does not overlap {other!r}")
        return self._from_impl(self._impl.intersect_with(other._impl))

    def hull_with(self, other: 'MergeObj') -> 'MergeObj':
        """
        Return the smallest merge object enclosing self and other.
        """
        return self._from_impl(self._impl.hull_with(other._impl))

    def min_dist_with(self, other: 'MergeObj'):
        """
        Return the Manhattan distance between the regions, i.e. the larger distance of the two axes.
        """
        return max(self.u_interval.min_dist_with(other.u_interval),
                   self.v_interval.min_dist_with(other.v_interval))

    def merge_with(self, other: 'MergeObj') -> 'MergeObj':
        """
        Return the points balancing the distances to self and other.

        With d the distance of self and other, self is enlarged by d // 2 and other by the remainder; both
        enlargements touch and their intersection is the set of merge points:

            self = (800, -400), other = (1400, -400)  ->  u = [1100, 1100], v = [-700, -100]

        :param other: a merge object.
        :return MergeObj:
        """
        alpha = self.min_dist_with(other)
        half = _halve(alpha)
        return self.enlarge_with(half).intersect_with(other.enlarge_with(alpha - half))

    def _key(self):
        return self.u_interval, self.v_interval

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return MergeObj(self.u_interval + (other.dx + other.dy), self.v_interval + (other.dx - other.dy))

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return MergeObj(self.u_interval - (other.dx + other.dy), self.v_interval - (other.dx - other.dy))

    def __eq__(self, other):
        if not isinstance(other, MergeObj):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __lt__(self, other):
        if not isinstance(other, MergeObj):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other):
        if not isinstance(other, MergeObj):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other):
        if not isinstance(other, MergeObj):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other):
        if not isinstance(other, MergeObj):
            return NotImplemented
        return self._key() >= other._key()

    def __repr__(self):
        return f"MergeObj({self.u_interval!r}, {self.v_interval!r})"


def merge_clusters(objs: Iterable[MergeObj], alpha) -> List[List[MergeObj]]:
    """
    Group merge objects which are too close to each other.

    Two objects are too close if their enlargements by alpha intersect, i.e. if their distance is at most
    2 * alpha. Groups are closed under this relation. The enlargements are swept in the order of their lower
    u-bound while the ones still reaching the sweep line are kept sorted by their upper u-bound:

            u-axis   ---->
          [=====]                 active until the sweep passes its upper bound
             [=======]
                        [===]     starts a new group unless its v-interval meets an active one

    :param objs: merge objects, duplicates are ignored.
    :param alpha: the clearance.
    :return list[list[MergeObj]]: each group sorted, groups sorted by their first element.
    """
    items = sorted(set(objs))
    enlarged = [obj.enlarge_with(alpha) for obj in items]
    parent = list(range(len(items)))

    def find(i):
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    active = SortedKeyList(key=lambda i: enlarged[i].u_interval.upper)
    for i in sorted(range(len(items)), key=lambda i: enlarged[i].u_interval.lower):
        u_lower = enlarged[i].u_interval.lower
        while active and enlarged[active[0]].u_interval.upper < u_lower:
            active.pop(0)
        for j in active:
            if enlarged[i].v_interval.overlaps(enlarged[j].v_interval):
                root_i, root_j = find(i), find(j)
                if root_i != root_j:
                    parent[max(root_i, root_j)] = min(root_i, root_j)
        active.add(i)

    groups = {}
    for i, obj in enumerate(items):
        groups.setdefault(find(i), []).append(obj)
    clusters = sorted(groups.values(), key=lambda group: group[0])
    logger.debug("grouped %d merge objects into %d clusters", len(items), len(clusters))
    return clusters
