import portion as P

from .errors import InvalidRangeError, NoOverlapError


def _as_portion(value) -> P.Interval:
    if isinstance(value, Interval):
        return value._atomic
    return P.singleton(value)


class Interval:
    """
    This class represents a closed interval [lower, upper] over an ordered numeric domain.

    The bounds are stored as an atomic closed interval of the `portion`-library. A degenerate
    interval (lower == upper) is legal, an empty interval cannot be represented:

        Interval(3, 5)    ->  [3,5]
        Interval(4, 4)    ->  [4]
        Interval(5, 3)    ->  InvalidRangeError
    """
    __slots__ = ("_atomic",)

    def __init__(self, lower, upper):
        if lower > upper:
            raise InvalidRangeError(f"lower bound {lower!r} is greater than upper bound {upper!r}")
        self._atomic = P.closed(lower, upper)

    @classmethod
    def _from_portion(cls, atomic: P.Interval) -> 'Interval':
        assert not atomic.empty
        return cls(atomic.lower, atomic.upper)

    @property
    def lower(self):
        """
        Lower bound of the interval.
        """
        return self._atomic.lower

    @property
    def upper(self):
        """
        Upper bound of the interval.
        """
        return self._atomic.upper

    def length(self):
        return self.upper - self.lower

    def overlaps(self, other) -> bool:
        """
        Test if the closed intervals share at least one value. Touching intervals overlap.

        :param other: an interval or a scalar.
        :return bool:
        """
        return self._atomic.overlaps(_as_portion(other))

    def contains(self, value) -> bool:
        """
        Test if value lies within the interval.

        :param value: a scalar or an interval, which has to be contained entirely.
        :return bool:
        """
        return _as_portion(value) in self._atomic

    def hull_with(self, other) -> 'Interval':
        """
        Return the smallest interval containing both self and other.

            self:   [3,5]
            other:      [5,7]
            return: [3,  ,  7]

        :param other: an interval or a scalar.
        :return Interval:
        """
        union = self._atomic | _as_portion(other)
        return Interval(union.lower, union.upper)

    def intersect_with(self, other) -> 'Interval':
        """
        Return the common part of self and other.

        :param other: an interval or a scalar.
        :return Interval:
        :raises NoOverlapError: if self and other do not overlap.
        """
        common = self._atomic & _as_portion(other)
        if common.empty:
            raise NoOverlapError(f"{self!r} does not overlap {other!r}")
        return self._from_portion(common)

    def enlarge_by(self, margin) -> 'Interval':
        """
        Return the interval [lower - margin, upper + margin].

        :param margin: the enlargement, may be negative as long as the interval does not invert.
        :return Interval:
        :raises InvalidRangeError: if a negative margin exceeds half of the length.
        """
        lower, upper = self.lower - margin, self.upper + margin
        if lower > upper:
            raise InvalidRangeError(f"enlarging {self!r} by {margin!r} would invert it")
        return Interval(lower, upper)

    enlarge_with = enlarge_by

    def min_dist_with(self, other):
        """
        Return the distance between the closest values of self and other, zero if they overlap.

        :param other: an interval or a scalar.
        """
        other = _as_portion(other)
        if self.upper < other.lower:
            return other.lower - self.upper
        if other.upper < self.lower:
            return self.lower - other.upper
        return 0

    def _key(self):
        return self.lower, self.upper

    def __contains__(self, value):
        return self.contains(value)

    def __add__(self, other):
        if isinstance(other, Interval):
            return NotImplemented
        return Interval(self.lower + other, self.upper + other)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, Interval):
            return NotImplemented
        return Interval(self.lower - other, self.upper - other)

    def __neg__(self):
        return Interval(-self.upper, -self.lower)

    def __eq__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __lt__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other):
        if not isinstance(other, Interval):
            return NotImplemented
        return self._key() >= other._key()

    def __copy__(self):
        return self.__class__(self.lower, self.upper)

    def __repr__(self):
        return f"Interval({self.lower!r}, {self.upper!r})"
