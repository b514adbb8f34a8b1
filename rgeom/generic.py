"""
Operations shared by scalar and interval coordinates.

A coordinate of a Point is either a scalar or an Interval. A scalar behaves like the degenerate interval
[value, value], so that for example

    overlap(3, Interval(1, 5))           ->  True
    hull(3, 7)                           ->  Interval(3, 7)
    hull(3, 3)                           ->  Interval(3, 3)
    min_dist(Interval(0, 1), 4)          ->  3

All functions are symmetric in their two arguments except `enlarge`.
"""
from fractions import Fraction

from .errors import InvalidRangeError, NoOverlapError
from .interval import Interval


def overlap(lhs, rhs) -> bool:
    if isinstance(lhs, Interval):
        return lhs.overlaps(rhs)
    if isinstance(rhs, Interval):
        return rhs.overlaps(lhs)
    return lhs == rhs


def contain(lhs, rhs) -> bool:
    """Test if rhs lies within lhs. A scalar only contains an equal scalar."""
    if isinstance(lhs, Interval):
        return lhs.contains(rhs)
    if isinstance(rhs, Interval):
        return rhs.lower == lhs and rhs.upper == lhs
    return lhs == rhs


def hull(lhs, rhs):
    if isinstance(lhs, Interval):
        return lhs.hull_with(rhs)
    if isinstance(rhs, Interval):
        return rhs.hull_with(lhs)
    return Interval(min(lhs, rhs), max(lhs, rhs))


def intersection(lhs, rhs):
    if isinstance(lhs, Interval):
        return lhs.intersect_with(rhs)
    if isinstance(rhs, Interval):
        return rhs.intersect_with(lhs)
    if lhs != rhs:
        raise NoOverlapError(f"{lhs!r} does not overlap {rhs!r}")
    return lhs


def min_dist(lhs, rhs):
    if isinstance(lhs, Interval):
        return lhs.min_dist_with(rhs)
    if isinstance(rhs, Interval):
        return rhs.min_dist_with(lhs)
    return abs(lhs - rhs)


def enlarge(value, alpha) -> Interval:
    """Return the interval covering everything within distance alpha of value."""
    if isinstance(value, Interval):
        return value.enlarge_by(alpha)
    if alpha < 0:
        raise InvalidRangeError(f"a scalar cannot be enlarged by the negative margin {alpha!r}")
    return Interval(value - alpha, value + alpha)


def exact_quotient(numerator, denominator):
    """
    Divide without leaving the exact numeric domain: integers yield an int if the division has no remainder
    and a Fraction otherwise, every other domain uses its own true division.

        exact_quotient(6, 3)   ->  2
        exact_quotient(7, 2)   ->  Fraction(7, 2)
    """
    if isinstance(numerator, int) and isinstance(denominator, int):
        quotient, remainder = divmod(numerator, denominator)
        if remainder == 0:
            return quotient
        return Fraction(numerator, denominator)
    return numerator / denominator
