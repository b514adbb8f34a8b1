import random
import unittest
from fractions import Fraction
from itertools import product

from rgeom import Interval, NoOverlapError, Point, Vector


class TestVector(unittest.TestCase):
    def __init__(self, *args, **kwargs):
        super(TestVector, self).__init__(*args, **kwargs)

    def test_arithmetic(self):
        self.assertEqual(Vector(1, 2) + Vector(3, 5), Vector(4, 7))
        self.assertEqual(Vector(1, 2) - Vector(3, 5), Vector(-2, -3))
        self.assertEqual(-Vector(1, -2), Vector(-1, 2))
        self.assertEqual(Vector(1, -2) * 3, Vector(3, -6))
        self.assertEqual(3 * Vector(1, -2), Vector(3, -6))

    def test_cross(self):
        self.assertEqual(Vector(1, 0).cross(Vector(0, 1)), 1)
        self.assertEqual(Vector(0, 1).cross(Vector(1, 0)), -1)
        self.assertEqual(Vector(2, 4).cross(Vector(1, 2)), 0)

    def test_norms(self):
        vec = Vector(3, -4)
        self.assertEqual(vec.dot(Vector(2, 1)), 2)
        self.assertEqual(vec.norm_sqr(), 25)
        self.assertEqual(vec.l1_norm(), 7)
        self.assertEqual(vec.norm_inf(), 4)
        self.assertEqual(Vector(0, 0).l1_norm(), 0)

    def test_division(self):
        self.assertEqual(Vector(4, -6) / 2, Vector(2, -3))
        self.assertIsInstance((Vector(4, -6) / 2).dx, int)
        self.assertEqual(Vector(3, 1) / 2, Vector(Fraction(3, 2), Fraction(1, 2)))
        with self.assertRaises(TypeError):
            Vector(1, 2) / Vector(1, 2)

    def test_eq_and_hash(self):
        self.assertEqual(Vector(1, 2), Vector(1, 2))
        self.assertNotEqual(Vector(1, 2), Vector(2, 1))
        self.assertNotEqual(Vector(1, 2), Point(1, 2))
        self.assertEqual(len({Vector(1, 2), Vector(1, 2), Vector(2, 1)}), 2)

    def test_repr(self):
        self.assertEqual(repr(Vector(1, -2)), "Vector(1, -2)")

    def test_unsupported_operands(self):
        with self.assertRaises(TypeError):
            Vector(1, 2) + 1
        with self.assertRaises(TypeError):
            Vector(1, 2) * Vector(1, 2)


class TestPoint(unittest.TestCase):
    def __init__(self, *args, **kwargs):
        super(TestPoint, self).__init__(*args, **kwargs)

    def test_translation_round_trip(self):
        self.assertEqual(Point(0, 0) + Vector(5, 6) - Vector(5, 6), Point(0, 0))
        rng = random.Random(7)
        for _ in range(100):
            p = Point(rng.randint(-1000, 1000), rng.randint(-1000, 1000))
            v = Vector(rng.randint(-1000, 1000), rng.randint(-1000, 1000))
            self.assertEqual((p + v) - v, p)
            self.assertEqual((p + v) - p, v)

    def test_arithmetic(self):
        self.assertEqual(Point(3, 4) + Vector(1, -1), Point(4, 3))
        self.assertEqual(Point(3, 4) - Vector(1, -1), Point(2, 5))
        self.assertEqual(Point(3, 4) - Point(1, 1), Vector(2, 3))
        self.assertEqual(Point(3, 4).displace(Point(1, 1)), Vector(2, 3))
        with self.assertRaises(TypeError):
            Point(3, 4) + Point(1, 1)

    def test_no_wrap_around(self):
        big = 2 ** 80
        self.assertEqual(Point(big, -big) + Vector(big, -big), Point(2 * big, -2 * big))

    def test_flip(self):
        self.assertEqual(Point(3, 4).flip(), Point(4, 3))

    def test_immutable(self):
        p = Point(1, 2)
        with self.assertRaises(AttributeError):
            p.x = 3
        with self.assertRaises(AttributeError):
            p.z = 3

    def test_eq_and_hash(self):
        self.assertEqual(Point(1, 2), Point(1, 2))
        self.assertEqual(Point(1, 2), Point(0, 0) + Vector(1, 2))
        self.assertEqual(hash(Point(1, 2)), hash(Point(0, 0) + Vector(1, 2)))
        self.assertNotEqual(Point(1, 2), Point(2, 1))
        self.assertEqual(len({Point(1, 2), Point(1, 2), Point(2, 1)}), 2)

    def test_ordering(self):
        self.assertLess(Point(0, 9), Point(1, 0))
        self.assertLess(Point(1, 0), Point(1, 1))
        self.assertLessEqual(Point(1, 1), Point(1, 1))
        self.assertGreater(Point(2, 0), Point(1, 5))
        self.assertGreaterEqual(Point(2, 0), Point(2, 0))
        points = [Point(x, y) for x, y in product(range(3), repeat=2)]
        shuffled = list(points)
        random.Random(3).shuffle(shuffled)
        self.assertListEqual(sorted(shuffled), points)

    def test_repr(self):
        self.assertEqual(repr(Point(1, 2)), "Point(1, 2)")
        self.assertEqual(repr(Point(Interval(0, 1), 2)), "Point(Interval(0, 1), 2)")


class TestPointRegions(unittest.TestCase):
    def __init__(self, *args, **kwargs):
        super(TestPointRegions, self).__init__(*args, **kwargs)

    def test_enlarge_with(self):
        self.assertEqual(Point(0, 0).enlarge_with(1), Point(Interval(-1, 1), Interval(-1, 1)))
        self.assertEqual(Point(Interval(0, 2), 5).enlarge_with(1), Point(Interval(-1, 3), Interval(4, 6)))

    def test_hull_with(self):
        self.assertEqual(Point(0, 5).hull_with(Point(3, 1)), Point(Interval(0, 3), Interval(1, 5)))
        rect = Point(Interval(0, 2), Interval(0, 2))
        self.assertEqual(rect.hull_with(Point(5, 1)), Point(Interval(0, 5), Interval(0, 2)))

    def test_overlaps_and_contains(self):
        rect = Point(Interval(0, 4), Interval(0, 2))
        self.assertTrue(rect.overlaps(Point(4, 2)))
        self.assertTrue(rect.contains(Point(4, 2)))
        self.assertFalse(rect.overlaps(Point(5, 2)))
        self.assertTrue(rect.overlaps(Point(Interval(3, 9), Interval(-1, 0))))
        self.assertFalse(rect.contains(Point(Interval(3, 9), Interval(-1, 0))))
        self.assertTrue(Point(1, 1).overlaps(Point(1, 1)))
        self.assertFalse(Point(1, 1).overlaps(Point(1, 2)))

    def test_intersect_with(self):
        a = Point(Interval(0, 4), Interval(0, 2))
        b = Point(Interval(3, 9), Interval(1, 5))
        self.assertEqual(a.intersect_with(b), Point(Interval(3, 4), Interval(1, 2)))
        self.assertEqual(a.intersect_with(Point(1, 1)), Point(Interval(1, 1), Interval(1, 1)))
        with self.assertRaises(NoOverlapError):
            a.intersect_with(Point(Interval(5, 9), Interval(1, 5)))

    def test_min_dist_with(self):
        self.assertEqual(Point(0, 0).min_dist_with(Point(3, -4)), 7)
        rect = Point(Interval(0, 4), Interval(0, 2))
        self.assertEqual(rect.min_dist_with(Point(6, 5)), 5)
        self.assertEqual(rect.min_dist_with(Point(2, 1)), 0)

    def test_translation_of_rectangle(self):
        rect = Point(Interval(0, 4), Interval(0, 2))
        self.assertEqual(rect + Vector(1, 1), Point(Interval(1, 5), Interval(1, 3)))


if __name__ == "__main__":
    unittest.main()
