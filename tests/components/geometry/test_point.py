"""Unit tests for Point"""

import math
import unittest

from pgwkb.components.geometry import Point
from pgwkb.components.geometry.point import format_coord, parse_coord
from pgwkb.core import GeometryType, FormatError, GeometryIndexError, NumberFormatError


class TestPointConstruction(unittest.TestCase):
    """Test point attributes derived from the given ordinates"""

    def test_2d_point(self):
        point = Point(1, 2)
        self.assertEqual((point.x, point.y), (1.0, 2.0))
        self.assertIsNone(point.z)
        self.assertIsNone(point.m)
        self.assertFalse(point.is_3d)
        self.assertFalse(point.has_measure)
        self.assertEqual(point.dimension, 2)
        self.assertEqual(point.srid, 0)

    def test_3d_measured_point(self):
        point = Point(1, 2, 3, 4, srid=4326)
        self.assertTrue(point.is_3d)
        self.assertTrue(point.has_measure)
        self.assertEqual(point.dimension, 3)
        self.assertEqual(point.srid, 4326)

    def test_type(self):
        point = Point(1, 2)
        self.assertIs(point.geometry_type, GeometryType.POINT)
        self.assertEqual(point.type_code, 1)

    def test_negative_srid_means_unknown(self):
        self.assertEqual(Point(1, 2, srid=-1).srid, 0)

    def test_empty_point(self):
        self.assertTrue(Point().is_empty)
        self.assertFalse(Point(0, 0).is_empty)

    def test_nan_removes_ordinate(self):
        point = Point(1, 2, 3, 4)
        point.z = math.nan
        point.m = float("nan")
        self.assertFalse(point.is_3d)
        self.assertFalse(point.has_measure)

    def test_setting_z_makes_point_3d(self):
        point = Point(1, 2)
        point.z = 0
        self.assertTrue(point.is_3d)


class TestPointEquality(unittest.TestCase):
    """Test structural equality of points"""

    def test_equal_points(self):
        self.assertEqual(Point(1, 2), Point(1.0, 2.0))

    def test_nan_z_equals_missing_z(self):
        copy = Point(1, 2)
        copy.z = math.nan
        self.assertEqual(Point(1, 2), copy)

    def test_zero_z_differs_from_missing_z(self):
        self.assertNotEqual(Point(1, 2), Point(1, 2, 0))

    def test_empty_points_are_equal(self):
        self.assertEqual(Point(), Point())

    def test_srid_takes_part(self):
        self.assertNotEqual(Point(1, 2, srid=4326), Point(1, 2))

    def test_measure_takes_part(self):
        self.assertNotEqual(Point(1, 2, m=1), Point(1, 2))
        self.assertNotEqual(Point(1, 2, m=1), Point(1, 2, m=2))

    def test_subclass_is_not_equal(self):
        class Other(Point):
            pass

        self.assertNotEqual(Point(1, 2), Other(1, 2))

    def test_coords_equal_ignores_srid(self):
        self.assertTrue(Point(1, 2, srid=4326).coords_equal(Point(1, 2)))

    def test_points_are_unhashable(self):
        with self.assertRaises(TypeError):
            hash(Point(1, 2))


class TestPointOperations(unittest.TestCase):
    """Test point helpers"""

    def test_flattened_access(self):
        point = Point(1, 2)
        self.assertEqual(point.num_points(), 1)
        self.assertIs(point.get_point(0), point)
        self.assertEqual(list(point.coordinates()), [point])
        self.assertEqual(point.sub_geometries(), ())

    def test_get_point_out_of_range(self):
        with self.assertRaises(IndexError):
            Point(1, 2).get_point(1)
        with self.assertRaises(GeometryIndexError):
            Point(1, 2).get_point(-1)

    def test_distance_2d(self):
        self.assertEqual(Point(0, 0).distance(Point(3, 4)), 5.0)

    def test_distance_3d(self):
        self.assertAlmostEqual(Point(0, 0, 0).distance(Point(1, 2, 2)), 3.0)

    def test_distance_dimension_mismatch(self):
        with self.assertRaises(ValueError):
            Point(0, 0).distance(Point(1, 1, 1))

    def test_copy_is_independent(self):
        point = Point(1, 2, 3, srid=4326)
        copy = point.copy()
        copy.x = 5
        self.assertEqual(point.x, 1.0)
        self.assertEqual(copy.srid, 4326)

    def test_to_2d(self):
        flat = Point(1, 2, 3, 4, srid=4326).to_2d()
        self.assertFalse(flat.is_3d)
        self.assertEqual(flat.m, 4.0)
        self.assertEqual(flat.srid, 4326)

    def test_to_inner_wkt(self):
        self.assertEqual(Point(1, 2.5, 3).to_inner_wkt(), "1 2.5 3")
        self.assertEqual(Point(1, 2, m=4).to_inner_wkt(), "1 2 4")
        self.assertEqual(Point(1, 2, m=4).to_inner_wkt(include_measure=False), "1 2")

    def test_from_inner_wkt(self):
        point = Point.from_inner_wkt(" 1.5  -2 3 ", srid=4326)
        self.assertEqual(point, Point(1.5, -2, 3, srid=4326))
        self.assertFalse(Point.from_inner_wkt("1 2").is_3d)

    def test_from_inner_wkt_rejects_bad_text(self):
        with self.assertRaises(FormatError):
            Point.from_inner_wkt("1")
        with self.assertRaises(FormatError):
            Point.from_inner_wkt("1 2 3 4")
        with self.assertRaises(NumberFormatError):
            Point.from_inner_wkt("1 north")


class TestCoordinateText(unittest.TestCase):
    """Test coordinate formatting and parsing"""

    def test_whole_numbers_without_fraction(self):
        self.assertEqual(format_coord(1.0), "1")
        self.assertEqual(format_coord(-42.0), "-42")

    def test_fractions_use_default_formatting(self):
        self.assertEqual(format_coord(2.5), "2.5")
        self.assertEqual(format_coord(0.1), "0.1")

    def test_huge_whole_numbers_keep_float_form(self):
        self.assertEqual(format_coord(1e20), "1e+20")

    def test_non_finite(self):
        self.assertEqual(format_coord(math.inf), "inf")
        self.assertEqual(format_coord(math.nan), "nan")

    def test_parse_coord(self):
        self.assertEqual(parse_coord("1.5"), 1.5)
        self.assertEqual(parse_coord("-3"), -3.0)

    def test_parse_coord_invalid(self):
        with self.assertRaises(NumberFormatError) as context:
            parse_coord("1,5")
        self.assertEqual(context.exception.token, "1,5")


if __name__ == '__main__':
    unittest.main()
