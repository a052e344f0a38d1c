"""Unit tests for lines, polygons and collections"""

import pytest

from pgwkb.components.geometry import (
    Point, LineString, LinearRing, CircularString, CompoundCurve,
    Polygon, CurvePolygon, MultiPoint, MultiLineString, MultiPolygon,
    MultiCurve, MultiSurface, GeometryCollection,
    set_srid, iter_geometries, dimension_flags,
)
from pgwkb.core import MAX_SRID, FormatError, GeometryIndexError, TypeMismatchError


def square_ring(size=1.0, ring_type=LinearRing):
    return ring_type([Point(0, 0), Point(size, 0), Point(size, size), Point(0, size), Point(0, 0)])


class TestLineString:
    """Tests for line-based geometries"""

    def test_points_keep_insertion_order(self):
        line = LineString([Point(0, 0), Point(2, 0)])
        line.add(Point(2, 2))
        assert [(p.x, p.y) for p in line] == [(0, 0), (2, 0), (2, 2)]
        assert len(line) == 3

    def test_only_points_accepted(self):
        with pytest.raises(TypeMismatchError):
            LineString([LineString()])

    def test_dimension_and_measure_follow_points(self):
        assert not LineString([Point(0, 0)]).is_3d
        assert LineString([Point(0, 0, 1)]).is_3d
        assert LineString([Point(0, 0, m=1)]).has_measure

    def test_points_adopt_srid(self):
        line = LineString([Point(0, 0), Point(1, 1, srid=3857)], srid=4326)
        assert [p.srid for p in line] == [4326, 3857]

    def test_get_point(self):
        line = LineString([Point(0, 0), Point(1, 1)])
        assert line.get_point(1) == Point(1, 1)
        with pytest.raises(IndexError):
            line.get_point(2)
        with pytest.raises(IndexError):
            line.get_point(-1)

    def test_start_and_end(self):
        line = LineString([Point(0, 0), Point(1, 1)])
        assert line.start_point == Point(0, 0)
        assert line.end_point == Point(1, 1)
        assert line.first_point == Point(0, 0)
        assert line.last_point == Point(1, 1)
        assert LineString().start_point is None

    def test_close_appends_first_point(self):
        line = LineString([Point(0, 0), Point(1, 0), Point(1, 1)])
        line.close()
        assert line.num_points() == 4
        assert line.is_closed
        assert line.end_point is not line.start_point

    def test_close_is_noop_when_closed(self):
        ring = square_ring()
        ring.close()
        assert ring.num_points() == 5

    def test_reverse(self):
        line = LineString([Point(0, 0), Point(1, 0), Point(2, 0)])
        line.reverse()
        assert [p.x for p in line] == [2, 1, 0]

    def test_length(self):
        line = LineString([Point(0, 0), Point(3, 4), Point(3, 0)])
        assert line.length() == pytest.approx(9.0)

    def test_circular_string_length_not_supported(self):
        with pytest.raises(NotImplementedError):
            CircularString([Point(0, 0), Point(1, 1), Point(2, 0)]).length()

    def test_line_variants_are_distinct(self):
        points = [Point(0, 0), Point(1, 1), Point(0, 0)]
        assert LineString(points) != LinearRing(points)
        assert LineString(points) != CircularString(points)
        assert not isinstance(CircularString(), LineString)


class TestCompoundCurve:
    """Tests for chained sub-curves"""

    @pytest.fixture
    def curve(self):
        return CompoundCurve([
            LineString([Point(0, 0), Point(1, 0)]),
            CircularString([Point(1, 0), Point(2, 1), Point(3, 0)]),
        ])

    def test_only_line_and_arc_accepted(self):
        with pytest.raises(TypeMismatchError):
            CompoundCurve([Point(0, 0)])
        with pytest.raises(TypeMismatchError):
            CompoundCurve([CompoundCurve()])

    def test_start_end(self, curve):
        assert curve.start_point == Point(0, 0)
        assert curve.end_point == Point(3, 0)
        assert not curve.is_closed

    def test_flattened_points(self, curve):
        assert curve.num_points() == 5
        assert curve.get_point(2) == Point(1, 0)
        assert curve.get_point(4) == Point(3, 0)
        with pytest.raises(GeometryIndexError):
            curve.get_point(5)

    def test_close_adds_straight_segment(self, curve):
        curve.close()
        assert curve.size() == 3
        assert isinstance(curve.get_geometry(2), LineString)
        assert curve.is_closed
        assert curve.check_consistency()

    def test_reverse(self, curve):
        curve.reverse()
        assert isinstance(curve.get_geometry(0), CircularString)
        assert curve.start_point == Point(3, 0)
        assert curve.end_point == Point(0, 0)
        assert curve.check_consistency()


class TestPolygon:
    """Tests for polygon variants"""

    def test_rings(self):
        hole = LinearRing([Point(0.2, 0.2), Point(0.4, 0.2), Point(0.4, 0.4), Point(0.2, 0.2)])
        polygon = Polygon([square_ring(), hole])
        assert polygon.num_rings() == 2
        assert polygon.outer_ring.num_points() == 5
        assert polygon.inner_rings == [hole]
        assert polygon.get_ring(1) is hole
        assert polygon.num_points() == 9
        assert polygon.get_point(5) == Point(0.2, 0.2)
        assert polygon.is_closed

    def test_ring_index_out_of_range(self):
        with pytest.raises(GeometryIndexError):
            Polygon([square_ring()]).get_ring(1)

    def test_polygon_requires_linear_rings(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            Polygon([square_ring(ring_type=LineString)])
        assert exc_info.value.container == "Polygon"

    def test_curve_polygon_accepts_curves(self):
        polygon = CurvePolygon([
            square_ring(ring_type=LineString),
            CircularString([Point(0.2, 0.5), Point(0.5, 0.8), Point(0.2, 0.5)]),
        ])
        assert polygon.num_rings() == 2

    def test_curve_polygon_rejects_linear_ring(self):
        with pytest.raises(TypeMismatchError):
            CurvePolygon([square_ring()])

    def test_empty_polygon(self):
        assert Polygon().is_empty
        assert Polygon().outer_ring is None

    def test_rings_adopt_srid(self):
        polygon = Polygon([square_ring()], srid=4326)
        assert all(p.srid == 4326 for p in polygon.coordinates())


class TestMultiGeometries:
    """Tests for typed collections"""

    @pytest.mark.parametrize("collection_cls,element", [
        (MultiPoint, LineString()),
        (MultiLineString, Point(0, 0)),
        (MultiLineString, CircularString()),
        (MultiPolygon, CurvePolygon()),
        (MultiCurve, Polygon()),
        (MultiSurface, LineString()),
    ])
    def test_wrong_element_rejected(self, collection_cls, element):
        with pytest.raises(TypeMismatchError):
            collection_cls([element])

    @pytest.mark.parametrize("collection_cls,element", [
        (MultiPoint, Point(0, 0)),
        (MultiLineString, LineString()),
        (MultiPolygon, Polygon()),
        (MultiCurve, CompoundCurve()),
        (MultiCurve, CircularString()),
        (MultiSurface, CurvePolygon()),
        (GeometryCollection, MultiPolygon()),
    ])
    def test_allowed_element_accepted(self, collection_cls, element):
        assert collection_cls([element]).size() == 1

    def test_flattened_index_across_elements(self):
        multi = MultiLineString([
            LineString([Point(0, 0), Point(1, 1)]),
            LineString([]),
            LineString([Point(2, 2), Point(3, 3), Point(4, 4)]),
        ])
        assert multi.num_points() == 5
        assert multi.get_point(2) == Point(2, 2)
        assert multi.get_point(4) == Point(4, 4)
        with pytest.raises(IndexError):
            multi.get_point(5)
        with pytest.raises(IndexError):
            multi.get_point(-1)

    def test_get_geometry_out_of_range(self):
        with pytest.raises(GeometryIndexError):
            MultiPoint().get_geometry(0)

    def test_collection_equality_is_ordered(self):
        first = MultiPoint([Point(0, 0), Point(1, 1)])
        second = MultiPoint([Point(1, 1), Point(0, 0)])
        assert first != second
        assert first == MultiPoint([Point(0, 0), Point(1, 1)])

    def test_different_collection_types_not_equal(self):
        assert GeometryCollection([Point(0, 0)]) != MultiPoint([Point(0, 0)])

    def test_iteration(self):
        points = [Point(0, 0), Point(1, 1)]
        multi = MultiPoint(points)
        assert list(multi) == points
        assert multi.geometries == points
        assert len(multi) == 2


class TestSridPropagation:
    """Tests for the tree-wide SRID walk"""

    def test_every_node_receives_srid(self):
        tree = GeometryCollection([
            Point(1, 2),
            MultiPolygon([Polygon([square_ring()])]),
            GeometryCollection([CompoundCurve([LineString([Point(0, 0), Point(1, 1)])])]),
        ])
        assert set_srid(tree, 31467) is tree
        assert all(node.srid == 31467 for node in iter_geometries(tree))

    def test_negative_srid_clears(self):
        line = LineString([Point(0, 0)], srid=4326)
        set_srid(line, -3)
        assert line.srid == 0
        assert line.get_point(0).srid == 0

    def test_iter_geometries_is_pre_order(self):
        inner = MultiPoint([Point(1, 1)])
        tree = GeometryCollection([inner])
        nodes = list(iter_geometries(tree))
        assert nodes[0] is tree
        assert nodes[1] is inner
        assert nodes[2] is inner.get_geometry(0)

    def test_srid_beyond_32_bits_rejected(self):
        assert Point(1, 2, srid=MAX_SRID).srid == MAX_SRID
        with pytest.raises(FormatError):
            Point(1, 2, srid=MAX_SRID + 1)
        with pytest.raises(FormatError):
            set_srid(MultiPoint([Point(1, 2)]), 2 ** 31)


class TestDimensionFlags:
    """Tests for the Z and M flags of composed geometries"""

    def test_flags_of_every_node(self):
        measured = Point(1, 2, m=3)
        line = LineString([Point(0, 0, 1), Point(1, 1, 2)])
        tree = GeometryCollection([measured, MultiLineString([line]), MultiPoint()])
        flags = dimension_flags(tree)
        assert flags[id(tree)] == (True, True)
        assert flags[id(measured)] == (False, True)
        assert flags[id(line)] == (True, False)
        assert flags[id(tree.get_geometry(2))] == (False, False)

    def test_polygon_flags_follow_rings(self):
        polygon = Polygon([LinearRing([Point(0, 0, 1), Point(1, 0, 1), Point(0, 0, 1)])])
        assert polygon.is_3d
        assert not polygon.has_measure

    def test_deep_collection(self):
        tree = Point(1, 2, 3)
        for _ in range(5000):
            tree = GeometryCollection([tree])
        assert tree.is_3d
        assert not tree.has_measure
        assert len(list(iter_geometries(tree))) == 5001
