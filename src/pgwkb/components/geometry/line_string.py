"""
Line-based geometries: ordered point sequences.

LineString, LinearRing and CircularString share their storage and behavior
through LineBasedGeometry but do not derive from each other, so a type
contract naming one of them never accepts the others.
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from pgwkb.components.geometry.base import Geometry
from pgwkb.components.geometry.point import Point
from pgwkb.core.enums import UNKNOWN_SRID, GeometryType
from pgwkb.core.exceptions import GeometryIndexError, TypeMismatchError


class LineBasedGeometry(Geometry):
    """Ordered sequence of points (insertion order is significant)"""

    def __init__(self, points: Optional[Iterable[Point]] = None, srid: int = UNKNOWN_SRID):
        """
        Initialize line

        Args:
            points: Initial points, added in order
            srid: Spatial reference id, adopted by points with unknown SRID
        """
        super().__init__(srid)
        self._points: List[Point] = []
        if points is not None:
            self.add_all(points)

    def add(self, point: Point) -> None:
        """
        Append a point

        Raises:
            TypeMismatchError: If the value is not a Point
        """
        if not isinstance(point, Point):
            raise TypeMismatchError(("Point",), type(point).__name__, type(self).__name__)
        if self.srid != UNKNOWN_SRID and point.srid == UNKNOWN_SRID:
            point._assign_srid(self.srid)
        self._points.append(point)

    def add_all(self, points: Iterable[Point]) -> None:
        for point in points:
            self.add(point)

    @property
    def points(self) -> List[Point]:
        return list(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    @property
    def is_3d(self) -> bool:
        return any(p.is_3d for p in self._points)

    @property
    def has_measure(self) -> bool:
        return any(p.has_measure for p in self._points)

    @property
    def is_empty(self) -> bool:
        return not self._points

    def sub_geometries(self) -> Tuple[Geometry, ...]:
        return tuple(self._points)

    def coordinates(self) -> Iterator[Point]:
        return iter(self._points)

    def num_points(self) -> int:
        return len(self._points)

    def get_point(self, index: int) -> Point:
        if index < 0 or index >= len(self._points):
            raise GeometryIndexError(index, len(self._points))
        return self._points[index]

    @property
    def start_point(self) -> Optional[Point]:
        return self._points[0] if self._points else None

    @property
    def end_point(self) -> Optional[Point]:
        return self._points[-1] if self._points else None

    @property
    def first_point(self) -> Optional[Point]:
        return self.start_point

    @property
    def last_point(self) -> Optional[Point]:
        return self.end_point

    @property
    def is_closed(self) -> bool:
        """True if first and last point have equal coordinates"""
        if not self._points:
            return False
        return self._points[0].coords_equal(self._points[-1])

    def close(self) -> None:
        """Append a copy of the first point unless the line is already closed"""
        if self._points and not self.is_closed:
            self._points.append(self._points[0].copy())

    def reverse(self) -> None:
        """Reverse the point order in place"""
        self._points.reverse()

    def length(self) -> float:
        """Sum of the straight segment lengths"""
        return sum(a.distance(b) for a, b in zip(self._points, self._points[1:]))


class LineString(LineBasedGeometry):
    GEOMETRY_TYPE = GeometryType.LINE_STRING


class LinearRing(LineBasedGeometry):
    """Polygon ring; only ever written as part of a polygon body"""
    GEOMETRY_TYPE = GeometryType.LINEAR_RING


class CircularString(LineBasedGeometry):
    """
    Chain of circular arcs

    Every arc is defined by a start, an intermediate and an end point, and
    consecutive arcs share their end/start point, so a valid string holds an
    odd number of points greater than one.
    """

    GEOMETRY_TYPE = GeometryType.CIRCULAR_STRING

    def length(self) -> float:
        raise NotImplementedError("Arc length of a CircularString is not supported")
