from typing import Optional

from pgwkb.components.geometry.collection import MultiGeometry
from pgwkb.components.geometry.line_string import CircularString, LineString
from pgwkb.components.geometry.point import Point
from pgwkb.core.enums import GeometryType


class CompoundCurve(MultiGeometry):
    """
    Chain of straight and circular sub-curves

    The end point of sub-curve i must coincide with the start point of
    sub-curve i + 1; check_consistency() reports gaps.
    """

    GEOMETRY_TYPE = GeometryType.COMPOUND_CURVE
    ELEMENT_TYPES = (LineString, CircularString)

    @property
    def start_point(self) -> Optional[Point]:
        return self._geometries[0].start_point if self._geometries else None

    @property
    def end_point(self) -> Optional[Point]:
        return self._geometries[-1].end_point if self._geometries else None

    @property
    def is_closed(self) -> bool:
        start = self.start_point
        end = self.end_point
        return start is not None and end is not None and start.coords_equal(end)

    def close(self) -> None:
        """Append a straight segment back to the start point if the curve is open"""
        start = self.start_point
        end = self.end_point
        if start is None or end is None or start.coords_equal(end):
            return
        self.add(LineString([end.copy(), start.copy()], srid=self.srid))

    def reverse(self) -> None:
        """Reverse the order of the sub-curves and each sub-curve's points"""
        self._geometries.reverse()
        for curve in self._geometries:
            curve.reverse()
