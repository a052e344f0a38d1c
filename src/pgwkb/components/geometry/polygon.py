"""
Polygon variants: an ordered list of rings, ring 0 being the outer ring.
"""

from typing import Iterable, Iterator, List, Optional, Tuple, Type

from pgwkb.components.geometry.base import Geometry, locate_point
from pgwkb.components.geometry.compound_curve import CompoundCurve
from pgwkb.components.geometry.geometry_ops import dimension_flags, set_srid
from pgwkb.components.geometry.line_string import CircularString, LinearRing, LineString
from pgwkb.components.geometry.point import Point
from pgwkb.core.enums import UNKNOWN_SRID, GeometryType
from pgwkb.core.exceptions import GeometryIndexError, TypeMismatchError


class PolygonBase(Geometry):
    """Shared ring handling of Polygon and CurvePolygon"""

    RING_TYPES: Tuple[Type[Geometry], ...] = ()

    def __init__(self, rings: Optional[Iterable[Geometry]] = None, srid: int = UNKNOWN_SRID):
        """
        Initialize polygon

        Args:
            rings: Outer ring followed by the holes
            srid: Spatial reference id, adopted by rings with unknown SRID
        """
        super().__init__(srid)
        self._rings: List[Geometry] = []
        if rings is not None:
            for ring in rings:
                self.add_ring(ring)

    def add_ring(self, ring: Geometry) -> None:
        """
        Append a ring; the first ring added becomes the outer ring

        Raises:
            TypeMismatchError: If the ring is not one of RING_TYPES
        """
        if not isinstance(ring, self.RING_TYPES):
            raise TypeMismatchError(
                tuple(t.__name__ for t in self.RING_TYPES), type(ring).__name__, type(self).__name__
            )
        if self.srid != UNKNOWN_SRID and ring.srid == UNKNOWN_SRID:
            set_srid(ring, self.srid)
        self._rings.append(ring)

    @property
    def rings(self) -> List[Geometry]:
        return list(self._rings)

    @property
    def outer_ring(self) -> Optional[Geometry]:
        return self._rings[0] if self._rings else None

    @property
    def inner_rings(self) -> List[Geometry]:
        return self._rings[1:]

    def num_rings(self) -> int:
        return len(self._rings)

    def get_ring(self, index: int) -> Geometry:
        if index < 0 or index >= len(self._rings):
            raise GeometryIndexError(index, len(self._rings), "ring")
        return self._rings[index]

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self._rings)

    def __len__(self) -> int:
        return len(self._rings)

    @property
    def is_3d(self) -> bool:
        return dimension_flags(self)[id(self)][0]

    @property
    def has_measure(self) -> bool:
        return dimension_flags(self)[id(self)][1]

    @property
    def is_empty(self) -> bool:
        return not self._rings or self._rings[0].is_empty

    @property
    def is_closed(self) -> bool:
        return bool(self._rings) and self._rings[0].is_closed

    def sub_geometries(self) -> Tuple[Geometry, ...]:
        return tuple(self._rings)

    def num_points(self) -> int:
        return sum(r.num_points() for r in self._rings)

    def get_point(self, index: int) -> Point:
        return locate_point(self._rings, index, self.num_points())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(srid={self.srid}, rings={len(self._rings)}, points={self.num_points()})"


class Polygon(PolygonBase):
    """Polygon bounded by linear rings"""
    GEOMETRY_TYPE = GeometryType.POLYGON
    RING_TYPES = (LinearRing,)


class CurvePolygon(PolygonBase):
    """Polygon whose rings may be any curve variant"""
    GEOMETRY_TYPE = GeometryType.CURVE_POLYGON
    RING_TYPES = (LineString, CircularString, CompoundCurve)
