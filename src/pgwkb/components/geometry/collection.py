from typing import Iterable, Iterator, List, Optional, Tuple, Type

from pgwkb.components.geometry.base import Geometry, locate_point
from pgwkb.components.geometry.geometry_ops import dimension_flags, set_srid
from pgwkb.components.geometry.point import Point
from pgwkb.core.enums import UNKNOWN_SRID
from pgwkb.core.exceptions import GeometryIndexError, TypeMismatchError


class MultiGeometry(Geometry):
    """
    Ordered collection of sub-geometries restricted to ELEMENT_TYPES

    Subclasses narrow ELEMENT_TYPES; adding any other variant raises
    TypeMismatchError.
    """

    ELEMENT_TYPES: Tuple[Type[Geometry], ...] = (Geometry,)

    def __init__(self, geometries: Optional[Iterable[Geometry]] = None, srid: int = UNKNOWN_SRID):
        """
        Initialize collection

        Args:
            geometries: Initial elements, added in order
            srid: Spatial reference id, adopted by elements with unknown SRID
        """
        super().__init__(srid)
        self._geometries: List[Geometry] = []
        if geometries is not None:
            self.add_all(geometries)

    @classmethod
    def accepts(cls, geometry: Geometry) -> bool:
        """Check whether a geometry satisfies the element contract"""
        return isinstance(geometry, cls.ELEMENT_TYPES)

    @classmethod
    def element_type_names(cls) -> Tuple[str, ...]:
        return tuple(t.__name__ for t in cls.ELEMENT_TYPES)

    def add(self, geometry: Geometry) -> None:
        """
        Append an element

        Raises:
            TypeMismatchError: If the element violates the collection's contract
        """
        if not self.accepts(geometry):
            raise TypeMismatchError(self.element_type_names(), type(geometry).__name__, type(self).__name__)
        if self.srid != UNKNOWN_SRID and geometry.srid == UNKNOWN_SRID:
            set_srid(geometry, self.srid)
        self._geometries.append(geometry)

    def add_all(self, geometries: Iterable[Geometry]) -> None:
        for geometry in geometries:
            self.add(geometry)

    @property
    def geometries(self) -> List[Geometry]:
        return list(self._geometries)

    def get_geometry(self, index: int) -> Geometry:
        if index < 0 or index >= len(self._geometries):
            raise GeometryIndexError(index, len(self._geometries), "geometry")
        return self._geometries[index]

    def size(self) -> int:
        return len(self._geometries)

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self._geometries)

    def __len__(self) -> int:
        return len(self._geometries)

    @property
    def is_3d(self) -> bool:
        return dimension_flags(self)[id(self)][0]

    @property
    def has_measure(self) -> bool:
        return dimension_flags(self)[id(self)][1]

    @property
    def is_empty(self) -> bool:
        return not self._geometries

    def sub_geometries(self) -> Tuple[Geometry, ...]:
        return tuple(self._geometries)

    def num_points(self) -> int:
        return sum(g.num_points() for g in self._geometries)

    def get_point(self, index: int) -> Point:
        return locate_point(self._geometries, index, self.num_points())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(srid={self.srid}, geometries={len(self._geometries)})"
