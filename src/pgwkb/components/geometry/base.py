"""
Abstract geometry base shared by every variant.

Each variant declares its GeometryType; dimension and measure are derived
from the coordinates it holds. SRID propagation lives in geometry_ops, this
module only stores the value of a single node.
"""

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Iterator, Optional, Tuple

from pgwkb.core.enums import MAX_SRID, UNKNOWN_SRID, GeometryType
from pgwkb.core.exceptions import FormatError, GeometryIndexError

if TYPE_CHECKING:
    from pgwkb.components.geometry.point import Point


def parse_srid(srid: int) -> int:
    """
    Normalize an SRID; negative values mean unknown

    Raises:
        FormatError: If the SRID does not fit the signed 32-bit EWKB field
    """
    srid = int(srid)
    if srid > MAX_SRID:
        raise FormatError(f"SRID {srid} exceeds the maximum of {MAX_SRID}")
    return srid if srid > UNKNOWN_SRID else UNKNOWN_SRID


def double_equals(a: Optional[float], b: Optional[float]) -> bool:
    """Exact float comparison that treats NaN as equal to NaN"""
    if a is None or b is None:
        return a is b
    if math.isnan(a) and math.isnan(b):
        return True
    return a == b


def locate_point(parts: Iterable["Geometry"], index: int, total: int) -> "Point":
    """
    Resolve a flattened point index across consecutive parts

    Args:
        parts: Sub-geometries in order
        index: 0-based index into the concatenated points
        total: Total number of points, used for the error message

    Returns:
        The addressed point

    Raises:
        GeometryIndexError: If the index is negative or past the last point
    """
    if index < 0:
        raise GeometryIndexError(index, total)
    remaining = index
    for part in parts:
        count = part.num_points()
        if remaining < count:
            return part.get_point(remaining)
        remaining -= count
    raise GeometryIndexError(index, total)


class Geometry(ABC):
    """Base class of all geometry variants"""

    GEOMETRY_TYPE: GeometryType

    def __init__(self, srid: int = UNKNOWN_SRID):
        self._srid = parse_srid(srid)

    @property
    def geometry_type(self) -> GeometryType:
        return self.GEOMETRY_TYPE

    @property
    def type_code(self) -> int:
        return int(self.GEOMETRY_TYPE)

    @property
    def srid(self) -> int:
        """Spatial reference id of this node (0 = unknown)"""
        return self._srid

    def _assign_srid(self, srid: int) -> None:
        # single node only; use geometry_ops.set_srid for whole trees
        self._srid = parse_srid(srid)

    @property
    def dimension(self) -> int:
        return 3 if self.is_3d else 2

    @property
    @abstractmethod
    def is_3d(self) -> bool:
        pass

    @property
    @abstractmethod
    def has_measure(self) -> bool:
        pass

    @property
    @abstractmethod
    def is_empty(self) -> bool:
        pass

    @abstractmethod
    def sub_geometries(self) -> Tuple["Geometry", ...]:
        """Direct children in order (points for line-based geometries)"""
        pass

    @abstractmethod
    def num_points(self) -> int:
        pass

    @abstractmethod
    def get_point(self, index: int) -> "Point":
        pass

    def coordinates(self) -> Iterator["Point"]:
        """Iterate over all points of the geometry in storage order"""
        for part in self.sub_geometries():
            yield from part.coordinates()

    @property
    def first_point(self) -> Optional["Point"]:
        return next(self.coordinates(), None)

    @property
    def last_point(self) -> Optional["Point"]:
        last = None
        for last in self.coordinates():
            pass
        return last

    def check_consistency(self) -> bool:
        """
        Check that dimension, measure and SRID are uniform across the tree

        Returns:
            True if the geometry can safely be encoded
        """
        from pgwkb.validation.consistency_validator import GeometryConsistencyValidator

        return GeometryConsistencyValidator().validate(self).is_valid

    def _equals_structure(self, other: "Geometry") -> bool:
        return self.sub_geometries() == other.sub_geometries()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Geometry) or type(self) is not type(other):
            return False
        return (
            self.type_code == other.type_code
            and self.srid == other.srid
            and self.dimension == other.dimension
            and self.has_measure == other.has_measure
            and self._equals_structure(other)
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}(srid={self.srid}, points={self.num_points()})"
