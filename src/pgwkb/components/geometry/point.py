import math
from typing import Optional, Tuple

from pgwkb.components.geometry.base import Geometry, double_equals
from pgwkb.core.enums import UNKNOWN_SRID, GeometryType
from pgwkb.core.exceptions import FormatError, GeometryIndexError, NumberFormatError

_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63


def format_coord(value: float) -> str:
    """
    Format a coordinate for text output

    Whole numbers inside the 64-bit integer range are written without a
    trailing '.0', everything else uses the default float formatting.
    """
    if math.isfinite(value) and float(value).is_integer() and _INT64_MIN <= value < _INT64_MAX:
        return str(int(value))
    return str(float(value))


def parse_coord(token: str) -> float:
    """
    Parse a single coordinate token

    Raises:
        NumberFormatError: If the token is not a number
    """
    try:
        return float(token)
    except ValueError:
        raise NumberFormatError(token, "coordinate") from None


def _optional(value: Optional[float]) -> Optional[float]:
    # NaN marks an absent ordinate
    if value is None:
        return None
    value = float(value)
    return None if math.isnan(value) else value


class Point(Geometry):
    """
    A single position with optional z and measure

    An absent z makes the point 2D, an absent m makes it unmeasured.
    Assigning NaN to z or m removes the ordinate.
    """

    GEOMETRY_TYPE = GeometryType.POINT

    def __init__(
        self,
        x: float = math.nan,
        y: float = math.nan,
        z: Optional[float] = None,
        m: Optional[float] = None,
        srid: int = UNKNOWN_SRID
    ):
        """
        Initialize point

        Args:
            x: X coordinate (NaN for an empty point)
            y: Y coordinate (NaN for an empty point)
            z: Optional Z coordinate
            m: Optional measure
            srid: Spatial reference id
        """
        super().__init__(srid)
        self.x = float(x)
        self.y = float(y)
        self._z = _optional(z)
        self._m = _optional(m)

    @property
    def z(self) -> Optional[float]:
        return self._z

    @z.setter
    def z(self, value: Optional[float]) -> None:
        self._z = _optional(value)

    @property
    def m(self) -> Optional[float]:
        return self._m

    @m.setter
    def m(self, value: Optional[float]) -> None:
        self._m = _optional(value)

    @property
    def is_3d(self) -> bool:
        return self._z is not None

    @property
    def has_measure(self) -> bool:
        return self._m is not None

    @property
    def is_empty(self) -> bool:
        return math.isnan(self.x) and math.isnan(self.y)

    def sub_geometries(self) -> Tuple[Geometry, ...]:
        return ()

    def coordinates(self):
        yield self

    def num_points(self) -> int:
        return 1

    def get_point(self, index: int) -> "Point":
        if index != 0:
            raise GeometryIndexError(index, 1)
        return self

    def coords_equal(self, other: "Point") -> bool:
        """
        Compare coordinates only

        z and m take part only when both points carry them; SRID is ignored.
        """
        if not double_equals(self.x, other.x) or not double_equals(self.y, other.y):
            return False
        if self.is_3d and other.is_3d and not double_equals(self._z, other._z):
            return False
        if self.has_measure and other.has_measure and not double_equals(self._m, other._m):
            return False
        return True

    def _equals_structure(self, other: Geometry) -> bool:
        return self.coords_equal(other)

    def distance(self, other: "Point") -> float:
        """
        Euclidean distance to another point of the same dimension

        Raises:
            ValueError: If the points have different dimensions
        """
        if self.dimension != other.dimension:
            raise ValueError("Points have different dimensions!")
        dx = self.x - other.x
        dy = self.y - other.y
        if self.is_3d:
            dz = self._z - other._z
            return math.sqrt(dx * dx + dy * dy + dz * dz)
        return math.hypot(dx, dy)

    def copy(self) -> "Point":
        return Point(self.x, self.y, self._z, self._m, self.srid)

    def to_2d(self) -> "Point":
        """Return a copy without z (measure and SRID are kept)"""
        return Point(self.x, self.y, None, self._m, self.srid)

    @classmethod
    def from_inner_wkt(cls, text: str, srid: int = UNKNOWN_SRID) -> "Point":
        """
        Parse point coordinates given as ``x y`` or ``x y z``

        Raises:
            FormatError: If the text does not hold 2 or 3 ordinates
            NumberFormatError: If an ordinate is not a number
        """
        tokens = text.split()
        if len(tokens) not in (2, 3):
            raise FormatError(f"Expected 2 or 3 ordinates, got {len(tokens)} in '{text}'")
        return cls(*[parse_coord(t) for t in tokens], srid=srid)

    def to_inner_wkt(self, include_measure: bool = True) -> str:
        parts = [format_coord(self.x), format_coord(self.y)]
        if self.is_3d:
            parts.append(format_coord(self._z))
        if include_measure and self.has_measure:
            parts.append(format_coord(self._m))
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"Point({self.to_inner_wkt()}, srid={self.srid})"
