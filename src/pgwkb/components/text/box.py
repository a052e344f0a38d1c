"""
Bounding box text codec.

Boxes are written as ``[SRID=<n>;]BOX(x y,x y)`` or
``[SRID=<n>;]BOX3D(x y z,x y z)``: a lower-left-bottom and an
upper-right-top corner.
"""

from abc import ABC
from typing import List, Optional, Tuple

from pgwkb.components.geometry.base import parse_srid
from pgwkb.components.geometry.point import Point
from pgwkb.components.text.tokenizer import GeometryTokenizer
from pgwkb.core.enums import UNKNOWN_SRID, BoxType
from pgwkb.core.exceptions import FormatError, NumberFormatError

SRID_PREFIX = "SRID="


def split_srid(text: str) -> Tuple[int, str]:
    """
    Separate an optional ``SRID=<n>;`` prefix from the rest of the text

    Args:
        text: Trimmed box or geometry text

    Returns:
        Tuple of (srid, remaining text); srid is 0 when there is no prefix

    Raises:
        FormatError: If the prefix is not terminated by ';' or the SRID is too large
        NumberFormatError: If the SRID is not an integer
    """
    if not text.startswith(SRID_PREFIX):
        return UNKNOWN_SRID, text
    index = text.find(";", len(SRID_PREFIX))
    if index == -1:
        raise FormatError(f"SRID not delimited with ';' in '{text}'")
    token = text[len(SRID_PREFIX):index].strip()
    try:
        srid = int(token)
    except ValueError:
        raise NumberFormatError(token, "SRID") from None
    return parse_srid(srid), text[index + 1:].strip()


def _lazy_dim_equals(first: Point, second: Point) -> bool:
    # a missing z compares equal to z == 0
    if first.x != second.x or first.y != second.y:
        return False
    first_flat = not first.is_3d or first.z == 0.0
    second_flat = not second.is_3d or second.z == 0.0
    return (first_flat and second_flat) or first.z == second.z


class BoxBase(ABC):
    """
    Box given by two corner points

    Subclasses pick the text keyword through BOX_TYPE and may normalize
    corners on assignment.
    """

    BOX_TYPE: BoxType

    def __init__(self, llb: Optional[Point] = None, urt: Optional[Point] = None):
        """
        Initialize box

        Args:
            llb: Lower-left(-bottom) corner
            urt: Upper-right(-top) corner
        """
        self._llb: Optional[Point] = None
        self._urt: Optional[Point] = None
        self.llb = llb
        self.urt = urt

    @classmethod
    def from_text(cls, text: str) -> "BoxBase":
        """Create a box from its text form"""
        box = cls()
        box.set_value(text)
        return box

    def _normalize(self, point: Optional[Point]) -> Optional[Point]:
        return point

    @property
    def llb(self) -> Optional[Point]:
        return self._llb

    @llb.setter
    def llb(self, point: Optional[Point]) -> None:
        self._llb = self._normalize(point)

    @property
    def urt(self) -> Optional[Point]:
        return self._urt

    @urt.setter
    def urt(self, point: Optional[Point]) -> None:
        self._urt = self._normalize(point)

    @property
    def prefix(self) -> str:
        return self.BOX_TYPE.prefix

    @property
    def pg_type(self) -> str:
        """PostgreSQL type name (box2d or box3d)"""
        return self.BOX_TYPE.pg_type

    @property
    def srid(self) -> int:
        return self._llb.srid if self._llb is not None else UNKNOWN_SRID

    @srid.setter
    def srid(self, srid: int) -> None:
        for corner in (self._llb, self._urt):
            if corner is not None:
                corner._assign_srid(srid)

    @property
    def is_3d(self) -> bool:
        return any(c is not None and c.is_3d for c in (self._llb, self._urt))

    def set_value(self, text: str) -> None:
        """
        Parse box text into this box

        Args:
            text: ``[SRID=<n>;]<PREFIX>(<point>,<point>)``; the keyword and
                SRID prefix are optional

        Raises:
            FormatError: If the text is malformed
            NumberFormatError: If an ordinate or the SRID is not a number
        """
        srid, body = split_srid(text.strip())
        if body.startswith(self.prefix):
            body = body[len(self.prefix):].strip()
        body = GeometryTokenizer.remove_brackets(body)

        corners: List[str] = GeometryTokenizer.tokenize(body, ",")
        if len(corners) != 2:
            raise FormatError(f"Expected 2 corner points, got {len(corners)} in '{text}'")

        llb = Point.from_inner_wkt(corners[0], srid)
        urt = Point.from_inner_wkt(corners[1], srid)
        self.llb = llb
        self.urt = urt

    @property
    def value(self) -> str:
        """Text form of the box; the SRID prefix is written when the SRID is known"""
        if self._llb is None or self._urt is None:
            raise ValueError(f"{type(self).__name__} has no corner points")
        text = f"{self.prefix}({self._llb.to_inner_wkt(False)},{self._urt.to_inner_wkt(False)})"
        if self.srid != UNKNOWN_SRID:
            text = f"{SRID_PREFIX}{self.srid};{text}"
        return text

    def copy(self) -> "BoxBase":
        return type(self)(
            self._llb.copy() if self._llb is not None else None,
            self._urt.copy() if self._urt is not None else None,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoxBase):
            return False
        if self._llb is None or self._urt is None or other._llb is None or other._urt is None:
            return self._llb is other._llb and self._urt is other._urt
        return _lazy_dim_equals(self._llb, other._llb) and _lazy_dim_equals(self._urt, other._urt)

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(llb={self._llb!r}, urt={self._urt!r})"


class Box2D(BoxBase):
    """2D box; z of either corner is discarded on every assignment"""

    BOX_TYPE = BoxType.BOX2D

    def _normalize(self, point: Optional[Point]) -> Optional[Point]:
        if point is not None and point.is_3d:
            return point.to_2d()
        return point


class Box3D(BoxBase):
    """3D box; corners may still be given with two ordinates"""

    BOX_TYPE = BoxType.BOX3D


def parse_box2d(text: str) -> Box2D:
    """Parse ``BOX(x y,x y)`` text"""
    return Box2D.from_text(text)


def parse_box3d(text: str) -> Box3D:
    """Parse ``BOX3D(x y z,x y z)`` text"""
    return Box3D.from_text(text)
