"""
Custom exceptions for the geometry codec.

This module defines the exception classes raised while reading or writing
EWKB streams, parsing box text and manipulating geometry trees.
"""

from typing import Optional, Sequence


class GeometryCodecError(Exception):
    """Base exception class for all geometry codec errors"""
    pass


class FormatError(GeometryCodecError, ValueError):
    """
    Exception raised when input text or bytes do not follow the expected layout.

    Covers invalid hex digits, unknown endian tags, an unterminated SRID
    prefix, unbalanced brackets and malformed box text.
    """
    pass


class TruncatedInputError(FormatError):
    """Exception raised when a stream ends before the requested bytes"""

    def __init__(self, position: int, requested: int, available: int):
        """
        Initialize TruncatedInputError.

        Args:
            position: Byte offset at which the read started
            requested: Number of bytes requested
            available: Number of bytes left in the stream
        """
        self.position = position
        self.requested = requested
        self.available = available

        message = (
            f"Unexpected end of input at byte {position}: "
            f"requested {requested} byte(s), {available} available"
        )
        super().__init__(message)


class NumberFormatError(FormatError):
    """Exception raised when a coordinate or SRID token is not a number"""

    def __init__(self, token: str, details: Optional[str] = None):
        """
        Initialize NumberFormatError.

        Args:
            token: Text that failed to parse
            details: Additional details about where the token was found
        """
        self.token = token
        self.details = details

        message = f"Invalid number: '{token}'"
        if details:
            message += f" ({details})"
        super().__init__(message)


class UnsupportedTypeError(GeometryCodecError):
    """
    Exception raised for a geometry type the codec cannot handle.

    On decode this is an unknown type code in the type word, on encode a
    geometry class without a writer (e.g. a standalone LinearRing).
    """

    def __init__(self, type_code: Optional[int] = None, type_name: Optional[str] = None):
        """
        Initialize UnsupportedTypeError.

        Args:
            type_code: Numeric type code that is unknown (decode side)
            type_name: Name of the geometry class that cannot be written
        """
        self.type_code = type_code
        self.type_name = type_name

        if type_code is not None:
            message = f"Unknown geometry type: {type_code}"
        else:
            message = f"Unsupported geometry type: {type_name}"
        super().__init__(message)


class TypeMismatchError(GeometryCodecError, TypeError):
    """Exception raised when a typed collection receives a wrong element variant"""

    def __init__(self, expected: Sequence[str], actual: str, container: Optional[str] = None):
        """
        Initialize TypeMismatchError.

        Args:
            expected: Names of the accepted geometry classes
            actual: Name of the rejected geometry class
            container: Name of the collection that rejected the element
        """
        self.expected = tuple(expected)
        self.actual = actual
        self.container = container

        message = f"expected: {' or '.join(self.expected)} got: {actual}"
        if container:
            message = f"{container} {message}"
        super().__init__(message)


class GeometryIndexError(GeometryCodecError, IndexError):
    """Exception raised for an out-of-range point or ring index"""

    def __init__(self, index: int, size: int, what: str = "point"):
        """
        Initialize GeometryIndexError.

        Args:
            index: Requested index
            size: Number of addressable elements
            what: Kind of element addressed ("point" or "ring")
        """
        self.index = index
        self.size = size

        message = f"{what} index {index} out of range (size {size})"
        super().__init__(message)


class InconsistentGeometryError(GeometryCodecError):
    """Exception raised when pre-encode validation finds consistency issues"""

    def __init__(self, issues: Sequence[object]):
        """
        Initialize InconsistentGeometryError.

        Args:
            issues: Validation issues reported for the geometry
        """
        self.issues = list(issues)

        message = f"Geometry failed consistency check with {len(self.issues)} issue(s)"
        if self.issues:
            message += f": {self.issues[0]}"
        super().__init__(message)


class NestingDepthError(FormatError):
    """Exception raised when collections are nested deeper than the codec allows"""

    def __init__(self, depth: int, limit: int):
        """
        Initialize NestingDepthError.

        Args:
            depth: Nesting depth that was reached
            limit: Deepest nesting accepted
        """
        self.depth = depth
        self.limit = limit

        message = f"Geometry nesting depth {depth} exceeds the limit of {limit}"
        super().__init__(message)
