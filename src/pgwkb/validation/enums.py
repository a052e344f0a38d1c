"""Validation enums for type-safe validation"""
from enum import Enum


class ConsistencyIssueType(Enum):
    """Types of geometry consistency issues"""
    DIMENSION_MISMATCH = "dimension_mismatch"
    MEASURE_MISMATCH = "measure_mismatch"
    SRID_MISMATCH = "srid_mismatch"
    INVALID_POINT_COUNT = "invalid_point_count"
    DISCONTINUOUS_CURVE = "discontinuous_curve"
