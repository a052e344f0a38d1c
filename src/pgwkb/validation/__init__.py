"""Validation module for geometry consistency checks"""
from pgwkb.validation.base import BaseValidator, ValidationResult, ValidationIssue
from pgwkb.validation.enums import ConsistencyIssueType
from pgwkb.validation.consistency_validator import GeometryConsistencyValidator

__all__ = [
    "BaseValidator",
    "ValidationResult",
    "ValidationIssue",
    "ConsistencyIssueType",
    "GeometryConsistencyValidator",
]
