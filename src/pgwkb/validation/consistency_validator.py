"""Validator for geometry tree consistency (SRP: validates only structural invariants)"""
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple, Type

from pgwkb.components.geometry.base import Geometry
from pgwkb.components.geometry.compound_curve import CompoundCurve
from pgwkb.components.geometry.geometry_ops import dimension_flags
from pgwkb.components.geometry.line_string import CircularString
from pgwkb.validation.base import BaseValidator, ValidationIssue, ValidationResult
from pgwkb.validation.enums import ConsistencyIssueType

logger = logging.getLogger(__name__)


def _check_circular_string(geometry: CircularString, path: Tuple[int, ...]) -> List[ValidationIssue]:
    count = geometry.num_points()
    if count == 0 or (count > 1 and count % 2 == 1):
        return []
    return [ValidationIssue(
        ConsistencyIssueType.INVALID_POINT_COUNT,
        f"CircularString needs an odd number of points greater than 1, got {count}",
        path
    )]


def _check_compound_curve(geometry: CompoundCurve, path: Tuple[int, ...]) -> List[ValidationIssue]:
    issues = []
    curves = geometry.sub_geometries()
    for i, (current, following) in enumerate(zip(curves, curves[1:])):
        end = current.end_point
        start = following.start_point
        if end is None or start is None or not end.coords_equal(start):
            issues.append(ValidationIssue(
                ConsistencyIssueType.DISCONTINUOUS_CURVE,
                f"sub-curve {i} does not end where sub-curve {i + 1} starts",
                path
            ))
    return issues


class GeometryConsistencyValidator(BaseValidator):
    """
    Validates that a geometry tree can be encoded (Strategy Pattern)

    Every composed geometry must hold children with identical dimension,
    measure flag and SRID.
    Variant specific rules are looked up by class.
    """

    # Strategy map: geometry class -> extra rule
    _VARIANT_RULES: Dict[Type[Geometry], Callable[[Any, Tuple[int, ...]], List[ValidationIssue]]] = {
        CircularString: _check_circular_string,
        CompoundCurve: _check_compound_curve,
    }

    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Validate a geometry tree without modifying it.

        Args:
            value: Geometry to validate
            context: Optional context (unused)

        Returns:
            ValidationResult listing every issue found
        """
        result = ValidationResult()
        if not isinstance(value, Geometry):
            raise TypeError(f"Expected a Geometry, got {type(value).__name__}")

        self._validate_tree(value, (), result)

        if not result.is_valid:
            logger.debug(
                f"{type(value).__name__} failed consistency check: "
                f"{'; '.join(str(i) for i in result.issues)}"
            )
        return result

    def _validate_tree(self, root: Geometry, path: Tuple[int, ...], result: ValidationResult) -> None:
        flags = dimension_flags(root)
        stack = [(root, path)]
        while stack:
            geometry, path = stack.pop()
            rule = self._VARIANT_RULES.get(type(geometry))
            if rule is not None:
                for issue in rule(geometry, path):
                    result.add_issue(issue)

            children = geometry.sub_geometries()
            if not children:
                continue

            first = children[0]
            first_z, first_m = flags[id(first)]
            for index, child in enumerate(children):
                child_path = path + (index,)
                child_z, child_m = flags[id(child)]
                if child_z != first_z:
                    result.add_issue(ValidationIssue(
                        ConsistencyIssueType.DIMENSION_MISMATCH,
                        f"dimension {3 if child_z else 2} differs from {3 if first_z else 2}",
                        child_path
                    ))
                if child_m != first_m:
                    result.add_issue(ValidationIssue(
                        ConsistencyIssueType.MEASURE_MISMATCH,
                        f"measure flag {child_m} differs from {first_m}",
                        child_path
                    ))
                if child.srid != first.srid:
                    result.add_issue(ValidationIssue(
                        ConsistencyIssueType.SRID_MISMATCH,
                        f"SRID {child.srid} differs from sibling SRID {first.srid}",
                        child_path
                    ))
            stack.extend(
                (child, path + (index,)) for index, child in reversed(list(enumerate(children)))
            )
