"""Base classes for geometry validation"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from pgwkb.validation.enums import ConsistencyIssueType


@dataclass(frozen=True)
class ValidationIssue:
    """
    A single problem found in a geometry tree

    path is the chain of child indexes from the root to the offending
    geometry, e.g. (0, 2) is the third child of the first child.
    """
    issue_type: ConsistencyIssueType
    message: str
    path: tuple = ()

    def __str__(self) -> str:
        location = "/".join(str(i) for i in self.path) or "root"
        return f"[{self.issue_type.value}] {location}: {self.message}"


class ValidationResult:
    """Issues collected while walking one geometry tree"""

    def __init__(self, is_valid: bool = True, issues: Optional[Iterable[ValidationIssue]] = None):
        """
        Create a result, valid unless issues are given.

        Args:
            is_valid: Initial verdict
            issues: Issues already found
        """
        self._issues: List[ValidationIssue] = list(issues or [])
        self._valid = is_valid and not self._issues

    @property
    def is_valid(self) -> bool:
        """True while no issue has been recorded"""
        return self._valid

    @property
    def issues(self) -> List[ValidationIssue]:
        return self._issues

    def add_issue(self, issue: ValidationIssue) -> None:
        """Record an issue; the result becomes invalid"""
        self._issues.append(issue)
        self._valid = False


class BaseValidator(ABC):
    """Interface of geometry validators (Strategy Pattern)"""

    @abstractmethod
    def validate(self, value: Any, context: Optional[Dict[str, Any]] = None) -> ValidationResult:
        """
        Check a geometry without modifying it.

        Args:
            value: Geometry to check
            context: Extra information for the validator, if it needs any

        Returns:
            ValidationResult listing every issue found
        """
        raise NotImplementedError
