# =============================================================================
# Validation Result Module
# =============================================================================
# Outcome values returned by validate():
# - Valid: the accepted document, unchanged
# - Invalid: the issues explaining the rejection
# =============================================================================

from typing import Any, Callable, Generic, Tuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import GeoJsonValidationError, ValidationIssue, iter_leaf_issues

__all__ = ["Valid", "Invalid", "ValidationResult"]

T = TypeVar("T")
R = TypeVar("R")


class Valid(BaseModel, Generic[T]):
    """
    Successful validation outcome.

    ``value`` is the very object that was validated: no copy, coercion or
    normalization happens on the way through.
    """

    model_config = ConfigDict(frozen=True)

    value: Any = Field(..., description="The accepted document")

    @property
    def is_valid(self) -> bool:
        return True

    def fold(self, on_invalid: Callable[[Tuple[ValidationIssue, ...]], R], on_valid: Callable[[T], R]) -> R:
        """Call ``on_valid`` with the accepted value and return its result."""
        return on_valid(self.value)


class Invalid(BaseModel):
    """
    Failed validation outcome.

    Attributes:
        issues: Top-level issues in the order they were found
    """

    model_config = ConfigDict(frozen=True)

    issues: Tuple[ValidationIssue, ...] = Field(..., min_length=1, description="Rejection reasons")

    @property
    def is_valid(self) -> bool:
        return False

    def fold(self, on_invalid: Callable[[Tuple[ValidationIssue, ...]], R], on_valid: Callable[[Any], R]) -> R:
        """Call ``on_invalid`` with the issues and return its result."""
        return on_invalid(self.issues)

    def leaf_issues(self) -> list[ValidationIssue]:
        """Issues with failed unions expanded into each alternative's causes."""
        return list(iter_leaf_issues(self.issues))

    def raise_for_issues(self) -> None:
        """Raise GeoJsonValidationError carrying these issues."""
        raise GeoJsonValidationError(self.issues)


ValidationResult = Union[Valid, Invalid]
