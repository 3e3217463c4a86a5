# =============================================================================
# Validation Issues Module
# =============================================================================
# Structured failure values produced by validators:
# - IssueKind: Taxonomy of rejection reasons
# - ValidationIssue: A single (path, expected) failure with its kind
# - GeoJsonValidationError: Exception raised at the decode boundary
# - format_issues: Path reporter rendering issues as readable lines
# =============================================================================

from enum import Enum
from typing import Any, Iterable, Iterator, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "IssueKind",
    "Path",
    "ValidationIssue",
    "GeoJsonValidationError",
    "format_path",
    "format_issues",
    "iter_leaf_issues",
]


Path = Tuple[Union[str, int], ...]
"""Keys and indices leading from the document root to a value."""


class IssueKind(str, Enum):
    """Reason a validator rejected a value."""

    TAG_MISMATCH = "tag_mismatch"
    SHAPE_MISMATCH = "shape_mismatch"
    EMPTINESS_VIOLATION = "emptiness_violation"
    MISSING_FIELD = "missing_field"
    ALL_ALTERNATIVES_FAILED = "all_alternatives_failed"


class ValidationIssue(BaseModel):
    """
    A single rejection reported by a validator.

    Issues are plain values: validators return them, they are never raised
    while validating. A failed union reports one ALL_ALTERNATIVES_FAILED
    issue whose ``causes`` hold the issues of every alternative, in the
    order the alternatives were tried.

    Attributes:
        path: Keys/indices from the document root to the rejected value
        expected: Name of the validator that rejected the value
        kind: Rejection reason
        value: The rejected value (None for a missing field)
        causes: Per-alternative issues of a failed union
    """

    model_config = ConfigDict(frozen=True)

    path: Path = Field(default=(), description="Keys/indices from the root to the value")
    expected: str = Field(..., description="Description of the expected shape")
    kind: IssueKind = Field(..., description="Rejection reason")
    value: Any = Field(None, description="The rejected value")
    causes: Tuple["ValidationIssue", ...] = Field(
        default=(), description="Issues of each failed union alternative"
    )

    @property
    def message(self) -> str:
        """Human-readable one-line description of this issue."""
        where = format_path(self.path)
        if self.kind is IssueKind.MISSING_FIELD:
            return f"Missing required field {where}: expected {self.expected}"
        return f"Invalid value {self.value!r} supplied to {where}: expected {self.expected}"


ValidationIssue.model_rebuild()


def iter_leaf_issues(issues: Iterable[ValidationIssue]) -> Iterator[ValidationIssue]:
    """Yield issues with union aggregates replaced by their underlying causes."""
    for issue in issues:
        if issue.causes:
            yield from iter_leaf_issues(issue.causes)
        else:
            yield issue


def format_path(path: Path) -> str:
    """Render a path as ``a/0/b``; the empty path renders as ``<root>``."""
    if not path:
        return "<root>"
    return "/".join(str(segment) for segment in path)


def format_issues(issues: Iterable[ValidationIssue]) -> list[str]:
    """
    Render issues as one line per leaf issue.

    Args:
        issues: Issues returned by a failed validation

    Returns:
        List of messages, union aggregates flattened into their causes
    """
    return [issue.message for issue in iter_leaf_issues(issues)]


class GeoJsonValidationError(ValueError):
    """
    Raised when a document is decoded with ``Validator.decode`` and rejected.

    Attributes:
        issues: The issues reported by the validator
    """

    def __init__(self, issues: Iterable[ValidationIssue]):
        self.issues: Tuple[ValidationIssue, ...] = tuple(issues)
        super().__init__("\n".join(format_issues(self.issues)) or "Invalid value")
