# =============================================================================
# Validator Kernel Module
# =============================================================================
# Primitive validators and the combinators composing them:
# - Leaves: number, string, null, any_value, literal
# - Sequences: tuple_, array, non_empty_array
# - Mappings: dictionary, interface, partial
# - Composition: union (ordered), intersection (conjunctive)
# - validate(): single entry point returning Valid / Invalid
# =============================================================================

"""
Validator combinators.

Every validator carries a display ``name`` (used as the ``expected`` text
of issues) and an ``annotation`` describing the accepted values, both
computed once from its constituents when it is constructed. Validation
never mutates or copies the input: an accepted value is returned as is.

Example:
    >>> Position = tuple_([number, number], "Position")
    >>> validate([1.5, 2], Position).is_valid
    True
    >>> validate([1.5], Position).issues[0].kind
    <IssueKind.SHAPE_MISMATCH: 'shape_mismatch'>
"""

import logging
from collections.abc import Mapping
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    List,
    Literal,
    NotRequired,
    Optional,
    Required,
    Sequence,
    Tuple,
    TypedDict,
    TypeGuard,
    TypeVar,
    Union,
)

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema

from .config import ValidationSettings, get_settings
from .errors import GeoJsonValidationError, IssueKind, Path, ValidationIssue, format_issues
from .result import Invalid, Valid, ValidationResult

__all__ = [
    "Validator",
    "LiteralValidator",
    "PrimitiveValidator",
    "TupleValidator",
    "ArrayValidator",
    "DictionaryValidator",
    "UnionValidator",
    "InterfaceValidator",
    "IntersectionValidator",
    "number",
    "string",
    "null",
    "any_value",
    "literal",
    "tuple_",
    "array",
    "non_empty_array",
    "dictionary",
    "union",
    "intersection",
    "interface",
    "partial",
    "validate",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")
L = TypeVar("L", str, int, float, bool, None)

# key -> (validator, required)
ObjectProperties = Dict[str, Tuple["Validator[Any]", bool]]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _strict_equals(value: Any, constant: Any) -> bool:
    """Equality without bool/int/str cross-matching (``True`` is not ``1``)."""
    if constant is None or isinstance(constant, bool) or isinstance(value, bool):
        return value is constant
    if isinstance(constant, str):
        return isinstance(value, str) and value == constant
    return _is_number(value) and value == constant


def _describe_constant(constant: Any) -> str:
    if isinstance(constant, str):
        return f'"{constant}"'
    if constant is None:
        return "null"
    if isinstance(constant, bool):
        return "true" if constant else "false"
    return repr(constant)


# =============================================================================
# Base Validator
# =============================================================================

class Validator(Generic[T]):
    """
    Base class for all validators.

    Subclasses implement ``check``, which returns the issues found at and
    below ``path`` (an empty list means the value is accepted).

    Attributes:
        name: Display name, used as the ``expected`` text of issues
        annotation: Type of the values this validator accepts
    """

    def __init__(self, name: str, annotation: Any):
        self.name = name
        self.annotation = annotation

    def check(self, value: Any, path: Path = (), fail_fast: bool = False) -> List[ValidationIssue]:
        raise NotImplementedError

    def issue(self, value: Any, path: Path, kind: IssueKind) -> ValidationIssue:
        return ValidationIssue(path=path, expected=self.name, kind=kind, value=value)

    def is_valid(self, value: Any) -> TypeGuard[T]:
        return not self.check(value, (), True)

    def decode(self, value: Any) -> T:
        """
        Return ``value`` unchanged if accepted.

        Raises:
            GeoJsonValidationError: If the value is rejected
        """
        issues = self.check(value)
        if issues:
            raise GeoJsonValidationError(issues)
        return value

    def encode(self, value: T) -> Any:
        """Identity: accepted values are already in their interchange form."""
        return value

    def __get_pydantic_core_schema__(self, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        """Allow ``Annotated[T, validator]`` inside pydantic models and TypeAdapters."""

        def _validate(value: Any) -> Any:
            issues = self.check(value)
            if issues:
                raise PydanticCustomError(
                    "geojson_invalid",
                    "Invalid {expected}: {details}",
                    {"expected": self.name, "details": "; ".join(format_issues(issues))},
                )
            return value

        return core_schema.no_info_plain_validator_function(_validate)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


# =============================================================================
# Leaf Validators
# =============================================================================

class PrimitiveValidator(Validator[T]):
    """Accepts values satisfying a predicate (number, string, null, any)."""

    def __init__(self, name: str, annotation: Any, predicate: Callable[[Any], bool]):
        super().__init__(name, annotation)
        self.predicate = predicate

    def check(self, value: Any, path: Path = (), fail_fast: bool = False) -> List[ValidationIssue]:
        if self.predicate(value):
            return []
        return [self.issue(value, path, IssueKind.SHAPE_MISMATCH)]


number: Validator[float] = PrimitiveValidator("number", float, _is_number)
string: Validator[str] = PrimitiveValidator("string", str, lambda value: isinstance(value, str))
null: Validator[None] = PrimitiveValidator("null", None, lambda value: value is None)
any_value: Validator[Any] = PrimitiveValidator("any", Any, lambda value: True)


class LiteralValidator(Validator[L]):
    """Accepts exactly one constant, typically a GeoJSON ``type`` tag."""

    def __init__(self, constant: L, name: Optional[str] = None):
        super().__init__(name or _describe_constant(constant), Literal[constant])
        self.constant = constant

    def check(self, value: Any, path: Path = (), fail_fast: bool = False) -> List[ValidationIssue]:
        if _strict_equals(value, self.constant):
            return []
        return [self.issue(value, path, IssueKind.TAG_MISMATCH)]


# =============================================================================
# Sequence Validators
# =============================================================================

class TupleValidator(Validator[Tuple[Any, ...]]):
    """
    Fixed-arity sequence, each element checked against its own validator.

    Stops at the first failing element and reports only its issues.
    """

    def __init__(self, items: Sequence[Validator[Any]], name: Optional[str] = None):
        self.items = tuple(items)
        super().__init__(
            name or "[" + ", ".join(item.name for item in self.items) + "]",
            tuple[tuple(item.annotation for item in self.items)],
        )

    def check(self, value: Any, path: Path = (), fail_fast: bool = False) -> List[ValidationIssue]:
        if not _is_sequence(value) or len(value) != len(self.items):
            return [self.issue(value, path, IssueKind.SHAPE_MISMATCH)]
        for index, (element, item) in enumerate(zip(value, self.items)):
            issues = item.check(element, path + (index,), fail_fast)
            if issues:
                return issues
        return []


class ArrayValidator(Validator[List[T]]):
    """Homogeneous sequence; ``non_empty`` additionally rejects zero elements."""

    def __init__(self, item: Validator[T], non_empty: bool = False, name: Optional[str] = None):
        self.item = item
        self.non_empty = non_empty
        prefix = "NonEmptyArray" if non_empty else "Array"
        super().__init__(name or f"{prefix}<{item.name}>", list[item.annotation])

    def check(self, value: Any, path: Path = (), fail_fast: bool = False) -> List[ValidationIssue]:
        if not _is_sequence(value):
            return [self.issue(value, path, IssueKind.SHAPE_MISMATCH)]
        if self.non_empty and not value:
            return [self.issue(value, path, IssueKind.EMPTINESS_VIOLATION)]
        issues: List[ValidationIssue] = []
        for index, element in enumerate(value):
            issues.extend(self.item.check(element, path + (index,), fail_fast))
            if issues and fail_fast:
                break
        return issues


# =============================================================================
# Mapping Validators
# =============================================================================

class DictionaryValidator(Validator[Dict[K, V]]):
    """Mapping whose keys and values are each checked against one validator."""

    def __init__(self, key: Validator[K], value: Validator[V], name: Optional[str] = None):
        self.key = key
        self.value = value
        super().__init__(
            name or f"{{ [K in {key.name}]: {value.name} }}",
            dict[key.annotation, value.annotation],
        )

    def check(self, value: Any, path: Path = (), fail_fast: bool = False) -> List[ValidationIssue]:
        if not isinstance(value, Mapping):
            return [self.issue(value, path, IssueKind.SHAPE_MISMATCH)]
        issues: List[ValidationIssue] = []
        for key, element in value.items():
            # Paths hold only str/int segments
            segment = key if isinstance(key, (str, int)) and not isinstance(key, bool) else repr(key)
            issues.extend(self.key.check(key, path + (segment,), fail_fast))
            issues.extend(self.value.check(element, path + (segment,), fail_fast))
            if issues and fail_fast:
                break
        return issues


def _typed_dict(name: str, properties: ObjectProperties) -> Any:
    fields = {
        key: (Required if required else NotRequired)[validator.annotation]
        for key, (validator, required) in properties.items()
    }
    return TypedDict(name if name.isidentifier() else "Interface", fields)


class InterfaceValidator(Validator[Any]):
    """
    String-keyed object with named fields.

    With ``required=True`` every field must be present: an absent key is a
    MISSING_FIELD issue, while a present key holding ``None`` is checked
    like any other value. With ``required=False`` (partial) absent keys are
    accepted. Keys not named in ``fields`` are ignored, but every key must
    be a string.
    """

    def __init__(self, fields: Dict[str, Validator[Any]], required: bool = True, name: Optional[str] = None):
        self.fields = dict(fields)
        self.required = required
        body = "{ " + ", ".join(f"{key}: {item.name}" for key, item in self.fields.items()) + " }"
        default_name = body if required else f"Partial<{body}>"
        super().__init__(name or default_name, None)
        self.annotation = _typed_dict(self.name, self.properties)

    @property
    def properties(self) -> ObjectProperties:
        return {key: (item, self.required) for key, item in self.fields.items()}

    def check(self, value: Any, path: Path = (), fail_fast: bool = False) -> List[ValidationIssue]:
        if not isinstance(value, Mapping) or not all(isinstance(key, str) for key in value):
            return [self.issue(value, path, IssueKind.SHAPE_MISMATCH)]
        issues: List[ValidationIssue] = []
        for key, item in self.fields.items():
            if key in value:
                issues.extend(item.check(value[key], path + (key,), fail_fast))
            elif self.required:
                issues.append(
                    ValidationIssue(path=path + (key,), expected=item.name, kind=IssueKind.MISSING_FIELD)
                )
            if issues and fail_fast:
                break
        return issues


# =============================================================================
# Composition
# =============================================================================

class UnionValidator(Validator[Any]):
    """
    Ordered alternation.

    Alternatives are tried in declaration order and the first acceptance
    wins. When all of them reject, a single ALL_ALTERNATIVES_FAILED issue
    carries every alternative's issues as ``causes``.
    """

    def __init__(self, alternatives: Sequence[Validator[Any]], name: Optional[str] = None):
        self.alternatives = tuple(alternatives)
        if not self.alternatives:
            raise ValueError("union requires at least one alternative")
        super().__init__(
            name or "(" + " | ".join(item.name for item in self.alternatives) + ")",
            Union[tuple(item.annotation for item in self.alternatives)],
        )

    def check(self, value: Any, path: Path = (), fail_fast: bool = False) -> List[ValidationIssue]:
        causes: List[ValidationIssue] = []
        for alternative in self.alternatives:
            issues = alternative.check(value, path, fail_fast)
            if not issues:
                return []
            causes.extend(issues)
        return [
            ValidationIssue(
                path=path,
                expected=self.name,
                kind=IssueKind.ALL_ALTERNATIVES_FAILED,
                value=value,
                causes=tuple(causes),
            )
        ]


class IntersectionValidator(Validator[Any]):
    """
    Conjunctive refinement: a value must satisfy every member.

    When all members describe objects, the annotation is a single TypedDict
    merging their fields (required wins over optional for a shared key).
    Otherwise the annotation is that of the first member.
    """

    def __init__(self, members: Sequence[Validator[Any]], name: Optional[str] = None):
        self.members = tuple(members)
        if not self.members:
            raise ValueError("intersection requires at least one member")
        super().__init__(name or "(" + " & ".join(item.name for item in self.members) + ")", None)
        properties = self.properties
        self.annotation = (
            _typed_dict(self.name, properties) if properties is not None else self.members[0].annotation
        )

    @property
    def properties(self) -> Optional[ObjectProperties]:
        merged: ObjectProperties = {}
        for member in self.members:
            member_properties = getattr(member, "properties", None)
            if member_properties is None:
                return None
            for key, (item, required) in member_properties.items():
                if key in merged and merged[key][1]:
                    continue
                merged[key] = (item, required)
        return merged

    def check(self, value: Any, path: Path = (), fail_fast: bool = False) -> List[ValidationIssue]:
        issues: List[ValidationIssue] = []
        for member in self.members:
            found = member.check(value, path, fail_fast)
            issues.extend(found)
            if found and fail_fast:
                break
            # A wrong kind of value at this level fails every member the same way
            if any(issue.path == path and issue.kind is IssueKind.SHAPE_MISMATCH for issue in found):
                break
        return issues


# =============================================================================
# Combinators
# =============================================================================

def literal(constant: L, name: Optional[str] = None) -> Validator[L]:
    return LiteralValidator(constant, name)


def tuple_(items: Sequence[Validator[Any]], name: Optional[str] = None) -> Validator[Tuple[Any, ...]]:
    return TupleValidator(items, name)


def array(item: Validator[T], name: Optional[str] = None) -> Validator[List[T]]:
    return ArrayValidator(item, non_empty=False, name=name)


def non_empty_array(item: Validator[T], name: Optional[str] = None) -> Validator[List[T]]:
    return ArrayValidator(item, non_empty=True, name=name)


def dictionary(key: Validator[K], value: Validator[V], name: Optional[str] = None) -> Validator[Dict[K, V]]:
    return DictionaryValidator(key, value, name)


def union(alternatives: Sequence[Validator[Any]], name: Optional[str] = None) -> Validator[Any]:
    return UnionValidator(alternatives, name)


def intersection(members: Sequence[Validator[Any]], name: Optional[str] = None) -> Validator[Any]:
    return IntersectionValidator(members, name)


def interface(fields: Dict[str, Validator[Any]], name: Optional[str] = None) -> Validator[Any]:
    return InterfaceValidator(fields, required=True, name=name)


def partial(fields: Dict[str, Validator[Any]], name: Optional[str] = None) -> Validator[Any]:
    return InterfaceValidator(fields, required=False, name=name)


# =============================================================================
# Entry Point
# =============================================================================

def validate(
    document: Any,
    validator: Validator[T],
    settings: Optional[ValidationSettings] = None,
) -> ValidationResult:
    """
    Validate a decoded document against a validator.

    Args:
        document: Any JSON-equivalent value (dict/list/str/number/bool/None)
        validator: Validator describing the accepted shape
        settings: Reporting settings (default: get_settings())

    Returns:
        Valid wrapping the unchanged document, or Invalid with its issues
    """
    settings = settings or get_settings()
    issues = validator.check(document, (), settings.fail_fast)
    if not issues:
        logger.debug(f"Document accepted by {validator.name}")
        return Valid(value=document)

    logger.debug(f"Document rejected by {validator.name} with {len(issues)} issue(s)")
    if settings.max_issues is not None:
        issues = issues[: settings.max_issues]
    return Invalid(issues=tuple(issues))
