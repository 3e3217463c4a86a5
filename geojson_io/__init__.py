# =============================================================================
# GeoJSON IO Library
# =============================================================================
# Composable validators for RFC 7946 GeoJSON documents.
# =============================================================================

"""
GeoJSON validation for decoded documents.

This library provides:
- Validator kernel: literal, tuple_, array, non_empty_array, dictionary,
  interface, partial, union, intersection
- GeoJSON grammar: PositionIO ... FeatureCollectionIO
- Static types of accepted documents: Point ... FeatureCollection
- validate(): returns Valid (document unchanged) or Invalid (issues)
"""

__version__ = "0.1.0"

# Issues and results
from .errors import (
    GeoJsonValidationError,
    IssueKind,
    ValidationIssue,
    format_issues,
)
from .result import Invalid, Valid, ValidationResult

# Settings
from .config import ValidationSettings, get_settings

# Kernel
from .validators import (
    Validator,
    any_value,
    array,
    dictionary,
    interface,
    intersection,
    literal,
    non_empty_array,
    null,
    number,
    partial,
    string,
    tuple_,
    union,
    validate,
)

# Grammar
from .grammar import (
    BoundingBoxIO,
    CoordinatesIO,
    DirectGeometryObjectIO,
    DirectGeometryTypeIO,
    FeatureCollectionIO,
    FeatureIO,
    GeoJsonObjectIO,
    GeoJsonTypeIO,
    GeometryCollectionIO,
    GeometryCollectionTypeIO,
    GeometryObjectIO,
    GeometryTypeIO,
    LineStringIO,
    MultiLineStringIO,
    MultiPointIO,
    MultiPolygonIO,
    PointIO,
    PolygonIO,
    PositionIO,
    PropertiesIO,
    feature_with_properties,
)

# Types
from .types import (
    BoundingBox,
    DirectGeometryObject,
    Feature,
    FeatureCollection,
    FeatureWith,
    GeoJsonObject,
    GeoJsonType,
    GeometryCollection,
    GeometryObject,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Position,
    Properties,
)

__all__ = [
    # Issues and results
    "GeoJsonValidationError",
    "IssueKind",
    "ValidationIssue",
    "format_issues",
    "Invalid",
    "Valid",
    "ValidationResult",
    # Settings
    "ValidationSettings",
    "get_settings",
    # Kernel
    "Validator",
    "any_value",
    "array",
    "dictionary",
    "interface",
    "intersection",
    "literal",
    "non_empty_array",
    "null",
    "number",
    "partial",
    "string",
    "tuple_",
    "union",
    "validate",
    # Grammar
    "BoundingBoxIO",
    "CoordinatesIO",
    "DirectGeometryObjectIO",
    "DirectGeometryTypeIO",
    "FeatureCollectionIO",
    "FeatureIO",
    "GeoJsonObjectIO",
    "GeoJsonTypeIO",
    "GeometryCollectionIO",
    "GeometryCollectionTypeIO",
    "GeometryObjectIO",
    "GeometryTypeIO",
    "LineStringIO",
    "MultiLineStringIO",
    "MultiPointIO",
    "MultiPolygonIO",
    "PointIO",
    "PolygonIO",
    "PositionIO",
    "PropertiesIO",
    "feature_with_properties",
    # Types
    "BoundingBox",
    "DirectGeometryObject",
    "Feature",
    "FeatureCollection",
    "FeatureWith",
    "GeoJsonObject",
    "GeoJsonType",
    "GeometryCollection",
    "GeometryObject",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "Position",
    "Properties",
]
