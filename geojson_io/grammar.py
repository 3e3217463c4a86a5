# =============================================================================
# GeoJSON Grammar Module
# =============================================================================
# RFC 7946 expressed as validator compositions, built bottom-up:
# - Type tags: DirectGeometryTypeIO, GeometryTypeIO, GeoJsonTypeIO
# - Leaves: PositionIO, BoundingBoxIO, PropertiesIO, CoordinatesIO
# - Geometries: PointIO ... MultiPolygonIO, GeometryCollectionIO
# - Features: FeatureIO, feature_with_properties(), FeatureCollectionIO
# =============================================================================

"""
GeoJSON validators.

All validators in this module are built once at import time and shared;
they hold no state that changes during validation.

Example:
    >>> result = validate(document, FeatureCollectionIO)
    >>> if result.is_valid:
    ...     features = result.value["features"]
"""

from typing import Any

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
)

__all__ = [
    "DirectGeometryTypeIO",
    "GeometryCollectionTypeIO",
    "GeometryTypeIO",
    "GeoJsonTypeIO",
    "BoundingBoxIO",
    "GeoJsonObjectIO",
    "PositionIO",
    "CoordinatesIO",
    "PointIO",
    "MultiPointIO",
    "LineStringIO",
    "MultiLineStringIO",
    "PolygonIO",
    "MultiPolygonIO",
    "DirectGeometryObjectIO",
    "GeometryCollectionIO",
    "GeometryObjectIO",
    "PropertiesIO",
    "FeatureIO",
    "FeatureCollectionIO",
    "feature_with_properties",
]


# =============================================================================
# Type Tags (RFC 7946 section 1.4)
# =============================================================================

DirectGeometryTypeIO: Validator[str] = union(
    [
        literal(GeoJsonType.POINT.value),
        literal(GeoJsonType.POLYGON.value),
        literal(GeoJsonType.LINE_STRING.value),
        literal(GeoJsonType.MULTI_POINT.value),
        literal(GeoJsonType.MULTI_POLYGON.value),
        literal(GeoJsonType.MULTI_LINE_STRING.value),
    ],
    "DirectGeometryTypeIO",
)

GeometryCollectionTypeIO: Validator[str] = literal(
    GeoJsonType.GEOMETRY_COLLECTION.value, "GeometryCollectionTypeIO"
)

GeometryTypeIO: Validator[str] = union([DirectGeometryTypeIO, GeometryCollectionTypeIO], "GeometryTypeIO")

GeoJsonTypeIO: Validator[str] = union(
    [
        GeometryTypeIO,
        union([literal(GeoJsonType.FEATURE.value), literal(GeoJsonType.FEATURE_COLLECTION.value)]),
    ],
    "GeoJsonTypeIO",
)


# =============================================================================
# Leaves
# =============================================================================

# RFC 7946 section 5 asks for 2*n numbers (4 or 6); arity is not enforced.
BoundingBoxIO: Validator[BoundingBox] = array(number, "BoundingBoxIO")

_OptionalBBoxIO = partial({"bbox": BoundingBoxIO})

# RFC 7946 section 3
GeoJsonObjectIO: Validator[GeoJsonObject] = intersection(
    [interface({"type": GeoJsonTypeIO}), _OptionalBBoxIO],
    "GeoJsonObjectIO",
)

# RFC 7946 section 3.1.1, restricted to longitude and latitude
PositionIO: Validator[Position] = tuple_([number, number], "PositionIO")

# Shallow to deep: a bare position must match before any nested array does
CoordinatesIO: Validator[Any] = union(
    [
        PositionIO,
        array(PositionIO),
        array(array(PositionIO)),
        array(array(array(PositionIO))),
    ],
    "CoordinatesIO",
)

# RFC 7946 section 3.2: the key is mandatory, its value may be null
PropertiesIO: Validator[Properties] = union([dictionary(string, any_value), null], "PropertiesIO")


# =============================================================================
# Geometries (RFC 7946 section 3.1)
# =============================================================================

def _geometry(tag: GeoJsonType, coordinates: Validator[Any], name: str) -> Validator[Any]:
    return intersection(
        [interface({"type": literal(tag.value), "coordinates": coordinates}), _OptionalBBoxIO],
        name,
    )


PointIO: Validator[Point] = _geometry(GeoJsonType.POINT, PositionIO, "PointIO")

MultiPointIO: Validator[MultiPoint] = _geometry(GeoJsonType.MULTI_POINT, array(PositionIO), "MultiPointIO")

LineStringIO: Validator[LineString] = _geometry(GeoJsonType.LINE_STRING, array(PositionIO), "LineStringIO")

MultiLineStringIO: Validator[MultiLineString] = _geometry(
    GeoJsonType.MULTI_LINE_STRING, array(non_empty_array(PositionIO)), "MultiLineStringIO"
)

PolygonIO: Validator[Polygon] = _geometry(
    GeoJsonType.POLYGON, non_empty_array(non_empty_array(PositionIO)), "PolygonIO"
)

MultiPolygonIO: Validator[MultiPolygon] = _geometry(
    GeoJsonType.MULTI_POLYGON, array(non_empty_array(non_empty_array(PositionIO))), "MultiPolygonIO"
)

DirectGeometryObjectIO: Validator[DirectGeometryObject] = union(
    [PointIO, MultiPointIO, LineStringIO, MultiLineStringIO, PolygonIO, MultiPolygonIO],
    "DirectGeometryObjectIO",
)

# RFC 7946 section 3.1.8. Nested collections SHOULD be avoided, so members
# are limited to direct geometries; this also keeps the grammar acyclic.
GeometryCollectionIO: Validator[GeometryCollection] = intersection(
    [
        interface(
            {
                "type": literal(GeoJsonType.GEOMETRY_COLLECTION.value),
                "geometries": array(DirectGeometryObjectIO),
            }
        ),
        _OptionalBBoxIO,
    ],
    "GeometryCollectionIO",
)

GeometryObjectIO: Validator[GeometryObject] = union(
    [DirectGeometryObjectIO, GeometryCollectionIO], "GeometryObjectIO"
)


# =============================================================================
# Features (RFC 7946 sections 3.2 and 3.3)
# =============================================================================

_FeatureGeometryIO = union([GeometryObjectIO, null])

_FeatureIdIO = union([string, number])


def feature_with_properties(properties: Validator[Any], name: str) -> Validator[FeatureWith[Any]]:
    """
    Build a Feature validator with a caller-supplied ``properties`` validator.

    The ``properties`` key stays required; whether ``null`` is accepted is
    up to the supplied validator.

    Args:
        properties: Validator for the ``properties`` member
        name: Display name of the resulting validator

    Returns:
        Feature validator, identical to FeatureIO apart from ``properties``

    Example:
        >>> NamedFeatureIO = feature_with_properties(
        ...     interface({"name": string}), "NamedFeatureIO"
        ... )
    """
    return intersection(
        [
            interface(
                {
                    "type": literal(GeoJsonType.FEATURE.value),
                    "geometry": _FeatureGeometryIO,
                    "properties": properties,
                }
            ),
            partial({"id": _FeatureIdIO, "bbox": BoundingBoxIO}),
        ],
        name,
    )


FeatureIO: Validator[Feature] = feature_with_properties(PropertiesIO, "FeatureIO")

FeatureCollectionIO: Validator[FeatureCollection] = intersection(
    [
        interface(
            {
                "type": literal(GeoJsonType.FEATURE_COLLECTION.value),
                "features": array(FeatureIO),
            }
        ),
        _OptionalBBoxIO,
    ],
    "FeatureCollectionIO",
)
