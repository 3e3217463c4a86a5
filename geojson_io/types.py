# =============================================================================
# GeoJSON Types Module
# =============================================================================
# Static types of the values accepted by the grammar validators, so that
# validated documents can be consumed without further casting.
# =============================================================================

from enum import Enum
from typing import Any, Dict, Generic, List, Literal, NotRequired, Optional, Tuple, TypedDict, TypeVar, Union

__all__ = [
    "GeoJsonType",
    "DirectGeometryType",
    "GeometryType",
    "Position",
    "BoundingBox",
    "Properties",
    "GeoJsonObject",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "DirectGeometryObject",
    "GeometryCollection",
    "GeometryObject",
    "FeatureWith",
    "Feature",
    "FeatureCollection",
]

P = TypeVar("P")


class GeoJsonType(str, Enum):
    """The ``type`` tags defined by RFC 7946 section 1.4."""

    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"


DirectGeometryType = Literal["Point", "Polygon", "LineString", "MultiPoint", "MultiPolygon", "MultiLineString"]
GeometryType = Union[DirectGeometryType, Literal["GeometryCollection"]]

# Longitude, latitude. Altitude is not accepted.
Position = Tuple[float, float]
BoundingBox = List[float]
Properties = Optional[Dict[str, Any]]


class GeoJsonObject(TypedDict):
    type: str
    bbox: NotRequired[BoundingBox]


class Point(TypedDict):
    type: Literal["Point"]
    coordinates: Position
    bbox: NotRequired[BoundingBox]


class MultiPoint(TypedDict):
    type: Literal["MultiPoint"]
    coordinates: List[Position]
    bbox: NotRequired[BoundingBox]


class LineString(TypedDict):
    type: Literal["LineString"]
    coordinates: List[Position]
    bbox: NotRequired[BoundingBox]


class MultiLineString(TypedDict):
    type: Literal["MultiLineString"]
    coordinates: List[List[Position]]
    bbox: NotRequired[BoundingBox]


class Polygon(TypedDict):
    type: Literal["Polygon"]
    coordinates: List[List[Position]]
    bbox: NotRequired[BoundingBox]


class MultiPolygon(TypedDict):
    type: Literal["MultiPolygon"]
    coordinates: List[List[List[Position]]]
    bbox: NotRequired[BoundingBox]


DirectGeometryObject = Union[Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon]


class GeometryCollection(TypedDict):
    type: Literal["GeometryCollection"]
    geometries: List[DirectGeometryObject]
    bbox: NotRequired[BoundingBox]


GeometryObject = Union[DirectGeometryObject, GeometryCollection]


class FeatureWith(TypedDict, Generic[P]):
    """A Feature whose ``properties`` have type ``P``."""

    type: Literal["Feature"]
    geometry: Optional[GeometryObject]
    properties: P
    id: NotRequired[Union[str, float]]
    bbox: NotRequired[BoundingBox]


Feature = FeatureWith[Properties]


class FeatureCollection(TypedDict):
    type: Literal["FeatureCollection"]
    features: List[Feature]
    bbox: NotRequired[BoundingBox]
