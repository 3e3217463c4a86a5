"""
Shared pytest fixtures for validator tests.

Provides reusable GeoJSON documents to avoid duplication across test files.
"""

import pytest

from geojson_io import ValidationSettings


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def default_settings():
    """Settings with every option at its default."""
    return ValidationSettings(fail_fast=False, max_issues=None)


# =============================================================================
# Geometry Fixtures
# =============================================================================

@pytest.fixture
def point_dict():
    """Valid Point geometry."""
    return {"type": "Point", "coordinates": [0, 0]}


@pytest.fixture
def line_string_dict():
    """Valid LineString geometry."""
    return {"type": "LineString", "coordinates": [[-5e6, -5e6], [0, -5e6]]}


@pytest.fixture
def polygon_dict():
    """Valid Polygon with a single, unclosed three-position ring."""
    return {"type": "Polygon", "coordinates": [[[1e6, -6e6], [2e6, -4e6], [3e6, -6e6]]]}


@pytest.fixture
def multi_point_dict():
    """Valid MultiPoint geometry."""
    return {"type": "MultiPoint", "coordinates": [[100.0, 0.0], [101.0, 1.0]]}


@pytest.fixture
def multi_line_string_dict():
    """Valid MultiLineString geometry."""
    return {
        "type": "MultiLineString",
        "coordinates": [
            [[-1e6, -7.5e5], [-1e6, 7.5e5]],
            [[1e6, -7.5e5], [1e6, 7.5e5]],
            [[-7.5e5, -1e6], [7.5e5, -1e6]],
            [[-7.5e5, 1e6], [7.5e5, 1e6]],
        ],
    }


@pytest.fixture
def multi_polygon_dict():
    """Valid MultiPolygon geometry."""
    return {
        "type": "MultiPolygon",
        "coordinates": [
            [[[-5e6, 6e6], [-5e6, 8e6], [-3e6, 8e6], [-3e6, 6e6]]],
            [[[-2e6, 6e6], [-2e6, 8e6], [0, 8e6], [0, 6e6]]],
            [[[1e6, 6e6], [1e6, 8e6], [3e6, 8e6], [3e6, 6e6]]],
        ],
    }


@pytest.fixture
def geometry_collection_dict(line_string_dict, polygon_dict):
    """GeometryCollection holding a Point, a LineString and a Polygon."""
    return {
        "type": "GeometryCollection",
        "geometries": [
            line_string_dict,
            {"type": "Point", "coordinates": [4e6, -5e6]},
            polygon_dict,
        ],
    }


# =============================================================================
# Feature Fixtures
# =============================================================================

@pytest.fixture
def good_feature_dict(point_dict):
    """Feature with a Point geometry and null properties."""
    return {"type": "Feature", "geometry": point_dict, "properties": None}


@pytest.fixture
def bad_feature_dict():
    """Feature whose geometry carries the tag of a Feature."""
    return {
        "type": "Feature",
        "geometry": {"type": "Feature", "coordinates": [0, 0]},
        "properties": None,
    }


@pytest.fixture
def line_collection_dict():
    """FeatureCollection with one six-position LineString feature."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {},
                "geometry": {
                    "type": "LineString",
                    "coordinates": [
                        [-54.4921875, 39.36827914916014],
                        [18.984375, 59.712097173322924],
                        [33.3984375, 1.4061088354351594],
                        [-36.9140625, 12.211180191503997],
                        [-54.140625, 37.71859032558816],
                        [82.265625, -10.833305983642491],
                    ],
                },
            }
        ],
    }


@pytest.fixture
def missing_properties_collection_dict(
    point_dict,
    multi_line_string_dict,
    multi_polygon_dict,
    geometry_collection_dict,
):
    """FeatureCollection whose features all lack the properties key."""
    geometries = [
        point_dict,
        {"type": "LineString", "coordinates": [[4e6, -2e6], [8e6, 2e6]]},
        {"type": "LineString", "coordinates": [[4e6, 2e6], [8e6, -2e6]]},
        {"type": "Polygon", "coordinates": [[[-5e6, -1e6], [-4e6, 1e6], [-3e6, -1e6]]]},
        multi_line_string_dict,
        multi_polygon_dict,
        geometry_collection_dict,
    ]
    return {
        "type": "FeatureCollection",
        "features": [{"type": "Feature", "geometry": geometry} for geometry in geometries],
    }
