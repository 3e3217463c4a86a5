#!/usr/bin/env python3
# =============================================================================
# GeoJSON Self-Check
# =============================================================================
# Feeds fixed sample documents through validate() and logs whether each one
# is accepted or rejected as expected. Exits non-zero on any surprise.
# =============================================================================

import logging
import sys
from typing import Any, NamedTuple

from geojson_io import (
    FeatureCollectionIO,
    FeatureIO,
    Validator,
    ValidationSettings,
    format_issues,
    get_settings,
    validate,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Sample Documents
# =============================================================================

LINE_COLLECTION: dict[str, Any] = {
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

MISSING_PROPERTIES_COLLECTION: dict[str, Any] = {
    "type": "FeatureCollection",
    "features": [
        {"type": "Feature", "geometry": {"type": "Point", "coordinates": [0, 0]}},
        {"type": "Feature", "geometry": {"type": "LineString", "coordinates": [[4e6, -2e6], [8e6, 2e6]]}},
        {"type": "Feature", "geometry": {"type": "LineString", "coordinates": [[4e6, 2e6], [8e6, -2e6]]}},
        {
            "type": "Feature",
            "geometry": {"type": "Polygon", "coordinates": [[[-5e6, -1e6], [-4e6, 1e6], [-3e6, -1e6]]]},
        },
        {
            "type": "Feature",
            "geometry": {
                "type": "MultiLineString",
                "coordinates": [
                    [[-1e6, -7.5e5], [-1e6, 7.5e5]],
                    [[1e6, -7.5e5], [1e6, 7.5e5]],
                    [[-7.5e5, -1e6], [7.5e5, -1e6]],
                    [[-7.5e5, 1e6], [7.5e5, 1e6]],
                ],
            },
        },
        {
            "type": "Feature",
            "geometry": {
                "type": "MultiPolygon",
                "coordinates": [
                    [[[-5e6, 6e6], [-5e6, 8e6], [-3e6, 8e6], [-3e6, 6e6]]],
                    [[[-2e6, 6e6], [-2e6, 8e6], [0, 8e6], [0, 6e6]]],
                    [[[1e6, 6e6], [1e6, 8e6], [3e6, 8e6], [3e6, 6e6]]],
                ],
            },
        },
        {
            "type": "Feature",
            "geometry": {
                "type": "GeometryCollection",
                "geometries": [
                    {"type": "LineString", "coordinates": [[-5e6, -5e6], [0, -5e6]]},
                    {"type": "Point", "coordinates": [4e6, -5e6]},
                    {"type": "Polygon", "coordinates": [[[1e6, -6e6], [2e6, -4e6], [3e6, -6e6]]]},
                ],
            },
        },
    ],
}

GOOD_FEATURE: dict[str, Any] = {
    "type": "Feature",
    "geometry": {"type": "Point", "coordinates": [0, 0]},
    "properties": None,
}

BAD_FEATURE: dict[str, Any] = {
    "type": "Feature",
    "geometry": {"type": "Feature", "coordinates": [0, 0]},
    "properties": None,
}


class SampleCheck(NamedTuple):
    name: str
    document: Any
    validator: Validator[Any]
    should_validate: bool


SAMPLE_CHECKS = [
    SampleCheck("line collection", LINE_COLLECTION, FeatureCollectionIO, True),
    SampleCheck("missing properties collection", MISSING_PROPERTIES_COLLECTION, FeatureCollectionIO, False),
    SampleCheck("good feature", GOOD_FEATURE, FeatureIO, True),
    SampleCheck("bad feature", BAD_FEATURE, FeatureIO, False),
]


# =============================================================================
# Runner
# =============================================================================

def run_checks(checks: list[SampleCheck], settings: ValidationSettings) -> list[str]:
    """
    Validate every sample and compare the outcome with its expectation.

    Args:
        checks: Samples to validate
        settings: Settings passed through to validate()

    Returns:
        Names of the samples whose outcome did not match the expectation
    """
    failures = []
    for check in checks:
        result = validate(check.document, check.validator, settings)
        if result.is_valid == check.should_validate:
            verdict = "validates" if check.should_validate else "fails to validate"
            logger.info(f"{check.name} {verdict} as it should")
            continue

        failures.append(check.name)
        if check.should_validate:
            logger.error(f"{check.name} did not validate but it should")
            for line in format_issues(result.issues):
                logger.error(f"  {line}")
        else:
            logger.error(f"{check.name} should not validate but it did")
    return failures


def main() -> int:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    failures = run_checks(SAMPLE_CHECKS, settings)
    if failures:
        logger.error(f"{len(failures)} sample check(s) failed: {', '.join(failures)}")
        return 1
    logger.info(f"All {len(SAMPLE_CHECKS)} sample checks passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
