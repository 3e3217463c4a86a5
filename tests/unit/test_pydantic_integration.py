"""
Unit tests for using validators inside pydantic models.
"""

from typing import Annotated, Any

import pytest
from pydantic import BaseModel, TypeAdapter, ValidationError

from geojson_io import FeatureIO, GeometryObjectIO, PointIO


class Upload(BaseModel):
    name: str
    geometry: Annotated[Any, GeometryObjectIO]


class TestPydanticIntegration:
    """Test validators as Annotated metadata."""

    def test_model_accepts_valid_geometry(self, polygon_dict):
        """Test that the geometry is stored as given."""
        upload = Upload(name="parcel", geometry=polygon_dict)
        assert upload.geometry is polygon_dict

    def test_model_rejects_invalid_geometry(self):
        """Test that issues surface as pydantic errors."""
        with pytest.raises(ValidationError) as exc_info:
            Upload(name="parcel", geometry={"type": "Polygon", "coordinates": [[]]})

        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["type"] == "geojson_invalid"
        assert errors[0]["loc"] == ("geometry",)
        assert "GeometryObjectIO" in errors[0]["msg"]
        assert "coordinates/0" in errors[0]["msg"]

    def test_type_adapter(self, good_feature_dict, bad_feature_dict):
        """Test a standalone TypeAdapter."""
        adapter = TypeAdapter(Annotated[Any, FeatureIO])
        assert adapter.validate_python(good_feature_dict) is good_feature_dict

        with pytest.raises(ValidationError, match="FeatureIO"):
            adapter.validate_python(bad_feature_dict)

    def test_no_coercion_through_pydantic(self):
        """Test that pydantic does not coerce numeric strings first."""
        adapter = TypeAdapter(Annotated[Any, PointIO])
        with pytest.raises(ValidationError):
            adapter.validate_python({"type": "Point", "coordinates": ["1", "2"]})
