"""
Tests for request validation.
"""

import pytest

from src.rainwater_harvesting.core import ValidationError
from src.rainwater_harvesting.processing import SiteInputValidator


@pytest.fixture
def validator():
    return SiteInputValidator()


class TestSiteInputValidator:
    """Test cases for SiteInputValidator."""

    def test_minimal_payload(self, validator, base_payload):
        site = validator.parse(base_payload)

        assert site.lat == 18.5204
        assert site.roof_area == 100
        assert site.roof_type == "concrete"
        assert site.dwellers == 4
        assert site.soil_type == "loamy"
        assert site.floors == 0
        assert site.avg_floor_height == 3.0
        assert site.wet_months == 4
        assert site.filter_safety_factor == 0.8
        assert site.pit_cost_per_m3 == 800
        assert site.include_ground is False
        assert site.velocity_override is None
        assert site.roof_polygon is None

    def test_configured_defaults(self, base_payload):
        validator = SiteInputValidator(avg_floor_height=3.5, wet_months=6, filter_safety_factor=0.9)
        site = validator.parse(base_payload)
        assert site.avg_floor_height == 3.5
        assert site.wet_months == 6
        assert site.filter_safety_factor == 0.9

    def test_numeric_strings_accepted(self, validator, base_payload):
        base_payload.update({"roofArea": "120.5", "dwellers": "3", "floors": "2"})
        site = validator.parse(base_payload)
        assert site.roof_area == 120.5
        assert site.dwellers == 3
        assert site.floors == 2

    def test_missing_fields_all_reported(self, validator):
        with pytest.raises(ValidationError) as exc_info:
            validator.parse({"lat": 18.5})

        errors = exc_info.value.errors
        assert any("lng" in e for e in errors)
        assert any("roofArea" in e for e in errors)
        assert any("roofType" in e for e in errors)
        assert any("dwellers" in e for e in errors)
        assert str(exc_info.value).startswith("Missing or invalid fields")

    @pytest.mark.parametrize("field,value", [
        ("lat", 91),
        ("lng", -181),
        ("lat", "north"),
        ("roofArea", 0),
        ("roofArea", -10),
        ("roofArea", float("inf")),
        ("roofArea", float("nan")),
        ("roofArea", True),
        ("dwellers", -1),
        ("dwellers", 2.5),
        ("floors", -2),
        ("avgFloorHeight", 0),
        ("velocity_m_s", 0),
        ("wetMonths", -1),
        ("safetyFactorFilter", 0),
        ("pit_cost_per_m3", -100),
        ("roofType", ""),
        ("roofType", 5),
        ("includeGround", "maybe"),
    ])
    def test_invalid_values_rejected(self, validator, base_payload, field, value):
        base_payload[field] = value
        with pytest.raises(ValidationError) as exc_info:
            validator.parse(base_payload)
        assert any(field in e for e in exc_info.value.errors)

    @pytest.mark.parametrize("payload", [None, [], "text", 42])
    def test_non_object_body(self, validator, payload):
        with pytest.raises(ValidationError) as exc_info:
            validator.parse(payload)
        assert exc_info.value.errors == ["Request body must be a JSON object"]

    def test_validation_error_is_value_error(self, validator):
        with pytest.raises(ValueError):
            validator.parse({})

    def test_zero_dwellers_allowed(self, validator, base_payload):
        base_payload["dwellers"] = 0
        assert validator.parse(base_payload).dwellers == 0

    def test_soil_type_normalized(self, validator, base_payload):
        base_payload["soilType"] = " Sandy "
        assert validator.parse(base_payload).soil_type == "sandy"


class TestGroundCatchment:
    """Test cases for the ground catchment fields."""

    def test_ground_requires_area(self, validator, base_payload):
        base_payload["includeGround"] = True
        with pytest.raises(ValidationError) as exc_info:
            validator.parse(base_payload)
        assert any("groundArea" in e for e in exc_info.value.errors)

    def test_ground_fields_parsed(self, validator, base_payload):
        base_payload.update({
            "includeGround": "true",
            "groundArea": 200,
            "groundSurfaces": ["Asphalt", "parks"],
            "groundRunoffCoeffClient": 0.4,
        })
        site = validator.parse(base_payload)
        assert site.include_ground is True
        assert site.ground_area == 200
        assert site.ground_surfaces == ("asphalt", "parks")
        assert site.ground_runoff_coeff == 0.4

    def test_ground_requires_surfaces(self, validator, base_payload):
        base_payload.update({"includeGround": True, "groundArea": 50})
        with pytest.raises(ValidationError) as exc_info:
            validator.parse(base_payload)
        assert "Missing required field: groundSurfaces" in exc_info.value.errors

    def test_client_coefficient_replaces_surfaces(self, validator, base_payload):
        base_payload.update({"includeGround": True, "groundArea": 50, "groundRunoffCoeffClient": 0.55})
        site = validator.parse(base_payload)
        assert site.ground_surfaces == ()
        assert site.ground_runoff_coeff == 0.55

    def test_empty_surfaces_accepted(self, validator, base_payload):
        base_payload.update({"includeGround": True, "groundArea": 50, "groundSurfaces": []})
        site = validator.parse(base_payload)
        assert site.ground_surfaces == ()
        assert site.ground_runoff_coeff is None

    def test_unknown_surface_rejected(self, validator, base_payload):
        base_payload.update({"includeGround": True, "groundArea": 50, "groundSurfaces": ["lava"]})
        with pytest.raises(ValidationError) as exc_info:
            validator.parse(base_payload)
        assert any("lava" in e for e in exc_info.value.errors)

    def test_coefficient_out_of_range(self, validator, base_payload):
        base_payload.update({"includeGround": 1, "groundArea": 50, "groundRunoffCoeffClient": 1.5})
        with pytest.raises(ValidationError):
            validator.parse(base_payload)

    def test_ground_fields_ignored_when_excluded(self, validator, base_payload):
        base_payload.update({
            "includeGround": False,
            "groundArea": -5,
            "groundSurfaces": ["lava"],
            "groundPolygon": [[0, 0], [0, 1], [1, 1]],
        })
        site = validator.parse(base_payload)
        assert site.include_ground is False
        assert site.ground_area == 0
        assert site.ground_polygon is None


class TestPolygonParsing:
    """Test cases for roof and ground outlines."""

    def test_object_and_pair_vertices(self, validator, base_payload):
        base_payload["roofPolygon"] = [
            {"lat": 18.52, "lng": 73.85},
            [18.52, 73.851],
            {"lat": 18.521, "lon": 73.851},
        ]
        site = validator.parse(base_payload)
        assert site.roof_polygon.vertices == (
            (18.52, 73.85), (18.52, 73.851), (18.521, 73.851)
        )
        assert not site.roof_polygon.is_degenerate

    def test_degenerate_polygon_kept_with_warning(self, validator, base_payload, caplog):
        base_payload["roofPolygon"] = [[18.52, 73.85], [18.52, 73.85], [18.53, 73.85]]
        site = validator.parse(base_payload)
        assert site.roof_polygon.is_degenerate
        assert "fewer than 3 distinct vertices" in caplog.text

    @pytest.mark.parametrize("polygon", [
        "not-a-list",
        [[18.5]],
        [{"lat": "x", "lng": 73.8}, [18.5, 73.8], [18.6, 73.9]],
        [[95, 73.8], [18.5, 73.8], [18.6, 73.9]],
        [[float("nan"), 73.8], [18.5, 73.8], [18.6, 73.9]],
    ])
    def test_malformed_polygon_rejected(self, validator, base_payload, polygon):
        base_payload["roofPolygon"] = polygon
        with pytest.raises(ValidationError) as exc_info:
            validator.parse(base_payload)
        assert any("roofPolygon" in e for e in exc_info.value.errors)
