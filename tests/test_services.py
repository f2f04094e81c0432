"""
Tests for the design service orchestration.
"""

import json
from unittest.mock import Mock

import pytest

from src.rainwater_harvesting.api import OpenMeteoRainfallAPI, StaticRainfallProvider
from src.rainwater_harvesting.core import Config, RainfallUnavailableError, ValidationError
from src.rainwater_harvesting.services import DesignService


class TestDesignService:
    """Test cases for DesignService."""

    def setup_method(self):
        self.provider = Mock()
        self.provider.get_average_annual_rainfall.return_value = 800.0
        self.service = DesignService(rainfall_provider=self.provider, logger=Mock())

    def test_run(self, base_payload):
        result = self.service.run(base_payload)

        self.provider.get_average_annual_rainfall.assert_called_once_with(18.5204, 73.8567)
        assert result.rainfall_mm == 800.0
        assert result.runoff.total_liters_per_year == 48000
        assert result.costs.total == 11840

    def test_validation_happens_before_rainfall_lookup(self):
        with pytest.raises(ValidationError):
            self.service.run({"lat": 18.5})
        self.provider.get_average_annual_rainfall.assert_not_called()

    def test_rainfall_unavailable_propagates(self, base_payload):
        self.provider.get_average_annual_rainfall.side_effect = RainfallUnavailableError("none")
        with pytest.raises(RainfallUnavailableError):
            self.service.run(base_payload)

    def test_static_provider(self, base_payload):
        service = DesignService(rainfall_provider=StaticRainfallProvider(500.0))
        base_payload.update({"roofArea": 50, "roofType": "metal", "dwellers": 10})
        assert service.run(base_payload).runoff.total_liters_per_year == 22500


class TestDesignServiceFromConfig:
    """Test cases for building the service from configuration."""

    def write_config(self, tmp_path, **sections):
        data = {
            "rainfall": {"base_url": "https://archive.example.test/v1", "timeout": 5},
            "defaults": {"wet_months": 2, "filter_safety_factor": 1.0},
            "selection": {"filter_strategy": "least_surplus"},
            "catalog": {},
        }
        data.update(sections)
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data))
        return Config(str(path))

    def test_default_provider_is_archive(self, tmp_path):
        service = DesignService.from_config(self.write_config(tmp_path))
        provider = service.rainfall_provider

        assert isinstance(provider, OpenMeteoRainfallAPI)
        assert provider.base_url == "https://archive.example.test/v1"
        assert provider.timeout == 5

    def test_configured_defaults_and_strategy(self, tmp_path, base_payload):
        service = DesignService.from_config(
            self.write_config(tmp_path), rainfall_provider=StaticRainfallProvider(800.0)
        )
        base_payload["roofArea"] = 70
        result = service.run(base_payload)

        assert result.site.wet_months == 2
        assert result.filters.strategy == "least_surplus"
        assert result.filters.chosen.id == "RAINY_FL80"

    def test_catalog_override(self, tmp_path, base_payload):
        config = self.write_config(tmp_path, catalog={
            "roof_coefficients": {"concrete": 0.5, "tile": 0.7},
        })
        service = DesignService.from_config(config, rainfall_provider=StaticRainfallProvider(800.0))
        base_payload["roofType"] = "tile"
        assert service.run(base_payload).runoff.roof_coefficient == 0.7
