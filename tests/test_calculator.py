"""
Tests for the design calculator facade.
"""

import math

import pytest

from src.rainwater_harvesting.algorithms import DesignCalculator
from src.rainwater_harvesting.core import RainfallUnavailableError
from src.rainwater_harvesting.models import EngineSettings, FilterStrategy, SiteInput
from conftest import rectangle


@pytest.fixture
def calculator():
    return DesignCalculator()


def make_site(**overrides):
    fields = dict(lat=18.5204, lng=73.8567, roof_area=100, roof_type="concrete", dwellers=4)
    fields.update(overrides)
    return SiteInput(**fields)


class TestDesignCalculator:
    """Test cases for the full pipeline."""

    def test_concrete_roof_scenario(self, calculator):
        result = calculator.calculate(make_site(), 800)

        assert result.runoff.total_liters_per_year == 48000
        assert result.feasibility.annual_need_liters == 124100
        assert round(result.feasibility.coverage_ratio, 3) == 0.387
        assert result.feasibility.feasible
        assert result.aquifer_type == "Dug Well / Small Pit"

        assert result.hydraulics.velocity_m_s == 2.5
        assert result.hydraulics.velocity_source == "default"
        assert result.hydraulics.diameter_mm == round(math.sqrt(400 / math.pi) * 1000)
        assert result.hydraulics.total_length_m == 10.0
        assert result.hydraulics.chosen_pipe.id == "HDPE_6m"

        assert result.filters.chosen.id == "NEERAIN_BASIC"
        assert result.pit.volume_m3 == 5.7
        assert result.pit.cost == 4560
        assert result.channel is None

        assert result.costs.pipe == 780
        assert result.costs.filter == 6500
        assert result.costs.channel == 0
        assert result.costs.total == 780 + 6500 + 4560

    def test_metal_roof_feasible_by_volume(self, calculator):
        result = calculator.calculate(
            make_site(roof_area=50, roof_type="metal", dwellers=10), 500
        )
        assert result.runoff.total_liters_per_year == 22500
        assert result.feasibility.coverage_ratio < 0.25
        assert result.feasibility.feasible

    def test_small_roof_infeasible(self, calculator):
        result = calculator.calculate(
            make_site(roof_area=10, roof_type="concrete", dwellers=6), 300
        )
        assert result.runoff.total_liters_per_year == 1800
        assert not result.feasibility.feasible

    def test_total_cost_is_sum_of_parts(self, calculator):
        site = make_site(
            floors=3,
            include_ground=True,
            ground_area=150,
            ground_surfaces=("gravel",),
            ground_polygon=rectangle(20, 10),
        )
        result = calculator.calculate(site, 1100)
        costs = result.costs
        assert costs.total == costs.pipe + costs.filter + costs.pit + costs.channel
        assert costs.channel == result.channel.cost

    def test_ground_catchment(self, calculator):
        site = make_site(
            include_ground=True,
            ground_area=200,
            ground_surfaces=("asphalt", "parks"),
            ground_polygon=rectangle(20, 10),
        )
        result = calculator.calculate(site, 800)

        assert result.runoff.ground_liters_per_year == 82000
        assert result.runoff.total_liters_per_year == 130000
        assert result.aquifer_type == "Percolation Pit / Tank"
        assert result.channel.method == "polygon"
        # 20 m bounding-box width beats sqrt(200)
        assert result.channel.length_m == pytest.approx(20.0, abs=0.01)

    def test_roof_polygon_drives_velocity(self, calculator):
        result = calculator.calculate(make_site(roof_polygon=rectangle(10, 10)), 800)
        assert result.hydraulics.velocity_source == "manning"
        assert result.hydraulics.velocity_m_s == 10.0
        assert result.hydraulics.horizontal_length_m == pytest.approx(14.14, abs=0.02)

    def test_degenerate_polygon_is_ignored(self, calculator):
        line = rectangle(10, 0)
        result = calculator.calculate(
            make_site(roof_polygon=line, velocity_override=1.5), 800
        )
        assert result.hydraulics.velocity_source == "override"
        assert result.hydraulics.velocity_m_s == 1.5
        assert result.hydraulics.horizontal_length_m == 10.0

    def test_idempotent(self, calculator):
        site = make_site(include_ground=True, ground_area=80, ground_surfaces=("macadam",))
        assert calculator.calculate(site, 950).to_dict() == calculator.calculate(site, 950).to_dict()

    @pytest.mark.parametrize("rainfall", [0, -5, None, float("nan")])
    def test_invalid_rainfall(self, calculator, rainfall):
        with pytest.raises(RainfallUnavailableError):
            calculator.calculate(make_site(), rainfall)

    def test_least_surplus_strategy(self):
        calculator = DesignCalculator(
            settings=EngineSettings(filter_strategy=FilterStrategy.LEAST_SURPLUS)
        )
        result = calculator.calculate(make_site(roof_area=70, filter_safety_factor=1.0), 800)
        assert result.filters.strategy == "least_surplus"
        assert result.filters.chosen.id == "RAINY_FL80"


class TestDesignResultSerialization:
    """Test cases for the response body."""

    def test_response_sections(self, calculator):
        body = calculator.calculate(make_site(), 800).to_dict()

        assert body["success"] is True
        assert body["rainfall_mm"] == 800
        assert body["runoff_liters_per_year"] == 48000
        assert body["runoff_ground_liters_per_year"] == 0
        assert body["coefficients"] == {"roof": 0.6, "ground": None}
        assert body["annualNeed"] == 124100
        assert body["coverageRatio"] == 0.387
        assert body["feasibility"] is True
        assert body["aquifer"] == {"type": "Dug Well / Small Pit"}

        assert body["flow"]["velocity_source"] == "default"
        assert body["pipe"]["chosen_option"]["id"] == "HDPE_6m"
        assert len(body["pipe"]["options"]) == 4
        assert body["filters"]["chosen"]["id"] == "NEERAIN_BASIC"
        assert body["pit"]["pit_volume_m3"] == 5.7
        assert body["channel"]["channel_length_m"] is None
        assert body["channel"]["channel_cost"] == 0
        assert body["costs"]["total_estimated_installation_cost"] == 11840

    def test_inputs_echoed(self, calculator):
        body = calculator.calculate(make_site(floors=2), 800).to_dict()
        assert body["inputs"]["roofArea"] == 100
        assert body["inputs"]["floors"] == 2
        assert body["inputs"]["soilType"] == "loamy"
        assert body["inputs"]["includeGround"] is False
