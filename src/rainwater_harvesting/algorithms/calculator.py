"""
Design calculator facade for rainwater harvesting.

This module chains the geometry, runoff, hydraulic, filtration, pit, channel
and feasibility stages into a single pure calculation over a validated site
and a rainfall figure.
"""

import logging
import math
from typing import Optional

from ..core import RainfallUnavailableError
from ..models import Catalog, DesignResult, EngineSettings, SiteInput
from .runoff import RunoffEstimator
from .hydraulics import HydraulicDesigner
from .filtration import FilterSelector
from .infiltration import PitSizer
from .channel import ChannelDesigner
from .feasibility import AquiferClassifier, FeasibilityAssessor


class DesignCalculator:
    """
    High-level calculator for rainwater harvesting designs.

    This class acts as a facade over the individual stages. It holds only the
    immutable catalog and settings, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        settings: Optional[EngineSettings] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize design calculator.

        Args:
            catalog: Lookup tables (defaults to the built-in catalog)
            settings: Engine tunables (defaults to EngineSettings())
            logger: Logger instance
        """
        self.catalog = catalog or Catalog.default()
        self.settings = settings or EngineSettings()
        self.logger = logger or logging.getLogger(__name__)

        self.runoff = RunoffEstimator(self.catalog, self.logger)
        self.hydraulics = HydraulicDesigner(self.catalog, self.settings, self.logger)
        self.filters = FilterSelector(self.catalog, self.settings.filter_strategy, self.logger)
        self.pit = PitSizer(self.catalog, self.logger)
        self.channel = ChannelDesigner(self.settings, self.logger)
        self.aquifer = AquiferClassifier(self.catalog)
        self.feasibility = FeasibilityAssessor(self.settings)

    def calculate(self, site: SiteInput, rainfall_mm: float) -> DesignResult:
        """
        Run the full design pipeline.

        Args:
            site: Validated site input
            rainfall_mm: Average annual rainfall (mm/yr)

        Returns:
            DesignResult

        Raises:
            RainfallUnavailableError: If the rainfall figure is missing or not positive
        """
        if rainfall_mm is None or not math.isfinite(rainfall_mm) or rainfall_mm <= 0:
            raise RainfallUnavailableError(f"Invalid rainfall figure: {rainfall_mm}")

        self.logger.info(
            f"Design calculation parameters - "
            f"Lat: {site.lat:.4f}, Lng: {site.lng:.4f}, "
            f"Roof: {site.roof_area:.1f} m2 ({site.roof_type}), "
            f"Ground: {site.ground_area if site.include_ground else 0:.1f} m2, "
            f"Rainfall: {rainfall_mm:.0f} mm/yr, "
            f"Dwellers: {site.dwellers}, Soil: {site.soil_type}"
        )

        runoff = self.runoff.estimate(
            roof_area=site.roof_area,
            roof_type=site.roof_type,
            rainfall_mm=rainfall_mm,
            include_ground=site.include_ground,
            ground_area=site.ground_area,
            ground_surfaces=site.ground_surfaces,
            ground_override=site.ground_runoff_coeff,
        )
        total_runoff = runoff.total_liters_per_year

        hydraulics = self.hydraulics.design(
            roof_area=site.roof_area,
            roof_polygon=site.roof_polygon,
            floors=site.floors,
            avg_floor_height=site.avg_floor_height,
            velocity_override=site.velocity_override,
        )

        filters = self.filters.select_filter(site.roof_area, site.filter_safety_factor)

        pit = self.pit.size_pit(
            total_runoff_liters=total_runoff,
            soil_type=site.soil_type,
            wet_months=site.wet_months,
            cost_per_m3=site.pit_cost_per_m3,
        )

        channel = None
        if site.include_ground:
            channel = self.channel.design_channel(
                ground_polygon=site.ground_polygon,
                ground_area=site.ground_area,
                roof_polygon=site.roof_polygon,
            )

        aquifer_type = self.aquifer.classify(total_runoff)
        costs = self.feasibility.total_cost(hydraulics, filters, pit, channel)
        feasibility = self.feasibility.assess(total_runoff, site.dwellers)

        self.logger.info(
            f"Design result - runoff {total_runoff} L/yr, aquifer '{aquifer_type}', "
            f"cost {costs.total}, coverage {feasibility.coverage_ratio:.3f}, "
            f"feasible: {feasibility.feasible}"
        )

        return DesignResult(
            site=site,
            rainfall_mm=rainfall_mm,
            runoff=runoff,
            hydraulics=hydraulics,
            filters=filters,
            pit=pit,
            channel=channel,
            aquifer_type=aquifer_type,
            costs=costs,
            feasibility=feasibility,
        )
