"""
Runoff estimation for roof and ground catchments.

Annual yield (L/yr) = area (m²) × rainfall (mm/yr) × runoff coefficient.
The mm→m (/1000) and m³→L (×1000) conversions cancel out.
"""

import logging
from typing import Iterable, Optional

from ..core import round_half_up
from ..models import Catalog, RunoffEstimate


class RunoffEstimator:
    """Converts catchment areas and rainfall into annual yield."""

    def __init__(self, catalog: Catalog, logger: Optional[logging.Logger] = None):
        """
        Initialize runoff estimator.

        Args:
            catalog: Catalog with roof coefficients and ground impermeability table
            logger: Logger instance
        """
        self.catalog = catalog
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def estimate_runoff(area_m2: float, rainfall_mm: float, coefficient: float) -> int:
        """
        Annual runoff for one surface.

        Args:
            area_m2: Catchment area (m²)
            rainfall_mm: Average annual rainfall (mm/yr)
            coefficient: Runoff coefficient (0-1)

        Returns:
            Liters per year, rounded to whole liters
        """
        return round_half_up(area_m2 * rainfall_mm * coefficient)

    def roof_coefficient(self, roof_type: str) -> float:
        """Runoff coefficient for a roof type (case-insensitive, default for unknown types)."""
        return self.catalog.roof_coefficients.get(
            str(roof_type).strip().lower(), self.catalog.default_roof_coefficient
        )

    def ground_coefficient(
        self,
        surfaces: Iterable[str] = (),
        override: Optional[float] = None
    ) -> float:
        """
        Runoff coefficient for the ground catchment.

        Args:
            surfaces: Selected ground surface keys
            override: Client-supplied coefficient, preferred when given

        Returns:
            Override, else mean impermeability midpoint of known surfaces,
            else the catalog default
        """
        if override is not None:
            return override

        values = [
            self.catalog.ground_impermeability[key.lower()]
            for key in surfaces
            if key.lower() in self.catalog.ground_impermeability
        ]
        if values:
            return sum(values) / len(values)

        return self.catalog.default_ground_coefficient

    def estimate(
        self,
        roof_area: float,
        roof_type: str,
        rainfall_mm: float,
        include_ground: bool = False,
        ground_area: float = 0.0,
        ground_surfaces: Iterable[str] = (),
        ground_override: Optional[float] = None
    ) -> RunoffEstimate:
        """
        Roof, ground and total annual runoff.

        Returns:
            RunoffEstimate with ground fields zeroed when no ground catchment is included
        """
        roof_coeff = self.roof_coefficient(roof_type)
        roof_liters = self.estimate_runoff(roof_area, rainfall_mm, roof_coeff)

        ground_coeff = None
        ground_liters = 0
        if include_ground:
            ground_coeff = self.ground_coefficient(ground_surfaces, ground_override)
            ground_liters = self.estimate_runoff(ground_area, rainfall_mm, ground_coeff)

        self.logger.debug(
            f"Runoff - roof: {roof_liters} L/yr (c={roof_coeff}), "
            f"ground: {ground_liters} L/yr (c={ground_coeff})"
        )

        return RunoffEstimate(
            rainfall_mm=rainfall_mm,
            roof_coefficient=roof_coeff,
            ground_coefficient=ground_coeff,
            roof_liters_per_year=roof_liters,
            ground_liters_per_year=ground_liters,
            total_liters_per_year=roof_liters + ground_liters,
        )
