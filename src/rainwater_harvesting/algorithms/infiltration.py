"""
Infiltration and recharge pit sizing.
"""

import logging
from typing import Optional

from ..core import round_half_up
from ..models import Catalog, PitDesign


class PitSizer:
    """Sizes the recharge pit to hold one wet-season month of infiltration."""

    def __init__(self, catalog: Catalog, logger: Optional[logging.Logger] = None):
        self.catalog = catalog
        self.logger = logger or logging.getLogger(__name__)

    def infiltration_fraction(self, soil_type: Optional[str]) -> float:
        """Fraction of runoff soaking into the soil; unknown soils use the default soil."""
        key = str(soil_type or self.catalog.default_soil_type).strip().lower()
        if key not in self.catalog.soil_infiltration:
            key = self.catalog.default_soil_type
        return self.catalog.soil_infiltration[key]

    def size_pit(
        self,
        total_runoff_liters: float,
        soil_type: Optional[str],
        wet_months: float,
        cost_per_m3: float
    ) -> PitDesign:
        """
        Recharge pit volume and cost.

        Args:
            total_runoff_liters: Total annual runoff (L/yr)
            soil_type: Soil key (sandy, loamy, clayey)
            wet_months: Length of the wet season; rounded and clamped to >= 1
            cost_per_m3: Excavation and fill cost per m³

        Returns:
            PitDesign with volume in m³ (2 dp) and whole-currency cost
        """
        soil_key = str(soil_type or self.catalog.default_soil_type).strip().lower()
        fraction = self.infiltration_fraction(soil_key)
        infiltrated = round_half_up(total_runoff_liters * fraction)

        months = max(1, round_half_up(wet_months))
        volume = round_half_up((infiltrated / 1000) / months, 2)
        cost = round_half_up(volume * cost_per_m3)

        self.logger.debug(
            f"Pit - soil {soil_key} ({fraction}), infiltrated {infiltrated} L/yr, "
            f"{volume} m3 over {months} months, cost {cost}"
        )

        return PitDesign(
            soil_type=soil_key,
            infiltration_fraction=fraction,
            infiltrated_liters_per_year=infiltrated,
            wet_months=months,
            volume_m3=volume,
            cost_per_m3=cost_per_m3,
            cost=cost,
        )
