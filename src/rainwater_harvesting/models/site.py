"""
Site input models.

Contains the validated request DTO consumed by the design engine.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..core import constants
from .geometry import Polygon


@dataclass(frozen=True)
class SiteInput:
    """Validated site parameters for one design request."""

    lat: float
    lng: float
    roof_area: float  # m²
    roof_type: str
    dwellers: int
    soil_type: str = constants.DEFAULT_SOIL_TYPE
    floors: int = 0
    avg_floor_height: float = constants.DEFAULT_FLOOR_HEIGHT  # m
    velocity_override: Optional[float] = None  # m/s
    wet_months: float = constants.DEFAULT_WET_MONTHS
    filter_safety_factor: float = constants.DEFAULT_FILTER_SAFETY_FACTOR
    pit_cost_per_m3: float = constants.DEFAULT_PIT_COST_PER_M3
    include_ground: bool = False
    ground_area: float = 0.0  # m²
    ground_surfaces: Tuple[str, ...] = ()
    ground_runoff_coeff: Optional[float] = None
    roof_polygon: Optional[Polygon] = None
    ground_polygon: Optional[Polygon] = None

    def to_dict(self) -> Dict[str, Any]:
        """Normalized inputs echoed back in the response."""
        return {
            "lat": self.lat,
            "lng": self.lng,
            "roofArea": self.roof_area,
            "roofType": self.roof_type,
            "dwellers": self.dwellers,
            "soilType": self.soil_type,
            "floors": self.floors,
            "avgFloorHeight": self.avg_floor_height,
            "velocity_m_s": self.velocity_override,
            "wetMonths": self.wet_months,
            "safetyFactorFilter": self.filter_safety_factor,
            "pit_cost_per_m3": self.pit_cost_per_m3,
            "includeGround": self.include_ground,
            "groundArea": self.ground_area,
            "groundSurfaces": list(self.ground_surfaces),
            "groundRunoffCoeffClient": self.ground_runoff_coeff,
        }
