"""
Design result models.

Contains DTOs produced by each stage of the design pipeline and the
aggregated result returned to callers.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Tuple

from .site import SiteInput


@dataclass(frozen=True)
class RunoffEstimate:
    """Annual runoff yield split by catchment."""

    rainfall_mm: float
    roof_coefficient: float
    ground_coefficient: Optional[float]
    roof_liters_per_year: int
    ground_liters_per_year: int
    total_liters_per_year: int


@dataclass(frozen=True)
class PipeOption:
    """Cost of covering the conveyance length with one catalog pipe."""

    id: str
    name: str
    standard_length_m: float
    units_required: int
    used_meters: float
    unit_cost_per_meter: float
    total_cost: int
    source: Optional[str] = None


@dataclass(frozen=True)
class HydraulicDesign:
    """Conveyance pipe sizing and selection."""

    velocity_m_s: float
    velocity_source: str  # "manning", "override" or "default"
    hydraulic_radius_m: Optional[float]
    flow_m3_s: float
    diameter_m: float
    diameter_mm: int
    vertical_length_m: float
    horizontal_length_m: float
    total_length_m: float
    options: Tuple[PipeOption, ...]
    chosen_pipe: PipeOption
    manning_velocity_full_pipe_m_s: float


@dataclass(frozen=True)
class FilterOption:
    """Units and cost of one filter product for the roof area."""

    id: str
    name: str
    capacity_m2: float
    effective_capacity_m2: float
    units_required: int
    unit_cost: float
    total_cost: float
    surplus_m2: float


@dataclass(frozen=True)
class FilterSelection:
    strategy: str
    safety_factor: float
    chosen: FilterOption
    candidates: Tuple[FilterOption, ...]


@dataclass(frozen=True)
class PitDesign:
    """Recharge pit sized for the wet season."""

    soil_type: str
    infiltration_fraction: float
    infiltrated_liters_per_year: int
    wet_months: int
    volume_m3: float
    cost_per_m3: float
    cost: int


@dataclass(frozen=True)
class ChannelDesign:
    """Surface channel draining the ground catchment."""

    length_m: float
    cost: int
    method: str  # "polygon" or "area"
    roof_to_ground_m: Optional[float] = None


@dataclass(frozen=True)
class CostBreakdown:
    pipe: float
    filter: float
    pit: float
    channel: float
    total: int


@dataclass(frozen=True)
class FeasibilityAssessment:
    annual_need_liters: int
    coverage_ratio: float
    feasible: bool


@dataclass(frozen=True)
class DesignResult:
    """Complete feasibility and design outcome for one site."""

    site: SiteInput
    rainfall_mm: float
    runoff: RunoffEstimate
    hydraulics: HydraulicDesign
    filters: FilterSelection
    pit: PitDesign
    channel: Optional[ChannelDesign]
    aquifer_type: str
    costs: CostBreakdown
    feasibility: FeasibilityAssessment

    def to_dict(self) -> Dict[str, Any]:
        """
        Render the JSON response body.

        Returns:
            Dictionary with the same sections for every request; channel
            fields are null when no ground catchment was included.
        """
        hydraulics = self.hydraulics
        channel = self.channel

        return {
            "success": True,
            "inputs": self.site.to_dict(),
            "rainfall_mm": self.rainfall_mm,
            "runoff_roof_liters_per_year": self.runoff.roof_liters_per_year,
            "runoff_ground_liters_per_year": self.runoff.ground_liters_per_year,
            "runoff_liters_per_year": self.runoff.total_liters_per_year,
            "coefficients": {
                "roof": self.runoff.roof_coefficient,
                "ground": self.runoff.ground_coefficient,
            },
            "infiltrationFraction": self.pit.infiltration_fraction,
            "infiltrated_liters_per_year": self.pit.infiltrated_liters_per_year,
            "annualNeed": self.feasibility.annual_need_liters,
            "coverageRatio": round(self.feasibility.coverage_ratio, 3),
            "flow": {
                "Q_m3_s": round(hydraulics.flow_m3_s, 6),
                "used_velocity_m_s": round(hydraulics.velocity_m_s, 3),
                "velocity_source": hydraulics.velocity_source,
                "hydraulic_radius_m": (
                    round(hydraulics.hydraulic_radius_m, 4)
                    if hydraulics.hydraulic_radius_m is not None else None
                ),
                "velocity_manning": round(hydraulics.manning_velocity_full_pipe_m_s, 3),
            },
            "pipe": {
                "calculated_diameter_mm": hydraulics.diameter_mm,
                "calculated_diameter_m": round(hydraulics.diameter_m, 4),
                "vertical_length_m": hydraulics.vertical_length_m,
                "horizontal_length_m": hydraulics.horizontal_length_m,
                "total_pipe_length_m": hydraulics.total_length_m,
                "options": [asdict(option) for option in hydraulics.options],
                "chosen_option": asdict(hydraulics.chosen_pipe),
            },
            "filters": {
                "strategy": self.filters.strategy,
                "safety_factor": self.filters.safety_factor,
                "candidates": [asdict(option) for option in self.filters.candidates],
                "chosen": asdict(self.filters.chosen),
            },
            "pit": {
                "soil_type": self.pit.soil_type,
                "wet_months": self.pit.wet_months,
                "pit_volume_m3": self.pit.volume_m3,
                "pit_cost_estimate": self.pit.cost,
            },
            "channel": {
                "channel_length_m": channel.length_m if channel else None,
                "channel_cost": channel.cost if channel else 0,
                "method": channel.method if channel else None,
                "roof_to_ground_m": channel.roof_to_ground_m if channel else None,
            },
            "aquifer": {"type": self.aquifer_type},
            "costs": {
                "chosen_pipe_cost": self.costs.pipe,
                "chosen_filter_cost": self.costs.filter,
                "pit_cost": self.costs.pit,
                "channel_cost": self.costs.channel,
                "total_estimated_installation_cost": self.costs.total,
            },
            "feasibility": self.feasibility.feasible,
        }
