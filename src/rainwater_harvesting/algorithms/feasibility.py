"""
Aquifer classification, cost rollup and feasibility verdict.
"""

from typing import Optional

from ..core import constants, round_half_up
from ..models import (
    Catalog,
    ChannelDesign,
    CostBreakdown,
    EngineSettings,
    FeasibilityAssessment,
    FilterSelection,
    HydraulicDesign,
    PitDesign,
)


class AquiferClassifier:
    """Buckets annual runoff into a recommended recharge structure."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def classify(self, total_runoff_liters: float) -> str:
        """
        Recharge structure label for an annual runoff volume.

        Raises:
            ValueError: If the runoff is negative
        """
        if total_runoff_liters < 0:
            raise ValueError(f"Runoff cannot be negative: {total_runoff_liters}")

        for band in self.catalog.aquifer_bands:
            if band.contains(total_runoff_liters):
                return band.label

        # Unreachable for a validated catalog: bands partition [0, inf)
        raise ValueError(f"No aquifer band matches {total_runoff_liters} L/yr")


class FeasibilityAssessor:
    """Domestic demand coverage and installation cost."""

    def __init__(self, settings: EngineSettings):
        self.settings = settings

    def annual_need(self, dwellers: int) -> int:
        return round_half_up(dwellers * self.settings.liters_per_person_per_day * constants.DAYS_PER_YEAR)

    def assess(self, total_runoff_liters: float, dwellers: int) -> FeasibilityAssessment:
        """
        Coverage ratio and verdict.

        Feasible when the harvest covers the minimum share of domestic need or
        exceeds the absolute yearly volume, whichever fires first; the absolute
        branch applies even with zero dwellers.
        """
        need = self.annual_need(dwellers)
        coverage = total_runoff_liters / need if need > 0 else 0.0
        feasible = (
            coverage >= self.settings.min_coverage_ratio
            or total_runoff_liters >= self.settings.min_annual_runoff_liters
        )
        return FeasibilityAssessment(
            annual_need_liters=need,
            coverage_ratio=coverage,
            feasible=feasible,
        )

    @staticmethod
    def total_cost(
        hydraulics: HydraulicDesign,
        filters: FilterSelection,
        pit: PitDesign,
        channel: Optional[ChannelDesign] = None
    ) -> CostBreakdown:
        pipe_cost = hydraulics.chosen_pipe.total_cost
        filter_cost = filters.chosen.total_cost
        channel_cost = channel.cost if channel is not None else 0
        return CostBreakdown(
            pipe=pipe_cost,
            filter=filter_cost,
            pit=pit.cost,
            channel=channel_cost,
            total=round_half_up(pipe_cost + filter_cost + pit.cost + channel_cost),
        )
