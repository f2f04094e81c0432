"""
Engine settings models.

Contains tunable constants for the hydraulic, cost and feasibility stages.
"""

from dataclasses import dataclass
from enum import Enum

from ..core import constants


class FilterStrategy(str, Enum):
    """Primary criterion when choosing a filter product."""

    LOWEST_COST = "lowest_cost"
    LEAST_SURPLUS = "least_surplus"


@dataclass(frozen=True)
class EngineSettings:
    """Per-deployment tunables; immutable once the engine is built."""

    manning_n: float = constants.MANNING_ROUGHNESS
    manning_slope: float = constants.MANNING_SLOPE
    default_velocity: float = constants.DEFAULT_VELOCITY  # m/s
    min_velocity: float = constants.MIN_VELOCITY  # m/s
    max_velocity: float = constants.MAX_VELOCITY  # m/s

    channel_cost_per_m: float = constants.CHANNEL_COST_PER_M
    channel_end_block_cost: float = constants.CHANNEL_END_BLOCK_COST
    steel_grill_cost_per_m: float = constants.STEEL_GRILL_COST_PER_M

    liters_per_person_per_day: float = constants.LITERS_PER_PERSON_PER_DAY
    min_coverage_ratio: float = constants.MIN_COVERAGE_RATIO
    min_annual_runoff_liters: float = constants.MIN_ANNUAL_RUNOFF_LITERS

    filter_strategy: FilterStrategy = FilterStrategy.LOWEST_COST

    def __post_init__(self):
        if self.manning_n <= 0:
            raise ValueError("manning_n must be positive")
        if self.manning_slope <= 0:
            raise ValueError("manning_slope must be positive")
        if not (0 < self.min_velocity <= self.max_velocity):
            raise ValueError("Velocity range must satisfy 0 < min_velocity <= max_velocity")
        if not (self.min_velocity <= self.default_velocity <= self.max_velocity):
            raise ValueError("default_velocity must lie within the velocity range")
        if not isinstance(self.filter_strategy, FilterStrategy):
            object.__setattr__(self, "filter_strategy", FilterStrategy(self.filter_strategy))
