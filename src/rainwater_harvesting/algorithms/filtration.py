"""
Filter product selection.

Each product's rated capacity is scaled by the safety factor; the number of
units needed to serve the roof area and their total cost are compared across
the catalog.
"""

import logging
import math
from typing import Optional

from ..models import Catalog, FilterOption, FilterSelection, FilterStrategy


class FilterSelector:
    """Picks the filter product covering the roof area."""

    def __init__(
        self,
        catalog: Catalog,
        strategy: FilterStrategy = FilterStrategy.LOWEST_COST,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize filter selector.

        Args:
            catalog: Catalog with filter products
            strategy: LOWEST_COST ranks by total cost then surplus,
                      LEAST_SURPLUS ranks by surplus then total cost
            logger: Logger instance
        """
        self.catalog = catalog
        self.strategy = FilterStrategy(strategy)
        self.logger = logger or logging.getLogger(__name__)

    def candidates(self, roof_area: float, safety_factor: float):
        options = []
        for product in self.catalog.filters:
            effective = product.capacity_m2 * safety_factor
            units = math.ceil(roof_area / effective)
            options.append(FilterOption(
                id=product.id,
                name=product.name,
                capacity_m2=product.capacity_m2,
                effective_capacity_m2=round(effective, 2),
                units_required=units,
                unit_cost=product.unit_cost,
                total_cost=units * product.unit_cost,
                surplus_m2=round(units * product.capacity_m2 - roof_area, 2),
            ))
        return options

    def _rank(self, option: FilterOption):
        if self.strategy is FilterStrategy.LEAST_SURPLUS:
            return (option.surplus_m2, option.total_cost)
        return (option.total_cost, option.surplus_m2)

    def select_filter(self, roof_area: float, safety_factor: float) -> FilterSelection:
        """
        Choose the filter for a roof.

        Args:
            roof_area: Roof catchment area (m²)
            safety_factor: Multiplier applied to each product's rated capacity

        Returns:
            FilterSelection with candidates ordered by the strategy; ties keep
            catalog order

        Raises:
            ValueError: If roof_area or safety_factor is not positive
        """
        if roof_area <= 0:
            raise ValueError(f"roof_area must be positive, got {roof_area}")
        if safety_factor <= 0:
            raise ValueError(f"safety_factor must be positive, got {safety_factor}")

        ranked = tuple(sorted(self.candidates(roof_area, safety_factor), key=self._rank))
        chosen = ranked[0]

        self.logger.debug(
            f"Filter - {chosen.id} x{chosen.units_required} "
            f"(cost {chosen.total_cost}, strategy {self.strategy.value})"
        )

        return FilterSelection(
            strategy=self.strategy.value,
            safety_factor=safety_factor,
            chosen=chosen,
            candidates=ranked,
        )
