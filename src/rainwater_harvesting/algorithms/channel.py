"""
Surface channel design for the ground catchment.
"""

import logging
import math
from typing import Optional

from ..core import round_half_up
from ..models import ChannelDesign, EngineSettings, Polygon
from .geometry import GeometryAnalyzer


class ChannelDesigner:
    """Derives the open channel run and its construction cost."""

    def __init__(self, settings: EngineSettings, logger: Optional[logging.Logger] = None):
        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)

    def channel_cost(self, length_m: float) -> int:
        """Lining per meter + outlet end block + steel grill per meter."""
        return round_half_up(
            length_m * self.settings.channel_cost_per_m
            + self.settings.channel_end_block_cost
            + length_m * self.settings.steel_grill_cost_per_m
        )

    def design_channel(
        self,
        ground_polygon: Optional[Polygon],
        ground_area: float,
        roof_polygon: Optional[Polygon] = None
    ) -> ChannelDesign:
        """
        Channel length and cost.

        With a usable ground outline the length is the longest of the
        bounding-box width, height and sqrt(ground_area); otherwise
        sqrt(ground_area).

        Args:
            ground_polygon: Ground catchment outline
            ground_area: Ground catchment area (m²)
            roof_polygon: Roof outline, used to report the roof-to-ground distance

        Returns:
            ChannelDesign
        """
        side = math.sqrt(max(ground_area, 0.0))
        roof_to_ground = None

        if ground_polygon is not None and not ground_polygon.is_degenerate:
            dims = GeometryAnalyzer.bbox_dims_meters(ground_polygon)
            length = max(dims["width_m"], dims["height_m"], side)
            method = "polygon"

            if roof_polygon is not None and not roof_polygon.is_degenerate:
                roof_to_ground = round_half_up(
                    GeometryAnalyzer.haversine_meters(
                        GeometryAnalyzer.centroid(roof_polygon),
                        GeometryAnalyzer.centroid(ground_polygon),
                    ),
                    2,
                )
        else:
            length = side
            method = "area"

        length = round_half_up(length, 2)
        cost = self.channel_cost(length)
        self.logger.debug(f"Channel - {length} m via {method}, cost {cost}")

        return ChannelDesign(
            length_m=length,
            cost=cost,
            method=method,
            roof_to_ground_m=roof_to_ground,
        )
