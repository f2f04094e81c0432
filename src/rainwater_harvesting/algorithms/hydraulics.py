"""
Hydraulic design of the roof conveyance pipe.

The design velocity comes from Manning's equation

    V = (1/n) · R^(2/3) · S^(1/2)

with the hydraulic radius R taken as roof area / roof perimeter when a roof
outline is known. The design flow follows the continuity equation Q = A · V and
the required diameter D = sqrt(4Q / (π·V)).

Reference:
    Chow, V.T. (1959). Open-Channel Hydraulics. McGraw-Hill, New York.
"""

import logging
import math
from typing import Optional, Tuple

from ..core import round_half_up
from ..models import Catalog, EngineSettings, HydraulicDesign, PipeOption, Polygon
from .geometry import GeometryAnalyzer


class HydraulicDesigner:
    """Sizes the conveyance pipe and picks the cheapest catalog standard."""

    def __init__(
        self,
        catalog: Catalog,
        settings: EngineSettings,
        logger: Optional[logging.Logger] = None
    ):
        self.catalog = catalog
        self.settings = settings
        self.logger = logger or logging.getLogger(__name__)

    def clamp_velocity(self, velocity: float) -> float:
        return max(self.settings.min_velocity, min(velocity, self.settings.max_velocity))

    def manning_velocity(self, hydraulic_radius: float) -> float:
        """
        Flow velocity from Manning's equation, clamped to the configured range.

        Args:
            hydraulic_radius: Hydraulic radius R (m)

        Returns:
            Velocity in m/s; the default velocity when R is not positive
        """
        if hydraulic_radius <= 0:
            return self.settings.default_velocity

        velocity = (
            (1.0 / self.settings.manning_n)
            * hydraulic_radius ** (2.0 / 3.0)
            * math.sqrt(self.settings.manning_slope)
        )
        if not math.isfinite(velocity) or velocity <= 0:
            return self.settings.default_velocity
        return self.clamp_velocity(velocity)

    def design_velocity(
        self,
        roof_polygon: Optional[Polygon] = None,
        velocity_override: Optional[float] = None
    ) -> Tuple[float, str, Optional[float]]:
        """
        Velocity used to size the pipe.

        Args:
            roof_polygon: Roof outline, used for Manning when not degenerate
            velocity_override: Caller-supplied velocity (m/s)

        Returns:
            Tuple of (velocity m/s, source, hydraulic radius or None)
        """
        if roof_polygon is not None and not roof_polygon.is_degenerate:
            area = GeometryAnalyzer.area(roof_polygon)
            perimeter = GeometryAnalyzer.perimeter(roof_polygon)
            if area > 0 and perimeter > 0:
                radius = area / perimeter
                return self.manning_velocity(radius), "manning", radius

        if velocity_override is not None and velocity_override > 0:
            return self.clamp_velocity(velocity_override), "override", None

        return self.settings.default_velocity, "default", None

    @staticmethod
    def design_flow(roof_area: float, velocity: float) -> float:
        """Continuity equation Q = A · V in m³/s."""
        return roof_area * velocity

    @staticmethod
    def diameter_from_flow(flow_m3_s: float, velocity_m_s: float) -> float:
        """
        Required pipe diameter D = sqrt(4Q / (π·V)).

        Returns:
            Diameter in meters (0 when flow or velocity is not positive)
        """
        if flow_m3_s <= 0 or velocity_m_s <= 0:
            return 0.0
        return math.sqrt((4 * flow_m3_s) / (math.pi * velocity_m_s))

    @staticmethod
    def pipe_lengths(
        roof_area: float,
        floors: int,
        avg_floor_height: float,
        roof_polygon: Optional[Polygon] = None
    ) -> Tuple[float, float, float]:
        """
        Vertical, horizontal and total conveyance length.

        The horizontal run is the roof bounding-box diagonal when the outline is
        known, otherwise sqrt(roof_area).

        Returns:
            Tuple of (vertical_m, horizontal_m, total_m), each at cm precision
        """
        vertical = round_half_up(floors * avg_floor_height, 2)

        if roof_polygon is not None and not roof_polygon.is_degenerate:
            horizontal = GeometryAnalyzer.bbox_diagonal_meters(roof_polygon)
        else:
            horizontal = math.sqrt(roof_area)
        horizontal = round_half_up(horizontal, 2)

        return vertical, horizontal, round_half_up(vertical + horizontal, 2)

    def pipe_options(self, total_length_m: float) -> Tuple[PipeOption, ...]:
        """Cost of covering the total length with each catalog pipe, in catalog order."""
        options = []
        for pipe in self.catalog.pipes:
            units = math.ceil(total_length_m / pipe.length_m)
            used_meters = units * pipe.length_m
            options.append(PipeOption(
                id=pipe.id,
                name=pipe.name,
                standard_length_m=pipe.length_m,
                units_required=units,
                used_meters=used_meters,
                unit_cost_per_meter=pipe.unit_cost_per_meter,
                total_cost=round_half_up(used_meters * pipe.unit_cost_per_meter),
                source=pipe.source,
            ))
        return tuple(options)

    @staticmethod
    def choose_pipe(options: Tuple[PipeOption, ...]) -> PipeOption:
        """Minimum total cost; min() keeps the first entry on ties (catalog order)."""
        return min(options, key=lambda option: option.total_cost)

    def design(
        self,
        roof_area: float,
        roof_polygon: Optional[Polygon] = None,
        floors: int = 0,
        avg_floor_height: float = 3.0,
        velocity_override: Optional[float] = None
    ) -> HydraulicDesign:
        """
        Full conveyance design.

        Args:
            roof_area: Roof catchment area (m²)
            roof_polygon: Optional roof outline
            floors: Number of floors the downpipe runs past
            avg_floor_height: Average floor height (m)
            velocity_override: Caller-supplied velocity (m/s)

        Returns:
            HydraulicDesign with every pipe option and the chosen one
        """
        velocity, source, radius = self.design_velocity(roof_polygon, velocity_override)
        flow = self.design_flow(roof_area, velocity)
        diameter = self.diameter_from_flow(flow, velocity)

        vertical, horizontal, total = self.pipe_lengths(
            roof_area, floors, avg_floor_height, roof_polygon
        )
        options = self.pipe_options(total)
        chosen = self.choose_pipe(options)

        full_pipe_velocity = (
            self.manning_velocity(diameter / 4.0) if diameter > 0 else self.settings.default_velocity
        )

        self.logger.debug(
            f"Hydraulics - V={velocity:.3f} m/s ({source}), Q={flow:.4f} m3/s, "
            f"D={diameter * 1000:.0f} mm, L={total} m, pipe={chosen.id}"
        )

        return HydraulicDesign(
            velocity_m_s=velocity,
            velocity_source=source,
            hydraulic_radius_m=radius,
            flow_m3_s=flow,
            diameter_m=diameter,
            diameter_mm=round_half_up(diameter * 1000),
            vertical_length_m=vertical,
            horizontal_length_m=horizontal,
            total_length_m=total,
            options=options,
            chosen_pipe=chosen,
            manning_velocity_full_pipe_m_s=full_pipe_velocity,
        )
