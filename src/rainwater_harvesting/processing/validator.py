"""
Request validation module.

Parses JSON-like calculation requests into SiteInput objects, collecting
every problem before rejecting the request.
"""

import logging
import math
from typing import Any, Dict, List, Optional, Tuple

from ..core import constants, ValidationError
from ..models import Catalog, Polygon, SiteInput

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off", ""}


class SiteInputValidator:
    """Validate and normalize calculation requests."""

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        avg_floor_height: float = constants.DEFAULT_FLOOR_HEIGHT,
        wet_months: float = constants.DEFAULT_WET_MONTHS,
        filter_safety_factor: float = constants.DEFAULT_FILTER_SAFETY_FACTOR,
        pit_cost_per_m3: float = constants.DEFAULT_PIT_COST_PER_M3,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize validator.

        Args:
            catalog: Catalog used to check ground surface keys
            avg_floor_height: Default when the request omits avgFloorHeight
            wet_months: Default when the request omits wetMonths
            filter_safety_factor: Default when the request omits safetyFactorFilter
            pit_cost_per_m3: Default when the request omits pit_cost_per_m3
            logger: Logger instance
        """
        self.catalog = catalog or Catalog.default()
        self.defaults = {
            "avgFloorHeight": avg_floor_height,
            "wetMonths": wet_months,
            "safetyFactorFilter": filter_safety_factor,
            "pit_cost_per_m3": pit_cost_per_m3,
        }
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def _to_float(value: Any) -> Optional[float]:
        """Finite float from a number or numeric string, else None."""
        if isinstance(value, bool) or value is None:
            return None
        try:
            number = float(value)
        except (TypeError, ValueError):
            return None
        return number if math.isfinite(number) else None

    def _number(
        self,
        payload: Dict[str, Any],
        field: str,
        errors: List[str],
        required: bool = False,
        default: Optional[float] = None,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        exclusive_minimum: bool = False
    ) -> Optional[float]:
        raw = payload.get(field)
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            if required:
                errors.append(f"Missing required field: {field}")
            return default

        number = self._to_float(raw)
        if number is None:
            errors.append(f"Invalid {field}: {raw!r} (must be a finite number)")
            return default

        if minimum is not None:
            if exclusive_minimum and number <= minimum:
                errors.append(f"Invalid {field}: {number} (must be > {minimum})")
            elif not exclusive_minimum and number < minimum:
                errors.append(f"Invalid {field}: {number} (must be >= {minimum})")
        if maximum is not None and number > maximum:
            errors.append(f"Invalid {field}: {number} (must be <= {maximum})")

        return number

    def _integer(
        self,
        payload: Dict[str, Any],
        field: str,
        errors: List[str],
        required: bool = False,
        default: int = 0
    ) -> int:
        number = self._number(payload, field, errors, required=required, minimum=0)
        if number is None:
            return default
        if not float(number).is_integer():
            errors.append(f"Invalid {field}: {number} (must be a whole number)")
            return default
        return int(number)

    @staticmethod
    def _flag(value: Any) -> Optional[bool]:
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        if isinstance(value, (int, float)):
            return value != 0
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        return None

    def parse_polygon(self, raw: Any, field: str, errors: List[str]) -> Optional[Polygon]:
        """
        Parse a vertex list of {lat, lng} objects or [lat, lng] pairs.

        Malformed or non-finite vertices are validation errors. A well-formed
        polygon with fewer than 3 distinct vertices is returned as is and
        treated downstream as "no geometry".
        """
        if raw is None:
            return None
        if not isinstance(raw, (list, tuple)):
            errors.append(f"Invalid {field}: must be a list of vertices")
            return None

        vertices: List[Tuple[float, float]] = []
        for index, point in enumerate(raw):
            if isinstance(point, dict):
                lat, lng = point.get("lat"), point.get("lng", point.get("lon"))
            elif isinstance(point, (list, tuple)) and len(point) == 2:
                lat, lng = point
            else:
                errors.append(f"Invalid {field}[{index}]: expected {{lat, lng}} or [lat, lng]")
                continue

            lat_f, lng_f = self._to_float(lat), self._to_float(lng)
            if lat_f is None or lng_f is None:
                errors.append(f"Invalid {field}[{index}]: lat/lng must be finite numbers")
                continue
            if not (-90 <= lat_f <= 90) or not (-180 <= lng_f <= 180):
                errors.append(f"Invalid {field}[{index}]: coordinates out of range")
                continue
            vertices.append((lat_f, lng_f))

        polygon = Polygon(tuple(vertices))
        if vertices and polygon.is_degenerate:
            self.logger.warning(
                f"{field} has fewer than 3 distinct vertices, ignoring its geometry"
            )
        return polygon

    def _ground_surfaces(self, raw: Any, errors: List[str]) -> Tuple[str, ...]:
        if raw is None:
            return ()
        if not isinstance(raw, (list, tuple)) or not all(isinstance(s, str) for s in raw):
            errors.append("Invalid groundSurfaces: must be a list of surface keys")
            return ()

        surfaces = tuple(s.strip().lower() for s in raw)
        unknown = [s for s in surfaces if s not in self.catalog.ground_impermeability]
        if unknown:
            errors.append(
                f"Unknown groundSurfaces: {', '.join(unknown)} "
                f"(known: {', '.join(self.catalog.ground_impermeability)})"
            )
        return surfaces

    def parse(self, payload: Any) -> SiteInput:
        """
        Validate a calculation request.

        Args:
            payload: Decoded JSON request body

        Returns:
            SiteInput

        Raises:
            ValidationError: With every problem found
        """
        if not isinstance(payload, dict):
            raise ValidationError(["Request body must be a JSON object"])

        errors: List[str] = []

        lat = self._number(payload, "lat", errors, required=True, minimum=-90, maximum=90)
        lng = self._number(payload, "lng", errors, required=True, minimum=-180, maximum=180)
        roof_area = self._number(
            payload, "roofArea", errors, required=True, minimum=0, exclusive_minimum=True
        )

        roof_type = payload.get("roofType")
        if not isinstance(roof_type, str) or not roof_type.strip():
            errors.append("Missing required field: roofType")
            roof_type = ""

        dwellers = self._integer(payload, "dwellers", errors, required=True)
        floors = self._integer(payload, "floors", errors)

        soil_type = payload.get("soilType") or self.catalog.default_soil_type
        if not isinstance(soil_type, str):
            errors.append("Invalid soilType: must be a string")
            soil_type = self.catalog.default_soil_type

        avg_floor_height = self._number(
            payload, "avgFloorHeight", errors,
            default=self.defaults["avgFloorHeight"], minimum=0, exclusive_minimum=True
        )
        velocity = self._number(payload, "velocity_m_s", errors, minimum=0, exclusive_minimum=True)
        wet_months = self._number(
            payload, "wetMonths", errors, default=self.defaults["wetMonths"], minimum=0
        )
        safety_factor = self._number(
            payload, "safetyFactorFilter", errors,
            default=self.defaults["safetyFactorFilter"], minimum=0, exclusive_minimum=True
        )
        pit_cost = self._number(
            payload, "pit_cost_per_m3", errors, default=self.defaults["pit_cost_per_m3"], minimum=0
        )

        include_ground = self._flag(payload.get("includeGround"))
        if include_ground is None:
            errors.append(f"Invalid includeGround: {payload.get('includeGround')!r}")
            include_ground = False

        ground_area = 0.0
        ground_surfaces: Tuple[str, ...] = ()
        ground_coeff = None
        if include_ground:
            ground_area = self._number(
                payload, "groundArea", errors, required=True, default=0.0,
                minimum=0, exclusive_minimum=True
            )
            ground_surfaces = self._ground_surfaces(payload.get("groundSurfaces"), errors)
            ground_coeff = self._number(
                payload, "groundRunoffCoeffClient", errors, minimum=0, maximum=1
            )
            # An empty list means "none selected"; an absent field needs the client coefficient
            if payload.get("groundSurfaces") is None and payload.get("groundRunoffCoeffClient") is None:
                errors.append("Missing required field: groundSurfaces")

        roof_polygon = self.parse_polygon(payload.get("roofPolygon"), "roofPolygon", errors)
        ground_polygon = self.parse_polygon(payload.get("groundPolygon"), "groundPolygon", errors)

        if errors:
            self.logger.warning(f"Rejected calculation request: {errors}")
            raise ValidationError(errors)

        return SiteInput(
            lat=lat,
            lng=lng,
            roof_area=roof_area,
            roof_type=roof_type.strip(),
            dwellers=dwellers,
            soil_type=soil_type.strip().lower(),
            floors=floors,
            avg_floor_height=avg_floor_height,
            velocity_override=velocity,
            wet_months=wet_months,
            filter_safety_factor=safety_factor,
            pit_cost_per_m3=pit_cost,
            include_ground=include_ground,
            ground_area=ground_area,
            ground_surfaces=ground_surfaces,
            ground_runoff_coeff=ground_coeff,
            roof_polygon=roof_polygon,
            ground_polygon=ground_polygon if include_ground else None,
        )
