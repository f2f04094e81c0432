"""
Catalog data models.

Contains the immutable product and lookup tables consumed by the design engine.
"""

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from ..core import constants


@dataclass(frozen=True)
class PipeCatalogEntry:
    """Standard pipe sold in fixed lengths."""

    id: str
    name: str
    length_m: float  # standard length (m)
    unit_cost_per_meter: float
    source: Optional[str] = None


@dataclass(frozen=True)
class FilterProduct:
    """Filter unit with a rated catchment capacity."""

    id: str
    name: str
    capacity_m2: float  # roof area one unit can serve (m²)
    unit_cost: float


@dataclass(frozen=True)
class AquiferBand:
    """Recharge structure recommended for a [min, max) liters/year range."""

    label: str
    min_l_per_year: float
    max_l_per_year: float = math.inf

    def contains(self, liters_per_year: float) -> bool:
        return self.min_l_per_year <= liters_per_year < self.max_l_per_year


def _freeze(mapping: Mapping[str, float]) -> Mapping[str, float]:
    return MappingProxyType({str(k).lower(): float(v) for k, v in mapping.items()})


@dataclass(frozen=True)
class Catalog:
    """
    Static lookup tables for the design engine.

    Built once at startup and shared read-only between requests.
    """

    pipes: Tuple[PipeCatalogEntry, ...]
    filters: Tuple[FilterProduct, ...]
    aquifer_bands: Tuple[AquiferBand, ...]
    roof_coefficients: Mapping[str, float] = field(
        default_factory=lambda: _freeze(constants.ROOF_RUNOFF_COEFFICIENTS)
    )
    default_roof_coefficient: float = constants.DEFAULT_ROOF_COEFFICIENT
    ground_impermeability: Mapping[str, float] = field(
        default_factory=lambda: _freeze(constants.GROUND_IMPERMEABILITY)
    )
    default_ground_coefficient: float = constants.DEFAULT_GROUND_COEFFICIENT
    soil_infiltration: Mapping[str, float] = field(
        default_factory=lambda: _freeze(constants.SOIL_INFILTRATION)
    )
    default_soil_type: str = constants.DEFAULT_SOIL_TYPE

    def __post_init__(self):
        if not self.pipes:
            raise ValueError("Catalog must contain at least one pipe standard")
        if not self.filters:
            raise ValueError("Catalog must contain at least one filter product")
        for pipe in self.pipes:
            if pipe.length_m <= 0:
                raise ValueError(f"Pipe {pipe.id} must have a positive standard length")
        for product in self.filters:
            if product.capacity_m2 <= 0:
                raise ValueError(f"Filter {product.id} must have a positive capacity")
        if self.default_soil_type not in self.soil_infiltration:
            raise ValueError(f"Default soil type '{self.default_soil_type}' has no infiltration fraction")
        self._validate_bands()

    def _validate_bands(self) -> None:
        """Bands must partition [0, inf) without gaps or overlaps."""
        bands = sorted(self.aquifer_bands, key=lambda b: b.min_l_per_year)
        if not bands:
            raise ValueError("Catalog must contain at least one aquifer band")
        if bands[0].min_l_per_year != 0:
            raise ValueError("Aquifer bands must start at 0 liters/year")
        for previous, current in zip(bands, bands[1:]):
            if previous.max_l_per_year != current.min_l_per_year:
                raise ValueError(
                    f"Aquifer bands '{previous.label}' and '{current.label}' "
                    "leave a gap or overlap"
                )
        if not math.isinf(bands[-1].max_l_per_year):
            raise ValueError("Last aquifer band must be unbounded")
        for band in bands:
            if band.max_l_per_year <= band.min_l_per_year:
                raise ValueError(f"Aquifer band '{band.label}' is empty")
        object.__setattr__(self, "aquifer_bands", tuple(bands))

    @classmethod
    def default(cls) -> "Catalog":
        """Catalog built from the constants module."""
        return cls.from_dict({})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Catalog":
        """
        Build a catalog, overriding built-in tables with the given sections.

        Args:
            data: Mapping with any of the keys pipes, filters, aquifer_bands,
                  roof_coefficients, default_roof_coefficient,
                  ground_impermeability, default_ground_coefficient,
                  soil_infiltration, default_soil_type

        Returns:
            Catalog instance
        """
        pipes = tuple(
            PipeCatalogEntry(
                id=p["id"],
                name=p.get("name", p["id"]),
                length_m=float(p["length_m"]),
                unit_cost_per_meter=float(p["unit_cost_per_meter"]),
                source=p.get("source"),
            )
            for p in data.get("pipes", constants.PIPE_STANDARDS)
        )
        filters = tuple(
            FilterProduct(
                id=f["id"],
                name=f.get("name", f["id"]),
                capacity_m2=float(f["capacity_m2"]),
                unit_cost=float(f["unit_cost"]),
            )
            for f in data.get("filters", constants.FILTER_PRODUCTS)
        )
        bands = tuple(
            AquiferBand(
                label=b["label"],
                min_l_per_year=float(b["min_l_per_year"]),
                max_l_per_year=math.inf if b.get("max_l_per_year") is None else float(b["max_l_per_year"]),
            )
            for b in data.get("aquifer_bands", constants.AQUIFER_BANDS)
        )

        return cls(
            pipes=pipes,
            filters=filters,
            aquifer_bands=bands,
            roof_coefficients=_freeze(data.get("roof_coefficients", constants.ROOF_RUNOFF_COEFFICIENTS)),
            default_roof_coefficient=float(
                data.get("default_roof_coefficient", constants.DEFAULT_ROOF_COEFFICIENT)
            ),
            ground_impermeability=_freeze(data.get("ground_impermeability", constants.GROUND_IMPERMEABILITY)),
            default_ground_coefficient=float(
                data.get("default_ground_coefficient", constants.DEFAULT_GROUND_COEFFICIENT)
            ),
            soil_infiltration=_freeze(data.get("soil_infiltration", constants.SOIL_INFILTRATION)),
            default_soil_type=str(data.get("default_soil_type", constants.DEFAULT_SOIL_TYPE)).lower(),
        )
