"""
Data models for rainwater harvesting design system.

Contains DTOs for site input, geometry, catalogs, settings and design results.
"""

from .geometry import Polygon, LatLng
from .catalog import Catalog, PipeCatalogEntry, FilterProduct, AquiferBand
from .settings import EngineSettings, FilterStrategy
from .site import SiteInput
from .design import (
    RunoffEstimate,
    PipeOption,
    HydraulicDesign,
    FilterOption,
    FilterSelection,
    PitDesign,
    ChannelDesign,
    CostBreakdown,
    FeasibilityAssessment,
    DesignResult,
)

__all__ = [
    "Polygon",
    "LatLng",
    "Catalog",
    "PipeCatalogEntry",
    "FilterProduct",
    "AquiferBand",
    "EngineSettings",
    "FilterStrategy",
    "SiteInput",
    "RunoffEstimate",
    "PipeOption",
    "HydraulicDesign",
    "FilterOption",
    "FilterSelection",
    "PitDesign",
    "ChannelDesign",
    "CostBreakdown",
    "FeasibilityAssessment",
    "DesignResult",
]
