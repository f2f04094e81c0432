"""
Calculation algorithms for rainwater harvesting design.

Provides the geometry, runoff, hydraulic, filtration, pit, channel and
feasibility stages and the calculator facade chaining them.
"""

from .geometry import GeometryAnalyzer
from .runoff import RunoffEstimator
from .hydraulics import HydraulicDesigner
from .filtration import FilterSelector
from .infiltration import PitSizer
from .channel import ChannelDesigner
from .feasibility import AquiferClassifier, FeasibilityAssessor
from .calculator import DesignCalculator

__all__ = [
    "GeometryAnalyzer",
    "RunoffEstimator",
    "HydraulicDesigner",
    "FilterSelector",
    "PitSizer",
    "ChannelDesigner",
    "AquiferClassifier",
    "FeasibilityAssessor",
    "DesignCalculator",
]
