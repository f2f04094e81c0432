"""
Rainwater Harvesting Feasibility & Design

This package turns site geometry, a rainfall figure and site parameters into a
costed rainwater harvesting design and a feasibility verdict.
"""

__version__ = "0.1.0"
__description__ = "Rainwater harvesting feasibility and design calculator"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "RainwaterHarvestingApp":
        from .main import RainwaterHarvestingApp
        return RainwaterHarvestingApp
    if name == "DesignCalculator":
        from .algorithms import DesignCalculator
        return DesignCalculator
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "RainwaterHarvestingApp",
    "DesignCalculator",
]
