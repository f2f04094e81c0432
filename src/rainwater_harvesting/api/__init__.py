"""
API layer for external data sources.

Provides the base HTTP client and rainfall providers.
"""

from .client import APIClient
from .rainfall import RainfallProvider, StaticRainfallProvider, OpenMeteoRainfallAPI

__all__ = [
    "APIClient",
    "RainfallProvider",
    "StaticRainfallProvider",
    "OpenMeteoRainfallAPI",
]
