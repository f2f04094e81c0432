"""
Business logic services for rainwater harvesting design.

Services orchestrate validation, external lookups and calculations.
"""

from .design_service import DesignService

__all__ = [
    "DesignService",
]
