"""
Request processing for rainwater harvesting design.

Provides validation and normalization of calculation requests.
"""

from .validator import SiteInputValidator

__all__ = [
    "SiteInputValidator",
]
