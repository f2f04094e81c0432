"""
Exception types raised by the rainwater harvesting engine.
"""

from typing import List, Optional


class HarvestingError(Exception):
    """Base class for all engine errors."""


class ValidationError(HarvestingError, ValueError):
    """Request fields are missing, non-finite or out of range."""

    def __init__(self, errors: List[str], message: Optional[str] = None):
        self.errors = list(errors)
        super().__init__(message or "Missing or invalid fields: " + "; ".join(self.errors))


class RainfallUnavailableError(HarvestingError):
    """Rainfall figure could not be obtained for a location."""
