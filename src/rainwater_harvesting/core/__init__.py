"""
Core utilities for rainwater harvesting design system.

Provides configuration management, logging and the error taxonomy.
"""

from . import constants
from .config import Config
from .logger import setup_logger, LoggerContext
from .exceptions import HarvestingError, ValidationError, RainfallUnavailableError
from .rounding import round_half_up

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "HarvestingError",
    "ValidationError",
    "RainfallUnavailableError",
    "round_half_up",
]
