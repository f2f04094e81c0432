"""
Pytest configuration and shared fixtures for all tests.
"""

import math
import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.rainwater_harvesting.core import constants  # noqa: E402
from src.rainwater_harvesting.models import Polygon  # noqa: E402

# Degrees spanning one meter along the equator for the haversine radius
DEG_PER_METER = 180.0 / (math.pi * constants.EARTH_RADIUS_HAVERSINE_M)


def rectangle(width_m: float, height_m: float, lat: float = 0.0, lng: float = 0.0) -> Polygon:
    """Axis-aligned rectangle anchored at (lat, lng), sized in meters at the equator."""
    dlat = height_m * DEG_PER_METER
    dlng = width_m * DEG_PER_METER
    return Polygon((
        (lat, lng),
        (lat, lng + dlng),
        (lat + dlat, lng + dlng),
        (lat + dlat, lng),
    ))


@pytest.fixture
def base_payload():
    """Minimal valid calculation request."""
    return {
        "lat": 18.5204,
        "lng": 73.8567,
        "roofArea": 100,
        "roofType": "concrete",
        "dwellers": 4,
    }


@pytest.fixture
def square_roof():
    """10 m x 10 m roof outline on the equator."""
    return rectangle(10, 10)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring API access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
