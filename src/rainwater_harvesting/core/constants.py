"""
Application-wide constants for rainwater harvesting design.

This module defines default values and the built-in catalog tables. Deployments
can override the tables through the ``catalog`` section of the configuration file.
"""

# Geodesy
METERS_PER_DEGREE_LAT = 111320.0  # m per degree of latitude (approx)
EARTH_RADIUS_HAVERSINE_M = 6371000.0  # mean radius used for point distances
EARTH_RADIUS_GEODESIC_M = 6378137.0  # WGS84 equatorial radius used for ring area

# Hydraulics (Manning)
MANNING_ROUGHNESS = 0.013  # PVC ~0.012-0.015
MANNING_SLOPE = 0.01  # 1%
DEFAULT_VELOCITY = 2.5  # m/s
MIN_VELOCITY = 0.1  # m/s
MAX_VELOCITY = 10.0  # m/s

# Site defaults
DEFAULT_FLOOR_HEIGHT = 3.0  # m
DEFAULT_WET_MONTHS = 4
DEFAULT_FILTER_SAFETY_FACTOR = 0.8
DEFAULT_PIT_COST_PER_M3 = 800  # INR/m3
DEFAULT_SOIL_TYPE = "loamy"

# Channel construction (INR)
CHANNEL_COST_PER_M = 2500  # excavation + concrete lining, 0.5 m deep x 0.3 m wide
CHANNEL_END_BLOCK_COST = 1500  # concrete block + steel gauge at the outlet
STEEL_GRILL_COST_PER_M = 400

# Domestic demand and feasibility thresholds
LITERS_PER_PERSON_PER_DAY = 85
DAYS_PER_YEAR = 365
MIN_COVERAGE_RATIO = 0.25
MIN_ANNUAL_RUNOFF_LITERS = 15000

# Runoff coefficients
ROOF_RUNOFF_COEFFICIENTS = {
    "concrete": 0.6,
    "metal": 0.9,
}
DEFAULT_ROOF_COEFFICIENT = 0.75

# Impermeability midpoints for ground surfaces
GROUND_IMPERMEABILITY = {
    "water_tight": 0.825,
    "asphalt": 0.875,
    "stone_brick": 0.8,
    "open_joints": 0.6,
    "inferior_blocks": 0.45,
    "macadam": 0.425,
    "gravel": 0.225,
    "unpaved": 0.2,
    "parks": 0.15,
    "dense_built": 0.8,
}
DEFAULT_GROUND_COEFFICIENT = 0.3

# Fraction of runoff that soaks into the soil
SOIL_INFILTRATION = {
    "sandy": 0.8,
    "loamy": 0.475,
    "clayey": 0.175,
}

PIPE_STANDARDS = [
    {"id": "PVC_3m", "name": "PVC pipe (3 m)", "length_m": 3, "unit_cost_per_meter": 80, "source": "vendor"},
    {"id": "PVC_6m", "name": "PVC pipe (6 m)", "length_m": 6, "unit_cost_per_meter": 85, "source": "vendor"},
    {"id": "HDPE_6m", "name": "HDPE pipe (6 m)", "length_m": 6, "unit_cost_per_meter": 65, "source": "vendor"},
    {"id": "HDPE_12m", "name": "HDPE pipe (12 m)", "length_m": 12, "unit_cost_per_meter": 65, "source": "vendor"},
]

FILTER_PRODUCTS = [
    {"id": "NEERAIN_BASIC", "name": "NeeRain Basic", "capacity_m2": 150, "unit_cost": 6500},
    {"id": "RAINY_FL80", "name": "Rainy FL-80", "capacity_m2": 75, "unit_cost": 8500},
    {"id": "RAINY_FL250", "name": "Rainy FL-250", "capacity_m2": 250, "unit_cost": 13750},
]

# [min, max) liters/year; max None means unbounded
AQUIFER_BANDS = [
    {"label": "Dug Well / Small Pit", "min_l_per_year": 0, "max_l_per_year": 50_000},
    {"label": "Percolation Pit / Tank", "min_l_per_year": 50_000, "max_l_per_year": 200_000},
    {"label": "Recharge Shaft / Large Pit", "min_l_per_year": 200_000, "max_l_per_year": 500_000},
    {"label": "Injection Well / Large-scale recharge", "min_l_per_year": 500_000, "max_l_per_year": None},
]

# Rainfall archive
RAINFALL_BASE_URL = "https://archive-api.open-meteo.com/v1"
RAINFALL_TIMEOUT = 20  # seconds
RAINFALL_START_DATE = "2000-01-01"
RAINFALL_END_DATE = "2020-12-31"
