"""
Rainfall data providers.

Supplies the average annual rainfall (mm/yr) for a location. The Open-Meteo
archive provider aggregates daily precipitation over a fixed multi-year window.
"""

import logging
import math
from abc import ABC, abstractmethod
from collections import OrderedDict
from datetime import date
from typing import Any, Dict, List, Optional

import requests  # type: ignore

from ..core import constants, round_half_up, RainfallUnavailableError
from .client import APIClient


class RainfallProvider(ABC):
    """Interface for rainfall lookups."""

    @abstractmethod
    def get_average_annual_rainfall(self, lat: float, lng: float) -> float:
        """
        Average annual rainfall for a location.

        Raises:
            RainfallUnavailableError: If no usable figure exists for the location
        """


class StaticRainfallProvider(RainfallProvider):
    """Returns a fixed rainfall figure for every location."""

    def __init__(self, rainfall_mm: float):
        self.rainfall_mm = rainfall_mm

    def get_average_annual_rainfall(self, lat: float, lng: float) -> float:
        if self.rainfall_mm is None or not math.isfinite(self.rainfall_mm) or self.rainfall_mm <= 0:
            raise RainfallUnavailableError("Rainfall data not available for location")
        return self.rainfall_mm


class OpenMeteoRainfallAPI(APIClient, RainfallProvider):
    """
    Open-Meteo historical archive client.

    Requests daily precipitation sums for the configured window and returns the
    mean of the yearly totals. Requests are bounded by the timeout and never retried.
    """

    def __init__(
        self,
        base_url: str = constants.RAINFALL_BASE_URL,
        timeout: float = constants.RAINFALL_TIMEOUT,
        start_date: str = constants.RAINFALL_START_DATE,
        end_date: str = constants.RAINFALL_END_DATE,
        verify_ssl: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize rainfall client.

        Args:
            base_url: Archive API base URL
            timeout: Request timeout in seconds
            start_date: First day of the window (YYYY-MM-DD)
            end_date: Last day of the window (YYYY-MM-DD)
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        super().__init__(
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            verify_ssl=verify_ssl,
            logger=logger
        )
        self.start_date = start_date
        self.end_date = end_date

        first, last = date.fromisoformat(start_date), date.fromisoformat(end_date)
        if last < first:
            raise ValueError(f"Rainfall window ends before it starts: {start_date}..{end_date}")
        self.window_years = last.year - first.year + 1

    def fetch_daily_precipitation(self, lat: float, lng: float) -> Dict[str, Any]:
        """
        Raw daily precipitation series.

        Returns:
            The "daily" object of the response (time and precipitation_sum arrays)
        """
        params = {
            "latitude": lat,
            "longitude": lng,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "daily": "precipitation_sum",
            "timezone": "UTC",
        }
        data = self.get("/archive", params=params)
        if not isinstance(data, dict):
            return {}
        daily = data.get("daily")
        return daily if isinstance(daily, dict) else {}

    def yearly_totals(self, daily: Dict[str, Any]) -> List[float]:
        """
        Precipitation totals per calendar year.

        Missing daily values count as 0. When the time axis is absent or does
        not line up with the values, the overall total is spread evenly over the
        years of the window.
        """
        values = daily.get("precipitation_sum")
        if not isinstance(values, list) or not values:
            return []

        amounts = [self._amount(v) for v in values]
        times = daily.get("time")

        if isinstance(times, list) and len(times) == len(amounts):
            totals: "OrderedDict[str, float]" = OrderedDict()
            for day, amount in zip(times, amounts):
                year = str(day)[:4]
                totals[year] = totals.get(year, 0.0) + amount
            return list(totals.values())

        self.logger.warning("Rainfall series has no usable time axis, using window length")
        total = sum(amounts)
        return [total / self.window_years] * self.window_years

    @staticmethod
    def _amount(value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 0.0
        return float(value) if math.isfinite(value) else 0.0

    def get_average_annual_rainfall(self, lat: float, lng: float) -> float:
        """
        Mean of yearly precipitation totals, rounded to whole millimeters.

        Args:
            lat: Latitude (degrees)
            lng: Longitude (degrees)

        Returns:
            Average annual rainfall (mm/yr)

        Raises:
            RainfallUnavailableError: On timeout, HTTP error, malformed payload,
                empty series or a non-positive mean
        """
        self.logger.info(f"Fetching rainfall for ({lat:.4f}, {lng:.4f})")

        try:
            daily = self.fetch_daily_precipitation(lat, lng)
        except (requests.exceptions.RequestException, ValueError) as e:
            self.logger.warning(f"Rainfall lookup failed for ({lat}, {lng}): {e}")
            raise RainfallUnavailableError("Rainfall data not available for location") from e

        totals = self.yearly_totals(daily)
        if not totals:
            self.logger.warning(f"Empty rainfall series for ({lat}, {lng})")
            raise RainfallUnavailableError("Rainfall data not available for location")

        average = round_half_up(sum(totals) / len(totals))
        if average <= 0:
            self.logger.warning(f"Non-positive rainfall average for ({lat}, {lng})")
            raise RainfallUnavailableError("Rainfall data not available for location")

        self.logger.info(f"Average annual rainfall: {average} mm over {len(totals)} years")
        return float(average)
