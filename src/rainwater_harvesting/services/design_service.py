"""
Design service.

Orchestrates validation, the rainfall lookup and the design calculation for
one request. This is the only component that performs I/O.
"""

import logging
from typing import Any, Dict, Optional, TYPE_CHECKING

from ..core import LoggerContext
from ..algorithms import DesignCalculator
from ..processing import SiteInputValidator
from ..models import DesignResult

if TYPE_CHECKING:
    from ..api import RainfallProvider
    from ..core.config import Config


class DesignService:
    """Runs a calculation request end to end."""

    def __init__(
        self,
        rainfall_provider: "RainfallProvider",
        calculator: Optional[DesignCalculator] = None,
        validator: Optional[SiteInputValidator] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize design service.

        Args:
            rainfall_provider: Source of the average annual rainfall
            calculator: Design calculator (defaults to the built-in catalog)
            validator: Request validator sharing the calculator's catalog
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.rainfall_provider = rainfall_provider
        self.calculator = calculator or DesignCalculator(logger=self.logger)
        self.validator = validator or SiteInputValidator(
            catalog=self.calculator.catalog, logger=self.logger
        )

    @classmethod
    def from_config(
        cls,
        config: "Config",
        rainfall_provider: Optional["RainfallProvider"] = None,
        logger: Optional[logging.Logger] = None
    ) -> "DesignService":
        """
        Build a service from configuration.

        Args:
            config: Loaded configuration
            rainfall_provider: Provider to use instead of the Open-Meteo archive
            logger: Logger instance

        Returns:
            DesignService
        """
        from ..api import OpenMeteoRainfallAPI

        logger = logger or logging.getLogger(__name__)
        catalog = config.catalog()
        calculator = DesignCalculator(
            catalog=catalog,
            settings=config.engine_settings(),
            logger=logger
        )
        validator = SiteInputValidator(
            catalog=catalog,
            avg_floor_height=config.default_floor_height,
            wet_months=config.default_wet_months,
            filter_safety_factor=config.default_filter_safety_factor,
            pit_cost_per_m3=config.default_pit_cost_per_m3,
            logger=logger
        )
        if rainfall_provider is None:
            rainfall_provider = OpenMeteoRainfallAPI(
                base_url=config.rainfall_base_url,
                timeout=config.rainfall_timeout,
                start_date=config.rainfall_start_date,
                end_date=config.rainfall_end_date,
                verify_ssl=config.rainfall_verify_ssl,
                logger=logger
            )
        return cls(
            rainfall_provider=rainfall_provider,
            calculator=calculator,
            validator=validator,
            logger=logger
        )

    def run(self, payload: Dict[str, Any]) -> DesignResult:
        """
        Validate, fetch rainfall and calculate.

        Args:
            payload: Decoded JSON request body

        Returns:
            DesignResult

        Raises:
            ValidationError: Before any I/O when the request is invalid
            RainfallUnavailableError: When no rainfall figure exists for the site
        """
        site = self.validator.parse(payload)

        rainfall_mm = self.rainfall_provider.get_average_annual_rainfall(site.lat, site.lng)

        with LoggerContext(
            self.logger, "design calculation",
            lat=f"{site.lat:.4f}", lng=f"{site.lng:.4f}", rainfall_mm=rainfall_mm
        ):
            return self.calculator.calculate(site, rainfall_mm)
