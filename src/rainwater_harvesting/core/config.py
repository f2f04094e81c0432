"""
Configuration module for rainwater harvesting design system.

Loads configuration from JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional, TYPE_CHECKING
from pathlib import Path

from . import constants

if TYPE_CHECKING:
    from ..models import Catalog, EngineSettings


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        if os.getenv("RAINFALL_API_URL"):
            self.config.setdefault("rainfall", {})["base_url"] = os.getenv("RAINFALL_API_URL")

        if os.getenv("RAINFALL_TIMEOUT"):
            self.config.setdefault("rainfall", {})["timeout"] = float(os.getenv("RAINFALL_TIMEOUT"))

        if os.getenv("FILTER_STRATEGY"):
            self.config.setdefault("selection", {})["filter_strategy"] = os.getenv("FILTER_STRATEGY")

        if os.getenv("LOG_LEVEL"):
            self.config.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

        if os.getenv("PORT"):
            self.config.setdefault("server", {})["port"] = int(os.getenv("PORT"))

        if os.getenv("ENVIRONMENT"):
            self.config["environment"] = os.getenv("ENVIRONMENT")

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present."""
        required_config = {
            "rainfall": ["base_url", "timeout"],
        }

        missing_sections = [section for section in required_config if section not in self.config]
        if missing_sections:
            raise ValueError(
                f"Missing required configuration sections: {', '.join(missing_sections)}"
            )

        missing_keys = []
        for section, keys in required_config.items():
            for key in keys:
                if key not in self.config[section]:
                    missing_keys.append(f"{section}.{key}")

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

        if self.rainfall_timeout <= 0:
            raise ValueError("rainfall.timeout must be positive")

        catalog = self.config.get("catalog", {})
        if not isinstance(catalog, dict):
            raise ValueError("catalog must be a dictionary")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'rainfall.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def environment(self) -> str:
        return self.get("environment", "development")

    @property
    def rainfall_base_url(self) -> str:
        """Get rainfall archive base URL."""
        return self.get("rainfall.base_url", constants.RAINFALL_BASE_URL)

    @property
    def rainfall_timeout(self) -> float:
        """Get rainfall request timeout in seconds."""
        return self.get("rainfall.timeout", constants.RAINFALL_TIMEOUT)

    @property
    def rainfall_start_date(self) -> str:
        return self.get("rainfall.start_date", constants.RAINFALL_START_DATE)

    @property
    def rainfall_end_date(self) -> str:
        return self.get("rainfall.end_date", constants.RAINFALL_END_DATE)

    @property
    def rainfall_verify_ssl(self) -> bool:
        return self.get("rainfall.verify_ssl", True)

    @property
    def default_floor_height(self) -> float:
        return self.get("defaults.avg_floor_height", constants.DEFAULT_FLOOR_HEIGHT)

    @property
    def default_wet_months(self) -> float:
        return self.get("defaults.wet_months", constants.DEFAULT_WET_MONTHS)

    @property
    def default_filter_safety_factor(self) -> float:
        return self.get("defaults.filter_safety_factor", constants.DEFAULT_FILTER_SAFETY_FACTOR)

    @property
    def default_pit_cost_per_m3(self) -> float:
        return self.get("defaults.pit_cost_per_m3", constants.DEFAULT_PIT_COST_PER_M3)

    @property
    def server_host(self) -> str:
        return self.get("server.host", "0.0.0.0")

    @property
    def server_port(self) -> int:
        return self.get("server.port", 10000)

    @property
    def log_level(self) -> str:
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        return self.get("logging.file")

    def engine_settings(self) -> "EngineSettings":
        """
        Build engine settings from the hydraulics, costs, demand and selection sections.

        Returns:
            EngineSettings instance

        Raises:
            ValueError: If a value is out of range or the filter strategy is unknown
        """
        from ..models import EngineSettings, FilterStrategy

        return EngineSettings(
            manning_n=self.get("hydraulics.manning_n", constants.MANNING_ROUGHNESS),
            manning_slope=self.get("hydraulics.slope", constants.MANNING_SLOPE),
            default_velocity=self.get("hydraulics.default_velocity", constants.DEFAULT_VELOCITY),
            min_velocity=self.get("hydraulics.min_velocity", constants.MIN_VELOCITY),
            max_velocity=self.get("hydraulics.max_velocity", constants.MAX_VELOCITY),
            channel_cost_per_m=self.get("costs.channel_cost_per_m", constants.CHANNEL_COST_PER_M),
            channel_end_block_cost=self.get("costs.channel_end_block_cost", constants.CHANNEL_END_BLOCK_COST),
            steel_grill_cost_per_m=self.get("costs.steel_grill_cost_per_m", constants.STEEL_GRILL_COST_PER_M),
            liters_per_person_per_day=self.get(
                "demand.liters_per_person_per_day", constants.LITERS_PER_PERSON_PER_DAY
            ),
            min_coverage_ratio=self.get("demand.min_coverage_ratio", constants.MIN_COVERAGE_RATIO),
            min_annual_runoff_liters=self.get(
                "demand.min_annual_runoff_liters", constants.MIN_ANNUAL_RUNOFF_LITERS
            ),
            filter_strategy=FilterStrategy(
                self.get("selection.filter_strategy", FilterStrategy.LOWEST_COST.value)
            ),
        )

    def catalog(self) -> "Catalog":
        """Build the catalog, applying overrides from the catalog section."""
        from ..models import Catalog

        return Catalog.from_dict(self.get("catalog", {}))

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, env={self.get('environment')})"
